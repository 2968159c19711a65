"""
Services Layer - Business Logic
Implements: Single Responsibility Principle (SRP)
"""
from .catalog_service import CatalogService

__all__ = [
    'CatalogService',
]
