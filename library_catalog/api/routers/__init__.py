"""
API Routers Module

Available routers:
- books: Catalog endpoints under /libros
"""

__all__ = ["books"]
