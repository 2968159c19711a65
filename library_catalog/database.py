from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
import os

from .config import settings

SQLALCHEMY_DATABASE_URL = settings.database_url

# Ensure data directory exists for file-based SQLite
if SQLALCHEMY_DATABASE_URL.startswith("sqlite:///./"):
    os.makedirs(os.path.dirname(SQLALCHEMY_DATABASE_URL[len("sqlite:///"):]), exist_ok=True)

connect_args = {"check_same_thread": False} if SQLALCHEMY_DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args=connect_args
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()
