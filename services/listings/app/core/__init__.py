"""Core utilities for the listings service."""

from .config import settings
from .database import Base, SessionLocal, engine, verify_database_connection
from .error_handlers import register_exception_handlers

__all__ = [
    "settings",
    "Base",
    "SessionLocal",
    "engine",
    "verify_database_connection",
    "register_exception_handlers",
]
