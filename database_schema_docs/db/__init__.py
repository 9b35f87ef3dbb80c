"""Database session management."""

from database_schema_docs.db.connection import ConnectionManager

__all__ = ["ConnectionManager"]
