"""Catalog introspection components."""

from database_schema_docs.catalog.reader import CatalogReader

__all__ = ["CatalogReader"]
