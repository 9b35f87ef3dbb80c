"""Core data models and shared types."""

from database_schema_docs.core.config import config
from database_schema_docs.core.exceptions import (
    CatalogQueryError,
    ConfigurationError,
    DatabaseConnectionError,
    OutputWriteError,
    SchemaDocsError,
    ValidationError,
)
from database_schema_docs.core.schemas import (
    ColumnDescriptor,
    ConnectionSettings,
    ExportArtifact,
    TableDescriptor,
    ValidationResult,
)

__all__ = [
    "ColumnDescriptor",
    "ConnectionSettings",
    "ExportArtifact",
    "TableDescriptor",
    "ValidationResult",
    "SchemaDocsError",
    "CatalogQueryError",
    "ConfigurationError",
    "DatabaseConnectionError",
    "OutputWriteError",
    "ValidationError",
    "config",
]
