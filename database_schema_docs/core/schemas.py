"""Pydantic models for type-safe data validation and parsing."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, SecretStr, field_validator

from database_schema_docs.core.constants import DEFAULT_TABLE_DESCRIPTION


class ConnectionSettings(BaseModel):
    """Parameters for the single database session of an export run."""

    host: str = Field(..., min_length=1, description="Database server host")
    port: int = Field(..., gt=0, lt=65536, description="Database server port")
    user: str = Field(..., min_length=1, description="Database user")
    password: SecretStr = Field(..., description="Database password")
    database: str = Field(..., min_length=1, description="Database name")

    model_config = {"frozen": True}

    def connect_kwargs(self) -> dict[str, Any]:
        """Return keyword arguments for ``psycopg2.connect``."""
        return {
            "host": self.host,
            "port": self.port,
            "user": self.user,
            "password": self.password.get_secret_value(),
            "dbname": self.database,
        }


class TableDescriptor(BaseModel):
    """A table of the target schema with its human-authored description."""

    name: str = Field(..., min_length=1, description="Table name")
    description: str = Field(
        DEFAULT_TABLE_DESCRIPTION, description="Table comment from the catalog"
    )

    model_config = {"frozen": True}

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, v: Any) -> Any:
        """Substitute the placeholder when the catalog has no comment."""
        if v is None or v == "":
            return DEFAULT_TABLE_DESCRIPTION
        return v


class ColumnDescriptor(BaseModel):
    """Column metadata as read from the catalog, one row per column."""

    column_name: str = Field(..., description="Column name")
    data_type: str = Field(..., description="Catalog data type")
    nullable: bool = Field(..., description="Whether the column accepts NULL")
    max_length: int | None = Field(None, description="Character maximum length")
    default_expression: str | None = Field(None, description="Column default")
    is_primary_key: bool = Field(False, description="Primary key membership")
    relation: str | None = Field(None, description="Referenced table, best effort")

    model_config = {"frozen": True}


class ExportArtifact(BaseModel):
    """A rendered document and the path it is written to."""

    path: Path
    content: str

    model_config = {"frozen": True}


class ValidationResult(BaseModel):
    """Result of record validation with type safety.

    Provides validated results for record validation operations.
    """

    is_valid: bool = Field(..., description="Whether the record passed validation")
    errors: list[str] = Field(
        default_factory=list, description="Validation error messages"
    )
    warnings: list[str] = Field(
        default_factory=list, description="Validation warning messages"
    )

    def add_error(self, message: str) -> None:
        """Add an error message to the validation result."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message to the validation result."""
        self.warnings.append(message)
