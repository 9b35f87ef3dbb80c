"""Validation of generated documents."""

from database_schema_docs.validation.record_validator import RecordValidator

__all__ = ["RecordValidator"]
