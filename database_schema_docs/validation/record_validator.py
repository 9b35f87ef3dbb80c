"""Validation of structured table records before they are written."""

from __future__ import annotations

from typing import Any

from jsonschema import Draft7Validator

from database_schema_docs.core.schemas import ValidationResult

TABLE_RECORD_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Table Record",
    "type": "object",
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "description": {"type": "string"},
        "columns": {
            "type": "object",
            "additionalProperties": {
                "type": "object",
                "properties": {
                    "type": {"type": "string"},
                    "nullable": {"type": "boolean"},
                    "maxLength": {"type": ["integer", "null"], "minimum": 0},
                    "default": {"type": ["string", "null"]},
                    "pk": {"type": "boolean"},
                    "relation": {"type": ["string", "null"]},
                },
                "required": ["type", "nullable", "maxLength", "default", "pk", "relation"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["name", "description", "columns"],
    "additionalProperties": False,
}


class RecordValidator:
    """Validates table records against the Draft 7 record schema.

    Besides schema errors, reports a warning for columns whose relation
    names their own table, which the best-effort relation lookup produces
    for primary and unique key columns.
    """

    def __init__(self, schema: dict[str, Any] = TABLE_RECORD_SCHEMA) -> None:
        Draft7Validator.check_schema(schema)
        self._validator = Draft7Validator(schema)

    def validate_record(self, record: dict[str, Any]) -> ValidationResult:
        """Validate a table record.

        Args:
            record: Record built by the JSON renderer

        Returns:
            ValidationResult with validation status and any errors/warnings
        """
        result = ValidationResult(is_valid=True)

        errors = sorted(
            self._validator.iter_errors(record),
            key=lambda e: [str(part) for part in e.absolute_path],
        )
        for error in errors:
            location = "/".join(str(part) for part in error.absolute_path) or "<root>"
            result.add_error(f"{location}: {error.message}")

        if result.is_valid:
            self._check_self_relations(record, result)

        return result

    def _check_self_relations(
        self, record: dict[str, Any], result: ValidationResult
    ) -> None:
        for column_name, column in record["columns"].items():
            if column["relation"] == record["name"]:
                result.add_warning(
                    f"Column '{column_name}' of '{record['name']}' references its own table"
                )
