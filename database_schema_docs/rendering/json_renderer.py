"""JSON rendering of a table's column metadata."""

from __future__ import annotations

import json
from typing import Any

from database_schema_docs.core.constants import JSON_EXTENSION, JSON_INDENT
from database_schema_docs.core.schemas import ColumnDescriptor, TableDescriptor


class JSONRenderer:
    """Renders a table as a structured record.

    The ``columns`` mapping is keyed by column name in first-seen order; when
    a name repeats, the later column's values replace the earlier ones.
    """

    extension = JSON_EXTENSION

    def build_record(
        self, table: TableDescriptor, columns: list[ColumnDescriptor]
    ) -> dict[str, Any]:
        """Build the record for a table.

        Args:
            table: Table descriptor
            columns: Column descriptors in ordinal order

        Returns:
            Record with name, description and columns fields
        """
        record_columns: dict[str, dict[str, Any]] = {}
        for column in columns:
            record_columns[column.column_name] = {
                "type": column.data_type,
                "nullable": column.nullable,
                "maxLength": column.max_length,
                "default": column.default_expression,
                "pk": column.is_primary_key,
                "relation": column.relation,
            }
        return {
            "name": table.name,
            "description": table.description,
            "columns": record_columns,
        }

    def serialize(self, record: dict[str, Any]) -> str:
        return json.dumps(record, indent=JSON_INDENT, ensure_ascii=False)

    def render(self, table: TableDescriptor, columns: list[ColumnDescriptor]) -> str:
        return self.serialize(self.build_record(table, columns))
