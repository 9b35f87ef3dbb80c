"""Markdown rendering of a table's column metadata."""

from __future__ import annotations

from database_schema_docs.core.constants import (
    MARKDOWN_EXTENSION,
    MARKDOWN_HEADER,
    MARKDOWN_SEPARATOR,
    NOT_PRIMARY_KEY_MARKER,
    PRIMARY_KEY_MARKER,
)
from database_schema_docs.core.schemas import ColumnDescriptor, TableDescriptor


class MarkdownRenderer:
    """Renders a table as a title, a description line and a column table.

    Rows follow the input order, duplicates included. Absent values render as
    empty cells and nullability as a ``true``/``false`` literal.
    """

    extension = MARKDOWN_EXTENSION

    def render(self, table: TableDescriptor, columns: list[ColumnDescriptor]) -> str:
        lines = [
            f"# Table: {table.name}",
            "",
            f"**Description**: {table.description}",
            "",
            MARKDOWN_HEADER,
            MARKDOWN_SEPARATOR,
        ]
        lines.extend(self._render_row(column) for column in columns)
        return "\n".join(lines) + "\n"

    def _render_row(self, column: ColumnDescriptor) -> str:
        cells = [
            column.column_name,
            column.data_type,
            _cell(column.max_length),
            "true" if column.nullable else "false",
            _cell(column.default_expression),
            PRIMARY_KEY_MARKER if column.is_primary_key else NOT_PRIMARY_KEY_MARKER,
            _cell(column.relation),
        ]
        return "| " + " | ".join(cells) + " |"


def _cell(value: object | None) -> str:
    return "" if value is None else str(value)
