"""Read table and column metadata from the database catalog."""

from __future__ import annotations

from typing import Any

import psycopg2
from psycopg2.extensions import connection as PGConnection
from psycopg2.extras import RealDictCursor

from database_schema_docs.catalog.queries import (
    describe_columns_query,
    list_tables_query,
)
from database_schema_docs.core.exceptions import CatalogQueryError
from database_schema_docs.core.schemas import ColumnDescriptor, TableDescriptor
from database_schema_docs.logger import logger


class CatalogReader:
    """Introspects one schema through the information_schema views.

    Both operations are read-only. Referenced tables are resolved either with
    the best-effort join, which matches key usage on constraint name alone and
    may attribute a relation to the wrong constraint or miss it, or with the
    stricter join on constraint identity limited to foreign keys.
    """

    def __init__(
        self,
        connection: PGConnection,
        relation_lookup: str = "best_effort",
        include_views: bool = True,
    ) -> None:
        """Initialize the catalog reader.

        Args:
            connection: Open database session
            relation_lookup: "best_effort" or "constraint"
            include_views: Whether views are listed alongside base tables

        Raises:
            ValueError: If relation_lookup is not a known mode
        """
        self.connection = connection
        self.relation_lookup = relation_lookup
        self.include_views = include_views
        self._list_tables_sql = list_tables_query(include_views)
        self._describe_columns_sql = describe_columns_query(relation_lookup)

    def list_tables(self, schema_name: str) -> list[TableDescriptor]:
        """List the tables of a schema ordered by name.

        Args:
            schema_name: Schema to introspect

        Returns:
            Table descriptors, with the placeholder description where the
            catalog stores no comment

        Raises:
            CatalogQueryError: If the catalog query fails
        """
        rows = self._fetch_all(
            self._list_tables_sql, {"schema": schema_name}, schema_name
        )
        logger.debug("Found %d table(s) in schema %s", len(rows), schema_name)
        return [
            TableDescriptor(name=row["table_name"], description=row["table_description"])
            for row in rows
        ]

    def describe_columns(
        self, schema_name: str, table_name: str
    ) -> list[ColumnDescriptor]:
        """Describe the columns of a table in ordinal position order.

        A column taking part in several key constraints appears once per
        matching constraint row when the best-effort lookup is used.

        Raises:
            CatalogQueryError: If the catalog query fails
        """
        rows = self._fetch_all(
            self._describe_columns_sql,
            {"schema": schema_name, "table": table_name},
            schema_name,
            table_name,
        )
        return [ColumnDescriptor.model_validate(dict(row)) for row in rows]

    def _fetch_all(
        self,
        query: str,
        params: dict[str, str],
        schema_name: str,
        table_name: str | None = None,
    ) -> list[dict[str, Any]]:
        try:
            with self.connection.cursor(cursor_factory=RealDictCursor) as cursor:
                cursor.execute(query, params)
                return list(cursor.fetchall())
        except psycopg2.Error as e:
            raise CatalogQueryError(schema_name, e, table_name) from e
