from typing import Protocol

from database_schema_docs.core.schemas import ColumnDescriptor, TableDescriptor


class ICatalogReader(Protocol):
    def list_tables(self, schema_name: str) -> list[TableDescriptor]: ...

    def describe_columns(
        self, schema_name: str, table_name: str
    ) -> list[ColumnDescriptor]: ...
