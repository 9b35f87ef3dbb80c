from typing import ClassVar, Protocol

from database_schema_docs.core.schemas import ColumnDescriptor, TableDescriptor


class IDocumentRenderer(Protocol):
    extension: ClassVar[str]

    def render(
        self, table: TableDescriptor, columns: list[ColumnDescriptor]
    ) -> str: ...
