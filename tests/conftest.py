"""Shared test fixtures and configuration."""

# Set test environment variables BEFORE any imports that might trigger config loading
import os  # noqa: E402

os.environ.setdefault("DB_PASSWORD", "test-password")

from pathlib import Path
from typing import Any

import psycopg2
import pytest

from database_schema_docs.core.config import Config
from database_schema_docs.core.schemas import ColumnDescriptor, TableDescriptor


class FakeCursor:
    """Cursor answering the table listing and column queries from canned rows."""

    def __init__(self, connection: "FakeConnection") -> None:
        self.connection = connection
        self._rows: list[dict[str, Any]] = []

    def __enter__(self) -> "FakeCursor":
        return self

    def __exit__(self, *exc_info) -> bool:
        return False

    def execute(self, query: str, params: dict[str, str] | None = None) -> None:
        if self.connection.closed:
            raise psycopg2.InterfaceError("connection already closed")
        self.connection.executed.append((query, params))

        if "information_schema.columns" in query:
            table_name = params["table"]
            if table_name in self.connection.failing_tables:
                raise psycopg2.ProgrammingError(
                    f'permission denied for table "{table_name}"'
                )
            self._rows = [dict(row) for row in self.connection.columns.get(table_name, [])]
        elif "information_schema.tables" in query:
            if self.connection.fail_listing:
                raise psycopg2.OperationalError("server closed the connection unexpectedly")
            self._rows = [dict(row) for row in self.connection.tables]
        else:
            raise psycopg2.ProgrammingError("unexpected query")

    def fetchall(self) -> list[dict[str, Any]]:
        return list(self._rows)


class FakeConnection:
    """Stands in for a psycopg2 connection in catalog and exporter tests."""

    def __init__(
        self,
        tables: list[dict[str, Any]] | None = None,
        columns: dict[str, list[dict[str, Any]]] | None = None,
        failing_tables: tuple[str, ...] = (),
        fail_listing: bool = False,
    ) -> None:
        self.tables = tables or []
        self.columns = columns or {}
        self.failing_tables = set(failing_tables)
        self.fail_listing = fail_listing
        self.executed: list[tuple[str, dict[str, str] | None]] = []
        self.cursor_factories: list[Any] = []
        self.session: dict[str, Any] | None = None
        self.closed = False
        self.close_calls = 0

    def cursor(self, cursor_factory: Any = None) -> FakeCursor:
        self.cursor_factories.append(cursor_factory)
        return FakeCursor(self)

    def set_session(self, **kwargs: Any) -> None:
        self.session = kwargs

    def close(self) -> None:
        self.closed = True
        self.close_calls += 1


def column_row(
    column_name: str,
    data_type: str = "integer",
    nullable: bool = False,
    max_length: int | None = None,
    default_expression: str | None = None,
    is_primary_key: bool = False,
    relation: str | None = None,
) -> dict[str, Any]:
    """Build a row shaped like the column metadata query result."""
    return {
        "column_name": column_name,
        "data_type": data_type,
        "nullable": nullable,
        "max_length": max_length,
        "default_expression": default_expression,
        "is_primary_key": is_primary_key,
        "relation": relation,
    }


@pytest.fixture
def users_table() -> TableDescriptor:
    return TableDescriptor(name="users", description="Registered wallet users")


@pytest.fixture
def users_columns() -> list[ColumnDescriptor]:
    return [
        ColumnDescriptor(**column_row("id", is_primary_key=True)),
        ColumnDescriptor(
            **column_row(
                "email", data_type="character varying", nullable=True, max_length=255
            )
        ),
    ]


@pytest.fixture
def wallet_catalog() -> dict[str, Any]:
    """Three tables in name order, as the listing query returns them."""
    return {
        "tables": [
            {"table_name": "accounts", "table_description": "Wallet accounts"},
            {"table_name": "transactions", "table_description": None},
            {"table_name": "users", "table_description": "Registered wallet users"},
        ],
        "columns": {
            "accounts": [
                column_row(
                    "id",
                    default_expression="nextval('wallet.accounts_id_seq'::regclass)",
                    is_primary_key=True,
                ),
                column_row("user_id", relation="users"),
                column_row("balance", data_type="numeric", default_expression="0"),
            ],
            "transactions": [
                column_row("id", data_type="bigint", is_primary_key=True),
                column_row("account_id"),
                column_row("memo", data_type="text", nullable=True),
            ],
            "users": [
                column_row("id", is_primary_key=True),
                column_row(
                    "email",
                    data_type="character varying",
                    nullable=True,
                    max_length=255,
                ),
            ],
        },
    }


@pytest.fixture
def fake_connection(wallet_catalog) -> FakeConnection:
    return FakeConnection(
        tables=wallet_catalog["tables"], columns=wallet_catalog["columns"]
    )


@pytest.fixture
def temp_output_dirs(tmp_path) -> tuple[Path, Path]:
    """Markdown and JSON output directories that do not exist yet."""
    return tmp_path / "markdown_tables", tmp_path / "json_tables"


@pytest.fixture
def test_settings(temp_output_dirs) -> Config:
    markdown_dir, json_dir = temp_output_dirs
    return Config(
        db_password="test-password",
        db_name="wallet",
        target_schema="wallet",
        markdown_dir=markdown_dir,
        json_dir=json_dir,
    )
