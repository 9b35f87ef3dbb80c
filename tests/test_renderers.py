"""Tests for the Markdown and JSON renderers."""

import json

import pytest

from conftest import column_row
from database_schema_docs.core.schemas import ColumnDescriptor, TableDescriptor
from database_schema_docs.rendering.json_renderer import JSONRenderer
from database_schema_docs.rendering.markdown_renderer import MarkdownRenderer

USERS_MARKDOWN = (
    "# Table: users\n"
    "\n"
    "**Description**: Registered wallet users\n"
    "\n"
    "| Column Name | Data Type | Max Length | Is Nullable | Default | Primary Key | Relation |\n"
    "|-------------|-----------|------------|-------------|---------|-------------|----------|\n"
    "| id | integer |  | false |  | YES |  |\n"
    "| email | character varying | 255 | true |  | NO |  |\n"
)


@pytest.fixture
def duplicate_columns():
    return [
        ColumnDescriptor(**column_row("id", is_primary_key=True, relation="users")),
        ColumnDescriptor(**column_row("owner_id", relation="users")),
        ColumnDescriptor(**column_row("id", is_primary_key=True, relation="accounts")),
    ]


class TestMarkdownRenderer:
    def test_renders_title_description_and_rows(self, users_table, users_columns):
        assert MarkdownRenderer().render(users_table, users_columns) == USERS_MARKDOWN

    def test_is_deterministic(self, users_table, users_columns):
        renderer = MarkdownRenderer()
        assert renderer.render(users_table, users_columns) == renderer.render(
            users_table, list(users_columns)
        )

    def test_primary_key_marker(self, users_table, users_columns):
        rows = MarkdownRenderer().render(users_table, users_columns).splitlines()[-2:]

        assert rows[0].split(" | ")[5] == "YES"
        assert rows[1].split(" | ")[5] == "NO"

    def test_default_and_relation_cells(self, users_table):
        column = ColumnDescriptor(
            **column_row(
                "account_id",
                default_expression="0",
                relation="accounts",
            )
        )

        row = MarkdownRenderer().render(users_table, [column]).splitlines()[-1]

        assert row == "| account_id | integer |  | false | 0 | NO | accounts |"

    def test_duplicate_columns_are_all_rendered(self, users_table, duplicate_columns):
        rendered = MarkdownRenderer().render(users_table, duplicate_columns)
        assert rendered.count("| id | integer |") == 2

    def test_table_without_columns(self):
        rendered = MarkdownRenderer().render(TableDescriptor(name="empty"), [])

        assert rendered.startswith("# Table: empty\n\n**Description**: No description available\n")
        assert rendered.endswith("|----------|\n")

    def test_extension(self):
        assert MarkdownRenderer.extension == "md"


class TestJSONRenderer:
    def test_builds_record(self, users_table, users_columns):
        record = JSONRenderer().build_record(users_table, users_columns)

        assert record == {
            "name": "users",
            "description": "Registered wallet users",
            "columns": {
                "id": {
                    "type": "integer",
                    "nullable": False,
                    "maxLength": None,
                    "default": None,
                    "pk": True,
                    "relation": None,
                },
                "email": {
                    "type": "character varying",
                    "nullable": True,
                    "maxLength": 255,
                    "default": None,
                    "pk": False,
                    "relation": None,
                },
            },
        }

    def test_render_uses_two_space_indent(self, users_table, users_columns):
        rendered = JSONRenderer().render(users_table, users_columns)

        assert rendered.startswith('{\n  "name": "users",\n  "description"')
        assert '"maxLength": null' in rendered
        assert json.loads(rendered)["columns"]["email"]["maxLength"] == 255

    def test_is_deterministic(self, users_table, users_columns):
        renderer = JSONRenderer()
        assert renderer.render(users_table, users_columns) == renderer.render(
            users_table, users_columns
        )

    def test_later_duplicates_overwrite_in_first_seen_order(
        self, users_table, duplicate_columns
    ):
        record = JSONRenderer().build_record(users_table, duplicate_columns)

        assert list(record["columns"]) == ["id", "owner_id"]
        assert record["columns"]["id"]["relation"] == "accounts"

    def test_non_ascii_text_is_preserved(self, users_columns):
        table = TableDescriptor(name="users", description="Utilisateurs enregistrés")

        rendered = JSONRenderer().render(table, users_columns)

        assert "Utilisateurs enregistrés" in rendered

    def test_placeholder_description(self, users_columns):
        record = JSONRenderer().build_record(TableDescriptor(name="users"), users_columns)
        assert record["description"] == "No description available"

    def test_extension(self):
        assert JSONRenderer.extension == "json"
