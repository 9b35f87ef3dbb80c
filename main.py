"""
Database Schema Docs Exporter

Entry point for the schema documentation export script.
"""

from database_schema_docs import SchemaDocsExporter


def main() -> None:
    """
    Entry point for the schema documentation export script.

    Creates SchemaDocsExporter instance and runs the export process.
    """
    exporter = SchemaDocsExporter()
    exporter.run()


if __name__ == "__main__":
    main()
