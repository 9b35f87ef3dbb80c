"""
Database Schema Docs Exporter

A Python package for generating per-table Markdown and JSON documentation
for a database schema by introspecting the database catalog.
"""

from database_schema_docs.cli.exporter import SchemaDocsExporter

__all__ = ["SchemaDocsExporter"]
