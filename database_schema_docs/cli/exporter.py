"""Main class that orchestrates the schema documentation export."""

from __future__ import annotations

import sys
from pathlib import Path

from database_schema_docs.catalog.interfaces import ICatalogReader
from database_schema_docs.catalog.reader import CatalogReader
from database_schema_docs.core.config import Config, config
from database_schema_docs.core.exceptions import (
    CatalogQueryError,
    DatabaseConnectionError,
    OutputWriteError,
    ValidationError,
)
from database_schema_docs.core.schemas import (
    ColumnDescriptor,
    ExportArtifact,
    TableDescriptor,
)
from database_schema_docs.db.connection import ConnectionManager
from database_schema_docs.io.output_manager import OutputManager
from database_schema_docs.logger import logger, setup_logger
from database_schema_docs.rendering.interfaces import IDocumentRenderer
from database_schema_docs.rendering.json_renderer import JSONRenderer
from database_schema_docs.rendering.markdown_renderer import MarkdownRenderer
from database_schema_docs.validation.record_validator import RecordValidator


class SchemaDocsExporter:
    """Main class that orchestrates the schema documentation export.

    This class opens the database session, lists the tables of the target
    schema and, one table at a time, fetches its columns, renders both
    documents and writes them. The first failure aborts the remaining tables;
    the session is closed in every case.
    """

    def __init__(
        self,
        settings: Config = config,
        markdown_dir: Path | None = None,
        json_dir: Path | None = None,
    ) -> None:
        """Initialize the exporter.

        Args:
            settings: Exporter configuration
            markdown_dir: Override for the Markdown output directory
            json_dir: Override for the JSON output directory
        """
        self.settings = settings
        self.schema_name = settings.target_schema
        self.markdown_dir = markdown_dir or settings.markdown_dir
        self.json_dir = json_dir or settings.json_dir
        self.connection_manager = ConnectionManager(settings.connection_settings())
        self.output_manager = OutputManager(self.markdown_dir, self.json_dir)
        self.markdown_renderer = MarkdownRenderer()
        self.json_renderer = JSONRenderer()
        self.validator = RecordValidator()

    def run(self) -> None:
        """Run the complete export process.

        Raises:
            SystemExit: With a non-zero code if any error occurs during export
        """
        exit_codes = self.settings.exit_codes
        setup_logger()
        try:
            self.export_all_tables()
        except DatabaseConnectionError as e:
            logger.error("Error: %s", e)
            sys.exit(exit_codes.error_connection)
        except CatalogQueryError as e:
            logger.error("Error: %s", e)
            sys.exit(exit_codes.error_catalog_query)
        except ValidationError as e:
            logger.error("Error: %s", e)
            sys.exit(exit_codes.error_validation_failed)
        except OutputWriteError as e:
            logger.error("Error: %s", e)
            sys.exit(exit_codes.error_file_system)
        except Exception as e:
            logger.exception("Error: %s", e)
            sys.exit(exit_codes.error_unexpected)

    def run_for_testing(self) -> list[Path]:
        """Run the complete export process for testing.

        Unlike run(), this method raises exceptions instead of calling sys.exit(),
        making it suitable for unit tests.

        Returns:
            List of paths where documents were written

        Raises:
            SchemaDocsError: If any error occurs during export
        """
        return self.export_all_tables()

    def export_all_tables(self) -> list[Path]:
        """Export documentation for every table of the target schema.

        Returns:
            List of paths where documents were written, in table order
        """
        written: list[Path] = []
        with self.connection_manager as connection:
            self.output_manager.create_output_structure()
            reader = CatalogReader(
                connection,
                relation_lookup=self.settings.relation_lookup,
                include_views=self.settings.include_views,
            )

            logger.info("Fetching table details...")
            tables = reader.list_tables(self.schema_name)

            for table in tables:
                written.extend(self.export_table(reader, table))

        logger.info(
            "Files generated in:\nMarkdown: %s\nJSON: %s",
            self.markdown_dir,
            self.json_dir,
        )
        return written

    def export_table(
        self, reader: ICatalogReader, table: TableDescriptor
    ) -> list[Path]:
        """Fetch, render and write both documents for one table.

        Args:
            reader: Catalog reader bound to the open session
            table: Table to document

        Returns:
            Paths of the Markdown and JSON documents
        """
        logger.info("Fetching structure for table: %s", table.name)
        columns = reader.describe_columns(self.schema_name, table.name)

        logger.info("Generating markdown for table: %s", table.name)
        markdown_path = self.output_manager.write_artifact(
            self._build_artifact(
                self.markdown_renderer, self.markdown_dir, table, columns
            )
        )

        logger.info("Generating JSON for table: %s", table.name)
        record = self.json_renderer.build_record(table, columns)
        validation_result = self.validator.validate_record(record)
        if not validation_result.is_valid:
            raise ValidationError(validation_result.errors)
        for warning in validation_result.warnings:
            logger.debug(warning)
        json_path = self.output_manager.write_artifact(
            ExportArtifact(
                path=self.output_manager.get_output_path(
                    self.json_dir, table.name, self.json_renderer.extension
                ),
                content=self.json_renderer.serialize(record),
            )
        )

        return [markdown_path, json_path]

    def _build_artifact(
        self,
        renderer: IDocumentRenderer,
        directory: Path,
        table: TableDescriptor,
        columns: list[ColumnDescriptor],
    ) -> ExportArtifact:
        return ExportArtifact(
            path=self.output_manager.get_output_path(
                directory, table.name, renderer.extension
            ),
            content=renderer.render(table, columns),
        )
