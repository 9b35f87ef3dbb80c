"""File system operations for output generation."""

from __future__ import annotations

from pathlib import Path

from database_schema_docs.core.config import config
from database_schema_docs.core.exceptions import OutputWriteError
from database_schema_docs.core.schemas import ExportArtifact


class OutputManager:
    """Manages file system operations for output generation.

    This class handles creating the Markdown and JSON output directories and
    writing one document per table into them. Existing files are overwritten
    without warning and writes are not atomic.
    """

    def __init__(
        self,
        markdown_dir: Path = config.markdown_dir,
        json_dir: Path = config.json_dir,
    ) -> None:
        """Initialize the output manager.

        Args:
            markdown_dir: Directory for Markdown documents
            json_dir: Directory for JSON documents
        """
        self.markdown_dir = markdown_dir
        self.json_dir = json_dir

    def create_output_structure(self) -> None:
        """Create both output directories. Idempotent.

        Raises:
            OutputWriteError: If unable to create directories
        """
        for directory in (self.markdown_dir, self.json_dir):
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise OutputWriteError(
                    f"Failed to create output directory {directory}: {e}"
                ) from e

    def get_output_path(self, directory: Path, table_name: str, extension: str) -> Path:
        """Get the output path for a table's document.

        Args:
            directory: Target directory
            table_name: Table the document describes
            extension: File extension without the dot

        Returns:
            Path in format '<directory>/<table_name>.<extension>'
        """
        return directory / f"{table_name}.{extension}"

    def write_artifact(self, artifact: ExportArtifact) -> Path:
        """Write a rendered document to its path.

        Args:
            artifact: Rendered document and destination

        Returns:
            Path where the file was written

        Raises:
            OutputWriteError: If unable to write file
        """
        try:
            artifact.path.parent.mkdir(parents=True, exist_ok=True)

            with open(artifact.path, "w", encoding="utf-8") as f:
                f.write(artifact.content)

            return artifact.path

        except OSError as e:
            raise OutputWriteError(
                f"Failed to write document to {artifact.path}: {e}"
            ) from e
