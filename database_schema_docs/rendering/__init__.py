"""Document renderers for table metadata."""

from database_schema_docs.rendering.json_renderer import JSONRenderer
from database_schema_docs.rendering.markdown_renderer import MarkdownRenderer

__all__ = ["JSONRenderer", "MarkdownRenderer"]
