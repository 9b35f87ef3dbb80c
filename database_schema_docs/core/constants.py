"""Fixed values shared by the catalog reader, renderers and writer."""

# Catalog
DEFAULT_TABLE_DESCRIPTION = "No description available"

# File extensions
MARKDOWN_EXTENSION = "md"
JSON_EXTENSION = "json"

# Markdown table layout
MARKDOWN_HEADER = (
    "| Column Name | Data Type | Max Length | Is Nullable | Default | Primary Key | Relation |"
)
MARKDOWN_SEPARATOR = (
    "|-------------|-----------|------------|-------------|---------|-------------|----------|"
)
PRIMARY_KEY_MARKER = "YES"
NOT_PRIMARY_KEY_MARKER = "NO"

# JSON output
JSON_INDENT = 2
