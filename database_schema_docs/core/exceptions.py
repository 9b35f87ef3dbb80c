"""Custom exception classes for the database schema docs exporter."""

from __future__ import annotations


class SchemaDocsError(Exception):
    """Base exception for schema documentation export errors.

    All custom exceptions in the database schema docs exporter inherit from this class.
    """

    pass


class DatabaseConnectionError(SchemaDocsError):
    """Error while opening the database session.

    Raised when the connection to the database server cannot be established,
    or when the session is used before it was opened.

    Args:
        host: Database server host
        port: Database server port
        database: Name of the database
        cause: The underlying exception, if any
    """

    def __init__(
        self, host: str, port: int, database: str, cause: Exception | None = None
    ) -> None:
        self.host = host
        self.port = port
        self.database = database
        self.cause = cause
        message = f"Failed to connect to database '{database}' at {host}:{port}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class CatalogQueryError(SchemaDocsError):
    """Error while querying the database catalog.

    Raised for malformed queries, permission denials and connectivity loss
    during catalog introspection.

    Args:
        schema_name: Schema being introspected
        cause: The underlying database exception
        table_name: Table being described, if the failure is table-specific
    """

    def __init__(
        self, schema_name: str, cause: Exception, table_name: str | None = None
    ) -> None:
        self.schema_name = schema_name
        self.table_name = table_name
        self.cause = cause
        target = f"{schema_name}.{table_name}" if table_name else schema_name
        super().__init__(f"Catalog query failed for '{target}': {cause}")


class OutputWriteError(SchemaDocsError):
    """Error while creating output directories or writing documents."""

    pass


class ValidationError(SchemaDocsError):
    """Error during record validation.

    Raised when a generated JSON record fails validation.

    Args:
        errors: List of validation error messages
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Record validation failed: {'; '.join(errors)}")


class ConfigurationError(SchemaDocsError):
    """Error in application configuration.

    Raised when required configuration values are missing or invalid,
    such as missing environment variables or invalid configuration settings.

    Args:
        variable_name: The name of the configuration variable that caused the error
    """

    def __init__(self, variable_name: str) -> None:
        self.variable_name = variable_name
        message = f"Required configuration variable '{variable_name}' is not set"
        super().__init__(message)
