"""Single-session database connection management."""

from __future__ import annotations

from types import TracebackType

import psycopg2
from psycopg2.extensions import connection as PGConnection

from database_schema_docs.core.exceptions import DatabaseConnectionError
from database_schema_docs.core.schemas import ConnectionSettings
from database_schema_docs.logger import logger


class ConnectionManager:
    """Owns the one database session used by an export run.

    The session is opened before any catalog read and closed after the last
    write or on failure. There is no pooling, retry or reconnection: a
    dropped session aborts the run.
    """

    def __init__(self, settings: ConnectionSettings) -> None:
        """Initialize the connection manager.

        Args:
            settings: Connection parameters for the target database
        """
        self.settings = settings
        self._connection: PGConnection | None = None

    @property
    def connection(self) -> PGConnection:
        """The open session.

        Raises:
            DatabaseConnectionError: If the session has not been opened
        """
        if self._connection is None:
            raise DatabaseConnectionError(
                self.settings.host, self.settings.port, self.settings.database
            )
        return self._connection

    @property
    def is_connected(self) -> bool:
        return self._connection is not None

    def connect(self) -> PGConnection:
        """Open the session in read-only autocommit mode.

        Returns:
            The open psycopg2 connection

        Raises:
            DatabaseConnectionError: If the server cannot be reached or rejects the login
        """
        if self._connection is not None:
            return self._connection

        logger.debug(
            "Connecting to database %s at %s:%s",
            self.settings.database,
            self.settings.host,
            self.settings.port,
        )
        try:
            connection = psycopg2.connect(**self.settings.connect_kwargs())
        except psycopg2.Error as e:
            raise DatabaseConnectionError(
                self.settings.host, self.settings.port, self.settings.database, e
            ) from e

        try:
            connection.set_session(readonly=True, autocommit=True)
        except psycopg2.Error as e:
            connection.close()
            raise DatabaseConnectionError(
                self.settings.host, self.settings.port, self.settings.database, e
            ) from e

        self._connection = connection
        return connection

    def close(self) -> None:
        """Close the session if it is open. Safe to call more than once."""
        if self._connection is None:
            return
        connection, self._connection = self._connection, None
        connection.close()
        logger.debug("Closed connection to database %s", self.settings.database)

    def __enter__(self) -> PGConnection:
        return self.connect()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
