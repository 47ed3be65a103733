"""Connection provider for the account store.

Every call to acquire() opens a new, independent connection that the caller
owns and must close. Pooling is disabled (NullPool), so closing a connection
really closes it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import DBAPIError
from sqlalchemy.pool import NullPool

from usercred.domain.shared.exceptions import StoreConnectionError

if TYPE_CHECKING:
    from usercred_config.settings import Settings

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite ignores FOREIGN KEY clauses unless asked per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


class ConnectionProvider:
    """Hands out database connections built from validated settings."""

    def __init__(self, database_url: str, echo: bool = False) -> None:
        self._engine = create_engine(database_url, echo=echo, poolclass=NullPool)
        if self._engine.dialect.name == "sqlite":
            event.listen(self._engine, "connect", _enable_sqlite_foreign_keys)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ConnectionProvider:
        """Build a provider from application settings.

        Loading the settings validates them, so incomplete configuration
        fails here instead of on the first query.
        """
        if settings is None:
            from usercred_config.settings import get_settings

            settings = get_settings()
        logger.debug("Database URL: %s", settings.safe_database_url)
        return cls(settings.database_url, echo=settings.db_echo)

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def safe_url(self) -> str:
        return self._engine.url.render_as_string(hide_password=True)

    def acquire(self) -> Connection:
        """Open a new connection owned by the caller.

        Raises
        ------
        StoreConnectionError
            If the store is unreachable or rejects the credentials.
        """
        try:
            return self._engine.connect()
        except DBAPIError as exc:
            reason = str(exc.orig) if exc.orig is not None else str(exc)
            raise StoreConnectionError(
                f"Could not connect to the database: {reason}",
                details={"url": self.safe_url},
            ) from exc

    @contextmanager
    def connection(self) -> Iterator[Connection]:
        """Yield a connection and close it on every exit path."""
        conn = self.acquire()
        try:
            yield conn
        finally:
            conn.close()

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Yield a connection inside a transaction.

        Commits when the block finishes, rolls back and re-raises if it
        raises.
        """
        with self.connection() as conn, conn.begin():
            yield conn

    def dispose(self) -> None:
        self._engine.dispose()
