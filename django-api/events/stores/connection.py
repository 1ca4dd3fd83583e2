"""Process-wide database connection manager.

Django hands out one connection per thread for each database alias, so the
manager caches the opened connection per thread. The first ``connect()`` in
a thread opens it; later calls return the same wrapper. A failed attempt is
never cached: the next ``connect()`` starts from scratch.
"""

import logging
import threading

from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections
from django.db.backends.base.base import BaseDatabaseWrapper

from events.domain.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Opens the configured database connection once and hands it out."""

    def __init__(self, alias: str = DEFAULT_DB_ALIAS) -> None:
        self.alias = alias
        self._local = threading.local()

    def connect(self) -> BaseDatabaseWrapper:
        """Return the open connection, establishing it on first use.

        Raises:
            StoreUnavailableError: If the database cannot be reached.
        """
        connection = getattr(self._local, "connection", None)
        if connection is not None:
            return connection

        connection = connections[self.alias]
        try:
            connection.ensure_connection()
        except DatabaseError as exc:
            logger.warning("Database connection failed for alias %s", self.alias)
            raise StoreUnavailableError() from exc

        logger.info("Database connection established for alias %s", self.alias)
        self._local.connection = connection
        return connection

    def reset(self) -> None:
        """Forget the cached connection so the next call reconnects."""
        connection = getattr(self._local, "connection", None)
        if connection is None:
            return
        self._local.connection = None
        try:
            connection.close()
        except DatabaseError:
            logger.warning("Error closing connection for alias %s", self.alias, exc_info=True)
        logger.info("Database connection reset for alias %s", self.alias)

    @property
    def is_connected(self) -> bool:
        return getattr(self._local, "connection", None) is not None


_manager: ConnectionManager | None = None
_manager_lock = threading.Lock()


def get_connection_manager() -> ConnectionManager:
    """Return the process-wide manager for the default database."""
    global _manager
    if _manager is None:
        with _manager_lock:
            if _manager is None:
                _manager = ConnectionManager()
    return _manager
