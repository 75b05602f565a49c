"""Store connectivity check run when the application boots."""

from __future__ import annotations

import structlog
from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections

logger = structlog.get_logger(__name__)


def connect_db(alias: str = DEFAULT_DB_ALIAS) -> bool:
    """Open a connection to ``alias`` and report whether it succeeded.

    A failure is logged and swallowed: the process keeps running and
    requests touching the store fail individually until it comes back.
    """
    connection = connections[alias]
    try:
        connection.ensure_connection()
    except DatabaseError as exc:
        logger.error(
            "database_connection_failed",
            alias=alias,
            error=str(exc),
            exc_info=exc,
        )
        return False

    logger.info("database_connected", alias=alias, vendor=connection.vendor)
    return True
