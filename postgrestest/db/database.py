"""
Create and drop scratch databases.

The create/delete functions share one signature, ``(conn, name) -> None``,
so callers can swap them through ``postgrestest.Options``. PostgreSQL
refuses ``CREATE DATABASE`` and ``DROP DATABASE`` inside a transaction
block, so each function switches the connection to autocommit first.
"""

from __future__ import annotations

import logging
import re
import secrets
from collections.abc import Callable
from typing import Any

from psycopg2 import sql

logger = logging.getLogger(__name__)

NAME_PREFIX = "testing_db_"
NAME_PATTERN = re.compile(r"^testing_db_[0-9a-f]{16}$")

ConnectFunction = Callable[[str], Any]
CreateDatabaseFunction = Callable[[Any, str], None]
DeleteDatabaseFunction = Callable[[Any, str], None]


def generate_database_name() -> str:
    """Return ``testing_db_`` followed by 8 random bytes in lowercase hex."""
    return NAME_PREFIX + secrets.token_bytes(8).hex()


def _execute(conn, statement: sql.Composable) -> None:
    conn.autocommit = True
    with conn.cursor() as cur:
        cur.execute(statement)


def default_create_database(conn, database: str) -> None:
    """Run ``CREATE DATABASE <database>``."""
    _execute(conn, sql.SQL("CREATE DATABASE {}").format(sql.Identifier(database)))
    logger.info("Created database %s", database)


def default_delete_database(conn, database: str) -> None:
    """Run ``DROP DATABASE <database>``."""
    _execute(conn, sql.SQL("DROP DATABASE {}").format(sql.Identifier(database)))
    logger.info("Dropped database %s", database)


def force_delete_database(conn, database: str) -> None:
    """Run ``DROP DATABASE <database> WITH (FORCE)``.

    Terminates sessions still connected to the database instead of failing
    on them. Requires PostgreSQL 13 or newer.
    """
    _execute(
        conn,
        sql.SQL("DROP DATABASE {} WITH (FORCE)").format(sql.Identifier(database)),
    )
    logger.info("Force-dropped database %s", database)
