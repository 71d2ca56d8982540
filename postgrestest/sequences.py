"""
Randomize sequence start values.

A fresh database starts every sequence at 1, so ids in different tables
line up and code that mixes them up (joining on the wrong column, passing
an order id where a customer id is expected) still passes. Restarting each
sequence at an unrelated random value makes those bugs visible.

Usage:
    conn = psycopg2.connect(new_postgres_test(request))
    run_migrations(conn)
    alter_table_sequences(request, conn)
"""

from __future__ import annotations

import logging
import random
from typing import Any

from psycopg2 import sql

from postgrestest import hosts

logger = logging.getLogger(__name__)

SEQUENCE_MIN = 100
SEQUENCE_MAX = 100099

_SEQUENCES_QUERY = """
    SELECT n.nspname, c.relname
    FROM pg_class c
    JOIN pg_namespace n ON n.oid = c.relnamespace
    WHERE c.relkind = 'S'
"""


def list_sequences(conn) -> list[tuple[str, str]]:
    """Return ``(schema, name)`` for every sequence visible on ``conn``."""
    with conn.cursor() as cur:
        cur.execute(_SEQUENCES_QUERY)
        return [(row[0], row[1]) for row in cur.fetchall()]


def restart_statement(schema: str, name: str, value: int) -> sql.Composed:
    return sql.SQL("ALTER SEQUENCE {} RESTART WITH {}").format(
        sql.Identifier(schema, name), sql.Literal(value)
    )


def alter_table_sequences(
    t: Any, conn, rng: random.Random | None = None
) -> dict[str, int]:
    """Restart every sequence on ``conn`` at a random value in [100, 100099].

    ``t`` is the test host used to report failures (see ``postgrestest.hosts``);
    pass ``None`` to get ``ProvisionError`` instead. ``rng`` defaults to the
    module-level ``random`` functions.

    Returns ``{"schema.name": start_value}``.
    """
    __tracebackhide__ = True
    randint = (rng or random).randint
    restarted: dict[str, int] = {}
    try:
        sequences = list_sequences(conn)
        with conn.cursor() as cur:
            for schema, name in sequences:
                value = randint(SEQUENCE_MIN, SEQUENCE_MAX)
                cur.execute(restart_statement(schema, name, value))
                restarted[f"{schema}.{name}"] = value
                logger.debug("Restarted sequence %s.%s at %d", schema, name, value)
        if not conn.autocommit:
            conn.commit()
    except Exception as e:
        hosts.fail(t, "sequences", e)
    logger.info("Randomized %d sequences", len(restarted))
    return restarted
