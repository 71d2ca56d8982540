"""
Drop scratch databases leaked by test runs that never reached teardown.

A crashed or killed test process leaves its ``testing_db_*`` databases on the
base server. Only names matching the generated pattern exactly are touched.

Usage:
    python -m postgrestest reap --dry-run
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from postgrestest.config import Options, resolve_options
from postgrestest.db import (
    NAME_PATTERN,
    default_delete_database,
    force_delete_database,
    mask_address,
)

logger = logging.getLogger(__name__)

_DATABASES_QUERY = r"SELECT datname FROM pg_database WHERE datname LIKE 'testing\_db\_%' ORDER BY datname"


@dataclass
class ReapResult:
    """Outcome of a reap run."""

    dropped: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)  # name -> error

    @property
    def ok(self) -> bool:
        return not self.failed


def find_scratch_databases(conn) -> list[str]:
    """Return the names of all scratch databases on the server."""
    with conn.cursor() as cur:
        cur.execute(_DATABASES_QUERY)
        return [row[0] for row in cur.fetchall() if NAME_PATTERN.match(row[0])]


def reap_scratch_databases(
    options: Options | None = None, dry_run: bool = False, force: bool = True, **overrides
) -> ReapResult:
    """Drop every scratch database on the base server.

    With ``force`` the drop terminates sessions still attached to a leaked
    database; otherwise the configured delete function is used. With
    ``dry_run`` nothing is dropped and ``dropped`` lists what would have
    been. A failure on one database is recorded and the rest are still
    attempted.
    """
    opts = resolve_options(options, **overrides)
    delete = force_delete_database if force else opts.delete_database or default_delete_database

    conn = opts.connect(opts.base_address)
    # DROP DATABASE cannot run inside the transaction the listing would open
    conn.autocommit = True
    result = ReapResult()
    try:
        names = find_scratch_databases(conn)
        logger.info(
            "Found %d scratch databases on %s", len(names), mask_address(opts.base_address)
        )
        for name in names:
            if dry_run:
                result.dropped.append(name)
                continue
            try:
                delete(conn, name)
            except Exception as e:
                logger.warning("Could not drop %s: %s", name, e)
                result.failed[name] = str(e)
            else:
                result.dropped.append(name)
    finally:
        conn.close()
    return result
