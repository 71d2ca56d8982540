"""
Scratch database provisioning.

Each call creates one empty database on the base server and registers its
drop with the test host, so the database lives exactly as long as the test.

Usage (pytest):
    def test_orders(request):
        address = new_postgres_test(request)
        conn = psycopg2.connect(address)
        ...

Usage (unittest):
    class OrdersTest(unittest.TestCase):
        def setUp(self):
            self.address = new_postgres_test(self, delete_database=force_delete_database)

Usage (anywhere else):
    with scratch_database() as address:
        ...
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from typing import Any

from postgrestest import hosts
from postgrestest.config import Options, resolve_options
from postgrestest.db import database_address, generate_database_name, mask_address

logger = logging.getLogger(__name__)


def new_postgres_test(t: Any, options: Options | None = None, **overrides) -> str:
    """Create a scratch database for the test owning ``t`` and return its address.

    ``options`` and ``overrides`` are combined by ``resolve_options``. The
    database is dropped by the configured delete function once ``t``'s scope
    ends; with ``delete_database=None`` it is left in place.

    Any error fails the test immediately. There are no retries.
    """
    __tracebackhide__ = True
    hosts.check_host(t)
    opts = resolve_options(options, **overrides)
    logger.debug("Provisioning scratch database on %s", mask_address(opts.base_address))

    try:
        conn = opts.connect(opts.base_address)
    except Exception as e:
        hosts.fail(t, "connect", e)

    try:
        try:
            name = generate_database_name()
        except Exception as e:
            hosts.fail(t, "name", e)
        try:
            opts.create_database(conn, name)
        except Exception as e:
            hosts.fail(t, "create", e)
    finally:
        conn.close()

    hosts.register_cleanup(t, functools.partial(_drop_scratch_database, t, opts, name))

    try:
        address = database_address(opts.base_address, name)
    except Exception as e:
        hosts.fail(t, "address", e)
    logger.info("Scratch database %s ready", name)
    return address


def _drop_scratch_database(t: Any, opts: Options, name: str) -> None:
    __tracebackhide__ = True
    if opts.delete_database is None:
        logger.debug("No delete function configured, keeping %s", name)
        return

    try:
        conn = opts.connect(opts.base_address)
    except Exception as e:
        hosts.fail(t, "delete", e)
    try:
        opts.delete_database(conn, name)
    except Exception as e:
        hosts.fail(t, "delete", e)
    finally:
        conn.close()


@contextmanager
def scratch_database(options: Options | None = None, **overrides) -> Iterator[str]:
    """Yield a scratch database address, dropping the database on exit.

    Errors surface as ``ProvisionError``.
    """
    with ExitStack() as stack:
        yield new_postgres_test(stack, options, **overrides)
