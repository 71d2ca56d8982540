"""Fixtures shared by the integration tests."""

from __future__ import annotations

import psycopg2
import pytest

from postgrestest.config import resolve_options
from postgrestest.db import mask_address


@pytest.fixture(scope="session")
def base_server() -> str:
    """Address of the base server, skipping the test if it cannot be reached."""
    opts = resolve_options()
    try:
        conn = opts.connect(opts.base_address)
    except psycopg2.OperationalError as e:
        pytest.skip(f"Base server {mask_address(opts.base_address)} not reachable: {e}")
    conn.close()
    return opts.base_address
