"""
pytest plugin: scratch database fixtures.

Loaded automatically through the ``pytest11`` entry point.

Fixtures:
    postgres_test_options     Options used by the other fixtures; override it
                              in a conftest.py to change the base address or
                              the connect/create/delete functions.
    postgres_test_database    Address of a fresh scratch database.
    postgres_test_connection  Open connection to that database, closed before
                              the database is dropped.

Usage:
    def test_insert(postgres_test_connection):
        with postgres_test_connection.cursor() as cur:
            cur.execute("CREATE TABLE t (id serial PRIMARY KEY)")
"""

from __future__ import annotations

import pytest

from postgrestest.config import Options, resolve_options
from postgrestest.provision import new_postgres_test


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "postgrestest: test provisions a scratch PostgreSQL database"
    )


@pytest.fixture
def postgres_test_options() -> Options:
    return Options()


@pytest.fixture
def postgres_test_database(request, postgres_test_options) -> str:
    return new_postgres_test(request, postgres_test_options)


@pytest.fixture
def postgres_test_connection(postgres_test_database, postgres_test_options):
    conn = resolve_options(postgres_test_options).connect(postgres_test_database)
    try:
        yield conn
    finally:
        conn.close()
