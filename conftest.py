"""
Root-level shared test fixtures.

Unit tests run against MagicMock connections; tests marked ``integration``
need a base server (see docker-compose.yml) and skip when it is unreachable.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from psycopg2 import sql

pytest_plugins = ["pytester"]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove the base address override so tests see the default."""
    monkeypatch.delenv("TESTING_POSTGRES_TEST", raising=False)


@pytest.fixture
def mock_cursor():
    cur = MagicMock()
    cur.fetchall.return_value = []
    return cur


@pytest.fixture
def mock_conn(mock_cursor):
    """A psycopg2-shaped connection whose cursor() context yields ``mock_cursor``."""
    conn = MagicMock()
    conn.autocommit = False
    conn.cursor.return_value.__enter__ = MagicMock(return_value=mock_cursor)
    conn.cursor.return_value.__exit__ = MagicMock(return_value=False)
    return conn


def _render(composable) -> str:
    if isinstance(composable, sql.Composed):
        return "".join(_render(part) for part in composable.seq)
    if isinstance(composable, sql.Identifier):
        return ".".join(f'"{s}"' for s in composable.strings)
    if isinstance(composable, sql.Literal):
        return str(composable.wrapped)
    if isinstance(composable, sql.SQL):
        return composable.string
    return str(composable)


@pytest.fixture
def render_sql():
    """Render psycopg2.sql objects to text without a live connection."""
    return _render
