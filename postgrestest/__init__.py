"""Ephemeral PostgreSQL databases for test suites."""

from postgrestest.config import DEFAULT_BASE_ADDRESS, ENV_BASE_ADDRESS, Options, resolve_options
from postgrestest.db import (
    default_connect,
    default_create_database,
    default_delete_database,
    force_delete_database,
)
from postgrestest.errors import ProvisionError
from postgrestest.provision import new_postgres_test, scratch_database
from postgrestest.sequences import alter_table_sequences

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_BASE_ADDRESS",
    "ENV_BASE_ADDRESS",
    "Options",
    "ProvisionError",
    "alter_table_sequences",
    "default_connect",
    "default_create_database",
    "default_delete_database",
    "force_delete_database",
    "new_postgres_test",
    "resolve_options",
    "scratch_database",
]
