"""Database functions for creating, dropping and addressing scratch databases."""

from postgrestest.db.connection import (
    database_address,
    database_name,
    default_connect,
    mask_address,
)
from postgrestest.db.database import (
    NAME_PATTERN,
    NAME_PREFIX,
    ConnectFunction,
    CreateDatabaseFunction,
    DeleteDatabaseFunction,
    default_create_database,
    default_delete_database,
    force_delete_database,
    generate_database_name,
)

__all__ = [
    "NAME_PATTERN",
    "NAME_PREFIX",
    "ConnectFunction",
    "CreateDatabaseFunction",
    "DeleteDatabaseFunction",
    "database_address",
    "database_name",
    "default_connect",
    "default_create_database",
    "default_delete_database",
    "force_delete_database",
    "generate_database_name",
    "mask_address",
]
