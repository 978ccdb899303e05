"""
Startup preparation of the submissions store.

Run once per process before serving requests:
  1. Create the directory holding the SQLite file.
  2. Open the connection.
  3. Apply migrations, which create the ``users`` table when it is missing.

Every step is idempotent. Two processes racing through a first run are not
coordinated; the loser of the table-creation race fails at step 3.
"""

import logging
from pathlib import Path

from django.core.management import call_command
from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections

from .exceptions import StorageInitError

logger = logging.getLogger(__name__)


def database_path(using: str = DEFAULT_DB_ALIAS) -> Path | None:
    """Return the on-disk database file, or None for non-file databases."""
    connection = connections[using]
    if connection.vendor != "sqlite" or connection.is_in_memory_db():
        return None
    return Path(connection.settings_dict["NAME"])


def ensure_data_dir(path: Path) -> None:
    """Create ``path`` and any missing parents."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageInitError(f"Failed to create data directory {path}: {exc}") from exc


def initialize_storage(using: str = DEFAULT_DB_ALIAS) -> None:
    """Prepare the store so request handlers can run."""
    db_path = database_path(using)
    if db_path is not None:
        ensure_data_dir(db_path.parent)

    connection = connections[using]
    try:
        connection.ensure_connection()
    except DatabaseError as exc:
        raise StorageInitError(f"Failed to open DB: {exc}") from exc
    logger.info("Connected to %s DB at %s", connection.display_name, db_path or connection.settings_dict["NAME"])

    try:
        call_command("migrate", database=using, interactive=False, verbosity=0)
    except DatabaseError as exc:
        raise StorageInitError(f"Failed to create table: {exc}") from exc
