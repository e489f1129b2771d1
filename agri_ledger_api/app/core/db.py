"""
SQLite database integration and simple migration system.

This module provides the ``Database`` wrapper used by the persistent
record stores and identifier counter, and ``init_db`` which applies
schema migrations when the database is opened.  Each record kind
lives in its own key/value table (``key`` is the 64‑bit identifier,
``record`` the JSON encoded record) and the shared identifier counter
is a single row in ``id_counter``.

Applied migration versions are stored in the ``migrations`` table and
new migrations are executed in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

MEMORY_URL = ":memory:"

# Tables holding one record kind each.  Order matches the migration below.
RECORD_TABLES = ("debts", "escrows", "crop_insurances", "insurance_claims")

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: record stores and identifier counter
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS id_counter (
            id INTEGER PRIMARY KEY CHECK (id = 0),
            value INTEGER NOT NULL
        );

        CREATE TABLE IF NOT EXISTS debts (
            key INTEGER PRIMARY KEY,
            record TEXT NOT NULL
        );

        -- Escrows are keyed by the id of the debt they secure.
        CREATE TABLE IF NOT EXISTS escrows (
            key INTEGER PRIMARY KEY,
            record TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS crop_insurances (
            key INTEGER PRIMARY KEY,
            record TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS insurance_claims (
            key INTEGER PRIMARY KEY,
            record TEXT NOT NULL
        );
        """,
    ),
]


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    ``:memory:`` and absolute paths are returned unchanged.  Relative
    paths are resolved against the project root.
    """
    if database_url == MEMORY_URL or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # agri_ledger_api/
    return str((base_dir / database_url).resolve())


class Database:
    """A single long‑lived SQLite connection shared by all stores.

    Writes made through :attr:`connection` are not committed on their
    own; wrap every mutating operation in :meth:`transaction` so that
    the counter update and the record insert land together.
    """

    def __init__(self, database_url: str) -> None:
        self.path = get_database_path(database_url)
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = self._connect()
        return self._conn

    def _connect(self) -> sqlite3.Connection:
        # Requests are served one at a time from the event loop, but the
        # loop may not run in the thread that opened the connection (the
        # test client, for example, drives the app from a worker thread).
        conn = sqlite3.connect(self.path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        logging.getLogger(__name__).debug("Opened SQLite database %s", self.path)
        return conn

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Yield the connection and commit on success, roll back on error."""
        conn = self.connection
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None


def init_db(database: Database) -> None:
    """Apply pending migrations and seed the identifier counter.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version and applies any newer entries of
    ``MIGRATIONS``.  If you add a migration, append it with an
    incremented version number.
    """
    logger = logging.getLogger(__name__)
    with database.transaction() as conn:
        cursor = conn.cursor()
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
                logger.info("Applied migration %s", version)

        # The counter starts at 0 so the first issued identifier is 1.
        cursor.execute("INSERT OR IGNORE INTO id_counter (id, value) VALUES (0, 0)")
