"""
Identifier generation.

Every record kind draws its identifiers from one shared counter, so an
identifier is unique across debts, crop insurance policies and claims.
The counter starts at 0 and the first issued identifier is 1.
"""

from abc import ABC, abstractmethod

from .db import Database

U64_MAX = 2**64 - 1

# SQLite stores integers as signed 64‑bit values, which caps the
# counter below the full unsigned range.
MAX_ID = 2**63 - 1


class IdGenerator(ABC):
    """Monotonic identifier source."""

    @abstractmethod
    def current(self) -> int:
        """Return the last issued identifier (0 if none) without advancing."""

    @abstractmethod
    def _store(self, value: int) -> None:
        """Persist the new counter value."""

    def next_id(self) -> int:
        """Advance the counter and return the new identifier."""
        value = self.current()
        if value >= MAX_ID:
            raise RuntimeError("cannot increment id counter")
        self._store(value + 1)
        return value + 1


class InMemoryIdGenerator(IdGenerator):
    def __init__(self, start: int = 0) -> None:
        self._value = start

    def current(self) -> int:
        return self._value

    def _store(self, value: int) -> None:
        self._value = value

    def reset(self, value: int) -> None:
        """Move the counter back to ``value`` after a failed operation."""
        self._value = value


class SQLiteIdGenerator(IdGenerator):
    """Counter kept in the single row of the ``id_counter`` table.

    ``next_id`` does not commit; call it inside ``Database.transaction``.
    """

    def __init__(self, database: Database) -> None:
        self._db = database

    def current(self) -> int:
        row = self._db.connection.execute(
            "SELECT value FROM id_counter WHERE id = 0"
        ).fetchone()
        return row["value"] if row else 0

    def _store(self, value: int) -> None:
        self._db.connection.execute(
            "INSERT INTO id_counter (id, value) VALUES (0, ?)"
            " ON CONFLICT(id) DO UPDATE SET value = excluded.value",
            (value,),
        )
