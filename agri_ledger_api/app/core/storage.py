"""
Key/value record stores.

A store maps a 64‑bit identifier to one kind of record and supports
exactly two operations: ``get`` and ``put``.  ``put`` is an upsert; an
existing key is overwritten without any conflict signal.  There is no
delete and no listing.

Records are kept in their encoded form (JSON produced by pydantic) in
both implementations, so every ``get`` returns a fresh copy and the
per‑record size bound applies regardless of backend.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import Dict, Generic, Optional, Type, TypeVar

from pydantic import BaseModel

from .db import Database
from .errors import RecordTooLargeError
from .ids import MAX_ID

# Upper bound of an encoded record, in bytes, for every record kind.
MAX_RECORD_SIZE = 1024

R = TypeVar("R", bound=BaseModel)


def encode_record(record: BaseModel) -> str:
    raw = record.model_dump_json()
    size = len(raw.encode("utf-8"))
    if size > MAX_RECORD_SIZE:
        raise RecordTooLargeError(
            f"{type(record).__name__} record is {size} bytes, limit is {MAX_RECORD_SIZE}"
        )
    return raw


def decode_record(model: Type[R], raw: str) -> R:
    return model.model_validate_json(raw)


class RecordStore(ABC, Generic[R]):
    """Abstract identifier → record mapping."""

    def __init__(self, model: Type[R]) -> None:
        self.model = model

    @abstractmethod
    def get(self, key: int) -> Optional[R]:
        """Return the record stored under ``key`` or ``None``."""

    @abstractmethod
    def put(self, key: int, record: R) -> None:
        """Insert or overwrite the record stored under ``key``."""


class InMemoryRecordStore(RecordStore[R]):
    """Dictionary backed store, lost when the process exits."""

    def __init__(self, model: Type[R]) -> None:
        super().__init__(model)
        self._records: Dict[int, str] = {}

    def get(self, key: int) -> Optional[R]:
        raw = self._records.get(key)
        if raw is None:
            return None
        return decode_record(self.model, raw)

    def put(self, key: int, record: R) -> None:
        self._records[key] = encode_record(record)


def _validate_identifier(name: str) -> str:
    if not re.fullmatch(r"[A-Za-z_][A-Za-z0-9_]*", name):
        raise ValueError(f"invalid SQL identifier: {name}")
    return name


class SQLiteRecordStore(RecordStore[R]):
    """Store backed by one ``(key, record)`` table.

    ``put`` does not commit; call it inside ``Database.transaction``.
    """

    def __init__(self, database: Database, table_name: str, model: Type[R]) -> None:
        super().__init__(model)
        self._db = database
        self._table_name = _validate_identifier(table_name)

    def get(self, key: int) -> Optional[R]:
        # Keys outside the SQLite integer range can never have been stored.
        if key < 0 or key > MAX_ID:
            return None
        row = self._db.connection.execute(
            f"SELECT record FROM {self._table_name} WHERE key = ?",
            (key,),
        ).fetchone()
        if not row:
            return None
        return decode_record(self.model, row["record"])

    def put(self, key: int, record: R) -> None:
        raw = encode_record(record)
        self._db.connection.execute(
            f"INSERT INTO {self._table_name} (key, record) VALUES (?, ?)"
            " ON CONFLICT(key) DO UPDATE SET record = excluded.record",
            (key, raw),
        )
        logging.getLogger(__name__).debug("Stored %s key %s", self._table_name, key)
