from __future__ import annotations

import pytest

from agri_ledger_api.app.core.db import Database, init_db
from agri_ledger_api.app.core.errors import InvalidInputError, RecordTooLargeError
from agri_ledger_api.app.core.ids import U64_MAX
from agri_ledger_api.app.core.storage import (
    MAX_RECORD_SIZE,
    InMemoryRecordStore,
    SQLiteRecordStore,
    encode_record,
)
from agri_ledger_api.app.schemas.debt import DebtRead


def _debt(debt_id: int = 1, amount: int = 100) -> DebtRead:
    return DebtRead(id=debt_id, debtor="alice", creditor="bob", amount=amount, created_at=42)


@pytest.fixture(params=["memory", "sqlite"])
def store(request):
    if request.param == "memory":
        yield InMemoryRecordStore(DebtRead)
        return
    database = Database(":memory:")
    init_db(database)
    yield SQLiteRecordStore(database, "debts", DebtRead)
    database.close()


def test_get_missing_key_returns_none(store):
    assert store.get(7) is None
    assert store.get(U64_MAX) is None


def test_put_then_get_returns_equal_copy(store):
    debt = _debt()
    store.put(1, debt)

    loaded = store.get(1)
    assert loaded == debt
    assert loaded is not debt


def test_put_overwrites_existing_key(store):
    store.put(1, _debt(amount=100))
    store.put(1, _debt(amount=250))

    assert store.get(1).amount == 250


def test_amount_at_u64_max_survives_encoding(store):
    store.put(3, _debt(debt_id=3, amount=U64_MAX))
    assert store.get(3).amount == U64_MAX


def test_oversized_record_is_rejected(store):
    big = DebtRead(id=1, debtor="é" * 250, creditor="é" * 250, amount=1, created_at=0)
    with pytest.raises(RecordTooLargeError):
        store.put(1, big)
    assert store.get(1) is None


def test_record_too_large_is_invalid_input():
    big = DebtRead(id=1, debtor="\U0001F33E" * 250, creditor="bob", amount=1, created_at=0)
    with pytest.raises(InvalidInputError, match=f"limit is {MAX_RECORD_SIZE}"):
        encode_record(big)


def test_sqlite_store_rejects_invalid_table_name():
    database = Database(":memory:")
    with pytest.raises(ValueError, match="invalid SQL identifier"):
        SQLiteRecordStore(database, "debts;drop table debts", DebtRead)
