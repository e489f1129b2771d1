"""
Application state: the identifier counter and the four record stores.

``LedgerState`` is constructed once by the composition root
(``create_app`` or a test fixture) and handed to the services.  It is
never created implicitly at import time.

Two backends are available:

* ``LedgerState.open(database_url)`` keeps everything in SQLite and
  survives restarts when the URL names a file.
* ``LedgerState.in_memory()`` keeps everything in dictionaries.
"""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

from agri_ledger_api.app.schemas.debt import DebtRead
from agri_ledger_api.app.schemas.escrow import EscrowRead
from agri_ledger_api.app.schemas.insurance import CropInsuranceRead, InsuranceClaimRead

from .db import Database, init_db
from .ids import IdGenerator, InMemoryIdGenerator, SQLiteIdGenerator
from .storage import InMemoryRecordStore, RecordStore, SQLiteRecordStore

logger = logging.getLogger(__name__)


@dataclass
class LedgerState:
    ids: IdGenerator
    debts: RecordStore[DebtRead]
    escrows: RecordStore[EscrowRead]
    crop_insurances: RecordStore[CropInsuranceRead]
    insurance_claims: RecordStore[InsuranceClaimRead]
    # Host time source, nanoseconds since the Unix epoch.
    clock: Callable[[], int] = field(default=time.time_ns)
    database: Optional[Database] = None

    @classmethod
    def open(cls, database_url: str, clock: Callable[[], int] = time.time_ns) -> "LedgerState":
        """Open (and migrate) a SQLite backed state."""
        database = Database(database_url)
        init_db(database)
        logger.info("Ledger state opened at %s", database.path)
        return cls(
            ids=SQLiteIdGenerator(database),
            debts=SQLiteRecordStore(database, "debts", DebtRead),
            escrows=SQLiteRecordStore(database, "escrows", EscrowRead),
            crop_insurances=SQLiteRecordStore(database, "crop_insurances", CropInsuranceRead),
            insurance_claims=SQLiteRecordStore(database, "insurance_claims", InsuranceClaimRead),
            clock=clock,
            database=database,
        )

    @classmethod
    def in_memory(cls, clock: Callable[[], int] = time.time_ns) -> "LedgerState":
        return cls(
            ids=InMemoryIdGenerator(),
            debts=InMemoryRecordStore(DebtRead),
            escrows=InMemoryRecordStore(EscrowRead),
            crop_insurances=InMemoryRecordStore(CropInsuranceRead),
            insurance_claims=InMemoryRecordStore(InsuranceClaimRead),
            clock=clock,
        )

    def now(self) -> int:
        return self.clock()

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Run one mutating operation atomically.

        SQLite commits or rolls back the whole unit.  The dictionary
        backend only needs to restore the counter: a failing ``put``
        raises before it changes the store.
        """
        if self.database is not None:
            with self.database.transaction():
                yield
            return
        mark = self.ids.current()
        try:
            yield
        except Exception:
            if isinstance(self.ids, InMemoryIdGenerator):
                self.ids.reset(mark)
            raise

    def close(self) -> None:
        if self.database is not None:
            self.database.close()
            logger.info("Ledger state closed")
