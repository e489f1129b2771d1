import itertools
import pathlib
import sys

import pytest
from fastapi.testclient import TestClient

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from agri_ledger_api.app.core.config import Settings
from agri_ledger_api.app.core.state import LedgerState
from agri_ledger_api.app.main import create_app

CLOCK_START = 1_700_000_000_000_000_000


@pytest.fixture
def clock():
    """Deterministic host clock: advances one second per reading."""
    ticks = itertools.count(CLOCK_START, 1_000_000_000)
    return lambda: next(ticks)


@pytest.fixture(params=["memory", "sqlite"])
def state(request, clock):
    if request.param == "memory":
        ledger = LedgerState.in_memory(clock=clock)
    else:
        ledger = LedgerState.open(":memory:", clock=clock)
    yield ledger
    ledger.close()


@pytest.fixture
def client(state) -> TestClient:
    app = create_app(Settings(database_url=":memory:", log_level="WARNING"), state=state)
    with TestClient(app) as test_client:
        yield test_client
