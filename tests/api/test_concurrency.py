"""
Concurrency tests against the process-wide store.

These run the application with its real get_db, the shared
in-memory connection and ledger_lock, and fire requests from
many threads at once. Each request gets its own client call, so
handlers and dependencies run on different threads.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient

from finapi.main import app
from finapi.models.base import Base, engine, init_db

HEADERS = {"cpf": "111"}
WORKERS = 16


@pytest.fixture
def live_client():
    """A client bound to the real store, emptied afterwards."""
    app.dependency_overrides.clear()
    init_db()
    yield TestClient(app)
    Base.metadata.drop_all(bind=engine)


def test_every_accepted_deposit_is_kept(live_client):
    live_client.post("/account", json={"cpf": "111", "name": "Alice"})

    def call(i):
        if i % 2:
            return live_client.post("/deposit", json={"amount": 1}, headers=HEADERS)
        return live_client.get("/balance", headers=HEADERS)

    with ThreadPoolExecutor(max_workers=WORKERS) as pool:
        responses = list(pool.map(call, range(600)))

    deposits = [r for i, r in enumerate(responses) if i % 2]
    assert all(r.status_code == 201 for r in deposits)
    assert all(r.status_code == 200 for r in responses[::2])

    statement = live_client.get("/statement", headers=HEADERS).json()
    assert len(statement) == 300
    assert live_client.get("/balance", headers=HEADERS).json() == 300


def test_parallel_withdrawals_never_overdraw(live_client):
    live_client.post("/account", json={"cpf": "111", "name": "Alice"})
    live_client.post("/deposit", json={"amount": 100}, headers=HEADERS)

    def call(i):
        if i % 3 == 0:
            return live_client.get("/statement", headers=HEADERS)
        return live_client.post("/withdraw", json={"amount": 10}, headers=HEADERS)

    with ThreadPoolExecutor(max_workers=WORKERS) as pool:
        responses = list(pool.map(call, range(90)))

    withdrawals = [r for i, r in enumerate(responses) if i % 3 != 0]
    accepted = [r for r in withdrawals if r.status_code == 201]
    rejected = [r for r in withdrawals if r.status_code == 400]

    assert len(accepted) == 10
    assert len(rejected) == len(withdrawals) - 10
    assert all(r.json() == {"error": "Insufficient funds"} for r in rejected)
    assert live_client.get("/balance", headers=HEADERS).json() == 0

    statement = live_client.get("/statement", headers=HEADERS).json()
    assert [e["type"] for e in statement].count("debit") == 10
