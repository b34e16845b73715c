"""Session store tests: lifecycle, query accounting and expiry."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import asyncio

import pytest

from legalease.services.session_store import SessionStore, mask_wallet


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return SessionStore(ttl_seconds=60, clock=clock)


class TestLifecycle:
    def test_create_and_get(self, store):
        session = store.create("US-CA", farcaster_id="123")
        assert len(session.id) == 32
        assert session.queries == []
        assert session.total_spent == 0.0

        fetched = store.get(session.id)
        assert fetched is session
        assert fetched.last_active >= fetched.created_at
        assert session.id in store

    def test_ids_are_unique(self, store):
        ids = {store.create("US").id for _ in range(50)}
        assert len(ids) == 50

    def test_unknown_session(self, store):
        assert store.get("missing") is None
        assert store.add_query("missing", "a question here") is None
        assert store.delete("missing") is None

    def test_delete(self, store):
        session = store.create("UK")
        assert store.delete(session.id) is session
        assert store.get(session.id) is None
        assert store.delete(session.id) is None

    def test_clear(self, store):
        store.create("UK")
        store.create("US")
        store.clear()
        assert len(store) == 0


class TestQueries:
    def test_add_query_updates_totals(self, store):
        session = store.create("US-NY")
        first = store.add_query(session.id, "What is wrongful termination?")
        second = store.add_query(session.id, "Draft a demand letter", "template", cost=0.05)

        assert first.cost == 0.01
        assert first.response_type == "summary"
        assert first.jurisdiction == "US-NY"
        assert second.response_type == "template"
        assert len(session.queries) == 2
        assert session.total_spent == pytest.approx(0.06)

    def test_total_spent_equals_sum_of_costs(self, store):
        session = store.create("US")
        for _ in range(10):
            store.add_query(session.id, "repeat question", cost=0.1)
        assert session.total_spent == pytest.approx(sum(q.cost for q in session.queries))

    def test_non_finite_total_is_rejected(self, store):
        session = store.create("US")
        store.add_query(session.id, "first costly question", cost=1e308)
        with pytest.raises(ValueError):
            store.add_query(session.id, "second costly question", cost=1e308)
        with pytest.raises(ValueError):
            store.add_query(session.id, "infinite question", cost=float("inf"))
        assert len(session.queries) == 1
        assert session.total_spent == 1e308


class TestExpiry:
    def test_lazy_expiry_on_access(self, store, clock):
        session = store.create("US")
        clock.now += 59
        assert store.get(session.id) is session
        clock.now += 1
        assert store.get(session.id) is None
        assert len(store) == 0

    def test_expired_session_rejects_queries(self, store, clock):
        session = store.create("US")
        clock.now += 120
        assert store.add_query(session.id, "too late question") is None

    def test_timer_removes_session(self):
        async def scenario():
            store = SessionStore(ttl_seconds=0.01)
            session = store.create("US")
            assert len(store) == 1
            await asyncio.sleep(0.05)
            return store, session

        store, session = asyncio.run(scenario())
        assert len(store) == 0
        assert store.get(session.id) is None

    def test_delete_cancels_timer(self):
        async def scenario():
            store = SessionStore(ttl_seconds=10)
            session = store.create("US")
            timer = store._timers[session.id]
            store.delete(session.id)
            return store, timer

        store, timer = asyncio.run(scenario())
        assert timer.cancelled()
        assert store._timers == {}


def test_mask_wallet():
    assert mask_wallet("0x" + "ab" * 20) == "0xabab...abab"
    assert mask_wallet(None) is None
