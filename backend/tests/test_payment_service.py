"""Payment intent store tests: expiry and retention."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from datetime import datetime, timedelta, timezone

import pytest

from legalease.schemas.payment_schema import PaymentIntentRequest
from legalease.services.payment_service import PaymentIntentStore


class FakeClock:
    def __init__(self):
        self.now = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock():
    return FakeClock()


def _request():
    return PaymentIntentRequest.model_validate(
        {"amount": 0.01, "currency": "ETH", "userId": "u1", "serviceType": "advice"}
    )


class TestRetention:
    def test_expired_intents_do_not_accumulate(self, clock):
        store = PaymentIntentStore(ttl_seconds=0, retention_seconds=0, clock=clock)
        for _ in range(1000):
            store.create(_request())
            clock.advance(1)
        assert len(store) <= 1

    def test_expired_intent_readable_until_retention_ends(self, clock):
        store = PaymentIntentStore(ttl_seconds=60, retention_seconds=300, clock=clock)
        intent = store.create(_request())

        clock.advance(30)
        assert store.get(intent.payment_id).status == "pending"

        clock.advance(60)
        assert store.get(intent.payment_id).status == "expired"

        clock.advance(300)
        assert store.get(intent.payment_id) is None
        assert len(store) == 0

    def test_live_intents_are_kept(self, clock):
        store = PaymentIntentStore(ttl_seconds=600, retention_seconds=60, clock=clock)
        ids = [store.create(_request()).payment_id for _ in range(5)]
        clock.advance(120)
        store.create(_request())
        assert len(store) == 6
        assert all(store.get(pid).status == "pending" for pid in ids)
