"""Mock payment processing.

Nothing here touches a chain or a payment processor. Direct payments are
confirmed immediately with a random transaction hash; payment intents are
kept in memory until shortly after they expire.
"""

from __future__ import annotations

import logging
import secrets
import time
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional
from urllib.parse import quote

from ..config import (
    get_app_url,
    get_payment_intent_retention_seconds,
    get_payment_intent_ttl_seconds,
)
from ..constants import DEFAULT_CURRENCY
from ..schemas.payment_schema import (
    PaymentIntent,
    PaymentIntentRequest,
    PaymentRequest,
    PaymentResponse,
    PaymentStatus,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_transaction_hash() -> str:
    """0x + 64 hex digits."""
    return "0x" + secrets.token_hex(32)


def generate_payment_id() -> str:
    return f"payment_{int(time.time() * 1000)}_{secrets.token_hex(4)}"


def process_payment(request: PaymentRequest) -> Dict[str, Any]:
    """Confirm a direct payment. Returns the response plus its payment id."""
    response = PaymentResponse(
        transaction_hash=generate_transaction_hash(),
        status=PaymentStatus.CONFIRMED,
        amount=request.amount,
        currency=request.currency,
    )
    payment_id = generate_payment_id()
    logger.info(
        "[PAYMENT] Processed %s: %s %s (%s) query_id=%s template_id=%s",
        payment_id,
        request.amount,
        request.currency,
        request.description or "no description",
        request.query_id,
        request.template_id,
    )
    return {"payment": response, "payment_id": payment_id}


def mock_payment_status(
    transaction_hash: Optional[str] = None,
    payment_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Status lookup for a direct payment. Every known-format hash is confirmed."""
    body: Dict[str, Any] = {
        "transactionHash": transaction_hash or generate_transaction_hash(),
        "status": PaymentStatus.CONFIRMED.value,
        "amount": 0.05,
        "currency": DEFAULT_CURRENCY,
        "confirmations": 12,
        "blockNumber": 12_345_678,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    if payment_id:
        body["paymentId"] = payment_id
    return body


class PaymentIntentStore:
    """Pending payment intents keyed by payment id.

    An intent reads as `expired` once past `expires_at`, and is dropped
    entirely `retention_seconds` later. Purging is lazy, on create and get.
    """

    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        retention_seconds: Optional[float] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._ttl = ttl_seconds
        self._retention = retention_seconds
        self._clock = clock
        self._intents: Dict[str, PaymentIntent] = {}

    @property
    def ttl_seconds(self) -> float:
        return self._ttl if self._ttl is not None else get_payment_intent_ttl_seconds()

    @property
    def retention_seconds(self) -> float:
        if self._retention is not None:
            return self._retention
        return get_payment_intent_retention_seconds()

    def __len__(self) -> int:
        return len(self._intents)

    def _purge_expired(self) -> None:
        cutoff = self._clock() - timedelta(seconds=self.retention_seconds)
        stale = [pid for pid, intent in self._intents.items() if intent.expires_at <= cutoff]
        for pid in stale:
            del self._intents[pid]
        if stale:
            logger.info("[PAYMENT] Dropped %d expired intents", len(stale))

    def create(self, request: PaymentIntentRequest) -> PaymentIntent:
        self._purge_expired()
        payment_id = generate_payment_id()
        intent = PaymentIntent(
            payment_id=payment_id,
            status="pending",
            amount=request.amount,
            currency=request.currency,
            service_type=request.service_type,
            payment_url=f"{get_app_url()}/payment/confirm?id={quote(payment_id)}",
            expires_at=self._clock() + timedelta(seconds=self.ttl_seconds),
            metadata={
                "userId": request.user_id,
                "serviceType": request.service_type,
                **request.metadata,
            },
        )
        self._intents[payment_id] = intent
        logger.info(
            "[PAYMENT] Intent %s from user %s: %s %s for %s",
            payment_id,
            request.user_id,
            request.amount,
            request.currency,
            request.service_type,
        )
        return intent

    def get(self, payment_id: str) -> Optional[PaymentIntent]:
        self._purge_expired()
        intent = self._intents.get(payment_id)
        if intent is None:
            return None
        if intent.status == "pending" and self._clock() >= intent.expires_at:
            intent.status = "expired"
        return intent

    def status(self, payment_id: str) -> Dict[str, Any]:
        """Status payload for GET /api/payment.

        Unknown ids report `completed`, matching the mock processor.
        """
        intent = self.get(payment_id)
        now = datetime.now(timezone.utc).isoformat()
        if intent is None:
            return {
                "paymentId": payment_id,
                "status": "completed",
                "amount": 0.05,
                "currency": DEFAULT_CURRENCY,
                "completedAt": now,
                "transactionHash": generate_transaction_hash(),
            }
        body = intent.to_api()
        if intent.status == "completed":
            body.setdefault("completedAt", now)
        return body

    def update(
        self,
        payment_id: str,
        status: str,
        transaction_hash: Optional[str] = None,
    ) -> Optional[PaymentIntent]:
        intent = self._intents.get(payment_id)
        if intent is None:
            return None
        intent.status = status
        if transaction_hash:
            intent.transaction_hash = transaction_hash
        logger.info("[PAYMENT] Intent %s -> %s (tx=%s)", payment_id, status, transaction_hash)
        return intent

    def clear(self) -> None:
        self._intents.clear()


payment_intents = PaymentIntentStore()
