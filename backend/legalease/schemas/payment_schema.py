"""Pydantic schemas for the mock payment APIs."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import Field, field_validator

from .base import CamelModel, is_valid_transaction_hash


class PaymentStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    FAILED = "failed"


class PaymentRequest(CamelModel):
    """Body of POST /api/payments."""

    amount: float = Field(..., gt=0, description="Amount in `currency` units")
    currency: str = Field(..., min_length=1)
    description: str = ""
    query_id: Optional[str] = None
    template_id: Optional[str] = None


class PaymentResponse(CamelModel):
    transaction_hash: str
    status: PaymentStatus
    amount: float
    currency: str

    @field_validator("transaction_hash")
    @classmethod
    def hash_format(cls, v: str) -> str:
        if not is_valid_transaction_hash(v):
            raise ValueError("Transaction hash must be 0x followed by 64 hex digits")
        return v


class PaymentIntentRequest(CamelModel):
    """Body of POST /api/payment."""

    amount: float = Field(..., gt=0)
    currency: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    service_type: str = Field(..., min_length=1)
    metadata: Dict[str, Any] = Field(default_factory=dict)


class PaymentIntent(CamelModel):
    payment_id: str
    status: str = "pending"
    amount: float
    currency: str
    service_type: str
    payment_url: str
    expires_at: datetime
    metadata: Dict[str, Any] = Field(default_factory=dict)
    transaction_hash: Optional[str] = None


class PaymentStatusUpdate(CamelModel):
    """Webhook-style status update for a payment intent."""

    payment_id: str = Field(..., min_length=1)
    status: str = Field(..., pattern="^(pending|completed|failed|expired)$")
    transaction_hash: Optional[str] = None

    @field_validator("transaction_hash")
    @classmethod
    def hash_format(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not is_valid_transaction_hash(v):
            raise ValueError("Transaction hash must be 0x followed by 64 hex digits")
        return v
