"""Pydantic schemas for the mock session API."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from ..constants import MAX_QUERY_COST
from .base import CamelModel, is_valid_wallet_address, normalize_jurisdiction

ResponseType = Literal["summary", "template", "guidance", "analysis"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionCreateRequest(CamelModel):
    farcaster_id: Optional[str] = None
    wallet_address: Optional[str] = None
    jurisdiction: str

    @field_validator("wallet_address")
    @classmethod
    def wallet_format(cls, v: Optional[str]) -> Optional[str]:
        if v and not is_valid_wallet_address(v):
            raise ValueError("Invalid wallet address format")
        return v or None

    @field_validator("jurisdiction")
    @classmethod
    def known_jurisdiction(cls, v: str) -> str:
        return normalize_jurisdiction(v)


class SessionQueryInput(CamelModel):
    query_string: str = Field(..., min_length=1)
    response_type: ResponseType = "summary"


class SessionUpdateRequest(CamelModel):
    session_id: str = Field(..., min_length=1)
    query: SessionQueryInput
    cost: Optional[float] = Field(None, ge=0, le=MAX_QUERY_COST, allow_inf_nan=False)


class SessionQuery(CamelModel):
    """One query recorded against a session."""

    id: str
    query_string: str
    jurisdiction: str
    timestamp: datetime = Field(default_factory=_utcnow)
    response_type: ResponseType = "summary"
    cost: float = 0.01


class UserSession(CamelModel):
    id: str
    farcaster_id: Optional[str] = None
    wallet_address: Optional[str] = None
    jurisdiction: str
    queries: List[SessionQuery] = Field(default_factory=list)
    total_spent: float = 0.0
    created_at: datetime = Field(default_factory=_utcnow)
    last_active: datetime = Field(default_factory=_utcnow)
