"""Pydantic schemas for the mock user-profile API."""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator

from ..constants import DEFAULT_JURISDICTION
from .base import CamelModel, is_valid_wallet_address, normalize_jurisdiction


class UserPreferences(CamelModel):
    notifications: bool = True
    data_sharing: bool = False
    language: str = "en"


class UserCreateRequest(CamelModel):
    farcaster_id: str = Field(..., min_length=1)
    wallet_address: Optional[str] = None
    jurisdiction: str = DEFAULT_JURISDICTION

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


class UserUpdateRequest(CamelModel):
    farcaster_id: str = Field(..., min_length=1)
    jurisdiction: str = DEFAULT_JURISDICTION
    preferences: Optional[UserPreferences] = None

    @field_validator("jurisdiction")
    @classmethod
    def known_jurisdiction(cls, v: str) -> str:
        return normalize_jurisdiction(v)
