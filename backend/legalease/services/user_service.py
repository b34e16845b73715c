"""Mock user profiles, kept in memory for the life of the process."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from ..constants import DEFAULT_JURISDICTION
from ..schemas.user_schema import UserCreateRequest, UserPreferences, UserUpdateRequest

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class UserDirectory:
    def __init__(self) -> None:
        self._profiles: Dict[str, Dict[str, Any]] = {}

    def create(self, request: UserCreateRequest) -> Dict[str, Any]:
        now = _now()
        profile = {
            "farcasterId": request.farcaster_id,
            "walletAddress": request.wallet_address,
            "jurisdiction": request.jurisdiction,
            "createdAt": now,
            "updatedAt": now,
            "preferences": UserPreferences().to_api(),
            "usage": {
                "queriesUsed": 0,
                "templatesGenerated": 0,
                "totalSpent": 0.0,
                "lastActive": now,
            },
        }
        self._profiles[request.farcaster_id] = profile
        logger.info(
            "[USER] %s created (jurisdiction=%s, wallet=%s)",
            request.farcaster_id,
            request.jurisdiction,
            "provided" if request.wallet_address else "not provided",
        )
        return profile

    def get(
        self,
        farcaster_id: Optional[str] = None,
        wallet_address: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Stored profile when known, otherwise a sample profile."""
        if farcaster_id and farcaster_id in self._profiles:
            return self._profiles[farcaster_id]
        if wallet_address:
            for profile in self._profiles.values():
                if (profile.get("walletAddress") or "").lower() == wallet_address.lower():
                    return profile

        now = datetime.now(timezone.utc)
        return {
            "farcasterId": farcaster_id or "unknown",
            "walletAddress": wallet_address,
            "jurisdiction": DEFAULT_JURISDICTION,
            "createdAt": (now - timedelta(days=30)).isoformat(),
            "lastActive": now.isoformat(),
            "preferences": UserPreferences().to_api(),
            "usage": {
                "queriesUsed": 15,
                "templatesGenerated": 3,
                "totalSpent": 0.15,
                "favoriteCategories": ["employment", "tenant-rights"],
            },
            "subscription": {
                "type": "pay-per-use",
                "status": "active",
                "balance": 0.05,
            },
        }

    def update(self, request: UserUpdateRequest) -> Dict[str, Any]:
        preferences = request.preferences or UserPreferences()
        profile = self._profiles.setdefault(
            request.farcaster_id,
            {"farcasterId": request.farcaster_id, "createdAt": _now()},
        )
        profile.update(
            {
                "jurisdiction": request.jurisdiction,
                "preferences": preferences.to_api(),
                "updatedAt": _now(),
            }
        )
        logger.info("[USER] %s preferences updated (jurisdiction=%s)", request.farcaster_id, request.jurisdiction)
        return profile

    def clear(self) -> None:
        self._profiles.clear()


user_directory = UserDirectory()
