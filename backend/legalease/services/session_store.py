"""In-memory session store with a per-session TTL.

Single-process only. Each session records its expiry instant; expired
entries are purged lazily on access, and a fire-and-forget
`loop.call_later` timer removes them when an event loop is running.
"""

from __future__ import annotations

import asyncio
import logging
import math
import time
import uuid
from datetime import datetime, timezone
from typing import Callable, Dict, Optional

from ..config import get_session_ttl_seconds
from ..constants import DEFAULT_QUERY_COST
from ..schemas.session_schema import SessionQuery, UserSession

logger = logging.getLogger(__name__)


def mask_wallet(address: Optional[str]) -> Optional[str]:
    if not address:
        return None
    return f"{address[:6]}...{address[-4:]}"


def generate_id() -> str:
    return uuid.uuid4().hex


class SessionStore:
    """Map of session id to UserSession, each expiring `ttl_seconds` after creation."""

    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._sessions: Dict[str, UserSession] = {}
        self._expires_at: Dict[str, float] = {}
        self._timers: Dict[str, asyncio.TimerHandle] = {}

    @property
    def ttl_seconds(self) -> float:
        return self._ttl if self._ttl is not None else get_session_ttl_seconds()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return isinstance(session_id, str) and self._live(session_id) is not None

    # ── internals ───────────────────────────────────────────────────────

    def _schedule_expiry(self, session_id: str, ttl: float) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop: lazy expiry on access covers it.
            return
        self._timers[session_id] = loop.call_later(ttl, self._expire, session_id)

    def _expire(self, session_id: str) -> None:
        self._timers.pop(session_id, None)
        if self._sessions.pop(session_id, None) is not None:
            self._expires_at.pop(session_id, None)
            logger.info("[SESSION] Expired: %s", session_id)

    def _remove(self, session_id: str) -> Optional[UserSession]:
        timer = self._timers.pop(session_id, None)
        if timer is not None:
            timer.cancel()
        self._expires_at.pop(session_id, None)
        return self._sessions.pop(session_id, None)

    def _live(self, session_id: str) -> Optional[UserSession]:
        session = self._sessions.get(session_id)
        if session is None:
            return None
        if self._clock() >= self._expires_at.get(session_id, float("inf")):
            self._remove(session_id)
            logger.info("[SESSION] Expired: %s", session_id)
            return None
        return session

    # ── public API ──────────────────────────────────────────────────────

    def create(
        self,
        jurisdiction: str,
        farcaster_id: Optional[str] = None,
        wallet_address: Optional[str] = None,
    ) -> UserSession:
        session = UserSession(
            id=generate_id(),
            farcaster_id=farcaster_id,
            wallet_address=wallet_address,
            jurisdiction=jurisdiction,
        )
        ttl = self.ttl_seconds
        self._sessions[session.id] = session
        self._expires_at[session.id] = self._clock() + ttl
        self._schedule_expiry(session.id, ttl)

        logger.info(
            "[SESSION] Created %s (farcaster_id=%s, wallet=%s, jurisdiction=%s)",
            session.id,
            farcaster_id,
            mask_wallet(wallet_address),
            jurisdiction,
        )
        return session

    def get(self, session_id: str) -> Optional[UserSession]:
        session = self._live(session_id)
        if session is not None:
            session.last_active = datetime.now(timezone.utc)
        return session

    def add_query(
        self,
        session_id: str,
        query_string: str,
        response_type: str = "summary",
        cost: Optional[float] = None,
    ) -> Optional[SessionQuery]:
        """Append a query to a live session. Returns None if the session is gone.

        Raises ValueError if the cost would take the running total out of
        the finite range; the session is left unchanged.
        """
        session = self._live(session_id)
        if session is None:
            return None

        cost = DEFAULT_QUERY_COST if cost is None else cost
        total_spent = round(session.total_spent + cost, 8)
        if not math.isfinite(cost) or not math.isfinite(total_spent):
            raise ValueError("Query cost is out of range")

        query = SessionQuery(
            id=generate_id(),
            query_string=query_string,
            jurisdiction=session.jurisdiction,
            response_type=response_type,
            cost=cost,
        )
        session.queries.append(query)
        session.total_spent = total_spent
        session.last_active = datetime.now(timezone.utc)

        logger.info(
            "[SESSION] Query added to %s (type=%s, cost=%s, total_queries=%d, total_spent=%s)",
            session_id,
            query.response_type,
            query.cost,
            len(session.queries),
            session.total_spent,
        )
        return query

    def delete(self, session_id: str) -> Optional[UserSession]:
        if self._live(session_id) is None:
            return None
        session = self._remove(session_id)
        logger.info(
            "[SESSION] Deleted %s (total_queries=%d, total_spent=%s)",
            session_id,
            len(session.queries),
            session.total_spent,
        )
        return session

    def clear(self) -> None:
        for timer in self._timers.values():
            timer.cancel()
        self._timers.clear()
        self._sessions.clear()
        self._expires_at.clear()


session_store = SessionStore()
