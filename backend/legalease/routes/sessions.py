"""Session routes.

Endpoints:
  POST   /api/sessions                 Create a session
  GET    /api/sessions?sessionId=...   Session summary with the last 5 queries
  PUT    /api/sessions                 Record a query against a session
  DELETE /api/sessions?sessionId=...   Delete a session
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Query

from ..errors import ensure_valid, missing_parameter, session_not_found, validation_error
from ..schemas.session_schema import UserSession
from ..services.sanitizer import truncate_text
from ..services.session_store import session_store
from ..services.validators import validate_session_request, validate_session_update_request

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/sessions",
    tags=["Sessions"],
)

RECENT_QUERIES = 5
QUERY_PREVIEW_CHARS = 100


def _session_summary(session: UserSession) -> Dict[str, Any]:
    return {
        "id": session.id,
        "jurisdiction": session.jurisdiction,
        "totalQueries": len(session.queries),
        "totalSpent": session.total_spent,
        "createdAt": session.created_at.isoformat(),
        "lastActive": session.last_active.isoformat(),
        "recentQueries": [
            {
                "id": q.id,
                "queryString": truncate_text(q.query_string, QUERY_PREVIEW_CHARS),
                "responseType": q.response_type,
                "timestamp": q.timestamp.isoformat(),
                "cost": q.cost,
            }
            for q in session.queries[-RECENT_QUERIES:]
        ],
    }


@router.post("", summary="Create a session")
async def create_session(payload: Dict[str, Any] = Body(...)):
    request = ensure_valid(validate_session_request(payload), "Invalid session request")
    session = session_store.create(
        jurisdiction=request.jurisdiction,
        farcaster_id=request.farcaster_id,
        wallet_address=request.wallet_address,
    )
    return {
        "success": True,
        "data": {
            "sessionId": session.id,
            "jurisdiction": session.jurisdiction,
            "createdAt": session.created_at.isoformat(),
        },
        "message": "Session created successfully",
    }


@router.get("", summary="Get a session")
async def get_session(session_id: Optional[str] = Query(None, alias="sessionId")):
    if not session_id:
        raise missing_parameter("Session ID is required")
    session = session_store.get(session_id)
    if session is None:
        raise session_not_found()
    return {
        "success": True,
        "data": _session_summary(session),
        "message": "Session retrieved successfully",
    }


@router.put("", summary="Record a query against a session")
async def update_session(payload: Dict[str, Any] = Body(...)):
    request = ensure_valid(
        validate_session_update_request(payload),
        "Session ID and query are required",
    )
    try:
        query = session_store.add_query(
            request.session_id,
            request.query.query_string,
            response_type=request.query.response_type,
            cost=request.cost,
        )
    except ValueError as exc:
        raise validation_error(str(exc))
    if query is None:
        raise session_not_found()

    session = session_store.get(request.session_id)
    return {
        "success": True,
        "data": {
            "queryId": query.id,
            "totalQueries": len(session.queries),
            "totalSpent": session.total_spent,
        },
        "message": "Query added to session successfully",
    }


@router.delete("", summary="Delete a session")
async def delete_session(session_id: Optional[str] = Query(None, alias="sessionId")):
    if not session_id:
        raise missing_parameter("Session ID is required")
    if session_store.delete(session_id) is None:
        raise session_not_found()
    return {"success": True, "message": "Session deleted successfully"}
