"""Mock user profile routes.

Endpoints:
  POST /api/user   Create a profile
  GET  /api/user   Fetch by farcasterId or walletAddress
  PUT  /api/user   Update jurisdiction and preferences
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Query

from ..errors import ensure_valid, missing_parameter
from ..services.user_service import user_directory
from ..services.validators import validate_user_create_request, validate_user_update_request

router = APIRouter(
    prefix="/api/user",
    tags=["User"],
)


@router.post("", summary="Create a user profile")
async def create_user(payload: Dict[str, Any] = Body(...)):
    request = ensure_valid(validate_user_create_request(payload), "Invalid user data")
    return {"success": True, "data": user_directory.create(request)}


@router.get("", summary="Get a user profile")
async def get_user(
    farcaster_id: Optional[str] = Query(None, alias="farcasterId"),
    wallet_address: Optional[str] = Query(None, alias="walletAddress"),
):
    if not farcaster_id and not wallet_address:
        raise missing_parameter("Either farcasterId or walletAddress is required")
    return {"success": True, "data": user_directory.get(farcaster_id, wallet_address)}


@router.put("", summary="Update user preferences")
async def update_user(payload: Dict[str, Any] = Body(...)):
    request = ensure_valid(validate_user_update_request(payload), "Invalid user data")
    return {
        "success": True,
        "data": user_directory.update(request),
        "message": "User preferences updated successfully",
    }
