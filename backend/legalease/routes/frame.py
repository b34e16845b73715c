"""Farcaster Frame webhook.

Endpoints:
  POST /api/frame                Next frame for a button tap
  GET  /api/frame                Home frame (JSON, or HTML meta tags with ?format=html)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Query, status
from fastapi.responses import HTMLResponse, JSONResponse

from ..constants import ERROR_MESSAGES
from ..services.frame_service import (
    error_frame,
    handle_frame_action,
    home_frame,
    render_frame_html,
)
from ..services.validators import validate_frame_request

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/frame",
    tags=["Frame"],
)


@router.post("", summary="Handle a Frame button tap")
async def frame_action(payload: Dict[str, Any] = Body(...)):
    result = validate_frame_request(payload)
    if not result.is_valid or result.data.untrusted_data is None:
        logger.warning("[FRAME] Invalid frame request: %s", result.errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_frame(ERROR_MESSAGES["INVALID_FRAME"]).to_api(),
        )

    frame = await handle_frame_action(result.data)
    return frame.to_api()


@router.get("", summary="Home frame")
async def frame_home(fmt: Optional[str] = Query(None, alias="format")):
    frame = home_frame()
    if fmt == "html":
        return HTMLResponse(render_frame_html(frame))
    return frame.to_api()
