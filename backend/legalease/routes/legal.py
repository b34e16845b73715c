"""Legal advice routes.

Endpoints:
  POST /api/legal-advice   Plain advice for a query
  POST /api/advice         Advice (contextual when context is given) + query analysis
  GET  /api/advice         Legal categories catalog
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, status

from ..agents.legal_agent.generator import (
    LegalAgentError,
    analyze_legal_query,
    generate_contextual_advice,
    generate_legal_advice,
)
from ..constants import ADVICE_DISCLAIMER, LEGAL_CATEGORIES
from ..errors import AI_UNAVAILABLE, GENERATION_ERROR, LegalEaseError, ensure_valid
from ..services.validators import validate_advice_request, validate_legal_query_request

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Legal Advice"],
)


@router.post("/legal-advice", summary="Generate plain-language legal advice")
async def legal_advice(payload: Dict[str, Any] = Body(...)):
    request = ensure_valid(validate_legal_query_request(payload), "Invalid legal query")

    try:
        advice = await generate_legal_advice(request.query, request.jurisdiction)
    except LegalAgentError as exc:
        logger.error("[ADVICE] Generation failed: %s", exc)
        raise LegalEaseError(GENERATION_ERROR, str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info("[ADVICE] Advice served for jurisdiction=%s", request.jurisdiction)
    return {"success": True, "data": advice.to_api()}


@router.post("/advice", summary="Advice with query analysis and disclaimer")
async def advice(payload: Dict[str, Any] = Body(...)):
    request = ensure_valid(validate_advice_request(payload), "Invalid request data")

    if request.context is not None:
        generation = generate_contextual_advice(
            request.query,
            request.jurisdiction,
            previous_queries=request.context.previous_queries,
            user_type=request.context.user_type,
            urgency=request.context.urgency,
        )
    else:
        generation = generate_legal_advice(request.query, request.jurisdiction)

    try:
        analysis, result = await asyncio.gather(analyze_legal_query(request.query), generation)
    except LegalAgentError as exc:
        logger.error("[ADVICE] Generation failed: %s", exc)
        if exc.ai_unavailable:
            raise LegalEaseError(
                AI_UNAVAILABLE,
                "AI service temporarily unavailable",
                status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        raise LegalEaseError(GENERATION_ERROR, str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info(
        "[ADVICE] Query from user %s: category=%s complexity=%s jurisdiction=%s",
        request.user_id,
        analysis.category,
        analysis.complexity,
        request.jurisdiction,
    )
    return {
        "success": True,
        "data": {
            **result.to_api(),
            "analysis": analysis.to_api(),
            "disclaimer": ADVICE_DISCLAIMER,
        },
    }


@router.get("/advice", summary="List legal categories")
async def advice_categories():
    return {"success": True, "categories": LEGAL_CATEGORIES}
