"""Document analysis routes.

Endpoints:
  POST /api/document-analysis   Analyze a legal document (<= 10,000 chars)
  GET  /api/document-analysis   Available analysis types and base costs
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict

from fastapi import APIRouter, Body, status

from ..agents.legal_agent.generator import LegalAgentError, analyze_legal_document
from ..constants import ANALYSIS_TYPES, DEFAULT_CURRENCY, DOCUMENT_MAX_LENGTH
from ..errors import ANALYSIS_ERROR, DOCUMENT_TOO_LARGE, LegalEaseError, ensure_valid
from ..schemas.legal_schema import (
    ComplianceBlock,
    DocumentAnalysisResponse,
    LegalAdviceResponse,
)
from ..services.heuristics import (
    calculate_analysis_cost,
    calculate_confidence,
    extract_key_points,
    extract_requirements,
    extract_risks,
    extract_violations,
)
from ..services.validators import validate_document_analysis_request

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/document-analysis",
    tags=["Document Analysis"],
)


def analysis_text(advice: LegalAdviceResponse) -> str:
    """Summary, relevant laws and action steps, one item per line."""
    return "\n".join([advice.summary, *advice.relevant_laws, *advice.action_steps])


def build_analysis_response(
    advice: LegalAdviceResponse,
    document_text: str,
    jurisdiction: str,
) -> DocumentAnalysisResponse:
    text = analysis_text(advice)
    return DocumentAnalysisResponse(
        id=uuid.uuid4().hex,
        summary=advice.summary,
        key_points=extract_key_points(text),
        risks=extract_risks(text),
        recommendations=list(advice.action_steps),
        compliance=ComplianceBlock(
            jurisdiction=jurisdiction,
            requirements=extract_requirements(text),
            violations=extract_violations(text),
        ),
        confidence=calculate_confidence(document_text, advice.summary),
    )


@router.post("", summary="Analyze a legal document")
async def analyze_document(payload: Dict[str, Any] = Body(...)):
    document_text = payload.get("documentText")
    if isinstance(document_text, str) and len(document_text) > DOCUMENT_MAX_LENGTH:
        raise LegalEaseError(
            DOCUMENT_TOO_LARGE,
            "Document exceeds maximum length of 10,000 characters",
            status.HTTP_400_BAD_REQUEST,
        )

    request = ensure_valid(
        validate_document_analysis_request(payload),
        "Invalid document analysis request",
    )

    try:
        advice = await analyze_legal_document(
            request.document_text,
            request.jurisdiction,
            document_type=request.document_type,
            analysis_type=request.analysis_type,
        )
    except LegalAgentError as exc:
        logger.error("[DOCUMENT] Analysis failed: %s", exc)
        raise LegalEaseError(ANALYSIS_ERROR, str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

    response = build_analysis_response(advice, request.document_text, request.jurisdiction)
    cost = calculate_analysis_cost(request.analysis_type, len(request.document_text))

    logger.info(
        "[DOCUMENT] %s analysis %s for %s: %d chars, cost=%s, confidence=%s",
        request.analysis_type,
        response.id,
        request.jurisdiction,
        len(request.document_text),
        cost,
        response.confidence,
    )
    return {
        "success": True,
        "data": response.to_api(),
        "cost": cost,
        "message": "Document analyzed successfully",
    }


@router.get("", summary="List analysis types")
async def analysis_types():
    return {
        "success": True,
        "data": {
            "analysisTypes": ANALYSIS_TYPES,
            "maxDocumentLength": DOCUMENT_MAX_LENGTH,
            "currency": DEFAULT_CURRENCY,
        },
    }
