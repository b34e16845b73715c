"""Legal template routes.

Endpoints:
  POST /api/templates   Generate a template with the AI generator
  GET  /api/templates   Static catalog (category filter, pagination)
  PUT  /api/templates   Fill a catalog template's preview placeholders
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Query, status

from ..agents.legal_agent.generator import LegalAgentError, generate_legal_template
from ..agents.legal_agent.rules import extract_placeholders, fill_placeholders, get_catalog_template
from ..constants import (
    DEFAULT_CURRENCY,
    TEMPLATE_CATALOG,
    TEMPLATE_CATEGORIES,
    TEMPLATE_DISCLAIMER,
    TEMPLATE_GENERATION_COST,
    TEMPLATE_INSTRUCTIONS,
    TEMPLATE_PAGE_DEFAULT,
    TEMPLATE_PAGE_MAX,
)
from ..errors import (
    AI_UNAVAILABLE,
    GENERATION_ERROR,
    TEMPLATE_NOT_FOUND,
    LegalEaseError,
    ensure_valid,
)
from ..services.sanitizer import sanitize_input
from ..services.validators import validate_template_customize_request, validate_template_request

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/templates",
    tags=["Templates"],
)


@router.post("", summary="Generate a legal template")
async def create_template(payload: Dict[str, Any] = Body(...)):
    request = ensure_valid(validate_template_request(payload), "Invalid template request")
    customizations = {
        key: sanitize_input(value) for key, value in (request.customizations or {}).items()
    }

    try:
        template = await generate_legal_template(
            request.template_type,
            request.context,
            request.jurisdiction,
            customizations=customizations or None,
        )
    except LegalAgentError as exc:
        logger.error("[TEMPLATES] Generation failed: %s", exc)
        if exc.ai_unavailable:
            raise LegalEaseError(
                AI_UNAVAILABLE,
                "AI service temporarily unavailable",
                status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        raise LegalEaseError(GENERATION_ERROR, str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info("[TEMPLATES] Generated %s (%s)", template.id, request.template_type)
    return {
        "success": True,
        "data": {
            "templateId": template.id,
            "templateType": request.template_type,
            "jurisdiction": template.jurisdiction,
            "title": template.title,
            "content": template.content,
            "usageContext": template.usage_context,
            "variables": template.variables,
            "customizations": customizations,
            "disclaimer": TEMPLATE_DISCLAIMER,
            "instructions": TEMPLATE_INSTRUCTIONS,
            "pricing": {"amount": TEMPLATE_GENERATION_COST, "currency": DEFAULT_CURRENCY},
            "generatedAt": datetime.now(timezone.utc).isoformat(),
        },
    }


@router.get("", summary="Browse the template catalog")
async def list_templates(
    category: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(TEMPLATE_PAGE_DEFAULT, ge=1, le=TEMPLATE_PAGE_MAX),
):
    templates = TEMPLATE_CATALOG
    if category:
        templates = [t for t in templates if t["category"] == category]

    total = len(templates)
    start = (page - 1) * limit
    return {
        "success": True,
        "data": {
            "templates": templates[start : start + limit],
            "categories": TEMPLATE_CATEGORIES,
            "pagination": {
                "page": page,
                "limit": limit,
                "total": total,
                "totalPages": math.ceil(total / limit) if total else 0,
            },
        },
    }


@router.put("", summary="Customize a catalog template")
async def customize_template(payload: Dict[str, Any] = Body(...)):
    request = ensure_valid(validate_template_customize_request(payload), "Invalid template request")

    entry = get_catalog_template(request.template_id)
    if entry is None:
        raise LegalEaseError(
            TEMPLATE_NOT_FOUND,
            f"Template '{request.template_id}' not found",
            status.HTTP_404_NOT_FOUND,
        )

    values = {k: sanitize_input(v) for k, v in request.variables.items()}
    content = fill_placeholders(entry["preview"], values)
    missing = extract_placeholders(content)

    logger.info("[TEMPLATES] Customized %s (%d unfilled)", entry["id"], len(missing))
    return {
        "success": True,
        "data": {
            "templateId": entry["id"],
            "name": entry["name"],
            "content": content,
            "missingVariables": missing,
            "disclaimer": TEMPLATE_DISCLAIMER,
        },
        "message": "Template customized successfully",
    }
