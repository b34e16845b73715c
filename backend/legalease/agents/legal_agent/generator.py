"""Legal generators: OpenAI-powered, jurisdiction-aware.

Uses the centralized OpenAI client (`call_openai_chat_async`) for a single
completion per task. The raw reply is normalized against the locked
schemas in `schema.py`.

Failure contract:
  - advice, document analysis and contextual advice degrade to a
    truncated-text reply when the AI output cannot be parsed, and raise a
    LegalAgentError subclass when the AI call itself fails.
  - templates raise TemplateGenerationError on any failure.
  - query classification never raises.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, List, Optional

from ...schemas.legal_schema import LegalAdviceResponse, QueryAnalysis, Template
from ...services.openai_client import OpenAIClientError, call_openai_chat_async
from ...services.sanitizer import sanitize_input
from .normalizer import normalize_advice, normalize_classification, normalize_template
from .prompts import (
    ADVICE_SETTINGS,
    CLASSIFICATION_SETTINGS,
    CONTEXTUAL_SETTINGS,
    DOCUMENT_SETTINGS,
    TEMPLATE_SETTINGS,
    build_advice_messages,
    build_classification_messages,
    build_contextual_messages,
    build_document_messages,
    build_template_messages,
)
from .rules import canonical_template_type, merge_variables, resolve_jurisdiction

logger = logging.getLogger(__name__)


class LegalAgentError(RuntimeError):
    """Base class for generator failures.

    `ai_unavailable` is True when the completion endpoint could not be
    reached or no API key is configured.
    """

    default_message = "Legal generation failed"

    def __init__(self, message: Optional[str] = None, *, ai_unavailable: bool = False) -> None:
        super().__init__(message or self.default_message)
        self.ai_unavailable = ai_unavailable


class AdviceGenerationError(LegalAgentError):
    default_message = "Failed to generate legal advice"


class ContextualAdviceError(AdviceGenerationError):
    default_message = "Failed to generate contextual legal advice"


class TemplateGenerationError(LegalAgentError):
    default_message = "Failed to generate legal template"


class DocumentAnalysisError(LegalAgentError):
    default_message = "Failed to analyze legal document"


async def _complete(messages, settings, error_cls) -> str:
    temperature, max_tokens = settings
    try:
        return await call_openai_chat_async(
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
        )
    except (EnvironmentError, OpenAIClientError) as exc:
        logger.error("[LEGAL] %s: %s", error_cls.default_message, exc)
        raise error_cls(ai_unavailable=True) from exc


def _to_response(output, jurisdiction_code: str, with_templates: bool) -> LegalAdviceResponse:
    return LegalAdviceResponse(
        summary=output.summary,
        action_steps=output.action_steps,
        relevant_laws=output.relevant_laws,
        sources=output.sources,
        templates=[] if with_templates else None,
        jurisdiction=jurisdiction_code,
    )


async def generate_legal_advice(query: str, jurisdiction: str) -> LegalAdviceResponse:
    """Plain-language advice for a query in a jurisdiction.

    Raises
    ------
    AdviceGenerationError
        If the completion call fails. Unparseable replies degrade instead.
    """
    context = resolve_jurisdiction(jurisdiction)
    clean_query = sanitize_input(query)
    logger.info("[LEGAL] Generating advice for jurisdiction=%s", context.code)

    messages = build_advice_messages(query=clean_query, jurisdiction=context)
    raw = await _complete(messages, ADVICE_SETTINGS, AdviceGenerationError)

    output = normalize_advice(raw, task="advice")
    logger.info("[LEGAL] Advice generated: %d steps", len(output.action_steps))
    return _to_response(output, context.code, with_templates=False)


async def generate_legal_template(
    template_type: str,
    context: str,
    jurisdiction: str,
    customizations: Optional[Dict[str, str]] = None,
) -> Template:
    """Generate a document template with [PLACEHOLDER] fields.

    Raises
    ------
    TemplateGenerationError
        If the completion call fails or the reply has no usable content.
    """
    canonical_type = canonical_template_type(template_type)
    ctx = resolve_jurisdiction(jurisdiction)
    logger.info("[LEGAL] Generating template %r for jurisdiction=%s", canonical_type, ctx.code)

    messages = build_template_messages(
        template_type=canonical_type,
        context=sanitize_input(context),
        jurisdiction=ctx,
        customizations=customizations,
    )
    raw = await _complete(messages, TEMPLATE_SETTINGS, TemplateGenerationError)

    try:
        output = normalize_template(raw)
    except ValueError as exc:
        logger.error("[LEGAL] Template reply rejected: %s", exc)
        raise TemplateGenerationError() from exc

    variables: List[str] = merge_variables(output.variable_names(), output.content)
    template = Template(
        id=f"template_{int(time.time() * 1000)}",
        title=output.title or canonical_type,
        content=output.content,
        usage_context=output.usage_context,
        jurisdiction=ctx.code,
        variables=variables,
    )
    logger.info("[LEGAL] Template generated with %d variables", len(variables))
    return template


async def analyze_legal_document(
    document_text: str,
    jurisdiction: str,
    document_type: Optional[str] = None,
    analysis_type: str = "full",
) -> LegalAdviceResponse:
    """AI reading of a document. Only the first 2000 characters are sent.

    Raises
    ------
    DocumentAnalysisError
        If the completion call fails.
    """
    ctx = resolve_jurisdiction(jurisdiction)
    logger.info(
        "[LEGAL] Analyzing document (%d chars, type=%s) for jurisdiction=%s",
        len(document_text),
        analysis_type,
        ctx.code,
    )

    messages = build_document_messages(
        document_text=document_text,
        jurisdiction=ctx,
        document_type=document_type,
        analysis_type=analysis_type,
    )
    raw = await _complete(messages, DOCUMENT_SETTINGS, DocumentAnalysisError)
    output = normalize_advice(raw, task="document")
    return _to_response(output, ctx.code, with_templates=True)


async def generate_contextual_advice(
    query: str,
    jurisdiction: str,
    previous_queries: Optional[List[str]] = None,
    user_type: Optional[str] = None,
    urgency: Optional[str] = None,
) -> LegalAdviceResponse:
    """Advice tailored to previous queries, user type and urgency.

    Raises
    ------
    ContextualAdviceError
        If the completion call fails.
    """
    ctx = resolve_jurisdiction(jurisdiction)
    logger.info(
        "[LEGAL] Generating contextual advice (urgency=%s, user_type=%s)", urgency, user_type
    )

    messages = build_contextual_messages(
        query=sanitize_input(query),
        jurisdiction=ctx,
        previous_queries=[sanitize_input(q) for q in (previous_queries or [])],
        user_type=user_type,
        urgency=urgency,
    )
    raw = await _complete(messages, CONTEXTUAL_SETTINGS, ContextualAdviceError)
    output = normalize_advice(raw, task="contextual")
    return _to_response(output, ctx.code, with_templates=True)


async def analyze_legal_query(query: str) -> QueryAnalysis:
    """Best-effort classification of a query. Never raises."""
    temperature, max_tokens = CLASSIFICATION_SETTINGS
    raw: Optional[str] = None
    try:
        raw = await call_openai_chat_async(
            messages=build_classification_messages(query=sanitize_input(query)),
            temperature=temperature,
            max_tokens=max_tokens,
        )
    except (EnvironmentError, OpenAIClientError) as exc:
        logger.warning("[LEGAL] Query classification unavailable: %s", exc)

    output = normalize_classification(raw)
    return QueryAnalysis(
        category=output.category,
        complexity=output.complexity,
        requires_attorney=output.requires_attorney,
        suggested_templates=output.suggested_templates,
    )
