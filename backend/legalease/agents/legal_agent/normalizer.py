"""Turn raw AI reply text into validated objects.

`normalize_advice` never raises: a reply that cannot be parsed degrades to
a truncated-text summary. `normalize_template` raises ValueError instead,
since a template without content is unusable.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Optional

from pydantic import ValidationError

from .rules import canonicalize_placeholders, extract_placeholders
from .schema import AdviceOutput, ClassificationOutput, TemplateOutput

logger = logging.getLogger(__name__)

_TRAILING_COMMA_RE = re.compile(r",\s*([}\]])")

# Degraded reply per task: (prefix length, action step, source label)
FALLBACKS: Dict[str, tuple] = {
    "advice": (300, "Consult with a qualified attorney for specific advice", "Legal information assistant"),
    "document": (400, "Review document with a qualified attorney", "Document analysis assistant"),
    "contextual": (350, "Consult with a qualified attorney for specific advice", "Contextual legal assistant"),
}


def sanitize_json(raw: str) -> str:
    """Extract a JSON object from raw LLM output.

    Handles:
      - Markdown fences (```json ... ```)
      - Leading/trailing whitespace and BOM
      - Prose before/after JSON
      - Trailing commas before } or ]

    Raises ValueError if no JSON object is found.
    """
    text = (raw or "").strip().lstrip("\ufeff")

    if text.startswith("```"):
        parts = text.split("```")
        text = parts[1] if len(parts) >= 3 else text[3:]

    text = text.strip()
    if text.lower().startswith("json"):
        text = text[4:].strip()

    start = text.find("{")
    if start == -1:
        raise ValueError("LLM did not return a JSON object (no '{' found)")
    end = text.rfind("}")
    if end < start:
        raise ValueError("LLM did not return a JSON object (no '}' found)")
    text = text[start : end + 1]

    return _TRAILING_COMMA_RE.sub(r"\1", text)


def parse_json_object(raw: str) -> Dict[str, Any]:
    parsed = json.loads(sanitize_json(raw))
    if not isinstance(parsed, dict):
        raise ValueError("LLM reply is not a JSON object")
    return parsed


def fallback_advice(raw: str, task: str = "advice") -> AdviceOutput:
    limit, step, source = FALLBACKS.get(task, FALLBACKS["advice"])
    return AdviceOutput(
        summary=(raw or "").strip()[:limit] + "...",
        action_steps=[step],
        relevant_laws=[],
        sources=[source],
    )


def normalize_advice(raw: str, task: str = "advice") -> AdviceOutput:
    try:
        return AdviceOutput.model_validate(parse_json_object(raw))
    except (ValueError, ValidationError) as exc:
        # json.JSONDecodeError is a ValueError
        logger.warning("[NORMALIZER] %s reply not parseable, using fallback: %s", task, exc)
        return fallback_advice(raw, task)


def normalize_template(raw: str) -> TemplateOutput:
    """Parse a template reply with placeholders rewritten to [UPPER_SNAKE].

    Raises ValueError when it has no content or no placeholder.
    """
    try:
        output = TemplateOutput.model_validate(parse_json_object(raw))
    except ValidationError as exc:
        raise ValueError(f"Template reply failed validation: {exc}") from exc
    if not output.content:
        raise ValueError("Template reply has no content")
    output.content = canonicalize_placeholders(output.content)
    if not extract_placeholders(output.content):
        raise ValueError("Template reply has no [PLACEHOLDER] fields")
    return output


def normalize_classification(raw: Optional[str]) -> ClassificationOutput:
    if not raw:
        return ClassificationOutput()
    try:
        return ClassificationOutput.model_validate(parse_json_object(raw))
    except (ValueError, ValidationError) as exc:
        logger.warning("[NORMALIZER] classification reply not parseable: %s", exc)
        return ClassificationOutput()
