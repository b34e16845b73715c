"""Input sanitization for user-supplied free text.

Nothing here raises: every function returns a string (possibly empty)
or a bool.
"""

from __future__ import annotations

import re
from typing import Any

from ..constants import SANITIZE_MAX_LENGTH

_SCRIPT_BLOCK_RE = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_HTML_TAG_RE = re.compile(r"<[^>]*>")
_ANGLE_RE = re.compile(r"[<>]")
_JS_PROTOCOL_RE = re.compile(r"javascript:", re.IGNORECASE)
_EVENT_HANDLER_RE = re.compile(r"on\w+\s*=", re.IGNORECASE)

_HARMFUL_PATTERNS = [
    re.compile(p, re.IGNORECASE)
    for p in (
        r"script",
        r"javascript",
        r"vbscript",
        r"onload",
        r"onerror",
        r"onclick",
        r"<iframe",
        r"<object",
        r"<embed",
    )
]


def sanitize_input(text: Any, max_length: int = SANITIZE_MAX_LENGTH) -> str:
    """Strip script/HTML, `javascript:` and `on*=` handlers, then truncate."""
    if not isinstance(text, str):
        return ""
    cleaned = text.strip()
    cleaned = _SCRIPT_BLOCK_RE.sub("", cleaned)
    cleaned = _HTML_TAG_RE.sub("", cleaned)
    cleaned = _ANGLE_RE.sub("", cleaned)
    cleaned = _JS_PROTOCOL_RE.sub("", cleaned)
    cleaned = _EVENT_HANDLER_RE.sub("", cleaned)
    return cleaned.strip()[:max(max_length, 0)]


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def contains_harmful_content(text: str) -> bool:
    return any(p.search(text) for p in _HARMFUL_PATTERNS)
