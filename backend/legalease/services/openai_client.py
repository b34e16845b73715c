"""Centralized OpenAI client.

All legal generators MUST use `call_openai_chat_async()` from this module.
This ensures:
  - API key, base URL, model and timeout are read from env.
  - Temperature and token limits are chosen per task by the caller.
  - JSON response format is requested via response_format.
  - A single attempt: any failure raises OpenAIClientError.
  - Consistent logging across all generators.
"""

from __future__ import annotations

import logging
import os
import time
from typing import Any, Dict, List, Optional

import httpx

from ..config import env_float

logger = logging.getLogger(__name__)

_DEFAULT_BASE_URL = "https://api.openai.com/v1"
_DEFAULT_MODEL = "gpt-4o-mini"


class OpenAIClientError(RuntimeError):
    """The completion endpoint could not produce a usable reply."""


def get_openai_key() -> str:
    """Read OPENAI_API_KEY from the environment. Raises EnvironmentError if missing."""
    key = os.getenv("OPENAI_API_KEY", "").strip()
    if not key:
        logger.warning("[OPENAI] API key missing (OPENAI_API_KEY)")
        raise EnvironmentError("OPENAI_API_KEY environment variable not set")
    return key


def get_openai_model() -> str:
    return os.getenv("OPENAI_MODEL", _DEFAULT_MODEL).strip() or _DEFAULT_MODEL


def get_chat_completions_url() -> str:
    base = os.getenv("OPENAI_BASE_URL", "").strip() or _DEFAULT_BASE_URL
    return f"{base.rstrip('/')}/chat/completions"


def _get_timeout() -> float:
    return env_float("OPENAI_REQUEST_TIMEOUT", 40.0)


def build_payload(
    *,
    model: str,
    messages: List[Dict[str, str]],
    max_tokens: int,
    temperature: float,
) -> Dict[str, Any]:
    """Build an OpenAI chat completions payload.

    Uses:
      - model, messages, max_tokens, temperature
      - response_format: json_object (every legal task expects a JSON reply)
    """
    payload: Dict[str, Any] = {
        "model": model,
        "messages": messages,
        "max_tokens": max_tokens,
        "temperature": temperature,
        "response_format": {"type": "json_object"},
    }
    logger.debug("[OPENAI] Model: %s, tokens requested: %d", model, max_tokens)
    return payload


def _extract_content(data: Any) -> str:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        raise OpenAIClientError("Completion response has no choices")
    return (content or "").strip()


async def call_openai_chat_async(
    *,
    messages: List[Dict[str, str]],
    temperature: float,
    max_tokens: int,
    api_key: Optional[str] = None,
    model: Optional[str] = None,
) -> str:
    """Call the chat completions endpoint and return the raw reply text.

    Raises
    ------
    EnvironmentError
        If no API key is configured.
    OpenAIClientError
        On a non-200 status, timeout, transport error, a reply without
        choices, or empty content.
    """
    if api_key is None:
        api_key = get_openai_key()
    if model is None:
        model = get_openai_model()

    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
    payload = build_payload(
        model=model,
        messages=messages,
        max_tokens=max_tokens,
        temperature=temperature,
    )

    t0 = time.time()
    try:
        logger.info("[OPENAI] Calling %s", model)
        async with httpx.AsyncClient(timeout=_get_timeout()) as client:
            response = await client.post(
                get_chat_completions_url(),
                headers=headers,
                json=payload,
            )
    except httpx.TimeoutException as exc:
        logger.error("[OPENAI] Timeout after %.1fs", time.time() - t0)
        raise OpenAIClientError("Completion request timed out") from exc
    except httpx.HTTPError as exc:
        logger.error("[OPENAI] Transport error: %s", exc)
        raise OpenAIClientError(f"Completion request failed: {exc}") from exc

    logger.info("[OPENAI] HTTP %d (%.1fs)", response.status_code, time.time() - t0)

    if response.status_code != 200:
        logger.error("[OPENAI] Error response: %s", response.text[:400])
        raise OpenAIClientError(f"Completion endpoint returned HTTP {response.status_code}")

    try:
        data = response.json()
    except ValueError as exc:
        raise OpenAIClientError("Completion endpoint returned non-JSON body") from exc

    usage = data.get("usage") if isinstance(data, dict) else None
    if usage:
        logger.debug(
            "[OPENAI] Tokens used: prompt=%s, completion=%s, total=%s",
            usage.get("prompt_tokens", "?"),
            usage.get("completion_tokens", "?"),
            usage.get("total_tokens", "?"),
        )

    content = _extract_content(data)
    if not content:
        logger.warning("[OPENAI] Empty response")
        raise OpenAIClientError("Completion endpoint returned empty content")

    logger.info("[OPENAI] Raw output length: %d chars", len(content))
    return content
