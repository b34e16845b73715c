"""Farcaster Frame state machine.

The frame is stateless between posts: the tapped button index and the
input text alone decide the next state.

  button 1  ask a question (awaiting-query / showing-advice / error)
  button 2  showing-topics
  button 3  showing-templates
  button 4  showing-payment
  other     home
"""

from __future__ import annotations

import html
import logging
from typing import Dict, List, Optional
from urllib.parse import urlencode

from ..agents.legal_agent.generator import LegalAgentError, generate_legal_advice
from ..config import get_app_url
from ..constants import (
    DEFAULT_JURISDICTION,
    ERROR_MESSAGES,
    FRAME_MAX_BUTTONS,
    FRAME_MAX_INPUT_LENGTH,
    QUERY_MIN_LENGTH,
)
from ..schemas.frame_schema import FrameButton, FrameInput, FrameRequest, FrameResponse
from ..schemas.legal_schema import LegalAdviceResponse
from .sanitizer import sanitize_input

logger = logging.getLogger(__name__)

HOME = "home"
AWAITING_QUERY = "awaiting-query"
SHOWING_TOPICS = "showing-topics"
SHOWING_ADVICE = "showing-advice"
SHOWING_TEMPLATES = "showing-templates"
SHOWING_PAYMENT = "showing-payment"
ERROR = "error"

# state -> (public page path, OG image path)
STATE_PATHS: Dict[str, tuple] = {
    HOME: ("/", "/api/og/welcome"),
    AWAITING_QUERY: ("/query", "/api/og/query"),
    SHOWING_TOPICS: ("/topics", "/api/og/topics"),
    SHOWING_ADVICE: ("/advice", "/api/og/advice"),
    SHOWING_TEMPLATES: ("/templates", "/api/og/templates"),
    SHOWING_PAYMENT: ("/payment", "/api/og/payment"),
    ERROR: ("/error", "/api/og/error"),
}

STATE_BUTTONS: Dict[str, List[str]] = {
    HOME: ["Get Legal Advice", "Browse Topics", "Templates", "Premium Help"],
    AWAITING_QUERY: ["Submit Question", "Browse Topics", "Templates", "Premium Help"],
    SHOWING_TOPICS: ["Ask a Question", "Refresh Topics", "Templates", "Premium Help"],
    SHOWING_ADVICE: ["Ask Another", "Browse Topics", "Get Template", "Premium Help"],
    SHOWING_TEMPLATES: ["Ask a Question", "Browse Topics", "More Templates", "Premium Help"],
    SHOWING_PAYMENT: ["Ask a Question", "Browse Topics", "Templates", "Pay with ETH"],
    ERROR: ["Try Again", "Browse Topics", "Templates", "Premium Help"],
}

STATE_INPUTS: Dict[str, str] = {
    HOME: "Describe your legal situation...",
    AWAITING_QUERY: "Describe your legal issue (min 10 characters)",
    SHOWING_ADVICE: "Ask a follow-up question...",
    ERROR: "Describe your legal situation...",
}

ADVICE_SUMMARY_CHARS = 200
ADVICE_IMAGE_STEPS = 3


def post_url() -> str:
    return f"{get_app_url()}/api/frame"


def _buttons(state: str) -> List[FrameButton]:
    labels = STATE_BUTTONS[state][:FRAME_MAX_BUTTONS]
    buttons = [FrameButton(label=label, action="post") for label in labels]
    if state == SHOWING_PAYMENT:
        buttons[-1] = FrameButton(
            label=labels[-1],
            action="link",
            target=f"{get_app_url()}/payment",
        )
    return buttons


def build_frame(state: str, image_params: Optional[Dict[str, object]] = None) -> FrameResponse:
    app_url = get_app_url()
    page_path, image_path = STATE_PATHS[state]
    image = f"{app_url}{image_path}"
    if image_params:
        image = f"{image}?{urlencode(image_params, doseq=True)}"

    input_text = STATE_INPUTS.get(state)
    return FrameResponse(
        frame_url=f"{app_url}{page_path}",
        state=state,
        image=image,
        buttons=_buttons(state),
        input=FrameInput(text=input_text) if input_text else None,
        post_url=post_url(),
    )


def home_frame() -> FrameResponse:
    return build_frame(HOME)


def error_frame(message: str) -> FrameResponse:
    return build_frame(ERROR, {"message": message})


def advice_frame(advice: LegalAdviceResponse) -> FrameResponse:
    params = {
        "summary": advice.summary[:ADVICE_SUMMARY_CHARS],
        "step": advice.action_steps[:ADVICE_IMAGE_STEPS],
    }
    return build_frame(SHOWING_ADVICE, params)


async def _answer_query(input_text: Optional[str]) -> FrameResponse:
    if not input_text or not input_text.strip():
        return build_frame(AWAITING_QUERY)

    if len(input_text.strip()) < QUERY_MIN_LENGTH:
        return error_frame(ERROR_MESSAGES["INVALID_INPUT"])

    query = sanitize_input(input_text, max_length=FRAME_MAX_INPUT_LENGTH)
    if len(query) < QUERY_MIN_LENGTH:
        return error_frame(ERROR_MESSAGES["INVALID_INPUT"])

    try:
        advice = await generate_legal_advice(query, DEFAULT_JURISDICTION)
    except LegalAgentError as exc:
        logger.error("[FRAME] Advice generation failed: %s", exc)
        return error_frame(ERROR_MESSAGES["ADVICE_FAILED"])

    return advice_frame(advice)


async def handle_frame_action(request: FrameRequest) -> FrameResponse:
    """Next frame for a webhook post. `request.untrusted_data` must be set."""
    data = request.untrusted_data
    logger.info("[FRAME] fid=%s button=%s", data.fid, data.button_index)

    if data.button_index == 1:
        return await _answer_query(data.input_text)
    if data.button_index == 2:
        return build_frame(SHOWING_TOPICS)
    if data.button_index == 3:
        return build_frame(SHOWING_TEMPLATES)
    if data.button_index == 4:
        return build_frame(SHOWING_PAYMENT)
    return home_frame()


# ── HTML embedding ──────────────────────────────────────────────────────

def render_frame_meta(frame: FrameResponse) -> str:
    """fc:frame meta tags for a frame, one per line."""

    def meta(prop: str, content: str) -> str:
        return f'<meta property="{prop}" content="{html.escape(content, quote=True)}" />'

    tags = [
        meta("fc:frame", "vNext"),
        meta("fc:frame:image", frame.image),
        meta("fc:frame:image:aspect_ratio", frame.aspect_ratio),
    ]
    if frame.input:
        tags.append(meta("fc:frame:input:text", frame.input.text))
    for index, button in enumerate(frame.buttons, start=1):
        tags.append(meta(f"fc:frame:button:{index}", button.label))
        if button.action:
            tags.append(meta(f"fc:frame:button:{index}:action", button.action))
        if button.target:
            tags.append(meta(f"fc:frame:button:{index}:target", button.target))
    if frame.post_url:
        tags.append(meta("fc:frame:post_url", frame.post_url))
    return "\n".join(tags)


def render_frame_html(frame: FrameResponse, title: str = "LegalEase Frame") -> str:
    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8" />
<title>{html.escape(title)}</title>
<meta property="og:title" content="{html.escape(title, quote=True)}" />
<meta property="og:image" content="{html.escape(frame.image, quote=True)}" />
{render_frame_meta(frame)}
</head>
<body></body>
</html>
"""
