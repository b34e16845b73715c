"""Open Graph / Frame cards rendered with Pillow.

Every card is a 1200x630 PNG: a header with an accent badge and title, an
optional text panel, and a row of chips.
"""

from __future__ import annotations

import io
import textwrap
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional, Sequence

from PIL import Image, ImageDraw, ImageFont

from ..constants import DEFAULT_CURRENCY, LEGAL_TOPICS, OG_IMAGE_SIZE, TEMPLATE_CATALOG

BACKGROUND = (240, 242, 245)
TEXT = (43, 48, 59)
MUTED = (100, 108, 122)
WHITE = (255, 255, 255)

ACCENT_BLUE = (59, 130, 246)
ACCENT_GREEN = (92, 184, 122)
ACCENT_RED = (220, 76, 76)
ACCENT_AMBER = (234, 170, 60)
ACCENT_PURPLE = (139, 92, 246)

MAX_PANEL_CHARS = 600


@dataclass
class Card:
    title: str
    accent: tuple
    badge: str = ""
    subtitle: str = ""
    body: str = ""
    chips: List[str] = field(default_factory=list)


@lru_cache(maxsize=8)
def _font(size: int) -> ImageFont.ImageFont:
    return ImageFont.load_default(size=size)


def _text_width(draw: ImageDraw.ImageDraw, text: str, font) -> int:
    left, _, right, _ = draw.textbbox((0, 0), text, font=font)
    return int(right - left)


def _centered(draw: ImageDraw.ImageDraw, y: int, text: str, font, fill) -> None:
    width = OG_IMAGE_SIZE[0]
    draw.text(((width - _text_width(draw, text, font)) // 2, y), text, font=font, fill=fill)


def _draw_chips(draw: ImageDraw.ImageDraw, chips: Sequence[str], y: int, accent: tuple) -> None:
    font = _font(22)
    pad_x, gap, height = 18, 16, 44
    widths = [_text_width(draw, c, font) + 2 * pad_x for c in chips]
    total = sum(widths) + gap * (len(chips) - 1)
    x = max((OG_IMAGE_SIZE[0] - total) // 2, 40)
    for chip, w in zip(chips, widths):
        draw.rounded_rectangle((x, y, x + w, y + height), radius=22, fill=WHITE, outline=accent, width=2)
        draw.text((x + pad_x, y + 10), chip, font=font, fill=TEXT)
        x += w + gap


def render_card(card: Card) -> bytes:
    """Render a card to PNG bytes."""
    width, height = OG_IMAGE_SIZE
    image = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(image)

    draw.rectangle((0, 0, width, 12), fill=card.accent)

    y = 70
    if card.badge:
        badge_font = _font(40)
        size = 72
        x0 = (width - size) // 2
        draw.rounded_rectangle((x0, y, x0 + size, y + size), radius=14, fill=card.accent)
        bw = _text_width(draw, card.badge, badge_font)
        draw.text((x0 + (size - bw) // 2, y + 12), card.badge, font=badge_font, fill=WHITE)
        y += size + 30

    _centered(draw, y, card.title, _font(52), TEXT)
    y += 72

    if card.subtitle:
        _centered(draw, y, card.subtitle, _font(28), MUTED)
        y += 50

    if card.body:
        body_font = _font(24)
        lines = textwrap.wrap(card.body[:MAX_PANEL_CHARS], width=70)[:6]
        panel_h = 36 * len(lines) + 40
        draw.rounded_rectangle(
            (150, y, width - 150, y + panel_h), radius=12, fill=WHITE, outline=card.accent, width=2
        )
        for i, line in enumerate(lines):
            _centered(draw, y + 20 + i * 36, line, body_font, TEXT)
        y += panel_h + 30

    if card.chips:
        _draw_chips(draw, card.chips[:5], min(y, height - 80), card.accent)

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


# ── Card catalog ────────────────────────────────────────────────────────

def welcome_card() -> Card:
    return Card(
        title="LegalEase",
        badge="L",
        accent=ACCENT_BLUE,
        subtitle="Plain-language legal help, right in your feed",
        chips=["Ask a Question", "Browse Topics", "Templates", "Premium Help"],
    )


def query_card() -> Card:
    return Card(
        title="Describe Your Legal Issue",
        badge="?",
        accent=ACCENT_BLUE,
        subtitle="Type your question below (at least 10 characters)",
        body="Example: My landlord kept my security deposit without explanation. What can I do?",
    )


def topics_card() -> Card:
    return Card(
        title="Browse Legal Topics",
        badge="#",
        accent=ACCENT_PURPLE,
        subtitle="Pick an area to learn more",
        chips=list(LEGAL_TOPICS),
    )


def advice_card(summary: Optional[str] = None, steps: Optional[Sequence[str]] = None) -> Card:
    steps = [s for s in (steps or []) if s][:3]
    body = summary or "Legal advice generated successfully"
    if steps:
        body += "  Next steps: " + "; ".join(steps)
    return Card(
        title="Legal Advice Generated",
        badge="+",
        accent=ACCENT_GREEN,
        body=body,
        subtitle="General information only, not legal advice",
    )


def error_card(message: Optional[str] = None) -> Card:
    return Card(
        title="Something Went Wrong",
        badge="!",
        accent=ACCENT_RED,
        body=message or "Sorry, we encountered an error processing your request. Please try again.",
    )


def payment_card() -> Card:
    return Card(
        title="Premium Legal Help",
        badge="$",
        accent=ACCENT_AMBER,
        subtitle=f"Pay per use in {DEFAULT_CURRENCY} on Base",
        chips=["Advice 0.01", "Templates 0.05", "Analysis 0.10"],
    )


def templates_card() -> Card:
    return Card(
        title="Legal Templates",
        badge="T",
        accent=ACCENT_PURPLE,
        subtitle="Ready-to-fill documents",
        chips=[t["name"] for t in TEMPLATE_CATALOG[:4]],
    )


CARDS = {
    "welcome": welcome_card,
    "query": query_card,
    "topics": topics_card,
    "payment": payment_card,
    "templates": templates_card,
}
