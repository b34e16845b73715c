"""OG image routes. Every endpoint returns a 1200x630 PNG.

Endpoints:
  GET /api/og                   Welcome card
  GET /api/og/{card}            welcome, query, topics, payment, templates
  GET /api/og/advice?summary=&step=
  GET /api/og/error?message=
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, Response, status

from ..services.og_images import CARDS, advice_card, error_card, render_card, welcome_card

router = APIRouter(
    prefix="/api/og",
    tags=["Images"],
)

_CACHE_HEADERS = {"Cache-Control": "public, max-age=300"}


def _png(data: bytes) -> Response:
    return Response(content=data, media_type="image/png", headers=_CACHE_HEADERS)


@router.get("", summary="Default card")
async def og_default():
    return _png(render_card(welcome_card()))


@router.get("/advice", summary="Advice card")
async def og_advice(
    summary: Optional[str] = Query(None, max_length=1000),
    step: Optional[List[str]] = Query(None),
):
    return _png(render_card(advice_card(summary, step)))


@router.get("/error", summary="Error card")
async def og_error(message: Optional[str] = Query(None, max_length=500)):
    return _png(render_card(error_card(message)))


@router.get("/{card}", summary="Static card")
async def og_card(card: str):
    factory = CARDS.get(card)
    if factory is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown image {card!r}")
    return _png(render_card(factory()))
