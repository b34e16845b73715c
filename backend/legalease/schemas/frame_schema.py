"""Farcaster Frame webhook payloads and responses."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import Field, field_validator

from ..constants import FRAME_ASPECT_RATIO, FRAME_MAX_BUTTONS
from .base import CamelModel


class CastId(CamelModel):
    fid: int
    hash: str


class UntrustedData(CamelModel):
    """Client-supplied, unverified interaction data."""

    fid: int = 0
    url: str = ""
    message_hash: str = ""
    timestamp: int = 0
    network: int = 1
    button_index: int = 1
    input_text: Optional[str] = None
    cast_id: Optional[CastId] = None

    @field_validator("button_index", mode="before")
    @classmethod
    def coerce_button_index(cls, v):
        # Clients occasionally send the index as a string.
        try:
            return int(v)
        except (TypeError, ValueError):
            return 0


class TrustedData(CamelModel):
    message_bytes: str = ""


class FrameRequest(CamelModel):
    untrusted_data: Optional[UntrustedData] = None
    trusted_data: TrustedData = Field(default_factory=TrustedData)


class FrameButton(CamelModel):
    label: str
    action: Optional[Literal["post", "post_redirect", "link", "mint"]] = None
    target: Optional[str] = None


class FrameInput(CamelModel):
    text: str


class FrameResponse(CamelModel):
    type: Literal["frame"] = "frame"
    frame_url: str
    state: str
    image: str
    buttons: List[FrameButton] = Field(default_factory=list, max_length=FRAME_MAX_BUTTONS)
    input: Optional[FrameInput] = None
    post_url: Optional[str] = None
    aspect_ratio: str = FRAME_ASPECT_RATIO
