"""OG image tests: every card is a 1200x630 PNG."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from legalease.main import app
from legalease.services.og_images import advice_card, error_card, render_card

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"

client = TestClient(app)


def _size(data: bytes):
    with Image.open(io.BytesIO(data)) as image:
        return image.size


class TestRender:
    def test_advice_card_png(self):
        data = render_card(advice_card("You may be owed your deposit.", ["Write a letter", "File a claim"]))
        assert data.startswith(PNG_MAGIC)
        assert _size(data) == (1200, 630)

    def test_long_error_message_still_renders(self):
        data = render_card(error_card("x" * 5000))
        assert _size(data) == (1200, 630)


class TestRoutes:
    @pytest.mark.parametrize(
        "path",
        [
            "/api/og",
            "/api/og/welcome",
            "/api/og/query",
            "/api/og/topics",
            "/api/og/payment",
            "/api/og/templates",
            "/api/og/error?message=Something%20failed",
            "/api/og/advice?summary=Short%20summary&step=One&step=Two",
        ],
    )
    def test_cards(self, path):
        response = client.get(path)
        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        assert response.content.startswith(PNG_MAGIC)
        assert _size(response.content) == (1200, 630)

    def test_advice_without_params(self):
        response = client.get("/api/og/advice")
        assert response.status_code == 200

    def test_unknown_card_is_404(self):
        assert client.get("/api/og/nonexistent").status_code == 404
