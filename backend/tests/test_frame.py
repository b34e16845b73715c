"""Farcaster Frame tests: state machine, HTML rendering and the webhook route."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import asyncio
from unittest.mock import AsyncMock, patch
from urllib.parse import parse_qs, urlsplit

import pytest
from fastapi.testclient import TestClient

from legalease.agents.legal_agent.generator import AdviceGenerationError
from legalease.constants import ERROR_MESSAGES
from legalease.main import app
from legalease.schemas.frame_schema import FrameRequest
from legalease.schemas.legal_schema import LegalAdviceResponse
from legalease.services.frame_service import (
    STATE_PATHS,
    build_frame,
    handle_frame_action,
    render_frame_html,
)

APP_URL = "https://frame.example.com"
ADVICE_PATCH = "legalease.services.frame_service.generate_legal_advice"

client = TestClient(app)


@pytest.fixture(autouse=True)
def app_url(monkeypatch):
    monkeypatch.setenv("APP_URL", APP_URL + "/")


def _advice(summary="A" * 300, steps=None):
    return LegalAdviceResponse(
        summary=summary,
        action_steps=steps if steps is not None else ["one", "two", "three", "four"],
        relevant_laws=[],
        sources=[],
        jurisdiction="GENERAL",
    )


def _post(button_index, input_text=None):
    data = {"fid": 42, "buttonIndex": button_index}
    if input_text is not None:
        data["inputText"] = input_text
    return FrameRequest.model_validate({"untrustedData": data})


def _act(button_index, input_text=None):
    return asyncio.run(handle_frame_action(_post(button_index, input_text)))


# ---------------------------------------------------------------------------
# State machine
# ---------------------------------------------------------------------------
class TestStateMachine:
    def test_every_state_has_at_most_four_buttons(self):
        for state in STATE_PATHS:
            frame = build_frame(state)
            assert 1 <= len(frame.buttons) <= 4
            assert frame.post_url == f"{APP_URL}/api/frame"
            assert frame.image.startswith(APP_URL)

    def test_button_without_input_awaits_query(self):
        frame = _act(1)
        assert frame.state == "awaiting-query"
        assert frame.frame_url == f"{APP_URL}/query"

    def test_short_input_is_error_without_ai_call(self):
        mock = AsyncMock()
        with patch(ADVICE_PATCH, mock):
            frame = _act(1, "   help   ")
        mock.assert_not_called()
        assert frame.state == "error"
        assert parse_qs(urlsplit(frame.image).query)["message"] == [ERROR_MESSAGES["INVALID_INPUT"]]

    def test_query_produces_advice_frame(self):
        mock = AsyncMock(return_value=_advice())
        with patch(ADVICE_PATCH, mock):
            frame = _act(1, "My landlord kept my deposit")

        mock.assert_awaited_once()
        args = mock.call_args.args
        assert args[0] == "My landlord kept my deposit"
        assert args[1] == "GENERAL"

        assert frame.state == "showing-advice"
        params = parse_qs(urlsplit(frame.image).query)
        assert params["summary"] == ["A" * 200]
        assert params["step"] == ["one", "two", "three"]

    def test_input_is_sanitized_and_capped(self):
        mock = AsyncMock(return_value=_advice())
        with patch(ADVICE_PATCH, mock):
            _act(1, "<b>My landlord</b> " + "x" * 400)
        sent = mock.call_args.args[0]
        assert "<b>" not in sent
        assert len(sent) == 256

    def test_ai_failure_is_error_frame(self):
        mock = AsyncMock(side_effect=AdviceGenerationError(ai_unavailable=True))
        with patch(ADVICE_PATCH, mock):
            frame = _act(1, "My landlord kept my deposit")
        assert frame.state == "error"
        assert parse_qs(urlsplit(frame.image).query)["message"] == [ERROR_MESSAGES["ADVICE_FAILED"]]

    @pytest.mark.parametrize(
        "button,state",
        [(2, "showing-topics"), (3, "showing-templates"), (4, "showing-payment"), (7, "home"), (0, "home")],
    )
    def test_navigation_buttons(self, button, state):
        assert _act(button).state == state

    def test_payment_frame_links_out(self):
        frame = _act(4)
        last = frame.buttons[-1]
        assert last.action == "link"
        assert last.target == f"{APP_URL}/payment"

    def test_html_escapes_content(self):
        frame = build_frame("error", {"message": 'bad "quote" <tag>'})
        page = render_frame_html(frame)
        assert '<meta property="fc:frame" content="vNext" />' in page
        assert "<tag>" not in page
        assert 'fc:frame:button:4' in page


# ---------------------------------------------------------------------------
# Route
# ---------------------------------------------------------------------------
class TestFrameRoute:
    def test_get_home_frame(self):
        response = client.get("/api/frame")
        assert response.status_code == 200
        body = response.json()
        assert body["type"] == "frame"
        assert body["state"] == "home"
        assert body["frameUrl"] == f"{APP_URL}/"
        assert body["aspectRatio"] == "1.91:1"

    def test_get_home_frame_html(self):
        response = client.get("/api/frame", params={"format": "html"})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "fc:frame:image" in response.text

    def test_post_without_untrusted_data(self):
        response = client.post("/api/frame", json={"trustedData": {"messageBytes": ""}})
        assert response.status_code == 400
        body = response.json()
        assert body["state"] == "error"
        assert "Invalid+frame+request" in body["image"]

    def test_post_navigation(self):
        response = client.post("/api/frame", json={"untrustedData": {"fid": 1, "buttonIndex": 2}})
        assert response.status_code == 200
        assert response.json()["state"] == "showing-topics"

    def test_post_query(self):
        mock = AsyncMock(return_value=_advice(summary="Short summary", steps=["Call"]))
        with patch(ADVICE_PATCH, mock):
            response = client.post(
                "/api/frame",
                json={"untrustedData": {"fid": 1, "buttonIndex": 1, "inputText": "My landlord kept my deposit"}},
            )
        assert response.status_code == 200
        assert response.json()["state"] == "showing-advice"
