"""OpenAI client tests against an httpx MockTransport (no network)."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import asyncio
import json
from unittest.mock import patch

import httpx
import pytest

from legalease.services.openai_client import (
    OpenAIClientError,
    _get_timeout,
    build_payload,
    call_openai_chat_async,
    get_chat_completions_url,
    get_openai_key,
)

MESSAGES = [{"role": "system", "content": "sys"}, {"role": "user", "content": "hi"}]
_RealAsyncClient = httpx.AsyncClient


def _client_with(handler):
    def factory(*args, **kwargs):
        return _RealAsyncClient(*args, transport=httpx.MockTransport(handler), **kwargs)

    return factory


def _call(handler, **kwargs):
    with patch("legalease.services.openai_client.httpx.AsyncClient", _client_with(handler)):
        return asyncio.run(
            call_openai_chat_async(messages=MESSAGES, temperature=0.3, max_tokens=100, **kwargs)
        )


@pytest.fixture(autouse=True)
def openai_env(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.delenv("OPENAI_BASE_URL", raising=False)
    monkeypatch.delenv("OPENAI_MODEL", raising=False)


class TestConfig:
    def test_missing_key_raises(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY")
        with pytest.raises(EnvironmentError):
            get_openai_key()

    def test_default_url(self):
        assert get_chat_completions_url() == "https://api.openai.com/v1/chat/completions"

    def test_custom_base_url(self, monkeypatch):
        monkeypatch.setenv("OPENAI_BASE_URL", "http://localhost:8080/v1/")
        assert get_chat_completions_url() == "http://localhost:8080/v1/chat/completions"

    def test_payload_requests_json(self):
        payload = build_payload(model="m", messages=MESSAGES, max_tokens=10, temperature=0.1)
        assert payload["response_format"] == {"type": "json_object"}
        assert payload["max_tokens"] == 10

    def test_timeout_from_env(self, monkeypatch):
        monkeypatch.setenv("OPENAI_REQUEST_TIMEOUT", "12.5")
        assert _get_timeout() == 12.5

    def test_malformed_timeout_falls_back(self, monkeypatch):
        monkeypatch.setenv("OPENAI_REQUEST_TIMEOUT", "abc")
        assert _get_timeout() == 40.0


class TestCall:
    def test_success_returns_stripped_content(self):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(
                200, json={"choices": [{"message": {"content": '  {"summary": "ok"}  '}}]}
            )

        assert _call(handler) == '{"summary": "ok"}'
        assert seen["auth"] == "Bearer sk-test"
        assert seen["body"]["model"] == "gpt-4o-mini"
        assert seen["body"]["temperature"] == 0.3

    def test_missing_key_propagates(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY")
        with pytest.raises(EnvironmentError):
            _call(lambda request: httpx.Response(200, json={}))

    def test_non_200_raises(self):
        with pytest.raises(OpenAIClientError, match="HTTP 429"):
            _call(lambda request: httpx.Response(429, text="rate limited"))

    def test_timeout_raises(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(OpenAIClientError, match="timed out"):
            _call(handler)

    def test_transport_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(OpenAIClientError):
            _call(handler)

    def test_non_json_body_raises(self):
        with pytest.raises(OpenAIClientError, match="non-JSON"):
            _call(lambda request: httpx.Response(200, text="<html>"))

    def test_missing_choices_raises(self):
        with pytest.raises(OpenAIClientError, match="no choices"):
            _call(lambda request: httpx.Response(200, json={"choices": []}))

    def test_empty_content_raises(self):
        with pytest.raises(OpenAIClientError, match="empty content"):
            _call(lambda request: httpx.Response(200, json={"choices": [{"message": {"content": "  "}}]}))
