"""Sanitizer and request validator tests (no API, no AI)."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from legalease.services.sanitizer import contains_harmful_content, sanitize_input, truncate_text
from legalease.services.validators import (
    is_valid_email,
    is_valid_transaction_hash,
    is_valid_wallet_address,
    validate_document_analysis_request,
    validate_frame_request,
    validate_jurisdiction,
    validate_legal_query_request,
    validate_payment_intent_request,
    validate_payment_request,
    validate_query,
    validate_session_request,
    validate_template_request,
)

WALLET = "0x" + "a1" * 20
TX_HASH = "0x" + "0f" * 32


# ---------------------------------------------------------------------------
# Sanitizer
# ---------------------------------------------------------------------------
class TestSanitizer:
    def test_strips_script_blocks_and_tags(self):
        assert sanitize_input("<script>alert(1)</script>Hello <b>world</b>") == "Hello world"

    def test_strips_javascript_protocol(self):
        assert sanitize_input("JavaScript:alert(1)") == "alert(1)"

    def test_strips_event_handlers(self):
        assert sanitize_input("click onclick=steal() here") == "click steal() here"

    def test_strips_stray_angle_brackets(self):
        assert sanitize_input("5 < 6 is true") == "5  6 is true"

    def test_truncates_to_default_max(self):
        assert len(sanitize_input("a" * 2000)) == 1000

    def test_truncates_to_custom_max(self):
        assert len(sanitize_input("b" * 300, max_length=256)) == 256

    def test_non_string_returns_empty(self):
        assert sanitize_input(None) == ""
        assert sanitize_input(42) == ""

    def test_truncate_text_appends_ellipsis(self):
        assert truncate_text("abcdef", 3) == "abc..."
        assert truncate_text("abc", 3) == "abc"

    def test_harmful_content_detection(self):
        assert contains_harmful_content("<iframe src='x'>")
        assert contains_harmful_content("<img onerror=x>")
        assert not contains_harmful_content("My landlord kept my deposit")


# ---------------------------------------------------------------------------
# Primitive predicates
# ---------------------------------------------------------------------------
class TestPredicates:
    def test_query_examples(self):
        assert validate_query("My landlord locked me out") is True
        assert validate_query("help") is False

    def test_query_bounds_use_trimmed_length(self):
        assert validate_query("   short   ") is False
        assert validate_query("  " + "a" * 500 + "  ") is True
        assert validate_query("a" * 501) is False
        assert validate_query("a" * 10) is True

    def test_query_rejects_non_strings(self):
        assert validate_query(None) is False
        assert validate_query(1234567890123) is False

    def test_jurisdiction(self):
        assert validate_jurisdiction("US-CA")
        assert validate_jurisdiction(" us-ny ")
        assert not validate_jurisdiction("MARS")
        assert not validate_jurisdiction(None)

    def test_wallet_address(self):
        assert is_valid_wallet_address(WALLET)
        assert not is_valid_wallet_address("0x123")
        assert not is_valid_wallet_address("a1" * 21)

    def test_transaction_hash(self):
        assert is_valid_transaction_hash(TX_HASH)
        assert not is_valid_transaction_hash("0x1234567890abcdef1234567890abcdef12345678")

    def test_email(self):
        assert is_valid_email("someone@example.com")
        assert not is_valid_email("not-an-email")


# ---------------------------------------------------------------------------
# Request validators
# ---------------------------------------------------------------------------
class TestRequestValidators:
    def test_valid_legal_query_normalizes_jurisdiction(self):
        result = validate_legal_query_request(
            {"query": "  My landlord locked me out  ", "jurisdiction": " us-ca "}
        )
        assert result.is_valid
        assert result.errors == []
        assert result.data.jurisdiction == "US-CA"
        assert result.data.query == "My landlord locked me out"

    def test_short_query_is_invalid(self):
        result = validate_legal_query_request({"query": "help", "jurisdiction": "US"})
        assert not result.is_valid
        assert any("at least 10 characters" in e for e in result.errors)

    def test_unknown_jurisdiction_is_invalid(self):
        result = validate_legal_query_request(
            {"query": "My landlord locked me out", "jurisdiction": "MARS"}
        )
        assert not result.is_valid
        assert any("Unsupported jurisdiction" in e for e in result.errors)

    def test_non_object_body_is_invalid(self):
        result = validate_legal_query_request(["not", "an", "object"])
        assert not result.is_valid
        assert result.errors == ["Request body must be a JSON object"]

    def test_document_request_defaults_to_full(self):
        result = validate_document_analysis_request(
            {"documentText": "This agreement is made between...", "jurisdiction": "UK"}
        )
        assert result.is_valid
        assert result.data.analysis_type == "full"

    def test_document_request_rejects_unknown_analysis_type(self):
        result = validate_document_analysis_request(
            {"documentText": "Some text", "jurisdiction": "UK", "analysisType": "bogus"}
        )
        assert not result.is_valid

    def test_document_request_rejects_blank_text(self):
        result = validate_document_analysis_request({"documentText": "   ", "jurisdiction": "UK"})
        assert not result.is_valid

    def test_template_request_requires_context(self):
        result = validate_template_request(
            {"templateType": "nda", "jurisdiction": "US", "context": "short"}
        )
        assert not result.is_valid

    def test_payment_request_requires_positive_amount(self):
        assert validate_payment_request({"amount": 0.05, "currency": "ETH"}).is_valid
        assert not validate_payment_request({"amount": 0, "currency": "ETH"}).is_valid

    def test_payment_intent_requires_user_and_service(self):
        ok = validate_payment_intent_request(
            {"amount": 0.05, "currency": "ETH", "userId": "u1", "serviceType": "advice"}
        )
        assert ok.is_valid
        missing = validate_payment_intent_request({"amount": 0.05, "currency": "ETH"})
        assert not missing.is_valid
        assert len(missing.errors) == 2

    def test_session_request_rejects_bad_wallet(self):
        result = validate_session_request({"jurisdiction": "US", "walletAddress": "0x123"})
        assert not result.is_valid
        assert any("Invalid wallet address format" in e for e in result.errors)

    def test_session_request_accepts_good_wallet(self):
        result = validate_session_request({"jurisdiction": "US", "walletAddress": WALLET})
        assert result.is_valid
        assert result.data.wallet_address == WALLET

    def test_frame_request_coerces_button_index(self):
        result = validate_frame_request({"untrustedData": {"fid": 1, "buttonIndex": "2"}})
        assert result.is_valid
        assert result.data.untrusted_data.button_index == 2

    def test_frame_request_without_untrusted_data(self):
        result = validate_frame_request({})
        assert result.is_valid
        assert result.data.untrusted_data is None
