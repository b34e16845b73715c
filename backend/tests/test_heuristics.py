"""Heuristic extractor, confidence and cost tests."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from legalease.services.heuristics import (
    calculate_analysis_cost,
    calculate_confidence,
    calculate_query_cost,
    extract_key_points,
    extract_keywords,
    extract_requirements,
    extract_risks,
    extract_violations,
)


RISKY_TEXT = " ".join(
    f"Clause {i} creates a serious liability for the tenant." for i in range(8)
)


class TestExtractors:
    def test_risks_capped_at_five(self):
        risks = extract_risks(RISKY_TEXT)
        assert len(risks) == 5
        assert all(len(r) > 10 for r in risks)
        assert risks[0] == "Clause 0 creates a serious liability for the tenant"

    def test_requirements_capped_at_five(self):
        text = " ".join(f"Party {i} must deliver the goods on time." for i in range(9))
        assert len(extract_requirements(text)) == 5

    def test_violations_capped_at_three(self):
        text = " ".join(f"Term {i} is unlawful under local law!" for i in range(6))
        assert len(extract_violations(text)) == 3

    def test_short_sentences_dropped(self):
        assert extract_risks("Risk. Big risk! Liability?") == []

    def test_sentences_are_trimmed(self):
        text = "   The penalty for late payment is steep   . Ok."
        assert extract_risks(text) == ["The penalty for late payment is steep"]

    def test_keyword_match_is_case_insensitive(self):
        assert extract_violations("This clause may VIOLATE state statutes.") == [
            "This clause may VIOLATE state statutes"
        ]

    def test_no_matches(self):
        assert extract_requirements("Nothing relevant in this sentence at all.") == []

    def test_key_points_are_non_empty_lines(self):
        assert extract_key_points("First point\n\n   Second point  \n") == [
            "First point",
            "Second point",
        ]


class TestConfidence:
    def test_base_confidence(self):
        assert calculate_confidence("short doc") == 0.7

    def test_length_bonuses(self):
        assert calculate_confidence("x" * 1001) == 0.8
        assert calculate_confidence("x" * 3001) == 0.9

    def test_non_decreasing_across_thresholds(self):
        scores = [calculate_confidence("y" * n) for n in (500, 1000, 1001, 3000, 3001, 9000)]
        assert scores == sorted(scores)

    def test_legal_terms_raise_confidence(self):
        assert calculate_confidence("This contract is binding") == pytest.approx(0.7167)

    def test_summary_terms_count(self):
        assert calculate_confidence("plain", summary="A statute applies") == pytest.approx(0.7167)

    def test_capped_at_095(self):
        doc = "contract agreement clause provision statute regulation " * 100
        assert calculate_confidence(doc) == 0.95


class TestCosts:
    @pytest.mark.parametrize(
        "analysis_type,length,expected",
        [
            ("full", 5000, 0.15),
            ("summary", 20000, 0.1),
            ("compliance", 10000, 0.24),
            ("risks", 1000, 0.02),
            ("unknown", 2500, 0.05),
        ],
    )
    def test_analysis_cost(self, analysis_type, length, expected):
        assert calculate_analysis_cost(analysis_type, length) == pytest.approx(expected)

    def test_query_cost(self):
        assert calculate_query_cost("summary") == pytest.approx(0.01)
        assert calculate_query_cost("template", "advanced") == pytest.approx(0.1)
        assert calculate_query_cost("analysis") == pytest.approx(0.1)
        assert calculate_query_cost("other") == pytest.approx(0.01)


class TestKeywords:
    def test_drops_stop_words_and_short_words(self):
        words = extract_keywords("The tenant and the landlord are in a dispute over rent!")
        assert words == ["tenant", "landlord", "dispute", "over", "rent"]

    def test_limited_to_ten(self):
        text = " ".join(f"keyword{i}" for i in range(20))
        assert len(extract_keywords(text)) == 10
