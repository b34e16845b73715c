"""Keyword heuristics for document analysis.

All functions are deterministic and independent of any AI call:
  - Sentence-level extractors for risks, requirements and violations.
  - A length/term based confidence score, capped at 0.95.
  - Cost calculators for analyses and queries.
"""

from __future__ import annotations

import re
from typing import Iterable, List

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_NON_WORD_RE = re.compile(r"[^\w\s]")

RISK_KEYWORDS = ("risk", "danger", "liability", "penalty", "violation", "breach", "consequence")
REQUIREMENT_KEYWORDS = ("must", "required", "mandatory", "shall", "obligation", "duty")
VIOLATION_KEYWORDS = ("violate", "breach", "non-compliant", "illegal", "unlawful", "invalid")
LEGAL_TERMS = ("contract", "agreement", "clause", "provision", "statute", "regulation")

MAX_RISKS = 5
MAX_REQUIREMENTS = 5
MAX_VIOLATIONS = 3
MIN_SENTENCE_LENGTH = 10

BASE_CONFIDENCE = 0.7
MAX_CONFIDENCE = 0.95

ANALYSIS_BASE_COSTS = {
    "summary": 0.05,
    "risks": 0.08,
    "compliance": 0.12,
    "full": 0.15,
}
QUERY_BASE_COSTS = {
    "summary": 0.01,
    "template": 0.05,
    "guidance": 0.03,
    "analysis": 0.10,
}

_STOP_WORDS = frozenset(
    "the a an and or but in on at to for of with by is are was were be been have has had "
    "do does did will would could should may might can cannot i you he she it we they my "
    "your his her its our their".split()
)


def split_sentences(text: str) -> List[str]:
    return _SENTENCE_SPLIT_RE.split(text or "")


def _extract(text: str, keywords: Iterable[str], limit: int) -> List[str]:
    keywords = tuple(keywords)
    found: List[str] = []
    for sentence in split_sentences(text):
        lowered = sentence.lower()
        if not any(k in lowered for k in keywords):
            continue
        trimmed = sentence.strip()
        if len(trimmed) <= MIN_SENTENCE_LENGTH:
            continue
        found.append(trimmed)
        if len(found) == limit:
            break
    return found


def extract_risks(text: str) -> List[str]:
    return _extract(text, RISK_KEYWORDS, MAX_RISKS)


def extract_requirements(text: str) -> List[str]:
    return _extract(text, REQUIREMENT_KEYWORDS, MAX_REQUIREMENTS)


def extract_violations(text: str) -> List[str]:
    return _extract(text, VIOLATION_KEYWORDS, MAX_VIOLATIONS)


def extract_key_points(text: str) -> List[str]:
    return [line.strip() for line in (text or "").split("\n") if line.strip()]


def calculate_confidence(document_text: str, summary: str = "") -> float:
    """Heuristic confidence in [0.7, 0.95].

    +0.1 past 1000 chars, +0.1 past 3000 chars, and up to +0.1 for the
    share of LEGAL_TERMS found in the document or the summary.
    """
    document_text = document_text or ""
    confidence = BASE_CONFIDENCE

    if len(document_text) > 1000:
        confidence += 0.1
    if len(document_text) > 3000:
        confidence += 0.1

    doc_lower = document_text.lower()
    summary_lower = (summary or "").lower()
    terms_found = sum(1 for t in LEGAL_TERMS if t in doc_lower or t in summary_lower)
    confidence += (terms_found / len(LEGAL_TERMS)) * 0.1

    return round(min(confidence, MAX_CONFIDENCE), 4)


def calculate_analysis_cost(analysis_type: str, document_length: int) -> float:
    base_cost = ANALYSIS_BASE_COSTS.get(analysis_type, 0.10)
    length_multiplier = min(document_length / 5000, 2)
    return round(base_cost * length_multiplier, 2)


def calculate_query_cost(query_type: str, complexity: str = "basic") -> float:
    multiplier = 2 if complexity == "advanced" else 1
    return QUERY_BASE_COSTS.get(query_type, 0.01) * multiplier


def extract_keywords(text: str) -> List[str]:
    words = _NON_WORD_RE.sub("", (text or "").lower()).split()
    return [w for w in words if len(w) > 3 and w not in _STOP_WORDS][:10]
