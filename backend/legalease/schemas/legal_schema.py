"""Pydantic schemas for advice, template and document-analysis APIs."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import ConfigDict, Field, field_validator

from ..constants import (
    DOCUMENT_MAX_LENGTH,
    QUERY_MAX_LENGTH,
    QUERY_MIN_LENGTH,
)
from .base import CamelModel, normalize_jurisdiction


# ── Requests ─────────────────────────────────────────────────────────────

class LegalQuery(CamelModel):
    """A plain-language legal question. Never persisted."""

    query: str = Field(..., description="Free-text legal question")
    jurisdiction: str = Field(..., description="Jurisdiction code, e.g. US-CA")
    user_id: Optional[str] = None

    @field_validator("query")
    @classmethod
    def query_within_bounds(cls, v: str) -> str:
        stripped = v.strip()
        if len(stripped) < QUERY_MIN_LENGTH:
            raise ValueError(f"Query must be at least {QUERY_MIN_LENGTH} characters long")
        if len(stripped) > QUERY_MAX_LENGTH:
            raise ValueError(f"Query must be at most {QUERY_MAX_LENGTH} characters long")
        return stripped

    @field_validator("jurisdiction")
    @classmethod
    def known_jurisdiction(cls, v: str) -> str:
        return normalize_jurisdiction(v)


class AdviceContext(CamelModel):
    """Optional context used to tailor advice."""

    previous_queries: List[str] = Field(default_factory=list)
    user_type: Optional[Literal["individual", "business", "organization"]] = None
    urgency: Optional[Literal["low", "medium", "high"]] = None


class AdviceRequest(LegalQuery):
    context: Optional[AdviceContext] = None


class DocumentAnalysisRequest(CamelModel):
    document_text: str = Field(..., min_length=1, max_length=DOCUMENT_MAX_LENGTH)
    document_type: Optional[str] = None
    jurisdiction: str
    analysis_type: Literal["summary", "risks", "compliance", "full"] = "full"

    @field_validator("document_text")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Document text cannot be empty")
        return v

    @field_validator("jurisdiction")
    @classmethod
    def known_jurisdiction(cls, v: str) -> str:
        return normalize_jurisdiction(v)


class TemplateRequest(CamelModel):
    template_type: str = Field(..., min_length=1, max_length=100)
    jurisdiction: str
    context: str = Field(..., min_length=10, description="Situation the template is for")
    customizations: Optional[Dict[str, str]] = None

    @field_validator("template_type")
    @classmethod
    def template_type_not_blank(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("Template type is required")
        return stripped

    @field_validator("jurisdiction")
    @classmethod
    def known_jurisdiction(cls, v: str) -> str:
        return normalize_jurisdiction(v)


class TemplateCustomizeRequest(CamelModel):
    template_id: str = Field(..., min_length=1)
    variables: Dict[str, str] = Field(default_factory=dict)


# ── Responses ────────────────────────────────────────────────────────────

class Template(CamelModel):
    """A generated document template with [PLACEHOLDER] tokens."""

    id: str
    title: str
    content: str
    usage_context: str
    jurisdiction: str
    variables: List[str] = Field(default_factory=list)


class LegalAdviceResponse(CamelModel):
    """Normalized advice. Immutable once produced."""

    model_config = ConfigDict(frozen=True)

    summary: str
    action_steps: List[str] = Field(default_factory=list)
    relevant_laws: List[str] = Field(default_factory=list)
    sources: List[str] = Field(default_factory=list)
    templates: Optional[List[Template]] = None
    jurisdiction: Optional[str] = None


class QueryAnalysis(CamelModel):
    category: str = "General"
    complexity: Literal["simple", "moderate", "complex"] = "moderate"
    requires_attorney: bool = True
    suggested_templates: List[str] = Field(default_factory=list)


class ComplianceBlock(CamelModel):
    jurisdiction: str
    requirements: List[str] = Field(default_factory=list, max_length=5)
    violations: List[str] = Field(default_factory=list, max_length=3)


class DocumentAnalysisResponse(CamelModel):
    id: str
    summary: str
    key_points: List[str] = Field(default_factory=list)
    risks: List[str] = Field(default_factory=list, max_length=5)
    recommendations: List[str] = Field(default_factory=list)
    compliance: ComplianceBlock
    confidence: float = Field(..., ge=0.0, le=0.95)
