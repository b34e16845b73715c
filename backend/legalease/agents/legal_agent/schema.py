"""Locked Pydantic schemas for raw AI replies.

Each task's reply is validated against one of these before it is turned
into an API response. Missing fields take the defaults below, list fields
that arrive as anything other than a list become `[]`, and list items are
coerced to strings.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item).strip() for item in value if item is not None and str(item).strip()]


class _AIReply(BaseModel):
    model_config = ConfigDict(extra="ignore")


class AdviceOutput(_AIReply):
    """Advice, document-analysis and contextual replies share this shape."""

    summary: str = "Unable to generate summary"
    action_steps: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("actionSteps", "action_steps"),
    )
    relevant_laws: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("relevantLaws", "relevant_laws"),
    )
    sources: List[str] = Field(default_factory=list)

    @field_validator("summary", mode="before")
    @classmethod
    def summary_text(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return "Unable to generate summary"
        return str(v).strip()

    @field_validator("action_steps", "relevant_laws", "sources", mode="before")
    @classmethod
    def coerce_list(cls, v: Any) -> List[str]:
        return _string_list(v)


class TemplateOutput(_AIReply):
    title: str = ""
    content: str = ""
    usage_context: str = Field(
        default="General use",
        validation_alias=AliasChoices("usageContext", "usage_context"),
    )
    variables: Union[List[str], Dict[str, Any]] = Field(default_factory=list)

    @field_validator("title", "content", mode="before")
    @classmethod
    def text_or_empty(cls, v: Any) -> str:
        return "" if v is None else str(v).strip()

    @field_validator("usage_context", mode="before")
    @classmethod
    def usage_text(cls, v: Any) -> str:
        if v is None or not str(v).strip():
            return "General use"
        return str(v).strip()

    @field_validator("variables", mode="before")
    @classmethod
    def coerce_variables(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return v
        return _string_list(v)

    def variable_names(self) -> List[str]:
        if isinstance(self.variables, dict):
            return [str(k) for k in self.variables.keys()]
        return list(self.variables)


class ClassificationOutput(_AIReply):
    category: str = "General"
    complexity: Literal["simple", "moderate", "complex"] = "moderate"
    requires_attorney: bool = Field(
        default=True,
        validation_alias=AliasChoices("requiresAttorney", "requires_attorney"),
    )
    suggested_templates: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("suggestedTemplates", "suggested_templates"),
    )

    @field_validator("category", mode="before")
    @classmethod
    def category_text(cls, v: Any) -> str:
        if v is None or not str(v).strip():
            return "General"
        return str(v).strip()

    @field_validator("complexity", mode="before")
    @classmethod
    def complexity_or_default(cls, v: Any) -> str:
        value = str(v or "").strip().lower()
        return value if value in ("simple", "moderate", "complex") else "moderate"

    @field_validator("suggested_templates", mode="before")
    @classmethod
    def coerce_list(cls, v: Any) -> List[str]:
        return _string_list(v)
