"""Jurisdiction and template rules for the legal generators.

Maps jurisdiction codes to display names and jurisdiction-specific notes,
and handles template types and [PLACEHOLDER] tokens. All rules are
deterministic.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from ...constants import DEFAULT_JURISDICTION, JURISDICTIONS, TEMPLATE_CATALOG


# ── Jurisdiction context ─────────────────────────────────────────────────

US_CODES = {"US", "US-CA", "US-NY", "US-TX", "US-FL", "US-FEDERAL"}


@dataclass
class JurisdictionContext:
    """Deterministic context derived from a jurisdiction code."""

    code: str
    name: str
    description: str
    notes: List[str] = field(default_factory=list)


def resolve_jurisdiction(code: Optional[str]) -> JurisdictionContext:
    """Resolve a jurisdiction code into a JurisdictionContext.

    Unknown or empty codes resolve to GENERAL; request validation rejects
    them before a generator is reached.
    """
    key = (code or "").strip().upper()
    if key not in JURISDICTIONS:
        key = DEFAULT_JURISDICTION
    info = JURISDICTIONS[key]

    notes: List[str] = []
    if key in US_CODES and key != "US-FEDERAL":
        notes.append("State law may differ from federal law; check local statutes.")
    if key == "US-CA":
        notes.append("Consider California-specific protections (e.g. CCPA, tenant protections).")
    if key == "UK":
        notes.append("UK GDPR and the Data Protection Act 2018 apply to personal data.")
    if key == DEFAULT_JURISDICTION:
        notes.append("Local law may differ; confirm requirements for your location.")

    return JurisdictionContext(
        code=key,
        name=info["name"],
        description=info["description"],
        notes=notes,
    )


# ── Template types ──────────────────────────────────────────────────────

_CATALOG_BY_ID: Dict[str, Dict[str, Any]] = {t["id"]: t for t in TEMPLATE_CATALOG}


def get_catalog_template(template_id: str) -> Optional[Dict[str, Any]]:
    return _CATALOG_BY_ID.get((template_id or "").strip().lower())


def canonical_template_type(template_type: str) -> str:
    """Return the catalog name for a known slug, else the trimmed input.

    "nda", "NDA" and "cease_desist" resolve to the catalog names; free-text
    types are passed through unchanged.
    """
    stripped = template_type.strip()
    slug = stripped.lower().replace("_", "-").replace(" ", "-")
    entry = _CATALOG_BY_ID.get(slug)
    if entry is not None:
        return entry["name"]
    for entry in TEMPLATE_CATALOG:
        if entry["name"].lower() == stripped.lower():
            return entry["name"]
    return stripped


# ── Placeholders ────────────────────────────────────────────────────────

# Canonical form: [UPPER_SNAKE]. Replies may use [Tenant Name] or
# [clientName]; canonicalize_placeholders rewrites those first.
PLACEHOLDER_RE = re.compile(r"\[([A-Z][A-Z0-9_]*)\]")
LOOSE_PLACEHOLDER_RE = re.compile(r"\[([A-Za-z][A-Za-z0-9 _\-]{0,59})\]")

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z])(?=[A-Z])")


def extract_placeholders(content: str) -> List[str]:
    """Distinct [NAME] tokens in order of first appearance."""
    seen: List[str] = []
    for name in PLACEHOLDER_RE.findall(content or ""):
        if name not in seen:
            seen.append(name)
    return seen


def normalize_variable_name(name: Any) -> str:
    """Map "Tenant Name", "tenantName" and "tenant-name" to TENANT_NAME."""
    text = str(name).strip().strip("[]").strip()
    text = _CAMEL_BOUNDARY_RE.sub("_", text).upper()
    text = re.sub(r"[^A-Z0-9_]", "_", text)
    return re.sub(r"_+", "_", text).strip("_")


def canonicalize_placeholders(content: str) -> str:
    """Rewrite every bracketed name in content to [UPPER_SNAKE]."""

    def _sub(match: "re.Match[str]") -> str:
        name = normalize_variable_name(match.group(1))
        return f"[{name}]" if name else match.group(0)

    return LOOSE_PLACEHOLDER_RE.sub(_sub, content or "")


def merge_variables(declared: Iterable[str], content: str) -> List[str]:
    """Variables that actually appear as [NAME] tokens in content.

    Declared names keep their order; tokens the model used without
    declaring are appended. Declared names with no token are dropped.
    """
    tokens = extract_placeholders(content)
    merged: List[str] = []
    for name in list(declared) + tokens:
        normalized = normalize_variable_name(name)
        if normalized in tokens and normalized not in merged:
            merged.append(normalized)
    return merged


def fill_placeholders(content: str, values: Dict[str, str]) -> str:
    """Replace [NAME] with values[NAME]; unknown tokens are left in place."""
    lookup = {normalize_variable_name(k): str(v) for k, v in values.items()}

    def _sub(match: "re.Match[str]") -> str:
        return lookup.get(match.group(1), match.group(0))

    return PLACEHOLDER_RE.sub(_sub, content)
