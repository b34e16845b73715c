"""Prompt templates for the legal generators.

System + User prompt separation. Every task asks for a single JSON object;
the builders return the `[system, user]` message list passed to the
centralized openai_client.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from ...constants import DOCUMENT_PROMPT_CHARS
from .rules import JurisdictionContext, normalize_variable_name

Messages = List[Dict[str, str]]

# ── Per-task sampling settings ───────────────────────────────────────────
# (temperature, max_tokens)
ADVICE_SETTINGS = (0.3, 1000)
TEMPLATE_SETTINGS = (0.2, 1500)
DOCUMENT_SETTINGS = (0.3, 1500)
CONTEXTUAL_SETTINGS = (0.3, 1200)
CLASSIFICATION_SETTINGS = (0.1, 300)

_ADVICE_CONTRACT = """{
  "summary": "Clear, plain-language explanation (2-3 sentences)",
  "actionSteps": ["Step 1", "Step 2", "Step 3"],
  "relevantLaws": ["Law 1", "Law 2"],
  "sources": ["Source 1", "Source 2"]
}"""


def _messages(system: str, user: str) -> Messages:
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": user},
    ]


def _notes_block(jurisdiction: JurisdictionContext) -> str:
    if not jurisdiction.notes:
        return ""
    lines = "\n".join(f"- {n}" for n in jurisdiction.notes)
    return f"\nJURISDICTION NOTES:\n{lines}\n"


# ── Advice ──────────────────────────────────────────────────────────────

ADVICE_SYSTEM_PROMPT = """You are a legal information assistant that provides plain-language explanations of legal concepts and procedures.

IMPORTANT:
- You provide general legal information, NOT legal advice.
- Users should consult qualified attorneys for specific legal matters.
- Information may not reflect the most current laws.

Your responses should:
1. Be clear and easy to understand (avoid legal jargon).
2. Be specific to the requested jurisdiction when applicable.
3. Include actionable next steps.
4. Cite relevant laws or regulations when possible.
5. Suggest when professional legal help is needed.

Return ONLY a JSON object. No markdown, no surrounding text."""


def build_advice_messages(*, query: str, jurisdiction: JurisdictionContext) -> Messages:
    user = f"""Provide plain-language legal information for the following query in {jurisdiction.name} jurisdiction.

Query: "{query}"
{_notes_block(jurisdiction)}
Please provide:
1. A clear, easy-to-understand summary (2-3 sentences)
2. 3-5 actionable next steps
3. Relevant laws or regulations (if applicable)
4. Sources the user can consult

Format your response as JSON with the following structure:
{_ADVICE_CONTRACT}"""
    return _messages(ADVICE_SYSTEM_PROMPT, user)


# ── Templates ───────────────────────────────────────────────────────────

TEMPLATE_SYSTEM_PROMPT = """You are a legal document template generator. Create professional legal document templates that:

1. Are appropriate for the requested jurisdiction.
2. Use clear, professional language.
3. Mark every customizable field as a placeholder in [VARIABLE_NAME] format (upper case, underscores).
4. Follow standard legal document formatting.

These templates are for informational purposes only and must be reviewed by a qualified attorney before use.

Return ONLY a JSON object. No markdown, no surrounding text."""


def build_template_messages(
    *,
    template_type: str,
    context: str,
    jurisdiction: JurisdictionContext,
    customizations: Optional[Dict[str, str]] = None,
) -> Messages:
    include = ""
    if customizations:
        names = ", ".join(normalize_variable_name(k) for k in customizations)
        include = f"\nInclude these specific variables: {names}\n"

    user = f"""Generate a "{template_type}" template for {jurisdiction.name} jurisdiction.

Context: {context}
{include}{_notes_block(jurisdiction)}
Format as JSON:
{{
  "title": "Template Title",
  "content": "Full template content with [PLACEHOLDER] fields",
  "usageContext": "When and how to use this template",
  "variables": ["PLACEHOLDER1", "PLACEHOLDER2"]
}}"""
    return _messages(TEMPLATE_SYSTEM_PROMPT, user)


# ── Document analysis ───────────────────────────────────────────────────

DOCUMENT_SYSTEM_PROMPT = """You are a legal document analyzer that breaks down complex legal language into plain English, identifies key provisions and risks, and provides actionable recommendations.

Return ONLY a JSON object. No markdown, no surrounding text."""


def build_document_messages(
    *,
    document_text: str,
    jurisdiction: JurisdictionContext,
    document_type: Optional[str] = None,
    analysis_type: str = "full",
) -> Messages:
    excerpt = document_text[:DOCUMENT_PROMPT_CHARS]
    doc_label = f" ({document_type})" if document_type else ""

    user = f"""Analyze the following legal document{doc_label} for {jurisdiction.name} jurisdiction.
Analysis focus: {analysis_type}

Document: "{excerpt}"

Please provide:
1. Main purpose and key points of the document
2. Important terms, conditions, and clauses
3. Potential legal risks or concerns
4. Recommended actions or next steps
5. Compliance considerations

Format as JSON:
{_ADVICE_CONTRACT}"""
    return _messages(DOCUMENT_SYSTEM_PROMPT, user)


# ── Contextual advice ───────────────────────────────────────────────────

CONTEXTUAL_SYSTEM_PROMPT = """You are a contextual legal information assistant. Provide tailored information based on user context, urgency, and previous interactions. Always emphasize appropriate next steps and when professional help is needed.

Return ONLY a JSON object. No markdown, no surrounding text."""


def build_contextual_messages(
    *,
    query: str,
    jurisdiction: JurisdictionContext,
    previous_queries: Optional[List[str]] = None,
    user_type: Optional[str] = None,
    urgency: Optional[str] = None,
) -> Messages:
    context_lines = []
    if previous_queries:
        context_lines.append(f"Previous queries: {', '.join(previous_queries)}")
    if user_type:
        context_lines.append(f"User type: {user_type}")
    if urgency:
        context_lines.append(f"Urgency level: {urgency}")
    context_block = ("Context:\n" + "\n".join(context_lines) + "\n") if context_lines else ""

    user = f"""Provide contextual legal information for {jurisdiction.name} jurisdiction.

Query: "{query}"

{context_block}{_notes_block(jurisdiction)}
Please provide tailored information considering the context:
1. A clear, contextual summary addressing the specific situation
2. Prioritized action steps based on urgency and user type
3. Relevant laws or regulations that apply
4. Resources and when to seek professional legal help

Format as JSON:
{_ADVICE_CONTRACT}"""
    return _messages(CONTEXTUAL_SYSTEM_PROMPT, user)


# ── Query classification ────────────────────────────────────────────────

CLASSIFICATION_SYSTEM_PROMPT = """Analyze the legal query and categorize it. Determine:
1. Legal category (Employment, Tenant Rights, Consumer Protection, etc.)
2. Complexity level (simple, moderate, complex)
3. Whether it requires attorney consultation
4. Suggested document templates that might be helpful

Respond in JSON format:
{
  "category": "Legal category",
  "complexity": "simple|moderate|complex",
  "requiresAttorney": true,
  "suggestedTemplates": ["Template 1", "Template 2"]
}"""


def build_classification_messages(*, query: str) -> Messages:
    return _messages(CLASSIFICATION_SYSTEM_PROMPT, query)
