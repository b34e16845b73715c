"""Centralized constants shared across agents and routes.

This module is the SINGLE SOURCE OF TRUTH for jurisdiction codes, legal
categories, the template catalog and pricing.
"""

from __future__ import annotations

from typing import Any, Dict, List

# ── Jurisdictions ───────────────────────────────────────────────────────
# Closed set. Codes are matched after strip().upper().

JURISDICTIONS: Dict[str, Dict[str, str]] = {
    "US": {
        "name": "United States",
        "description": "US federal and general state law",
    },
    "US-CA": {
        "name": "California, USA",
        "description": "California state law and regulations",
    },
    "US-NY": {
        "name": "New York, USA",
        "description": "New York state law and regulations",
    },
    "US-TX": {
        "name": "Texas, USA",
        "description": "Texas state law and regulations",
    },
    "US-FL": {
        "name": "Florida, USA",
        "description": "Florida state law and regulations",
    },
    "US-FEDERAL": {
        "name": "Federal USA",
        "description": "Federal US law and regulations",
    },
    "UK": {
        "name": "United Kingdom",
        "description": "UK law and regulations",
    },
    "CA": {
        "name": "Canada",
        "description": "Canadian law and regulations",
    },
    "AU": {
        "name": "Australia",
        "description": "Australian law and regulations",
    },
    "GENERAL": {
        "name": "General/International",
        "description": "General legal principles and international law",
    },
}

DEFAULT_JURISDICTION = "GENERAL"

# ── Input bounds ────────────────────────────────────────────────────────
QUERY_MIN_LENGTH = 10
QUERY_MAX_LENGTH = 500
DOCUMENT_MAX_LENGTH = 10_000
SANITIZE_MAX_LENGTH = 1000
DOCUMENT_PROMPT_CHARS = 2000

# ── Legal categories (GET /api/advice) ──────────────────────────────────
LEGAL_CATEGORIES: List[Dict[str, str]] = [
    {"id": "employment", "name": "Employment Law", "description": "Workplace rights, discrimination, wrongful termination"},
    {"id": "tenant", "name": "Tenant Rights", "description": "Rental disputes, evictions, security deposits"},
    {"id": "consumer", "name": "Consumer Protection", "description": "Fraud, warranties, unfair business practices"},
    {"id": "contract", "name": "Contract Disputes", "description": "Breach of contract, terms and conditions"},
    {"id": "small-claims", "name": "Small Claims", "description": "Debt collection, property damage, minor disputes"},
    {"id": "family", "name": "Family Law", "description": "Divorce, custody, domestic relations"},
    {"id": "immigration", "name": "Immigration", "description": "Visas, citizenship, deportation defense"},
    {"id": "criminal", "name": "Criminal Law", "description": "Arrests, charges, court proceedings"},
    {"id": "intellectual-property", "name": "Intellectual Property", "description": "Copyrights, trademarks, patents"},
    {"id": "business", "name": "Business Law", "description": "Formation, compliance, commercial disputes"},
]

# Topics shown on the Frame "Browse Topics" card.
LEGAL_TOPICS: List[str] = [
    "Tenant Rights",
    "Consumer Laws",
    "Workplace Rights",
    "Family Law",
    "Contract Law",
]

# ── Template catalog (GET /api/templates) ───────────────────────────────
TEMPLATE_CATALOG: List[Dict[str, Any]] = [
    {
        "id": "demand-letter",
        "name": "Demand Letter",
        "description": "Formal request for payment or action before legal proceedings",
        "category": "debt-collection",
        "complexity": "simple",
        "estimatedTime": "5-10 minutes",
        "price": 0.05,
        "variables": ["RECIPIENT_NAME", "AMOUNT_OWED", "DUE_DATE", "DESCRIPTION"],
        "preview": "Dear [RECIPIENT_NAME], This letter serves as formal demand for payment of $[AMOUNT_OWED] by [DUE_DATE] for [DESCRIPTION].",
    },
    {
        "id": "cease-desist",
        "name": "Cease and Desist Letter",
        "description": "Stop unwanted behavior or infringement",
        "category": "intellectual-property",
        "complexity": "moderate",
        "estimatedTime": "10-15 minutes",
        "price": 0.05,
        "variables": ["RECIPIENT_NAME", "INFRINGING_ACTIVITY", "DEADLINE"],
        "preview": "Dear [RECIPIENT_NAME], You are hereby directed to CEASE AND DESIST from [INFRINGING_ACTIVITY] no later than [DEADLINE].",
    },
    {
        "id": "notice-to-quit",
        "name": "Notice to Quit",
        "description": "Formal notice to tenant to vacate property",
        "category": "landlord-tenant",
        "complexity": "moderate",
        "estimatedTime": "10-15 minutes",
        "price": 0.05,
        "variables": ["TENANT_NAME", "PROPERTY_ADDRESS", "QUIT_DATE", "REASON"],
        "preview": "TO: [TENANT_NAME] You are hereby notified to quit and surrender the premises located at [PROPERTY_ADDRESS] on or before [QUIT_DATE] because [REASON].",
    },
    {
        "id": "complaint-letter",
        "name": "Complaint Letter",
        "description": "Formal complaint to business or organization",
        "category": "consumer-protection",
        "complexity": "simple",
        "estimatedTime": "5-10 minutes",
        "price": 0.05,
        "variables": ["COMPANY_NAME", "ISSUE_DESCRIPTION", "DESIRED_RESOLUTION"],
        "preview": "Dear [COMPANY_NAME], I am writing to formally complain about [ISSUE_DESCRIPTION]. I request [DESIRED_RESOLUTION].",
    },
    {
        "id": "settlement-agreement",
        "name": "Settlement Agreement",
        "description": "Agreement to resolve dispute without litigation",
        "category": "dispute-resolution",
        "complexity": "complex",
        "estimatedTime": "20-30 minutes",
        "price": 0.25,
        "variables": ["PARTY1_NAME", "PARTY2_NAME", "SETTLEMENT_AMOUNT", "DISPUTE_DESCRIPTION"],
        "preview": "SETTLEMENT AGREEMENT between [PARTY1_NAME] and [PARTY2_NAME] regarding [DISPUTE_DESCRIPTION] for the sum of $[SETTLEMENT_AMOUNT].",
    },
    {
        "id": "nda",
        "name": "Non-Disclosure Agreement",
        "description": "Protect confidential information",
        "category": "business",
        "complexity": "complex",
        "estimatedTime": "15-25 minutes",
        "price": 0.25,
        "variables": ["DISCLOSING_PARTY", "RECEIVING_PARTY", "PURPOSE", "DURATION"],
        "preview": "NON-DISCLOSURE AGREEMENT between [DISCLOSING_PARTY] and [RECEIVING_PARTY] for the purpose of [PURPOSE], effective for [DURATION].",
    },
    {
        "id": "employment-contract",
        "name": "Employment Contract",
        "description": "Basic employment agreement template",
        "category": "employment",
        "complexity": "complex",
        "estimatedTime": "25-35 minutes",
        "price": 0.25,
        "variables": ["EMPLOYEE_NAME", "POSITION", "SALARY", "START_DATE", "COMPANY_NAME"],
        "preview": "EMPLOYMENT AGREEMENT between [COMPANY_NAME] and [EMPLOYEE_NAME] for the position of [POSITION] at a salary of [SALARY], starting [START_DATE].",
    },
    {
        "id": "service-agreement",
        "name": "Service Agreement",
        "description": "Contract for services between parties",
        "category": "business",
        "complexity": "moderate",
        "estimatedTime": "15-20 minutes",
        "price": 0.10,
        "variables": ["SERVICE_PROVIDER", "CLIENT_NAME", "SERVICES_DESCRIPTION", "PAYMENT_TERMS"],
        "preview": "SERVICE AGREEMENT between [SERVICE_PROVIDER] and [CLIENT_NAME] for [SERVICES_DESCRIPTION] on the following terms: [PAYMENT_TERMS].",
    },
]

TEMPLATE_CATEGORIES: List[str] = [
    "debt-collection",
    "intellectual-property",
    "landlord-tenant",
    "consumer-protection",
    "dispute-resolution",
    "business",
    "employment",
]

TEMPLATE_PAGE_DEFAULT = 10
TEMPLATE_PAGE_MAX = 50

# ── Document analysis types (GET /api/document-analysis) ────────────────
ANALYSIS_TYPES: List[Dict[str, Any]] = [
    {
        "type": "summary",
        "name": "Document Summary",
        "description": "Get a plain-language summary of the document",
        "baseCost": 0.05,
        "estimatedTime": "1-2 minutes",
    },
    {
        "type": "risks",
        "name": "Risk Analysis",
        "description": "Identify potential legal risks and liabilities",
        "baseCost": 0.08,
        "estimatedTime": "2-3 minutes",
    },
    {
        "type": "compliance",
        "name": "Compliance Check",
        "description": "Check compliance with relevant laws and regulations",
        "baseCost": 0.12,
        "estimatedTime": "3-4 minutes",
    },
    {
        "type": "full",
        "name": "Full Analysis",
        "description": "Comprehensive analysis including summary, risks, and compliance",
        "baseCost": 0.15,
        "estimatedTime": "4-5 minutes",
    },
]

ANALYSIS_TYPE_KEYS = frozenset(t["type"] for t in ANALYSIS_TYPES)

# ── Pricing (ETH) ───────────────────────────────────────────────────────
DEFAULT_CURRENCY = "ETH"
TEMPLATE_GENERATION_COST = 0.05
DEFAULT_QUERY_COST = 0.01
MAX_QUERY_COST = 1000

# ── Disclaimers and messages ────────────────────────────────────────────
ADVICE_DISCLAIMER = (
    "This is general legal information, not legal advice. "
    "Consult with a qualified attorney for specific legal matters."
)
TEMPLATE_DISCLAIMER = (
    "This template is for informational purposes only. "
    "Have it reviewed by a qualified attorney before use."
)
TEMPLATE_INSTRUCTIONS = (
    "Fill in the bracketed variables with your specific information. "
    "Review all content carefully before sending or filing."
)

ERROR_MESSAGES: Dict[str, str] = {
    "INVALID_INPUT": "Please provide a valid legal question or situation.",
    "JURISDICTION_REQUIRED": "Please select your jurisdiction to get accurate legal information.",
    "API_ERROR": "Sorry, we encountered an error processing your request. Please try again.",
    "ADVICE_FAILED": "Failed to generate legal advice. Please try again.",
    "INVALID_FRAME": "Invalid frame request",
}

# ── Frame ───────────────────────────────────────────────────────────────
FRAME_MAX_BUTTONS = 4
FRAME_MAX_INPUT_LENGTH = 256
FRAME_ASPECT_RATIO = "1.91:1"
OG_IMAGE_SIZE = (1200, 630)
