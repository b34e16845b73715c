"""Environment-driven configuration.

Values are read lazily from the environment (after `.env` is loaded) so
tests can override them with monkeypatch without reloading modules.
"""

from __future__ import annotations

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()

_DEFAULT_APP_URL = "http://localhost:3000"

# Keys the original deployment reserved for integrations that never shipped.
PLACEHOLDER_KEYS: List[str] = [
    "NEYNAR_API_KEY",
    "AIRSTACK_API_KEY",
    "ALCHEMY_API_KEY",
    "PRIVY_APP_ID",
    "PINATA_API_KEY",
    "PINATA_SECRET_KEY",
]


def env_float(key: str, default: float) -> float:
    try:
        return float(os.getenv(key, str(default)))
    except ValueError:
        return default


def env_int(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, str(default)))
    except ValueError:
        return default


def get_app_url() -> str:
    """Public base URL used for frame, image and payment links."""
    for key in ("APP_URL", "NEXT_PUBLIC_URL", "NEXT_PUBLIC_APP_URL"):
        value = os.getenv(key, "").strip()
        if value:
            return value.rstrip("/")
    return _DEFAULT_APP_URL


def get_session_ttl_seconds() -> int:
    return env_int("SESSION_TTL_SECONDS", 24 * 60 * 60)


def get_payment_intent_ttl_seconds() -> int:
    return env_int("PAYMENT_INTENT_TTL_SECONDS", 15 * 60)


def get_payment_intent_retention_seconds() -> int:
    """How long an expired intent stays readable before it is dropped."""
    return env_int("PAYMENT_INTENT_RETENTION_SECONDS", 60 * 60)


def get_cors_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS", "")
    if raw.strip():
        return [o.strip() for o in raw.split(",") if o.strip()]
    return [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:3001",
    ]


def is_debug() -> bool:
    return os.getenv("DEBUG", "false").lower() == "true"


def is_configured(key: str) -> bool:
    return bool(os.getenv(key, "").strip())
