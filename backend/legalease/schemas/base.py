"""Shared pydantic base for API models.

Python attributes stay snake_case; the wire format is camelCase to match
the Frame client and the web UI.
"""

from __future__ import annotations

import re
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..constants import JURISDICTIONS

WALLET_ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")
TRANSACTION_HASH_RE = re.compile(r"^0x[a-fA-F0-9]{64}$")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_api(self) -> Dict[str, Any]:
        """Dump with camelCase keys and JSON-safe values."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


def normalize_jurisdiction(value: str) -> str:
    """Canonicalize a jurisdiction code; raise ValueError for unknown codes."""
    code = (value or "").strip().upper()
    if code not in JURISDICTIONS:
        raise ValueError(
            f"Unsupported jurisdiction '{value}'. "
            f"Valid codes: {list(JURISDICTIONS.keys())}"
        )
    return code


def is_valid_wallet_address(address: Any) -> bool:
    """Basic Ethereum address check: 0x + 40 hex digits."""
    return isinstance(address, str) and bool(WALLET_ADDRESS_RE.match(address))


def is_valid_transaction_hash(tx_hash: Any) -> bool:
    """0x + 64 hex digits."""
    return isinstance(tx_hash, str) and bool(TRANSACTION_HASH_RE.match(tx_hash))
