"""Request validators.

Every `validate_*_request` function returns a ValidationResult instead of
raising for malformed input. Only errors internal to pydantic itself
propagate.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..constants import JURISDICTIONS, QUERY_MAX_LENGTH, QUERY_MIN_LENGTH
from ..schemas.base import is_valid_transaction_hash, is_valid_wallet_address
from ..schemas.frame_schema import FrameRequest
from ..schemas.legal_schema import (
    AdviceRequest,
    DocumentAnalysisRequest,
    LegalQuery,
    TemplateCustomizeRequest,
    TemplateRequest,
)
from ..schemas.payment_schema import PaymentIntentRequest, PaymentRequest, PaymentStatusUpdate
from ..schemas.session_schema import SessionCreateRequest, SessionUpdateRequest
from ..schemas.user_schema import UserCreateRequest, UserUpdateRequest

__all__ = [
    "ValidationResult",
    "validate_query",
    "validate_jurisdiction",
    "is_valid_email",
    "is_valid_wallet_address",
    "is_valid_transaction_hash",
    "validate_legal_query_request",
    "validate_advice_request",
    "validate_document_analysis_request",
    "validate_template_request",
    "validate_template_customize_request",
    "validate_payment_request",
    "validate_payment_intent_request",
    "validate_payment_status_update",
    "validate_session_request",
    "validate_session_update_request",
    "validate_user_create_request",
    "validate_user_update_request",
    "validate_frame_request",
]

M = TypeVar("M", bound=BaseModel)

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass
class ValidationResult(Generic[M]):
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    data: Optional[M] = None


def validate_query(query: Any) -> bool:
    """True when the trimmed query length is within [10, 500]."""
    if not isinstance(query, str):
        return False
    length = len(query.strip())
    return QUERY_MIN_LENGTH <= length <= QUERY_MAX_LENGTH


def validate_jurisdiction(code: Any) -> bool:
    return isinstance(code, str) and code.strip().upper() in JURISDICTIONS


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.match(email or ""))


def _format_errors(exc: ValidationError) -> List[str]:
    messages = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        msg = err.get("msg", "Invalid value")
        # pydantic prefixes ValueError messages raised in validators
        msg = msg.removeprefix("Value error, ")
        messages.append(f"{loc}: {msg}" if loc else msg)
    return messages


def _validate(model_cls: Type[M], body: Any) -> ValidationResult[M]:
    if not isinstance(body, dict):
        return ValidationResult(False, ["Request body must be a JSON object"])
    try:
        model = model_cls.model_validate(body)
    except ValidationError as exc:
        return ValidationResult(False, _format_errors(exc))
    return ValidationResult(True, [], model)


def validate_legal_query_request(body: Any) -> ValidationResult[LegalQuery]:
    return _validate(LegalQuery, body)


def validate_advice_request(body: Any) -> ValidationResult[AdviceRequest]:
    return _validate(AdviceRequest, body)


def validate_document_analysis_request(body: Any) -> ValidationResult[DocumentAnalysisRequest]:
    return _validate(DocumentAnalysisRequest, body)


def validate_template_request(body: Any) -> ValidationResult[TemplateRequest]:
    return _validate(TemplateRequest, body)


def validate_template_customize_request(body: Any) -> ValidationResult[TemplateCustomizeRequest]:
    return _validate(TemplateCustomizeRequest, body)


def validate_payment_request(body: Any) -> ValidationResult[PaymentRequest]:
    return _validate(PaymentRequest, body)


def validate_payment_intent_request(body: Any) -> ValidationResult[PaymentIntentRequest]:
    return _validate(PaymentIntentRequest, body)


def validate_payment_status_update(body: Any) -> ValidationResult[PaymentStatusUpdate]:
    return _validate(PaymentStatusUpdate, body)


def validate_session_request(body: Any) -> ValidationResult[SessionCreateRequest]:
    return _validate(SessionCreateRequest, body)


def validate_session_update_request(body: Any) -> ValidationResult[SessionUpdateRequest]:
    return _validate(SessionUpdateRequest, body)


def validate_user_create_request(body: Any) -> ValidationResult[UserCreateRequest]:
    return _validate(UserCreateRequest, body)


def validate_user_update_request(body: Any) -> ValidationResult[UserUpdateRequest]:
    return _validate(UserUpdateRequest, body)


def validate_frame_request(body: Any) -> ValidationResult[FrameRequest]:
    return _validate(FrameRequest, body)
