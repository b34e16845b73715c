# Schemas package
from .legal_schema import (
    AdviceRequest,
    DocumentAnalysisRequest,
    DocumentAnalysisResponse,
    LegalAdviceResponse,
    LegalQuery,
    Template,
    TemplateRequest,
)
from .session_schema import SessionCreateRequest, SessionUpdateRequest, UserSession
from .payment_schema import PaymentIntentRequest, PaymentRequest, PaymentResponse
from .frame_schema import FrameRequest, FrameResponse

__all__ = [
    "AdviceRequest",
    "DocumentAnalysisRequest",
    "DocumentAnalysisResponse",
    "LegalAdviceResponse",
    "LegalQuery",
    "Template",
    "TemplateRequest",
    "SessionCreateRequest",
    "SessionUpdateRequest",
    "UserSession",
    "PaymentIntentRequest",
    "PaymentRequest",
    "PaymentResponse",
    "FrameRequest",
    "FrameResponse",
]
