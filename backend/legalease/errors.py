"""Application error taxonomy and the JSON error envelope."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import is_debug

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "VALIDATION_ERROR"
DOCUMENT_TOO_LARGE = "DOCUMENT_TOO_LARGE"
MISSING_PARAMETER = "MISSING_PARAMETER"
INVALID_HASH = "INVALID_HASH"
SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
PAYMENT_NOT_FOUND = "PAYMENT_NOT_FOUND"
ANALYSIS_ERROR = "ANALYSIS_ERROR"
GENERATION_ERROR = "GENERATION_ERROR"
PAYMENT_ERROR = "PAYMENT_ERROR"
AI_UNAVAILABLE = "AI_UNAVAILABLE"
INTERNAL_ERROR = "INTERNAL_ERROR"


class LegalEaseError(Exception):
    """Raised by route handlers; rendered by the registered exception handler."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details


def create_error(code: str, message: str, details: Any = None) -> Dict[str, Any]:
    """Build the error envelope shared by every endpoint."""
    error: Dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {"success": False, "error": error}


def validation_error(message: str, errors: Optional[list] = None) -> LegalEaseError:
    return LegalEaseError(VALIDATION_ERROR, message, status.HTTP_400_BAD_REQUEST, errors)


def ensure_valid(result: Any, message: str = "Invalid request data") -> Any:
    """Return `result.data` or raise VALIDATION_ERROR with the result's errors."""
    if not result.is_valid:
        raise validation_error(message, result.errors)
    return result.data


def missing_parameter(message: str) -> LegalEaseError:
    return LegalEaseError(MISSING_PARAMETER, message, status.HTTP_400_BAD_REQUEST)


def session_not_found() -> LegalEaseError:
    return LegalEaseError(
        SESSION_NOT_FOUND, "Session not found or expired", status.HTTP_404_NOT_FOUND
    )


async def _legalease_error_handler(request: Request, exc: LegalEaseError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error(exc.code, exc.message, exc.details),
    )


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = [
        f"{'.'.join(str(p) for p in err.get('loc', ()) if p != 'body')}: {err.get('msg')}"
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=create_error(VALIDATION_ERROR, "Invalid request data", details),
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("[API] Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if is_debug() else "An unexpected error occurred"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=create_error(INTERNAL_ERROR, message),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LegalEaseError, _legalease_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
