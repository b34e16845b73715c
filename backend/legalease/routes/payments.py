"""Mock payment routes.

Endpoints:
  POST /api/payments    Process a direct payment (always confirmed)
  GET  /api/payments    Status by transactionHash or paymentId
  POST /api/payment     Create a payment intent (pending, expires in 15 min)
  GET  /api/payment     Payment intent status
  PUT  /api/payment     Webhook-style intent status update
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Query, status

from ..errors import (
    INVALID_HASH,
    PAYMENT_ERROR,
    PAYMENT_NOT_FOUND,
    LegalEaseError,
    ensure_valid,
    missing_parameter,
)
from ..services.payment_service import mock_payment_status, payment_intents, process_payment
from ..services.validators import (
    is_valid_transaction_hash,
    validate_payment_intent_request,
    validate_payment_request,
    validate_payment_status_update,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Payments"],
)


@router.post("/payments", summary="Process a payment")
async def create_payment(payload: Dict[str, Any] = Body(...)):
    request = ensure_valid(validate_payment_request(payload), "Invalid payment request")
    try:
        result = process_payment(request)
    except ValueError as exc:
        logger.error("[PAYMENT] Processing failed: %s", exc)
        raise LegalEaseError(PAYMENT_ERROR, str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

    return {
        "success": True,
        "data": result["payment"].to_api(),
        "paymentId": result["payment_id"],
        "message": "Payment processed successfully",
    }


@router.get("/payments", summary="Check a payment's status")
async def payment_status(
    transaction_hash: Optional[str] = Query(None, alias="transactionHash"),
    payment_id: Optional[str] = Query(None, alias="paymentId"),
):
    if not transaction_hash and not payment_id:
        raise missing_parameter("Either transactionHash or paymentId is required")
    if transaction_hash and not is_valid_transaction_hash(transaction_hash):
        raise LegalEaseError(INVALID_HASH, "Invalid transaction hash format", status.HTTP_400_BAD_REQUEST)

    return {
        "success": True,
        "data": mock_payment_status(transaction_hash, payment_id),
        "message": "Payment status retrieved successfully",
    }


@router.post("/payment", summary="Create a payment intent")
async def create_payment_intent(payload: Dict[str, Any] = Body(...)):
    request = ensure_valid(validate_payment_intent_request(payload), "Invalid payment data")
    intent = payment_intents.create(request)
    return {"success": True, **intent.to_api()}


@router.get("/payment", summary="Get a payment intent's status")
async def payment_intent_status(payment_id: Optional[str] = Query(None, alias="paymentId")):
    if not payment_id:
        raise missing_parameter("Payment ID is required")
    return {"success": True, **payment_intents.status(payment_id)}


@router.put("/payment", summary="Update a payment intent's status")
async def update_payment_intent(payload: Dict[str, Any] = Body(...)):
    request = ensure_valid(validate_payment_status_update(payload), "Invalid payment status update")
    intent = payment_intents.update(request.payment_id, request.status, request.transaction_hash)
    if intent is None:
        raise LegalEaseError(
            PAYMENT_NOT_FOUND,
            f"Payment '{request.payment_id}' not found",
            status.HTTP_404_NOT_FOUND,
        )
    return {
        "success": True,
        "data": intent.to_api(),
        "message": "Payment status updated successfully",
    }
