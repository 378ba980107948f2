"""Payment endpoints backed by the mock payment gateway.

Provides REST endpoints for:
- Verifying a payment by transaction ID (public)
- Processing a payment (public)

No real gateway is contacted; see travel_shared.services.payment_service.
"""

from fastapi import APIRouter, Body, Depends

from travel_api.dependencies import get_payment_service
from travel_shared.models import (
    APIResponse,
    PaymentProcessRequest,
    PaymentResponse,
    PaymentVerifyRequest,
)
from travel_shared.services.payment_service import PaymentService

router = APIRouter(tags=["payments"])

_ERROR_ENVELOPE_EXAMPLE = {
    "success": False,
    "error": {"code": "MISSING_TRANSACTION_ID", "message": "Transaction ID is required"},
    "timestamp": "2026-01-01T00:00:00.000Z",
}


@router.post(
    "/payment/verify",
    summary="Verify payment",
    description="""
Verify the status of a payment transaction.

**Public endpoint** - no authentication required.

The mock gateway reports every transaction as `completed`.

**Errors:**
- `MISSING_TRANSACTION_ID` (400): body has no `transactionId`
""",
    response_description="Payment status wrapped in the response envelope",
    response_model=APIResponse[PaymentResponse],
    response_model_exclude_none=True,
    responses={
        200: {
            "description": "Payment verified",
        },
        400: {
            "description": "Transaction ID missing",
            "content": {"application/json": {"example": _ERROR_ENVELOPE_EXAMPLE}},
        },
    },
)
async def verify_payment(
    body: PaymentVerifyRequest | None = Body(default=None),
    payment_service: PaymentService = Depends(get_payment_service),
) -> APIResponse[PaymentResponse]:
    """Verify a payment by transaction ID."""
    transaction_id = body.transaction_id if body else None
    result = payment_service.verify_payment(transaction_id)
    return APIResponse[PaymentResponse].ok(result)


@router.post(
    "/payment/process",
    summary="Process payment",
    description="""
Charge a payment through the mock gateway.

**Public endpoint** - no authentication required.

Any positive `amount` succeeds with a new transaction ID.

**Errors:**
- `INVALID_AMOUNT` (400): amount missing, zero or negative
""",
    response_description="Payment result wrapped in the response envelope",
    response_model=APIResponse[PaymentResponse],
    responses={
        400: {
            "description": "Invalid amount",
        },
    },
)
async def process_payment(
    body: PaymentProcessRequest | None = Body(default=None),
    payment_service: PaymentService = Depends(get_payment_service),
) -> APIResponse[PaymentResponse]:
    result = payment_service.process_payment(body or PaymentProcessRequest())
    return APIResponse[PaymentResponse].ok(result)
