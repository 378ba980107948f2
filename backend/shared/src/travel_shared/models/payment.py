"""Payment request/response models for the mock payment gateway."""

from typing import Any

from pydantic import Field

from .base import CamelModel
from .enums import PaymentMethodType, PaymentStatus


class PaymentVerifyRequest(CamelModel):
    """Body of ``POST /payment/verify``.

    ``transaction_id`` is optional at the schema level so that a missing
    value is reported as MISSING_TRANSACTION_ID rather than a generic
    validation failure.
    """

    transaction_id: str | None = Field(
        default=None,
        description="Gateway transaction/order tracking ID",
        examples=["txn-1767225600000-k3j9x2m1q"],
    )


class PaymentMethod(CamelModel):
    """Payment method selected by the customer."""

    type: PaymentMethodType
    provider: str | None = Field(
        default=None,
        description="Visa, Mastercard, M-Pesa, Airtel Money",
    )


class PaymentProcessRequest(CamelModel):
    """Body of ``POST /payment/process``."""

    booking_id: str | None = None
    amount: float | None = Field(default=None, description="Amount to charge")
    currency: str = "USD"
    payment_method: PaymentMethod | None = None
    metadata: dict[str, Any] | None = None


class PaymentResponse(CamelModel):
    """Result reported by the payment gateway for one transaction."""

    success: bool
    transaction_id: str
    payment_status: PaymentStatus
    message: str | None = None
