"""Mock payment gateway.

No real gateway is contacted: verification always reports the transaction
as completed, and processing succeeds for any positive amount. The service
exists so the HTTP layer has the same seam a real provider would plug into.
"""

import datetime as dt
import random
import string

from travel_shared.models import (
    CatalogError,
    ErrorCode,
    PaymentProcessRequest,
    PaymentResponse,
    PaymentStatus,
)
from travel_shared.utils.logging import get_logger, log_payment_operation

logger = get_logger(__name__)

_BASE36 = string.digits + string.ascii_lowercase


class PaymentService:
    """Mock provider for verifying and processing payments."""

    def __init__(self, rng: random.Random | None = None) -> None:
        """Initialize payment service.

        Args:
            rng: Randomness source for transaction IDs. Defaults to a
                fresh ``random.Random``.
        """
        self.rng = rng or random.Random()

    def _generate_transaction_id(self, now: dt.datetime | None = None) -> str:
        """Generate a transaction ID like ``txn-1767225600000-k3j9x2m1q``."""
        now = now or dt.datetime.now(dt.UTC)
        millis = int(now.timestamp() * 1000)
        suffix = "".join(self.rng.choices(_BASE36, k=9))
        return f"txn-{millis}-{suffix}"

    def verify_payment(self, transaction_id: str | None) -> PaymentResponse:
        """Report the status of a transaction.

        Args:
            transaction_id: Gateway transaction ID from the request body.

        Returns:
            PaymentResponse with ``paymentStatus`` completed.

        Raises:
            CatalogError: MISSING_TRANSACTION_ID if the ID is absent or empty.
        """
        if not transaction_id:
            log_payment_operation(
                logger, "verify_payment", error="missing transaction id"
            )
            raise CatalogError(ErrorCode.MISSING_TRANSACTION_ID)

        # MOCK: a real gateway lookup goes here
        result = PaymentResponse(
            success=True,
            transaction_id=transaction_id,
            payment_status=PaymentStatus.COMPLETED,
        )
        log_payment_operation(
            logger,
            "verify_payment",
            transaction_id=transaction_id,
            status=result.payment_status.value,
        )
        return result

    def process_payment(
        self,
        request: PaymentProcessRequest,
        now: dt.datetime | None = None,
    ) -> PaymentResponse:
        """Charge a payment.

        Args:
            request: Payment details from the request body.
            now: Processing time, used in the transaction ID.

        Returns:
            PaymentResponse with a new transaction ID and status completed.

        Raises:
            CatalogError: INVALID_AMOUNT if the amount is missing or not positive.
        """
        if request.amount is None or request.amount <= 0:
            log_payment_operation(
                logger,
                "process_payment",
                booking_id=request.booking_id,
                amount=request.amount,
                error="invalid amount",
            )
            raise CatalogError(ErrorCode.INVALID_AMOUNT)

        transaction_id = self._generate_transaction_id(now)
        result = PaymentResponse(
            success=True,
            transaction_id=transaction_id,
            payment_status=PaymentStatus.COMPLETED,
            message="Payment processed successfully",
        )
        log_payment_operation(
            logger,
            "process_payment",
            transaction_id=transaction_id,
            booking_id=request.booking_id,
            amount=request.amount,
            currency=request.currency,
            status=result.payment_status.value,
        )
        return result
