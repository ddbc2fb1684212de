"""API request/response schemas for payment endpoints."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from paymon.services.payments.models import PaymentRequest


class PaymentSubmitRequest(BaseModel):
    """Payment payload accepted by `POST /payments`.

    Field checks are left to `PaymentValidator` so HTTP and in-process callers
    see the same rejection reasons.
    """

    payment_id: str = ""
    amount: Decimal = Decimal("0")
    currency: str = ""
    customer_id: str = ""

    def to_request(self) -> PaymentRequest:
        return PaymentRequest(
            payment_id=self.payment_id,
            amount=self.amount,
            currency=self.currency,
            customer_id=self.customer_id,
        )


class PaymentResponse(BaseModel):
    payment_id: str
    success: bool
    fee: Decimal
    total: Decimal
    error_message: str | None = None


class FailedPaymentResponse(BaseModel):
    payment_id: str
    amount: Decimal
    currency: str
    customer_id: str
    created_at: datetime


class FeeTableResponse(BaseModel):
    rates: dict[str, Decimal]
    default_rate: Decimal
