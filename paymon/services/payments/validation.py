"""Structural validation for incoming payment requests."""

from paymon.common.errors import ValidationError
from paymon.services.payments.models import PaymentRequest, ValidationResult


VALID = ValidationResult(ok=True)


def _reject(field: str, reason: str) -> ValidationResult:
    return ValidationResult(ok=False, field=field, reason=reason)


class PaymentValidator:
    """Reject malformed requests before any fee computation or gateway call."""

    def check(self, request: PaymentRequest | None) -> ValidationResult:
        """Run checks in a fixed order; the first failing one is reported."""

        if request is None:
            return _reject("request", "payment request is required")
        if not request.payment_id:
            return _reject("payment_id", "payment_id cannot be empty")
        if request.amount <= 0:
            return _reject("amount", "amount must be greater than zero")
        if not request.currency:
            return _reject("currency", "currency cannot be empty")
        if not request.customer_id:
            return _reject("customer_id", "customer_id cannot be empty")
        return VALID

    def validate(self, request: PaymentRequest | None) -> None:
        result = self.check(request)
        if not result.ok:
            payment_id = request.payment_id if request is not None and request.payment_id else None
            raise ValidationError(result.reason, field=result.field, payment_id=payment_id)
