"""Error taxonomy for the payment core.

Every failure carries the offending payment id when one is known so callers
can diagnose without inspecting processor internals.
"""

from typing import Any


class PaymentError(Exception):
    """Base class for failures surfaced by the payment core."""

    code = "PAYMENT_ERROR"

    def __init__(self, message: str, payment_id: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.payment_id = payment_id

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "payment_id": self.payment_id}


class ValidationError(PaymentError):
    """Request failed structural checks; fix the input and resubmit."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None, payment_id: str | None = None) -> None:
        super().__init__(message, payment_id=payment_id)
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["field"] = self.field
        return data


class ConfigurationError(PaymentError):
    """Processor is wired without a settlement backend."""

    code = "CONFIGURATION_ERROR"


class GatewayError(PaymentError):
    """Settlement backend failure. Retry policy belongs to the caller."""

    code = "GATEWAY_ERROR"
