"""Payment core value objects.

Nothing here is persisted; requests live for one call and results are read
once by the processor.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PaymentRequest(BaseModel):
    """One payment attempt as submitted by the caller.

    Fields are intentionally unconstrained so that `PaymentValidator` owns the
    ordering and wording of rejections.
    """

    model_config = ConfigDict(frozen=True)

    payment_id: str = ""
    amount: Decimal = Decimal("0")
    currency: str = ""
    customer_id: str = ""
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class SettlementResult(BaseModel):
    """Outcome reported by a settlement gateway."""

    success: bool
    error_message: str | None = None


class FeeQuote(BaseModel):
    """Priced request prior to settlement."""

    payment_id: str
    currency: str
    amount: Decimal
    rate: Decimal
    fee: Decimal
    total: Decimal
    default_rate_applied: bool = False


class OutcomeKind(str, Enum):
    SETTLED = "SETTLED"
    DECLINED = "DECLINED"
    INVALID = "INVALID"
    MISCONFIGURED = "MISCONFIGURED"
    GATEWAY_ERROR = "GATEWAY_ERROR"


class ProcessOutcome(BaseModel):
    """Tagged result of `PaymentProcessor.try_process`."""

    kind: OutcomeKind
    payment_id: str | None = None
    success: bool = False
    fee: Decimal | None = None
    total: Decimal | None = None
    reason: str | None = None


class ValidationResult(BaseModel):
    """Tagged validation outcome so callers can branch without exceptions."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    field: str | None = None
    reason: str | None = None
