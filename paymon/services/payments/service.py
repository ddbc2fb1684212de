"""Payment processing pipeline.

Validates a request, prices it from the fee table and hands the total to the
settlement gateway. Each call is independent: there is no deduplication, no
retry and no persisted state, so processing the same request twice settles it
twice.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from paymon.common.errors import ConfigurationError, GatewayError, PaymentError, ValidationError
from paymon.common.logging import logger, payment_id_ctx
from paymon.common.metrics import (
    payment_failure_total,
    payment_requests_total,
    payment_success_total,
    settlement_latency_seconds,
)
from paymon.common.state_machine import (
    DONE,
    FAILED,
    FEE_CALCULATING,
    SETTLING,
    VALIDATING,
    is_terminal,
    validate_transition,
)
from paymon.common.tracing import get_tracer
from paymon.services.payments.fees import FeeTable
from paymon.services.payments.gateway import PaymentGateway
from paymon.services.payments.models import (
    FeeQuote,
    OutcomeKind,
    PaymentRequest,
    ProcessOutcome,
    SettlementResult,
)
from paymon.services.payments.validation import PaymentValidator


tracer = get_tracer("paymon.payments")


class PaymentProcessor:
    """Orchestrates validate -> fee -> total -> settle for one request."""

    def __init__(
        self,
        fee_table: FeeTable | None = None,
        gateway: PaymentGateway | None = None,
        validator: PaymentValidator | None = None,
        service_name: str = "payments",
    ) -> None:
        self.fee_table = fee_table or FeeTable.from_settings()
        self.gateway = gateway
        self.validator = validator or PaymentValidator()
        self.service_name = service_name

    def _advance(self, payment_id: str | None, current: str, new: str) -> str:
        validate_transition(current, new)
        logger.debug("payment_stage payment_id=%s from=%s to=%s", payment_id or "null", current, new)
        return new

    def _price(self, request: PaymentRequest) -> FeeQuote:
        rate = self.fee_table.rate_for(request.currency)
        fee = request.amount * rate
        return FeeQuote(
            payment_id=request.payment_id,
            currency=request.currency,
            amount=request.amount,
            rate=rate,
            fee=fee,
            total=request.amount + fee,
            default_rate_applied=not self.fee_table.supports(request.currency),
        )

    def quote(self, request: PaymentRequest | None) -> FeeQuote:
        """Validate and price a request without settling it."""

        self.validator.validate(request)
        return self._price(request)

    async def submit(
        self, request: PaymentRequest | None, gateway: PaymentGateway | None = None
    ) -> tuple[FeeQuote, SettlementResult]:
        """Run the full pipeline and return the priced quote with the settlement result."""

        target = gateway or self.gateway
        payment_id = request.payment_id if request is not None and request.payment_id else None
        token = payment_id_ctx.set(payment_id or "")
        stage = VALIDATING
        payment_requests_total.labels(service=self.service_name).inc()
        try:
            if target is None:
                raise ConfigurationError("payment gateway is not configured", payment_id=payment_id)
            self.validator.validate(request)

            stage = self._advance(payment_id, stage, FEE_CALCULATING)
            quote = self._price(request)

            stage = self._advance(payment_id, stage, SETTLING)
            with tracer.start_as_current_span("payments.settle") as span:
                span.set_attribute("payment.id", request.payment_id)
                span.set_attribute("payment.currency", request.currency)
                with settlement_latency_seconds.labels(service=self.service_name).time():
                    result = await target.settle(request.payment_id, quote.total)

            stage = self._advance(payment_id, stage, DONE)
            if result.success:
                payment_success_total.labels(service=self.service_name).inc()
                logger.info(
                    "payment_settled payment_id=%s currency=%s fee=%s total=%s",
                    quote.payment_id,
                    quote.currency,
                    quote.fee,
                    quote.total,
                )
            else:
                payment_failure_total.labels(service=self.service_name, reason="DECLINED").inc()
                logger.warning(
                    "payment_declined payment_id=%s total=%s error=%s",
                    quote.payment_id,
                    quote.total,
                    result.error_message,
                )
            return quote, result
        except PaymentError as exc:
            if not is_terminal(stage):
                self._advance(payment_id, stage, FAILED)
            payment_failure_total.labels(service=self.service_name, reason=exc.code).inc()
            logger.error(
                "payment_processing_failed payment_id=%s stage=%s code=%s error=%s",
                payment_id or "null",
                stage,
                exc.code,
                exc.message,
            )
            raise
        except Exception as exc:
            if not is_terminal(stage):
                self._advance(payment_id, stage, FAILED)
            payment_failure_total.labels(service=self.service_name, reason=type(exc).__name__).inc()
            logger.exception("payment_processing_failed payment_id=%s stage=%s error=%s", payment_id or "null", stage, exc)
            raise
        finally:
            payment_id_ctx.reset(token)

    async def process(self, request: PaymentRequest | None, gateway: PaymentGateway | None = None) -> bool:
        """Process one payment and return the gateway's success flag.

        Raises `ConfigurationError` when no gateway is bound (at call or
        construction time), `ValidationError` for malformed requests and lets
        `GatewayError` from the gateway propagate unchanged.
        """

        _, result = await self.submit(request, gateway)
        return result.success

    async def try_process(
        self, request: PaymentRequest | None, gateway: PaymentGateway | None = None
    ) -> ProcessOutcome:
        """Like `process`, but reports core failures as a tagged outcome."""

        try:
            quote, result = await self.submit(request, gateway)
        except ValidationError as exc:
            return ProcessOutcome(kind=OutcomeKind.INVALID, payment_id=exc.payment_id, reason=exc.message)
        except ConfigurationError as exc:
            return ProcessOutcome(kind=OutcomeKind.MISCONFIGURED, payment_id=exc.payment_id, reason=exc.message)
        except GatewayError as exc:
            return ProcessOutcome(kind=OutcomeKind.GATEWAY_ERROR, payment_id=exc.payment_id, reason=exc.message)

        return ProcessOutcome(
            kind=OutcomeKind.SETTLED if result.success else OutcomeKind.DECLINED,
            payment_id=quote.payment_id,
            success=result.success,
            fee=quote.fee,
            total=quote.total,
            reason=result.error_message,
        )

    def list_failed_payments(self) -> tuple[PaymentRequest, ...]:
        """Return the fixed snapshot of previously failed payments, oldest first."""

        now = datetime.now(timezone.utc)
        return (
            PaymentRequest(
                payment_id="PMT-12345",
                amount=Decimal("299.99"),
                currency="USD",
                customer_id="CUST-001",
                created_at=now - timedelta(minutes=30),
            ),
            PaymentRequest(
                payment_id="PMT-12347",
                amount=Decimal("89.99"),
                currency="EUR",
                customer_id="CUST-002",
                created_at=now - timedelta(minutes=20),
            ),
        )
