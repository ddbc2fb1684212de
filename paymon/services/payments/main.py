"""HTTP surface for the payment processor."""

from fastapi import Depends, FastAPI, Header, Request
from fastapi.responses import JSONResponse

from paymon.common.config import settings
from paymon.common.errors import ConfigurationError, GatewayError, PaymentError, ValidationError
from paymon.common.http import add_metrics_middleware
from paymon.common.logging import configure_logging, trace_id_ctx
from paymon.common.metrics import metrics_response
from paymon.common.startup import log_startup_config
from paymon.common.tracing import instrument_app, setup_tracing
from paymon.services.payments.fees import FeeTable
from paymon.services.payments.gateway import HttpPaymentGateway, PaymentGateway, StubPaymentGateway
from paymon.services.payments.models import FeeQuote
from paymon.services.payments.schemas import (
    FailedPaymentResponse,
    FeeTableResponse,
    PaymentResponse,
    PaymentSubmitRequest,
)
from paymon.services.payments.service import PaymentProcessor

configure_logging()
setup_tracing(settings.service_name)
log_startup_config(
    settings,
    ["service_name", "log_level", "default_fee_rate", "gateway_url", "gateway_timeout_seconds"],
)


def build_gateway() -> PaymentGateway:
    if settings.gateway_url:
        return HttpPaymentGateway(settings.gateway_url, timeout_seconds=settings.gateway_timeout_seconds)
    return StubPaymentGateway()


processor = PaymentProcessor(FeeTable.from_settings(settings), gateway=build_gateway())


def get_processor() -> PaymentProcessor:
    return processor


app = FastAPI(title="PayMon Payments")
instrument_app(app)
add_metrics_middleware(app, settings.service_name)

ERROR_STATUS: dict[type[PaymentError], int] = {
    ValidationError: 400,
    ConfigurationError: 503,
    GatewayError: 502,
}


@app.exception_handler(PaymentError)
async def payment_error_handler(_: Request, exc: PaymentError) -> JSONResponse:
    """Translate core failures into a JSON error body."""

    status_code = ERROR_STATUS.get(type(exc), 500)
    return JSONResponse(status_code=status_code, content={"error": exc.to_dict()})


@app.post("/payments", response_model=PaymentResponse)
async def create_payment(
    req: PaymentSubmitRequest,
    x_trace_id: str | None = Header(default=None),
    payments: PaymentProcessor = Depends(get_processor),
):
    """Validate, price and settle one payment."""

    if x_trace_id:
        trace_id_ctx.set(x_trace_id)
    quote, result = await payments.submit(req.to_request())
    return PaymentResponse(
        payment_id=quote.payment_id,
        success=result.success,
        fee=quote.fee,
        total=quote.total,
        error_message=result.error_message,
    )


@app.post("/payments/quote", response_model=FeeQuote)
def quote_payment(req: PaymentSubmitRequest, payments: PaymentProcessor = Depends(get_processor)):
    """Price a payment without settling it."""

    return payments.quote(req.to_request())


@app.get("/payments/failed", response_model=list[FailedPaymentResponse])
def failed_payments(payments: PaymentProcessor = Depends(get_processor)):
    """Snapshot of previously failed payments for audit."""

    return [FailedPaymentResponse(**record.model_dump()) for record in payments.list_failed_payments()]


@app.get("/fees", response_model=FeeTableResponse)
def fee_table(payments: PaymentProcessor = Depends(get_processor)):
    return FeeTableResponse(rates=dict(payments.fee_table.rates), default_rate=payments.fee_table.default_rate)


@app.get("/metrics")
def metrics():
    """Prometheus scrape endpoint."""

    return metrics_response()


@app.get("/health")
def health():
    """Container health probe endpoint."""

    return {"ok": True}
