"""HTTP surface for the dashboard telemetry generator."""

from fastapi import FastAPI, Request

from paymon.common.config import settings
from paymon.common.http import add_metrics_middleware, error_response
from paymon.common.logging import configure_logging
from paymon.common.metrics import metrics_response
from paymon.common.startup import log_startup_config
from paymon.common.tracing import instrument_app, setup_tracing
from paymon.services.monitoring.models import Alert
from paymon.services.monitoring.service import MetricsGenerator, UnknownServiceError

configure_logging()
setup_tracing(settings.service_name)
log_startup_config(settings, ["service_name", "log_level", "metrics_seed"])
generator = MetricsGenerator(seed=settings.metrics_seed)

app = FastAPI(title="PayMon Monitoring")
instrument_app(app)
add_metrics_middleware(app, settings.service_name)


@app.exception_handler(UnknownServiceError)
async def unknown_service_handler(_: Request, exc: UnknownServiceError):
    return error_response(404, "UNKNOWN_SERVICE", str(exc))


@app.get("/services/{service}/metrics")
def service_metrics(service: str, time_range: str = "1h"):
    """Fabricated telemetry snapshot for one service."""

    return generator.generate_service_metrics(service, time_range).model_dump()


@app.get("/alerts", response_model=list[Alert])
def alerts(service: str | None = None):
    """Canned alert records, optionally filtered by service."""

    return generator.generate_alerts(service)


@app.get("/metrics")
def metrics():
    """Prometheus scrape endpoint."""

    return metrics_response()


@app.get("/health")
def health():
    """Container health probe endpoint."""

    return {"ok": True}
