"""Fabricated telemetry for the monitoring dashboard.

Values are drawn from fixed ranges per service; alerts are a canned list. No
live system is observed.
"""

import random
from datetime import datetime, timedelta, timezone

from paymon.common.logging import logger
from paymon.services.monitoring.models import Alert, OrdersServiceMetrics, PaymentsServiceMetrics, ServiceMetrics


PAYMENTS_SERVICE = "PaymentsService"
ORDERS_SERVICE = "OrdersService"
ALERT_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# (id, service, title, description, minutes_ago, metric, current_value, threshold)
CANNED_ALERTS: tuple[tuple, ...] = (
    (
        "ALERT-001",
        PAYMENTS_SERVICE,
        "Error Rate Normalized",
        "PaymentsService error rate has been reduced to 1.2% (below 10% threshold) after null reference fixes",
        5,
        "error_rate_percent",
        1.2,
        10.0,
    ),
    (
        "ALERT-002",
        PAYMENTS_SERVICE,
        "Response Time Improved",
        "PaymentsService average response time reduced to 180ms (below 800ms threshold)",
        3,
        "response_time_ms",
        180.5,
        800.0,
    ),
    (
        "ALERT-003",
        PAYMENTS_SERVICE,
        "Null References Eliminated",
        "Zero null reference failures detected in the payment processor after validation fixes",
        2,
        "null_reference_exceptions",
        0.0,
        5.0,
    ),
    (
        "ALERT-004",
        ORDERS_SERVICE,
        "All Systems Normal",
        "OrdersService operating within normal parameters",
        60,
        "overall_health",
        98.5,
        95.0,
    ),
)


class UnknownServiceError(LookupError):
    """Raised when metrics are requested for a service with no generator."""


class MetricsGenerator:
    """Produces random service snapshots and the canned alert list."""

    def __init__(self, rng: random.Random | None = None, seed: int | None = None) -> None:
        self.rng = rng or random.Random(seed)

    def _between(self, low: float, span: float) -> float:
        return round(low + self.rng.random() * span, 2)

    def generate_payments_metrics(self, time_range: str) -> PaymentsServiceMetrics:
        return PaymentsServiceMetrics(
            service=PAYMENTS_SERVICE,
            time_range=time_range,
            cpu_usage_percent=self._between(25.0, 15),
            memory_usage_mb=self._between(220.0, 60),
            memory_usage_percent=self._between(44.0, 12),
            requests_per_minute=self._between(180.0, 40),
            error_rate_percent=self._between(0.8, 1.5),
            response_time_ms=self._between(150.0, 100),
            active_connections=self.rng.randrange(30, 50),
            failed_transactions=self.rng.randrange(1, 5),
            successful_transactions=self.rng.randrange(175, 220),
            null_reference_exceptions=self.rng.randrange(0, 1),
            payment_gateway_timeouts=self.rng.randrange(0, 2),
            disk_io_mb_per_sec=self._between(1.5, 1.0),
            network_io_mb_per_sec=self._between(1.2, 0.5),
            garbage_collections_per_minute=self.rng.randrange(3, 6),
            thread_pool_usage_percent=self._between(35.0, 20),
        )

    def generate_orders_metrics(self, time_range: str) -> OrdersServiceMetrics:
        return OrdersServiceMetrics(
            service=ORDERS_SERVICE,
            time_range=time_range,
            cpu_usage_percent=self._between(15.0, 10),
            memory_usage_mb=self._between(180.0, 40),
            memory_usage_percent=self._between(36.0, 12),
            requests_per_minute=self._between(200.0, 30),
            error_rate_percent=self._between(0.5, 1.0),
            response_time_ms=self._between(120.0, 80),
            active_connections=self.rng.randrange(35, 55),
            failed_orders=self.rng.randrange(1, 3),
            successful_orders=self.rng.randrange(195, 225),
            validation_errors=self.rng.randrange(0, 2),
            database_query_time_ms=self._between(25.0, 15),
            disk_io_mb_per_sec=self._between(1.2, 0.8),
            network_io_mb_per_sec=self._between(0.9, 0.4),
            garbage_collections_per_minute=self.rng.randrange(2, 5),
            thread_pool_usage_percent=self._between(25.0, 15),
        )

    def generate_service_metrics(self, service: str, time_range: str = "1h") -> ServiceMetrics:
        """Dispatch on service name (case-insensitive)."""

        generators = {
            PAYMENTS_SERVICE.lower(): self.generate_payments_metrics,
            ORDERS_SERVICE.lower(): self.generate_orders_metrics,
        }
        generator = generators.get(service.lower())
        if generator is None:
            logger.warning("metrics requested for unknown service=%s", service)
            raise UnknownServiceError(f"no metrics generator for service {service!r}")
        return generator(time_range)

    def generate_alerts(self, filter_service: str | None = None) -> list[Alert]:
        """Return canned alerts, optionally filtered by exact service name ignoring case."""

        now = datetime.now(timezone.utc)
        alerts = [
            Alert(
                id=alert_id,
                service=service,
                severity="info",
                title=title,
                description=description,
                triggered_at=(now - timedelta(minutes=minutes_ago)).strftime(ALERT_TIME_FORMAT),
                metric=metric,
                current_value=current_value,
                threshold=threshold,
                status="resolved",
            )
            for alert_id, service, title, description, minutes_ago, metric, current_value, threshold in CANNED_ALERTS
        ]
        if not filter_service:
            return alerts
        wanted = filter_service.casefold()
        return [alert for alert in alerts if alert.service.casefold() == wanted]
