"""Telemetry payload shapes served to the monitoring dashboard."""

from pydantic import BaseModel


class ServiceMetrics(BaseModel):
    """Fields common to every service snapshot."""

    service: str
    time_range: str
    cpu_usage_percent: float
    memory_usage_mb: float
    memory_usage_percent: float
    requests_per_minute: float
    error_rate_percent: float
    response_time_ms: float
    active_connections: int
    disk_io_mb_per_sec: float
    network_io_mb_per_sec: float
    garbage_collections_per_minute: int
    thread_pool_usage_percent: float


class PaymentsServiceMetrics(ServiceMetrics):
    failed_transactions: int
    successful_transactions: int
    null_reference_exceptions: int
    payment_gateway_timeouts: int


class OrdersServiceMetrics(ServiceMetrics):
    failed_orders: int
    successful_orders: int
    validation_errors: int
    database_query_time_ms: float


class Alert(BaseModel):
    id: str
    service: str
    severity: str
    title: str
    description: str
    triggered_at: str
    metric: str
    current_value: float
    threshold: float
    status: str
