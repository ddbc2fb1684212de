"""Central environment-driven settings shared by all services.

Each service process loads this once at startup. Service-specific behavior is
controlled by environment variables (see `.env.example`).
"""

from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_FEE_RATES: dict[str, Decimal] = {
    "USD": Decimal("0.029"),
    "EUR": Decimal("0.035"),
    "GBP": Decimal("0.032"),
}


class CommonSettings(BaseSettings):
    """Typed view of runtime configuration from environment variables."""

    service_name: str = "paymon"
    log_level: str = "INFO"
    # FEE_RATES is parsed as JSON, e.g. '{"USD": "0.029", "JPY": "0.05"}'.
    fee_rates: dict[str, Decimal] = Field(default_factory=lambda: dict(DEFAULT_FEE_RATES))
    default_fee_rate: Decimal = Decimal("0.040")
    # Empty gateway_url wires the deterministic stub gateway.
    gateway_url: str = ""
    gateway_timeout_seconds: float = 5.0
    otel_exporter_otlp_endpoint: str = ""
    metrics_seed: int | None = None
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = CommonSettings()
