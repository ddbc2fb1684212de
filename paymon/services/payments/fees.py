"""Currency-keyed fee rates with a default fallback."""

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from paymon.common.config import CommonSettings, settings
from paymon.common.errors import ValidationError
from paymon.common.logging import logger
from paymon.common.metrics import unsupported_currency_total


class FeeTable:
    """Read-only mapping from currency code to fractional fee rate.

    Lookups are case-sensitive. Currencies without an entry are priced at the
    default rate; this is a degraded path, not an error.
    """

    def __init__(self, rates: Mapping[str, Decimal], default_rate: Decimal, service_name: str = "payments") -> None:
        self._rates = MappingProxyType({code: Decimal(rate) for code, rate in rates.items()})
        self._default_rate = Decimal(default_rate)
        self.service_name = service_name

    @classmethod
    def from_settings(cls, config: CommonSettings | None = None) -> "FeeTable":
        config = config or settings
        return cls(config.fee_rates, config.default_fee_rate, service_name=config.service_name)

    @property
    def rates(self) -> Mapping[str, Decimal]:
        return self._rates

    @property
    def default_rate(self) -> Decimal:
        return self._default_rate

    def supports(self, currency: str) -> bool:
        return currency in self._rates

    def supported_currencies(self) -> list[str]:
        return sorted(self._rates)

    def rate_for(self, currency: str) -> Decimal:
        """Return the fee rate for `currency`, falling back to the default rate."""

        if not currency:
            raise ValidationError("currency is required for fee calculation", field="currency")
        rate = self._rates.get(currency)
        if rate is not None:
            return rate
        logger.warning("unsupported_currency currency=%s default_rate=%s", currency, self._default_rate)
        unsupported_currency_total.labels(service=self.service_name, currency=currency).inc()
        return self._default_rate

    def fee_for(self, amount: Decimal, currency: str) -> Decimal:
        return amount * self.rate_for(currency)
