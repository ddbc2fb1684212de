"""Fee table lookups and the default-rate fallback."""

import logging
from decimal import Decimal

import pytest
from prometheus_client import REGISTRY

from paymon.common.config import CommonSettings
from paymon.common.errors import ValidationError
from paymon.services.payments.fees import FeeTable


def _unsupported_count(currency: str) -> float:
    value = REGISTRY.get_sample_value(
        "unsupported_currency_total",
        {"service": "test-payments", "currency": currency},
    )
    return value or 0.0


@pytest.mark.parametrize(
    "currency, rate",
    [("USD", Decimal("0.029")), ("EUR", Decimal("0.035")), ("GBP", Decimal("0.032"))],
)
def test_known_currency_rates(fee_table, currency, rate):
    assert fee_table.rate_for(currency) == rate


def test_unknown_currency_falls_back_to_default_with_warning(fee_table, caplog):
    """Unsupported currency is a degraded path: default rate, warning, no error."""

    before = _unsupported_count("XYZ")
    with caplog.at_level(logging.WARNING, logger="paymon"):
        rate = fee_table.rate_for("XYZ")

    assert rate == Decimal("0.040")
    assert any("unsupported_currency currency=XYZ" in r.getMessage() for r in caplog.records)
    assert _unsupported_count("XYZ") == before + 1


def test_lookup_is_case_sensitive(fee_table):
    assert fee_table.rate_for("usd") == fee_table.default_rate


def test_empty_currency_is_caller_error(fee_table):
    with pytest.raises(ValidationError) as exc_info:
        fee_table.rate_for("")
    assert exc_info.value.field == "currency"


def test_fee_for_multiplies_amount(fee_table):
    assert fee_table.fee_for(Decimal("100.00"), "USD") == Decimal("2.90")


def test_table_is_read_only(fee_table):
    with pytest.raises(TypeError):
        fee_table.rates["JPY"] = Decimal("0.05")
    assert not fee_table.supports("JPY")


def test_table_is_decoupled_from_source_mapping():
    source = {"USD": Decimal("0.01")}
    table = FeeTable(source, Decimal("0.02"))
    source["USD"] = Decimal("0.99")
    assert table.rate_for("USD") == Decimal("0.01")


def test_from_settings_uses_configured_rates():
    config = CommonSettings(
        service_name="fees-test",
        fee_rates={"JPY": Decimal("0.05")},
        default_fee_rate=Decimal("0.07"),
    )
    table = FeeTable.from_settings(config)

    assert table.supported_currencies() == ["JPY"]
    assert table.rate_for("JPY") == Decimal("0.05")
    assert table.default_rate == Decimal("0.07")
