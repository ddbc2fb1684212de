"""Shared fixtures for payment core tests."""

from decimal import Decimal

import pytest

from paymon.common.config import DEFAULT_FEE_RATES
from paymon.services.payments.fees import FeeTable
from paymon.services.payments.gateway import StubPaymentGateway
from paymon.services.payments.models import PaymentRequest
from paymon.services.payments.service import PaymentProcessor


@pytest.fixture
def fee_table() -> FeeTable:
    return FeeTable(DEFAULT_FEE_RATES, Decimal("0.040"), service_name="test-payments")


@pytest.fixture
def gateway() -> StubPaymentGateway:
    return StubPaymentGateway(record=True)


@pytest.fixture
def processor(fee_table, gateway) -> PaymentProcessor:
    return PaymentProcessor(fee_table, gateway=gateway, service_name="test-payments")


@pytest.fixture
def make_request():
    """Factory for valid requests with per-test overrides."""

    def _make(**overrides) -> PaymentRequest:
        fields = {
            "payment_id": "PMT-1",
            "amount": Decimal("100.00"),
            "currency": "USD",
            "customer_id": "CUST-1",
        }
        fields.update(overrides)
        return PaymentRequest(**fields)

    return _make
