"""HTTP contract of the payments service."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from paymon.services.payments import main
from paymon.services.payments.gateway import StubPaymentGateway
from paymon.services.payments.main import app, get_processor
from paymon.services.payments.service import PaymentProcessor


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _payload(**overrides):
    body = {"payment_id": "PMT-1", "amount": "100.00", "currency": "USD", "customer_id": "CUST-1"}
    body.update(overrides)
    return body


def test_create_payment_returns_fee_and_total(client):
    resp = client.post("/payments", json=_payload())

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert Decimal(body["fee"]) == Decimal("2.90")
    assert Decimal(body["total"]) == Decimal("102.90")


def test_declined_payment_is_not_an_http_error(client):
    resp = client.post("/payments", json=_payload(payment_id="force-decline-7"))

    assert resp.status_code == 200
    assert resp.json()["success"] is False
    assert resp.json()["error_message"] == "PROVIDER_DECLINE"


def test_validation_error_maps_to_400(client):
    resp = client.post("/payments", json=_payload(amount="0"))

    assert resp.status_code == 400
    assert resp.json()["error"] == {
        "code": "VALIDATION_ERROR",
        "message": "amount must be greater than zero",
        "payment_id": "PMT-1",
        "field": "amount",
    }


def test_gateway_error_maps_to_502(client):
    resp = client.post("/payments", json=_payload(payment_id="force-timeout-3"))

    assert resp.status_code == 502
    assert resp.json()["error"]["code"] == "GATEWAY_ERROR"
    assert resp.json()["error"]["payment_id"] == "force-timeout-3"


def test_missing_gateway_maps_to_503(client, fee_table):
    app.dependency_overrides[get_processor] = lambda: PaymentProcessor(fee_table)

    resp = client.post("/payments", json=_payload())

    assert resp.status_code == 503
    assert resp.json()["error"]["code"] == "CONFIGURATION_ERROR"


def test_quote_endpoint(client):
    resp = client.post("/payments/quote", json=_payload(currency="XYZ"))

    assert resp.status_code == 200
    body = resp.json()
    assert Decimal(body["rate"]) == Decimal("0.040")
    assert Decimal(body["total"]) == Decimal("104.00")
    assert body["default_rate_applied"] is True


def test_failed_payments_endpoint(client):
    resp = client.get("/payments/failed")

    assert resp.status_code == 200
    assert [p["payment_id"] for p in resp.json()] == ["PMT-12345", "PMT-12347"]


def test_fee_table_endpoint(client):
    body = client.get("/fees").json()

    assert Decimal(body["rates"]["USD"]) == Decimal("0.029")
    assert Decimal(body["default_rate"]) == Decimal("0.040")


def test_health_and_metrics(client):
    assert client.get("/health").json() == {"ok": True}
    client.post("/payments", json=_payload())
    assert "payment_requests_total" in client.get("/metrics").text


def test_service_wired_stub_does_not_accumulate_calls(client):
    """A long-running service must not grow memory with every settlement."""

    wired = main.processor.gateway
    for i in range(50):
        assert client.post("/payments", json=_payload(payment_id=f"PMT-{i}")).status_code == 200

    assert isinstance(wired, StubPaymentGateway)
    assert wired.calls == []
