"""Settlement gateway capability and its implementations.

`HttpPaymentGateway` talks to a remote settlement backend; `StubPaymentGateway`
is the deterministic stand-in used for local runs and tests.
"""

from decimal import Decimal
from typing import Protocol

import httpx

from paymon.common.errors import GatewayError
from paymon.common.logging import logger
from paymon.services.payments.models import SettlementResult


class PaymentGateway(Protocol):
    async def settle(self, payment_id: str, amount: Decimal) -> SettlementResult: ...


class HttpPaymentGateway:
    """Submit settlements to `POST {base_url}/settlements`.

    Transport failures, timeouts and 5xx responses raise `GatewayError`; 4xx
    responses are reported as unsuccessful settlements.
    """

    def __init__(self, base_url: str, timeout_seconds: float = 5.0, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def settle(self, payment_id: str, amount: Decimal) -> SettlementResult:
        async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
            try:
                resp = await client.post(
                    f"{self.base_url}/settlements",
                    json={"payment_id": payment_id, "amount": str(amount)},
                )
            except httpx.TimeoutException as exc:
                raise GatewayError(f"settlement timed out: {exc}", payment_id=payment_id) from exc
            except httpx.HTTPError as exc:
                raise GatewayError(f"settlement transport failure: {exc}", payment_id=payment_id) from exc

        if resp.status_code >= 500:
            raise GatewayError(f"settlement backend error (status={resp.status_code})", payment_id=payment_id)
        if resp.status_code >= 400:
            logger.warning("settlement rejected payment_id=%s status=%s", payment_id, resp.status_code)
            return SettlementResult(success=False, error_message=resp.text)
        try:
            return SettlementResult.model_validate(resp.json())
        except ValueError as exc:
            raise GatewayError("settlement response malformed", payment_id=payment_id) from exc


class StubPaymentGateway:
    """Deterministic gateway keyed on payment id prefixes.

    `force-decline*` ids are declined and `force-timeout*` ids raise a
    `GatewayError`; everything else settles. Calls are kept in `calls` only
    when `record` is set, so a long-running service holds no history.
    """

    def __init__(self, record: bool = False) -> None:
        self.record = record
        self.calls: list[tuple[str, Decimal]] = []

    async def settle(self, payment_id: str, amount: Decimal) -> SettlementResult:
        if self.record:
            self.calls.append((payment_id, amount))
        lowered = payment_id.lower()
        if lowered.startswith("force-timeout"):
            raise GatewayError("PROVIDER_TIMEOUT", payment_id=payment_id)
        if lowered.startswith("force-decline"):
            return SettlementResult(success=False, error_message="PROVIDER_DECLINE")
        return SettlementResult(success=True)
