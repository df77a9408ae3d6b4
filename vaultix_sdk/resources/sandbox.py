"""
Location: vaultix_sdk/resources/sandbox.py

Summary:
    Sandbox API. Test-mode utilities that simulate payment lifecycle
    events. The server only accepts these calls with sk_test_ keys.

Example:
    charge = await vaultix.charges.create(amount=5000, payment_method="pix")
    paid = await vaultix.sandbox.pay_charge(charge.id)
    assert paid.status == "paid"
"""

import logging
from typing import Any

from ..types import (
    Charge,
    Refund,
    SandboxChargeFailParams,
    SandboxWebhookTestParams,
    TestCardList,
    WebhookTestResult,
)
from .base import BaseResource, ParamsInput

logger = logging.getLogger(__name__)


class Sandbox(BaseResource):
    """Proxy for /v1/sandbox."""

    async def pay_charge(self, charge_id: str) -> Charge:
        """Simulate the payer completing a charge; status becomes "paid"."""
        self._warn_if_live("pay_charge")
        data = await self._client.post(f"/v1/sandbox/charges/{self._path_id(charge_id)}/pay")
        return self._parse(Charge, data)

    async def fail_charge(
        self, charge_id: str, params: ParamsInput = None, **fields: Any
    ) -> Charge:
        """
        Simulate a charge failure.

        Args:
            charge_id: Charge ID
            params: SandboxChargeFailParams or dict with failure_code and
                failure_message
        """
        self._warn_if_live("fail_charge")
        payload = self._build_params(SandboxChargeFailParams, params, fields)
        data = await self._client.post(
            f"/v1/sandbox/charges/{self._path_id(charge_id)}/fail", payload
        )
        return self._parse(Charge, data)

    async def expire_charge(self, charge_id: str) -> Charge:
        self._warn_if_live("expire_charge")
        data = await self._client.post(
            f"/v1/sandbox/charges/{self._path_id(charge_id)}/expire"
        )
        return self._parse(Charge, data)

    async def succeed_refund(self, refund_id: str) -> Refund:
        self._warn_if_live("succeed_refund")
        data = await self._client.post(
            f"/v1/sandbox/refunds/{self._path_id(refund_id)}/succeed"
        )
        return self._parse(Refund, data)

    async def test_webhook(self, params: ParamsInput = None, **fields: Any) -> WebhookTestResult:
        """Send a test event to the webhook endpoint configured for the account."""
        self._warn_if_live("test_webhook")
        payload = self._build_params(SandboxWebhookTestParams, params, fields)
        data = await self._client.post("/v1/sandbox/webhooks/test", payload)
        return self._parse(WebhookTestResult, data)

    async def list_test_cards(self) -> TestCardList:
        """List test card numbers and the behavior each one triggers."""
        self._warn_if_live("list_test_cards")
        data = await self._client.get("/v1/sandbox/test-cards")
        return self._parse(TestCardList, data)

    def _warn_if_live(self, operation: str) -> None:
        if not self._client.is_test_mode:
            logger.warning(
                "sandbox.%s called with a live key; the API only accepts sk_test_ keys",
                operation,
            )
