"""
Location: vaultix_sdk/resources/payouts.py

Summary:
    Payouts API. Withdrawals to a PIX key or a bank account.

Example:
    payout = await vaultix.payouts.create(
        amount=50000,  # R$ 500,00
        destination={"pix_key": "email@example.com", "holder_name": "Joao Silva"},
    )
"""

from typing import Any, AsyncIterator, Optional

from ..types import ListResponse, Payout, PayoutCreateParams, PayoutListParams
from .base import BaseResource, ParamsInput


class Payouts(BaseResource):
    """Proxy for /v1/payouts."""

    async def create(
        self,
        params: ParamsInput = None,
        *,
        idempotency_key: Optional[str] = None,
        **fields: Any,
    ) -> Payout:
        payload = self._build_params(PayoutCreateParams, params, fields)
        data = await self._client.post(
            "/v1/payouts", payload, idempotency_key=idempotency_key
        )
        return self._parse(Payout, data)

    async def retrieve(self, id: str) -> Payout:
        data = await self._client.get(f"/v1/payouts/{self._path_id(id)}")
        return self._parse(Payout, data)

    async def list(self, params: ParamsInput = None, **fields: Any) -> ListResponse[Payout]:
        query = self._build_params(PayoutListParams, params, fields)
        data = await self._client.get("/v1/payouts", query)
        return self._parse(ListResponse[Payout], data)

    def list_auto_paging(
        self,
        params: ParamsInput = None,
        max_items: Optional[int] = None,
        **fields: Any,
    ) -> AsyncIterator[Payout]:
        return self._iterate(self.list, params, fields, max_items)

    async def cancel(self, id: str) -> Payout:
        """Cancel a payout. Only pending payouts can be canceled."""
        data = await self._client.post(f"/v1/payouts/{self._path_id(id)}/cancel")
        return self._parse(Payout, data)
