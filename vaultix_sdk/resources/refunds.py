"""
Location: vaultix_sdk/resources/refunds.py

Summary:
    Refunds API. Full or partial refunds of paid charges.

Example:
    # Full refund
    refund = await vaultix.refunds.create(charge="ch_abc123")

    # Partial refund of R$ 25,00
    refund = await vaultix.refunds.create(charge="ch_abc123", amount=2500)
"""

from typing import Any, AsyncIterator, Optional

from ..types import ListResponse, Refund, RefundCreateParams, RefundListParams
from .base import BaseResource, ParamsInput


class Refunds(BaseResource):
    """Proxy for /v1/refunds."""

    async def create(
        self,
        params: ParamsInput = None,
        *,
        idempotency_key: Optional[str] = None,
        **fields: Any,
    ) -> Refund:
        payload = self._build_params(RefundCreateParams, params, fields)
        data = await self._client.post(
            "/v1/refunds", payload, idempotency_key=idempotency_key
        )
        return self._parse(Refund, data)

    async def retrieve(self, id: str) -> Refund:
        data = await self._client.get(f"/v1/refunds/{self._path_id(id)}")
        return self._parse(Refund, data)

    async def list(self, params: ParamsInput = None, **fields: Any) -> ListResponse[Refund]:
        """List refunds, optionally only those of one charge."""
        query = self._build_params(RefundListParams, params, fields)
        data = await self._client.get("/v1/refunds", query)
        return self._parse(ListResponse[Refund], data)

    def list_auto_paging(
        self,
        params: ParamsInput = None,
        max_items: Optional[int] = None,
        **fields: Any,
    ) -> AsyncIterator[Refund]:
        return self._iterate(self.list, params, fields, max_items)
