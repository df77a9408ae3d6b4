"""
Location: vaultix_sdk/resources/payment_links.py

Summary:
    Payment Links API. Shareable hosted checkout URLs.

Example:
    link = await vaultix.payment_links.create(
        amount=10000,  # R$ 100,00
        description="Product Purchase",
        success_url="https://mysite.com/success",
        payment_methods=["pix", "credit_card"],
    )
    print(link.url)
"""

from typing import Any, AsyncIterator, Optional

from ..types import (
    Charge,
    ListParams,
    ListResponse,
    PaymentLink,
    PaymentLinkCreateParams,
    PaymentLinkListParams,
)
from .base import BaseResource, ParamsInput


class PaymentLinks(BaseResource):
    """Proxy for /v1/payment-links."""

    async def create(self, params: ParamsInput = None, **fields: Any) -> PaymentLink:
        payload = self._build_params(PaymentLinkCreateParams, params, fields)
        data = await self._client.post("/v1/payment-links", payload)
        return self._parse(PaymentLink, data)

    async def retrieve(self, id: str) -> PaymentLink:
        data = await self._client.get(f"/v1/payment-links/{self._path_id(id)}")
        return self._parse(PaymentLink, data)

    async def list(
        self, params: ParamsInput = None, **fields: Any
    ) -> ListResponse[PaymentLink]:
        query = self._build_params(PaymentLinkListParams, params, fields)
        data = await self._client.get("/v1/payment-links", query)
        return self._parse(ListResponse[PaymentLink], data)

    def list_auto_paging(
        self,
        params: ParamsInput = None,
        max_items: Optional[int] = None,
        **fields: Any,
    ) -> AsyncIterator[PaymentLink]:
        return self._iterate(self.list, params, fields, max_items)

    async def deactivate(self, id: str) -> PaymentLink:
        """Deactivate a payment link; its status becomes "inactive"."""
        data = await self._client.post(f"/v1/payment-links/{self._path_id(id)}/deactivate")
        return self._parse(PaymentLink, data)

    async def list_payments(
        self, id: str, limit: Optional[int] = None
    ) -> ListResponse[Charge]:
        """List the charges paid through a payment link."""
        query = self._build_params(ListParams, None, {"limit": limit} if limit is not None else None)
        data = await self._client.get(
            f"/v1/payment-links/{self._path_id(id)}/payments", query
        )
        return self._parse(ListResponse[Charge], data)
