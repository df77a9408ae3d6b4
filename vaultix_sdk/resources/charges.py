"""
Location: vaultix_sdk/resources/charges.py

Summary:
    Charges API. Create and manage payment charges (PIX, card, boleto).

Example:
    charge = await vaultix.charges.create(
        amount=5000,  # R$ 50,00
        payment_method="pix",
        customer={"name": "Joao Silva", "email": "joao@email.com"},
    )
    print(charge.pix.qr_code)
"""

from typing import Any, AsyncIterator, Optional

from ..types import (
    Charge,
    ChargeCaptureParams,
    ChargeCreateParams,
    ChargeListParams,
    ListResponse,
)
from .base import BaseResource, ParamsInput


class Charges(BaseResource):
    """Proxy for /v1/charges."""

    async def create(
        self,
        params: ParamsInput = None,
        *,
        idempotency_key: Optional[str] = None,
        **fields: Any,
    ) -> Charge:
        """
        Create a new charge.

        Args:
            params: ChargeCreateParams or equivalent dict
            idempotency_key: Optional key to deduplicate this create
            **fields: ChargeCreateParams fields as keyword arguments

        Returns:
            The created Charge, usually with status "pending"
        """
        payload = self._build_params(ChargeCreateParams, params, fields)
        data = await self._client.post(
            "/v1/charges", payload, idempotency_key=idempotency_key
        )
        return self._parse(Charge, data)

    async def retrieve(self, id: str) -> Charge:
        """Retrieve a charge by ID."""
        data = await self._client.get(f"/v1/charges/{self._path_id(id)}")
        return self._parse(Charge, data)

    async def list(self, params: ParamsInput = None, **fields: Any) -> ListResponse[Charge]:
        """List charges, optionally filtered by status or payment method."""
        query = self._build_params(ChargeListParams, params, fields)
        data = await self._client.get("/v1/charges", query)
        return self._parse(ListResponse[Charge], data)

    def list_auto_paging(
        self,
        params: ParamsInput = None,
        max_items: Optional[int] = None,
        **fields: Any,
    ) -> AsyncIterator[Charge]:
        """Iterate over every charge matching the filters, page by page."""
        return self._iterate(self.list, params, fields, max_items)

    async def capture(self, id: str, amount: Optional[int] = None) -> Charge:
        """
        Capture a pre-authorized card charge.

        Args:
            id: Charge ID
            amount: Amount in cents for a partial capture; full when omitted
        """
        fields = {"amount": amount} if amount is not None else None
        payload = self._build_params(ChargeCaptureParams, None, fields)
        data = await self._client.post(f"/v1/charges/{self._path_id(id)}/capture", payload)
        return self._parse(Charge, data)

    async def cancel(self, id: str) -> Charge:
        """Cancel a pending or authorized charge."""
        data = await self._client.post(f"/v1/charges/{self._path_id(id)}/cancel")
        return self._parse(Charge, data)
