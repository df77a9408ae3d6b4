"""
Location: vaultix_sdk/resources/customers.py

Summary:
    Customers API. Create, update, delete and list customers.
"""

from typing import Any, AsyncIterator, Optional

from ..types import (
    Customer,
    CustomerCreateParams,
    CustomerUpdateParams,
    DeletedObject,
    ListParams,
    ListResponse,
)
from .base import BaseResource, ParamsInput


class Customers(BaseResource):
    """Proxy for /v1/customers."""

    async def create(self, params: ParamsInput = None, **fields: Any) -> Customer:
        """
        Create a new customer.

        Example:
            customer = await vaultix.customers.create(
                name="Maria Santos",
                email="maria@email.com",
                document="12345678900",
            )
        """
        payload = self._build_params(CustomerCreateParams, params, fields)
        data = await self._client.post("/v1/customers", payload)
        return self._parse(Customer, data)

    async def retrieve(self, id: str) -> Customer:
        data = await self._client.get(f"/v1/customers/{self._path_id(id)}")
        return self._parse(Customer, data)

    async def update(self, id: str, params: ParamsInput = None, **fields: Any) -> Customer:
        """Update a customer. Only the given fields change."""
        payload = self._build_params(CustomerUpdateParams, params, fields)
        data = await self._client.put(f"/v1/customers/{self._path_id(id)}", payload)
        return self._parse(Customer, data)

    async def delete(self, id: str) -> DeletedObject:
        data = await self._client.delete(f"/v1/customers/{self._path_id(id)}")
        return self._parse_deleted(id, data)

    async def list(self, params: ParamsInput = None, **fields: Any) -> ListResponse[Customer]:
        query = self._build_params(ListParams, params, fields)
        data = await self._client.get("/v1/customers", query)
        return self._parse(ListResponse[Customer], data)

    def list_auto_paging(
        self,
        params: ParamsInput = None,
        max_items: Optional[int] = None,
        **fields: Any,
    ) -> AsyncIterator[Customer]:
        return self._iterate(self.list, params, fields, max_items)
