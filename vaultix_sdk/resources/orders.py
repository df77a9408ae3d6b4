"""
Location: vaultix_sdk/resources/orders.py

Summary:
    Orders API. Read access to store orders and their line items.

Example:
    order = await vaultix.orders.retrieve("ord_abc123", expand="items")
    print(order.order_number, order.amounts.total, len(order.items))
"""

from typing import Any, AsyncIterator, Literal, Optional

from ..types import ListResponse, Order, OrderItem, OrderListParams
from .base import BaseResource, ParamsInput


class Orders(BaseResource):
    """Proxy for /v1/orders."""

    async def retrieve(self, id: str, expand: Optional[Literal["items"]] = None) -> Order:
        """Retrieve an order, optionally with its items expanded."""
        query = {"expand": expand} if expand else None
        data = await self._client.get(f"/v1/orders/{self._path_id(id)}", query)
        return self._parse(Order, data)

    async def list(self, params: ParamsInput = None, **fields: Any) -> ListResponse[Order]:
        query = self._build_params(OrderListParams, params, fields)
        data = await self._client.get("/v1/orders", query)
        return self._parse(ListResponse[Order], data)

    def list_auto_paging(
        self,
        params: ParamsInput = None,
        max_items: Optional[int] = None,
        **fields: Any,
    ) -> AsyncIterator[Order]:
        return self._iterate(self.list, params, fields, max_items)

    async def list_items(self, order_id: str) -> ListResponse[OrderItem]:
        data = await self._client.get(f"/v1/orders/{self._path_id(order_id)}/items")
        return self._parse(ListResponse[OrderItem], data)
