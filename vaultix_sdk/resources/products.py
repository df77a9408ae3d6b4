"""
Location: vaultix_sdk/resources/products.py

Summary:
    Products API. Catalog management; prices are in cents.
"""

from typing import Any, AsyncIterator, Optional

from ..types import (
    DeletedObject,
    ListResponse,
    Product,
    ProductCreateParams,
    ProductListParams,
    ProductUpdateParams,
)
from .base import BaseResource, ParamsInput


class Products(BaseResource):
    """Proxy for /v1/products."""

    async def create(self, params: ParamsInput = None, **fields: Any) -> Product:
        payload = self._build_params(ProductCreateParams, params, fields)
        data = await self._client.post("/v1/products", payload)
        return self._parse(Product, data)

    async def retrieve(self, id: str) -> Product:
        data = await self._client.get(f"/v1/products/{self._path_id(id)}")
        return self._parse(Product, data)

    async def list(self, params: ParamsInput = None, **fields: Any) -> ListResponse[Product]:
        query = self._build_params(ProductListParams, params, fields)
        data = await self._client.get("/v1/products", query)
        return self._parse(ListResponse[Product], data)

    def list_auto_paging(
        self,
        params: ParamsInput = None,
        max_items: Optional[int] = None,
        **fields: Any,
    ) -> AsyncIterator[Product]:
        return self._iterate(self.list, params, fields, max_items)

    async def update(self, id: str, params: ParamsInput = None, **fields: Any) -> Product:
        payload = self._build_params(ProductUpdateParams, params, fields)
        data = await self._client.put(f"/v1/products/{self._path_id(id)}", payload)
        return self._parse(Product, data)

    async def delete(self, id: str) -> DeletedObject:
        data = await self._client.delete(f"/v1/products/{self._path_id(id)}")
        return self._parse_deleted(id, data)
