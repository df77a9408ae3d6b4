"""
Location: vaultix_sdk/resources/balance.py

Summary:
    Balance API. Current available/pending balance and the balance
    transaction statement.

Example:
    balance = await vaultix.balance.retrieve()
    print("Available:", balance.available[0].amount / 100)
"""

from typing import Any, AsyncIterator, Optional

from ..types import (
    Balance,
    BalanceTransaction,
    BalanceTransactionListParams,
    ListResponse,
)
from .base import BaseResource, ParamsInput


class BalanceResource(BaseResource):
    """Proxy for /v1/balance."""

    async def retrieve(self) -> Balance:
        data = await self._client.get("/v1/balance")
        return self._parse(Balance, data)

    async def list_transactions(
        self, params: ParamsInput = None, **fields: Any
    ) -> ListResponse[BalanceTransaction]:
        """List balance transactions (statement), optionally by type."""
        query = self._build_params(BalanceTransactionListParams, params, fields)
        data = await self._client.get("/v1/balance/transactions", query)
        return self._parse(ListResponse[BalanceTransaction], data)

    def list_transactions_auto_paging(
        self,
        params: ParamsInput = None,
        max_items: Optional[int] = None,
        **fields: Any,
    ) -> AsyncIterator[BalanceTransaction]:
        return self._iterate(self.list_transactions, params, fields, max_items)
