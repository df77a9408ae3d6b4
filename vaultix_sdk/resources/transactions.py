"""
Location: vaultix_sdk/resources/transactions.py

Summary:
    Transactions API. Unified history across charges, refunds and
    payouts, plus period summaries.

Example:
    summary = await vaultix.transactions.summary("7d")
    print(summary.charges.paid_amount, summary.net_amount)
"""

from typing import Any, AsyncIterator, Optional

from ..types import (
    ListResponse,
    SummaryPeriod,
    Transaction,
    TransactionListParams,
    TransactionSummary,
)
from .base import BaseResource, ParamsInput


class Transactions(BaseResource):
    """Proxy for /v1/transactions."""

    async def retrieve(self, id: str) -> Transaction:
        data = await self._client.get(f"/v1/transactions/{self._path_id(id)}")
        return self._parse(Transaction, data)

    async def list(
        self, params: ParamsInput = None, **fields: Any
    ) -> ListResponse[Transaction]:
        query = self._build_params(TransactionListParams, params, fields)
        data = await self._client.get("/v1/transactions", query)
        return self._parse(ListResponse[Transaction], data)

    def list_auto_paging(
        self,
        params: ParamsInput = None,
        max_items: Optional[int] = None,
        **fields: Any,
    ) -> AsyncIterator[Transaction]:
        return self._iterate(self.list, params, fields, max_items)

    async def summary(self, period: SummaryPeriod = "30d") -> TransactionSummary:
        """Totals for the last 24h, 7d, 30d or 90d."""
        data = await self._client.get("/v1/transactions/summary", {"period": period})
        return self._parse(TransactionSummary, data)
