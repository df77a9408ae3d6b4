"""
Location: vaultix_sdk/pagination.py

Summary:
    Async iteration over cursor-paginated list endpoints. Walks pages by
    passing the last item's ID as starting_after while the server reports
    has_more.

Usage:
    Used by resources to implement list_auto_paging(). Works with any
    coroutine function that takes a params dict and returns a
    ListResponse.

Example:
    async for charge in vaultix.charges.list_auto_paging(status="paid"):
        print(charge.id, charge.amount)
"""

from typing import Any, AsyncIterator, Awaitable, Callable, Optional, TypeVar

from .types import ListResponse

T = TypeVar("T")


async def auto_paginate(
    fetch_page: Callable[[dict[str, Any]], Awaitable[ListResponse[T]]],
    params: Optional[dict[str, Any]] = None,
    max_items: Optional[int] = None,
) -> AsyncIterator[T]:
    """
    Yield every item across all pages of a list endpoint.

    Args:
        fetch_page: Coroutine function returning one page for given params
        params: Initial list parameters (limit, filters, starting_after)
        max_items: Stop after yielding this many items

    Yields:
        Items in server order
    """
    page_params = dict(params or {})
    yielded = 0
    if max_items is not None and max_items <= 0:
        return

    while True:
        page = await fetch_page(page_params)
        for item in page.data:
            yield item
            yielded += 1
            if max_items is not None and yielded >= max_items:
                return

        if not page.has_more or not page.data:
            return

        last_id = getattr(page.data[-1], "id", None)
        if last_id is None:
            return
        page_params["starting_after"] = last_id
