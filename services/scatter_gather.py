from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Iterable, TypeVar

T = TypeVar("T")
R = TypeVar("R")


async def gather_bounded(
    items: Iterable[T],
    operation: Callable[[T], Awaitable[R]],
    *,
    limit: int | None = None,
) -> list[R]:
    """
    Run `operation` over every item concurrently and return results in input order.

    At most `limit` operations are in flight at once (unbounded when `limit`
    is None or <= 0). The first failure cancels everything still pending and
    is re-raised; no partial result list is ever returned.
    """
    pending_items = list(items)
    if not pending_items:
        return []

    semaphore = asyncio.Semaphore(limit) if limit is not None and limit > 0 else None

    async def _run(item: T) -> R:
        if semaphore is None:
            return await operation(item)
        async with semaphore:
            return await operation(item)

    tasks = [asyncio.create_task(_run(item)) for item in pending_items]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
