# backend/pokecatalog/fanout.py

import asyncio
import logging
from typing import Awaitable, Callable, Iterable, List, Optional, TypeVar

from .config import settings
from .exceptions import CatalogError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

def _gated(semaphore: asyncio.Semaphore, fetch: Callable[[T], Awaitable[R]]) -> Callable[[T], Awaitable[R]]:
    async def run(item: T) -> R:
        async with semaphore:
            return await fetch(item)
    return run

async def gather_all(
    items: Iterable[T],
    fetch: Callable[[T], Awaitable[R]],
    max_concurrency: Optional[int] = None,
) -> List[R]:
    """
    Runs `fetch` for every item, at most `max_concurrency` at a time.

    Results come back in input order. The first failure cancels whatever is
    still outstanding and is re-raised, so callers never see a partial list.
    """
    semaphore = asyncio.Semaphore(max_concurrency or settings.max_concurrent_requests)
    run = _gated(semaphore, fetch)
    tasks = [asyncio.ensure_future(run(item)) for item in items]
    if not tasks:
        return []
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        # Let cancelled tasks unwind before the error leaves this scope
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

async def gather_tolerant(
    items: Iterable[T],
    fetch: Callable[[T], Awaitable[R]],
    max_concurrency: Optional[int] = None,
) -> List[R]:
    """
    Like gather_all, but items whose fetch raises a CatalogError are dropped.

    Survivors keep their input order. Any other exception is re-raised.
    """
    items = list(items)
    semaphore = asyncio.Semaphore(max_concurrency or settings.max_concurrent_requests)
    run = _gated(semaphore, fetch)
    results = await asyncio.gather(*(run(item) for item in items), return_exceptions=True)

    survivors: List[R] = []
    for item, result in zip(items, results):
        if isinstance(result, CatalogError):
            logger.warning(f"Dropping {item!r}: {type(result).__name__}: {result}")
            continue
        if isinstance(result, BaseException):
            raise result
        survivors.append(result)
    return survivors
