"""
Fan-out join strategies for concurrent downstream calls.

Two policies, kept separate on purpose:

- ``join_all_or_nothing``: one failed branch fails the whole join
  (dashboard aggregation).
- ``join_tolerant``: every branch reports its own outcome
  (service health aggregation).

Both wait for every branch to settle before returning.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable

T = TypeVar("T")


async def join_all_or_nothing(*aws: Awaitable[T]) -> list[T]:
    """
    Await all branches and return their results in argument order.

    Raises:
        BaseException: The failure of the first failing branch, in
            argument order, once every branch has settled
    """
    results = await asyncio.gather(*aws, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return list(results)


async def join_tolerant(*aws: Awaitable[T]) -> list[T | BaseException]:
    """
    Await all branches, never raising.

    Returns:
        Per-branch result, or the exception the branch raised
    """
    return list(await asyncio.gather(*aws, return_exceptions=True))
