"""Repository pattern layer for Property Brief.

Provides the storage protocol and a resolve() helper that transparently
handles both sync (in-memory) and async (SQLAlchemy) store returns.
"""

from __future__ import annotations

import inspect
from typing import Awaitable, TypeVar

T = TypeVar("T")


async def resolve(value: T | Awaitable[T]) -> T:
    """Await a value if it is awaitable, otherwise return it directly.

    This allows callers to use any store uniformly:
        snapshot = await resolve(store.add_snapshot(snapshot))
    """
    if inspect.isawaitable(value):
        return await value  # type: ignore[return-value]
    return value  # type: ignore[return-value]
