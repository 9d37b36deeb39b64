# =============================================
# File: upcycle/utils/debounce.py
# Purpose: Caller-owned debounce / supersession gate for type-ahead lookups
# =============================================
from __future__ import annotations

import asyncio
import os
from typing import Callable, Optional, TypeVar

T = TypeVar("T")


def _default_delay_ms() -> int:
    return int(os.getenv("DEBOUNCE_MS", "300"))


class Debouncer:
    """
    Only the latest submitted query is looked up.

    Each submit() waits `delay_ms`; if a newer query arrived meanwhile the
    call returns None without running. A lookup that finishes after a newer
    query was submitted is discarded (None) so stale results are never
    applied out of order.
    """

    def __init__(self, delay_ms: Optional[int] = None) -> None:
        self.delay_ms = _default_delay_ms() if delay_ms is None else delay_ms
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    async def submit(self, query: str, fn: Callable[[str], T]) -> Optional[T]:
        self._generation += 1
        ticket = self._generation

        await asyncio.sleep(self.delay_ms / 1000.0)
        if ticket != self._generation:
            return None

        result = await asyncio.to_thread(fn, query)
        if ticket != self._generation:
            return None
        return result
