# =============================================
# File: upcycle/utils/ratelimit.py
# Purpose: In-memory per-client sliding-window rate limiter for /search
# =============================================
from __future__ import annotations
import os
import threading
import time
from collections import deque
from typing import Dict, Deque

# key -> timestamps
_store: Dict[str, Deque[float]] = {}
_lock = threading.Lock()


def _get_limits() -> tuple[int, int]:
    """Read limits at call time so tests/env overrides take effect."""
    max_reqs = int(os.getenv("RL_MAX_REQS", "60"))
    window_s = int(os.getenv("RL_WINDOW_SECONDS", "60"))
    return max_reqs, window_s


def check_rate_limit(key: str) -> None:
    """Raise RuntimeError when rate limited."""
    now = time.time()
    max_reqs, window_s = _get_limits()

    with _lock:
        cutoff = now - window_s
        # forget clients whose newest hit has left the window
        for idle in [k for k, q in _store.items() if not q or q[-1] < cutoff]:
            del _store[idle]

        dq = _store.setdefault(key, deque())
        while dq and dq[0] < cutoff:
            dq.popleft()

        if len(dq) >= max_reqs:
            raise RuntimeError("Rate limit exceeded")

        dq.append(now)


def reset_rate_limit() -> None:
    """For tests: clear in-memory counters."""
    with _lock:
        _store.clear()
