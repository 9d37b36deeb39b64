# =============================================
# File: upcycle/utils/rcache.py
# Purpose: In-process TTL + LRU cache for /search responses
# =============================================
from __future__ import annotations
import os
import threading
import time
from collections import OrderedDict
from typing import Any, Dict, Optional, Tuple

# key -> (expires_at, value); sync endpoints share it across threadpool workers
_store: "OrderedDict[str, Tuple[float, Dict[str, Any]]]" = OrderedDict()
_lock = threading.Lock()


def _ttl() -> int:
    return int(os.getenv("CACHE_TTL_SECONDS", "600"))


def _max_entries() -> int:
    return int(os.getenv("CACHE_MAX_ENTRIES", "1000"))


def _now() -> float:
    return time.time()


def _normalize_query(q: str) -> str:
    return " ".join((q or "").strip().lower().split())


def make_key(query: str, material_type: Optional[str] = None) -> str:
    return f"{_normalize_query(query)}:{(material_type or '').strip().lower()}"


def get(key: str) -> Dict[str, Any] | None:
    now = _now()
    with _lock:
        dead = [k for k, (exp, _) in _store.items() if exp < now]
        for k in dead:
            _store.pop(k, None)

        item = _store.get(key)
        if not item:
            return None
        # LRU touch
        _store.move_to_end(key, last=True)
        return item[1]


def set(key: str, value: Dict[str, Any], ttl: int | None = None) -> None:
    exp = _now() + (ttl if ttl is not None else _ttl())
    limit = _max_entries()
    with _lock:
        _store[key] = (exp, value)
        _store.move_to_end(key, last=True)
        while len(_store) > limit:
            _store.popitem(last=False)


def clear() -> None:
    with _lock:
        _store.clear()
