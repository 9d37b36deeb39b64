# =============================================
# File: tests/test_cache.py
# Purpose: Response cache: TTL/LRU behaviour and concurrent access from threadpool workers
# =============================================
import sys, os
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

import threading

from upcycle.utils import rcache


def test_key_normalizes_query_and_material():
    assert rcache.make_key("  Old   T-Shirt ", " Textile ") == rcache.make_key("old t-shirt", "textile")


def test_expired_entries_are_dropped():
    rcache.set("k", {"v": 1}, ttl=-1)
    assert rcache.get("k") is None


def test_lru_evicts_oldest(monkeypatch):
    monkeypatch.setenv("CACHE_MAX_ENTRIES", "2")
    rcache.set("a", {"v": "a"})
    rcache.set("b", {"v": "b"})
    assert rcache.get("a") == {"v": "a"}  # touch a; b is now oldest
    rcache.set("c", {"v": "c"})
    assert rcache.get("b") is None
    assert rcache.get("a") == {"v": "a"}
    assert rcache.get("c") == {"v": "c"}


def test_concurrent_get_and_set(monkeypatch):
    monkeypatch.setenv("CACHE_MAX_ENTRIES", "50")
    errors = []
    stop = threading.Event()

    def writer(n):
        i = 0
        try:
            while not stop.is_set():
                # short TTLs keep the expiry sweep in get() busy
                rcache.set(f"w{n}-{i % 200}", {"i": i}, ttl=0 if i % 3 else 60)
                i += 1
        except Exception as e:
            errors.append(e)

    def reader(n):
        i = 0
        try:
            while not stop.is_set():
                rcache.get(f"w{n}-{i % 200}")
                i += 1
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(3)]
    threads += [threading.Thread(target=reader, args=(n,)) for n in range(3)]
    for t in threads:
        t.start()
    stop.wait(1.0)
    stop.set()
    for t in threads:
        t.join(5)

    assert errors == []
