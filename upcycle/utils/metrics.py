# =============================================
# File: upcycle/utils/metrics.py
# Purpose: In-process counters & histograms for /metrics
# =============================================
from __future__ import annotations
from typing import Dict, Any, List
import threading
import time

_lock = threading.Lock()

_COUNTER_NAMES = (
    "requests_total",
    "rate_limit_hits_total",
    "store_errors_total",
    "synthesis_failures_total",
    "cache_hits_total",
)
_counters: Dict[str, int] = {name: 0 for name in _COUNTER_NAMES}

# search results by where they came from (store, item, material, tips, generic)
_source_counts: Dict[str, int] = {}

# Fixed-bucket latency histogram (ms); last slot is +inf
_latency_buckets: List[int] = [50, 100, 200, 500, 1000, 2000, 5000, 10000]
_latency_counts: List[int] = [0 for _ in _latency_buckets] + [0]

# Per-endpoint latency samples (bounded) for avg/p95
_MAX_SAMPLES: int = 1000
_endpoint_latency: Dict[str, List[float]] = {}   # "METHOD /path" -> [ms]
_endpoint_counts: Dict[str, int] = {}


def _avg(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def _p95(values: List[float]) -> float:
    if not values:
        return 0.0
    xs = sorted(values)
    idx = int(0.95 * (len(xs) - 1))
    return xs[idx]


def _observe_latency_ms(ms: int) -> None:
    idx = len(_latency_buckets)
    for i, thr in enumerate(_latency_buckets):
        if ms <= thr:
            idx = i
            break
    _latency_counts[idx] += 1


def _inc(name: str) -> None:
    with _lock:
        _counters[name] += 1


def record_search(latency_ms: int, source: str, cache_hit: bool = False) -> None:
    with _lock:
        _counters["requests_total"] += 1
        if cache_hit:
            _counters["cache_hits_total"] += 1
        _source_counts[source] = _source_counts.get(source, 0) + 1
        _observe_latency_ms(int(latency_ms))


def record_rate_limit_hit() -> None:
    _inc("rate_limit_hits_total")


def record_store_error() -> None:
    _inc("store_errors_total")


def record_synthesis_failure() -> None:
    _inc("synthesis_failures_total")


def record_endpoint(method: str, path: str, latency_ms: float) -> None:
    key = f"{method.upper()} {path}"
    with _lock:
        _endpoint_counts[key] = _endpoint_counts.get(key, 0) + 1
        buf = _endpoint_latency.setdefault(key, [])
        buf.append(float(latency_ms))
        if len(buf) > _MAX_SAMPLES:
            del buf[: len(buf) - _MAX_SAMPLES]


def snapshot() -> Dict[str, Any]:
    with _lock:
        perf: Dict[str, Dict[str, float]] = {}
        for key, buf in _endpoint_latency.items():
            perf[key] = {
                "count": float(_endpoint_counts.get(key, 0)),
                "avg_latency_ms": _avg(buf),
                "p95_latency_ms": _p95(buf),
            }
        return {
            "counters": dict(_counters),
            "sources": dict(_source_counts),
            "latency_ms": {
                "buckets": list(_latency_buckets) + ["+Inf"],
                "counts": list(_latency_counts),
            },
            "performance": {
                "endpoints": perf,
                "generated_at": time.time(),
            },
        }


def reset() -> None:
    with _lock:
        for name in _counters:
            _counters[name] = 0
        _source_counts.clear()
        for i in range(len(_latency_counts)):
            _latency_counts[i] = 0
        _endpoint_latency.clear()
        _endpoint_counts.clear()
