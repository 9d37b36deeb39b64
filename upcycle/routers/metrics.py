# upcycle/routers/metrics.py
from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from upcycle.utils.metrics import snapshot

router = APIRouter(tags=["metrics"])


@router.get("/metrics")
def get_metrics() -> Dict[str, Any]:
    """Counters, results by source, latency histogram and per-endpoint avg/p95."""
    return snapshot()
