# =============================================
# File: upcycle/utils/slog.py
# Purpose: One-line JSON request events on the "upcycle" stdlib logger
# =============================================
from __future__ import annotations
import json
import logging
import os
import uuid
import hashlib
from typing import Any, Dict, Optional

LOGGER_NAME = "upcycle"

_logger = logging.getLogger(LOGGER_NAME)
if not _logger.handlers:
    _logger.setLevel(getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO))
    _console = logging.StreamHandler()
    _console.setFormatter(logging.Formatter("%(message)s"))
    _logger.addHandler(_console)
    _logger.propagate = True  # caplog reads from the root logger


def qhash(text: str) -> str:
    """Short hash of a normalized query, so raw searches stay out of the logs."""
    norm = " ".join((text or "").strip().lower().split())
    return hashlib.sha256(norm.encode("utf-8")).hexdigest()[:10]


def new_request_id() -> str:
    return uuid.uuid4().hex


def search_context(query: str, material_type: Optional[str] = None, **extra: Any) -> Dict[str, Any]:
    """Router-side fields for the request event of a search."""
    ctx: Dict[str, Any] = {"qhash": qhash(query)}
    if material_type:
        ctx["material"] = material_type.strip().lower()
    ctx.update(extra)
    return ctx


def _emit(payload: Dict[str, Any], level: int = logging.INFO) -> None:
    _logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


def log_event(event: str, **fields: Any) -> None:
    _emit({"event": event, **fields})


def finalize_request_log(
    request_id: str,
    method: str,
    path: str,
    status: int,
    latency_ms: int,
    client_ip: str | None,
    ctx: Dict[str, Any] | None = None,
) -> None:
    """Emit `request.completed`; 5xx responses go out at WARNING."""
    payload: Dict[str, Any] = {
        "event": "request.completed",
        "request_id": request_id,
        "method": method,
        "path": path,
        "status": status,
        "latency_ms": latency_ms,
        "client_ip": client_ip or "",
        **(ctx or {}),
    }
    _emit(payload, logging.WARNING if status >= 500 else logging.INFO)
