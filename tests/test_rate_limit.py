# =============================================
# File: tests/test_rate_limit.py
# Purpose: Validate per-client rate limiting on /search
# =============================================
import sys, os
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

import pytest
from fastapi.testclient import TestClient

from conftest import StubStore
from upcycle.services import store as store_mod
from upcycle.utils.ratelimit import check_rate_limit, reset_rate_limit


def test_rate_limit_per_client(monkeypatch):
    monkeypatch.setenv("RL_MAX_REQS", "1")
    monkeypatch.setenv("RL_WINDOW_SECONDS", "60")
    reset_rate_limit()
    store_mod.set_store(StubStore())

    from upcycle.main import app
    client = TestClient(app)

    r1 = client.post("/search", json={"query": "paper"})
    assert r1.status_code == 200

    # Second call in same window should be blocked
    r2 = client.post("/search", json={"query": "paper again"})
    assert r2.status_code == 429


def test_limiter_keys_are_independent(monkeypatch):
    monkeypatch.setenv("RL_MAX_REQS", "1")
    check_rate_limit("a")
    check_rate_limit("b")
    with pytest.raises(RuntimeError):
        check_rate_limit("a")


def test_idle_clients_are_forgotten(monkeypatch):
    import upcycle.utils.ratelimit as rl

    monkeypatch.setenv("RL_WINDOW_SECONDS", "60")
    clock = {"t": 1000.0}
    monkeypatch.setattr(rl.time, "time", lambda: clock["t"])

    for ip in ("10.0.0.1", "10.0.0.2", "10.0.0.3"):
        check_rate_limit(ip)
    assert len(rl._store) == 3

    clock["t"] += 61
    check_rate_limit("10.0.0.4")
    assert list(rl._store) == ["10.0.0.4"]
