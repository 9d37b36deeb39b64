# =============================================
# File: tests/test_logging.py
# =============================================
import sys, os, json
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from fastapi.testclient import TestClient

from conftest import StubStore
from upcycle.services import store as store_mod


def _mount_client():
    store_mod.set_store(StubStore())
    from upcycle.main import app
    return TestClient(app)


def _find_json_events(caplog, name: str):
    out = []
    for rec in caplog.records:
        try:
            data = json.loads(rec.message)
        except (ValueError, TypeError):
            continue
        if isinstance(data, dict) and data.get("event") == name:
            out.append(data)
    return out


def test_structured_log_on_success(caplog):
    caplog.set_level("INFO", logger="upcycle")
    client = _mount_client()

    r = client.post("/search", json={"query": "old t-shirt"})
    assert r.status_code == 200

    events = _find_json_events(caplog, "request.completed")
    assert events
    evt = events[-1]
    assert evt["path"] == "/search"
    assert evt["status"] == 200
    assert evt["request_id"] == r.headers["X-Request-ID"]
    assert isinstance(evt["latency_ms"], int)
    # set by the router
    assert evt["source"] == "tips"
    assert evt["cache_hit"] is False
    assert len(evt.get("qhash", "")) == 10
    # raw query never logged
    assert "old t-shirt" not in json.dumps(evt)
    assert evt["rate_limited"] is False


def test_structured_log_rate_limited(monkeypatch, caplog):
    caplog.set_level("INFO", logger="upcycle")
    client = _mount_client()

    monkeypatch.setenv("RL_MAX_REQS", "1")
    _ = client.post("/search", json={"query": "Ping?"})
    r = client.post("/search", json={"query": "Ping again?"})
    assert r.status_code == 429

    evt = _find_json_events(caplog, "request.completed")[-1]
    assert evt["status"] == 429
    assert evt["rate_limited"] is True


def test_middleware_adds_rate_limited_flag_on_other_routes(caplog):
    caplog.set_level("INFO", logger="upcycle")
    client = _mount_client()
    client.get("/health")

    evt = _find_json_events(caplog, "request.completed")[-1]
    assert evt["path"] == "/health"
    assert evt["rate_limited"] is False
