# =============================================
# File: tests/conftest.py
# Purpose: Shared fixtures: store stubs, seeded in-memory SQL store, clean module state
# =============================================
import sys, os, json
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

# keep test runs from writing the loguru file sink
os.environ.setdefault("LOG_FILE", "")

from pathlib import Path
from typing import List, Optional

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from upcycle.schemas import StoredIdea, StoredItem
from upcycle.services import store as store_mod
from upcycle.services.store import SqlIdeaStore, StoreError
from upcycle.utils import rcache
from upcycle.utils.metrics import reset as metrics_reset
from upcycle.utils.ratelimit import reset_rate_limit

SEED_FILE = Path(__file__).resolve().parent.parent / "upcycle" / "data" / "seed_items.json"


class StubStore:
    """In-memory IdeaStore; counts calls and can be told to fail."""

    def __init__(self, by_name: Optional[List[StoredItem]] = None, by_material: Optional[List[StoredItem]] = None,
                 fail: bool = False):
        self.by_name = by_name or []
        self.by_material = by_material or []
        self.fail = fail
        self.calls = []

    def _check(self, name):
        self.calls.append(name)
        if self.fail:
            raise StoreError("connection refused")

    def find_items_by_name(self, query, material_type=None, limit=1):
        self._check("find_items_by_name")
        return self.by_name[:limit]

    def find_items_by_material(self, fragment, limit=5):
        self._check("find_items_by_material")
        return self.by_material[:limit]

    def find_items_with_material(self, material_type, limit=5):
        self._check("find_items_with_material")
        return [i for i in self.by_material if i.material_type == material_type][:limit]

    def get_material_types(self):
        self._check("get_material_types")
        return sorted({i.material_type for i in self.by_name + self.by_material})

    def get_items_by_material_type(self, material_type):
        self._check("get_items_by_material_type")
        return [i for i in self.by_name + self.by_material if i.material_type == material_type]


def make_item(name="Glass Jar", material="Glass", ideas=None, **kw) -> StoredItem:
    return StoredItem(id=kw.pop("id", name.lower().replace(" ", "-")), name=name, material_type=material,
                      ideas=ideas or [], **kw)


def make_idea(title="Glass Jar Spice Rack", **kw) -> StoredIdea:
    return StoredIdea(
        id=kw.pop("id", title.lower().replace(" ", "-")),
        title=title,
        description=kw.pop("description", "Soak off the labels\nPaint the lids"),
        instructions=kw.pop("instructions", "Step 1: Clean.\nStep 2: Paint."),
        **kw,
    )


@pytest.fixture(autouse=True)
def _clean_state(monkeypatch):
    monkeypatch.setenv("RL_MAX_REQS", "100")
    monkeypatch.setenv("RL_WINDOW_SECONDS", "60")
    rcache.clear()
    reset_rate_limit()
    metrics_reset()
    yield
    store_mod.set_store(None)


@pytest.fixture
def sql_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    from upcycle.cli.init_store import load_seed
    load_seed(engine, json.loads(SEED_FILE.read_text(encoding="utf-8")))
    return engine


@pytest.fixture
def sql_store(sql_engine):
    return SqlIdeaStore(sql_engine)
