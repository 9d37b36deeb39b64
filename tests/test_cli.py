# =============================================
# File: tests/test_cli.py
# =============================================
import sys, os, json
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine, select

from conftest import SEED_FILE
from upcycle.cli import init_store, suggest
from upcycle.db.models import Item, Tag


def _memory_engine():
    return create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)


def test_suggest_prints_json(capsys):
    suggest.main(["Mason Jar", "--material", "Glass", "--seed", "7"])
    ideas = json.loads(capsys.readouterr().out)
    assert len(ideas) == 1
    assert ideas[0]["item_name"] == "Mason Jar"
    assert ideas[0]["time_required"] == 45


def test_suggest_seed_is_reproducible(capsys):
    suggest.main(["Old Phone", "--material", "Electronic", "--seed", "3"])
    a = capsys.readouterr().out
    suggest.main(["Old Phone", "--material", "Electronic", "--seed", "3"])
    b = capsys.readouterr().out
    assert a == b


def test_suggest_count_gives_distinct_ideas(capsys):
    suggest.main(["plastic bottle", "--count", "4", "--seed", "1"])
    titles = [i["idea_title"] for i in json.loads(capsys.readouterr().out)]
    assert 1 <= len(titles) <= 4
    assert len(set(titles)) == len(titles)


def test_suggest_exits_nonzero_on_failure(monkeypatch, capsys):
    monkeypatch.setattr(suggest, "synthesize_idea", lambda *a, **k: None)
    with pytest.raises(SystemExit) as exc:
        suggest.main(["Mason Jar"])
    assert exc.value.code == 1
    assert "generation failed" in capsys.readouterr().err


def test_load_seed_reuses_tags():
    engine = _memory_engine()
    n = init_store.load_seed(engine, json.loads(SEED_FILE.read_text(encoding="utf-8")))
    assert n == 3
    with Session(engine) as session:
        assert len(session.exec(select(Item)).all()) == 3
        assert len(session.exec(select(Tag)).all()) == 8


def test_init_store_main_loads_file(monkeypatch, tmp_path, capsys):
    import upcycle.db.repo as repo
    engine = _memory_engine()
    monkeypatch.setattr(repo, "engine", engine)

    seed = tmp_path / "seed.json"
    seed.write_text(json.dumps([{"name": "Tin Can", "material_type": "Metal"}]), encoding="utf-8")
    init_store.main(["--seed", str(seed)])

    assert "Loaded 1 items" in capsys.readouterr().out
    with Session(engine) as session:
        assert [i.name for i in session.exec(select(Item)).all()] == ["Tin Can"]


def test_init_store_main_missing_seed(monkeypatch, tmp_path):
    import upcycle.db.repo as repo
    monkeypatch.setattr(repo, "engine", _memory_engine())
    with pytest.raises(SystemExit) as exc:
        init_store.main(["--seed", str(tmp_path / "nope.json")])
    assert exc.value.code == 1
