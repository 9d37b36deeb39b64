# =============================================
# File: upcycle/cli/init_store.py
# Purpose: Create the local SQL tables and load seed items (development only; the service itself never writes).
# Usage:
#   python -m upcycle.cli.init_store --seed upcycle/data/seed_items.json
# =============================================
from __future__ import annotations
import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from sqlmodel import Session, select

from upcycle.db.models import Idea, IdeaTag, Item, ItemIdea, Tag
from upcycle.db.repo import init_db

DEFAULT_SEED = Path(__file__).resolve().parent.parent / "data" / "seed_items.json"


def load_seed(engine, records: List[Dict[str, Any]]) -> int:
    """Insert items with their ideas and tags; returns the number of items added."""
    init_db(engine)
    added = 0
    with Session(engine) as session:
        tags: Dict[str, Tag] = {t.name: t for t in session.exec(select(Tag)).all()}
        for rec in records:
            item = Item(
                name=rec["name"],
                description=rec.get("description"),
                material_type=rec["material_type"],
                difficulty_level=rec.get("difficulty_level"),
                image_url=rec.get("image_url"),
            )
            session.add(item)
            for raw in rec.get("ideas", []):
                idea = Idea(
                    title=raw["title"],
                    description=raw.get("description", ""),
                    instructions=raw.get("instructions", ""),
                    time_required=raw.get("time_required"),
                    difficulty_level=raw.get("difficulty_level"),
                    cover_image_url=raw.get("cover_image_url"),
                    is_featured=raw.get("is_featured", False),
                )
                session.add(idea)
                session.add(ItemIdea(item_id=item.id, idea_id=idea.id))
                for name in raw.get("tags", []):
                    if name not in tags:
                        tags[name] = Tag(name=name)
                        session.add(tags[name])
                    session.add(IdeaTag(idea_id=idea.id, tag_id=tags[name].id))
            added += 1
        session.commit()
    return added


def main(argv=None):
    ap = argparse.ArgumentParser(description="Create local store tables and load seed items.")
    ap.add_argument("--seed", default=str(DEFAULT_SEED), help="Seed JSON file (default: upcycle/data/seed_items.json)")
    ap.add_argument("--schema-only", action="store_true", help="Create tables without loading seed data")
    args = ap.parse_args(argv)

    from upcycle.db.repo import engine

    if args.schema_only:
        init_db(engine)
        print("[OK] Tables created.")
        return

    path = Path(args.seed)
    if not path.exists():
        print(f"[WARN] Seed file not found: {path}", file=sys.stderr)
        sys.exit(1)
    records = json.loads(path.read_text(encoding="utf-8"))
    n = load_seed(engine, records)
    print(f"[OK] Loaded {n} items from {path}")


if __name__ == "__main__":
    main()
