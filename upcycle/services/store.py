# =============================================
# File: upcycle/services/store.py
# Purpose: Read-only access to the items/ideas/tags store (hosted PostgREST or local SQL)
# =============================================
from __future__ import annotations

import os
from typing import Any, Dict, List, Optional, Protocol

import requests
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from upcycle.db.models import Idea, IdeaTag, Item, ItemIdea, Tag
from upcycle.schemas import StoredIdea, StoredItem


class StoreError(RuntimeError):
    """Any failure talking to the store (transport, status, decoding)."""


class IdeaStore(Protocol):
    def find_items_by_name(self, query: str, material_type: Optional[str] = None, limit: int = 1) -> List[StoredItem]: ...
    def find_items_by_material(self, fragment: str, limit: int = 5) -> List[StoredItem]: ...
    def find_items_with_material(self, material_type: str, limit: int = 5) -> List[StoredItem]: ...
    def get_material_types(self) -> List[str]: ...
    def get_items_by_material_type(self, material_type: str) -> List[StoredItem]: ...


def _timeout() -> float:
    try:
        return float(os.getenv("STORE_TIMEOUT_SECONDS", "5"))
    except ValueError:
        return 5.0


# ---------------------------------------------------------------------
# Hosted backend (Supabase / PostgREST)
# ---------------------------------------------------------------------

ITEM_COLUMNS = "id,name,description,material_type,difficulty_level,image_url"
ITEM_WITH_IDEAS = (
    ITEM_COLUMNS
    + ",ideas:items_ideas(idea_id,ideas:idea_id("
    "id,title,description,instructions,time_required,difficulty_level,cover_image_url,"
    "tags:ideas_tags(tags:tag_id(name))))"
)


def _parse_idea(raw: Dict[str, Any]) -> Optional[StoredIdea]:
    if not isinstance(raw, dict) or not raw.get("id"):
        return None
    tags: List[str] = []
    for rel in raw.get("tags") or []:
        tag = rel.get("tags") if isinstance(rel, dict) else None
        if isinstance(tag, dict) and tag.get("name"):
            tags.append(str(tag["name"]))
    return StoredIdea(
        id=str(raw["id"]),
        title=raw.get("title") or "",
        description=raw.get("description") or "",
        instructions=raw.get("instructions") or "",
        time_required=raw.get("time_required"),
        difficulty_level=raw.get("difficulty_level"),
        cover_image_url=raw.get("cover_image_url"),
        tags=tags,
    )


def _parse_item(raw: Dict[str, Any]) -> StoredItem:
    if not isinstance(raw, dict):
        raise TypeError(f"items row is {type(raw).__name__}, expected object")
    ideas: List[StoredIdea] = []
    for rel in raw.get("ideas") or []:
        idea = _parse_idea(rel.get("ideas") if isinstance(rel, dict) else None)
        if idea:
            ideas.append(idea)
    return StoredItem(
        id=str(raw["id"]),
        name=raw["name"],
        description=raw.get("description"),
        material_type=raw["material_type"],
        difficulty_level=raw.get("difficulty_level"),
        image_url=raw.get("image_url"),
        ideas=ideas,
    )


class SupabaseIdeaStore:
    """
    PostgREST client for the hosted tables.

    Every call carries a timeout; any transport/HTTP/decoding problem is
    raised as StoreError so callers can degrade to "no match".
    """

    def __init__(self, url: str, key: str, timeout: Optional[float] = None, session: Any = None) -> None:
        self._base = url.rstrip("/") + "/rest/v1"
        self._timeout = timeout if timeout is not None else _timeout()
        self._session = session or requests.Session()
        self._headers = {
            "apikey": key,
            "Authorization": f"Bearer {key}",
            "Accept": "application/json",
        }

    def _get(self, table: str, params: Dict[str, str]) -> List[Dict[str, Any]]:
        try:
            resp = self._session.get(
                f"{self._base}/{table}",
                params=params,
                headers=self._headers,
                timeout=self._timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise StoreError(f"{table} query failed: {e}") from e
        if not isinstance(data, list):
            raise StoreError(f"{table} query returned {type(data).__name__}, expected list")
        return data

    def _items(self, params: Dict[str, str]) -> List[StoredItem]:
        rows = self._get("items", params)
        try:
            return [_parse_item(r) for r in rows]
        except (KeyError, TypeError, ValueError) as e:
            raise StoreError(f"malformed items row: {e}") from e

    def find_items_by_name(self, query: str, material_type: Optional[str] = None, limit: int = 1) -> List[StoredItem]:
        params = {"select": ITEM_WITH_IDEAS, "name": f"ilike.*{query}*", "limit": str(limit)}
        if material_type:
            params["material_type"] = f"eq.{material_type}"
        return self._items(params)

    def find_items_by_material(self, fragment: str, limit: int = 5) -> List[StoredItem]:
        return self._items({"select": ITEM_COLUMNS, "material_type": f"ilike.*{fragment}*", "limit": str(limit)})

    def find_items_with_material(self, material_type: str, limit: int = 5) -> List[StoredItem]:
        return self._items({"select": ITEM_COLUMNS, "material_type": f"eq.{material_type}", "limit": str(limit)})

    def get_material_types(self) -> List[str]:
        rows = self._get("items", {"select": "material_type", "order": "material_type"})
        return sorted({r["material_type"] for r in rows if isinstance(r, dict) and r.get("material_type")})

    def get_items_by_material_type(self, material_type: str) -> List[StoredItem]:
        return self._items({"select": ITEM_COLUMNS, "material_type": f"eq.{material_type}", "order": "name"})


# ---------------------------------------------------------------------
# Local backend (SQLModel)
# ---------------------------------------------------------------------

class SqlIdeaStore:
    """Same contract over the SQLModel tables in upcycle.db.models."""

    def __init__(self, engine) -> None:
        self._engine = engine

    @staticmethod
    def _to_item(item: Item, ideas: Optional[List[StoredIdea]] = None) -> StoredItem:
        return StoredItem(
            id=item.id,
            name=item.name,
            description=item.description,
            material_type=item.material_type,
            difficulty_level=item.difficulty_level,
            image_url=item.image_url,
            ideas=ideas or [],
        )

    def _ideas_for(self, session: Session, item_id: str) -> List[StoredIdea]:
        stmt = select(Idea).join(ItemIdea, ItemIdea.idea_id == Idea.id).where(ItemIdea.item_id == item_id)
        out: List[StoredIdea] = []
        for idea in session.exec(stmt).all():
            tag_stmt = select(Tag.name).join(IdeaTag, IdeaTag.tag_id == Tag.id).where(IdeaTag.idea_id == idea.id)
            out.append(
                StoredIdea(
                    id=idea.id,
                    title=idea.title,
                    description=idea.description,
                    instructions=idea.instructions,
                    time_required=idea.time_required,
                    difficulty_level=idea.difficulty_level,
                    cover_image_url=idea.cover_image_url,
                    tags=list(session.exec(tag_stmt).all()),
                )
            )
        return out

    def _run(self, fn):
        try:
            with Session(self._engine) as session:
                return fn(session)
        except SQLAlchemyError as e:
            raise StoreError(f"sql store query failed: {e}") from e

    def find_items_by_name(self, query: str, material_type: Optional[str] = None, limit: int = 1) -> List[StoredItem]:
        def _q(session: Session) -> List[StoredItem]:
            stmt = select(Item).where(col(Item.name).ilike(f"%{query}%"))
            if material_type:
                stmt = stmt.where(Item.material_type == material_type)
            items = session.exec(stmt.order_by(Item.name).limit(limit)).all()
            return [self._to_item(i, self._ideas_for(session, i.id)) for i in items]
        return self._run(_q)

    def find_items_by_material(self, fragment: str, limit: int = 5) -> List[StoredItem]:
        def _q(session: Session) -> List[StoredItem]:
            stmt = select(Item).where(col(Item.material_type).ilike(f"%{fragment}%")).limit(limit)
            return [self._to_item(i) for i in session.exec(stmt).all()]
        return self._run(_q)

    def find_items_with_material(self, material_type: str, limit: int = 5) -> List[StoredItem]:
        def _q(session: Session) -> List[StoredItem]:
            stmt = select(Item).where(Item.material_type == material_type).limit(limit)
            return [self._to_item(i) for i in session.exec(stmt).all()]
        return self._run(_q)

    def get_material_types(self) -> List[str]:
        def _q(session: Session) -> List[str]:
            stmt = select(Item.material_type).distinct().order_by(Item.material_type)
            return list(session.exec(stmt).all())
        return self._run(_q)

    def get_items_by_material_type(self, material_type: str) -> List[StoredItem]:
        def _q(session: Session) -> List[StoredItem]:
            stmt = select(Item).where(Item.material_type == material_type).order_by(Item.name)
            return [self._to_item(i) for i in session.exec(stmt).all()]
        return self._run(_q)


# ---------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------

_store: Optional[IdeaStore] = None


def _build_store() -> IdeaStore:
    url = os.getenv("SUPABASE_URL")
    key = os.getenv("SUPABASE_ANON_KEY") or os.getenv("SUPABASE_KEY")
    if url and key:
        logger.info(f"[store] using hosted store at {url}")
        return SupabaseIdeaStore(url, key)
    from upcycle.db.repo import engine
    logger.info("[store] SUPABASE_URL not set; using local SQL store")
    return SqlIdeaStore(engine)


def get_store() -> IdeaStore:
    global _store
    if _store is None:
        _store = _build_store()
    return _store


def set_store(store: Optional[IdeaStore]) -> None:
    """Override (or reset with None) the process-wide store."""
    global _store
    _store = store
