# =============================================
# File: upcycle/services/search.py
# Purpose: Item lookup flow: store hit -> item/material tips -> static tips -> generic, plus related ideas
# =============================================
from __future__ import annotations

import os
import random
import uuid
from typing import List, Optional

from loguru import logger

from upcycle.schemas import (
    GeneratedIdea,
    RelatedIdea,
    SearchResult,
    SimilarItem,
    StoredIdea,
    StoredItem,
)
from upcycle.services.matcher import lookup_tip
from upcycle.services.store import IdeaStore, StoreError, get_store
from upcycle.services.synthesizer import synthesize_multiple
from upcycle.utils import tips as tip_text
from upcycle.utils.metrics import record_store_error


def _related_count() -> int:
    try:
        return max(0, int(os.getenv("RELATED_IDEAS_COUNT", "6")))
    except ValueError:
        return 6


def _fallback_image(*parts: str) -> str:
    return "https://source.unsplash.com/random?" + ",".join(p.lower() for p in parts if p)


def _to_related(idea: GeneratedIdea) -> RelatedIdea:
    return RelatedIdea(
        id=f"ai-{uuid.uuid4().hex[:12]}",
        title=idea.idea_title,
        description=list(idea.suggestions),
        instructions=idea.how_to,
        time_required=idea.time_required,
        difficulty_level=idea.difficulty_level,
        tags=idea.tags,
        image_url=idea.image_url,
        is_ai_generated=True,
    )


def _stored_to_related(idea: StoredIdea) -> RelatedIdea:
    return RelatedIdea(
        id=idea.id,
        title=idea.title,
        description=_split_lines(idea.description),
        instructions=idea.instructions,
        time_required=idea.time_required,
        difficulty_level=idea.difficulty_level,
        tags=idea.tags or None,
        image_url=idea.cover_image_url,
        is_ai_generated=False,
    )


def _split_lines(text: str) -> List[str]:
    return [ln.strip() for ln in (text or "").split("\n") if ln.strip()]


def _similar(items: List[StoredItem]) -> List[SimilarItem]:
    return [SimilarItem(id=i.id, name=i.name, material_type=i.material_type) for i in items]


def _safe(call, what: str):
    """Run a store call; failures become None ("no match") and are counted."""
    try:
        return call()
    except StoreError as e:
        record_store_error()
        logger.warning(f"[search] {what} failed, treating as no match: {e}")
        return None


def _from_store_idea(item: StoredItem, items: List[StoredItem], related: List[RelatedIdea]) -> SearchResult:
    main: Optional[StoredIdea] = None
    others: List[RelatedIdea] = []
    seen = set()
    for it in items:
        for idea in it.ideas:
            if idea.id in seen:
                continue
            seen.add(idea.id)
            if main is None:
                main = idea
            else:
                others.append(_stored_to_related(idea))

    suggestions = _split_lines(main.description) or tip_text.item_tips(item.material_type)
    return SearchResult(
        item_name=item.name,
        material_type=item.material_type,
        idea_title=main.title,
        suggestions=suggestions,
        how_to=main.instructions,
        is_generic=False,
        source="store",
        time_required=main.time_required,
        difficulty_level=main.difficulty_level,
        tags=main.tags or None,
        image_url=main.cover_image_url or item.image_url or _fallback_image(item.material_type, item.name),
        similar_items=_similar(items),
        related_ideas=others + related,
    )


def generic_result(query: str, related: Optional[List[RelatedIdea]] = None) -> SearchResult:
    return SearchResult(
        item_name=query,
        material_type="Unknown",
        suggestions=list(tip_text.GENERIC_TIPS),
        how_to=tip_text.GENERIC_HOW_TO,
        is_generic=True,
        source="generic",
        image_url=_fallback_image("recycling", query),
        related_ideas=related or [],
    )


def search_recycling_items(
    query: str,
    material_type: Optional[str] = None,
    store: Optional[IdeaStore] = None,
    rng: Optional[random.Random] = None,
) -> SearchResult:
    """
    Resolve a user query to something displayable.

    Never raises for store trouble: a failed lookup is logged and handled as
    "no match", ending at the generic tip set in the worst case.
    """
    q = (query or "").strip()
    if not q:
        return generic_result(q)

    store = store or get_store()
    rng = rng or random.Random()
    logger.info(f"[search] query={q!r} material={material_type!r}")

    items = _safe(lambda: store.find_items_by_name(q, material_type, limit=1), "item lookup") or []

    related = [_to_related(i) for i in synthesize_multiple(q, material_type, _related_count(), rng=rng)]

    if items:
        item = items[0]
        if any(it.ideas for it in items):
            return _from_store_idea(item, items, related)
        return SearchResult(
            item_name=item.name,
            material_type=item.material_type,
            suggestions=tip_text.item_tips(item.material_type),
            how_to=item.description
            or f"This is a {item.material_type} item that may be recyclable depending on your local facilities.",
            is_generic=True,
            source="item",
            difficulty_level=item.difficulty_level,
            image_url=item.image_url or _fallback_image(item.material_type, item.name),
            similar_items=_similar(items),
            related_ideas=related,
        )

    if material_type:
        similar = _safe(lambda: store.find_items_with_material(material_type, limit=5), "material lookup")
    else:
        similar = _safe(lambda: store.find_items_by_material(q, limit=5), "material lookup")
    if similar:
        first = similar[0]
        return SearchResult(
            item_name=q,
            material_type=first.material_type,
            suggestions=tip_text.material_tips(first.material_type),
            how_to=tip_text.material_how_to(first.material_type),
            is_generic=True,
            source="material",
            image_url=first.image_url or _fallback_image(first.material_type, "recycling"),
            similar_items=_similar([first]),
            related_ideas=related,
        )

    tip = lookup_tip(q)
    if tip:
        return SearchResult(
            item_name=tip.key,
            material_type=material_type or "Unknown",
            suggestions=list(tip.suggestions),
            how_to=tip.how_to,
            is_generic=False,
            source="tips",
            image_url=_fallback_image("recycling", tip.key),
            related_ideas=related,
        )

    return generic_result(q, related)
