# =============================================
# File: upcycle/services/synthesizer.py
# Purpose: Rule-based "upcycling idea" synthesis with an injectable random source
# =============================================
from __future__ import annotations

import random
from typing import List, Optional

from loguru import logger

from upcycle.schemas import GeneratedIdea
from upcycle.utils import rules

IMAGE_URL_TEMPLATE = "https://source.unsplash.com/random?{keywords},recycling"


def _subset(rng: random.Random, pool: List[str], lo: int, hi: int) -> List[str]:
    """Shuffled copy of pool cut to randint(lo, hi), never above len(pool)."""
    shuffled = rng.sample(pool, len(pool))
    return shuffled[: min(rng.randint(lo, hi), len(shuffled))]


def _build_idea(item_name: Optional[str], material_type: Optional[str], rng: random.Random) -> GeneratedIdea:
    material = material_type or rng.choice(rules.MATERIAL_TYPES)
    item = item_name or rng.choice(rules.MATERIAL_ITEMS.get(material, [rules.FALLBACK_ITEM]))

    rule = rules.find_category(item)

    titles = rule.titles if rule else rules.generic_titles(item)
    title = rng.choice(titles)

    pool = rule.suggestions if rule else rules.generic_suggestions(item, material, title)
    suggestions = _subset(rng, list(pool), 3, 5)
    if not suggestions:
        raise ValueError(f"empty suggestion pool for {item!r}")

    if rule and rule.instructions:
        how_to = rule.instructions
    else:
        how_to = rules.instructions_for_title(item, material, title)

    difficulty = rule.difficulty_level if rule and rule.difficulty_level else rng.randint(1, 5)
    time_required = rule.time_required if rule and rule.time_required else rng.randint(1, 6) * 15

    tag_pool = rule.tags if rule else rules.generic_tags(material)
    tags = _subset(rng, list(tag_pool), 2, 4)

    keywords = rule.image_keywords if rule and rule.image_keywords else f"{item.lower()} upcycle"

    return GeneratedIdea(
        item_name=item,
        material_type=material,
        idea_title=title,
        suggestions=suggestions,
        how_to=how_to,
        is_generic=False,
        time_required=time_required,
        difficulty_level=difficulty,
        tags=tags,
        image_keywords=keywords,
        image_url=IMAGE_URL_TEMPLATE.format(keywords=keywords),
        is_ai_generated=True,
    )


def synthesize_idea(
    item_name: Optional[str] = None,
    material_type: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> Optional[GeneratedIdea]:
    """
    Build one idea for an item and/or material.

    Unknown items fall back to generic templates; only an internal error
    yields None, which callers treat as "generation unavailable".
    """
    rng = rng or random.Random()
    try:
        return _build_idea(item_name, material_type, rng)
    except Exception:
        logger.exception(f"[synthesize] generation failed item={item_name!r} material={material_type!r}")
        return None


def infer_material(query: str, rng: random.Random) -> str:
    q = (query or "").lower()
    for m in rules.MATERIAL_TYPES:
        if m.lower() in q:
            return m
    return rng.choice(rules.MATERIAL_TYPES)


def synthesize_multiple(
    query: str,
    material_type: Optional[str] = None,
    count: int = 6,
    rng: Optional[random.Random] = None,
    max_retries: Optional[int] = None,
) -> List[GeneratedIdea]:
    """
    Up to `count` ideas for the query, pairwise distinct by title.

    Duplicates are regenerated at most `max_retries` times (default: count);
    a shortfall is returned as-is.
    """
    if count <= 0:
        return []
    rng = rng or random.Random()
    retries = count if max_retries is None else max(0, max_retries)
    try:
        material = material_type or infer_material(query, rng)
        ideas: List[GeneratedIdea] = []
        seen = set()

        def _take(idea: Optional[GeneratedIdea]) -> None:
            if idea and idea.idea_title not in seen:
                seen.add(idea.idea_title)
                ideas.append(idea)

        for _ in range(count):
            _take(synthesize_idea(query or None, material, rng))

        attempts = 0
        while len(ideas) < count and attempts < retries:
            attempts += 1
            _take(synthesize_idea(query or None, material, rng))

        if len(ideas) < count:
            logger.info(f"[synthesize] short batch query={query!r} wanted={count} got={len(ideas)}")
        return ideas[:count]
    except Exception:
        logger.exception(f"[synthesize] batch failed query={query!r}")
        return []
