# =============================================
# File: upcycle/services/matcher.py
# Purpose: Containment-based fuzzy lookup over the static tips table
# =============================================
from __future__ import annotations

import os
from typing import Mapping, Optional

from upcycle.schemas import MatchResult, RecyclingTip
from upcycle.utils.tips import RECYCLING_TIPS


def _min_score() -> float:
    try:
        return float(os.getenv("MATCH_MIN_SCORE", "0.5"))
    except ValueError:
        return 0.5


def _normalize(query: str) -> str:
    return (query or "").strip().lower()


def match(query: str, tips: Mapping[str, RecyclingTip] = RECYCLING_TIPS) -> MatchResult:
    """
    Best key for a free-text query.

    Exact key -> score 1.0. Otherwise every key that contains the query, or is
    contained by it, scores len(shorter) / len(longer); the first key with the
    highest score wins.
    """
    q = _normalize(query)
    if not q:
        return MatchResult(match=None, score=0.0)
    if q in tips:
        return MatchResult(match=q, score=1.0)

    best: Optional[str] = None
    best_score = 0.0
    for key in tips:
        if key in q or q in key:
            score = min(len(q), len(key)) / max(len(q), len(key))
            if score > best_score:
                best, best_score = key, score
    return MatchResult(match=best, score=best_score)


def is_confident(result: MatchResult, query: str) -> bool:
    if result.match is None:
        return False
    return result.score > _min_score() or _normalize(query) == result.match


def lookup_tip(query: str, tips: Mapping[str, RecyclingTip] = RECYCLING_TIPS) -> Optional[RecyclingTip]:
    """Tip for a confident match, else None."""
    result = match(query, tips)
    if not is_confident(result, query):
        return None
    return tips[result.match]
