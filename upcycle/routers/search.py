# upcycle/routers/search.py
from __future__ import annotations

import time
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import BaseModel, Field, field_validator

from upcycle.schemas import MatchResult, SearchResult
from upcycle.services.matcher import is_confident, match
from upcycle.services.search import search_recycling_items
from upcycle.utils import rcache, slog
from upcycle.utils.metrics import record_rate_limit_hit, record_search
from upcycle.utils.ratelimit import check_rate_limit

router = APIRouter(tags=["search"])


# --------- Schemas ---------

class SearchRequest(BaseModel):
    """
    - query: free-text item name, e.g. "old t-shirt".
    - material_type: optional exact material filter, e.g. "Glass".
    """
    query: str = Field(..., min_length=1, max_length=200)
    material_type: Optional[str] = Field(None, max_length=50)

    @field_validator("query")
    @classmethod
    def _trim_query(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("query must not be empty")
        return v

    @field_validator("material_type")
    @classmethod
    def _blank_material_is_none(cls, v: Optional[str]) -> Optional[str]:
        v = (v or "").strip()
        return v or None


class MatchResponse(MatchResult):
    confident: bool = False


# --------- Routes ---------

@router.post("/search", response_model=SearchResult)
def post_search(req: SearchRequest, request: Request) -> SearchResult:
    """
    Item lookup with fallbacks (store idea -> item/material tips -> static
    tips -> generic tips), decorated with synthesized related ideas.
    """
    t0 = time.time()
    key = request.client.host if request.client else "anon"
    try:
        check_rate_limit(key)
    except RuntimeError:
        record_rate_limit_hit()
        request.state.log_context = slog.search_context(req.query, req.material_type, rate_limited=True)
        raise HTTPException(status_code=429, detail="Too Many Requests")

    request.state.log_context = slog.search_context(req.query, req.material_type, cache_hit=False)

    cache_key = rcache.make_key(req.query, req.material_type)
    cached = rcache.get(cache_key)
    if cached:
        resp = SearchResult.model_validate(cached)
        record_search(int((time.time() - t0) * 1000), source=resp.source, cache_hit=True)
        request.state.log_context.update({"source": resp.source, "cache_hit": True})
        return resp

    resp = search_recycling_items(req.query, req.material_type)

    record_search(int((time.time() - t0) * 1000), source=resp.source)
    request.state.log_context.update({"source": resp.source})
    rcache.set(cache_key, resp.model_dump())
    return resp


@router.get("/match", response_model=MatchResponse)
def get_match(q: str = Query("", max_length=200)) -> MatchResponse:
    """Best static-tip key for `q` and whether it clears the confidence bar."""
    result = match(q)
    return MatchResponse(match=result.match, score=result.score, confident=is_confident(result, q))
