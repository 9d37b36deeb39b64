# upcycle/routers/ideas.py
from __future__ import annotations

import random
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, field_validator

from upcycle.schemas import GeneratedIdea
from upcycle.services.synthesizer import synthesize_idea, synthesize_multiple
from upcycle.utils.metrics import record_synthesis_failure

router = APIRouter(prefix="/ideas", tags=["ideas"])


def _blank_to_none(v: Optional[str]) -> Optional[str]:
    v = (v or "").strip()
    return v or None


class GenerateRequest(BaseModel):
    item_name: Optional[str] = Field(None, max_length=200)
    material_type: Optional[str] = Field(None, max_length=50)
    seed: Optional[int] = None

    @field_validator("item_name", "material_type")
    @classmethod
    def _strip_blank(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)


class BatchRequest(BaseModel):
    query: str = Field(..., min_length=1, max_length=200)
    material_type: Optional[str] = Field(None, max_length=50)
    count: int = Field(6, ge=1, le=12)
    seed: Optional[int] = None

    @field_validator("material_type")
    @classmethod
    def _strip_blank(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)

    @field_validator("query")
    @classmethod
    def _trim_query(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("query must not be empty")
        return v


class BatchResponse(BaseModel):
    ideas: List[GeneratedIdea]


@router.post("/generate", response_model=GeneratedIdea)
def post_generate(req: GenerateRequest) -> GeneratedIdea:
    idea = synthesize_idea(req.item_name, req.material_type, rng=random.Random(req.seed))
    if idea is None:
        record_synthesis_failure()
        raise HTTPException(status_code=503, detail="generation failed")
    return idea


@router.post("/batch", response_model=BatchResponse)
def post_batch(req: BatchRequest) -> BatchResponse:
    ideas = synthesize_multiple(req.query, req.material_type, req.count, rng=random.Random(req.seed))
    if not ideas:
        record_synthesis_failure()
    return BatchResponse(ideas=ideas)
