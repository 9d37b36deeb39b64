# =============================================
# File: upcycle/schemas.py
# Purpose: Pydantic records shared by the services, routers and CLI
# =============================================
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class RecyclingTip(BaseModel):
    """Static tip set for a well-known item (keyed by lowercase name)."""
    model_config = ConfigDict(frozen=True)

    key: str
    suggestions: List[str]
    how_to: str


class CategoryRuleSet(BaseModel):
    """
    Template data for one recognized item category.
    A rule applies when any of its keywords occurs in the lowercased item name.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    keywords: List[str]
    titles: List[str]
    suggestions: List[str]
    instructions: str
    tags: List[str]
    image_keywords: str
    difficulty_level: Optional[int] = Field(None, ge=1, le=5)
    time_required: Optional[int] = Field(None, gt=0, multiple_of=15)

    def matches(self, item_name_lower: str) -> bool:
        return any(k in item_name_lower for k in self.keywords)


class MatchResult(BaseModel):
    match: Optional[str] = None
    score: float = 0.0


class GeneratedIdea(BaseModel):
    item_name: str
    material_type: str
    idea_title: str
    suggestions: List[str]
    how_to: str
    is_generic: bool = False
    time_required: Optional[int] = None
    difficulty_level: Optional[int] = None
    tags: Optional[List[str]] = None
    image_keywords: Optional[str] = None
    image_url: Optional[str] = None
    is_ai_generated: bool = True


# ---------- Store rows (normalized across backends) ----------

class StoredIdea(BaseModel):
    id: str
    title: str
    description: str = ""
    instructions: str = ""
    time_required: Optional[int] = None
    difficulty_level: Optional[int] = None
    cover_image_url: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


class StoredItem(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    material_type: str
    difficulty_level: Optional[int] = None
    image_url: Optional[str] = None
    ideas: List[StoredIdea] = Field(default_factory=list)


# ---------- Search output ----------

class SimilarItem(BaseModel):
    id: str
    name: str
    material_type: str


class RelatedIdea(BaseModel):
    id: str
    title: str
    description: List[str]
    instructions: str
    time_required: Optional[int] = None
    difficulty_level: Optional[int] = None
    tags: Optional[List[str]] = None
    image_url: Optional[str] = None
    is_ai_generated: bool = False


ResultSource = Literal["store", "item", "material", "tips", "generic"]


class SearchResult(BaseModel):
    item_name: str
    material_type: str
    idea_title: Optional[str] = None
    suggestions: List[str]
    how_to: str
    is_generic: bool
    source: ResultSource
    time_required: Optional[int] = None
    difficulty_level: Optional[int] = None
    tags: Optional[List[str]] = None
    image_url: Optional[str] = None
    similar_items: List[SimilarItem] = Field(default_factory=list)
    related_ideas: List[RelatedIdea] = Field(default_factory=list)
