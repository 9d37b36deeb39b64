# =============================================
# File: upcycle/db/models.py
# Purpose: SQLModel definitions mirroring the hosted items/ideas/tags schema (read side)
# =============================================

from sqlmodel import SQLModel, Field
from typing import Optional
import uuid


def _uuid() -> str:
    return str(uuid.uuid4())


class Item(SQLModel, table=True):
    __tablename__ = "items"

    id: str = Field(default_factory=_uuid, primary_key=True)
    name: str = Field(index=True)
    description: Optional[str] = None
    material_type: str = Field(index=True)
    difficulty_level: Optional[int] = None
    image_url: Optional[str] = None


class Idea(SQLModel, table=True):
    __tablename__ = "ideas"

    id: str = Field(default_factory=_uuid, primary_key=True)
    title: str
    description: str
    instructions: str
    time_required: Optional[int] = None
    difficulty_level: Optional[int] = None
    cover_image_url: Optional[str] = None
    is_featured: Optional[bool] = False


class ItemIdea(SQLModel, table=True):
    __tablename__ = "items_ideas"

    item_id: str = Field(foreign_key="items.id", primary_key=True)
    idea_id: str = Field(foreign_key="ideas.id", primary_key=True)


class Tag(SQLModel, table=True):
    __tablename__ = "tags"

    id: str = Field(default_factory=_uuid, primary_key=True)
    name: str


class IdeaTag(SQLModel, table=True):
    __tablename__ = "ideas_tags"

    idea_id: str = Field(foreign_key="ideas.id", primary_key=True)
    tag_id: str = Field(foreign_key="tags.id", primary_key=True)
