# =============================================
# File: upcycle/db/repo.py
# Purpose: DB bootstrap for the local SQL store: engine from DB_URL (default SQLite) and init_db() for dev seeding.
# =============================================

from sqlmodel import SQLModel, create_engine
import os

DB_URL = os.getenv("DB_URL", "sqlite:///./upcycle.db")
engine = create_engine(DB_URL, echo=False)


def init_db(bind=None):
    # registers the table classes on SQLModel.metadata
    from upcycle.db import models  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)
