# upcycle/routers/materials.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter
from loguru import logger

from upcycle.schemas import StoredItem
from upcycle.services.store import StoreError, get_store
from upcycle.utils.metrics import record_store_error
from upcycle.utils.rules import MATERIAL_TYPES

router = APIRouter(prefix="/materials", tags=["materials"])


@router.get("", response_model=List[str])
def get_materials() -> List[str]:
    """Material types present in the store; the built-in list if the store is down or empty."""
    try:
        types = get_store().get_material_types()
    except StoreError as e:
        record_store_error()
        logger.warning(f"[materials] store unavailable: {e}")
        types = []
    return types or list(MATERIAL_TYPES)


@router.get("/{material_type}/items", response_model=List[StoredItem])
def get_material_items(material_type: str) -> List[StoredItem]:
    try:
        return get_store().get_items_by_material_type(material_type)
    except StoreError as e:
        record_store_error()
        logger.warning(f"[materials] items for {material_type!r} unavailable: {e}")
        return []
