from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from menupub.auth.dependencies import get_current_restaurant
from menupub.core.constants import DEFAULT_LANGUAGE
from menupub.crud.menu import category as category_crud
from menupub.db import get_db
from menupub.schemas.menu import (
    CategoryCreate,
    CategoryRead,
    CategoryUpdate,
    OrderUpdate,
    ReorderRequest,
)
from menupub.schemas.section import Section
from menupub.services.i18n import Translator
from menupub.services.menu import MenuDataProvider, build_sections

router = APIRouter(prefix="/api/admin/categories", tags=["admin-menu"])


@router.get("/", response_model=List[CategoryRead])
async def list_categories(
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    return await category_crud.get_categories(db, restaurant.id)


@router.post("/", response_model=CategoryRead, status_code=201)
async def create_category(
    category: CategoryCreate,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    return await category_crud.create_category(db, restaurant.id, category)


@router.post("/bulk-order")
async def bulk_order_categories(
    updates: List[OrderUpdate],
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    applied = await category_crud.bulk_order_categories(db, restaurant.id, updates)
    return {"updated": applied}


@router.get("/{category_id}", response_model=CategoryRead)
async def get_category(
    category_id: int,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    category = await category_crud.get_category(db, category_id, restaurant.id)
    if not category:
        raise HTTPException(status_code=404, detail="Not found")
    return category


@router.put("/{category_id}", response_model=CategoryRead)
async def update_category(
    category_id: int,
    updates: CategoryUpdate,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    category = await category_crud.update_category(db, category_id, restaurant.id, updates)
    if not category:
        raise HTTPException(status_code=404, detail="Not found")
    return category


@router.delete("/{category_id}")
async def delete_category(
    category_id: int,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    category = await category_crud.delete_category(db, category_id, restaurant.id)
    if not category:
        raise HTTPException(status_code=404, detail="Not found")
    return {"message": "Category deleted"}


@router.post("/{category_id}/reorder", response_model=CategoryRead)
async def reorder_category(
    category_id: int,
    payload: ReorderRequest,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    category = await category_crud.reorder_category(db, category_id, restaurant.id, payload.direction)
    if not category:
        raise HTTPException(status_code=404, detail="Not found")
    return category


@router.get("/{category_id}/preview", response_model=List[Section])
async def preview_category(
    category_id: int,
    lang: str = Query(DEFAULT_LANGUAGE.value),
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    """Sections of one category as the public page would show them, inactive category included"""
    bundle = await MenuDataProvider(db).get_menu_by_category(category_id, restaurant.id)
    if bundle is None:
        raise HTTPException(status_code=404, detail="Not found")

    translator = Translator(lang)
    return build_sections(
        bundle,
        translator.language,
        specials_label=translator.t("menu.specials"),
        supplements_label=translator.t("menu.supplements"),
    )
