from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from menupub.auth.dependencies import get_current_restaurant
from menupub.crud.menu import subcategory as subcategory_crud
from menupub.db import get_db
from menupub.schemas.menu import (
    OrderUpdate,
    ReorderRequest,
    SubcategoryCreate,
    SubcategoryRead,
    SubcategoryUpdate,
)

router = APIRouter(prefix="/api/admin/subcategories", tags=["admin-menu"])


@router.get("/", response_model=List[SubcategoryRead])
async def list_subcategories(
    category_id: Optional[int] = None,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    return await subcategory_crud.get_subcategories(db, restaurant.id, category_id)


@router.post("/", response_model=SubcategoryRead, status_code=201)
async def create_subcategory(
    subcategory: SubcategoryCreate,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    created = await subcategory_crud.create_subcategory(db, restaurant.id, subcategory)
    if not created:
        raise HTTPException(status_code=404, detail="Category not found")
    return created


@router.post("/bulk-order")
async def bulk_order_subcategories(
    updates: List[OrderUpdate],
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    applied = await subcategory_crud.bulk_order_subcategories(db, restaurant.id, updates)
    return {"updated": applied}


@router.put("/{subcategory_id}", response_model=SubcategoryRead)
async def update_subcategory(
    subcategory_id: int,
    updates: SubcategoryUpdate,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    subcategory = await subcategory_crud.update_subcategory(db, subcategory_id, restaurant.id, updates)
    if not subcategory:
        raise HTTPException(status_code=404, detail="Not found")
    return subcategory


@router.delete("/{subcategory_id}")
async def delete_subcategory(
    subcategory_id: int,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    subcategory = await subcategory_crud.delete_subcategory(db, subcategory_id, restaurant.id)
    if not subcategory:
        raise HTTPException(status_code=404, detail="Not found")
    return {"message": "Subcategory deleted"}


@router.post("/{subcategory_id}/reorder", response_model=SubcategoryRead)
async def reorder_subcategory(
    subcategory_id: int,
    payload: ReorderRequest,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    subcategory = await subcategory_crud.reorder_subcategory(db, subcategory_id, restaurant.id, payload.direction)
    if not subcategory:
        raise HTTPException(status_code=404, detail="Not found")
    return subcategory
