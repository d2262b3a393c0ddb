import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from menupub.api.menu_routes.uploads import discard_menu_image, store_menu_image
from menupub.auth.dependencies import get_current_restaurant
from menupub.crud.menu import menu_item as menu_item_crud
from menupub.db import get_db
from menupub.schemas.menu import (
    MenuItemCreate,
    MenuItemRead,
    MenuItemUpdate,
    OrderUpdate,
    ReorderRequest,
)

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin/menu-items", tags=["admin-menu"])


@router.get("/", response_model=List[MenuItemRead])
async def list_menu_items(
    subcategory_id: Optional[int] = None,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    return await menu_item_crud.get_menu_items(db, restaurant.id, subcategory_id)


@router.post("/", response_model=MenuItemRead, status_code=201)
async def create_menu_item(
    item: MenuItemCreate,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    created = await menu_item_crud.create_menu_item(db, restaurant.id, item)
    if not created:
        raise HTTPException(status_code=404, detail="Subcategory not found")
    return created


@router.post("/bulk-order")
async def bulk_order_menu_items(
    updates: List[OrderUpdate],
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    applied = await menu_item_crud.bulk_order_menu_items(db, restaurant.id, updates)
    return {"updated": applied}


@router.get("/{item_id}", response_model=MenuItemRead)
async def get_menu_item(
    item_id: int,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    item = await menu_item_crud.get_menu_item(db, item_id, restaurant.id)
    if not item:
        raise HTTPException(status_code=404, detail="Not found")
    return item


@router.put("/{item_id}", response_model=MenuItemRead)
async def update_menu_item(
    item_id: int,
    updates: MenuItemUpdate,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    existing = await menu_item_crud.get_menu_item(db, item_id, restaurant.id)
    if not existing:
        raise HTTPException(status_code=404, detail="Not found")
    previous_image = existing.image_path

    item = await menu_item_crud.update_menu_item(db, item_id, restaurant.id, updates)
    if not item:
        raise HTTPException(status_code=404, detail="Subcategory not found")

    if "image_path" in updates.model_fields_set and previous_image != item.image_path:
        await discard_menu_image(previous_image)
    return item


@router.delete("/{item_id}")
async def delete_menu_item(
    item_id: int,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    item = await menu_item_crud.delete_menu_item(db, item_id, restaurant.id)
    if not item:
        raise HTTPException(status_code=404, detail="Not found")

    await discard_menu_image(item.image_path)
    return {"message": "Menu item deleted"}


@router.post("/{item_id}/reorder", response_model=MenuItemRead)
async def reorder_menu_item(
    item_id: int,
    payload: ReorderRequest,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    item = await menu_item_crud.reorder_menu_item(db, item_id, restaurant.id, payload.direction)
    if not item:
        raise HTTPException(status_code=404, detail="Not found")
    return item


@router.post("/{item_id}/image", response_model=MenuItemRead)
async def upload_menu_item_image(
    item_id: int,
    photo: UploadFile = File(...),
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    item = await menu_item_crud.get_menu_item(db, item_id, restaurant.id)
    if not item:
        raise HTTPException(status_code=404, detail="Not found")

    url = await store_menu_image(photo, restaurant.id, kind="items")
    previous = await menu_item_crud.set_menu_item_image(db, item, url)
    await discard_menu_image(previous)

    log.info("menu item image replaced: restaurant=%s item=%s", restaurant.id, item.id)
    return item
