from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from menupub.api.menu_routes.uploads import discard_menu_image, store_menu_image
from menupub.auth.dependencies import get_current_restaurant
from menupub.crud.menu import addon as addon_crud
from menupub.db import get_db
from menupub.schemas.menu import (
    AddonCreate,
    AddonRead,
    AddonUpdate,
    OrderUpdate,
    ReorderRequest,
)

router = APIRouter(prefix="/api/admin/addons", tags=["admin-menu"])


@router.get("/", response_model=List[AddonRead])
async def list_addons(
    category_id: Optional[int] = None,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    return await addon_crud.get_addons(db, restaurant.id, category_id)


@router.post("/", response_model=AddonRead, status_code=201)
async def create_addon(
    addon: AddonCreate,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    created = await addon_crud.create_addon(db, restaurant.id, addon)
    if not created:
        raise HTTPException(status_code=404, detail="Category not found")
    return created


@router.post("/bulk-order")
async def bulk_order_addons(
    updates: List[OrderUpdate],
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    applied = await addon_crud.bulk_order_addons(db, restaurant.id, updates)
    return {"updated": applied}


@router.put("/{addon_id}", response_model=AddonRead)
async def update_addon(
    addon_id: int,
    updates: AddonUpdate,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    addon = await addon_crud.update_addon(db, addon_id, restaurant.id, updates)
    if not addon:
        raise HTTPException(status_code=404, detail="Not found")
    return addon


@router.delete("/{addon_id}")
async def delete_addon(
    addon_id: int,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    addon = await addon_crud.delete_addon(db, addon_id, restaurant.id)
    if not addon:
        raise HTTPException(status_code=404, detail="Not found")

    await discard_menu_image(addon.image_path)
    return {"message": "Add-on deleted"}


@router.post("/{addon_id}/reorder", response_model=AddonRead)
async def reorder_addon(
    addon_id: int,
    payload: ReorderRequest,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    addon = await addon_crud.reorder_addon(db, addon_id, restaurant.id, payload.direction)
    if not addon:
        raise HTTPException(status_code=404, detail="Not found")
    return addon


@router.post("/{addon_id}/image", response_model=AddonRead)
async def upload_addon_image(
    addon_id: int,
    photo: UploadFile = File(...),
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    addon = await addon_crud.get_addon(db, addon_id, restaurant.id)
    if not addon:
        raise HTTPException(status_code=404, detail="Not found")

    url = await store_menu_image(photo, restaurant.id, kind="addons")
    previous = await addon_crud.set_addon_image(db, addon, url)
    await discard_menu_image(previous)
    return addon
