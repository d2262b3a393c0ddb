from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from menupub.auth.dependencies import get_current_super_admin
from menupub.crud import restaurant as restaurant_crud
from menupub.crud.menu import menu_item as menu_item_crud
from menupub.db import get_db
from menupub.schemas.restaurant import (
    ModelItemGroup,
    ModelItemGroups,
    ModelItemRead,
    ModelUrlUpdate,
    RestaurantSummary,
)

UNKNOWN_RESTAURANT = "Unknown Restaurant"

router = APIRouter(prefix="/api/super-admin", tags=["super-admin"])


@router.get("/3d-models", response_model=ModelItemGroups)
async def list_items_for_3d_models(
    db: AsyncSession = Depends(get_db),
    admin=Depends(get_current_super_admin),
):
    """Items with a photo, grouped by restaurant, ready for 3D model assignment"""
    grouped: ModelItemGroups = {}
    for item in await menu_item_crud.get_items_with_images(db):
        group = grouped.get(item.restaurant_id)
        if group is None:
            name = item.restaurant.name if item.restaurant else UNKNOWN_RESTAURANT
            group = grouped[item.restaurant_id] = ModelItemGroup(restaurant_name=name)
        group.items.append(ModelItemRead.model_validate(item))
    return grouped


@router.patch("/3d-models/{item_id}", response_model=ModelItemRead)
async def update_item_3d_model(
    item_id: int,
    payload: ModelUrlUpdate,
    db: AsyncSession = Depends(get_db),
    admin=Depends(get_current_super_admin),
):
    item = await menu_item_crud.set_model_3d_url(db, item_id, payload.model_3d_url)
    if not item:
        raise HTTPException(status_code=404, detail="Not found")
    return item


@router.get("/restaurants", response_model=List[RestaurantSummary])
async def list_restaurants(
    db: AsyncSession = Depends(get_db),
    admin=Depends(get_current_super_admin),
):
    rows = await restaurant_crud.get_restaurants_with_item_counts(db)
    return [
        RestaurantSummary(
            id=restaurant.id,
            name=restaurant.name,
            slug=restaurant.slug,
            is_active=restaurant.is_active,
            template=restaurant.template,
            item_count=count,
        )
        for restaurant, count in rows
    ]
