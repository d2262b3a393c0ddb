import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from menupub.auth.dependencies import get_current_restaurant
from menupub.crud import restaurant as restaurant_crud
from menupub.crud.menu import menu_item as menu_item_crud
from menupub.db import get_db
from menupub.schemas.restaurant import (
    PublishResult,
    RestaurantRead,
    RestaurantUpdate,
    TemplateSelection,
)

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin/restaurant", tags=["admin-restaurant"])


@router.get("/", response_model=RestaurantRead)
async def get_my_restaurant(restaurant=Depends(get_current_restaurant)):
    return restaurant


@router.patch("/", response_model=RestaurantRead)
async def update_my_restaurant(
    updates: RestaurantUpdate,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    return await restaurant_crud.update_restaurant(db, restaurant, updates)


@router.put("/template", response_model=RestaurantRead)
async def select_template(
    selection: TemplateSelection,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    return await restaurant_crud.set_template(db, restaurant, selection.template.value)


@router.post("/publish", response_model=PublishResult)
async def publish_menu(
    selection: TemplateSelection,
    db: AsyncSession = Depends(get_db),
    restaurant=Depends(get_current_restaurant),
):
    if await menu_item_crud.count_menu_items(db, restaurant.id) == 0:
        raise HTTPException(status_code=400, detail="Please add at least one menu item before publishing.")

    restaurant = await restaurant_crud.mark_published(db, restaurant, selection.template.value)
    log.info("menu published: restaurant=%s slug=%s template=%s", restaurant.id, restaurant.slug, restaurant.template)
    return PublishResult(slug=restaurant.slug, template=restaurant.template, url=f"/{restaurant.slug}")
