from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import func
from sqlalchemy.orm import selectinload

from menupub.crud.menu.subcategory import get_subcategory
from menupub.crud.menu.ordering import next_order, swap_with_neighbour, apply_bulk_order
from menupub.models.menu import MenuItem
from menupub.schemas.menu import MenuItemCreate, MenuItemUpdate


async def create_menu_item(db: AsyncSession, restaurant_id: str, menu_item: MenuItemCreate):
    """Create an item at the end of its subcategory; None for a foreign subcategory"""
    if not await get_subcategory(db, menu_item.subcategory_id, restaurant_id):
        return None

    new_item = MenuItem(
        **menu_item.model_dump(mode="json"),
        restaurant_id=restaurant_id,
        order=await next_order(db, MenuItem, MenuItem.subcategory_id == menu_item.subcategory_id),
    )
    db.add(new_item)
    await db.commit()
    await db.refresh(new_item)
    return new_item


async def get_menu_items(db: AsyncSession, restaurant_id: str, subcategory_id: int = None):
    query = select(MenuItem).where(MenuItem.restaurant_id == restaurant_id)
    if subcategory_id is not None:
        query = query.where(MenuItem.subcategory_id == subcategory_id)
    result = await db.execute(query.order_by(MenuItem.order.asc(), MenuItem.id.asc()))
    return result.scalars().all()


async def get_menu_item(db: AsyncSession, item_id: int, restaurant_id: str):
    result = await db.execute(
        select(MenuItem).where(MenuItem.id == item_id, MenuItem.restaurant_id == restaurant_id)
    )
    return result.scalar_one_or_none()


async def count_menu_items(db: AsyncSession, restaurant_id: str) -> int:
    result = await db.execute(
        select(func.count(MenuItem.id)).where(MenuItem.restaurant_id == restaurant_id)
    )
    return result.scalar() or 0


async def update_menu_item(db: AsyncSession, item_id: int, restaurant_id: str, updates: MenuItemUpdate):
    item = await get_menu_item(db, item_id, restaurant_id)
    if not item:
        return None

    update_data = updates.model_dump(exclude_unset=True, mode="json")
    if update_data.get("subcategory_id") is not None:
        if not await get_subcategory(db, update_data["subcategory_id"], restaurant_id):
            return None

    for key, value in update_data.items():
        setattr(item, key, value)

    await db.commit()
    await db.refresh(item)
    return item


async def set_menu_item_image(db: AsyncSession, item, image_path: str):
    """Point the item at a new image; returns the previous path"""
    previous = item.image_path
    item.image_path = image_path
    await db.commit()
    await db.refresh(item)
    return previous


async def delete_menu_item(db: AsyncSession, item_id: int, restaurant_id: str):
    item = await get_menu_item(db, item_id, restaurant_id)
    if item:
        await db.delete(item)
        await db.commit()
    return item


async def reorder_menu_item(db: AsyncSession, item_id: int, restaurant_id: str, direction: str):
    item = await get_menu_item(db, item_id, restaurant_id)
    if not item:
        return None
    await swap_with_neighbour(db, MenuItem, item, direction, MenuItem.subcategory_id == item.subcategory_id)
    return item


async def bulk_order_menu_items(db: AsyncSession, restaurant_id: str, updates):
    return await apply_bulk_order(db, MenuItem, restaurant_id, updates)


# ---------- Cross-tenant (super admin) ----------

async def get_items_with_images(db: AsyncSession):
    """Every restaurant's items that have an uploaded image, newest first"""
    result = await db.execute(
        select(MenuItem)
        .where(MenuItem.image_path.is_not(None))
        .options(selectinload(MenuItem.restaurant))
        .order_by(MenuItem.created_at.desc(), MenuItem.id.desc())
    )
    return result.scalars().all()


async def set_model_3d_url(db: AsyncSession, item_id: int, model_3d_url: str = None):
    item = await db.get(MenuItem, item_id)
    if not item:
        return None
    item.model_3d_url = (model_3d_url or "").strip() or None
    await db.commit()
    await db.refresh(item)
    return item
