from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from menupub.crud.menu.category import get_category
from menupub.crud.menu.subcategory import get_subcategory
from menupub.crud.menu.ordering import next_order, swap_with_neighbour, apply_bulk_order
from menupub.models.menu import Addon


def _order_scope(restaurant_id: str, category_id=None, subcategory_id=None):
    # Ordered within the subcategory, else the category, else restaurant-wide
    if subcategory_id is not None:
        return (Addon.subcategory_id == subcategory_id,)
    if category_id is not None:
        return (Addon.category_id == category_id, Addon.subcategory_id.is_(None))
    return (
        Addon.restaurant_id == restaurant_id,
        Addon.category_id.is_(None),
        Addon.subcategory_id.is_(None),
    )


async def _references_owned(db: AsyncSession, restaurant_id: str, category_id=None, subcategory_id=None) -> bool:
    if category_id is not None and not await get_category(db, category_id, restaurant_id):
        return False
    if subcategory_id is not None and not await get_subcategory(db, subcategory_id, restaurant_id):
        return False
    return True


async def create_addon(db: AsyncSession, restaurant_id: str, addon):
    data = addon.model_dump(mode="json")
    if not await _references_owned(db, restaurant_id, data.get("category_id"), data.get("subcategory_id")):
        return None

    new_addon = Addon(
        **data,
        restaurant_id=restaurant_id,
        order=await next_order(
            db, Addon, *_order_scope(restaurant_id, data.get("category_id"), data.get("subcategory_id"))
        ),
    )
    db.add(new_addon)
    await db.commit()
    await db.refresh(new_addon)
    return new_addon


async def get_addons(db: AsyncSession, restaurant_id: str, category_id: int = None):
    query = select(Addon).where(Addon.restaurant_id == restaurant_id)
    if category_id is not None:
        query = query.where(Addon.category_id == category_id)
    result = await db.execute(query.order_by(Addon.order.asc(), Addon.id.asc()))
    return result.scalars().all()


async def get_addon(db: AsyncSession, addon_id: int, restaurant_id: str):
    result = await db.execute(
        select(Addon).where(Addon.id == addon_id, Addon.restaurant_id == restaurant_id)
    )
    return result.scalar_one_or_none()


async def update_addon(db: AsyncSession, addon_id: int, restaurant_id: str, updates):
    addon = await get_addon(db, addon_id, restaurant_id)
    if not addon:
        return None

    update_data = updates.model_dump(exclude_unset=True, mode="json")
    if not await _references_owned(
        db, restaurant_id, update_data.get("category_id"), update_data.get("subcategory_id")
    ):
        return None

    for key, value in update_data.items():
        setattr(addon, key, value)

    await db.commit()
    await db.refresh(addon)
    return addon


async def set_addon_image(db: AsyncSession, addon, image_path: str):
    previous = addon.image_path
    addon.image_path = image_path
    await db.commit()
    await db.refresh(addon)
    return previous


async def delete_addon(db: AsyncSession, addon_id: int, restaurant_id: str):
    addon = await get_addon(db, addon_id, restaurant_id)
    if addon:
        await db.delete(addon)
        await db.commit()
    return addon


async def reorder_addon(db: AsyncSession, addon_id: int, restaurant_id: str, direction: str):
    addon = await get_addon(db, addon_id, restaurant_id)
    if not addon:
        return None
    await swap_with_neighbour(
        db, Addon, addon, direction,
        Addon.restaurant_id == restaurant_id,
        *_order_scope(restaurant_id, addon.category_id, addon.subcategory_id),
    )
    return addon


async def bulk_order_addons(db: AsyncSession, restaurant_id: str, updates):
    return await apply_bulk_order(db, Addon, restaurant_id, updates)
