from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from menupub.crud.menu.category import get_category
from menupub.crud.menu.ordering import next_order, swap_with_neighbour, apply_bulk_order
from menupub.models.menu import Subcategory
from menupub.schemas.menu import SubcategoryCreate, SubcategoryUpdate


async def create_subcategory(db: AsyncSession, restaurant_id: str, subcategory: SubcategoryCreate):
    """Create a subcategory; None when the parent category is not the restaurant's"""
    if not await get_category(db, subcategory.category_id, restaurant_id):
        return None

    new_subcategory = Subcategory(
        **subcategory.model_dump(mode="json"),
        restaurant_id=restaurant_id,
        order=await next_order(db, Subcategory, Subcategory.category_id == subcategory.category_id),
    )
    db.add(new_subcategory)
    await db.commit()
    await db.refresh(new_subcategory)
    return new_subcategory


async def get_subcategories(db: AsyncSession, restaurant_id: str, category_id: int = None):
    query = select(Subcategory).where(Subcategory.restaurant_id == restaurant_id)
    if category_id is not None:
        query = query.where(Subcategory.category_id == category_id)
    result = await db.execute(query.order_by(Subcategory.order.asc(), Subcategory.id.asc()))
    return result.scalars().all()


async def get_subcategory(db: AsyncSession, subcategory_id: int, restaurant_id: str):
    result = await db.execute(
        select(Subcategory).where(Subcategory.id == subcategory_id, Subcategory.restaurant_id == restaurant_id)
    )
    return result.scalar_one_or_none()


async def update_subcategory(db: AsyncSession, subcategory_id: int, restaurant_id: str, updates: SubcategoryUpdate):
    subcategory = await get_subcategory(db, subcategory_id, restaurant_id)
    if not subcategory:
        return None

    update_data = updates.model_dump(exclude_unset=True, mode="json")
    if update_data.get("category_id") is not None:
        if not await get_category(db, update_data["category_id"], restaurant_id):
            return None

    for key, value in update_data.items():
        setattr(subcategory, key, value)

    await db.commit()
    await db.refresh(subcategory)
    return subcategory


async def delete_subcategory(db: AsyncSession, subcategory_id: int, restaurant_id: str):
    subcategory = await get_subcategory(db, subcategory_id, restaurant_id)
    if subcategory:
        await db.delete(subcategory)
        await db.commit()
    return subcategory


async def reorder_subcategory(db: AsyncSession, subcategory_id: int, restaurant_id: str, direction: str):
    subcategory = await get_subcategory(db, subcategory_id, restaurant_id)
    if not subcategory:
        return None
    await swap_with_neighbour(
        db, Subcategory, subcategory, direction,
        Subcategory.category_id == subcategory.category_id,
    )
    return subcategory


async def bulk_order_subcategories(db: AsyncSession, restaurant_id: str, updates):
    return await apply_bulk_order(db, Subcategory, restaurant_id, updates)
