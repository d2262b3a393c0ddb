from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from menupub.crud.menu.ordering import next_order, swap_with_neighbour, apply_bulk_order
from menupub.models.menu import Category
from menupub.schemas.menu import CategoryCreate, CategoryUpdate


async def create_category(db: AsyncSession, restaurant_id: str, category: CategoryCreate):
    """Create a category at the end of the restaurant's tab list"""
    new_category = Category(
        **category.model_dump(mode="json"),
        restaurant_id=restaurant_id,
        order=await next_order(db, Category, Category.restaurant_id == restaurant_id),
    )
    db.add(new_category)
    await db.commit()
    await db.refresh(new_category)
    return new_category


async def get_categories(db: AsyncSession, restaurant_id: str):
    """Get all categories for a restaurant in tab order"""
    result = await db.execute(
        select(Category)
        .where(Category.restaurant_id == restaurant_id)
        .order_by(Category.order.asc(), Category.id.asc())
    )
    return result.scalars().all()


async def get_category(db: AsyncSession, category_id: int, restaurant_id: str):
    """Get a category only if it belongs to the restaurant"""
    result = await db.execute(
        select(Category).where(Category.id == category_id, Category.restaurant_id == restaurant_id)
    )
    return result.scalar_one_or_none()


async def update_category(db: AsyncSession, category_id: int, restaurant_id: str, updates: CategoryUpdate):
    category = await get_category(db, category_id, restaurant_id)
    if not category:
        return None

    for key, value in updates.model_dump(exclude_unset=True, mode="json").items():
        setattr(category, key, value)

    await db.commit()
    await db.refresh(category)
    return category


async def delete_category(db: AsyncSession, category_id: int, restaurant_id: str):
    category = await get_category(db, category_id, restaurant_id)
    if category:
        await db.delete(category)
        await db.commit()
    return category


async def reorder_category(db: AsyncSession, category_id: int, restaurant_id: str, direction: str):
    category = await get_category(db, category_id, restaurant_id)
    if not category:
        return None
    await swap_with_neighbour(db, Category, category, direction, Category.restaurant_id == restaurant_id)
    return category


async def bulk_order_categories(db: AsyncSession, restaurant_id: str, updates):
    return await apply_bulk_order(db, Category, restaurant_id, updates)
