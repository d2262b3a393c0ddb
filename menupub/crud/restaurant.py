from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from menupub.models.restaurant import Restaurant
from menupub.models.menu import MenuItem
from menupub.models.user import User


async def get_restaurant(db: AsyncSession, restaurant_id: str):
    return await db.get(Restaurant, restaurant_id)


async def get_restaurant_by_slug(db: AsyncSession, slug: str, active_only: bool = True):
    query = select(Restaurant).where(Restaurant.slug == slug)
    if active_only:
        query = query.where(Restaurant.is_active == True)
    result = await db.execute(query)
    return result.scalar_one_or_none()


async def get_restaurant_for_owner(db: AsyncSession, owner_id: str):
    result = await db.execute(
        select(Restaurant).where(Restaurant.owner_id == owner_id).order_by(Restaurant.created_at.asc()).limit(1)
    )
    return result.scalars().first()


async def slug_exists(db: AsyncSession, slug: str) -> bool:
    result = await db.execute(select(Restaurant.id).where(Restaurant.slug == slug))
    return result.first() is not None


async def create_restaurant_with_owner(
    db: AsyncSession,
    *,
    name: str,
    slug: str,
    email: str,
    phone: str,
    password_hash: str,
):
    """Sign-up: the owner account and its restaurant are created together"""
    owner = User(email=email.strip().lower(), password_hash=password_hash)
    db.add(owner)
    await db.flush()

    restaurant = Restaurant(
        name=name.strip(),
        slug=slug,
        email=owner.email,
        phone=(phone or "").strip(),
        owner_id=owner.id,
    )
    db.add(restaurant)
    await db.commit()
    await db.refresh(owner)
    await db.refresh(restaurant)
    return owner, restaurant


async def update_restaurant(db: AsyncSession, restaurant: Restaurant, updates):
    for key, value in updates.model_dump(exclude_unset=True).items():
        if key == "name" and not (value or "").strip():
            continue
        setattr(restaurant, key, value)
    await db.commit()
    await db.refresh(restaurant)
    return restaurant


async def set_template(db: AsyncSession, restaurant: Restaurant, template: str):
    restaurant.template = template
    await db.commit()
    await db.refresh(restaurant)
    return restaurant


async def mark_published(db: AsyncSession, restaurant: Restaurant, template: str):
    restaurant.has_completed_onboarding = True
    restaurant.template = template
    await db.commit()
    await db.refresh(restaurant)
    return restaurant


async def get_restaurants_with_item_counts(db: AsyncSession):
    counts = (
        select(MenuItem.restaurant_id, func.count(MenuItem.id).label("item_count"))
        .group_by(MenuItem.restaurant_id)
        .subquery()
    )
    result = await db.execute(
        select(Restaurant, func.coalesce(counts.c.item_count, 0))
        .outerjoin(counts, counts.c.restaurant_id == Restaurant.id)
        .order_by(Restaurant.name.asc())
    )
    return result.all()
