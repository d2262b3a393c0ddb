from typing import Iterable

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from menupub.schemas.menu import OrderUpdate


async def next_order(db: AsyncSession, model, *criteria) -> int:
    """Next free `order` value within the rows matching `criteria`"""
    result = await db.execute(select(func.max(model.order)).where(*criteria))
    return (result.scalar() or 0) + 1


async def swap_with_neighbour(db: AsyncSession, model, record, direction: str, *criteria) -> bool:
    """
    Swap `record.order` with the row just above/below it within `criteria`.
    No-op at either end of the list.
    """
    result = await db.execute(
        select(model).where(*criteria).order_by(model.order.asc(), model.id.asc())
    )
    rows = result.scalars().all()
    if len(rows) < 2:
        return False

    current_index = next((i for i, row in enumerate(rows) if row.id == record.id), -1)
    if current_index == -1:
        return False

    target_index = current_index - 1 if direction == "up" else current_index + 1
    if target_index < 0 or target_index >= len(rows):
        return False

    target = rows[target_index]
    record.order, target.order = target.order, record.order
    await db.commit()
    return True


async def apply_bulk_order(db: AsyncSession, model, restaurant_id: str, updates: Iterable[OrderUpdate]) -> int:
    """Apply explicit order values; rows of other restaurants are ignored"""
    updates = list(updates)
    if not updates:
        return 0

    result = await db.execute(
        select(model).where(
            model.restaurant_id == restaurant_id,
            model.id.in_([u.id for u in updates]),
        )
    )
    rows = {row.id: row for row in result.scalars().all()}

    applied = 0
    for update in updates:
        row = rows.get(update.id)
        if row is None:
            continue
        row.order = update.order
        applied += 1

    await db.commit()
    return applied
