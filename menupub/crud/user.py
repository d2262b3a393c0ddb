from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from menupub.core.constants import SUPER_ADMIN_ROLE
from menupub.models.user import User, AdminRole


async def get_user(db: AsyncSession, user_id: str):
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_email(db: AsyncSession, email: str):
    result = await db.execute(select(User).where(User.email == email.strip().lower()))
    return result.scalar_one_or_none()


async def is_super_admin(db: AsyncSession, user_id: str) -> bool:
    result = await db.execute(
        select(AdminRole.id).where(AdminRole.user_id == user_id, AdminRole.role == SUPER_ADMIN_ROLE)
    )
    return result.first() is not None


async def grant_role(db: AsyncSession, user_id: str, role: str = SUPER_ADMIN_ROLE):
    result = await db.execute(
        select(AdminRole).where(AdminRole.user_id == user_id, AdminRole.role == role)
    )
    existing = result.scalar_one_or_none()
    if existing:
        return existing

    admin_role = AdminRole(user_id=user_id, role=role)
    db.add(admin_role)
    await db.commit()
    return admin_role
