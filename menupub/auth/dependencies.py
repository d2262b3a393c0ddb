# auth/dependencies.py
import asyncio
import logging

from fastapi import Request, HTTPException, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from menupub.core.config import app_config
from menupub.crud import restaurant as restaurant_crud
from menupub.crud import user as user_crud
from menupub.db import get_db
from menupub.models.user import User

log = logging.getLogger(__name__)


async def get_current_user(request: Request, db: AsyncSession = Depends(get_db)):
    user_id = request.session.get("user_id")
    if not user_id:
        raise HTTPException(status_code=401, detail="Not authenticated")

    # A slow store counts as "not authenticated" rather than hanging the request
    try:
        user = await asyncio.wait_for(
            user_crud.get_user(db, user_id),
            timeout=app_config.auth_check_timeout_seconds,
        )
    except asyncio.TimeoutError:
        log.warning("session check timed out: user=%s", user_id)
        raise HTTPException(status_code=401, detail="Not authenticated")

    if not user or not user.is_active:
        request.session.clear()
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user


async def get_current_restaurant(
    request: Request,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    restaurant = await restaurant_crud.get_restaurant_for_owner(db, user.id)
    if not restaurant:
        raise HTTPException(status_code=404, detail="No restaurant found for this user")
    request.state.restaurant_id = restaurant.id
    return restaurant


async def get_current_super_admin(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    if not await user_crud.is_super_admin(db, user.id):
        raise HTTPException(status_code=403, detail="Super admin access only")
    return user
