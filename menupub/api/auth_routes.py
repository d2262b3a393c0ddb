import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from menupub.auth.dependencies import get_current_user
from menupub.auth.passwords import hash_password, verify_password
from menupub.crud import restaurant as restaurant_crud
from menupub.crud import user as user_crud
from menupub.db import get_db
from menupub.models.user import User
from menupub.schemas.auth import LoginRequest, SessionInfo, SignupRequest
from menupub.utils.tenant import generate_slug

log = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


async def _session_info(db: AsyncSession, user: User) -> SessionInfo:
    restaurant = await restaurant_crud.get_restaurant_for_owner(db, user.id)
    return SessionInfo(
        user_id=user.id,
        email=user.email,
        restaurant_id=restaurant.id if restaurant else None,
        restaurant_slug=restaurant.slug if restaurant else None,
        is_super_admin=await user_crud.is_super_admin(db, user.id),
    )


@router.post("/signup", response_model=SessionInfo, status_code=201)
async def signup(payload: SignupRequest, request: Request, db: AsyncSession = Depends(get_db)):
    if payload.password != payload.confirm_password:
        raise HTTPException(status_code=400, detail="Passwords do not match")

    slug = generate_slug(payload.restaurant_name)
    if not slug:
        raise HTTPException(status_code=400, detail="Restaurant name must contain letters or digits")
    if await restaurant_crud.slug_exists(db, slug):
        raise HTTPException(status_code=409, detail="This restaurant name is already taken")
    if await user_crud.get_user_by_email(db, payload.email):
        raise HTTPException(status_code=409, detail="An account already exists for this email")

    user, restaurant = await restaurant_crud.create_restaurant_with_owner(
        db,
        name=payload.restaurant_name,
        slug=slug,
        email=payload.email,
        phone=payload.phone,
        password_hash=hash_password(payload.password),
    )
    log.info("restaurant signed up: restaurant=%s slug=%s", restaurant.id, slug)

    request.session["user_id"] = user.id
    request.session["restaurant_id"] = restaurant.id
    return await _session_info(db, user)


@router.post("/login", response_model=SessionInfo)
async def login(payload: LoginRequest, request: Request, db: AsyncSession = Depends(get_db)):
    user = await user_crud.get_user_by_email(db, payload.email)
    if not user or not user.is_active or not verify_password(payload.password, user.password_hash):
        log.warning("failed login: email=%s", payload.email)
        raise HTTPException(status_code=401, detail="Invalid email or password")

    info = await _session_info(db, user)
    request.session["user_id"] = user.id
    request.session["restaurant_id"] = info.restaurant_id
    return info


@router.post("/logout")
async def logout(request: Request):
    request.session.clear()
    return {"message": "Logged out"}


@router.get("/me", response_model=SessionInfo)
async def me(db: AsyncSession = Depends(get_db), user: User = Depends(get_current_user)):
    return await _session_info(db, user)
