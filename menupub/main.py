import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware
from sqlalchemy.orm import configure_mappers

import menupub.models  # registers all models via models/__init__.py
from menupub.api import admin_restaurant_routes, auth_routes, public_routes, super_admin_routes
from menupub.api.menu_routes import (
    admin_addon_routes,
    admin_category_routes,
    admin_menu_item_routes,
    admin_subcategory_routes,
)
from menupub.auth.passwords import hash_password
from menupub.core.config import app_config
from menupub.crud import user as user_crud
from menupub.db import async_session, create_db_and_tables
from menupub.models.user import User
from menupub.services.menu import MenuChange, menu_cache, menu_cache_key, menu_change_bus

configure_mappers()

logging.basicConfig(
    level=app_config.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)


def invalidate_cached_menu(change: MenuChange) -> None:
    if change.restaurant_id:
        menu_cache.delete(menu_cache_key(change.restaurant_id))


menu_change_bus.subscribe(invalidate_cached_menu)


# Create the FastAPI app
app = FastAPI(
    title="Menu Publishing API",
    version="1.0.0",
    description="Multi-tenant restaurant menus: admin editing, localization and public pages.",
)

# ✅ Session middleware (cookie login for restaurant owners and super admins)
app.add_middleware(SessionMiddleware, secret_key=app_config.session_secret)

# ✅ Allow the admin frontend (CORS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def on_startup():
    log.info("🔧 Starting DB setup...")
    await create_db_and_tables()
    log.info("✅ DB schema created.")

    # ⬇️ Seed a super admin when credentials are provided
    email = os.getenv("SUPER_ADMIN_EMAIL")
    password = os.getenv("SUPER_ADMIN_PASSWORD")
    if not email or not password:
        return

    async with async_session() as db:
        user = await user_crud.get_user_by_email(db, email)
        if not user:
            user = User(email=email.strip().lower(), password_hash=hash_password(password))
            db.add(user)
            await db.commit()
            log.info("👤 Created super admin account: %s", user.email)
        await user_crud.grant_role(db, user.id)


@app.get("/health")
async def health():
    return {"status": "ok"}


# ✅ Routers (public catch-all last)
app.include_router(auth_routes.router)
app.include_router(admin_restaurant_routes.router)
app.include_router(admin_category_routes.router)
app.include_router(admin_subcategory_routes.router)
app.include_router(admin_menu_item_routes.router)
app.include_router(admin_addon_routes.router)
app.include_router(super_admin_routes.router)
app.include_router(public_routes.router)
