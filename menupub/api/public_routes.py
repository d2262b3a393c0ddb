import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from menupub.core.config import app_config
from menupub.core.constants import MenuTemplate, parse_language
from menupub.crud import restaurant as restaurant_crud
from menupub.db import get_db
from menupub.schemas.restaurant import CategoryTab, PublicMenu, RestaurantBranding
from menupub.services.i18n import Translator
from menupub.services.menu import MenuDataController, MenuDataProvider, get_menu_cache, resolve_field

log = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

router = APIRouter()


async def _load_controller(db: AsyncSession, restaurant, language) -> MenuDataController:
    controller = MenuDataController(
        MenuDataProvider(db),
        get_menu_cache(),
        ttl_ms=app_config.menu_cache_ttl_ms,
    )
    await controller.load(restaurant.id, language)
    return controller


def _tabs(controller: MenuDataController, language):
    return [
        CategoryTab(
            id=category.id,
            title=resolve_field(category, "title", language),
            text=resolve_field(category, "text", language),
        )
        for category in controller.categories
    ]


@router.get("/api/menus/{slug}", response_model=PublicMenu, tags=["public-menu"])
async def get_public_menu(
    slug: str,
    lang: Optional[str] = None,
    category: Optional[int] = Query(None, description="Tab index, 0 = first category"),
    db: AsyncSession = Depends(get_db),
):
    restaurant = await restaurant_crud.get_restaurant_by_slug(db, slug)
    if not restaurant:
        raise HTTPException(status_code=404, detail="Restaurant not found")

    language = parse_language(lang)
    controller = await _load_controller(db, restaurant, language)
    if controller.error:
        raise HTTPException(status_code=503, detail=controller.error)

    if category is not None:
        try:
            controller.select_tab(category)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

    return PublicMenu(
        restaurant=RestaurantBranding.model_validate(restaurant),
        language=language.value,
        categories=_tabs(controller, language),
        active_tab=controller.active_tab,
        sections=controller.sections(language),
    )


# Catch-all on a single path segment: include this router last
@router.get("/{slug}", response_class=HTMLResponse, tags=["public-menu"])
async def render_public_menu(
    request: Request,
    slug: str,
    lang: Optional[str] = None,
    category: Optional[int] = None,
    preview: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    restaurant = await restaurant_crud.get_restaurant_by_slug(db, slug)
    if not restaurant:
        raise HTTPException(status_code=404, detail="Restaurant not found")

    language = parse_language(lang)
    template = restaurant.template
    if preview in {t.value for t in MenuTemplate}:
        template = preview

    controller = await _load_controller(db, restaurant, language)
    if category is not None and not controller.error:
        try:
            controller.select_tab(category)
        except ValueError:
            log.debug("ignoring out of range tab: slug=%s category=%s", slug, category)

    translator = Translator(language)
    return templates.TemplateResponse(
        request,
        "menu/public_menu.html",
        {
            "restaurant": restaurant,
            "template": template,
            "language": language.value,
            "tabs": _tabs(controller, language),
            "active_tab": controller.active_tab,
            "sections": controller.sections(language),
            "error": controller.error,
            "empty_label": translator.t("menu.empty"),
        },
        status_code=503 if controller.error else 200,
    )
