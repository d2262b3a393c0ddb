"""
Menu Data Provider

Loads every active category of a restaurant together with its
subcategories, items and add-ons, keyed by category id in tab order.
"""
import logging
from typing import Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from menupub.core.constants import RecordStatus
from menupub.models.menu import Category, Subcategory, MenuItem, Addon
from menupub.schemas.menu import (
    AddonRead,
    CategoryRead,
    MenuBundle,
    MenuItemRead,
    SubcategoryRead,
)

log = logging.getLogger(__name__)

ACTIVE = RecordStatus.active.value


class MenuDataProvider:
    """Reads tenant menu records for the assembly engine"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_active_categories(self, restaurant_id: str):
        result = await self.db.execute(
            select(Category)
            .where(Category.restaurant_id == restaurant_id, Category.status == ACTIVE)
            .order_by(Category.order.asc(), Category.id.asc())
        )
        return result.scalars().all()

    async def _fetch_all(self, model, restaurant_id: str):
        result = await self.db.execute(
            select(model)
            .where(model.restaurant_id == restaurant_id)
            .order_by(model.order.asc(), model.id.asc())
        )
        return result.scalars().all()

    async def get_all_menu_data(self, restaurant_id: Optional[str]) -> Dict[int, MenuBundle]:
        if not restaurant_id:
            return {}

        # One AsyncSession cannot run statements concurrently
        categories = await self.get_active_categories(restaurant_id)
        subcategories = await self._fetch_all(Subcategory, restaurant_id)
        menu_items = await self._fetch_all(MenuItem, restaurant_id)
        addons = await self._fetch_all(Addon, restaurant_id)

        menu_data: Dict[int, MenuBundle] = {}
        for category in categories:
            category_subcats = [
                s for s in subcategories
                if s.category_id == category.id and s.status == ACTIVE
            ]
            subcat_ids = {s.id for s in category_subcats}

            category_items = [
                item for item in menu_items
                if item.subcategory_id in subcat_ids and item.status == ACTIVE
            ]
            category_addons = [
                addon for addon in addons
                if (addon.category_id == category.id or addon.subcategory_id in subcat_ids)
                and addon.status == ACTIVE
            ]

            menu_data[category.id] = MenuBundle(
                category=CategoryRead.model_validate(category),
                subcategories=[SubcategoryRead.model_validate(s) for s in category_subcats],
                menu_items=[MenuItemRead.model_validate(i) for i in category_items],
                addons=[AddonRead.model_validate(a) for a in category_addons],
            )

        log.info(
            "menu data loaded: restaurant=%s categories=%s items=%s",
            restaurant_id, len(menu_data), len(menu_items),
        )
        return menu_data

    async def get_menu_by_category(self, category_id: int, restaurant_id: str) -> Optional[MenuBundle]:
        """Bundle for a single category, active or not (admin preview)."""
        result = await self.db.execute(
            select(Category).where(Category.id == category_id, Category.restaurant_id == restaurant_id)
        )
        category = result.scalar_one_or_none()
        if not category:
            return None

        sub_res = await self.db.execute(
            select(Subcategory)
            .where(Subcategory.category_id == category_id, Subcategory.status == ACTIVE)
            .order_by(Subcategory.order.asc(), Subcategory.id.asc())
        )
        subcategories = sub_res.scalars().all()
        subcat_ids = [s.id for s in subcategories]

        menu_items = []
        if subcat_ids:
            item_res = await self.db.execute(
                select(MenuItem)
                .where(MenuItem.subcategory_id.in_(subcat_ids), MenuItem.status == ACTIVE)
                .order_by(MenuItem.order.asc(), MenuItem.id.asc())
            )
            menu_items = item_res.scalars().all()

        addon_query = select(Addon).where(Addon.restaurant_id == restaurant_id, Addon.status == ACTIVE)
        if subcat_ids:
            addon_query = addon_query.where(
                (Addon.category_id == category_id) | (Addon.subcategory_id.in_(subcat_ids))
            )
        else:
            addon_query = addon_query.where(Addon.category_id == category_id)
        addon_res = await self.db.execute(addon_query.order_by(Addon.order.asc(), Addon.id.asc()))

        return MenuBundle(
            category=CategoryRead.model_validate(category),
            subcategories=[SubcategoryRead.model_validate(s) for s in subcategories],
            menu_items=[MenuItemRead.model_validate(i) for i in menu_items],
            addons=[AddonRead.model_validate(a) for a in addon_res.scalars().all()],
        )
