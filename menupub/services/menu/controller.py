"""
Menu Data Controller

Orchestrates what the public menu page needs for one restaurant: loads
the bundles (from the shared cache when fresh), tracks which category tab
is selected and builds that tab's sections on demand.
"""
import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from menupub.core.constants import Language, DEFAULT_LANGUAGE, MENU_CACHE_TTL_MS
from menupub.schemas.menu import CategoryRead, MenuBundle
from menupub.schemas.section import Section
from menupub.services.i18n import Translator
from menupub.services.menu.cache import (
    CachePort,
    deserialize_menu_data,
    is_stale,
    menu_cache_key,
    now_ms,
    serialize_menu_data,
)
from menupub.services.menu.sections import build_sections

log = logging.getLogger(__name__)


class TabState(str, Enum):
    no_category_selected = "NoCategorySelected"
    category_selected = "CategorySelected"


class MenuDataController:
    def __init__(
        self,
        provider,
        cache: CachePort,
        clock: Callable[[], int] = now_ms,
        ttl_ms: int = MENU_CACHE_TTL_MS,
    ):
        self.provider = provider
        self.cache = cache
        self.clock = clock
        self.ttl_ms = ttl_ms

        self.restaurant_id: Optional[str] = None
        self.menu_data: Dict[int, MenuBundle] = {}
        self.categories: List[CategoryRead] = []
        self.active_tab: Optional[int] = None
        self.loading = False
        self.error: Optional[str] = None

    # ----- State

    @property
    def state(self) -> TabState:
        if self.active_tab is None:
            return TabState.no_category_selected
        return TabState.category_selected

    @property
    def current_category(self) -> Optional[CategoryRead]:
        if self.active_tab is None:
            return None
        return self.categories[self.active_tab]

    def select_tab(self, index: int) -> CategoryRead:
        if not self.categories:
            raise ValueError("No categories loaded")
        if index < 0 or index >= len(self.categories):
            raise ValueError(f"Tab index {index} out of range (0-{len(self.categories) - 1})")
        self.active_tab = index
        return self.categories[index]

    def _apply(self, menu_data: Dict[int, MenuBundle]) -> None:
        self.menu_data = menu_data
        self.categories = [bundle.category for bundle in menu_data.values()]
        # First category is selected as soon as the list is known
        self.active_tab = 0 if self.categories else None

    # ----- Loading

    def _read_cache(self, key: str) -> Optional[Dict[int, MenuBundle]]:
        entry = self.cache.get(key)
        if entry is None:
            return None
        if is_stale(entry, self.clock(), self.ttl_ms):
            log.debug("menu cache stale: key=%s age_ms=%s", key, self.clock() - entry.timestamp)
            return None
        try:
            return deserialize_menu_data(entry.value)
        except (TypeError, ValueError):
            log.warning("menu cache corrupt, refetching: key=%s", key)
            self.cache.delete(key)
            return None

    async def load(self, restaurant_id: str, language: Union[Language, str] = DEFAULT_LANGUAGE) -> bool:
        """
        Load all bundles for a restaurant. Returns False when the fetch
        failed; `error` then holds a message for the visitor.
        """
        self.restaurant_id = restaurant_id
        self.loading = True
        self.error = None
        key = menu_cache_key(restaurant_id)

        try:
            menu_data = self._read_cache(key)
            if menu_data is None:
                menu_data = await self.provider.get_all_menu_data(restaurant_id)
                self.cache.set(key, serialize_menu_data(menu_data))
            self._apply(menu_data)
            return True
        except Exception:
            log.exception("Failed to load menu data: restaurant=%s", restaurant_id)
            self.error = Translator(language).t("menu.load_error")
            # Never render from a partial bundle
            self._apply({})
            return False
        finally:
            self.loading = False

    def invalidate(self) -> None:
        """Drop everything held for the current restaurant; call `load` again to refill."""
        if self.restaurant_id is not None:
            self.cache.delete(menu_cache_key(self.restaurant_id))
        self._apply({})

    # ----- Assembly

    def sections(
        self,
        language: Union[Language, str] = DEFAULT_LANGUAGE,
        specials_in_subcategories: bool = False,
    ) -> List[Section]:
        category = self.current_category
        if category is None:
            return []

        bundle = self.menu_data.get(category.id)
        if bundle is None:
            return []

        translator = Translator(language)
        return build_sections(
            bundle,
            language,
            specials_label=translator.t("menu.specials"),
            supplements_label=translator.t("menu.supplements"),
            specials_in_subcategories=specials_in_subcategories,
        )
