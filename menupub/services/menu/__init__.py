from .localization import parse_language, resolve_field, localized_attr
from .pricing import format_price
from .sections import build_sections, is_general_subcategory
from .provider import MenuDataProvider
from .cache import (
    CacheEntry,
    CachePort,
    InMemoryCachePort,
    get_menu_cache,
    is_stale,
    menu_cache,
    menu_cache_key,
)
from .controller import MenuDataController, TabState
from .notifier import MenuChange, MenuChangeBus, menu_change_bus

__all__ = [
    "parse_language",
    "resolve_field",
    "localized_attr",
    "format_price",
    "build_sections",
    "is_general_subcategory",
    "MenuDataProvider",
    "CacheEntry",
    "CachePort",
    "InMemoryCachePort",
    "get_menu_cache",
    "is_stale",
    "menu_cache",
    "menu_cache_key",
    "MenuDataController",
    "TabState",
    "MenuChange",
    "MenuChangeBus",
    "menu_change_bus",
]
