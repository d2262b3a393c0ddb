# tests/test_controller.py
"""
Menu controller: cache use, load failures and the tab state machine.

Covers:
  - Fresh cache entry is used without fetching
  - 6-minute-old entry triggers a fetch and is rewritten
  - Corrupt cache payload is dropped and refetched
  - Fetch failure -> localized error, no sections
  - NoCategorySelected until categories load, then tab 0
  - select_tab() bounds
  - invalidate() drops the cache entry and resets state
"""
import asyncio

import pytest

from menupub.schemas.menu import MenuBundle
from menupub.services.menu import InMemoryCachePort, MenuDataController, TabState, menu_cache_key
from menupub.services.menu.cache import serialize_menu_data

RESTAURANT_ID = "r-1"


class FakeClock:
    def __init__(self, now=1_700_000_000_000):
        self.now = now

    def __call__(self):
        return self.now


class FakeProvider:
    def __init__(self, menu_data=None, error=None):
        self.menu_data = menu_data or {}
        self.error = error
        self.calls = 0

    async def get_all_menu_data(self, restaurant_id):
        self.calls += 1
        if self.error:
            raise self.error
        return self.menu_data


def _bundle(category_id, title, items=()):
    return MenuBundle.model_validate({
        "category": {"id": category_id, "title": title, "title_en": f"{title} (en)"},
        "subcategories": [{"id": category_id * 10, "category_id": category_id, "title": "General"}],
        "menu_items": [
            {"id": item_id, "subcategory_id": category_id * 10, "title": f"Plat {item_id}", "price": 5}
            for item_id in items
        ],
        "addons": [],
    })


MENU = {1: _bundle(1, "Entrées", items=[11, 12]), 2: _bundle(2, "Desserts", items=[21])}


def _controller(provider, clock=None, cache=None):
    clock = clock or FakeClock()
    cache = cache or InMemoryCachePort(clock)
    return MenuDataController(provider, cache, clock=clock), cache, clock


class TestLoading:

    def test_fetches_and_caches(self):
        provider = FakeProvider(MENU)
        controller, cache, _ = _controller(provider)

        assert asyncio.run(controller.load(RESTAURANT_ID)) is True
        assert provider.calls == 1
        assert cache.get(menu_cache_key(RESTAURANT_ID)) is not None
        assert [c.id for c in controller.categories] == [1, 2]

    def test_fresh_cache_skips_fetch(self):
        clock = FakeClock()
        cache = InMemoryCachePort(clock)
        cache.set(menu_cache_key(RESTAURANT_ID), serialize_menu_data(MENU))
        clock.now += 60 * 1000

        provider = FakeProvider({})
        controller, _, _ = _controller(provider, clock, cache)
        asyncio.run(controller.load(RESTAURANT_ID))

        assert provider.calls == 0
        assert [c.title for c in controller.categories] == ["Entrées", "Desserts"]

    def test_stale_cache_triggers_fetch(self):
        clock = FakeClock()
        cache = InMemoryCachePort(clock)
        cache.set(menu_cache_key(RESTAURANT_ID), serialize_menu_data({9: _bundle(9, "Old")}))
        clock.now += 6 * 60 * 1000

        provider = FakeProvider(MENU)
        controller, _, _ = _controller(provider, clock, cache)
        asyncio.run(controller.load(RESTAURANT_ID))

        assert provider.calls == 1
        assert [c.id for c in controller.categories] == [1, 2]
        assert cache.get(menu_cache_key(RESTAURANT_ID)).timestamp == clock.now

    def test_corrupt_cache_refetched(self):
        clock = FakeClock()
        cache = InMemoryCachePort(clock)
        cache.set(menu_cache_key(RESTAURANT_ID), "{broken")

        provider = FakeProvider(MENU)
        controller, _, _ = _controller(provider, clock, cache)
        asyncio.run(controller.load(RESTAURANT_ID))

        assert provider.calls == 1
        assert len(controller.categories) == 2

    def test_failure_sets_localized_error(self):
        provider = FakeProvider(error=RuntimeError("db down"))
        controller, cache, _ = _controller(provider)

        assert asyncio.run(controller.load(RESTAURANT_ID, "en")) is False
        assert controller.error == "Failed to load menu data"
        assert controller.loading is False
        assert controller.sections("en") == []
        assert controller.state is TabState.no_category_selected
        assert cache.get(menu_cache_key(RESTAURANT_ID)) is None

    def test_failure_message_defaults_to_french(self):
        controller, _, _ = _controller(FakeProvider(error=RuntimeError("boom")))
        asyncio.run(controller.load(RESTAURANT_ID))
        assert controller.error == "Impossible de charger le menu"


class TestTabs:

    def test_initial_state(self):
        controller, _, _ = _controller(FakeProvider(MENU))
        assert controller.state is TabState.no_category_selected
        assert controller.current_category is None
        assert controller.sections() == []

    def test_first_tab_selected_after_load(self):
        controller, _, _ = _controller(FakeProvider(MENU))
        asyncio.run(controller.load(RESTAURANT_ID))

        assert controller.state is TabState.category_selected
        assert controller.active_tab == 0
        assert [i.id for i in controller.sections()[0].items] == [11, 12]

    def test_select_tab(self):
        controller, _, _ = _controller(FakeProvider(MENU))
        asyncio.run(controller.load(RESTAURANT_ID))

        category = controller.select_tab(1)
        assert category.id == 2
        assert [i.id for i in controller.sections()[0].items] == [21]

    @pytest.mark.parametrize("index", [-1, 2, 10])
    def test_select_tab_out_of_range(self, index):
        controller, _, _ = _controller(FakeProvider(MENU))
        asyncio.run(controller.load(RESTAURANT_ID))
        with pytest.raises(ValueError):
            controller.select_tab(index)
        assert controller.active_tab == 0

    def test_select_tab_before_load(self):
        controller, _, _ = _controller(FakeProvider(MENU))
        with pytest.raises(ValueError):
            controller.select_tab(0)

    def test_no_categories_stays_unselected(self):
        controller, _, _ = _controller(FakeProvider({}))
        assert asyncio.run(controller.load(RESTAURANT_ID)) is True
        assert controller.state is TabState.no_category_selected

    def test_sections_use_translated_labels(self):
        menu = {1: MenuBundle.model_validate({
            "category": {"id": 1, "title": "Plats"},
            "subcategories": [{"id": 5, "category_id": 1, "title": "General"}],
            "menu_items": [{"id": 1, "subcategory_id": 5, "title": "Homard", "is_special": True}],
            "addons": [{"id": 1, "title": "Pain"}],
        })}
        controller, _, _ = _controller(FakeProvider(menu))
        asyncio.run(controller.load(RESTAURANT_ID))

        assert [s.title for s in controller.sections("en")] == ["Our specials", "Supplements"]
        assert [s.title for s in controller.sections("fr")] == ["Nos spécialités", "Suppléments"]


class TestInvalidate:

    def test_invalidate_drops_entry_and_state(self):
        provider = FakeProvider(MENU)
        controller, cache, _ = _controller(provider)
        asyncio.run(controller.load(RESTAURANT_ID))

        controller.invalidate()
        assert cache.get(menu_cache_key(RESTAURANT_ID)) is None
        assert controller.state is TabState.no_category_selected
        assert controller.menu_data == {}

        asyncio.run(controller.load(RESTAURANT_ID))
        assert provider.calls == 2
        assert controller.active_tab == 0
