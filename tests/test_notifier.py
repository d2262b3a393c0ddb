# tests/test_notifier.py
"""
Menu change bus and its wiring to SQLAlchemy commits.
"""
from conftest import signup

from menupub.services.menu import MenuChange, MenuChangeBus, menu_change_bus


class TestMenuChangeBus:

    def test_publish_reaches_subscribers(self):
        bus = MenuChangeBus()
        seen = []
        bus.subscribe(seen.append)

        change = MenuChange("r-1", "menu_items", "update")
        bus.publish(change)
        assert seen == [change]

    def test_unsubscribe(self):
        bus = MenuChangeBus()
        seen = []
        unsubscribe = bus.subscribe(seen.append)
        unsubscribe()
        unsubscribe()

        bus.publish(MenuChange("r-1", "categories", "insert"))
        assert seen == []
        assert bus.subscriber_count == 0

    def test_failing_subscriber_does_not_block_others(self):
        bus = MenuChangeBus()
        seen = []

        def broken(change):
            raise RuntimeError("boom")

        bus.subscribe(broken)
        bus.subscribe(seen.append)
        bus.publish(MenuChange("r-1", "addons", "delete"))
        assert len(seen) == 1


class TestCommitNotifications:

    def test_menu_writes_publish_after_commit(self, client):
        owner = signup(client)
        seen = []
        unsubscribe = menu_change_bus.subscribe(seen.append)
        try:
            category = client.post("/api/admin/categories/", json={"title": "Vins"}).json()
            client.put(f"/api/admin/categories/{category['id']}", json={"title": "Vins rouges"})
            client.delete(f"/api/admin/categories/{category['id']}")
        finally:
            unsubscribe()

        assert [(c.table, c.event) for c in seen] == [
            ("categories", "insert"),
            ("categories", "update"),
            ("categories", "delete"),
        ]
        assert {c.restaurant_id for c in seen} == {owner["restaurant_id"]}

    def test_non_menu_writes_are_silent(self, client):
        seen = []
        unsubscribe = menu_change_bus.subscribe(seen.append)
        try:
            signup(client)
            client.patch("/api/admin/restaurant/", json={"primary_color": "#aa0000"})
        finally:
            unsubscribe()
        assert seen == []
