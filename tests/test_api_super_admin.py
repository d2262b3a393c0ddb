# tests/test_api_super_admin.py
"""
Super-admin endpoints: 3D model assignment and the restaurant list.
"""
import pytest
from fastapi.testclient import TestClient

from conftest import build_menu, signup

ADMIN_EMAIL = "ops@menupub.fr"
ADMIN_PASSWORD = "opsecret"


@pytest.fixture()
def super_client(app, monkeypatch):
    # Startup seeds the account from these variables
    monkeypatch.setenv("SUPER_ADMIN_EMAIL", ADMIN_EMAIL)
    monkeypatch.setenv("SUPER_ADMIN_PASSWORD", ADMIN_PASSWORD)
    with TestClient(app) as c:
        yield c


def _login_admin(client):
    client.post("/auth/logout")
    resp = client.post("/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    assert resp.json()["is_super_admin"] is True
    assert resp.json()["restaurant_id"] is None


def _seed_restaurant_with_photo(client):
    signup(client)
    build_menu(client)
    items = client.get("/api/admin/menu-items/").json()
    client.put(f"/api/admin/menu-items/{items[0]['id']}", json={"image_path": "https://img.example.org/steak.jpg"})
    return items[0]


class TestAccess:

    def test_anonymous(self, super_client):
        assert super_client.get("/api/super-admin/restaurants").status_code == 401

    def test_owner_forbidden(self, super_client):
        signup(super_client)
        assert super_client.get("/api/super-admin/restaurants").status_code == 403
        assert super_client.get("/api/super-admin/3d-models").status_code == 403

    def test_admin_has_no_restaurant(self, super_client):
        _login_admin(super_client)
        assert super_client.get("/api/admin/categories/").status_code == 404


class TestModels:

    def test_items_grouped_by_restaurant(self, super_client):
        item = _seed_restaurant_with_photo(super_client)
        restaurant_id = item["restaurant_id"]
        _login_admin(super_client)

        resp = super_client.get("/api/super-admin/3d-models")
        assert resp.status_code == 200
        groups = resp.json()
        assert list(groups) == [restaurant_id]
        assert groups[restaurant_id]["restaurant_name"] == "Chez Léon"
        assert [i["id"] for i in groups[restaurant_id]["items"]] == [item["id"]]

    def test_assign_and_clear_model(self, super_client):
        item = _seed_restaurant_with_photo(super_client)
        _login_admin(super_client)

        url = "https://models.example.org/steak.glb"
        resp = super_client.patch(f"/api/super-admin/3d-models/{item['id']}", json={"model_3d_url": f"  {url} "})
        assert resp.status_code == 200
        assert resp.json()["model_3d_url"] == url

        resp = super_client.patch(f"/api/super-admin/3d-models/{item['id']}", json={"model_3d_url": ""})
        assert resp.json()["model_3d_url"] is None

        assert super_client.patch("/api/super-admin/3d-models/9999", json={"model_3d_url": url}).status_code == 404

    def test_model_shows_on_public_menu(self, super_client):
        item = _seed_restaurant_with_photo(super_client)
        _login_admin(super_client)
        super_client.patch(
            f"/api/super-admin/3d-models/{item['id']}",
            json={"model_3d_url": "https://models.example.org/steak.glb"},
        )

        sections = super_client.get("/api/menus/chez-l-on").json()["sections"]
        steak = sections[0]["items"][0]
        assert steak["has_3d"] is True
        assert steak["model_3d_primary_url"] == "https://models.example.org/steak.glb"


class TestRestaurants:

    def test_item_counts(self, super_client):
        signup(super_client)
        build_menu(super_client)
        super_client.post("/auth/logout")
        signup(super_client, name="Le Zinc", email="owner@zinc.fr")
        _login_admin(super_client)

        rows = super_client.get("/api/super-admin/restaurants").json()
        assert [(r["name"], r["item_count"]) for r in rows] == [("Chez Léon", 3), ("Le Zinc", 0)]
