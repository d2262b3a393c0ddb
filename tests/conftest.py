# tests/conftest.py
import asyncio
import os
import tempfile
from pathlib import Path

import pytest

# The engine is built at import time, so point it at a scratch database first
_TMP_DIR = tempfile.mkdtemp(prefix="menupub-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{Path(_TMP_DIR) / 'test.db'}"
os.environ.setdefault("SESSION_SECRET", "test-session-secret")
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")
for _key in ("SPACES_KEY", "SPACES_SECRET", "SPACES_BUCKET", "SUPER_ADMIN_EMAIL", "SUPER_ADMIN_PASSWORD"):
    os.environ.pop(_key, None)

from fastapi.testclient import TestClient  # noqa: E402

from menupub.db import drop_db_and_tables  # noqa: E402
from menupub.services.menu import menu_cache  # noqa: E402


@pytest.fixture()
def fresh_db():
    asyncio.run(drop_db_and_tables())
    menu_cache.clear()
    yield
    menu_cache.clear()


@pytest.fixture()
def app(fresh_db):
    from menupub.main import app as fastapi_app
    return fastapi_app


@pytest.fixture()
def client(app):
    # Entering the context runs startup, which recreates the tables
    with TestClient(app) as c:
        yield c


def signup(client, name="Chez Léon", email="owner@chezleon.fr", password="secret1", phone="0102030405"):
    resp = client.post("/auth/signup", json={
        "restaurant_name": name,
        "email": email,
        "phone": phone,
        "password": password,
        "confirm_password": password,
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


def build_menu(client):
    """One category holding a general and a custom subcategory, plus an add-on."""
    category = client.post("/api/admin/categories/", json={"title": "Plats", "title_en": "Mains"}).json()
    general = client.post("/api/admin/subcategories/", json={
        "category_id": category["id"], "title": "General",
    }).json()
    pasta = client.post("/api/admin/subcategories/", json={
        "category_id": category["id"], "title": "Pâtes", "title_en": "Pasta", "text": "Fraîches",
    }).json()

    client.post("/api/admin/menu-items/", json={
        "subcategory_id": general["id"], "title": "Steak frites", "price": 18.5,
    })
    client.post("/api/admin/menu-items/", json={
        "subcategory_id": pasta["id"], "title": "Carbonara", "price": 14,
    })
    client.post("/api/admin/menu-items/", json={
        "subcategory_id": general["id"], "title": "Homard", "price": 42, "is_special": True,
    })
    client.post("/api/admin/addons/", json={
        "category_id": category["id"], "title": "Frites", "title_en": "Fries", "price": 3,
    })
    return {"category": category, "general": general, "pasta": pasta}
