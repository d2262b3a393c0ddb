# tests/test_api_auth.py
"""
Sign-up, login and session checks.

Covers:
  - Sign-up creates owner + restaurant, derives the slug, logs in
  - Password confirmation / length validation
  - Taken slug -> 409, slug with no letters or digits -> 400
  - Login with bad credentials -> 401
  - Logout clears the session
  - Admin routes require a session
  - Password hashes round-trip and reject wrong passwords
"""
from conftest import signup

from menupub.auth.passwords import hash_password, verify_password
from menupub.utils.tenant import generate_slug


# ── Slugs and password hashing ─────────────────────

class TestHelpers:

    def test_generate_slug(self):
        assert generate_slug("Chez Léon") == "chez-l-on"
        assert generate_slug("  Le Petit   Bistrot!! ") == "le-petit-bistrot"
        assert generate_slug("Café 123") == "caf-123"
        assert generate_slug("***") == ""

    def test_hash_and_verify(self):
        encoded = hash_password("secret1", iterations=1000)
        assert encoded.startswith("pbkdf2_sha256$1000$")
        assert verify_password("secret1", encoded)
        assert not verify_password("secret2", encoded)

    def test_salted(self):
        assert hash_password("secret1", iterations=1000) != hash_password("secret1", iterations=1000)

    def test_malformed_hash_rejected(self):
        assert not verify_password("secret1", "")
        assert not verify_password("secret1", "md5$abc")
        assert not verify_password("secret1", "pbkdf2_sha256$x$y$z")


# ── Sign-up ────────────────────────────────────────

class TestSignup:

    def test_signup_logs_in(self, client):
        info = signup(client)
        assert info["email"] == "owner@chezleon.fr"
        assert info["restaurant_slug"] == "chez-l-on"
        assert info["is_super_admin"] is False

        me = client.get("/auth/me")
        assert me.status_code == 200
        assert me.json()["restaurant_id"] == info["restaurant_id"]

        restaurant = client.get("/api/admin/restaurant/").json()
        assert restaurant["name"] == "Chez Léon"
        assert restaurant["template"] == "template1"
        assert restaurant["has_completed_onboarding"] is False

    def test_password_mismatch(self, client):
        resp = client.post("/auth/signup", json={
            "restaurant_name": "Bistrot",
            "email": "a@b.fr",
            "password": "secret1",
            "confirm_password": "secret2",
        })
        assert resp.status_code == 400

    def test_password_too_short(self, client):
        resp = client.post("/auth/signup", json={
            "restaurant_name": "Bistrot",
            "email": "a@b.fr",
            "password": "abc",
            "confirm_password": "abc",
        })
        assert resp.status_code == 422

    def test_slug_taken(self, client):
        signup(client, name="Le Zinc", email="one@zinc.fr")
        resp = client.post("/auth/signup", json={
            "restaurant_name": "LE ZINC",
            "email": "two@zinc.fr",
            "password": "secret1",
            "confirm_password": "secret1",
        })
        assert resp.status_code == 409

    def test_email_taken(self, client):
        signup(client, name="Le Zinc", email="one@zinc.fr")
        resp = client.post("/auth/signup", json={
            "restaurant_name": "Autre Zinc",
            "email": "ONE@zinc.fr",
            "password": "secret1",
            "confirm_password": "secret1",
        })
        assert resp.status_code == 409

    def test_empty_slug(self, client):
        resp = client.post("/auth/signup", json={
            "restaurant_name": "!!!",
            "email": "a@b.fr",
            "password": "secret1",
            "confirm_password": "secret1",
        })
        assert resp.status_code == 400


# ── Login / logout ─────────────────────────────────

class TestLogin:

    def test_login_roundtrip(self, client):
        signup(client)
        assert client.post("/auth/logout").status_code == 200
        assert client.get("/auth/me").status_code == 401

        bad = client.post("/auth/login", json={"email": "owner@chezleon.fr", "password": "wrong!"})
        assert bad.status_code == 401

        good = client.post("/auth/login", json={"email": "Owner@ChezLeon.fr", "password": "secret1"})
        assert good.status_code == 200
        assert good.json()["restaurant_slug"] == "chez-l-on"
        assert client.get("/api/admin/categories/").status_code == 200

    def test_unknown_email(self, client):
        resp = client.post("/auth/login", json={"email": "ghost@nowhere.fr", "password": "secret1"})
        assert resp.status_code == 401

    def test_admin_routes_require_session(self, client):
        assert client.get("/api/admin/categories/").status_code == 401
        assert client.get("/api/admin/restaurant/").status_code == 401
        assert client.post("/api/admin/menu-items/", json={"subcategory_id": 1, "title": "x"}).status_code == 401
