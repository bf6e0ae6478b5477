import storefront.core.security as security
from storefront.core.config import SESSION_COOKIE_NAME

from tests.conftest import ADMIN_PASSWORD


def test_login_sets_session_cookie_and_unlocks_admin(client):
    resp = client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})

    assert resp.status_code == 200
    assert resp.json()["success"] is True
    assert SESSION_COOKIE_NAME in client.cookies
    assert "httponly" in resp.headers["set-cookie"].lower()

    assert client.get("/api/admin/inventory").status_code == 200


def test_wrong_password_is_rejected_without_cookie(client):
    resp = client.post("/api/admin/login", json={"password": "nope"})

    assert resp.status_code == 401
    body = resp.json()
    assert body["success"] is False
    assert body["error"] == "Contraseña incorrecta"
    assert body["error_code"] == "INVALID_PASSWORD"
    assert "set-cookie" not in resp.headers
    assert SESSION_COOKIE_NAME not in client.cookies


def test_missing_password_field_is_rejected(client):
    resp = client.post("/api/admin/login", json={})
    assert resp.status_code == 401


def test_admin_routes_require_session(client):
    for path in ("/api/admin/inventory", "/api/admin/history", "/api/admin/feedback", "/api/admin/colors"):
        resp = client.get(path)
        assert resp.status_code == 401, path
        assert resp.json()["error_code"] == "UNAUTHORIZED"


def test_tampered_cookie_is_ignored(client):
    client.cookies.set(SESSION_COOKIE_NAME, "not-a-token")
    assert client.get("/api/admin/inventory").status_code == 401


def test_password_query_parameter_still_accepted(client):
    assert client.get("/api/admin/colors", params={"password": ADMIN_PASSWORD}).status_code == 200
    assert client.get("/api/admin/colors", params={"password": "wrong"}).status_code == 401


def test_login_when_password_not_configured(client, monkeypatch):
    monkeypatch.setattr(security, "ADMIN_PASSWORD", "")
    monkeypatch.setattr(security, "ADMIN_PASSWORD_HASH", "")

    resp = client.post("/api/admin/login", json={"password": "anything"})

    assert resp.status_code == 500
    assert resp.json()["error_code"] == "NOT_CONFIGURED"


def test_login_against_password_hash(client, monkeypatch):
    monkeypatch.setattr(security, "ADMIN_PASSWORD_HASH", security.hash_password("hashed-one"))

    assert client.post("/api/admin/login", json={"password": ADMIN_PASSWORD}).status_code == 401
    assert client.post("/api/admin/login", json={"password": "hashed-one"}).status_code == 200


def test_session_status(client):
    resp = client.get("/api/admin/session")
    assert resp.json()["data"]["authenticated"] is False

    client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})
    data = client.get("/api/admin/session").json()["data"]
    assert data["authenticated"] is True
    assert data["expires_at"]


def test_logout_clears_session(admin_client):
    resp = admin_client.post("/api/admin/logout")

    assert resp.status_code == 200
    assert SESSION_COOKIE_NAME not in admin_client.cookies
    assert admin_client.get("/api/admin/inventory").status_code == 401


def test_malformed_password_hash_reports_not_configured(client, monkeypatch):
    monkeypatch.setattr(security, "ADMIN_PASSWORD_HASH", "not-a-real-hash")

    resp = client.post("/api/admin/login", json={"password": "anything"})

    assert resp.status_code == 500
    assert resp.json()["error_code"] == "NOT_CONFIGURED"
