from __future__ import annotations

from datetime import timedelta

from flask_jwt_extended import create_access_token

from easygestion.core.enums import Role


def test_login_sets_cookie_and_returns_user(client, make_account):
    account = make_account(Role.USER)
    res = client.post("/api/v1/auth/login", json={"email": account["email"], "password": "Str0ng!Passw0rd#1"})

    assert res.status_code == 200
    body = res.get_json()
    assert body["user"]["email"] == account["email"]
    assert body["user"]["employee"]["id"] == account["employee_id"]
    assert "passwordHash" not in body["user"]
    cookie = res.headers.get("Set-Cookie", "")
    assert "accessToken=" in cookie and "HttpOnly" in cookie


def test_cookie_authenticates_follow_up_requests(client, make_account):
    account = make_account(Role.USER)
    client.post("/api/v1/auth/login", json={"username": account["username"], "password": "Str0ng!Passw0rd#1"})

    res = client.get("/api/v1/auth/me")
    assert res.status_code == 200
    assert res.get_json()["user"]["username"] == account["username"]


def test_bad_credentials(client, make_account):
    account = make_account(Role.USER)
    res = client.post("/api/v1/auth/login", json={"email": account["email"], "password": "Wrong!Passw0rd#1"})
    assert res.status_code == 401
    assert res.get_json() == {"error": "Invalid credentials"}


def test_missing_token(client):
    res = client.get("/api/v1/auth/me")
    assert res.status_code == 401
    assert res.get_json() == {"error": "No access token provided"}


def test_garbage_token(client):
    res = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 401
    assert res.get_json() == {"error": "Invalid access token"}


def test_expired_token(app, client, make_account):
    account = make_account(Role.USER)
    with app.app_context():
        token = create_access_token(identity=str(account["user_id"]), expires_delta=timedelta(seconds=-30))
    res = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401
    assert res.get_json() == {"error": "Token has expired"}


def test_deactivated_user_token_is_rejected(client, admin, employee):
    res = client.put(f"/api/v1/users/{employee['user_id']}", json={"isActive": False}, headers=admin["headers"])
    assert res.status_code == 200

    res = client.get("/api/v1/auth/me", headers=employee["headers"])
    assert res.status_code == 401


def test_logout_clears_cookie(client, employee):
    res = client.post("/api/v1/auth/logout")
    assert res.status_code == 200
    assert any(c.startswith("accessToken=;") for c in res.headers.getlist("Set-Cookie"))
