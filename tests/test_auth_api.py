"""HTTP tests for account registration, login and token handling."""
from __future__ import annotations

from datetime import timedelta

from fastapi.testclient import TestClient

from meditation_server.core.security import create_access_token, decode_access_token


def test_register_returns_usable_token(client: TestClient):
    response = client.post("/api/auth/register", json={"username": "mindful", "password": "s3cret-pass"})

    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "mindful"
    assert body["token_type"] == "bearer"

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"})
    assert me.status_code == 200
    assert me.json()["id"] == body["account_id"]
    assert "password_hash" not in me.json()


def test_duplicate_username_is_rejected(client: TestClient, register):
    register("mindful")
    response = client.post("/api/auth/register", json={"username": "mindful", "password": "another-pass"})
    assert response.status_code == 400


def test_duplicate_email_is_rejected(client: TestClient):
    first = client.post(
        "/api/auth/register", json={"username": "aaa", "password": "s3cret-pass", "email": "x@y.z"}
    )
    assert first.status_code == 201

    second = client.post(
        "/api/auth/register", json={"username": "bbb", "password": "s3cret-pass", "email": "x@y.z"}
    )

    assert second.status_code == 400
    assert second.json()["detail"] == "Username or email already registered"


def test_password_over_bcrypt_limit_is_rejected(client: TestClient, register):
    # 40 characters but 80 bytes once encoded
    response = client.post("/api/auth/register", json={"username": "mindful", "password": "\u00e9" * 40})
    assert response.status_code == 422

    register("mindful")
    login = client.post("/api/auth/login", json={"username": "mindful", "password": "\u00e9" * 40})
    assert login.status_code == 401


def test_login_with_correct_and_wrong_password(client: TestClient, register):
    register("mindful", "s3cret-pass")

    ok = client.post("/api/auth/login", json={"username": "mindful", "password": "s3cret-pass"})
    assert ok.status_code == 200
    assert decode_access_token(ok.json()["access_token"]).username == "mindful"

    bad = client.post("/api/auth/login", json={"username": "mindful", "password": "wrong-pass"})
    assert bad.status_code == 401

    unknown = client.post("/api/auth/login", json={"username": "nobody", "password": "s3cret-pass"})
    assert unknown.status_code == 401


def test_expired_token_is_rejected(client: TestClient, register):
    register("mindful")
    login = client.post("/api/auth/login", json={"username": "mindful", "password": "breathe-slowly"}).json()
    token = create_access_token(login["account_id"], "mindful", expires_delta=timedelta(seconds=-5))

    response = client.get("/api/scripts", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_token_for_unknown_account_is_rejected(client: TestClient):
    token = create_access_token("no-such-account", "ghost")
    response = client.get("/api/scripts", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_health(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
