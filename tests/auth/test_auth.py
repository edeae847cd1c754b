"""
Tests for staff registration, login and the current-user endpoint.
"""
from src.auth.models import User


def test_register_staff(client, staff):
    response = client.post("/api/v1/auth/register", json=staff)
    assert response.status_code == 201
    data = response.json()
    assert data["email"] == staff["email"]
    assert data["full_name"] == staff["full_name"]
    assert data["is_active"] is True
    assert "password" not in data
    assert "password_hash" not in data


def test_register_duplicate_email(client, staff):
    client.post("/api/v1/auth/register", json=staff)
    response = client.post("/api/v1/auth/register", json={**staff, "email": staff["email"].upper()})
    assert response.status_code == 400
    assert response.json()["detail"] == "Email already registered"


def test_register_short_password(client, staff):
    response = client.post("/api/v1/auth/register", json={**staff, "password": "short"})
    assert response.status_code == 422


def test_login_returns_token(client, staff):
    client.post("/api/v1/auth/register", json=staff)
    response = client.post(
        "/api/v1/auth/login",
        json={"email": staff["email"], "password": staff["password"]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["token_type"] == "bearer"
    assert data["access_token"]
    assert data["user"]["email"] == staff["email"]


def test_login_wrong_password(client, staff):
    client.post("/api/v1/auth/register", json=staff)
    response = client.post(
        "/api/v1/auth/login",
        json={"email": staff["email"], "password": "WrongPassword1!"},
    )
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid credentials"


def test_login_unknown_email(client):
    response = client.post(
        "/api/v1/auth/login",
        json={"email": "ghost@stmarys-hospital.org", "password": "Password123!"},
    )
    assert response.status_code == 401


def test_login_deactivated_account(client, db, staff):
    client.post("/api/v1/auth/register", json=staff)
    user = db.query(User).filter(User.email == staff["email"]).first()
    user.is_active = False
    db.commit()

    response = client.post(
        "/api/v1/auth/login",
        json={"email": staff["email"], "password": staff["password"]},
    )
    assert response.status_code == 403


def test_oauth2_token_form(client, staff):
    client.post("/api/v1/auth/register", json=staff)
    response = client.post(
        "/api/v1/auth/token",
        data={"username": staff["email"], "password": staff["password"]},
    )
    assert response.status_code == 200
    assert response.json()["token_type"] == "bearer"


def test_me(client, auth_headers, staff):
    response = client.get("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["email"] == staff["email"]


def test_me_requires_token(client):
    response = client.get("/api/v1/auth/me")
    assert response.status_code == 401


def test_me_rejects_garbage_token(client):
    response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_logout(client, auth_headers):
    response = client.post("/api/v1/auth/logout", headers=auth_headers)
    assert response.status_code == 200
    assert "message" in response.json()
