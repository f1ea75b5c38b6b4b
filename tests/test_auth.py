"""
Test cases for registration, login and token handling.
"""
from app.core.security import create_access_token, create_refresh_token


class TestRegister:

    def test_register_user(self, client):
        response = client.post("/users/register", json={
            "name": "New Creator", "email": "new@example.com", "password": "password123",
        })
        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "new@example.com"
        assert "createdAt" in body
        assert "password" not in response.text

    def test_duplicate_email(self, client, user):
        response = client.post("/users/register", json={
            "name": "Again", "email": user.email, "password": "password123",
        })
        assert response.status_code == 400
        assert response.json() == {"error": "Email already registered"}

    def test_short_password(self, client):
        response = client.post("/users/register", json={
            "name": "Short", "email": "short@example.com", "password": "123",
        })
        assert response.status_code == 400


class TestLogin:

    def test_login_returns_tokens(self, client, user):
        response = client.post("/auth/login", data={"username": user.email, "password": "password123"})
        assert response.status_code == 200
        body = response.json()
        assert body["token_type"] == "bearer"

        me = client.get("/users/me", headers={"Authorization": f"Bearer {body['access_token']}"})
        assert me.status_code == 200
        assert me.json()["email"] == user.email

    def test_wrong_password(self, client, user):
        response = client.post("/auth/login", data={"username": user.email, "password": "wrong-password"})
        assert response.status_code == 401
        assert response.json() == {"error": "Incorrect email or password"}


class TestTokens:

    def test_refresh_issues_new_tokens(self, client, user):
        token = create_refresh_token({"sub": str(user.id)})
        response = client.post("/auth/refresh", json={"refresh_token": token})
        assert response.status_code == 200
        assert response.json()["access_token"]

    def test_access_token_cannot_refresh(self, client, user):
        token = create_access_token({"sub": str(user.id)})
        response = client.post("/auth/refresh", json={"refresh_token": token})
        assert response.status_code == 401

    def test_refresh_token_is_not_a_bearer_token(self, client, user):
        token = create_refresh_token({"sub": str(user.id)})
        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_token_for_unknown_user(self, client):
        token = create_access_token({"sub": "00000000-0000-0000-0000-000000000000"})
        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json() == {"error": "User not found"}

    def test_me(self, client, user, auth_headers):
        response = client.get("/auth/me", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["name"] == "Quiz Master"


def test_root(client):
    assert client.get("/").json() == {"message": "Welcome to the Quiz Code API"}
