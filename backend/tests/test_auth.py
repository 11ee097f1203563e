"""
Shelter Admin Backend — Login & Registration Tests
====================================================

What:  POST /auth/login and POST /auth/register.

What we test:
    ✅ Login returns a usable token and a password-free profile
    ✅ Wrong password and unknown username give the same 401
    ✅ Disabled accounts cannot log in
    ✅ Registration defaults realName and rejects taken usernames with 409
"""

import pytest

from factories import ADMIN_PASSWORD, make_user, seed


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_success(self, client, admin_user):
        response = await client.post(
            "/auth/login", json={"username": "admin", "password": ADMIN_PASSWORD}
        )
        assert response.status_code == 200
        body = response.json()
        assert body["code"] == 200
        assert body["message"] == "success"
        data = body["data"]
        assert data["token_type"] == "bearer"
        assert data["expires_in"] == 86400
        assert data["user"] == {
            "id": admin_user.id,
            "username": "admin",
            "realName": "Admin",
            "role": "admin",
            "avatar": None,
        }

        me = await client.get(
            "/users/me", headers={"Authorization": f"Bearer {data['access_token']}"}
        )
        assert me.status_code == 200
        assert me.json()["data"]["username"] == "admin"

    @pytest.mark.asyncio
    async def test_wrong_password(self, client, admin_user):
        response = await client.post(
            "/auth/login", json={"username": "admin", "password": "wrong-password"}
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid username or password"

    @pytest.mark.asyncio
    async def test_unknown_user_same_message(self, client):
        response = await client.post(
            "/auth/login", json={"username": "nobody", "password": "whatever"}
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid username or password"

    @pytest.mark.asyncio
    async def test_disabled_account(self, client):
        await seed(make_user("retired", password="retired-pass", status="inactive"))
        response = await client.post(
            "/auth/login", json={"username": "retired", "password": "retired-pass"}
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Account is disabled"

    @pytest.mark.asyncio
    async def test_missing_password_is_400(self, client):
        response = await client.post("/auth/login", json={"username": "admin"})
        assert response.status_code == 400
        assert "password" in response.json()["message"]


class TestRegister:
    @pytest.mark.asyncio
    async def test_register_defaults(self, client):
        response = await client.post(
            "/auth/register", json={"username": "newbie", "password": "secret-1"}
        )
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["realName"] == "newbie"
        assert data["role"] == "staff"
        assert data["status"] == "active"
        assert "password" not in data
        assert "passwordHash" not in data

        login = await client.post(
            "/auth/login", json={"username": "newbie", "password": "secret-1"}
        )
        assert login.status_code == 200

    @pytest.mark.asyncio
    async def test_register_with_chosen_role(self, client):
        response = await client.post(
            "/auth/register",
            json={"username": "director", "password": "secret-1", "role": "admin"},
        )
        assert response.status_code == 201
        assert response.json()["data"]["role"] == "admin"

    @pytest.mark.asyncio
    async def test_register_taken_username(self, client, admin_user):
        response = await client.post(
            "/auth/register", json={"username": "admin", "password": "secret-1"}
        )
        assert response.status_code == 409
        assert response.json()["message"] == "Username 'admin' is already taken"

    @pytest.mark.asyncio
    async def test_register_short_password(self, client):
        response = await client.post(
            "/auth/register", json={"username": "newbie", "password": "123"}
        )
        assert response.status_code == 400
