import uuid

import pytest


pytestmark = pytest.mark.asyncio


async def register_user(client, username: str, email: str, password: str, display_name: str = "Tester"):
    resp = await client.post(
        "/api/v1/auth/register",
        json={"username": username, "email": email, "password": password, "displayName": display_name},
    )
    return resp


async def login_user(client, username: str, password: str):
    return await client.post(
        "/api/v1/auth/login",
        json={"username": username, "password": password},
    )


async def test_register_and_login_flow(client):
    username = f"user_{uuid.uuid4().hex[:6]}"
    email = f"{username}@example.com"
    password = "StrongPass!23"

    resp = await register_user(client, username, email, password)
    body = resp.json()
    assert resp.status_code == 200
    assert body["success"] is True
    assert body["data"]["user"]["username"] == username
    assert body["data"]["token"]
    assert "passwordHash" not in body["data"]["user"]
    assert "password_hash" not in resp.text

    # Duplicate username should fail
    dup_resp = await register_user(client, username, "new@x.com", password)
    assert dup_resp.status_code == 409
    assert dup_resp.json()["error"]["code"] == "USERNAME_EXISTS"

    # Duplicate email should fail
    dup_email = await register_user(client, f"{username}_2", email, password)
    assert dup_email.status_code == 409
    assert dup_email.json()["error"]["code"] == "EMAIL_EXISTS"

    # Successful login
    login_resp = await login_user(client, username, password)
    login_body = login_resp.json()
    assert login_resp.status_code == 200
    assert login_body["success"] is True
    assert "token" in login_body["data"]
    assert "expiresAt" in login_body["data"]
    assert "accessToken" in login_resp.cookies


async def test_login_failures_look_the_same(client):
    username = f"user_{uuid.uuid4().hex[:6]}"
    await register_user(client, username, f"{username}@example.com", "StrongPass!23")

    bad_password = await login_user(client, username, "wrongpass")
    unknown_user = await login_user(client, "ghost", "anything")

    assert bad_password.status_code == unknown_user.status_code == 401
    assert bad_password.json() == unknown_user.json()
    assert bad_password.json()["error"]["code"] == "AUTH_INVALID_CREDENTIALS"


async def test_register_validation(client):
    resp = await register_user(client, "ab", "not-an-email", "123")
    assert resp.status_code == 422


async def test_me_and_logout(client):
    username = f"user_{uuid.uuid4().hex[:6]}"
    password = "UserInit#123"
    await register_user(client, username, f"{username}@example.com", password, display_name="Me Myself")

    login_resp = await login_user(client, username, password)
    token = login_resp.json()["data"]["token"]
    headers = {"Authorization": f"Bearer {token}"}

    me_resp = await client.get("/api/v1/auth/me", headers=headers)
    me_body = me_resp.json()
    assert me_resp.status_code == 200
    assert me_body["data"]["username"] == username
    assert me_body["data"]["displayName"] == "Me Myself"
    assert "passwordHash" not in me_body["data"]

    logout_resp = await client.post("/api/v1/auth/logout", headers=headers)
    assert logout_resp.status_code == 200
    assert logout_resp.json()["success"] is True


async def test_auth_requires_token(client):
    unauth_me = await client.get("/api/v1/auth/me")
    assert unauth_me.status_code == 401
    assert unauth_me.json()["error"]["code"] == "AUTH_REQUIRED"


async def test_invalid_token_is_rejected(client):
    resp = await client.get("/api/v1/auth/me", headers={"Authorization": "Bearer invalid.token.here"})
    assert resp.status_code == 401
    body = resp.json()
    assert body["error"]["code"] == "AUTH_INVALID_TOKEN"
    assert body["error"]["reason"] == "Malformed"
