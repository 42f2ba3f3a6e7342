import pytest
from httpx import AsyncClient

from src.app.services.token_service import verify_session_token


@pytest.mark.asyncio
async def test_login_scenario(client: AsyncClient, test_data):
    """Wrong password -> 401; right password -> 200 with token; again -> 400"""
    signup = await client.post("/auth/signup", json=test_data.get_copy("signup"))
    user_id = signup.json()["user_id"]

    wrong = await client.post(
        "/auth/login", json={"email": "ann@example.com", "password": "WrongPassword!"}
    )
    assert wrong.status_code == 401
    assert wrong.json()["error"]["code"] == "INVALID_CREDENTIALS"

    right = await client.post(
        "/auth/login", json={"email": "ann@example.com", "password": "SecurePass123!"}
    )
    assert right.status_code == 200
    payload = verify_session_token(right.json()["token"])
    assert payload["user_id"] == user_id

    again = await client.post(
        "/auth/login", json={"email": "ann@example.com", "password": "SecurePass123!"}
    )
    assert again.status_code == 400
    assert again.json()["error"]["code"] == "ALREADY_ONLINE"


@pytest.mark.asyncio
async def test_login_unknown_user_same_error(client: AsyncClient):
    response = await client.post(
        "/auth/login", json={"email": "nobody@example.com", "password": "SecurePass123!"}
    )

    assert response.status_code == 401
    assert response.json()["error"] == {
        "code": "INVALID_CREDENTIALS",
        "message": "Invalid credentials",
    }


@pytest.mark.asyncio
async def test_login_with_recovery_email_or_mobile(client: AsyncClient, test_data):
    await client.post("/auth/signup", json=test_data.get_copy("signup"))

    by_recovery = await client.post(
        "/auth/login",
        json={"email": "ann.backup@example.com", "password": "SecurePass123!"},
    )
    assert by_recovery.status_code == 200

    await client.post(
        "/auth/logout",
        headers={"Authorization": f"Bearer {by_recovery.json()['token']}"},
    )

    by_mobile = await client.post(
        "/auth/login", json={"mobile_number": "01000000001", "password": "SecurePass123!"}
    )
    assert by_mobile.status_code == 200


@pytest.mark.asyncio
async def test_login_requires_identity(client: AsyncClient):
    response = await client.post("/auth/login", json={"password": "SecurePass123!"})

    assert response.status_code == 422
