import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import User


@pytest.mark.asyncio
async def test_signup_then_duplicate_email(client: AsyncClient, test_data, mailer):
    """Signup Ann Lee -> 201 with handle annlee; same email again -> 409"""
    payload = test_data.get_copy("signup")

    response = await client.post("/auth/signup", json=payload)

    assert response.status_code == 201
    data = response.json()
    assert data["user_name"] == "annlee"
    assert data["email_confirmed"] is False
    assert mailer.last_to("ann@example.com").subject == "Verify your email address"

    payload["mobile_number"] = "01000000077"
    payload["recovery_email"] = "someone.else@example.com"
    response = await client.post("/auth/signup", json=payload)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONFLICT"


@pytest.mark.asyncio
async def test_signup_duplicate_mobile_number(client: AsyncClient, test_data):
    await client.post("/auth/signup", json=test_data.get_copy("signup"))
    payload = test_data.get_copy(
        "signup_second", mobile_number=test_data.get("signup")["mobile_number"]
    )

    response = await client.post("/auth/signup", json=payload)

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_same_name_gets_distinct_handle(client: AsyncClient, test_data):
    first = await client.post("/auth/signup", json=test_data.get_copy("signup"))
    second = await client.post("/auth/signup", json=test_data.get_copy("signup_second"))

    assert first.status_code == 201
    assert second.status_code == 201
    assert first.json()["user_name"] == "annlee"
    assert second.json()["user_name"] != "annlee"
    assert second.json()["user_name"].startswith("annlee")


@pytest.mark.asyncio
async def test_signup_recovery_email_equal_to_email(client: AsyncClient, test_data):
    payload = test_data.get_copy("signup", recovery_email="ann@example.com")

    response = await client.post("/auth/signup", json=payload)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_signup_invalid_payload(client: AsyncClient, test_data):
    payload = test_data.get_copy("signup")
    payload["email"] = "not-an-email"
    payload["password"] = "short"

    response = await client.post("/auth/signup", json=payload)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_signup_mail_failure_stores_nothing(
    client: AsyncClient, test_data, mailer, db_session
):
    mailer.fail = True

    response = await client.post("/auth/signup", json=test_data.get_copy("signup"))

    assert response.status_code == 500
    assert response.json()["error"] == {
        "code": "MAIL_ERROR",
        "message": "Internal server error",
    }
    result = await db_session.exec(select(User))
    assert result.all() == []


@pytest.mark.asyncio
async def test_signup_email_used_as_someone_elses_recovery_email(
    client: AsyncClient, test_data
):
    await client.post("/auth/signup", json=test_data.get_copy("signup"))

    as_email = await client.post(
        "/auth/signup",
        json=test_data.get_copy("signup_hr", email="ann.backup@example.com"),
    )
    as_recovery = await client.post(
        "/auth/signup",
        json=test_data.get_copy("signup_hr", recovery_email="ann@example.com"),
    )

    assert as_email.status_code == 409
    assert as_recovery.status_code == 409
