from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.services.token_service import (
    issue_session_token,
    issue_verification_token,
)
from src.app.use_cases.auth.verify_email_use_case import VerifyEmailUseCase
from src.domain.entities import User


@pytest.fixture
def mock_uow(mock_uow):
    mock_uow.users = MagicMock()
    mock_uow.users.confirm_email = AsyncMock(return_value=True)
    return mock_uow


@pytest.mark.asyncio
async def test_successful_verification(mock_uow):
    # Arrange
    user_id = uuid4()
    token = issue_verification_token(user_id, "ann@example.com")

    # Act
    result = await VerifyEmailUseCase(mock_uow).execute(token)

    # Assert
    assert result.is_ok()
    assert result.value.status == "verified"
    assert result.value.user_id == str(user_id)
    mock_uow.users.confirm_email.assert_called_once_with(user_id, "ann@example.com")
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_verifying_twice_reports_not_found(mock_uow):
    # Arrange
    token = issue_verification_token(uuid4(), "ann@example.com")
    mock_uow.users.confirm_email.side_effect = [True, False]
    use_case = VerifyEmailUseCase(mock_uow)

    # Act
    first = await use_case.execute(token)
    second = await use_case.execute(token)

    # Assert
    assert first.is_ok()
    assert second.is_err()
    assert second.error.code == "USER_NOT_FOUND"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_invalid_token(mock_uow):
    # Act
    result = await VerifyEmailUseCase(mock_uow).execute("not-a-token")

    # Assert
    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    mock_uow.users.confirm_email.assert_not_called()


@pytest.mark.asyncio
async def test_expired_token(mock_uow, monkeypatch):
    # Arrange
    from config import ApplicationConfig

    monkeypatch.setattr(ApplicationConfig, "EMAIL_VERIFICATION_TTL_MINUTES", -1)
    token = issue_verification_token(uuid4(), "ann@example.com")

    # Act
    result = await VerifyEmailUseCase(mock_uow).execute(token)

    # Assert
    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_session_token_is_not_a_verification_token(mock_uow):
    # Arrange
    user = User(
        first_name="ann",
        last_name="lee",
        user_name="annlee",
        email="ann@example.com",
        recovery_email="ann.backup@example.com",
        mobile_number="01000000001",
        password_hash="hash",
    )
    token = issue_session_token(user, uuid4())

    # Act
    result = await VerifyEmailUseCase(mock_uow).execute(token)

    # Assert
    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
