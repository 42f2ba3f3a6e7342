from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.use_cases.auth.logout_use_case import LogoutUseCase
from src.domain.entities import User, UserStatus


@pytest.fixture
def mock_uow(mock_uow):
    mock_uow.users = MagicMock()
    mock_uow.users.get_by_id = AsyncMock()
    mock_uow.users.update = AsyncMock(side_effect=lambda user: user)
    mock_uow.sessions = MagicMock()
    mock_uow.sessions.revoke_by_id = AsyncMock(return_value=True)
    return mock_uow


@pytest.mark.asyncio
async def test_logout_revokes_session_and_goes_offline(mock_uow):
    # Arrange
    user = User(
        id=uuid4(),
        first_name="ann",
        last_name="lee",
        user_name="annlee",
        email="ann@example.com",
        recovery_email="ann.backup@example.com",
        mobile_number="01000000001",
        password_hash="hash",
        status=UserStatus.online,
    )
    session_id = uuid4()
    mock_uow.users.get_by_id.return_value = user

    # Act
    result = await LogoutUseCase(mock_uow).execute(user.id, session_id)

    # Assert
    assert result.is_ok()
    assert user.status == UserStatus.offline
    mock_uow.sessions.revoke_by_id.assert_called_once_with(session_id)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_logout_unknown_user(mock_uow):
    # Arrange
    mock_uow.users.get_by_id.return_value = None

    # Act
    result = await LogoutUseCase(mock_uow).execute(uuid4(), uuid4())

    # Assert
    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
    mock_uow.sessions.revoke_by_id.assert_not_called()
