from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.repositories.user_repository import DuplicateRecordError
from src.app.use_cases.users.dtos import UpdateProfileCommand
from src.app.use_cases.users.update_profile_use_case import UpdateProfileUseCase
from src.domain.entities import User


@pytest.fixture
def user():
    return User(
        id=uuid4(),
        first_name="ann",
        last_name="lee",
        user_name="annlee",
        email="ann@example.com",
        recovery_email="ann.backup@example.com",
        mobile_number="01000000001",
        password_hash="hash",
        email_confirmed=True,
    )


@pytest.fixture
def mock_uow(mock_uow, user):
    mock_uow.users = MagicMock()
    mock_uow.users.get_by_id = AsyncMock(return_value=user)
    mock_uow.users.find_conflicting = AsyncMock(return_value=None)
    mock_uow.users.update = AsyncMock(side_effect=lambda u: u)
    mock_uow.one_time_codes = MagicMock()
    mock_uow.one_time_codes.delete_by_email = AsyncMock(return_value=0)
    return mock_uow


@pytest.mark.asyncio
async def test_update_names_and_mobile(mock_uow, mock_mailer, user):
    # Act
    result = await UpdateProfileUseCase(mock_uow, mock_mailer).execute(
        user.id, UpdateProfileCommand(first_name=" Anna ", mobile_number="01000000099")
    )

    # Assert
    assert result.is_ok()
    assert result.value.user.first_name == "anna"
    assert result.value.user.mobile_number == "01000000099"
    assert result.value.user.user_name == "annlee"
    assert result.value.verification_sent is False
    assert user.email_confirmed is True
    mock_mailer.deliver.assert_not_called()
    mock_uow.one_time_codes.delete_by_email.assert_not_called()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_email_change_requires_new_confirmation(mock_uow, mock_mailer, user):
    # Act
    result = await UpdateProfileUseCase(mock_uow, mock_mailer).execute(
        user.id, UpdateProfileCommand(email="ann.new@example.com")
    )

    # Assert
    assert result.is_ok()
    assert result.value.verification_sent is True
    assert user.email == "ann.new@example.com"
    assert user.email_confirmed is False
    assert mock_mailer.deliver.call_args.kwargs["to"] == "ann.new@example.com"
    mock_uow.one_time_codes.delete_by_email.assert_called_once_with("ann@example.com")


@pytest.mark.asyncio
async def test_email_change_mail_failure_saves_nothing(mock_uow, mock_mailer, user):
    # Arrange
    mock_mailer.deliver.return_value = False

    # Act
    result = await UpdateProfileUseCase(mock_uow, mock_mailer).execute(
        user.id, UpdateProfileCommand(email="ann.new@example.com")
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "MAIL_ERROR"
    assert user.email == "ann@example.com"
    mock_uow.users.update.assert_not_called()


@pytest.mark.asyncio
async def test_email_equal_to_recovery_email(mock_uow, mock_mailer, user):
    # Act
    result = await UpdateProfileUseCase(mock_uow, mock_mailer).execute(
        user.id, UpdateProfileCommand(recovery_email="ann@example.com")
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_empty_update(mock_uow, mock_mailer, user):
    # Act
    result = await UpdateProfileUseCase(mock_uow, mock_mailer).execute(
        user.id, UpdateProfileCommand()
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.users.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_value_taken_by_another_user(mock_uow, mock_mailer, user):
    # Arrange
    mock_uow.users.find_conflicting.return_value = MagicMock()

    # Act
    result = await UpdateProfileUseCase(mock_uow, mock_mailer).execute(
        user.id, UpdateProfileCommand(mobile_number="01000000002")
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "CONFLICT"
    assert mock_uow.users.find_conflicting.call_args.kwargs["exclude_user_id"] == user.id


@pytest.mark.asyncio
async def test_unique_violation_at_write(mock_uow, mock_mailer, user):
    # Arrange
    mock_uow.users.update.side_effect = DuplicateRecordError("UNIQUE constraint failed")

    # Act
    result = await UpdateProfileUseCase(mock_uow, mock_mailer).execute(
        user.id, UpdateProfileCommand(mobile_number="01000000002")
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "CONFLICT"
    mock_uow.commit.assert_not_called()
