from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import bcrypt
import pytest

from src.app.services.codes import hash_code
from src.app.use_cases.auth.request_reset_code_use_case import RequestResetCodeUseCase
from src.app.use_cases.auth.reset_password_use_case import ResetPasswordUseCase
from src.app.use_cases.auth.verify_reset_code_use_case import VerifyResetCodeUseCase
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
        password_hash="old-hash",
    )


@pytest.fixture
def mock_uow(mock_uow, user):
    async def get_by_reset_code(code_hash, now):
        if (
            user.password_reset_code_hash == code_hash
            and user.password_reset_expires_at > now
        ):
            return user
        return None

    mock_uow.users = MagicMock()
    mock_uow.users.get_by_email = AsyncMock(return_value=user)
    mock_uow.users.get_by_reset_code = AsyncMock(side_effect=get_by_reset_code)
    mock_uow.users.update = AsyncMock(side_effect=lambda u: u)
    return mock_uow


def mailed_code(mock_mailer) -> str:
    text = mock_mailer.deliver.call_args.kwargs["text"]
    return text.split("Your reset code is: ", 1)[1].split()[0]


@pytest.mark.asyncio
async def test_request_stores_hashed_code(mock_uow, mock_mailer, user):
    # Act
    result = await RequestResetCodeUseCase(mock_uow, mock_mailer).execute("ann@example.com")

    # Assert
    assert result.is_ok()
    code = mailed_code(mock_mailer)
    assert len(code) == 6 and code.isdigit() and code[0] != "0"
    assert user.password_reset_code_hash == hash_code(code)
    assert user.password_reset_verified is False
    assert user.password_reset_expires_at > datetime.utcnow() + timedelta(minutes=14)


@pytest.mark.asyncio
async def test_request_mail_failure_clears_reset_state(mock_uow, mock_mailer, user):
    # Arrange
    mock_mailer.deliver.return_value = False

    # Act
    result = await RequestResetCodeUseCase(mock_uow, mock_mailer).execute("ann@example.com")

    # Assert
    assert result.is_err()
    assert result.error.code == "MAIL_ERROR"
    assert user.password_reset_code_hash is None
    assert user.password_reset_expires_at is None
    assert user.password_reset_verified is None


@pytest.mark.asyncio
async def test_request_unknown_email(mock_uow, mock_mailer):
    # Arrange
    mock_uow.users.get_by_email.return_value = None

    # Act
    result = await RequestResetCodeUseCase(mock_uow, mock_mailer).execute("x@example.com")

    # Assert
    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_full_reset_code_flow(mock_uow, mock_mailer, user):
    # Arrange
    await RequestResetCodeUseCase(mock_uow, mock_mailer).execute("ann@example.com")
    code = mailed_code(mock_mailer)
    reset = ResetPasswordUseCase(mock_uow)

    # Act
    before_verify = await reset.execute("ann@example.com", "BrandNewPass1!")
    verified = await VerifyResetCodeUseCase(mock_uow).execute(code)
    after_verify = await reset.execute("ann@example.com", "BrandNewPass1!")
    again = await reset.execute("ann@example.com", "AnotherPass2!")

    # Assert
    assert before_verify.is_err()
    assert before_verify.error.code == "NOT_VERIFIED"
    assert verified.is_ok()
    assert after_verify.is_ok()
    assert bcrypt.checkpw(b"BrandNewPass1!", user.password_hash.encode())
    assert user.password_reset_code_hash is None
    assert user.password_reset_expires_at is None
    assert user.password_reset_verified is None
    assert again.is_err()
    assert again.error.code == "NOT_VERIFIED"


@pytest.mark.asyncio
async def test_expired_reset_code(mock_uow, user):
    # Arrange
    user.password_reset_code_hash = hash_code("123456")
    user.password_reset_expires_at = datetime.utcnow() - timedelta(seconds=1)
    user.password_reset_verified = False

    # Act
    result = await VerifyResetCodeUseCase(mock_uow).execute("123456")

    # Assert
    assert result.is_err()
    assert result.error.code == "INVALID_OR_EXPIRED"
    assert user.password_reset_verified is False


@pytest.mark.asyncio
async def test_wrong_reset_code(mock_uow, user):
    # Arrange
    user.password_reset_code_hash = hash_code("123456")
    user.password_reset_expires_at = datetime.utcnow() + timedelta(minutes=15)
    user.password_reset_verified = False

    # Act
    result = await VerifyResetCodeUseCase(mock_uow).execute("654321")

    # Assert
    assert result.is_err()
    assert result.error.code == "INVALID_OR_EXPIRED"
