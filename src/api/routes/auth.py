from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field, model_validator

from src.api.error import ClientError, ServerError
from src.app.services.mailer import Mailer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    SignupCommand,
    SignupResponse,
    SignupUseCase,
    VerifyEmailUseCase,
    LoginUseCase,
    LogoutUseCase,
    ForgetPasswordUseCase,
    VerifyOtpUseCase,
    RequestResetCodeUseCase,
    VerifyResetCodeUseCase,
    ResetPasswordUseCase,
    VerifyEmailResponse,
    LoginResponse,
    LogoutResponse,
    ForgetPasswordResponse,
    VerifyOtpResponse,
    RequestResetCodeResponse,
    VerifyResetCodeResponse,
    ResetPasswordResponse,
)
from src.app.use_cases.users import CurrentUser
from src.depends import get_current_user, get_mailer, get_unit_of_work
from src.domain.entities import UserRole

router = APIRouter(prefix="/auth", tags=["Authentication"])


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Validates incoming HTTP request before converting to SignupCommand.
    API layer responsibility: HTTP validation and serialization.
    """

    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr = Field(..., description="Primary email address")
    password: str = Field(..., min_length=8, description="Password (min 8 chars)")
    recovery_email: EmailStr = Field(..., description="Recovery email, must differ from email")
    mobile_number: str = Field(..., min_length=7, max_length=20)
    role: UserRole = Field(default=UserRole.user)
    date_of_birth: Optional[date] = None


@router.post(
    "/signup", status_code=status.HTTP_201_CREATED, response_model=SignupResponse
)
async def signup(
    request: SignupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: Mailer = Depends(get_mailer),
):
    """
    User Signup

    Creates an unconfirmed account and mails a confirmation link.
    The account is stored only if the mail was accepted.

    Raises:
        - 400 Bad Request: recovery email equals email
        - 409 Conflict: Email, recovery email or mobile number already used
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
        - 500 Internal Server Error: Mail not sent or server error
    """
    command = SignupCommand(**request.model_dump())

    use_case = SignupUseCase(uow, mailer)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "CONFLICT":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.get(
    "/verify-email/{token}",
    status_code=status.HTTP_200_OK,
    response_model=VerifyEmailResponse,
)
async def verify_email(token: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Email Verification

    Target of the link mailed at signup or email change.

    Raises:
        - 400 Bad Request: Invalid or expired token
        - 404 Not Found: User missing or already confirmed
    """
    use_case = VerifyEmailUseCase(uow)
    result = await use_case.execute(token)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_TOKEN":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Either email (primary or recovery) or mobile number identifies the account.
    """

    email: Optional[EmailStr] = Field(default=None, description="Email or recovery email")
    mobile_number: Optional[str] = Field(default=None, min_length=7, max_length=20)
    password: str = Field(..., description="User password")

    @model_validator(mode="after")
    def require_identity(self):
        if not self.email and not self.mobile_number:
            raise ValueError("email or mobile_number is required")
        return self


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 400 Bad Request: User already logged in
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(
        request.password, email=request.email, mobile_number=request.mobile_number
    )

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "ALREADY_ONLINE":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    User Logout

    Revokes the session behind the token and sets the user offline.
    """
    use_case = LogoutUseCase(uow)
    result = await use_case.execute(
        UUID(current_user.id), UUID(current_user.session_id)
    )

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class ForgetPasswordRequest(BaseModel):
    email: EmailStr = Field(..., description="Account email address")


@router.post(
    "/forget-password",
    status_code=status.HTTP_200_OK,
    response_model=ForgetPasswordResponse,
)
async def forget_password(
    request: ForgetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: Mailer = Depends(get_mailer),
):
    """
    Forget Password (one-time code)

    Mails a numeric code, valid for OTP_TTL_MINUTES, to the account email.

    Raises:
        - 404 Not Found: No user with this email
        - 500 Internal Server Error: Mail not sent
    """
    use_case = ForgetPasswordUseCase(uow, mailer)
    result = await use_case.execute(request.email)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class VerifyOtpRequest(BaseModel):
    otp: str = Field(..., min_length=4, max_length=10, pattern=r"^\d+$")
    new_password: str = Field(..., min_length=8, description="New password (min 8 chars)")


@router.post("/verify-otp", status_code=status.HTTP_200_OK, response_model=VerifyOtpResponse)
async def verify_otp(request: VerifyOtpRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Verify OTP

    Consumes the one-time code and sets the new password.

    Raises:
        - 400 Bad Request: Code invalid, used or expired
        - 404 Not Found: Account no longer exists
    """
    use_case = VerifyOtpUseCase(uow)
    result = await use_case.execute(request.otp, request.new_password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_OR_EXPIRED":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class AdvancedForgetPasswordRequest(BaseModel):
    email: EmailStr = Field(..., description="Account email address")


@router.post(
    "/advanced-forget-password",
    status_code=status.HTTP_200_OK,
    response_model=RequestResetCodeResponse,
)
async def advanced_forget_password(
    request: AdvancedForgetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: Mailer = Depends(get_mailer),
):
    """
    Advanced Forget Password (reset code)

    Stores a 6-digit reset code on the account and mails it.

    Raises:
        - 404 Not Found: No user with this email
        - 500 Internal Server Error: Mail not sent (reset state withdrawn)
    """
    use_case = RequestResetCodeUseCase(uow, mailer)
    result = await use_case.execute(request.email)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class VerifyResetCodeRequest(BaseModel):
    reset_code: str = Field(..., pattern=r"^\d{6}$")


@router.post(
    "/verify-reset-code",
    status_code=status.HTTP_200_OK,
    response_model=VerifyResetCodeResponse,
)
async def verify_reset_code(
    request: VerifyResetCodeRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Verify Reset Code

    Raises:
        - 400 Bad Request: Code invalid or expired
    """
    use_case = VerifyResetCodeUseCase(uow)
    result = await use_case.execute(request.reset_code)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_OR_EXPIRED":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class ResetPasswordRequest(BaseModel):
    email: EmailStr = Field(..., description="Account email address")
    new_password: str = Field(..., min_length=8, description="New password (min 8 chars)")


@router.put(
    "/reset-password", status_code=status.HTTP_200_OK, response_model=ResetPasswordResponse
)
async def reset_password(
    request: ResetPasswordRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Reset Password

    Raises:
        - 404 Not Found: No user with this email
        - 400 Bad Request: Reset code not verified
    """
    use_case = ResetPasswordUseCase(uow)
    result = await use_case.execute(request.email, request.new_password)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "NOT_VERIFIED":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
