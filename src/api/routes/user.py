from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError, ServerError
from src.api.utils.authorization import any_account
from src.app.services.mailer import Mailer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    CurrentUser,
    DeleteUserResponse,
    DeleteUserUseCase,
    GetUserUseCase,
    UpdatePasswordResponse,
    UpdatePasswordUseCase,
    UpdateProfileCommand,
    UpdateProfileResponse,
    UpdateProfileUseCase,
    UserProfile,
)
from src.depends import get_mailer, get_unit_of_work

router = APIRouter(prefix="/users", tags=["User"])


def _raise_for(error):
    if error.code == "USER_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code == "VALIDATION_ERROR":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code == "CONFLICT":
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    elif error.code == "INVALID_CREDENTIALS":
        raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
    raise ServerError(error)


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserProfile)
async def get_me(
    current_user: CurrentUser = Depends(any_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current User Profile

    Raises:
        - 401 Unauthorized: Missing, invalid or revoked token
        - 404 Not Found: Account no longer exists
    """
    result = await GetUserUseCase(uow).execute(UUID(current_user.id))
    if result.is_err():
        _raise_for(result.error)
    return result.value


class UpdateProfileRequest(BaseModel):
    """Fields left out stay unchanged"""

    first_name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    email: Optional[EmailStr] = None
    recovery_email: Optional[EmailStr] = None
    mobile_number: Optional[str] = Field(default=None, min_length=7, max_length=20)
    date_of_birth: Optional[date] = None


@router.put("/me", status_code=status.HTTP_200_OK, response_model=UpdateProfileResponse)
async def update_me(
    request: UpdateProfileRequest,
    current_user: CurrentUser = Depends(any_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: Mailer = Depends(get_mailer),
):
    """
    Update Profile

    Changing the email mails a new confirmation link and marks the
    account unconfirmed.

    Raises:
        - 400 Bad Request: Nothing to update or email equals recovery email
        - 409 Conflict: Email, recovery email or mobile number used by another account
        - 500 Internal Server Error: Confirmation mail not sent
    """
    command = UpdateProfileCommand(**request.model_dump())
    result = await UpdateProfileUseCase(uow, mailer).execute(
        UUID(current_user.id), command
    )
    if result.is_err():
        _raise_for(result.error)
    return result.value


class UpdatePasswordRequest(BaseModel):
    old_password: str = Field(..., description="Current password")
    new_password: str = Field(..., min_length=8, description="New password (min 8 chars)")


@router.patch(
    "/me/password", status_code=status.HTTP_200_OK, response_model=UpdatePasswordResponse
)
async def update_password(
    request: UpdatePasswordRequest,
    current_user: CurrentUser = Depends(any_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Password

    Raises:
        - 401 Unauthorized: Old password is incorrect
    """
    result = await UpdatePasswordUseCase(uow).execute(
        UUID(current_user.id), request.old_password, request.new_password
    )
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.delete("/me", status_code=status.HTTP_200_OK, response_model=DeleteUserResponse)
async def delete_me(
    current_user: CurrentUser = Depends(any_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Account

    Removes the account together with its sessions, owned companies, the
    jobs it added and its applications.
    """
    result = await DeleteUserUseCase(uow).execute(UUID(current_user.id))
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.get("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserProfile)
async def get_user(
    user_id: UUID,
    current_user: CurrentUser = Depends(any_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Another User's Profile

    Raises:
        - 404 Not Found: No such user
    """
    result = await GetUserUseCase(uow).execute(user_id)
    if result.is_err():
        _raise_for(result.error)
    return result.value
