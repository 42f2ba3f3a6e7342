"""
User Management Use Cases

Authentication of the caller and self-service account management.
"""

from .authenticate_use_case import AuthenticateUseCase
from .get_user_use_case import GetUserUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .update_password_use_case import UpdatePasswordUseCase
from .delete_user_use_case import DeleteUserUseCase
from .dtos import (
    CurrentUser,
    UserProfile,
    UpdateProfileCommand,
    UpdateProfileResponse,
    UpdatePasswordResponse,
    DeleteUserResponse,
)

__all__ = [
    "AuthenticateUseCase",
    "GetUserUseCase",
    "UpdateProfileUseCase",
    "UpdatePasswordUseCase",
    "DeleteUserUseCase",
    "CurrentUser",
    "UserProfile",
    "UpdateProfileCommand",
    "UpdateProfileResponse",
    "UpdatePasswordResponse",
    "DeleteUserResponse",
]
