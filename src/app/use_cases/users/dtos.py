"""
User Use Case DTOs (Data Transfer Objects)
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel

from src.domain.entities import User


class CurrentUser(BaseModel):
    """Authenticated caller resolved from a session token"""

    id: str
    role: str
    session_id: str


class UserProfile(BaseModel):
    """Public view of an account: no credential, confirmation or reset state"""

    id: str
    first_name: str
    last_name: str
    user_name: str
    email: str
    recovery_email: str
    mobile_number: str
    date_of_birth: Optional[date] = None
    role: str
    status: str

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=str(user.id),
            first_name=user.first_name,
            last_name=user.last_name,
            user_name=user.user_name,
            email=user.email,
            recovery_email=user.recovery_email,
            mobile_number=user.mobile_number,
            date_of_birth=user.date_of_birth,
            role=user.role.value,
            status=user.status.value,
        )


class UpdateProfileCommand(BaseModel):
    """Partial profile update; None means unchanged"""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    recovery_email: Optional[str] = None
    mobile_number: Optional[str] = None
    date_of_birth: Optional[date] = None


class UpdateProfileResponse(BaseModel):
    message: str
    user: UserProfile
    verification_sent: bool


class UpdatePasswordResponse(BaseModel):
    status: str
    message: str


class DeleteUserResponse(BaseModel):
    message: str
    companies_deleted: int
    jobs_deleted: int
    applications_deleted: int
