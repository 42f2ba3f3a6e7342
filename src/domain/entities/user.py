"""
User Entity

Identity, credential, login status and password-reset state of an account.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import UserRole, UserStatus


class User(SQLModel, table=True):
    """
    User entity - a job seeker or a company HR account.

    Business Rules:
    - email, recovery_email, mobile_number and user_name are unique
    - recovery_email must differ from email
    - user_name is derived from the name at signup and never changes
    - Password stored as bcrypt hash
    - status changes only through login/logout
    - password_reset_verified is set only after a valid, unexpired reset code
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    first_name: str = Field(max_length=50)
    last_name: str = Field(max_length=50)
    user_name: str = Field(unique=True, index=True, max_length=120)

    email: str = Field(unique=True, index=True, max_length=255)
    recovery_email: str = Field(unique=True, index=True, max_length=255)
    mobile_number: str = Field(unique=True, index=True, max_length=32)
    date_of_birth: Optional[date] = None

    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    role: UserRole = Field(default=UserRole.user)
    status: UserStatus = Field(default=UserStatus.offline)

    email_confirmed: bool = Field(default=False)

    # Reset-code flow
    password_reset_code_hash: Optional[str] = Field(default=None, max_length=64)
    password_reset_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )
    password_reset_verified: Optional[bool] = None

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_user_password_reset_code_hash", "password_reset_code_hash"),
    )

    def clear_password_reset(self) -> None:
        self.password_reset_code_hash = None
        self.password_reset_expires_at = None
        self.password_reset_verified = None
