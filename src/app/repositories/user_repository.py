from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import User


class DuplicateRecordError(Exception):
    """Raised by adapters when a write violates a uniqueness constraint"""


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by primary email address"""
        pass

    @abstractmethod
    async def find_by_identity(
        self, email: Optional[str] = None, mobile_number: Optional[str] = None
    ) -> Optional[User]:
        """First user whose email or recovery email equals email, or whose mobile matches"""
        pass

    @abstractmethod
    async def find_conflicting(
        self,
        email: Optional[str] = None,
        mobile_number: Optional[str] = None,
        recovery_email: Optional[str] = None,
        exclude_user_id: Optional[UUID] = None,
    ) -> Optional[User]:
        """First other user holding any given value; addresses match both email columns"""
        pass

    @abstractmethod
    async def user_name_exists(self, user_name: str) -> bool:
        """Check whether a handle is taken"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user. Raises DuplicateRecordError on unique violation."""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user. Raises DuplicateRecordError on unique violation."""
        pass

    @abstractmethod
    async def confirm_email(self, user_id: UUID, email: str) -> bool:
        """Mark user confirmed only if still unconfirmed and still on this email. Returns True if a row changed."""
        pass

    @abstractmethod
    async def get_by_reset_code(self, code_hash: str, now: datetime) -> Optional[User]:
        """Get user holding this reset-code hash with an expiry after now"""
        pass

    @abstractmethod
    async def delete(self, user_id: UUID) -> bool:
        """Delete user. Returns True if the user existed."""
        pass
