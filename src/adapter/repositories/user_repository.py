from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, or_, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import DuplicateRecordError, IUserRepository
from src.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by primary email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def find_by_identity(
        self, email: Optional[str] = None, mobile_number: Optional[str] = None
    ) -> Optional[User]:
        """First user matching email, recovery email or mobile number"""
        conditions = []
        if email:
            conditions.extend([User.email == email, User.recovery_email == email])
        if mobile_number:
            conditions.append(User.mobile_number == mobile_number)
        if not conditions:
            return None

        stmt = select(User).where(or_(*conditions)).limit(1)
        result = await self.session.exec(stmt)
        return result.first()

    async def find_conflicting(
        self,
        email: Optional[str] = None,
        mobile_number: Optional[str] = None,
        recovery_email: Optional[str] = None,
        exclude_user_id: Optional[UUID] = None,
    ) -> Optional[User]:
        """
        First other user already holding any of the given unique values.

        Addresses are checked against both email columns, so one person's
        email can never be another person's recovery email.
        """
        conditions = []
        addresses = [address for address in (email, recovery_email) if address]
        if addresses:
            conditions.append(User.email.in_(addresses))
            conditions.append(User.recovery_email.in_(addresses))
        if mobile_number:
            conditions.append(User.mobile_number == mobile_number)
        if not conditions:
            return None

        stmt = select(User).where(or_(*conditions))
        if exclude_user_id is not None:
            stmt = stmt.where(User.id != exclude_user_id)
        result = await self.session.exec(stmt.limit(1))
        return result.first()

    async def user_name_exists(self, user_name: str) -> bool:
        stmt = select(User.id).where(User.user_name == user_name)
        result = await self.session.exec(stmt)
        return result.first() is not None

    async def create(self, user: User) -> User:
        """Create a new user"""
        return await self._save(user)

    async def update(self, user: User) -> User:
        """Update existing user"""
        user.updated_at = datetime.utcnow()
        return await self._save(user)

    async def _save(self, user: User) -> User:
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateRecordError(str(exc.orig)) from exc
        await self.session.refresh(user)
        return user

    async def confirm_email(self, user_id: UUID, email: str) -> bool:
        """Flip email_confirmed only while it is still false and the email is unchanged"""
        stmt = (
            update(User)
            .where(
                User.id == user_id,
                User.email == email,
                User.email_confirmed == False,  # noqa: E712
            )
            .values(email_confirmed=True, updated_at=datetime.utcnow())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def get_by_reset_code(self, code_hash: str, now: datetime) -> Optional[User]:
        stmt = select(User).where(
            User.password_reset_code_hash == code_hash,
            User.password_reset_expires_at > now,
        )
        result = await self.session.exec(stmt.limit(1))
        return result.first()

    async def delete(self, user_id: UUID) -> bool:
        stmt = delete(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
