from datetime import datetime
from typing import Optional

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.one_time_code_repository import IOneTimeCodeRepository
from src.domain.entities import OneTimeCode


class OneTimeCodeRepository(IOneTimeCodeRepository):
    """OneTimeCode repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, record: OneTimeCode) -> OneTimeCode:
        """Create a new one-time code"""
        self.session.add(record)
        await self.session.flush()
        await self.session.refresh(record)
        return record

    async def consume(self, code_hash: str, now: datetime) -> Optional[OneTimeCode]:
        """
        Find an unexpired code by hash and delete it in the same transaction.

        The delete is conditional on the row id, so two concurrent consumers
        of the same code cannot both succeed: the loser sees rowcount 0.
        """
        stmt = (
            select(OneTimeCode)
            .where(OneTimeCode.code_hash == code_hash, OneTimeCode.expires_at > now)
            .order_by(OneTimeCode.created_at.desc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        record = result.first()
        if record is None:
            return None

        deleted = await self.session.execute(
            delete(OneTimeCode).where(OneTimeCode.id == record.id)
        )
        await self.session.flush()
        if deleted.rowcount == 0:
            return None
        return record

    async def delete_expired(self, now: datetime) -> int:
        """Purge codes that expired before now"""
        stmt = delete(OneTimeCode).where(OneTimeCode.expires_at <= now)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_by_email(self, email: str) -> int:
        """Drop codes of an address that no longer belongs to the account"""
        stmt = delete(OneTimeCode).where(OneTimeCode.email == email)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
