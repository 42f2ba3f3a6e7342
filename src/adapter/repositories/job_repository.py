from uuid import UUID

from sqlalchemy import delete, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.job_repository import IJobRepository
from src.domain.entities import Company, Job


class JobRepository(IJobRepository):
    """Job repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def delete_by_owner(self, user_id: UUID) -> int:
        owned_companies = select(Company.id).where(Company.company_hr == user_id)
        stmt = delete(Job).where(
            or_(Job.added_by == user_id, Job.company_id.in_(owned_companies))
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
