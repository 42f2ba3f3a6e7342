from uuid import UUID

from sqlalchemy import delete, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.application_repository import IApplicationRepository
from src.domain.entities import Application, Company, Job


class ApplicationRepository(IApplicationRepository):
    """Application repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def delete_by_user(self, user_id: UUID) -> int:
        owned_companies = select(Company.id).where(Company.company_hr == user_id)
        owned_jobs = select(Job.id).where(
            or_(Job.added_by == user_id, Job.company_id.in_(owned_companies))
        )
        stmt = delete(Application).where(
            or_(Application.user_id == user_id, Application.job_id.in_(owned_jobs))
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
