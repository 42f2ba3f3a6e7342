from uuid import UUID

from sqlalchemy import delete
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.company_repository import ICompanyRepository
from src.domain.entities import Company


class CompanyRepository(ICompanyRepository):
    """Company repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def delete_by_hr(self, user_id: UUID) -> int:
        stmt = delete(Company).where(Company.company_hr == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
