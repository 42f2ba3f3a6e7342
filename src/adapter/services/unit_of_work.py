from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.application_repository import ApplicationRepository
from src.adapter.repositories.company_repository import CompanyRepository
from src.adapter.repositories.job_repository import JobRepository
from src.adapter.repositories.one_time_code_repository import OneTimeCodeRepository
from src.adapter.repositories.session_repository import SessionRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.one_time_codes = OneTimeCodeRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.companies = CompanyRepository(self.session)
        self.jobs = JobRepository(self.session)
        self.applications = ApplicationRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
