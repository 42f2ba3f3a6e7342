from abc import ABC, abstractmethod

from src.app.repositories.application_repository import IApplicationRepository
from src.app.repositories.company_repository import ICompanyRepository
from src.app.repositories.job_repository import IJobRepository
from src.app.repositories.one_time_code_repository import IOneTimeCodeRepository
from src.app.repositories.session_repository import ISessionRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    one_time_codes: IOneTimeCodeRepository
    sessions: ISessionRepository
    companies: ICompanyRepository
    jobs: IJobRepository
    applications: IApplicationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
