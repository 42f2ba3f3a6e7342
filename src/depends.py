from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.console_mailer import ConsoleMailer
from src.adapter.services.smtp_mailer import SmtpMailer
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.services.mailer import Mailer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import AuthenticateUseCase, CurrentUser

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


def build_mailer(config) -> Mailer:
    if config.MAIL_BACKEND == "smtp":
        return SmtpMailer(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            sender=config.MAIL_FROM,
            username=config.SMTP_USERNAME,
            password=config.SMTP_PASSWORD,
            use_tls=config.SMTP_USE_TLS,
            timeout=config.SMTP_TIMEOUT_SECONDS,
        )
    return ConsoleMailer()


mailer = build_mailer(ApplicationConfig)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_mailer() -> Mailer:
    return mailer


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> CurrentUser:
    """
    Dependency to resolve the caller from the session token in the Authorization header.

    Args:
        credentials: Bearer token from Authorization header
        uow: Unit of work shared with the route

    Returns:
        CurrentUser with id, role and session id

    Raises:
        ClientError: 401 if the token, user or session is invalid,
            400 if the user has logged out
    """
    use_case = AuthenticateUseCase(uow)
    result = await use_case.execute(credentials.credentials)

    if result.is_err():
        error = result.error
        if error.code == "LOGIN_REQUIRED":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)

    return result.value
