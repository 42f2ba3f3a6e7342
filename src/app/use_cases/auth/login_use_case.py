"""
Login Use Case

Authenticates a user by email, recovery email or mobile number and opens a
session.
"""

from datetime import datetime, timedelta
from typing import Optional

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.app.services.credentials import burn_credential_check, compare_credential
from src.app.services.token_service import issue_session_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Session, UserStatus
from .dtos import LoginResponse


class LoginUseCase:
    """
    Use case for user login and session token issuance.

    Business Rules:
    - Unknown identity and wrong password return the same error
    - A user that is online with an active session cannot log in again
    - An online flag with no active session left is stale and is replaced
    - Creates a Session; its id is embedded in the session token
    - Sets user.status = online
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        password: str,
        email: Optional[str] = None,
        mobile_number: Optional[str] = None,
    ) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            password: Plain text password
            email: Email or recovery email
            mobile_number: Mobile number (alternative identity)

        Returns:
            Result with LoginResponse containing the session token, or Error
        """
        async with self.uow:
            user = await self.uow.users.find_by_identity(
                email=email, mobile_number=mobile_number
            )

            # Constant-time password verification (prevent timing attacks)
            if user is None:
                burn_credential_check()
                return Return.err(Error("INVALID_CREDENTIALS", "Invalid credentials"))

            if not compare_credential(password, user.password_hash):
                return Return.err(Error("INVALID_CREDENTIALS", "Invalid credentials"))

            now = datetime.utcnow()
            if user.status == UserStatus.online:
                active_sessions = await self.uow.sessions.count_active_by_user_id(
                    user.id, now
                )
                if active_sessions > 0:
                    return Return.err(
                        Error("ALREADY_ONLINE", "User already logged in")
                    )

            session = Session(
                user_id=user.id,
                expires_at=now + timedelta(minutes=ApplicationConfig.LOGIN_TTL_MINUTES),
            )
            session = await self.uow.sessions.create(session)

            user.status = UserStatus.online
            await self.uow.users.update(user)

            await self.uow.commit()

            token = issue_session_token(user, session.id)

            return Return.ok(
                LoginResponse(
                    message="User logged in successfully",
                    token=token,
                    session_id=str(session.id),
                )
            )
