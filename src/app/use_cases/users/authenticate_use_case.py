"""
Authenticate Use Case

Resolves the caller behind a session token.
"""

from datetime import datetime
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.token_service import verify_session_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import UserStatus
from .dtos import CurrentUser


class AuthenticateUseCase:
    """
    Use case for loading the current user from a session token.

    Business Rules:
    - Token must be a valid, unexpired session token
    - User must still exist
    - Session must exist, not be revoked and not be expired
    - User must be online (logged out users must login first)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[CurrentUser]:
        payload = verify_session_token(token)
        if payload is None or not payload.get("session_id"):
            return Return.err(Error("INVALID_TOKEN", "Invalid or expired token"))

        try:
            user_id = UUID(payload["user_id"])
            session_id = UUID(payload["session_id"])
        except ValueError:
            return Return.err(Error("INVALID_TOKEN", "Invalid token payload"))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            session = await self.uow.sessions.get_by_id(session_id)
            if (
                session is None
                or session.user_id != user.id
                or session.revoked
                or session.expires_at < datetime.utcnow()
            ):
                return Return.err(Error("SESSION_REVOKED", "Session is no longer valid"))

            if user.status != UserStatus.online:
                return Return.err(Error("LOGIN_REQUIRED", "Please login first"))

            return Return.ok(
                CurrentUser(
                    id=str(user.id),
                    role=user.role.value,
                    session_id=str(session.id),
                )
            )
