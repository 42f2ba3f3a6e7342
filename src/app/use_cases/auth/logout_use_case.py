"""
Logout Use Case

Closes the caller's session and takes the user offline.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import UserStatus
from .dtos import LogoutResponse


class LogoutUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, session_id: UUID) -> Result[LogoutResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            await self.uow.sessions.revoke_by_id(session_id)

            user.status = UserStatus.offline
            await self.uow.users.update(user)

            await self.uow.commit()

            return Return.ok(
                LogoutResponse(status="success", message="User logged out successfully")
            )
