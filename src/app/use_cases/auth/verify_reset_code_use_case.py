from datetime import datetime

from libs.result import Error, Result, Return
from src.app.services.codes import hash_code
from src.app.services.unit_of_work import UnitOfWork
from .dtos import VerifyResetCodeResponse


class VerifyResetCodeUseCase:
    """Marks the reset request verified when the code matches and has not expired."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, reset_code: str) -> Result[VerifyResetCodeResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_reset_code(
                hash_code(reset_code), datetime.utcnow()
            )
            if user is None:
                return Return.err(
                    Error("INVALID_OR_EXPIRED", "Invalid reset code or expired")
                )

            user.password_reset_verified = True
            await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(
                VerifyResetCodeResponse(status="success", message="Reset code verified")
            )
