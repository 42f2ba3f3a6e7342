"""
Reset Password Use Case

Last step of the reset-code flow.
"""

from libs.result import Error, Result, Return
from src.app.services.credentials import hash_credential
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ResetPasswordResponse


class ResetPasswordUseCase:
    """
    Use case for setting a new password after reset-code verification.

    Business Rules:
    - User must exist
    - password_reset_verified must be true
    - New password is hashed with bcrypt
    - All three reset fields are cleared, so the code cannot be reused
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, new_password: str) -> Result[ResetPasswordResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if user.password_reset_verified is not True:
                return Return.err(Error("NOT_VERIFIED", "Reset code not verified"))

            user.password_hash = hash_credential(new_password)
            user.clear_password_reset()
            await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(
                ResetPasswordResponse(status="success", message="Password reset successfully")
            )
