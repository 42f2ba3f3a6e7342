from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.credentials import compare_credential, hash_credential
from src.app.services.unit_of_work import UnitOfWork
from .dtos import UpdatePasswordResponse


class UpdatePasswordUseCase:
    """
    Changes the caller's password.

    The old password is checked against the stored bcrypt hash; a mismatch
    leaves the account untouched.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, old_password: str, new_password: str
    ) -> Result[UpdatePasswordResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if not compare_credential(old_password, user.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Old password is incorrect")
                )

            user.password_hash = hash_credential(new_password)
            await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(
                UpdatePasswordResponse(
                    status="success", message="Password updated successfully"
                )
            )
