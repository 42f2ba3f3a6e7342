"""
Verify OTP Use Case

Exchanges a one-time code for a new password.
"""

from datetime import datetime

from libs.result import Error, Result, Return
from src.app.services.codes import hash_code
from src.app.services.credentials import hash_credential
from src.app.services.unit_of_work import UnitOfWork
from .dtos import VerifyOtpResponse


class VerifyOtpUseCase:
    """
    Use case for confirming a one-time code.

    Business Rules:
    - Code is looked up by hash among unexpired records
    - The record is deleted as part of the lookup (single use)
    - New password is set on the user bound to the code's email
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, otp: str, new_password: str) -> Result[VerifyOtpResponse]:
        """
        Execute verify OTP use case.

        Args:
            otp: Code from the email
            new_password: New password to set

        Returns:
            Result with confirmation status, or Error

        Errors:
            - INVALID_OR_EXPIRED: unknown, already used or expired code
            - USER_NOT_FOUND: the account was removed after the code was issued
        """
        async with self.uow:
            record = await self.uow.one_time_codes.consume(
                hash_code(otp), datetime.utcnow()
            )
            if record is None:
                return Return.err(
                    Error("INVALID_OR_EXPIRED", "OTP is expired or invalid")
                )

            user = await self.uow.users.get_by_email(record.email)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            user.password_hash = hash_credential(new_password)
            await self.uow.users.update(user)

            await self.uow.commit()

            return Return.ok(
                VerifyOtpResponse(
                    status="success", message="New password created successfully"
                )
            )
