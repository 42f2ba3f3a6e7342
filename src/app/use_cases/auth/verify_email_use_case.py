"""
Verify Email Use Case

Exchanges the emailed verification token for a confirmed account.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.token_service import verify_verification_token
from src.app.services.unit_of_work import UnitOfWork
from .dtos import VerifyEmailResponse


class VerifyEmailUseCase:
    """
    Use case for email verification.

    Business Rules:
    - Token must be a valid, unexpired verification token
    - Unconfirmed -> confirmed happens in one conditional update
    - A user that is already confirmed is reported as not found, so a
      token can only be exchanged once
    - The token names the address it was mailed to; after an email change
      links sent to the old address no longer match
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[VerifyEmailResponse]:
        """
        Execute email verification use case.

        Args:
            token: Verification token from the email link

        Returns:
            Result with verification status, or Error

        Errors:
            - INVALID_TOKEN: bad signature, malformed or expired token
            - USER_NOT_FOUND: no unconfirmed user still holding the token's email
        """
        payload = verify_verification_token(token)
        if payload is None:
            return Return.err(
                Error("INVALID_TOKEN", "Invalid or expired verification token")
            )

        try:
            user_id = UUID(payload["user_id"])
        except ValueError:
            return Return.err(Error("INVALID_TOKEN", "Verification token data is invalid"))

        async with self.uow:
            confirmed = await self.uow.users.confirm_email(user_id, payload["email"])
            if not confirmed:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            await self.uow.commit()

            return Return.ok(
                VerifyEmailResponse(
                    status="verified",
                    message="User verified successfully",
                    user_id=str(user_id),
                )
            )
