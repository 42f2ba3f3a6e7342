"""
Request Reset Code Use Case

First step of the reset-code flow: a 6-digit code stored on the user record.
"""

import logging
from datetime import datetime, timedelta

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.app.services.codes import generate_reset_code, hash_code
from src.app.services.mailer import Mailer
from src.app.services.unit_of_work import UnitOfWork
from .dtos import RequestResetCodeResponse

logger = logging.getLogger(__name__)


class RequestResetCodeUseCase:
    """
    Use case for requesting a password reset code.

    Business Rules:
    - User must exist
    - Code hash, expiry (RESET_CODE_TTL_MINUTES) and verified=false are
      stored on the user before mailing
    - If the mail fails, the three reset fields are cleared again
    """

    def __init__(self, uow: UnitOfWork, mailer: Mailer):
        self.uow = uow
        self.mailer = mailer

    async def execute(self, email: str) -> Result[RequestResetCodeResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            reset_code = generate_reset_code()
            ttl_minutes = ApplicationConfig.RESET_CODE_TTL_MINUTES

            user.password_reset_code_hash = hash_code(reset_code)
            user.password_reset_expires_at = datetime.utcnow() + timedelta(minutes=ttl_minutes)
            user.password_reset_verified = False
            await self.uow.users.update(user)
            await self.uow.commit()

            message = (
                f"Hi {user.first_name} {user.last_name},\n"
                f"Your reset code is: {reset_code} and it will expire in {ttl_minutes} minutes.\n"
                "If you didn't request this, please ignore this email."
            )
            email_sent = await self.mailer.deliver(
                to=user.email, subject="Reset your password", text=message
            )
            if not email_sent:
                user.clear_password_reset()
                await self.uow.users.update(user)
                await self.uow.commit()
                logger.warning(f"Reset code for user {user.id} withdrawn, mail not sent")
                return Return.err(Error("MAIL_ERROR", "Error sending reset code"))

            return Return.ok(
                RequestResetCodeResponse(
                    status="success", message="Reset code sent to your email"
                )
            )
