"""
Forget Password Use Case (one-time code flow)

Mails a numeric one-time code that can be exchanged for a new password.
"""

import logging
from datetime import datetime, timedelta

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.app.services.codes import generate_numeric_code, hash_code
from src.app.services.mailer import Mailer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import OneTimeCode
from .dtos import ForgetPasswordResponse

logger = logging.getLogger(__name__)


class ForgetPasswordUseCase:
    """
    Use case for requesting a one-time password reset code.

    Business Rules:
    - User must exist
    - Code is OTP_LENGTH decimal digits from a CSPRNG
    - Only the SHA-256 hash is stored, valid for OTP_TTL_MINUTES
    - The mail carries the code only, never a password or a link embedding one
    - Nothing is persisted if the mail is not delivered
    - Expired codes are purged on every request
    """

    def __init__(self, uow: UnitOfWork, mailer: Mailer):
        self.uow = uow
        self.mailer = mailer

    async def execute(self, email: str) -> Result[ForgetPasswordResponse]:
        """
        Execute forget password use case.

        Args:
            email: Account email address

        Returns:
            Result with send status, or Error (USER_NOT_FOUND, MAIL_ERROR)
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            now = datetime.utcnow()
            await self.uow.one_time_codes.delete_expired(now)

            otp = generate_numeric_code(ApplicationConfig.OTP_LENGTH)
            record = OneTimeCode(
                email=user.email,
                code_hash=hash_code(otp),
                created_at=now,
                expires_at=now + timedelta(minutes=ApplicationConfig.OTP_TTL_MINUTES),
            )
            await self.uow.one_time_codes.create(record)

            email_sent = await self.mailer.deliver(
                to=user.email,
                subject="Reset your password",
                text=(
                    f"Your OTP is: {otp}\n"
                    f"It expires in {ApplicationConfig.OTP_TTL_MINUTES} minutes."
                ),
            )
            if not email_sent:
                return Return.err(Error("MAIL_ERROR", "Error sending OTP"))

            await self.uow.commit()
            logger.info(f"OTP issued for user {user.id}")

            return Return.ok(
                ForgetPasswordResponse(status="sent", message="OTP is sent to your email")
            )
