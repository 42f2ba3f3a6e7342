import logging

from libs.result import Error, Result, Return
from src.app.repositories.user_repository import DuplicateRecordError
from src.app.services.credentials import (
    HandleGenerationError,
    generate_user_name,
    hash_credential,
)
from src.app.services.mailer import Mailer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User, UserStatus
from .signup_dto import SignupCommand, SignupResponse
from .verification_mail import send_verification_email

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case

    Command/Response Pattern:
    - Input: SignupCommand (validated business intent)
    - Output: Result[SignupResponse] (structured response)

    Business Logic:
    1. Reject recovery_email == email before touching the store
    2. Reject email, recovery email or mobile number already in use
    3. Hash password with bcrypt
    4. Build User (unconfirmed, offline) with a generated unique handle
    5. Mail a confirmation link carrying a verification token
    6. Persist the user only once the mail was accepted
    7. Commit; a unique-constraint violation at write time is a conflict
    """

    def __init__(self, uow: UnitOfWork, mailer: Mailer):
        self.uow = uow
        self.mailer = mailer

    async def execute(self, command: SignupCommand) -> Result[SignupResponse]:
        """
        Execute signup use case

        Args:
            command: SignupCommand with validated profile and credentials

        Returns:
            Result[SignupResponse] with the new user id and handle, or Error
            (VALIDATION_ERROR, CONFLICT, MAIL_ERROR, HANDLE_EXHAUSTED)
        """
        if command.recovery_email == command.email:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    "Recovery email and email cannot be the same",
                )
            )

        async with self.uow:
            existing_user = await self.uow.users.find_conflicting(
                email=command.email,
                mobile_number=command.mobile_number,
                recovery_email=command.recovery_email,
            )
            if existing_user:
                return Return.err(
                    Error("CONFLICT", "Email or mobile number already exists")
                )

            try:
                user_name = await generate_user_name(
                    command.first_name,
                    command.last_name,
                    self.uow.users.user_name_exists,
                )
            except HandleGenerationError as exc:
                return Return.err(Error("HANDLE_EXHAUSTED", str(exc)))

            user = User(
                first_name=command.first_name.strip().lower(),
                last_name=command.last_name.strip().lower(),
                user_name=user_name,
                email=command.email,
                recovery_email=command.recovery_email,
                mobile_number=command.mobile_number,
                date_of_birth=command.date_of_birth,
                password_hash=hash_credential(command.password),
                role=command.role,
                status=UserStatus.offline,
                email_confirmed=False,
            )

            # The id exists before the row does, so the token can be issued now
            email_sent = await send_verification_email(self.mailer, user.id, user.email)
            if not email_sent:
                logger.warning(f"Signup aborted, confirmation mail not sent to {user.email}")
                return Return.err(Error("MAIL_ERROR", "Email not sent"))

            try:
                user = await self.uow.users.create(user)
                await self.uow.commit()
            except DuplicateRecordError:
                return Return.err(
                    Error("CONFLICT", "Email or mobile number already exists")
                )

            return Return.ok(
                SignupResponse(
                    message="User created successfully",
                    user_id=str(user.id),
                    user_name=user.user_name,
                    email_confirmed=user.email_confirmed,
                )
            )
