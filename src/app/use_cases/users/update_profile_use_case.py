"""
Update Profile Use Case

Partial update of the caller's profile fields.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.user_repository import DuplicateRecordError
from src.app.services.mailer import Mailer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.verification_mail import send_verification_email
from .dtos import UpdateProfileCommand, UpdateProfileResponse, UserProfile


class UpdateProfileUseCase:
    """
    Use case for updating profile fields.

    Business Rules:
    - Only supplied fields change; user_name never changes
    - New email / recovery email / mobile must not belong to another user
    - Resulting email and recovery email must differ
    - Email change: a verification link goes to the new address before
      anything is saved, and the account becomes unconfirmed again
    - Email change: one-time codes mailed to the old address are dropped
    """

    def __init__(self, uow: UnitOfWork, mailer: Mailer):
        self.uow = uow
        self.mailer = mailer

    async def execute(
        self, user_id: UUID, command: UpdateProfileCommand
    ) -> Result[UpdateProfileResponse]:
        changes = command.model_dump(exclude_none=True)
        if not changes:
            return Return.err(Error("VALIDATION_ERROR", "No fields to update"))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            old_email = user.email
            email_changed = "email" in changes and changes["email"] != user.email

            new_email = changes.get("email", user.email)
            new_recovery_email = changes.get("recovery_email", user.recovery_email)
            if new_email == new_recovery_email:
                return Return.err(
                    Error(
                        "VALIDATION_ERROR",
                        "Recovery email and email cannot be the same",
                    )
                )

            conflict = await self.uow.users.find_conflicting(
                email=changes.get("email"),
                mobile_number=changes.get("mobile_number"),
                recovery_email=changes.get("recovery_email"),
                exclude_user_id=user.id,
            )
            if conflict:
                return Return.err(
                    Error("CONFLICT", "Email or mobile number already exists")
                )

            if email_changed:
                email_sent = await send_verification_email(self.mailer, user.id, new_email)
                if not email_sent:
                    return Return.err(Error("MAIL_ERROR", "Email not sent"))

            for field in ("first_name", "last_name"):
                if field in changes:
                    changes[field] = changes[field].strip().lower()
            for field, value in changes.items():
                setattr(user, field, value)
            if email_changed:
                user.email_confirmed = False
                await self.uow.one_time_codes.delete_by_email(old_email)

            try:
                user = await self.uow.users.update(user)
                await self.uow.commit()
            except DuplicateRecordError:
                return Return.err(
                    Error("CONFLICT", "Email or mobile number already exists")
                )

            return Return.ok(
                UpdateProfileResponse(
                    message="User updated successfully",
                    user=UserProfile.from_user(user),
                    verification_sent=email_changed,
                )
            )
