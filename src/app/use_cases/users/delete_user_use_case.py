"""
Delete User Use Case

Removes an account together with everything it owns.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import DeleteUserResponse

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """
    Use case for deleting the caller's account.

    Business Rules:
    - Deletes, in order: applications (made by the user or sent to jobs
      they own), jobs, companies where the user is HR, one-time codes mailed
      to the user, sessions, the user
    - All deletes share one transaction: either everything goes or nothing
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[DeleteUserResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            applications_deleted = await self.uow.applications.delete_by_user(user_id)
            jobs_deleted = await self.uow.jobs.delete_by_owner(user_id)
            companies_deleted = await self.uow.companies.delete_by_hr(user_id)
            await self.uow.one_time_codes.delete_by_email(user.email)
            await self.uow.sessions.delete_by_user_id(user_id)
            await self.uow.users.delete(user_id)

            await self.uow.commit()

            logger.info(
                f"User {user_id} deleted with {companies_deleted} companies, "
                f"{jobs_deleted} jobs and {applications_deleted} applications"
            )

            return Return.ok(
                DeleteUserResponse(
                    message="User deleted successfully",
                    companies_deleted=companies_deleted,
                    jobs_deleted=jobs_deleted,
                    applications_deleted=applications_deleted,
                )
            )
