"""
Role Authorization

Restricts routes to accounts with given roles.
"""

from fastapi import Depends, status
from libs.result import Error
from src.api.error import ClientError
from src.app.use_cases.users import CurrentUser
from src.depends import get_current_user
from src.domain.entities import UserRole


def require_roles(*roles: UserRole):
    """
    Build a dependency that admits only the given roles.

    Args:
        roles: Roles allowed to call the route

    Returns:
        Dependency returning the CurrentUser

    Raises:
        ClientError: 403 if the caller's role is not allowed
    """
    allowed = {role.value for role in roles}

    async def dependency(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if current_user.role not in allowed:
            raise ClientError(
                Error("UNAUTHORIZED", "Unauthorized access"),
                status_code=status.HTTP_403_FORBIDDEN,
            )
        return current_user

    return dependency


# Both account kinds manage their own profile
any_account = require_roles(UserRole.user, UserRole.company_hr)
