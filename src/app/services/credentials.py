"""
Credential hashing and account handle generation.
"""

import logging
import secrets
from typing import Awaitable, Callable

import bcrypt

from config import ApplicationConfig

logger = logging.getLogger(__name__)


class HandleGenerationError(Exception):
    """No free handle found within MAX_HANDLE_ATTEMPTS"""


def hash_credential(plain: str) -> str:
    return bcrypt.hashpw(
        plain.encode("utf-8"), bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    ).decode("utf-8")


def compare_credential(plain: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), password_hash.encode("utf-8"))
    except (ValueError, AttributeError):
        # Malformed stored hash
        return False


def burn_credential_check() -> None:
    """Spend the same time as a real comparison when there is nothing to compare."""
    bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS))


def base_user_name(first_name: str, last_name: str) -> str:
    return "".join(f"{first_name}{last_name}".lower().split())


async def generate_user_name(
    first_name: str,
    last_name: str,
    is_taken: Callable[[str], Awaitable[bool]],
) -> str:
    """
    Derive a unique handle from the name.

    The bare name is tried first; on collision a random 4-digit suffix is
    appended, up to MAX_HANDLE_ATTEMPTS times.

    Raises:
        HandleGenerationError: every candidate was taken
    """
    candidate = base_user_name(first_name, last_name)
    if not await is_taken(candidate):
        return candidate

    for _ in range(ApplicationConfig.MAX_HANDLE_ATTEMPTS):
        suffixed = f"{candidate}{1000 + secrets.randbelow(9000)}"
        if not await is_taken(suffixed):
            return suffixed

    logger.error(
        f"Could not find a free handle for '{candidate}' after "
        f"{ApplicationConfig.MAX_HANDLE_ATTEMPTS} attempts"
    )
    raise HandleGenerationError(f"No free handle for '{candidate}'")
