"""
Confirmation mail shared by signup and email change.
"""

from uuid import UUID

from config import ApplicationConfig
from src.app.services.mailer import Mailer
from src.app.services.token_service import issue_verification_token


def confirmation_link(token: str) -> str:
    return f"{ApplicationConfig.PUBLIC_BASE_URL.rstrip('/')}/auth/verify-email/{token}"


async def send_verification_email(mailer: Mailer, user_id: UUID, email: str) -> bool:
    """Issue a verification token for user_id and mail the link to email."""
    link = confirmation_link(issue_verification_token(user_id, email))
    return await mailer.deliver(
        to=email,
        subject="Verify your email address",
        text=f"Please verify your email: {link}",
        html=f'<a href="{link}">Please verify your email</a>',
    )
