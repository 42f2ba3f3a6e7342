"""
Token Service

Signed, time-bounded JWTs (HS256). Email-verification tokens and session
tokens use separate keys and carry a purpose claim, so one can never be
accepted as the other.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, Dict, Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig
from src.domain.entities import User

ALGORITHM = "HS256"
PURPOSE_EMAIL_VERIFICATION = "email_verification"
PURPOSE_SESSION = "session"


def issue_token(claims: Dict[str, Any], secret_key: str, ttl: timedelta) -> str:
    """
    Sign claims with an expiry.

    Args:
        claims: JSON-serializable payload
        secret_key: HMAC key
        ttl: Validity window from now

    Returns:
        JWT token string
    """
    now = datetime.now(UTC)
    payload = dict(claims)
    payload.update({"iat": now, "exp": now + ttl})
    return jwt.encode(payload, secret_key, algorithm=ALGORITHM)


def verify_token(token: str, secret_key: str) -> Optional[dict]:
    """
    Verify and decode a token.

    Returns:
        Decoded payload dict, or None if the signature is invalid,
        the token is malformed or it has expired
    """
    try:
        return jwt.decode(token, secret_key, algorithms=[ALGORITHM])
    except JWTError:
        return None


def _verify_purpose(token: str, secret_key: str, purpose: str) -> Optional[dict]:
    payload = verify_token(token, secret_key)
    if payload is None or payload.get("purpose") != purpose:
        return None
    if not payload.get("user_id"):
        return None
    return payload


def issue_verification_token(user_id: UUID, email: str) -> str:
    """Bound to the address the link is mailed to, so it cannot confirm a later one."""
    return issue_token(
        {"user_id": str(user_id), "email": email, "purpose": PURPOSE_EMAIL_VERIFICATION},
        ApplicationConfig.EMAIL_VERIFICATION_SECRET,
        timedelta(minutes=ApplicationConfig.EMAIL_VERIFICATION_TTL_MINUTES),
    )


def verify_verification_token(token: str) -> Optional[dict]:
    payload = _verify_purpose(
        token, ApplicationConfig.EMAIL_VERIFICATION_SECRET, PURPOSE_EMAIL_VERIFICATION
    )
    if payload is None or not payload.get("email"):
        return None
    return payload


def issue_session_token(user: User, session_id: UUID) -> str:
    """Session token carrying a snapshot of the user's contact fields and role."""
    claims = {
        "user_id": str(user.id),
        "email": user.email,
        "recovery_email": user.recovery_email,
        "mobile_number": user.mobile_number,
        "role": user.role.value,
        "session_id": str(session_id),
        "purpose": PURPOSE_SESSION,
    }
    return issue_token(
        claims,
        ApplicationConfig.LOGIN_SECRET,
        timedelta(minutes=ApplicationConfig.LOGIN_TTL_MINUTES),
    )


def verify_session_token(token: str) -> Optional[dict]:
    return _verify_purpose(token, ApplicationConfig.LOGIN_SECRET, PURPOSE_SESSION)
