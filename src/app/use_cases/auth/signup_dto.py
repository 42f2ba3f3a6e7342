"""
Signup Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- SignupCommand: Input to use case (validated business intent)
- SignupResponse: Output from use case (structured result)
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel

from src.domain.entities import UserRole


class SignupCommand(BaseModel):
    """
    Signup command - represents validated signup intent

    Created by API layer after request validation passes.
    Contains only business-relevant data (no HTTP concerns).
    """

    first_name: str
    last_name: str
    email: str
    password: str
    recovery_email: str
    mobile_number: str
    role: UserRole = UserRole.user
    date_of_birth: Optional[date] = None


class SignupResponse(BaseModel):
    """Signup response - the created, still unconfirmed account"""

    message: str
    user_id: str
    user_name: str
    email_confirmed: bool
