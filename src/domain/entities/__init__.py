"""
Job Board Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import UserRole, UserStatus

# Export all entities
from .user import User
from .one_time_code import OneTimeCode
from .session import Session
from .company import Company
from .job import Job
from .application import Application

__all__ = [
    # Enums
    "UserRole",
    "UserStatus",
    # Entities
    "User",
    "OneTimeCode",
    "Session",
    "Company",
    "Job",
    "Application",
]
