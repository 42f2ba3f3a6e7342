"""
Job Board Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Account role"""

    user = "User"
    company_hr = "CompanyHR"


class UserStatus(str, Enum):
    """Login status, toggled only by login/logout"""

    online = "online"
    offline = "offline"
