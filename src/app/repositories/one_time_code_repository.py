from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from src.domain.entities import OneTimeCode


class IOneTimeCodeRepository(ABC):
    """OneTimeCode repository interface - application layer"""

    @abstractmethod
    async def create(self, record: OneTimeCode) -> OneTimeCode:
        """Create a new one-time code"""
        pass

    @abstractmethod
    async def consume(self, code_hash: str, now: datetime) -> Optional[OneTimeCode]:
        """Find an unexpired code by hash and delete it. Returns the deleted record."""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Purge codes that expired before now. Returns count."""
        pass

    @abstractmethod
    async def delete_by_email(self, email: str) -> int:
        """Delete every code issued to an address. Returns count."""
        pass
