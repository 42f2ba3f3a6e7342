from abc import ABC, abstractmethod
from uuid import UUID


class IApplicationRepository(ABC):
    """Application repository interface - application layer"""

    @abstractmethod
    async def delete_by_user(self, user_id: UUID) -> int:
        """Delete applications made by the user or sent to jobs they own. Returns count."""
        pass
