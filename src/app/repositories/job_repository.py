from abc import ABC, abstractmethod
from uuid import UUID


class IJobRepository(ABC):
    """Job repository interface - application layer"""

    @abstractmethod
    async def delete_by_owner(self, user_id: UUID) -> int:
        """Delete jobs added by the user or posted under companies they run. Returns count."""
        pass
