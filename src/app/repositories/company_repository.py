from abc import ABC, abstractmethod
from uuid import UUID


class ICompanyRepository(ABC):
    """Company repository interface - application layer"""

    @abstractmethod
    async def delete_by_hr(self, user_id: UUID) -> int:
        """Delete companies whose HR is the user. Returns count."""
        pass
