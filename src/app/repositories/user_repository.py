from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import PendingReset, User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: str, for_update: bool = False) -> Optional[User]:
        """Get user by ID, optionally locking the row until commit"""
        pass

    @abstractmethod
    async def set_pending_reset(self, user_id: str, pending_reset: PendingReset) -> None:
        """Attach a pending reset to the user, replacing any previous one"""
        pass

    @abstractmethod
    async def clear_pending_reset(self, user_id: str) -> None:
        """Remove the user's pending reset"""
        pass

    @abstractmethod
    async def commit_password(self, user_id: str, new_password: str) -> None:
        """Replace the user's password with new_password"""
        pass
