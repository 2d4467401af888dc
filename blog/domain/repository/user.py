"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from blog.domain.model.user import User
from blog.domain.value import UserId


class UserRepository(ABC):
    """Read access to registered users for author snapshots."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Batch lookup of users keyed by ID; missing IDs are left out."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass
