"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from blog.domain.model.user import User
from blog.domain.value import UserId


class UserRepository(ABC):
    """Read-only repository for users owned by the auth service."""

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
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find multiple users in a single query.

        Args:
            user_ids: User IDs to look up

        Returns:
            Found users (may be fewer than requested)
        """
        pass
