"""User domain service."""

import logfire

from blog.domain.model.user import User
from blog.domain.repository import UserRepository
from blog.domain.value import UserId

from .base import Service


class UserService(Service):
    """Resolves user ids into the display identities shown next to content."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_user_by_id(self, user_id: UserId) -> User | None:
        """Get a user by ID.

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
            return user

    async def get_users_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Batch-load users, keyed by id.

        Unknown ids are simply missing from the result.

        Args:
            user_ids: User IDs

        Returns:
            Mapping of user ID to user
        """
        if not user_ids:
            return {}

        with logfire.span("user_service.get_users_by_ids", count=len(user_ids)):
            users = await self.user_repository.find_by_ids(list(dict.fromkeys(user_ids)))
            return {user.id: user for user in users}
