"""In-memory user repository for testing."""

from typing import Optional, Sequence

from blog.domain.model import User
from blog.domain.repository import UserRepository
from blog.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Users are owned by the auth service, so tests seed them with ``add``.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def add(self, user: User) -> User:
        """Seed a user."""
        self._users[str(user.id)] = user
        return user

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(str(user_id))

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find multiple users."""
        return [self._users[str(i)] for i in user_ids if str(i) in self._users]
