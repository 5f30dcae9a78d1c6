"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import User
from blog.domain.repository import UserRepository
from blog.domain.value import UserId
from blog.persistence.error import storage_errors
from blog.persistence.mappers import row_to_user
from blog.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository (read-only)."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @storage_errors
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == str(user_id))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    @storage_errors
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find multiple users in a single query."""
        if not user_ids:
            return []

        stmt = select(users_table).where(
            users_table.c.id.in_([str(i) for i in user_ids])
        )
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]
