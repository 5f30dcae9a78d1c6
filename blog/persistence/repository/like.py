"""PostgreSQL implementation of Like repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Like
from blog.domain.repository import LikeRepository
from blog.domain.value import LikeId, PostId, UserId
from blog.persistence.error import storage_errors
from blog.persistence.mappers import like_to_dict, row_to_like
from blog.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @storage_errors
    async def find_by_id(self, like_id: LikeId) -> Optional[Like]:
        """Find a like by ID."""
        stmt = select(likes_table).where(likes_table.c.id == like_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    @storage_errors
    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Like]:
        """Find a user's like on a post."""
        stmt = select(likes_table).where(
            and_(
                likes_table.c.post_id == post_id,
                likes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    @storage_errors
    async def find_by_post(self, post_id: PostId) -> List[Like]:
        """Find all likes on a post, oldest first."""
        stmt = (
            select(likes_table)
            .where(likes_table.c.post_id == post_id)
            .order_by(likes_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_like(row._asdict()) for row in result.fetchall()]

    @storage_errors
    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(likes_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    @storage_errors
    async def save(self, like: Like) -> Like:
        """Save a like (create).

        Raises:
            IntegrityError: If the (post_id, user_id) pair already exists
        """
        stmt = insert(likes_table).values(**like_to_dict(like))
        # Savepoint keeps the request transaction usable after a duplicate
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return like

    @storage_errors
    async def delete(self, like_id: LikeId) -> None:
        """Delete a like."""
        stmt = delete(likes_table).where(likes_table.c.id == like_id)
        await self.session.execute(stmt)
        await self.session.flush()

    @storage_errors
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every like on a post."""
        stmt = delete(likes_table).where(likes_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
