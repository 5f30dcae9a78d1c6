"""PostgreSQL implementation of Post repository."""

from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import delete, func, literal, select, update
from sqlalchemy.dialects.postgresql import UUID as PG_UUID, insert
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Post
from blog.domain.repository import PostRepository
from blog.domain.value import CommentId, LikeId, PostId
from blog.persistence.error import storage_errors
from blog.persistence.mappers import post_to_dict, row_to_post
from blog.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @storage_errors
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    @storage_errors
    async def find_all(self, limit: int = 5, offset: int = 0) -> List[Post]:
        """Find a page of posts, newest first."""
        stmt = (
            select(posts_table)
            .order_by(posts_table.c.created_at.desc(), posts_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    @storage_errors
    async def count(self) -> int:
        """Count all posts."""
        stmt = select(func.count()).select_from(posts_table)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    @storage_errors
    async def save(self, post: Post) -> Post:
        """Save a post (insert, or update every column on conflict)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            post_dict = post_to_dict(post)
            stmt = insert(posts_table).values(**post_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[posts_table.c.id],
                set_={k: v for k, v in post_dict.items() if k != "id"},
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return post

    @storage_errors
    async def update_by_id(self, post_id: PostId, changes: dict) -> Optional[Post]:
        """Update only the given columns and return the stored row."""
        with logfire.span(
            "post_repository.update_by_id", post_id=str(post_id), fields=sorted(changes)
        ):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(**changes)
                .returning(*posts_table.c)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if row is None:
                logfire.warn("Post not found for update", post_id=str(post_id))
                return None

            await self.session.flush()
            return row_to_post(row._asdict())

    @storage_errors
    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def _array_op(self, column: str, fn, post_id: PostId, item_id: UUID) -> None:
        col = posts_table.c[column]
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values({col: fn(col, literal(item_id, PG_UUID(as_uuid=True)))})
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @storage_errors
    async def append_comment(self, post_id: PostId, comment_id: CommentId) -> None:
        """Append to comment_ids in place."""
        await self._array_op("comment_ids", func.array_append, post_id, comment_id)

    @storage_errors
    async def remove_comment(self, post_id: PostId, comment_id: CommentId) -> None:
        """Remove from comment_ids in place."""
        await self._array_op("comment_ids", func.array_remove, post_id, comment_id)

    @storage_errors
    async def append_like(self, post_id: PostId, like_id: LikeId) -> None:
        """Append to like_ids in place."""
        await self._array_op("like_ids", func.array_append, post_id, like_id)

    @storage_errors
    async def remove_like(self, post_id: PostId, like_id: LikeId) -> None:
        """Remove from like_ids in place."""
        await self._array_op("like_ids", func.array_remove, post_id, like_id)
