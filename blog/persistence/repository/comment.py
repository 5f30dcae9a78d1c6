"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, PostId
from blog.persistence.error import storage_errors
from blog.persistence.mappers import comment_to_dict, row_to_comment
from blog.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @storage_errors
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    @storage_errors
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    @storage_errors
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update content)."""
        comment_dict = comment_to_dict(comment)
        stmt = insert(comments_table).values(**comment_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[comments_table.c.id],
            set_={
                "content": comment_dict["content"],
                "updated_at": comment_dict["updated_at"],
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    @storage_errors
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()

    @storage_errors
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post."""
        stmt = delete(comments_table).where(comments_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
