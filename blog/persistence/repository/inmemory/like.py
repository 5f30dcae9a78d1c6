"""In-memory like repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from blog.domain.model import Like
from blog.domain.repository import LikeRepository
from blog.domain.value import LikeId, PostId, UserId


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: list[Like] = []

    async def find_by_id(self, like_id: LikeId) -> Optional[Like]:
        """Find a like by ID."""
        for like in self._likes:
            if like.id == like_id:
                return like
        return None

    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Like]:
        """Find a like by post and user."""
        for like in self._likes:
            if like.post_id == post_id and like.user_id == user_id:
                return like
        return None

    async def find_by_post(self, post_id: PostId) -> list[Like]:
        """Find all likes on a post."""
        return [like for like in self._likes if like.post_id == post_id]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        return len(await self.find_by_post(post_id))

    async def save(self, like: Like) -> Like:
        """Save a like.

        Raises:
            IntegrityError: If like already exists (duplicate)
        """
        if await self.find_by_post_and_user(like.post_id, like.user_id):
            raise IntegrityError("Duplicate like", None, Exception())

        self._likes.append(like)
        return like

    async def delete(self, like_id: LikeId) -> None:
        """Delete a like."""
        self._likes = [like for like in self._likes if like.id != like_id]

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every like on a post."""
        before = len(self._likes)
        self._likes = [like for like in self._likes if like.post_id != post_id]
        return before - len(self._likes)
