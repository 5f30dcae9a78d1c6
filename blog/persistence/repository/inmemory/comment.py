"""In-memory comment repository for testing."""

from typing import Optional

from blog.domain.model import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find comments on a post, newest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        # Later inserts win ties on created_at
        return sorted(reversed(comments), key=lambda c: c.created_at, reverse=True)

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._comments.pop(comment_id, None)

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post."""
        doomed = [cid for cid, c in self._comments.items() if c.post_id == post_id]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)
