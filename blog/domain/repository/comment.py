"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.comment import Comment
from blog.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, newest first.

        Args:
            post_id: The post ID

        Returns:
            List of comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment. Deleting an absent comment is a no-op.

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments deleted
        """
        pass
