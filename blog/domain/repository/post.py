"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.post import Post
from blog.domain.value import CommentId, LikeId, PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 5, offset: int = 0) -> List[Post]:
        """Find a page of posts.

        Args:
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts, newest first
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all posts.

        Returns:
            Total number of posts
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def update_by_id(self, post_id: PostId, changes: dict) -> Optional[Post]:
        """Write only the given fields of a post.

        Args:
            post_id: The post ID
            changes: Field name to new value

        Returns:
            The post as stored after the update, None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post. Deleting an absent post is a no-op.

        Args:
            post_id: The post ID to delete
        """
        pass

    @abstractmethod
    async def append_comment(self, post_id: PostId, comment_id: CommentId) -> None:
        """Add a comment id to the end of the post's comment list.

        Only the comment list is written. A missing post is a no-op.

        Args:
            post_id: The post ID
            comment_id: The comment ID
        """
        pass

    @abstractmethod
    async def remove_comment(self, post_id: PostId, comment_id: CommentId) -> None:
        """Drop a comment id from the post's comment list.

        Args:
            post_id: The post ID
            comment_id: The comment ID
        """
        pass

    @abstractmethod
    async def append_like(self, post_id: PostId, like_id: LikeId) -> None:
        """Add a like id to the end of the post's like list.

        Args:
            post_id: The post ID
            like_id: The like ID
        """
        pass

    @abstractmethod
    async def remove_like(self, post_id: PostId, like_id: LikeId) -> None:
        """Drop a like id from the post's like list.

        Args:
            post_id: The post ID
            like_id: The like ID
        """
        pass
