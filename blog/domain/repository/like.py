"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.like import Like
from blog.domain.value import LikeId, PostId, UserId


class LikeRepository(ABC):
    """Repository for Like entity.

    Defines the contract for like persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, like_id: LikeId) -> Optional[Like]:
        """Find a like by ID.

        Args:
            like_id: The like's unique identifier

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Like]:
        """Find a user's like on a post.

        Args:
            post_id: The post ID
            user_id: The user's ID

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Like]:
        """Find all likes on a post.

        Args:
            post_id: The post ID

        Returns:
            List of likes on the post
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post.

        Args:
            post_id: The post ID

        Returns:
            Number of likes
        """
        pass

    @abstractmethod
    async def save(self, like: Like) -> Like:
        """Save a like (create).

        This may raise an error if a like already exists for this
        post/user combination (unique constraint violation).

        Args:
            like: The like to save

        Returns:
            The saved like

        Raises:
            IntegrityError: If like already exists (duplicate)
        """
        pass

    @abstractmethod
    async def delete(self, like_id: LikeId) -> None:
        """Delete a like. Deleting an absent like is a no-op.

        Args:
            like_id: The like ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every like on a post.

        Args:
            post_id: The post ID

        Returns:
            Number of likes deleted
        """
        pass
