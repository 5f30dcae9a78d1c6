"""Add like use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import LikeService
from blog.domain.value import PostId, UserId


class AddLikeRequest(BaseModel):
    """Add like request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class AddLikeResponse(BaseModel):
    """Add like response."""

    like_id: str
    post_id: str
    user_id: str
    created_at: datetime


class AddLikeUseCase:
    """Use case for liking a post."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize add like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: AddLikeRequest) -> AddLikeResponse:
        """Execute add like flow.

        Args:
            request: Add like request

        Returns:
            The created like

        Raises:
            ValueError: If the post ID is malformed
            NotFoundError: If the post doesn't exist
            ConflictError: If the user already likes the post
        """
        post_id = PostId(UUID(request.post_id))

        like = await self.like_service.like_post(post_id, UserId(request.user_id))

        return AddLikeResponse(
            like_id=str(like.id),
            post_id=str(like.post_id),
            user_id=str(like.user_id),
            created_at=like.created_at,
        )
