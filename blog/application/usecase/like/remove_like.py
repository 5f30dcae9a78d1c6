"""Remove like use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import LikeService
from blog.domain.value import PostId, UserId


class RemoveLikeRequest(BaseModel):
    """Remove like request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class RemoveLikeResponse(BaseModel):
    """Remove like response."""

    message: str


class RemoveLikeUseCase:
    """Use case for removing a like from a post."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize remove like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: RemoveLikeRequest) -> RemoveLikeResponse:
        """Execute remove like flow.

        Raises:
            ValueError: If the post ID is malformed
            NotFoundError: If the user doesn't like the post
        """
        post_id = PostId(UUID(request.post_id))

        await self.like_service.unlike_post(post_id, UserId(request.user_id))

        return RemoveLikeResponse(message="Like removed successfully")
