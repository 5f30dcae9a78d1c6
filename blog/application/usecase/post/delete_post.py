"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import PostService
from blog.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeletePostResponse(BaseModel):
    """Delete post response."""

    message: str


class DeletePostUseCase:
    """Use case for deleting a post with its comments and likes."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            ValueError: If the post ID is malformed
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If user doesn't own the post
        """
        post_id = PostId(UUID(request.post_id))

        await self.post_service.delete(post_id, UserId(request.user_id))

        return DeletePostResponse(message="Post deleted successfully")
