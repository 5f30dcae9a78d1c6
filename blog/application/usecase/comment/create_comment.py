"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentService, UserService
from blog.domain.value import PostId, UserId

from .common import CommentView, to_comment_view


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    content: str
    author_id: str  # From authenticated user


class CreateCommentResponse(CommentView):
    """Create comment response."""


class CreateCommentUseCase:
    """Use case for adding a comment to a post."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service (author identity)
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment with its author resolved

        Raises:
            ValueError: If the post ID is malformed
            NotFoundError: If the post doesn't exist
            ValidationError: If content is blank
        """
        post_id = PostId(UUID(request.post_id))
        author_id = UserId(request.author_id)

        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author_id=author_id,
            content=request.content,
        )

        users = await self.user_service.get_users_by_ids([author_id])
        return CreateCommentResponse(**to_comment_view(comment, users).model_dump())
