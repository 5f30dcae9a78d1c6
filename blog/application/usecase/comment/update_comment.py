"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentService, UserService
from blog.domain.value import CommentId, UserId

from .common import CommentView, to_comment_view


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str


class UpdateCommentResponse(CommentView):
    """Update comment response."""


class UpdateCommentUseCase:
    """Use case for editing a comment's content."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request with comment ID, user ID, and new content

        Returns:
            Updated comment details

        Raises:
            ValueError: If the comment ID is malformed
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If user doesn't own the comment
            ValidationError: If content is blank
        """
        comment_id = CommentId(UUID(request.comment_id))

        updated = await self.comment_service.update_content(
            comment_id, UserId(request.user_id), request.content
        )

        users = await self.user_service.get_users_by_ids([updated.author_id])
        return UpdateCommentResponse(**to_comment_view(updated, users).model_dump())
