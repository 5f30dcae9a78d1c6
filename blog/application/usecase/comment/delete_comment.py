"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    message: str


class DeleteCommentUseCase:
    """Use case for deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        comment_id = CommentId(UUID(request.comment_id))

        await self.comment_service.delete_comment(comment_id, UserId(request.user_id))

        return DeleteCommentResponse(message="Comment deleted successfully")
