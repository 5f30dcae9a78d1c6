"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentService, UserService
from blog.domain.value import PostId

from .common import CommentView, to_comment_view


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentView]


class GetCommentsUseCase:
    """Use case for listing a post's comments, newest first."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request

        Returns:
            Comments on the post (possibly empty)
        """
        post_id = PostId(UUID(request.post_id))

        comments = await self.comment_service.get_comments_for_post(post_id)
        users = await self.user_service.get_users_by_ids(
            [comment.author_id for comment in comments]
        )

        return GetCommentsResponse(
            comments=[to_comment_view(comment, users) for comment in comments]
        )
