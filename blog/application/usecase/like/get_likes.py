"""Get likes use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.common import UserSummary, summarize_user
from blog.domain.service import LikeService, UserService
from blog.domain.value import PostId


class LikeView(BaseModel):
    """Like with the liking user resolved."""

    like_id: str
    post_id: str
    user: UserSummary
    created_at: datetime


class GetLikesRequest(BaseModel):
    """Get likes request."""

    post_id: str  # UUID string


class GetLikesResponse(BaseModel):
    """Get likes response."""

    likes: list[LikeView]


class GetLikesUseCase:
    """Use case for listing who liked a post."""

    def __init__(self, like_service: LikeService, user_service: UserService) -> None:
        """Initialize get likes use case.

        Args:
            like_service: Like domain service
            user_service: User domain service
        """
        self.like_service = like_service
        self.user_service = user_service

    async def execute(self, request: GetLikesRequest) -> GetLikesResponse:
        """Execute get likes flow.

        Args:
            request: Get likes request

        Returns:
            Every like on the post
        """
        post_id = PostId(UUID(request.post_id))

        likes = await self.like_service.get_likes_for_post(post_id)
        users = await self.user_service.get_users_by_ids([like.user_id for like in likes])

        return GetLikesResponse(
            likes=[
                LikeView(
                    like_id=str(like.id),
                    post_id=str(like.post_id),
                    user=summarize_user(like.user_id, users),
                    created_at=like.created_at,
                )
                for like in likes
            ]
        )
