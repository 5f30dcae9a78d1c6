"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.common import PostView, build_post_views
from blog.domain.service import PostService, TaxonomyService, UserService
from blog.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string


class GetPostResponse(PostView):
    """Get post response."""

    like_count: int


class GetPostUseCase:
    """Use case for getting a single post with its like count."""

    def __init__(
        self,
        post_service: PostService,
        taxonomy_service: TaxonomyService,
        user_service: UserService,
    ) -> None:
        self.post_service = post_service
        self.taxonomy_service = taxonomy_service
        self.user_service = user_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            ValueError: If the post ID is malformed
            NotFoundError: If the post doesn't exist
        """
        post_id = PostId(UUID(request.post_id))

        post, like_count = await self.post_service.get(post_id)

        [view] = await build_post_views(
            [post], self.taxonomy_service, self.user_service
        )
        return GetPostResponse(**view.model_dump(), like_count=like_count)
