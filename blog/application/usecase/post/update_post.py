"""Update post use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.common import PostView, build_post_views
from blog.domain.service import PostPatch, PostService, TaxonomyService, UserService
from blog.domain.value import PostId, UserId


class UpdatePostRequest(BaseModel):
    """Update post request.

    Fields left as None are not changed. Empty tag/category lists also
    leave the stored references as they are.
    """

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    title: str | None = None
    content: str | None = None
    tags: list[str] | None = None
    categories: list[str] | None = None


class UpdatePostResponse(PostView):
    """Update post response."""


class UpdatePostUseCase:
    """Use case for editing a post."""

    def __init__(
        self,
        post_service: PostService,
        taxonomy_service: TaxonomyService,
        user_service: UserService,
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            taxonomy_service: Taxonomy domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.taxonomy_service = taxonomy_service
        self.user_service = user_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Args:
            request: Update post request with post ID, user ID, and changes

        Returns:
            Updated post details

        Raises:
            ValueError: If the post ID is malformed
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If user doesn't own the post
            ValidationError: If a present field is invalid
        """
        post_id = PostId(UUID(request.post_id))
        user_id = UserId(request.user_id)

        updated = await self.post_service.update(
            post_id,
            user_id,
            PostPatch(
                title=request.title,
                content=request.content,
                tag_names=request.tags,
                category_names=request.categories,
            ),
        )

        [view] = await build_post_views(
            [updated], self.taxonomy_service, self.user_service
        )
        return UpdatePostResponse(**view.model_dump())
