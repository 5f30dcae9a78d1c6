"""Create post use case."""

from pydantic import BaseModel, Field

from blog.application.usecase.common import PostView, build_post_views
from blog.domain.service import PostService, TaxonomyService, UserService
from blog.domain.value import UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    tags: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    author_id: str  # From authenticated user


class CreatePostResponse(PostView):
    """Create post response."""


class CreatePostUseCase:
    """Use case for creating a post."""

    def __init__(
        self,
        post_service: PostService,
        taxonomy_service: TaxonomyService,
        user_service: UserService,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            taxonomy_service: Taxonomy domain service (tag/category names)
            user_service: User domain service (author identity)
        """
        self.post_service = post_service
        self.taxonomy_service = taxonomy_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            ValidationError: If title or content is blank, or a name is invalid
        """
        post = await self.post_service.create(
            author_id=UserId(request.author_id),
            title=request.title,
            content=request.content,
            tag_names=request.tags,
            category_names=request.categories,
        )

        [view] = await build_post_views(
            [post], self.taxonomy_service, self.user_service
        )
        return CreatePostResponse(**view.model_dump())
