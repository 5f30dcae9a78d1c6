"""List posts use case."""

import logfire
from pydantic import BaseModel, Field

from blog.application.usecase.common import PostView, build_post_views
from blog.config import PaginationSettings
from blog.domain.error import ValidationError
from blog.domain.service import PostService, TaxonomyService, UserService


class ListPostsRequest(BaseModel):
    """List posts request."""

    page: int = Field(default=1, ge=1)
    # None means the configured default page size
    results_per_page: int | None = Field(default=None, ge=1)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostView]
    total_pages: int
    current_page: int


class ListPostsUseCase:
    """Use case for listing posts page by page."""

    def __init__(
        self,
        post_service: PostService,
        taxonomy_service: TaxonomyService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            taxonomy_service: Taxonomy domain service
            user_service: User domain service
            pagination_settings: Default and maximum page size
        """
        self.post_service = post_service
        self.taxonomy_service = taxonomy_service
        self.user_service = user_service
        self.pagination_settings = pagination_settings

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: Page number and page size

        Returns:
            The requested page and the total number of pages

        Raises:
            ValidationError: If the page size exceeds the configured maximum
        """
        page_size = (
            request.results_per_page or self.pagination_settings.default_page_size
        )
        if page_size > self.pagination_settings.max_page_size:
            raise ValidationError(
                f"results_per_page must be at most "
                f"{self.pagination_settings.max_page_size}"
            )

        with logfire.span(
            "list_posts.execute", page=request.page, results_per_page=page_size
        ):
            page = await self.post_service.list_posts(
                page=request.page, page_size=page_size
            )

            views = await build_post_views(
                page.posts, self.taxonomy_service, self.user_service
            )

            return ListPostsResponse(
                posts=views,
                total_pages=page.total_pages,
                current_page=page.current_page,
            )
