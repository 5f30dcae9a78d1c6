"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import AuthSettings
from blog.domain.repository import (
    CategoryRepository,
    CommentRepository,
    LikeRepository,
    PostRepository,
    TagRepository,
    UserRepository,
)
from blog.domain.service import (
    CommentService,
    JWTService,
    LikeService,
    OrphanService,
    PostService,
    TaxonomyService,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT verification domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_taxonomy_service(
        self,
        tag_repository: TagRepository,
        category_repository: CategoryRepository,
    ) -> TaxonomyService:
        """Provide taxonomy domain service."""
        return TaxonomyService(
            tag_repository=tag_repository,
            category_repository=category_repository,
        )

    @provide
    def get_orphan_service(self, taxonomy_service: TaxonomyService) -> OrphanService:
        """Provide orphan collection domain service."""
        return OrphanService(taxonomy_service=taxonomy_service)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
        taxonomy_service: TaxonomyService,
        orphan_service: OrphanService,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            comment_repository=comment_repository,
            like_repository=like_repository,
            taxonomy_service=taxonomy_service,
            orphan_service=orphan_service,
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, post_repository: PostRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, post_repository=post_repository
        )

    @provide
    def get_like_service(
        self, like_repository: LikeRepository, post_repository: PostRepository
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository, post_repository=post_repository
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)
