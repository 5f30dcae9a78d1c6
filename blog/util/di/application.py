"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from blog.application.usecase.like import (
    AddLikeUseCase,
    GetLikesUseCase,
    RemoveLikeUseCase,
)
from blog.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from blog.application.usecase.taxonomy import ListTaxonomyUseCase
from blog.config import PaginationSettings
from blog.domain.service import (
    CommentService,
    LikeService,
    PostService,
    TaxonomyService,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Post use cases
    @provide
    def get_create_post_use_case(
        self,
        post_service: PostService,
        taxonomy_service: TaxonomyService,
        user_service: UserService,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            taxonomy_service=taxonomy_service,
            user_service=user_service,
        )

    @provide
    def get_get_post_use_case(
        self,
        post_service: PostService,
        taxonomy_service: TaxonomyService,
        user_service: UserService,
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_service=post_service,
            taxonomy_service=taxonomy_service,
            user_service=user_service,
        )

    @provide
    def get_list_posts_use_case(
        self,
        post_service: PostService,
        taxonomy_service: TaxonomyService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service,
            taxonomy_service=taxonomy_service,
            user_service=user_service,
            pagination_settings=pagination_settings,
        )

    @provide
    def get_update_post_use_case(
        self,
        post_service: PostService,
        taxonomy_service: TaxonomyService,
        user_service: UserService,
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service,
            taxonomy_service=taxonomy_service,
            user_service=user_service,
        )

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Comment use cases
    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Like use cases
    @provide
    def get_add_like_use_case(self, like_service: LikeService) -> AddLikeUseCase:
        """Provide add like use case."""
        return AddLikeUseCase(like_service=like_service)

    @provide
    def get_remove_like_use_case(self, like_service: LikeService) -> RemoveLikeUseCase:
        """Provide remove like use case."""
        return RemoveLikeUseCase(like_service=like_service)

    @provide
    def get_get_likes_use_case(
        self, like_service: LikeService, user_service: UserService
    ) -> GetLikesUseCase:
        """Provide get likes use case."""
        return GetLikesUseCase(like_service=like_service, user_service=user_service)

    # Taxonomy use cases
    @provide
    def get_list_taxonomy_use_case(
        self, taxonomy_service: TaxonomyService
    ) -> ListTaxonomyUseCase:
        """Provide list tags / categories use case."""
        return ListTaxonomyUseCase(taxonomy_service=taxonomy_service)
