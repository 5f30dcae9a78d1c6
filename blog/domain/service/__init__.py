"""Domain services."""

from .authorization import authorize
from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .like_service import LikeService
from .orphan_service import OrphanService
from .post_service import PostPage, PostPatch, PostService
from .taxonomy_service import TaxonomyService
from .user_service import UserService

__all__ = [
    "CommentService",
    "JWTService",
    "LikeService",
    "OrphanService",
    "PostPage",
    "PostPatch",
    "PostService",
    "Service",
    "TaxonomyService",
    "UserService",
    "authorize",
]
