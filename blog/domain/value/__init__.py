"""Domain value objects for the blog service."""

from blog.domain.value.identifiers import (
    CategoryId,
    CommentId,
    LikeId,
    PostId,
    TagId,
    UserId,
)
from blog.domain.value.types import TaxonomyKind, TaxonomyName

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "LikeId",
    "TagId",
    "CategoryId",
    # Types
    "TaxonomyKind",
    "TaxonomyName",
]
