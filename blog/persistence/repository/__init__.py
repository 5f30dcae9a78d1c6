"""PostgreSQL repository implementations."""

from blog.persistence.repository.comment import PostgresCommentRepository
from blog.persistence.repository.like import PostgresLikeRepository
from blog.persistence.repository.post import PostgresPostRepository
from blog.persistence.repository.taxonomy import (
    PostgresCategoryRepository,
    PostgresTagRepository,
)
from blog.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
    "PostgresTagRepository",
    "PostgresCategoryRepository",
]
