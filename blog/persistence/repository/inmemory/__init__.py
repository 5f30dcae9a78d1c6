"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .like import InMemoryLikeRepository
from .post import InMemoryPostRepository
from .taxonomy import InMemoryCategoryRepository, InMemoryTagRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCategoryRepository",
    "InMemoryCommentRepository",
    "InMemoryLikeRepository",
    "InMemoryPostRepository",
    "InMemoryTagRepository",
    "InMemoryUserRepository",
]
