"""Domain model entities for the blog service."""

from blog.domain.model.comment import Comment
from blog.domain.model.like import Like
from blog.domain.model.post import Post
from blog.domain.model.taxonomy import Category, Tag
from blog.domain.model.user import User

__all__ = [
    "Post",
    "Comment",
    "Like",
    "Tag",
    "Category",
    "User",
]
