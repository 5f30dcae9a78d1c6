"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict

from blog.domain.model import Category, Comment, Like, Post, Tag, User
from blog.domain.value import (
    CategoryId,
    CommentId,
    LikeId,
    PostId,
    TagId,
    TaxonomyName,
    UserId,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(row["id"]),
        name=row["name"],
        email=row.get("email"),
        created_at=row["created_at"],
    )


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        content=row["content"],
        author_id=UserId(row["author_id"]),
        tag_ids=[TagId(i) for i in row.get("tag_ids") or []],
        category_ids=[CategoryId(i) for i in row.get("category_ids") or []],
        comment_ids=[CommentId(i) for i in row.get("comment_ids") or []],
        like_ids=[LikeId(i) for i in row.get("like_ids") or []],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        author_id=UserId(row["author_id"]),
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(row["id"]),
        post_id=PostId(row["post_id"]),
        user_id=UserId(row["user_id"]),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict."""
    return like.model_dump()


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(row["id"]),
        name=TaxonomyName(row["name"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_category(row: Dict[str, Any]) -> Category:
    """Convert database row to Category domain model."""
    return Category(
        id=CategoryId(row["id"]),
        name=TaxonomyName(row["name"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
