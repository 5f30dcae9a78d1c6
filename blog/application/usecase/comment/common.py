"""Comment response model shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from blog.application.usecase.common import UserSummary, summarize_user
from blog.domain.model.comment import Comment
from blog.domain.model.user import User
from blog.domain.value import UserId


class CommentView(BaseModel):
    """Comment as returned to clients, with its author resolved."""

    comment_id: str
    post_id: str
    content: str
    author: UserSummary
    created_at: datetime
    updated_at: datetime


def to_comment_view(comment: Comment, users: dict[UserId, User]) -> CommentView:
    return CommentView(
        comment_id=str(comment.id),
        post_id=str(comment.post_id),
        content=comment.content,
        author=summarize_user(comment.author_id, users),
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )
