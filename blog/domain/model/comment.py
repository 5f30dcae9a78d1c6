"""Comment entity."""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment on a post.

    Only ``content`` is mutable, and only by the author.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
