"""Post aggregate root.

A post owns its comment and like back-reference lists and points at the
shared taxonomy (tags and categories) it is filed under.
"""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import CategoryId, CommentId, LikeId, PostId, TagId, UserId


class Post(DomainModel):
    """Post aggregate root.

    Invariants:
    - author_id never changes after creation
    - tag_ids/category_ids reference existing taxonomy rows, in the
      order the names were supplied, without repeats
    - comment_ids/like_ids mirror the Comment and Like rows of this post
    """

    id: PostId
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    author_id: UserId
    tag_ids: list[TagId] = Field(default_factory=list)
    category_ids: list[CategoryId] = Field(default_factory=list)
    comment_ids: list[CommentId] = Field(default_factory=list)
    like_ids: list[LikeId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
