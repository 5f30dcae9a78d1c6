"""Like entity.

Presence of a Like row is the toggle state: a user has liked a post
exactly when a row for the (post, user) pair exists.
"""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import LikeId, PostId, UserId


class Like(DomainModel):
    """A user's like on a post. At most one per (post_id, user_id)."""

    id: LikeId
    post_id: PostId
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
