"""User entity.

Users are owned by the external auth service. The blog service only reads
them to show who wrote a post or comment and who liked a post.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import UserId


class User(DomainModel):
    """Read-only projection of an auth-service user."""

    id: UserId
    name: str
    email: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
