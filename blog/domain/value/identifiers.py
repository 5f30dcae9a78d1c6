"""Strongly typed identifiers for blog domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Identity issued by the external auth service; opaque to this service
UserId = NewType("UserId", str)

# Entities owned by this service
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
LikeId = NewType("LikeId", UUID)
TagId = NewType("TagId", UUID)
CategoryId = NewType("CategoryId", UUID)
