"""In-memory post repository for testing."""

from typing import Optional
from uuid import UUID

from blog.domain.model import Post
from blog.domain.repository import PostRepository
from blog.domain.value import CommentId, LikeId, PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Field writes re-read the stored post with no await in between, so they
    behave like single-row updates.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self, limit: int = 5, offset: int = 0) -> list[Post]:
        """Find a page of posts, newest first."""
        posts = sorted(
            reversed(list(self._posts.values())),
            key=lambda p: p.created_at,
            reverse=True,
        )
        return posts[offset : offset + limit]

    async def count(self) -> int:
        """Count all posts."""
        return len(self._posts)

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._posts[post.id] = post
        return post

    async def update_by_id(self, post_id: PostId, changes: dict) -> Optional[Post]:
        """Update only the given fields."""
        post = self._posts.get(post_id)
        if not post:
            return None
        updated = post.model_copy(update=changes)
        self._posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._posts.pop(post_id, None)

    async def append_comment(self, post_id: PostId, comment_id: CommentId) -> None:
        """Append a comment id."""
        self._edit_list(post_id, "comment_ids", lambda ids: [*ids, comment_id])

    async def remove_comment(self, post_id: PostId, comment_id: CommentId) -> None:
        """Remove a comment id."""
        self._edit_list(
            post_id, "comment_ids", lambda ids: [i for i in ids if i != comment_id]
        )

    async def append_like(self, post_id: PostId, like_id: LikeId) -> None:
        """Append a like id."""
        self._edit_list(post_id, "like_ids", lambda ids: [*ids, like_id])

    async def remove_like(self, post_id: PostId, like_id: LikeId) -> None:
        """Remove a like id."""
        self._edit_list(
            post_id, "like_ids", lambda ids: [i for i in ids if i != like_id]
        )

    def referenced_ids(self, field: str) -> set[UUID]:
        """Every id found in the given reference list across all posts."""
        return {i for post in self._posts.values() for i in getattr(post, field)}

    def _edit_list(self, post_id: PostId, field: str, edit) -> None:
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(
                update={field: edit(getattr(post, field))}
            )
