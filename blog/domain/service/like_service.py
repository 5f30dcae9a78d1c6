"""Like domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from blog.domain.error import ConflictError, NotAuthorizedError, NotFoundError
from blog.domain.model.like import Like
from blog.domain.repository import LikeRepository, PostRepository
from blog.domain.value import LikeId, PostId, UserId

from .authorization import authorize
from .base import Service


class LikeService(Service):
    """Domain service for like operations.

    A like is a toggle: at most one row per (post, user). The post's
    ``like_ids`` list mirrors those rows.
    """

    def __init__(
        self,
        like_repository: LikeRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            post_repository: Post repository (back-references)
        """
        self.like_repository = like_repository
        self.post_repository = post_repository

    async def like_post(self, post_id: PostId, user_id: UserId) -> Like:
        """Like a post.

        Args:
            post_id: Post ID
            user_id: User ID

        Returns:
            Created like

        Raises:
            NotFoundError: If the post doesn't exist
            ConflictError: If the user already likes the post
        """
        with logfire.span(
            "like_service.like_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Like on non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            existing = await self.like_repository.find_by_post_and_user(
                post_id, user_id
            )
            if existing:
                logfire.warn(
                    "Duplicate like attempt", user_id=str(user_id), post_id=str(post_id)
                )
                raise ConflictError("You have already liked this post")

            like = Like(
                id=LikeId(uuid4()),
                post_id=post_id,
                user_id=user_id,
                created_at=datetime.now(),
            )

            # Unique (post_id, user_id) catches a concurrent duplicate
            try:
                saved = await self.like_repository.save(like)
            except IntegrityError:
                logfire.warn(
                    "Duplicate like attempt", user_id=str(user_id), post_id=str(post_id)
                )
                raise ConflictError("You have already liked this post")

            await self.post_repository.append_like(post_id, saved.id)

            logfire.info("Post liked", post_id=str(post_id), user_id=str(user_id))
            return saved

    async def unlike_post(self, post_id: PostId, user_id: UserId) -> None:
        """Remove a user's like from a post.

        Args:
            post_id: Post ID
            user_id: User ID

        Raises:
            NotFoundError: If the user doesn't like the post
            NotAuthorizedError: If the found like belongs to someone else
        """
        with logfire.span(
            "like_service.unlike_post", post_id=str(post_id), user_id=str(user_id)
        ):
            like = await self.like_repository.find_by_post_and_user(post_id, user_id)
            if not like:
                logfire.warn(
                    "No like to remove", post_id=str(post_id), user_id=str(user_id)
                )
                raise NotFoundError("Like", f"{post_id}/{user_id}")

            if not authorize(like.user_id, user_id):
                logfire.error(
                    "Like lookup returned another user's like",
                    like_id=str(like.id),
                    owner_id=str(like.user_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("like", str(like.id), str(user_id))

            await self.post_repository.remove_like(post_id, like.id)
            await self.like_repository.delete(like.id)
            logfire.info("Like removed", post_id=str(post_id), user_id=str(user_id))

    async def get_likes_for_post(self, post_id: PostId) -> list[Like]:
        """Get every like on a post.

        Args:
            post_id: Post ID

        Returns:
            List of likes (empty when the post has none or doesn't exist)
        """
        with logfire.span("like_service.get_likes_for_post", post_id=str(post_id)):
            likes = await self.like_repository.find_by_post(post_id)
            logfire.info("Likes retrieved", post_id=str(post_id), count=len(likes))
            return likes
