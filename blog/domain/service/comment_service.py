"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from blog.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from blog.domain.model.comment import Comment
from blog.domain.repository import CommentRepository, PostRepository
from blog.domain.value import CommentId, PostId, UserId

from .authorization import authorize
from .base import Service


class CommentService(Service):
    """Domain service for comment operations.

    Keeps ``Post.comment_ids`` in step with the Comment rows on both add
    and delete.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository (back-references)
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments for a post, newest first.

        Args:
            post_id: Post ID

        Returns:
            List of comments (empty when the post has none or doesn't exist)
        """
        with logfire.span(
            "comment_service.get_comments_for_post", post_id=str(post_id)
        ):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post",
                post_id=str(post_id),
                count=len(comments),
            )
            return comments

    async def create_comment(
        self, post_id: PostId, author_id: UserId, content: str
    ) -> Comment:
        """Create a comment on a post.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Comment text

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post doesn't exist
            ValidationError: If content is blank
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
        ):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Comment on non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            if not content or not content.strip():
                raise ValidationError("Comment content is required")

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                content=content,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)

            await self.post_repository.append_comment(post_id, saved.id)

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                author_id=str(author_id),
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def update_content(
        self, comment_id: CommentId, actor_id: UserId, content: str
    ) -> Comment:
        """Replace the content of a comment.

        Args:
            comment_id: Comment ID
            actor_id: User performing the edit
            content: New content

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the actor isn't the author
            ValidationError: If content is blank
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            actor_id=str(actor_id),
        ):
            comment = await self._get_owned(comment_id, actor_id, "edit")

            if not content or not content.strip():
                raise ValidationError("Comment content is required")

            updated = comment.model_copy(
                update={"content": content, "updated_at": datetime.now()}
            )
            saved = await self.comment_repository.save(updated)
            logfire.info(
                "Comment content updated",
                comment_id=str(comment_id),
                post_id=str(saved.post_id),
                content_length=len(saved.content),
            )
            return saved

    async def delete_comment(self, comment_id: CommentId, actor_id: UserId) -> None:
        """Delete a comment and drop it from its post's comment list.

        Args:
            comment_id: Comment ID
            actor_id: User performing the deletion

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the actor isn't the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            actor_id=str(actor_id),
        ):
            comment = await self._get_owned(comment_id, actor_id, "delete")

            await self.comment_repository.delete(comment_id)

            await self.post_repository.remove_comment(comment.post_id, comment_id)

            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                post_id=str(comment.post_id),
            )

    async def _get_owned(
        self, comment_id: CommentId, actor_id: UserId, action: str
    ) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment:
            logfire.warn(
                f"Comment {action} on non-existent comment",
                comment_id=str(comment_id),
            )
            raise NotFoundError("Comment", str(comment_id))

        if not authorize(comment.author_id, actor_id):
            logfire.warn(
                f"Unauthorized comment {action}",
                comment_id=str(comment_id),
                author_id=str(comment.author_id),
                actor_id=str(actor_id),
            )
            raise NotAuthorizedError("comment", str(comment_id), str(actor_id))

        return comment
