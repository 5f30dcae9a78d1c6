"""Post domain service (post lifecycle)."""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from blog.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from blog.domain.model.post import Post
from blog.domain.repository import CommentRepository, LikeRepository, PostRepository
from blog.domain.value import CategoryId, PostId, TagId, TaxonomyKind, UserId

from .authorization import authorize
from .base import Service
from .orphan_service import OrphanService
from .taxonomy_service import TaxonomyService


@dataclass(frozen=True)
class PostPatch:
    """Partial update to a post. ``None`` means the field is not present."""

    title: Optional[str] = None
    content: Optional[str] = None
    tag_names: Optional[list[str]] = None
    category_names: Optional[list[str]] = None


@dataclass(frozen=True)
class PostPage:
    """One page of posts."""

    posts: list[Post]
    total_pages: int
    current_page: int


def _unique(ids):
    """Drop repeated ids, keeping first-seen order."""
    return list(dict.fromkeys(ids))


class PostService(Service):
    """Domain service for the post lifecycle."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
        taxonomy_service: TaxonomyService,
        orphan_service: OrphanService,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository (cascade delete)
            like_repository: Like repository (cascade delete, like counts)
            taxonomy_service: Taxonomy service (name resolution)
            orphan_service: Orphan service (sweep after delete)
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.like_repository = like_repository
        self.taxonomy_service = taxonomy_service
        self.orphan_service = orphan_service

    async def create(
        self,
        author_id: UserId,
        title: str,
        content: str,
        tag_names: list[str] | None = None,
        category_names: list[str] | None = None,
    ) -> Post:
        """Create a post, resolving its tags and categories first.

        Args:
            author_id: Author user ID
            title: Post title
            content: Post body
            tag_names: Tag names (created if missing)
            category_names: Category names (created if missing)

        Returns:
            Created post

        Raises:
            ValidationError: If title or content is missing or blank
        """
        with logfire.span(
            "post_service.create", author_id=str(author_id), title=title
        ):
            if not title or not title.strip():
                logfire.warn("Post created without title", author_id=str(author_id))
                raise ValidationError("Post title is required")
            if not content or not content.strip():
                logfire.warn("Post created without content", author_id=str(author_id))
                raise ValidationError("Post content is required")

            tag_ids = await self.taxonomy_service.resolve(
                tag_names or [], TaxonomyKind.TAG
            )
            category_ids = await self.taxonomy_service.resolve(
                category_names or [], TaxonomyKind.CATEGORY
            )

            now = datetime.now()
            post = Post(
                id=PostId(uuid4()),
                title=title,
                content=content,
                author_id=author_id,
                tag_ids=[TagId(i) for i in _unique(tag_ids)],
                category_ids=[CategoryId(i) for i in _unique(category_ids)],
                comment_ids=[],
                like_ids=[],
                created_at=now,
                updated_at=now,
            )

            saved = await self.post_repository.save(post)
            logfire.info(
                "Post created",
                post_id=str(saved.id),
                author_id=str(author_id),
                tags=len(saved.tag_ids),
                categories=len(saved.category_ids),
            )
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get(self, post_id: PostId) -> tuple[Post, int]:
        """Get a post together with its like count.

        The count is taken from the Like rows at read time.

        Args:
            post_id: Post ID

        Returns:
            Tuple of (post, like_count)

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post = await self.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", str(post_id))

        like_count = await self.like_repository.count_by_post(post_id)
        return post, like_count

    async def list_posts(self, page: int = 1, page_size: int = 5) -> PostPage:
        """List one page of posts.

        Args:
            page: 1-based page number
            page_size: Posts per page

        Returns:
            The page with total page count

        Raises:
            ValidationError: If page or page_size is below 1
        """
        with logfire.span(
            "post_service.list_posts", page=page, page_size=page_size
        ):
            if page < 1 or page_size < 1:
                raise ValidationError("page and page size must be positive")

            posts = await self.post_repository.find_all(
                limit=page_size, offset=(page - 1) * page_size
            )
            total = await self.post_repository.count()
            total_pages = math.ceil(total / page_size)

            logfire.info(
                "Posts listed",
                page=page,
                returned=len(posts),
                total=total,
                total_pages=total_pages,
            )
            return PostPage(posts=posts, total_pages=total_pages, current_page=page)

    async def update(self, post_id: PostId, actor_id: UserId, patch: PostPatch) -> Post:
        """Apply a partial update to a post.

        Ownership is checked before the patch is looked at. Non-empty
        tag/category lists replace the stored references; empty lists leave
        them unchanged. Only the changed fields are written, so
        comment and like lists maintained elsewhere are left alone.

        Args:
            post_id: Post ID
            actor_id: User performing the update
            patch: Fields to change

        Returns:
            Updated post

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the actor isn't the author
            ValidationError: If a present title or content is blank
        """
        with logfire.span(
            "post_service.update", post_id=str(post_id), actor_id=str(actor_id)
        ):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Update of non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            if not authorize(post.author_id, actor_id):
                logfire.warn(
                    "Unauthorized post update",
                    post_id=str(post_id),
                    author_id=str(post.author_id),
                    actor_id=str(actor_id),
                )
                raise NotAuthorizedError("post", str(post_id), str(actor_id))

            changes: dict = {}
            if patch.title is not None:
                if not patch.title.strip():
                    raise ValidationError("Post title must not be blank")
                changes["title"] = patch.title
            if patch.content is not None:
                if not patch.content.strip():
                    raise ValidationError("Post content must not be blank")
                changes["content"] = patch.content
            if patch.tag_names:
                tag_ids = await self.taxonomy_service.resolve(
                    patch.tag_names, TaxonomyKind.TAG
                )
                changes["tag_ids"] = [TagId(i) for i in _unique(tag_ids)]
            if patch.category_names:
                category_ids = await self.taxonomy_service.resolve(
                    patch.category_names, TaxonomyKind.CATEGORY
                )
                changes["category_ids"] = [
                    CategoryId(i) for i in _unique(category_ids)
                ]
            changes["updated_at"] = datetime.now()

            saved = await self.post_repository.update_by_id(post_id, changes)
            if not saved:
                raise NotFoundError("Post", str(post_id))
            logfire.info(
                "Post updated",
                post_id=str(post_id),
                fields=sorted(k for k in changes if k != "updated_at"),
            )
            return saved

    async def delete(self, post_id: PostId, actor_id: UserId) -> None:
        """Delete a post and everything that depends on it.

        Steps run in order: comments, likes, the post, then tag and
        category sweeps. Each step is a no-op on rows that are already gone,
        so calling delete again after a partial failure finishes the job.
        Sweep failures are logged and don't fail the deletion.

        Args:
            post_id: Post ID
            actor_id: User performing the deletion

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the actor isn't the author
        """
        with logfire.span(
            "post_service.delete", post_id=str(post_id), actor_id=str(actor_id)
        ):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Delete of non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            if not authorize(post.author_id, actor_id):
                logfire.warn(
                    "Unauthorized post delete",
                    post_id=str(post_id),
                    author_id=str(post.author_id),
                    actor_id=str(actor_id),
                )
                raise NotAuthorizedError("post", str(post_id), str(actor_id))

            comments_deleted = await self.comment_repository.delete_by_post(post_id)
            likes_deleted = await self.like_repository.delete_by_post(post_id)
            await self.post_repository.delete(post_id)

            logfire.info(
                "Post deleted",
                post_id=str(post_id),
                comments_deleted=comments_deleted,
                likes_deleted=likes_deleted,
            )

            for kind in (TaxonomyKind.TAG, TaxonomyKind.CATEGORY):
                try:
                    await self.orphan_service.sweep(kind)
                except Exception as e:
                    logfire.error(
                        "Orphan sweep failed after post delete",
                        post_id=str(post_id),
                        kind=kind.value,
                        error=str(e),
                    )
