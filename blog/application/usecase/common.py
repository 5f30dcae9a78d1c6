"""Response building blocks shared by several use cases."""

from datetime import datetime

from pydantic import BaseModel

from blog.domain.model.post import Post
from blog.domain.model.user import User
from blog.domain.service import TaxonomyService, UserService
from blog.domain.value import TaxonomyKind, UserId


class UserSummary(BaseModel):
    """Displayable identity of an author or liker."""

    user_id: str
    name: str | None = None
    email: str | None = None


class PostView(BaseModel):
    """Post as returned to clients, with taxonomy names and author resolved."""

    post_id: str
    title: str
    content: str
    author: UserSummary
    tags: list[str]
    categories: list[str]
    comment_ids: list[str]
    like_ids: list[str]
    created_at: datetime
    updated_at: datetime


def summarize_user(user_id: UserId, users: dict[UserId, User]) -> UserSummary:
    """Build a summary for ``user_id``; unknown users keep only their id."""
    user = users.get(user_id)
    if user is None:
        return UserSummary(user_id=str(user_id))
    return UserSummary(user_id=str(user.id), name=user.name, email=user.email)


async def build_post_views(
    posts: list[Post],
    taxonomy_service: TaxonomyService,
    user_service: UserService,
) -> list[PostView]:
    """Resolve tags, categories and authors for a batch of posts."""
    users = await user_service.get_users_by_ids([post.author_id for post in posts])

    views = []
    for post in posts:
        tags = await taxonomy_service.get_by_ids(list(post.tag_ids), TaxonomyKind.TAG)
        categories = await taxonomy_service.get_by_ids(
            list(post.category_ids), TaxonomyKind.CATEGORY
        )
        views.append(
            PostView(
                post_id=str(post.id),
                title=post.title,
                content=post.content,
                author=summarize_user(post.author_id, users),
                tags=[tag.name.root for tag in tags],
                categories=[category.name.root for category in categories],
                comment_ids=[str(c) for c in post.comment_ids],
                like_ids=[str(like) for like in post.like_ids],
                created_at=post.created_at,
                updated_at=post.updated_at,
            )
        )
    return views
