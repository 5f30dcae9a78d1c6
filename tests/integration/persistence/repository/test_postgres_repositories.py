"""Integration tests for the PostgreSQL repositories.

Requires a migrated database (``python scripts/run_migrations.py``).
Run with ``pytest -m integration``.
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
import pytest_asyncio
from dishka import AsyncContainer
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Comment, Like, Post
from blog.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
    TagRepository,
)
from blog.domain.service import OrphanService, PostService
from blog.domain.value import (
    CommentId,
    LikeId,
    PostId,
    TaxonomyKind,
    TaxonomyName,
    UserId,
)
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real PostgreSQL
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env):
    """Clean database before each test."""
    session = await integration_env.get(AsyncSession)
    await session.execute(
        text("TRUNCATE TABLE likes, comments, posts, tags, categories CASCADE")
    )
    await session.commit()

    yield


def make_post(author_id: str = "user-1", **overrides) -> Post:
    now = datetime.now(timezone.utc)
    fields = dict(
        id=PostId(uuid4()),
        title="Title",
        content="Content",
        author_id=UserId(author_id),
        created_at=now,
        updated_at=now,
    )
    fields.update(overrides)
    return Post(**fields)


class TestTaxonomyRepositoryIntegration:
    @pytest.mark.asyncio
    async def test_get_or_create_returns_same_row(
        self, integration_env: AsyncContainer
    ):
        # Arrange
        tag_repo = await integration_env.get(TagRepository)

        # Act
        first = await tag_repo.get_or_create(TaxonomyName("postgres"))
        second = await tag_repo.get_or_create(TaxonomyName("postgres"))

        # Assert
        assert first.id == second.id
        assert len(await tag_repo.find_all()) == 1


class TestPostRepositoryIntegration:
    @pytest.mark.asyncio
    async def test_save_round_trips_reference_arrays(
        self, integration_env: AsyncContainer
    ):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        tag_repo = await integration_env.get(TagRepository)
        tag = await tag_repo.get_or_create(TaxonomyName("db"))
        post = make_post(tag_ids=[tag.id])

        # Act
        await post_repo.save(post)
        found = await post_repo.find_by_id(post.id)

        # Assert
        assert found is not None
        assert found.tag_ids == [tag.id]
        assert await tag_repo.delete_unreferenced() == []

    @pytest.mark.asyncio
    async def test_find_all_is_newest_first(self, integration_env: AsyncContainer):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        older = make_post(created_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
        newer = make_post(created_at=datetime(2025, 1, 1, tzinfo=timezone.utc))
        await post_repo.save(older)
        await post_repo.save(newer)

        # Act
        posts = await post_repo.find_all(limit=5, offset=0)

        # Assert
        assert [p.id for p in posts] == [newer.id, older.id]
        assert await post_repo.count() == 2

    @pytest.mark.asyncio
    async def test_field_writes_leave_other_columns_alone(
        self, integration_env: AsyncContainer
    ):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        post = await post_repo.save(make_post(title="Old"))
        comment_id = CommentId(uuid4())
        like_id = LikeId(uuid4())

        # Act
        await post_repo.append_comment(post.id, comment_id)
        await post_repo.append_like(post.id, like_id)
        updated = await post_repo.update_by_id(post.id, {"title": "New"})

        # Assert
        assert updated is not None
        assert updated.title == "New"
        assert updated.comment_ids == [comment_id]
        assert updated.like_ids == [like_id]

        await post_repo.remove_comment(post.id, comment_id)
        await post_repo.remove_like(post.id, like_id)
        found = await post_repo.find_by_id(post.id)
        assert found.comment_ids == []
        assert found.like_ids == []
        assert found.title == "New"

    @pytest.mark.asyncio
    async def test_update_missing_post_returns_none(
        self, integration_env: AsyncContainer
    ):
        post_repo = await integration_env.get(PostRepository)

        assert await post_repo.update_by_id(PostId(uuid4()), {"title": "x"}) is None


class TestLikeRepositoryIntegration:
    @pytest.mark.asyncio
    async def test_duplicate_like_violates_unique_constraint(
        self, integration_env: AsyncContainer
    ):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        like_repo = await integration_env.get(LikeRepository)
        post = await post_repo.save(make_post())
        now = datetime.now(timezone.utc)
        await like_repo.save(
            Like(id=LikeId(uuid4()), post_id=post.id, user_id=UserId("u"), created_at=now)
        )

        # Act & Assert
        with pytest.raises(IntegrityError):
            await like_repo.save(
                Like(
                    id=LikeId(uuid4()),
                    post_id=post.id,
                    user_id=UserId("u"),
                    created_at=now,
                )
            )

        # The savepoint keeps the session usable
        assert await like_repo.count_by_post(post.id) == 1


class TestPostDeleteIntegration:
    @pytest.mark.asyncio
    async def test_delete_cascades_in_postgres(self, integration_env: AsyncContainer):
        # Arrange
        post_service = await integration_env.get(PostService)
        comment_repo = await integration_env.get(CommentRepository)
        tag_repo = await integration_env.get(TagRepository)
        post = await post_service.create(
            UserId("author"), "T", "C", tag_names=["only-here"]
        )
        now = datetime.now(timezone.utc)
        await comment_repo.save(
            Comment(
                id=CommentId(uuid4()),
                post_id=post.id,
                author_id=UserId("reader"),
                content="hi",
                created_at=now,
                updated_at=now,
            )
        )

        # Act
        await post_service.delete(post.id, UserId("author"))

        # Assert
        assert await comment_repo.find_by_post(post.id) == []
        assert await tag_repo.find_by_name(TaxonomyName("only-here")) is None

    @pytest.mark.asyncio
    async def test_failed_sweep_keeps_post_deletion(
        self, integration_env: AsyncContainer, monkeypatch
    ):
        """A sweep error inside the database only undoes the sweep."""
        # Arrange
        session = await integration_env.get(AsyncSession)
        post_service = await integration_env.get(PostService)
        orphan_service = await integration_env.get(OrphanService)
        post_repo = await integration_env.get(PostRepository)
        tag_repo = await integration_env.get(TagRepository)
        post = await post_service.create(
            UserId("author"), "T", "C", tag_names=["left-behind"]
        )
        await session.commit()
        monkeypatch.setattr(
            tag_repo, "_unreferenced_stmt", lambda: text("SELECT 1 / 0")
        )

        # Act
        await post_service.delete(post.id, UserId("author"))
        await session.commit()

        # Assert
        assert await post_repo.find_by_id(post.id) is None
        assert await tag_repo.find_by_name(TaxonomyName("left-behind")) is not None

        # A later sweep picks up what the failed one left
        monkeypatch.undo()
        assert await orphan_service.sweep(TaxonomyKind.TAG) == 1
