"""Unit tests for PostService."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from blog.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    StorageUnavailableError,
    ValidationError,
)
from blog.domain.repository import (
    CategoryRepository,
    CommentRepository,
    LikeRepository,
    PostRepository,
    TagRepository,
)
from blog.domain.service import (
    CommentService,
    LikeService,
    PostPatch,
    PostService,
)
from blog.domain.value import PostId, TaxonomyName, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCreate:
    """Tests for create method."""

    @pytest.mark.asyncio
    async def test_create_post_resolves_taxonomy(self, unit_env, alice):
        """Tags and categories are created and referenced by id."""
        # Arrange
        service = await unit_env.get(PostService)
        tag_repo = await unit_env.get(TagRepository)
        category_repo = await unit_env.get(CategoryRepository)

        # Act
        post = await service.create(
            UserId(alice),
            "Hello",
            "World",
            tag_names=["python", "web"],
            category_names=["tech"],
        )

        # Assert
        python = await tag_repo.find_by_name(TaxonomyName("python"))
        web = await tag_repo.find_by_name(TaxonomyName("web"))
        tech = await category_repo.find_by_name(TaxonomyName("tech"))
        assert post.tag_ids == [python.id, web.id]
        assert post.category_ids == [tech.id]
        assert post.author_id == alice
        assert post.comment_ids == []
        assert post.like_ids == []
        assert post.created_at == post.updated_at

    @pytest.mark.asyncio
    async def test_create_post_without_taxonomy(self, unit_env, alice):
        # Arrange
        service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)

        # Act
        post = await service.create(UserId(alice), "Title", "Body")

        # Assert
        assert post.tag_ids == []
        assert post.category_ids == []
        assert await post_repo.find_by_id(post.id) == post

    @pytest.mark.asyncio
    async def test_create_post_collapses_repeated_names(self, unit_env, alice):
        """A name given twice yields a single reference."""
        # Arrange
        service = await unit_env.get(PostService)

        # Act
        post = await service.create(
            UserId(alice), "T", "C", tag_names=["x", "x", "y"]
        )

        # Assert
        assert len(post.tag_ids) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title,content", [("", "body"), ("  ", "body"), ("t", "")])
    async def test_create_post_requires_title_and_content(
        self, unit_env, alice, title, content
    ):
        # Arrange
        service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)

        # Act & Assert
        with pytest.raises(ValidationError):
            await service.create(UserId(alice), title, content, tag_names=["t"])

        assert await post_repo.count() == 0


class TestGet:
    """Tests for get method."""

    @pytest.mark.asyncio
    async def test_get_returns_like_count(self, unit_env, alice, bob):
        # Arrange
        service = await unit_env.get(PostService)
        like_service = await unit_env.get(LikeService)
        post = await service.create(UserId(alice), "T", "C")
        await like_service.like_post(post.id, UserId(alice))
        await like_service.like_post(post.id, UserId(bob))

        # Act
        found, like_count = await service.get(post.id)

        # Assert
        assert found.id == post.id
        assert like_count == 2

    @pytest.mark.asyncio
    async def test_get_missing_post_raises_not_found(self, unit_env):
        service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await service.get(PostId(uuid4()))


class TestListPosts:
    """Tests for list_posts method."""

    @pytest.mark.asyncio
    async def test_list_posts_pages_newest_first(self, unit_env, alice):
        """Twelve posts at five per page gives three pages."""
        # Arrange
        service = await unit_env.get(PostService)
        created = [
            await service.create(UserId(alice), f"Post {i}", "body")
            for i in range(12)
        ]

        # Act
        first = await service.list_posts(page=1, page_size=5)
        last = await service.list_posts(page=3, page_size=5)

        # Assert
        assert first.total_pages == 3
        assert first.current_page == 1
        assert [p.id for p in first.posts] == [p.id for p in reversed(created)][:5]
        assert len(last.posts) == 2
        assert last.current_page == 3

    @pytest.mark.asyncio
    async def test_list_posts_past_the_end_is_empty(self, unit_env, alice):
        # Arrange
        service = await unit_env.get(PostService)
        await service.create(UserId(alice), "Only", "post")

        # Act
        page = await service.list_posts(page=4, page_size=5)

        # Assert
        assert page.posts == []
        assert page.total_pages == 1

    @pytest.mark.asyncio
    async def test_list_posts_empty_store(self, unit_env):
        service = await unit_env.get(PostService)

        page = await service.list_posts()

        assert page.posts == []
        assert page.total_pages == 0

    @pytest.mark.asyncio
    async def test_list_posts_rejects_non_positive_page(self, unit_env):
        service = await unit_env.get(PostService)

        with pytest.raises(ValidationError):
            await service.list_posts(page=0)
        with pytest.raises(ValidationError):
            await service.list_posts(page=1, page_size=0)


class TestUpdate:
    """Tests for update method."""

    @pytest.mark.asyncio
    async def test_author_can_update_title_only(self, unit_env, alice):
        # Arrange
        service = await unit_env.get(PostService)
        post = await service.create(
            UserId(alice), "Old", "Body", tag_names=["keep"]
        )

        # Act
        updated = await service.update(post.id, UserId(alice), PostPatch(title="New"))

        # Assert
        assert updated.title == "New"
        assert updated.content == "Body"
        assert updated.tag_ids == post.tag_ids
        assert updated.updated_at >= post.updated_at

    @pytest.mark.asyncio
    async def test_non_empty_tags_replace_references(self, unit_env, alice):
        # Arrange
        service = await unit_env.get(PostService)
        tag_repo = await unit_env.get(TagRepository)
        post = await service.create(UserId(alice), "T", "C", tag_names=["a", "b"])

        # Act
        updated = await service.update(
            post.id, UserId(alice), PostPatch(tag_names=["c"])
        )

        # Assert
        c = await tag_repo.find_by_name(TaxonomyName("c"))
        assert updated.tag_ids == [c.id]

    @pytest.mark.asyncio
    async def test_empty_tags_leave_references_unchanged(self, unit_env, alice):
        # Arrange
        service = await unit_env.get(PostService)
        post = await service.create(
            UserId(alice), "T", "C", tag_names=["a"], category_names=["k"]
        )

        # Act
        updated = await service.update(
            post.id, UserId(alice), PostPatch(tag_names=[], category_names=[])
        )

        # Assert
        assert updated.tag_ids == post.tag_ids
        assert updated.category_ids == post.category_ids

    @pytest.mark.asyncio
    async def test_non_author_update_is_rejected_without_change(
        self, unit_env, alice, bob
    ):
        # Arrange
        service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        tag_repo = await unit_env.get(TagRepository)
        post = await service.create(UserId(alice), "Mine", "Body")

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.update(
                post.id, UserId(bob), PostPatch(title="Hijacked", tag_names=["new"])
            )

        stored = await post_repo.find_by_id(post.id)
        assert stored == post
        assert await tag_repo.find_by_name(TaxonomyName("new")) is None

    @pytest.mark.asyncio
    async def test_update_missing_post_raises_not_found(self, unit_env, alice):
        service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await service.update(PostId(uuid4()), UserId(alice), PostPatch(title="x"))

    @pytest.mark.asyncio
    async def test_blank_title_is_rejected(self, unit_env, alice):
        # Arrange
        service = await unit_env.get(PostService)
        post = await service.create(UserId(alice), "T", "C")

        # Act & Assert
        with pytest.raises(ValidationError):
            await service.update(post.id, UserId(alice), PostPatch(title="   "))


class TestDelete:
    """Tests for delete method."""

    @pytest.mark.asyncio
    async def test_delete_cascades_and_sweeps_orphans(self, unit_env, alice, bob):
        """Deleting the only post using a tag removes the tag as well."""
        # Arrange
        service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(LikeRepository)
        tag_repo = await unit_env.get(TagRepository)
        category_repo = await unit_env.get(CategoryRepository)

        post = await service.create(
            UserId(alice), "T", "C", tag_names=["tech"], category_names=["news"]
        )
        comment = await comment_service.create_comment(post.id, UserId(bob), "Nice")
        await like_service.like_post(post.id, UserId(bob))

        # Act
        await service.delete(post.id, UserId(alice))

        # Assert
        assert await post_repo.find_by_id(post.id) is None
        assert await comment_repo.find_by_id(comment.id) is None
        assert await like_repo.find_by_post(post.id) == []
        assert await tag_repo.find_by_name(TaxonomyName("tech")) is None
        assert await category_repo.find_by_name(TaxonomyName("news")) is None

    @pytest.mark.asyncio
    async def test_delete_keeps_taxonomy_shared_with_other_posts(
        self, unit_env, alice
    ):
        # Arrange
        service = await unit_env.get(PostService)
        tag_repo = await unit_env.get(TagRepository)
        doomed = await service.create(
            UserId(alice), "A", "C", tag_names=["shared", "solo"]
        )
        await service.create(UserId(alice), "B", "C", tag_names=["shared"])

        # Act
        await service.delete(doomed.id, UserId(alice))

        # Assert
        assert await tag_repo.find_by_name(TaxonomyName("shared")) is not None
        assert await tag_repo.find_by_name(TaxonomyName("solo")) is None

    @pytest.mark.asyncio
    async def test_non_author_delete_is_rejected(self, unit_env, alice, bob):
        # Arrange
        service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await service.create(UserId(alice), "T", "C")

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.delete(post.id, UserId(bob))

        assert await post_repo.find_by_id(post.id) is not None

    @pytest.mark.asyncio
    async def test_delete_missing_post_raises_not_found(self, unit_env, alice):
        service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await service.delete(PostId(uuid4()), UserId(alice))

    @pytest.mark.asyncio
    async def test_sweep_failure_does_not_fail_delete(self, unit_env, alice):
        # Arrange
        service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await service.create(UserId(alice), "T", "C", tag_names=["t"])
        service.orphan_service.sweep = AsyncMock(side_effect=RuntimeError("boom"))

        # Act
        await service.delete(post.id, UserId(alice))

        # Assert
        assert await post_repo.find_by_id(post.id) is None
        assert service.orphan_service.sweep.await_count == 2

    @pytest.mark.asyncio
    async def test_delete_rerun_finishes_after_partial_failure(
        self, unit_env, alice, bob, monkeypatch
    ):
        """A delete that fails after the cascade can be retried to completion."""
        # Arrange
        service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(LikeRepository)
        tag_repo = await unit_env.get(TagRepository)
        post = await service.create(UserId(alice), "T", "C", tag_names=["partial"])
        comment = await comment_service.create_comment(post.id, UserId(bob), "hi")
        await like_service.like_post(post.id, UserId(bob))
        monkeypatch.setattr(
            post_repo, "delete", AsyncMock(side_effect=StorageUnavailableError("down"))
        )

        # Act: first attempt stops after comments and likes are gone
        with pytest.raises(StorageUnavailableError):
            await service.delete(post.id, UserId(alice))

        assert await comment_repo.find_by_id(comment.id) is None
        assert await like_repo.find_by_post(post.id) == []
        assert await post_repo.find_by_id(post.id) is not None
        assert await tag_repo.find_by_name(TaxonomyName("partial")) is not None

        # Act: retry with storage back
        monkeypatch.undo()
        await service.delete(post.id, UserId(alice))

        # Assert
        assert await post_repo.find_by_id(post.id) is None
        assert await tag_repo.find_by_name(TaxonomyName("partial")) is None
