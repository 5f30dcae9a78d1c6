"""Unit tests for OrphanService."""

from unittest.mock import AsyncMock

import pytest

from blog.domain.repository import CategoryRepository, TagRepository
from blog.domain.service import OrphanService, PostService, TaxonomyService
from blog.domain.value import TaxonomyKind, TaxonomyName, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSweep:
    """Tests for sweep method."""

    @pytest.mark.asyncio
    async def test_sweep_deletes_unreferenced_tags_only(self, unit_env):
        """Tags still used by a post survive; unused ones are removed."""
        # Arrange
        post_service = await unit_env.get(PostService)
        orphan_service = await unit_env.get(OrphanService)
        taxonomy_service = await unit_env.get(TaxonomyService)
        tag_repo = await unit_env.get(TagRepository)

        await post_service.create(
            UserId("author"), "Title", "Body", tag_names=["kept"]
        )
        await taxonomy_service.resolve(["stray"], TaxonomyKind.TAG)

        # Act
        deleted = await orphan_service.sweep(TaxonomyKind.TAG)

        # Assert
        assert deleted == 1
        assert await tag_repo.find_by_name(TaxonomyName("kept")) is not None
        assert await tag_repo.find_by_name(TaxonomyName("stray")) is None

    @pytest.mark.asyncio
    async def test_sweep_is_idempotent(self, unit_env):
        """A second sweep over the same state deletes nothing."""
        # Arrange
        orphan_service = await unit_env.get(OrphanService)
        taxonomy_service = await unit_env.get(TaxonomyService)
        await taxonomy_service.resolve(["a", "b"], TaxonomyKind.CATEGORY)

        # Act
        first = await orphan_service.sweep(TaxonomyKind.CATEGORY)
        second = await orphan_service.sweep(TaxonomyKind.CATEGORY)

        # Assert
        assert first == 2
        assert second == 0

    @pytest.mark.asyncio
    async def test_sweep_only_touches_requested_kind(self, unit_env):
        # Arrange
        orphan_service = await unit_env.get(OrphanService)
        taxonomy_service = await unit_env.get(TaxonomyService)
        category_repo = await unit_env.get(CategoryRepository)
        await taxonomy_service.resolve(["orphan"], TaxonomyKind.TAG)
        await taxonomy_service.resolve(["orphan"], TaxonomyKind.CATEGORY)

        # Act
        await orphan_service.sweep(TaxonomyKind.TAG)

        # Assert
        assert await category_repo.find_by_name(TaxonomyName("orphan")) is not None

    @pytest.mark.asyncio
    async def test_sweep_propagates_storage_failure(self, unit_env):
        """The sweep itself does not hide failures; callers decide."""
        # Arrange
        orphan_service = await unit_env.get(OrphanService)
        taxonomy_service = await unit_env.get(TaxonomyService)
        await taxonomy_service.resolve(["t"], TaxonomyKind.TAG)
        tag_repo = await unit_env.get(TagRepository)
        tag_repo.delete_unreferenced = AsyncMock(side_effect=RuntimeError("store down"))

        # Act & Assert
        with pytest.raises(RuntimeError, match="store down"):
            await orphan_service.sweep(TaxonomyKind.TAG)
