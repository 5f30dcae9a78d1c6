"""Unit tests for ListTaxonomyUseCase."""

import pytest

from blog.application.usecase.taxonomy.list_taxonomy import (
    ListTaxonomyRequest,
    ListTaxonomyUseCase,
)
from blog.domain.service import PostService
from blog.domain.value import TaxonomyKind, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListTaxonomyUseCase:
    @pytest.mark.asyncio
    async def test_lists_each_kind_separately(self, unit_env, alice):
        # Arrange
        post_service = await unit_env.get(PostService)
        await post_service.create(
            UserId(alice), "T", "C", tag_names=["web", "api"], category_names=["dev"]
        )
        use_case = await unit_env.get(ListTaxonomyUseCase)

        # Act
        tags = await use_case.execute(ListTaxonomyRequest(kind=TaxonomyKind.TAG))
        categories = await use_case.execute(
            ListTaxonomyRequest(kind=TaxonomyKind.CATEGORY)
        )

        # Assert
        assert tags.kind is TaxonomyKind.TAG
        assert [item.name for item in tags.items] == ["api", "web"]
        assert [item.name for item in categories.items] == ["dev"]
