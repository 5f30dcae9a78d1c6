"""List tags / categories use case."""

import logfire
from datetime import datetime

from pydantic import BaseModel

from blog.domain.service import TaxonomyService
from blog.domain.value import TaxonomyKind


class TaxonomyItem(BaseModel):
    """Tag or category item in response."""

    id: str
    name: str
    created_at: datetime


class ListTaxonomyRequest(BaseModel):
    """List tags / categories request."""

    kind: TaxonomyKind


class ListTaxonomyResponse(BaseModel):
    """List tags / categories response."""

    kind: TaxonomyKind
    items: list[TaxonomyItem]


class ListTaxonomyUseCase:
    """Use case for listing the tags or categories currently in use."""

    def __init__(self, taxonomy_service: TaxonomyService) -> None:
        """Initialize list taxonomy use case.

        Args:
            taxonomy_service: Taxonomy domain service
        """
        self.taxonomy_service = taxonomy_service

    async def execute(self, request: ListTaxonomyRequest) -> ListTaxonomyResponse:
        """Execute list taxonomy flow.

        Args:
            request: Which kind to list

        Returns:
            Every entity of that kind, ordered by name
        """
        with logfire.span("list_taxonomy.execute", kind=request.kind.value):
            entities = await self.taxonomy_service.list_all(request.kind)

            items = [
                TaxonomyItem(
                    id=str(entity.id),
                    name=entity.name.root,
                    created_at=entity.created_at,
                )
                for entity in entities
            ]

            return ListTaxonomyResponse(kind=request.kind, items=items)
