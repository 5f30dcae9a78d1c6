"""Taxonomy domain service (tag and category resolution)."""

from uuid import UUID

import logfire
from pydantic import ValidationError as PydanticValidationError

from blog.domain.error import ValidationError
from blog.domain.model.taxonomy import Category, Tag
from blog.domain.repository import CategoryRepository, TagRepository, TaxonomyRepository
from blog.domain.value import TaxonomyKind, TaxonomyName

from .base import Service


class TaxonomyService(Service):
    """Domain service resolving taxonomy names into shared entities."""

    def __init__(
        self,
        tag_repository: TagRepository,
        category_repository: CategoryRepository,
    ) -> None:
        """Initialize taxonomy service.

        Args:
            tag_repository: Tag repository
            category_repository: Category repository
        """
        self.tag_repository = tag_repository
        self.category_repository = category_repository

    def repository_for(self, kind: TaxonomyKind) -> TaxonomyRepository:
        """Return the repository holding entities of the given kind."""
        if kind is TaxonomyKind.TAG:
            return self.tag_repository
        return self.category_repository

    async def resolve(self, names: list[str], kind: TaxonomyKind) -> list[UUID]:
        """Map names to entity ids, creating entities that don't exist yet.

        The result has one id per input name, in input order. Repeated
        names map to the same id. Names are resolved one at a time so a
        name seen earlier in the list is found rather than created twice.

        Args:
            names: Taxonomy names as supplied by the caller
            kind: Whether the names are tags or categories

        Returns:
            Entity ids in input order

        Raises:
            ValidationError: If a name is blank or too long
        """
        with logfire.span(
            "taxonomy_service.resolve", kind=kind.value, names=list(names)
        ):
            try:
                parsed = [TaxonomyName(name) for name in names]
            except PydanticValidationError as e:
                logfire.warn("Invalid taxonomy name", kind=kind.value, error=str(e))
                raise ValidationError(f"Invalid {kind.value} name") from e

            repository = self.repository_for(kind)
            ids: list[UUID] = []
            for name in parsed:
                entity = await repository.get_or_create(name)
                ids.append(entity.id)

            logfire.info(
                "Taxonomy resolved",
                kind=kind.value,
                count=len(ids),
                distinct=len(set(ids)),
            )
            return ids

    async def get_by_ids(
        self, ids: list[UUID], kind: TaxonomyKind
    ) -> list[Tag | Category]:
        """Load entities for a post's reference list, preserving order.

        References to rows that no longer exist are skipped.
        """
        repository = self.repository_for(kind)
        entities = []
        for entity_id in ids:
            entity = await repository.find_by_id(entity_id)
            if entity:
                entities.append(entity)
        return entities

    async def list_all(self, kind: TaxonomyKind) -> list[Tag | Category]:
        """Get every tag or category, ordered by name.

        Args:
            kind: Taxonomy kind

        Returns:
            List of entities
        """
        with logfire.span("taxonomy_service.list_all", kind=kind.value):
            entities = await self.repository_for(kind).find_all()
            logfire.info("Taxonomy retrieved", kind=kind.value, count=len(entities))
            return entities
