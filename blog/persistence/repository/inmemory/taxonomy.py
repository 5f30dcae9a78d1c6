"""In-memory tag and category repositories for testing."""

from datetime import datetime
from typing import Any, ClassVar, Optional
from uuid import UUID, uuid4

from blog.domain.model import Category, Tag
from blog.domain.repository import (
    CategoryRepository,
    TagRepository,
    TaxonomyRepository,
)
from blog.domain.value import TaxonomyName

from .post import InMemoryPostRepository


class InMemoryTaxonomyRepository(TaxonomyRepository):
    """Shared in-memory implementation for one taxonomy kind."""

    model: ClassVar[type]
    reference_field: ClassVar[str]

    def __init__(self, post_repository: InMemoryPostRepository) -> None:
        self._entities: dict[UUID, Any] = {}
        self._post_repository = post_repository

    async def find_by_id(self, entity_id: UUID) -> Optional[Any]:
        """Find an entity by ID."""
        return self._entities.get(entity_id)

    async def find_by_name(self, name: TaxonomyName) -> Optional[Any]:
        """Find an entity by exact name."""
        for entity in self._entities.values():
            if entity.name.root == name.root:
                return entity
        return None

    async def get_or_create(self, name: TaxonomyName) -> Any:
        """Return the entity with this name, creating it if absent."""
        existing = await self.find_by_name(name)
        if existing:
            return existing

        now = datetime.now()
        entity = self.model(id=uuid4(), name=name, created_at=now, updated_at=now)
        self._entities[entity.id] = entity
        return entity

    async def find_all(self) -> list[Any]:
        """Find all entities, ordered by name."""
        return sorted(self._entities.values(), key=lambda e: e.name.root)

    async def delete_unreferenced(self) -> list[Any]:
        """Delete entities absent from every post's reference list."""
        referenced = self._post_repository.referenced_ids(self.reference_field)
        orphans = [e for e in await self.find_all() if e.id not in referenced]
        for entity in orphans:
            del self._entities[entity.id]
        return orphans


class InMemoryTagRepository(InMemoryTaxonomyRepository, TagRepository):
    """In-memory implementation of TagRepository for testing."""

    model = Tag
    reference_field = "tag_ids"


class InMemoryCategoryRepository(InMemoryTaxonomyRepository, CategoryRepository):
    """In-memory implementation of CategoryRepository for testing."""

    model = Category
    reference_field = "category_ids"
