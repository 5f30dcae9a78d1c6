"""Tag and category repository interfaces.

Both kinds share one contract; the concrete ABCs exist so each kind can be
injected on its own.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

from blog.domain.model.taxonomy import Category, Tag
from blog.domain.value import TaxonomyName

T = TypeVar("T", Tag, Category)


class TaxonomyRepository(ABC, Generic[T]):
    """Repository interface for shared taxonomy entities."""

    @abstractmethod
    async def find_by_id(self, entity_id: UUID) -> Optional[T]:
        """Find an entity by ID.

        Args:
            entity_id: Entity identifier

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: TaxonomyName) -> Optional[T]:
        """Find an entity by exact name.

        Args:
            name: Entity name

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_or_create(self, name: TaxonomyName) -> T:
        """Return the entity with this name, creating it if absent.

        Args:
            name: Entity name

        Returns:
            The existing or newly created entity
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[T]:
        """Find all entities of this kind.

        Returns:
            List of entities ordered by name
        """
        pass

    @abstractmethod
    async def delete_unreferenced(self) -> List[T]:
        """Delete every entity that no post references.

        Runs as one unit: either all orphans found are removed or none are,
        and a failure leaves other pending writes intact.

        Returns:
            The deleted entities
        """
        pass


class TagRepository(TaxonomyRepository[Tag]):
    """Repository interface for Tag entities."""


class CategoryRepository(TaxonomyRepository[Category]):
    """Repository interface for Category entities."""
