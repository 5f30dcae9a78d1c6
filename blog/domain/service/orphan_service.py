"""Orphan collection for shared taxonomy entities."""

import logfire

from blog.domain.value import TaxonomyKind

from .base import Service
from .taxonomy_service import TaxonomyService


class OrphanService(Service):
    """Deletes tags and categories that no post references any more.

    Only post deletion triggers a sweep. An update that drops a name can
    also strand an entity; such rows wait for the next sweep.
    """

    def __init__(self, taxonomy_service: TaxonomyService) -> None:
        """Initialize orphan service.

        Args:
            taxonomy_service: Taxonomy service (entity access)
        """
        self.taxonomy_service = taxonomy_service

    async def sweep(self, kind: TaxonomyKind) -> int:
        """Delete every entity of ``kind`` with zero referencing posts.

        Safe to re-run: a second sweep over the same state deletes nothing.
        The repository runs the scan and the deletes as one unit, so a
        failed sweep leaves earlier writes in the same transaction alone.

        Args:
            kind: Taxonomy kind to sweep

        Returns:
            Number of entities deleted
        """
        with logfire.span("orphan_service.sweep", kind=kind.value):
            repository = self.taxonomy_service.repository_for(kind)
            removed = await repository.delete_unreferenced()

            for entity in removed:
                logfire.debug(
                    "Orphan removed",
                    kind=kind.value,
                    entity_id=str(entity.id),
                    name=entity.name.root,
                )

            logfire.info("Orphan sweep finished", kind=kind.value, deleted=len(removed))
            return len(removed)
