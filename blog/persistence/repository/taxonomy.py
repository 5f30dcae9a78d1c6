"""PostgreSQL implementations of Tag and Category repositories."""

from datetime import datetime
from typing import Any, Callable, ClassVar, Dict, List, Optional
from uuid import UUID, uuid4

import logfire
from sqlalchemy import Table, delete, select
from sqlalchemy.dialects.postgresql import array, insert
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.repository import (
    CategoryRepository,
    TagRepository,
    TaxonomyRepository,
)
from blog.domain.value import TaxonomyName
from blog.persistence.error import storage_errors
from blog.persistence.mappers import row_to_category, row_to_tag
from blog.persistence.tables import categories_table, posts_table, tags_table


class PostgresTaxonomyRepository(TaxonomyRepository):
    """Shared PostgreSQL implementation for one taxonomy table."""

    table: ClassVar[Table]
    reference_column: ClassVar[str]
    to_model: ClassVar[Callable[[Dict[str, Any]], Any]]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _map(self, row) -> Any:
        return self.to_model(row._asdict())

    @storage_errors
    async def find_by_id(self, entity_id: UUID) -> Optional[Any]:
        """Find an entity by ID."""
        stmt = select(self.table).where(self.table.c.id == entity_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return self._map(row) if row else None

    @storage_errors
    async def find_by_name(self, name: TaxonomyName) -> Optional[Any]:
        """Find an entity by exact name."""
        stmt = select(self.table).where(self.table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return self._map(row) if row else None

    @storage_errors
    async def get_or_create(self, name: TaxonomyName) -> Any:
        """Insert the name unless it exists, then read the row back.

        ``ON CONFLICT DO NOTHING`` on the unique name lets two concurrent
        requests resolve the same name to the same row.
        """
        now = datetime.now()
        stmt = (
            insert(self.table)
            .values(id=uuid4(), name=name.root, created_at=now, updated_at=now)
            .on_conflict_do_nothing(index_elements=[self.table.c.name])
        )
        result = await self.session.execute(stmt)
        if result.rowcount:  # type: ignore[attr-defined]
            logfire.info(
                "Taxonomy entity created", table=self.table.name, name=name.root
            )

        stmt = select(self.table).where(self.table.c.name == name.root)
        result = await self.session.execute(stmt)
        return self._map(result.one())

    @storage_errors
    async def find_all(self) -> List[Any]:
        """Find all entities, ordered by name."""
        stmt = select(self.table).order_by(self.table.c.name)
        result = await self.session.execute(stmt)
        return [self._map(row) for row in result.fetchall()]

    def _unreferenced_stmt(self):
        references = posts_table.c[self.reference_column]
        referenced = (
            select(posts_table.c.id)
            .where(references.contains(array([self.table.c.id])))
            .correlate(self.table)
            .exists()
        )
        return delete(self.table).where(~referenced).returning(*self.table.c)

    @storage_errors
    async def delete_unreferenced(self) -> List[Any]:
        """Delete orphans with one statement inside a savepoint.

        The scan and the deletes share the savepoint, so a failure rolls
        back only the sweep and the enclosing transaction stays usable.
        """
        with logfire.span(
            "taxonomy_repository.delete_unreferenced", table=self.table.name
        ):
            async with self.session.begin_nested():
                result = await self.session.execute(self._unreferenced_stmt())
                rows = result.fetchall()
            return [self._map(row) for row in rows]


class PostgresTagRepository(PostgresTaxonomyRepository, TagRepository):
    """PostgreSQL implementation of TagRepository."""

    table = tags_table
    reference_column = "tag_ids"
    to_model = staticmethod(row_to_tag)


class PostgresCategoryRepository(PostgresTaxonomyRepository, CategoryRepository):
    """PostgreSQL implementation of CategoryRepository."""

    table = categories_table
    reference_column = "category_ids"
    to_model = staticmethod(row_to_category)
