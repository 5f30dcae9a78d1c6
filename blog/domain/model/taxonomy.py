"""Shared taxonomy entities (tags and categories).

Taxonomy rows are not owned by any post. They are created lazily the
first time a post uses a name and garbage-collected once no post
references them.
"""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import CategoryId, TagId, TaxonomyName


class Tag(DomainModel):
    """Tag entity, unique by exact name."""

    id: TagId
    name: TaxonomyName
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class Category(DomainModel):
    """Category entity, unique by exact name."""

    id: CategoryId
    name: TaxonomyName
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
