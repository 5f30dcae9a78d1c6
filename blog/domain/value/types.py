"""Domain value objects for the blog service.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from blog.domain.value.common import RootValueObject


class TaxonomyKind(str, Enum):
    """Kind of shared taxonomy entity attached to posts."""

    TAG = "tag"
    CATEGORY = "category"

    @property
    def label(self) -> str:
        """Human readable resource name used in errors and logs."""
        return self.value.capitalize()


class TaxonomyName(RootValueObject[str]):
    """Natural key of a Tag or Category.

    Names are matched exactly (case-sensitive, no trimming beyond
    rejecting blank values) so "Tech" and "tech" are distinct entities.
    """

    @field_validator("root")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is not blank and within length limits."""
        if not v.strip():
            raise ValueError("Taxonomy name must not be blank")
        if len(v) > 100:
            raise ValueError("Taxonomy name must be at most 100 characters")
        return v
