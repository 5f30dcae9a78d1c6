"""Tag and category use cases."""

from .list_taxonomy import (
    ListTaxonomyRequest,
    ListTaxonomyResponse,
    ListTaxonomyUseCase,
    TaxonomyItem,
)

__all__ = [
    "ListTaxonomyRequest",
    "ListTaxonomyResponse",
    "ListTaxonomyUseCase",
    "TaxonomyItem",
]
