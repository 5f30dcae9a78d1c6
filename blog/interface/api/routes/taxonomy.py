"""Tag and category routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from blog.application.usecase.taxonomy import (
    ListTaxonomyRequest,
    ListTaxonomyResponse,
    ListTaxonomyUseCase,
)
from blog.domain.service import JWTService
from blog.domain.value import TaxonomyKind
from blog.interface.api.auth import require_user_id

router = APIRouter(prefix="/api", tags=["taxonomy"], route_class=DishkaRoute)


@router.get("/tags", response_model=ListTaxonomyResponse)
async def list_tags(
    list_taxonomy_use_case: FromDishka[ListTaxonomyUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ListTaxonomyResponse:
    """List every tag currently referenced (or not yet swept)."""
    require_user_id(jwt_service, authorization, auth_token, "view tags")
    return await list_taxonomy_use_case.execute(
        ListTaxonomyRequest(kind=TaxonomyKind.TAG)
    )


@router.get("/categories", response_model=ListTaxonomyResponse)
async def list_categories(
    list_taxonomy_use_case: FromDishka[ListTaxonomyUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ListTaxonomyResponse:
    """List every category currently referenced (or not yet swept)."""
    require_user_id(jwt_service, authorization, auth_token, "view categories")
    return await list_taxonomy_use_case.execute(
        ListTaxonomyRequest(kind=TaxonomyKind.CATEGORY)
    )
