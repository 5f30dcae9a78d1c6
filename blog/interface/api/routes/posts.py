"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, Query, status
from pydantic import BaseModel, Field

from blog.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from blog.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from blog.domain.service import JWTService
from blog.interface.api.auth import require_user_id

router = APIRouter(prefix="/api/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post. Omitted fields are left unchanged."""

    title: str | None = None
    content: str | None = None
    tags: list[str] | None = None
    categories: list[str] | None = None


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    results_per_page: int | None = Query(default=None, ge=1),
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ListPostsResponse:
    """List posts, newest first, one page at a time.

    Args:
        list_posts_use_case: List posts use case from DI
        jwt_service: JWT service for token verification (injected)
        page: 1-based page number
        results_per_page: Page size
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        The page, total pages and current page
    """
    require_user_id(jwt_service, authorization, auth_token, "list posts")

    try:
        request = ListPostsRequest(page=page, results_per_page=results_per_page)
        return await list_posts_use_case.execute(request)
    except (ValidationError, ValueError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetPostResponse:
    """Get a single post with its like count.

    Raises:
        HTTPException: 401 if not authenticated, 400 for a malformed ID,
            404 if the post doesn't exist
    """
    require_user_id(jwt_service, authorization, auth_token, "view posts")

    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post(
    "", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED
)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CreatePostResponse:
    """Create a new post.

    Tags and categories are created on first use.

    Args:
        request: Post creation data
        create_post_use_case: Create post use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        Created post

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user_id = require_user_id(jwt_service, authorization, auth_token, "create posts")

    try:
        use_case_request = CreatePostRequest(
            title=request.title,
            content=request.content,
            tags=request.tags,
            categories=request.categories,
            author_id=user_id,
        )
        return await create_post_use_case.execute(use_case_request)
    except (ValidationError, ValueError) as e:
        logfire.warn("Post creation failed", user_id=user_id, error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: str,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> UpdatePostResponse:
    """Update a post. Only the post author can edit.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the post doesn't
            exist, 403 if not the author, 400 for invalid input
    """
    user_id = require_user_id(jwt_service, authorization, auth_token, "edit posts")

    try:
        use_case_request = UpdatePostRequest(
            post_id=post_id,
            user_id=user_id,
            title=request.title,
            content=request.content,
            tags=request.tags,
            categories=request.categories,
        )
        return await update_post_use_case.execute(use_case_request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn(
            "Unauthorized post update attempt",
            post_id=post_id,
            user_id=user_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You are not authorized to update this post",
        )
    except (ValidationError, ValueError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> DeletePostResponse:
    """Delete a post with its comments and likes. Only the author can delete.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the post doesn't
            exist, 403 if not the author, 400 for a malformed ID
    """
    user_id = require_user_id(jwt_service, authorization, auth_token, "delete posts")

    try:
        use_case_request = DeletePostRequest(post_id=post_id, user_id=user_id)
        return await delete_post_use_case.execute(use_case_request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn(
            "Unauthorized post delete attempt",
            post_id=post_id,
            user_id=user_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You are not authorized to delete this post",
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
