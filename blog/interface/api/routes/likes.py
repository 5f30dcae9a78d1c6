"""Like routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, status

from blog.application.usecase.like import (
    AddLikeRequest,
    AddLikeResponse,
    AddLikeUseCase,
    GetLikesRequest,
    GetLikesResponse,
    GetLikesUseCase,
    RemoveLikeRequest,
    RemoveLikeResponse,
    RemoveLikeUseCase,
)
from blog.domain.error import ConflictError, NotAuthorizedError, NotFoundError
from blog.domain.service import JWTService
from blog.interface.api.auth import require_user_id

router = APIRouter(prefix="/api/likes", tags=["likes"], route_class=DishkaRoute)


@router.post(
    "/{post_id}/like",
    response_model=AddLikeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def like_post(
    post_id: str,
    add_like_use_case: FromDishka[AddLikeUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> AddLikeResponse:
    """Like a post.

    Requires authentication.

    Args:
        post_id: Post UUID
        add_like_use_case: Add like use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        Like details

    Raises:
        HTTPException: If not authenticated, already liked, or post not found
    """
    user_id = require_user_id(jwt_service, authorization, auth_token, "like posts")

    try:
        request = AddLikeRequest(post_id=post_id, user_id=user_id)
        return await add_like_use_case.execute(request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{post_id}/like", response_model=RemoveLikeResponse)
async def unlike_post(
    post_id: str,
    remove_like_use_case: FromDishka[RemoveLikeUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> RemoveLikeResponse:
    """Remove the caller's like from a post.

    Raises:
        HTTPException: If not authenticated or there is no like to remove
    """
    user_id = require_user_id(
        jwt_service, authorization, auth_token, "remove likes"
    )

    try:
        request = RemoveLikeRequest(post_id=post_id, user_id=user_id)
        return await remove_like_use_case.execute(request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.error("Like ownership mismatch", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You are not authorized to remove this like",
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{post_id}/likes", response_model=GetLikesResponse)
async def get_likes(
    post_id: str,
    get_likes_use_case: FromDishka[GetLikesUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetLikesResponse:
    """List every like on a post with the liking users."""
    require_user_id(jwt_service, authorization, auth_token, "view likes")

    try:
        return await get_likes_use_case.execute(GetLikesRequest(post_id=post_id))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
