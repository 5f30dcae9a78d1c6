"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, status
from pydantic import BaseModel, Field

from blog.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from blog.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from blog.domain.service import JWTService
from blog.interface.api.auth import require_user_id

router = APIRouter(prefix="/api/posts", tags=["comments"], route_class=DishkaRoute)


class CommentAPIRequest(BaseModel):
    """API request for creating or editing a comment."""

    content: str = Field(min_length=1, max_length=10000)


@router.get("/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetCommentsResponse:
    """Get all comments for a post, newest first.

    Args:
        post_id: Post UUID
        get_comments_use_case: Get comments use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        Comments with their authors
    """
    require_user_id(jwt_service, authorization, auth_token, "view comments")

    try:
        return await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post(
    "/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Create a comment on a post.

    Requires authentication.

    Raises:
        HTTPException: If not authenticated, the post doesn't exist or
            validation fails
    """
    user_id = require_user_id(
        jwt_service, authorization, auth_token, "create comments"
    )

    try:
        use_case_request = CreateCommentRequest(
            post_id=post_id,
            content=request.content,
            author_id=user_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Comment creation failed - post not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except (ValidationError, ValueError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{post_id}/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    post_id: str,
    comment_id: str,
    request: CommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> UpdateCommentResponse:
    """Update a comment's content.

    Only the comment author can edit. The comment is addressed by its own
    ID; ``post_id`` only scopes the URL.

    Args:
        post_id: Post UUID
        comment_id: Comment UUID
        request: New content
        update_comment_use_case: Update comment use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        Updated comment details

    Raises:
        HTTPException: If not authenticated, not found, or not authorized
    """
    user_id = require_user_id(jwt_service, authorization, auth_token, "edit comments")

    try:
        use_case_request = UpdateCommentRequest(
            comment_id=comment_id,
            user_id=user_id,
            content=request.content,
        )
        return await update_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn(
            "Unauthorized comment update attempt",
            comment_id=comment_id,
            user_id=user_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You are not authorized to update this comment",
        )
    except (ValidationError, ValueError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete(
    "/{post_id}/comments/{comment_id}", response_model=DeleteCommentResponse
)
async def delete_comment(
    post_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment. Only the comment author can delete."""
    user_id = require_user_id(
        jwt_service, authorization, auth_token, "delete comments"
    )

    try:
        use_case_request = DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
        return await delete_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn(
            "Unauthorized comment delete attempt",
            comment_id=comment_id,
            user_id=user_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You are not authorized to delete this comment",
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
