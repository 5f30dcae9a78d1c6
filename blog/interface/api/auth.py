"""Request authentication helpers shared by the routes."""

from fastapi import HTTPException, status

from blog.domain.service import JWTService


def require_user_id(
    jwt_service: JWTService,
    authorization: str | None,
    auth_token: str | None,
    action: str,
) -> str:
    """Return the verified user ID or fail the request with 401.

    Args:
        jwt_service: JWT service for token verification
        authorization: ``Authorization`` header value
        auth_token: JWT token from cookie
        action: What the caller is trying to do (for the error detail)

    Raises:
        HTTPException: If no valid token was supplied
    """
    user_id = jwt_service.get_user_id(authorization, auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id
