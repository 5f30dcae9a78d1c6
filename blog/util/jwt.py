"""JWT verification utilities.

Tokens are minted by the external auth service; this module only checks
the signature and expiry and pulls out the user identity.
"""

from typing import Any

import jwt
from pydantic import BaseModel

from blog.config import AuthSettings


class TokenPayload(BaseModel):
    """Verified JWT token payload."""

    user_id: str
    claims: dict[str, Any]


class JWTError(Exception):
    """JWT-related error."""

    pass


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    The user id is read from ``settings.user_id_claim`` and falls back to
    the standard ``sub`` claim.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid, expired or carries no user id
    """
    try:
        claims = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    user_id = claims.get(settings.user_id_claim) or claims.get("sub")
    if not user_id:
        raise JWTError("Token carries no user id")

    return TokenPayload(user_id=str(user_id), claims=claims)


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
