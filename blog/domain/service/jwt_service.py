"""JWT token domain service."""

import logfire

from blog.config import AuthSettings
from blog.util.jwt import TokenPayload, extract_bearer_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for verifying tokens issued by the auth service."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_user_id(
        self, authorization: str | None, auth_token: str | None = None
    ) -> str | None:
        """Extract the user ID from a bearer header or cookie without raising.

        The ``Authorization`` header wins over the ``auth_token`` cookie.

        Args:
            authorization: Raw ``Authorization`` header value (optional)
            auth_token: JWT token from cookie (optional)

        Returns:
            User ID if a valid token was supplied, None otherwise
        """
        token = extract_bearer_token(authorization) or auth_token
        if not token:
            return None

        try:
            return self.verify_token(token).user_id
        except Exception as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
