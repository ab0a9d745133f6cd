"""JWT token domain service."""

import logfire

from devflow.config import AuthSettings
from devflow.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, clerk_id: str) -> str:
        """Create JWT token for an identity provider user.

        Args:
            clerk_id: Identity provider user id

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", clerk_id=clerk_id):
            return create_token(clerk_id, self.auth_settings)

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
                logfire.info("JWT token verified", clerk_id=payload.sub)
                return payload
            except JWTError as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise

    def get_clerk_id_from_token(self, token: str | None) -> str | None:
        """Extract the identity provider user id without raising.

        For routes that optionally authenticate the caller.

        Args:
            token: JWT token string (optional)

        Returns:
            Clerk id if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token).sub
        except JWTError as e:
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
