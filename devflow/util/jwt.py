"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from devflow.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload.

    ``sub`` is the identity provider's user id (stored as ``User.clerk_id``).
    """

    sub: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(clerk_id: str, settings: AuthSettings) -> str:
    """Create a signed token for an identity-provider user.

    Production tokens come from the identity provider; this is used by
    tooling and tests that need a valid session.

    Args:
        clerk_id: Identity provider user id
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "sub": clerk_id,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except ValidationError:
        raise JWTError("Token is missing required claims")
