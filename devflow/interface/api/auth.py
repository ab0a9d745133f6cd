"""Request authentication helpers.

Sessions are JWTs issued by the identity provider and sent in the
``auth_token`` cookie.
"""

import logfire
from fastapi import HTTPException, status

from devflow.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from devflow.domain.error import NotFoundError
from devflow.util.jwt import JWTError


async def require_user(
    auth_token: str | None, get_current_user_use_case: GetCurrentUserUseCase
) -> GetCurrentUserResponse:
    """Resolve the signed-in user or fail with 401.

    Args:
        auth_token: JWT token from cookie
        get_current_user_use_case: Get current user use case

    Returns:
        The authenticated user

    Raises:
        HTTPException: If the token is missing, invalid, or has no user
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
    except JWTError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User for this session does not exist",
        )


async def optional_user(
    auth_token: str | None, get_current_user_use_case: GetCurrentUserUseCase
) -> GetCurrentUserResponse | None:
    """Resolve the signed-in user, or None for anonymous or stale sessions."""
    if not auth_token:
        return None

    try:
        return await require_user(auth_token, get_current_user_use_case)
    except HTTPException as e:
        logfire.debug("Treating request as anonymous", reason=e.detail)
        return None
