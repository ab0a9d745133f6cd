"""Interface layer errors.

Translates domain and token errors into HTTP responses. Anything not
recognised is logged and reported as a 500 without leaking details.
"""

import logfire
from fastapi import HTTPException, status
from pydantic import ValidationError as PydanticValidationError

from devflow.domain.error import (
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
)
from devflow.util.jwt import JWTError


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """Map an exception raised by a use case to an HTTP error.

    Args:
        error: The exception
        action: What the route was doing, for the 500 message (e.g. "vote")

    Returns:
        HTTPException to raise
    """
    if isinstance(error, HTTPException):
        return error
    if isinstance(error, NotFoundError):
        logfire.info("Resource not found", error=str(error))
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, NotAuthorizedError):
        logfire.warn("Unauthorized change attempt", error=str(error))
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))
    if isinstance(error, ConflictError):
        logfire.warn("Conflict", error=str(error))
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, JWTError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error)
        )
    if isinstance(error, PydanticValidationError):
        # Raised while building models; the message dumps internal fields
        logfire.warn(f"Invalid data while trying to {action}", error=str(error))
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid data, could not {action}",
        )
    if isinstance(error, (DomainError, ValueError)):
        logfire.warn(f"Failed to {action}", error=str(error))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))

    logfire.error(f"Unexpected error: {action}", error=str(error), _exc_info=error)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )
