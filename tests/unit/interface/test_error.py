"""Unit tests for mapping errors to HTTP responses."""

import pytest
from fastapi import HTTPException
from pydantic import BaseModel, field_validator
from pydantic import ValidationError as PydanticValidationError

from devflow.domain.error import (
    ConflictError,
    InconsistentVoteStateError,
    InvalidVoteError,
    NotAuthorizedError,
    NotFoundError,
)
from devflow.interface.error import to_http_exception
from devflow.util.jwt import JWTError


class TestToHttpException:
    """Tests for to_http_exception."""

    @pytest.mark.parametrize(
        "error,status_code",
        [
            (NotFoundError("Question", "123"), 404),
            (NotAuthorizedError("question", "123", "u1"), 403),
            (ConflictError("User", "username", "jane"), 409),
            (InvalidVoteError("A user id is required to vote"), 400),
            (InconsistentVoteStateError("u1"), 400),
            (ValueError("bad input"), 400),
            (JWTError("Token has expired"), 401),
        ],
    )
    def test_known_errors(self, error, status_code):
        result = to_http_exception(error, "vote")

        assert result.status_code == status_code
        assert result.detail == str(error)

    def test_http_exception_passes_through(self):
        original = HTTPException(status_code=418, detail="teapot")

        assert to_http_exception(original, "brew") is original

    def test_unexpected_error_hides_details(self):
        result = to_http_exception(RuntimeError("connection reset"), "vote")

        assert result.status_code == 500
        assert result.detail == "Failed to vote"

    def test_model_validation_error_hides_model_dump(self):
        class Snapshot(BaseModel):
            voters: list[str]

            @field_validator("voters")
            @classmethod
            def no_voters(cls, v: list[str]) -> list[str]:
                raise ValueError(f"Bad voters: {v}")

        with pytest.raises(PydanticValidationError) as exc_info:
            Snapshot(voters=["secret-user-id"])

        result = to_http_exception(exc_info.value, "vote")

        assert result.status_code == 400
        assert result.detail == "Invalid data, could not vote"
        assert "secret-user-id" not in result.detail
