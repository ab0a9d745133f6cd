"""Domain value objects for DevFlow.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from devflow.domain.value.common import RootValueObject


class VoteAction(str, Enum):
    """Direction of a vote click."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class TagName(RootValueObject[str]):
    """Tag name attached to questions.

    Free-form, 1-15 characters with no whitespace, e.g. 'python', 'Next.js',
    'c++'. Names are matched case-insensitively; use ``key`` for comparisons.
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        v = v.strip()
        if not 1 <= len(v) <= 15:
            raise ValueError("Tag name must be 1-15 characters")
        if re.search(r"\s", v):
            raise ValueError("Tag name must not contain whitespace")
        return v

    @property
    def key(self) -> str:
        """Case-folded name used for lookups."""
        return self.root.casefold()


class Username(RootValueObject[str]):
    """Public username shown on profiles.

    Letters, digits, dots, underscores and hyphens, 3-30 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9._-]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters of letters, digits, '.', '_' or '-'"
            )
        return v
