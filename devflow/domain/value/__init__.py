"""Domain value objects for DevFlow."""

from devflow.domain.value.identifiers import (
    AnswerId,
    ClerkId,
    QuestionId,
    TagId,
    UserId,
)
from devflow.domain.value.types import (
    TagName,
    Username,
    VotableType,
    VoteAction,
)
from devflow.domain.value.vote import SetOperation, VoteUpdate

__all__ = [
    # Identifiers
    "UserId",
    "ClerkId",
    "QuestionId",
    "AnswerId",
    "TagId",
    # Types
    "TagName",
    "Username",
    "VoteAction",
    "VotableType",
    # Votes
    "SetOperation",
    "VoteUpdate",
]
