"""Vote update value objects.

A ``VoteUpdate`` describes, for each of a votable's ``upvoters`` and
``downvoters`` sets, whether the voting user is added, removed or left alone.
It is produced by the vote coordinator and applied atomically by a
repository.
"""

from enum import Enum

from pydantic import model_validator

from devflow.domain.value.common import ValueObject
from devflow.domain.value.identifiers import UserId


class SetOperation(str, Enum):
    """Membership change for one voter set."""

    ADD = "add"
    REMOVE = "remove"
    NONE = "none"


class VoteUpdate(ValueObject):
    """Membership changes for a single user on a single votable."""

    user_id: UserId
    upvoters: SetOperation = SetOperation.NONE
    downvoters: SetOperation = SetOperation.NONE

    @model_validator(mode="after")
    def validate_exclusive(self) -> "VoteUpdate":
        """A user can never join or leave both sets at once."""
        if self.upvoters == self.downvoters == SetOperation.ADD:
            raise ValueError("A vote update cannot add the user to both sets")
        if self.upvoters == self.downvoters == SetOperation.REMOVE:
            raise ValueError("A vote update cannot remove the user from both sets")
        return self

    @property
    def is_noop(self) -> bool:
        """True when neither set changes."""
        return self.upvoters == self.downvoters == SetOperation.NONE

    @property
    def stored_operations(self) -> tuple[SetOperation, SetOperation]:
        """Operations as written to storage.

        Joining one set always leaves the other, so a stale snapshot from the
        caller cannot put the user in both.
        """
        upvoters, downvoters = self.upvoters, self.downvoters
        if upvoters == SetOperation.ADD:
            downvoters = SetOperation.REMOVE
        elif downvoters == SetOperation.ADD:
            upvoters = SetOperation.REMOVE
        return upvoters, downvoters

    def apply(
        self, upvoters: frozenset[UserId], downvoters: frozenset[UserId]
    ) -> tuple[frozenset[UserId], frozenset[UserId]]:
        """Apply the update to in-memory sets.

        Args:
            upvoters: Current upvoter ids
            downvoters: Current downvoter ids

        Returns:
            New (upvoters, downvoters) pair
        """
        upvoters_op, downvoters_op = self.stored_operations
        return (
            _apply_operation(upvoters, upvoters_op, self.user_id),
            _apply_operation(downvoters, downvoters_op, self.user_id),
        )


def _apply_operation(
    members: frozenset[UserId], operation: SetOperation, user_id: UserId
) -> frozenset[UserId]:
    if operation == SetOperation.ADD:
        return members | {user_id}
    if operation == SetOperation.REMOVE:
        return members - {user_id}
    return members
