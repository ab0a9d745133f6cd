"""Votable base model.

Questions and answers both carry the two voter sets. Membership is the
source of truth; vote counts are derived from the set sizes.
"""

from pydantic import Field, model_validator

from devflow.domain.model.common import DomainModel
from devflow.domain.value import UserId


class Votable(DomainModel):
    """Entity that users can upvote or downvote.

    Invariant: a user is in at most one of ``upvoters`` and ``downvoters``.
    """

    upvoters: frozenset[UserId] = Field(default_factory=frozenset)
    downvoters: frozenset[UserId] = Field(default_factory=frozenset)

    @model_validator(mode="after")
    def validate_voters_disjoint(self) -> "Votable":
        """Reject a user that is both an upvoter and a downvoter."""
        overlap = self.upvoters & self.downvoters
        if overlap:
            raise ValueError(
                f"Users cannot both upvote and downvote: {sorted(map(str, overlap))}"
            )
        return self

    @property
    def upvotes(self) -> int:
        return len(self.upvoters)

    @property
    def downvotes(self) -> int:
        return len(self.downvoters)

    def has_upvoted(self, user_id: UserId | None) -> bool:
        return user_id is not None and user_id in self.upvoters

    def has_downvoted(self, user_id: UserId | None) -> bool:
        return user_id is not None and user_id in self.downvoters
