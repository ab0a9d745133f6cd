"""Vote coordinator.

Pure decision logic for upvote/downvote clicks. Given what the user has
currently done to a votable and what they clicked, it returns the
membership change for each of the votable's voter sets. It holds no state
and performs no I/O; applying the update is the repository's job.

Repeating the active direction retracts it (toggle-off). Clicking the
opposite direction moves the user across in one update.
"""

from devflow.domain.error import InconsistentVoteStateError, InvalidVoteError
from devflow.domain.value import SetOperation, UserId, VoteAction, VoteUpdate

ADD = SetOperation.ADD
REMOVE = SetOperation.REMOVE
NONE = SetOperation.NONE

# (action, has_upvoted, has_downvoted) -> (upvoters op, downvoters op)
_TRANSITIONS: dict[
    tuple[VoteAction, bool, bool], tuple[SetOperation, SetOperation]
] = {
    (VoteAction.UPVOTE, True, False): (REMOVE, NONE),
    (VoteAction.UPVOTE, False, True): (ADD, REMOVE),
    (VoteAction.UPVOTE, False, False): (ADD, NONE),
    (VoteAction.DOWNVOTE, False, True): (NONE, REMOVE),
    (VoteAction.DOWNVOTE, True, False): (REMOVE, ADD),
    (VoteAction.DOWNVOTE, False, False): (NONE, ADD),
}


def compute_vote_update(
    user_id: UserId | None,
    has_upvoted: bool,
    has_downvoted: bool,
    action: VoteAction,
) -> VoteUpdate:
    """Compute the voter-set update for a vote click.

    Args:
        user_id: Voting user
        has_upvoted: Whether the user is currently an upvoter
        has_downvoted: Whether the user is currently a downvoter
        action: Direction the user clicked

    Returns:
        Update describing the change to ``upvoters`` and ``downvoters``

    Raises:
        InvalidVoteError: If the user id is missing
        InconsistentVoteStateError: If both flags are set
    """
    if user_id is None or not str(user_id):
        raise InvalidVoteError("A user id is required to vote")
    if has_upvoted and has_downvoted:
        raise InconsistentVoteStateError(str(user_id))

    upvoters, downvoters = _TRANSITIONS[(VoteAction(action), has_upvoted, has_downvoted)]
    return VoteUpdate(user_id=user_id, upvoters=upvoters, downvoters=downvoters)
