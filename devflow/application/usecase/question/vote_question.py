"""Vote on question use case."""

from uuid import UUID

from pydantic import BaseModel

from devflow.application import views
from devflow.domain.service import VoteService
from devflow.domain.value import QuestionId, UserId, VotableType, VoteAction


class VoteQuestionRequest(BaseModel):
    """Vote on question request.

    ``has_upvoted``/``has_downvoted`` are the caller's view of its current
    vote, as shown on the page where the click happened.
    """

    question_id: str
    user_id: str | None  # From authenticated user
    has_upvoted: bool = False
    has_downvoted: bool = False
    action: VoteAction
    path: str | None = None


class VoteQuestionResponse(BaseModel):
    """Vote on question response."""

    question_id: str
    upvotes: int
    downvotes: int
    has_upvoted: bool
    has_downvoted: bool
    affected_views: list[str]


class VoteQuestionUseCase:
    """Use case for upvoting, downvoting or retracting a vote on a question."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize vote question use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: VoteQuestionRequest) -> VoteQuestionResponse:
        """Execute vote flow.

        Args:
            request: Vote request

        Returns:
            Refreshed counts and the user's membership after the vote

        Raises:
            InvalidVoteError: If the user id is missing
            InconsistentVoteStateError: If both flags are set
            NotFoundError: If the question doesn't exist
        """
        user_id = UserId(UUID(request.user_id)) if request.user_id else None

        question = await self.vote_service.vote(
            votable_type=VotableType.QUESTION,
            votable_id=QuestionId(UUID(request.question_id)),
            user_id=user_id,
            has_upvoted=request.has_upvoted,
            has_downvoted=request.has_downvoted,
            action=request.action,
        )

        return VoteQuestionResponse(
            question_id=str(question.id),
            upvotes=question.upvotes,
            downvotes=question.downvotes,
            has_upvoted=question.has_upvoted(user_id),
            has_downvoted=question.has_downvoted(user_id),
            affected_views=views.affected_views(
                views.question_view(question.id), path=request.path
            ),
        )
