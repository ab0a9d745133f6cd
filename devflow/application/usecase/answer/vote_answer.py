"""Vote on answer use case."""

from uuid import UUID

from pydantic import BaseModel

from devflow.application import views
from devflow.domain.service import VoteService
from devflow.domain.value import AnswerId, UserId, VotableType, VoteAction


class VoteAnswerRequest(BaseModel):
    """Vote on answer request."""

    answer_id: str
    user_id: str | None  # From authenticated user
    has_upvoted: bool = False
    has_downvoted: bool = False
    action: VoteAction
    path: str | None = None


class VoteAnswerResponse(BaseModel):
    """Vote on answer response."""

    answer_id: str
    question_id: str
    upvotes: int
    downvotes: int
    has_upvoted: bool
    has_downvoted: bool
    affected_views: list[str]


class VoteAnswerUseCase:
    """Use case for upvoting, downvoting or retracting a vote on an answer."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize vote answer use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: VoteAnswerRequest) -> VoteAnswerResponse:
        """Execute vote flow.

        Raises:
            InvalidVoteError: If the user id is missing
            InconsistentVoteStateError: If both flags are set
            NotFoundError: If the answer doesn't exist
        """
        user_id = UserId(UUID(request.user_id)) if request.user_id else None

        answer = await self.vote_service.vote(
            votable_type=VotableType.ANSWER,
            votable_id=AnswerId(UUID(request.answer_id)),
            user_id=user_id,
            has_upvoted=request.has_upvoted,
            has_downvoted=request.has_downvoted,
            action=request.action,
        )

        return VoteAnswerResponse(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            upvotes=answer.upvotes,
            downvotes=answer.downvotes,
            has_upvoted=answer.has_upvoted(user_id),
            has_downvoted=answer.has_downvoted(user_id),
            affected_views=views.affected_views(
                views.question_view(answer.question_id), path=request.path
            ),
        )
