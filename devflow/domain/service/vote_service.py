"""Vote domain service."""

from typing import Union

import logfire

from devflow.domain.model import Answer, Question
from devflow.domain.value import AnswerId, QuestionId, UserId, VotableType, VoteAction

from .answer_service import AnswerService
from .base import Service
from .question_service import QuestionService
from .vote_coordinator import compute_vote_update


class VoteService(Service):
    """Domain service for votes on questions and answers.

    Runs the vote coordinator on the caller's view of its current vote and
    hands the resulting update to the owning service to apply atomically.
    """

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> None:
        """Initialize vote service.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service

    async def vote(
        self,
        votable_type: VotableType,
        votable_id: Union[QuestionId, AnswerId],
        user_id: UserId | None,
        has_upvoted: bool,
        has_downvoted: bool,
        action: VoteAction,
    ) -> Union[Question, Answer]:
        """Record a vote click.

        Args:
            votable_type: Question or answer
            votable_id: ID of the question or answer
            user_id: Voting user
            has_upvoted: Whether the user currently upvotes the item
            has_downvoted: Whether the user currently downvotes the item
            action: Direction clicked

        Returns:
            The item with its updated voter sets

        Raises:
            InvalidVoteError: If the user id is missing
            InconsistentVoteStateError: If both flags are set
            NotFoundError: If the item doesn't exist
        """
        with logfire.span(
            "vote_service.vote",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            user_id=str(user_id),
            action=action.value,
        ):
            update = compute_vote_update(user_id, has_upvoted, has_downvoted, action)

            if votable_type == VotableType.QUESTION:
                votable: Union[Question, Answer] = await self.question_service.apply_vote(
                    QuestionId(votable_id), update
                )
            else:
                votable = await self.answer_service.apply_vote(AnswerId(votable_id), update)

            logfire.info(
                "Vote applied",
                votable_type=votable_type.value,
                votable_id=str(votable_id),
                upvotes=votable.upvotes,
                downvotes=votable.downvotes,
            )
            return votable
