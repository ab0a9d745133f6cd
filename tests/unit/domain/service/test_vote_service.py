"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from devflow.domain.error import (
    InconsistentVoteStateError,
    InvalidVoteError,
    NotFoundError,
)
from devflow.domain.repository import AnswerRepository, QuestionRepository
from devflow.domain.service import VoteService
from devflow.domain.value import AnswerId, QuestionId, UserId, VotableType, VoteAction
from tests.conftest import make_answer, make_question
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestVoteOnQuestion:
    """Tests for votes on questions."""

    @pytest.mark.asyncio
    async def test_upvote_adds_user_to_upvoters(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))
        voter = UserId(uuid4())

        # Act
        result = await vote_service.vote(
            VotableType.QUESTION, question.id, voter, False, False, VoteAction.UPVOTE
        )

        # Assert
        assert result.upvoters == {voter}
        stored = await question_repo.find_by_id(question.id)
        assert stored.upvotes == 1

    @pytest.mark.asyncio
    async def test_switching_vote_moves_user_across(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        voter = UserId(uuid4())
        other = UserId(uuid4())
        question = await question_repo.save(
            make_question(UserId(uuid4()), upvoters={voter, other})
        )

        result = await vote_service.vote(
            VotableType.QUESTION, question.id, voter, True, False, VoteAction.DOWNVOTE
        )

        assert result.upvoters == {other}
        assert result.downvoters == {voter}

    @pytest.mark.asyncio
    async def test_vote_on_missing_question_raises_not_found(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError, match="Question not found"):
            await vote_service.vote(
                VotableType.QUESTION,
                QuestionId(uuid4()),
                UserId(uuid4()),
                False,
                False,
                VoteAction.UPVOTE,
            )

    @pytest.mark.asyncio
    async def test_invalid_input_is_rejected_before_lookup(self, unit_env):
        """Missing user fails with the invalid-input error, not not-found."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(InvalidVoteError):
            await vote_service.vote(
                VotableType.QUESTION,
                QuestionId(uuid4()),
                None,
                False,
                False,
                VoteAction.UPVOTE,
            )

    @pytest.mark.asyncio
    async def test_inconsistent_state_leaves_question_untouched(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))

        with pytest.raises(InconsistentVoteStateError):
            await vote_service.vote(
                VotableType.QUESTION,
                question.id,
                UserId(uuid4()),
                True,
                True,
                VoteAction.DOWNVOTE,
            )

        stored = await question_repo.find_by_id(question.id)
        assert stored.upvoters == frozenset()
        assert stored.downvoters == frozenset()


class TestVoteOnAnswer:
    """Tests for votes on answers."""

    @pytest.mark.asyncio
    async def test_repeated_downvote_retracts(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        answer_repo = await unit_env.get(AnswerRepository)
        voter = UserId(uuid4())
        answer = await answer_repo.save(
            make_answer(QuestionId(uuid4()), UserId(uuid4()), downvoters={voter})
        )

        result = await vote_service.vote(
            VotableType.ANSWER, answer.id, voter, False, True, VoteAction.DOWNVOTE
        )

        assert result.downvoters == frozenset()
        assert result.upvoters == frozenset()

    @pytest.mark.asyncio
    async def test_vote_on_missing_answer_raises_not_found(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError, match="Answer not found"):
            await vote_service.vote(
                VotableType.ANSWER,
                AnswerId(uuid4()),
                UserId(uuid4()),
                False,
                False,
                VoteAction.DOWNVOTE,
            )
