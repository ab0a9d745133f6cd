"""Unit tests for the answer use cases."""

from uuid import UUID, uuid4

import pytest

from devflow.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerUseCase,
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    ListAnswersRequest,
    ListAnswersUseCase,
    ListUserAnswersRequest,
    ListUserAnswersUseCase,
    VoteAnswerRequest,
    VoteAnswerUseCase,
)
from devflow.domain.error import NotAuthorizedError, NotFoundError
from devflow.domain.repository import AnswerRepository, QuestionRepository, UserRepository
from devflow.domain.repository.answer import AnswerSort
from devflow.domain.value import UserId, VoteAction
from tests.conftest import ANSWER_BODY, make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateAnswer:
    """Tests for CreateAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_create_answer_bumps_answer_count(self, unit_env):
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))
        use_case = await unit_env.get(CreateAnswerUseCase)

        # Act
        response = await use_case.execute(
            CreateAnswerRequest(
                question_id=str(question.id),
                author_id=str(uuid4()),
                content=ANSWER_BODY,
            )
        )

        # Assert
        assert response.affected_views == [f"/question/{question.id}"]
        stored = await question_repo.find_by_id(question.id)
        assert stored.answer_count == 1

    @pytest.mark.asyncio
    async def test_answer_to_missing_question(self, unit_env):
        use_case = await unit_env.get(CreateAnswerUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateAnswerRequest(
                    question_id=str(uuid4()),
                    author_id=str(uuid4()),
                    content=ANSWER_BODY,
                )
            )


class TestListAnswers:
    """Tests for ListAnswersUseCase."""

    async def _seed(self, unit_env):
        answer_repo = await unit_env.get(AnswerRepository)
        question = make_question(UserId(uuid4()))
        voters = [UserId(uuid4()) for _ in range(3)]
        oldest = await answer_repo.save(
            make_answer(question.id, UserId(uuid4()), age_minutes=30, upvoters={voters[0]})
        )
        middle = await answer_repo.save(
            make_answer(question.id, UserId(uuid4()), age_minutes=20, upvoters=set(voters))
        )
        newest = await answer_repo.save(
            make_answer(question.id, UserId(uuid4()), age_minutes=10)
        )
        return question, oldest, middle, newest, voters

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "sort,expected",
        [
            (AnswerSort.OLD, ["oldest", "middle", "newest"]),
            (AnswerSort.RECENT, ["newest", "middle", "oldest"]),
            (AnswerSort.HIGHEST_UPVOTES, ["middle", "oldest", "newest"]),
            (AnswerSort.LOWEST_UPVOTES, ["newest", "oldest", "middle"]),
        ],
    )
    async def test_sort_orders(self, unit_env, sort, expected):
        question, oldest, middle, newest, _ = await self._seed(unit_env)
        names = {oldest.id: "oldest", middle.id: "middle", newest.id: "newest"}
        use_case = await unit_env.get(ListAnswersUseCase)

        response = await use_case.execute(
            ListAnswersRequest(question_id=str(question.id), sort=sort)
        )

        assert [names[UUID(a.answer_id)] for a in response.answers] == expected

    @pytest.mark.asyncio
    async def test_default_page_size_and_viewer_flags(self, unit_env):
        answer_repo = await unit_env.get(AnswerRepository)
        question, _, _, _, voters = await self._seed(unit_env)
        for _ in range(4):
            await answer_repo.save(make_answer(question.id, UserId(uuid4())))
        use_case = await unit_env.get(ListAnswersUseCase)

        response = await use_case.execute(
            ListAnswersRequest(question_id=str(question.id), viewer_id=str(voters[0]))
        )

        assert response.page_size == 5
        assert len(response.answers) == 5
        assert response.total == 7
        assert response.is_next is True
        assert response.answers[0].has_upvoted is True


class TestVoteAndDeleteAnswer:
    """Tests for VoteAnswerUseCase and DeleteAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_vote_answer(self, unit_env):
        answer_repo = await unit_env.get(AnswerRepository)
        answer = await answer_repo.save(make_answer(uuid4(), UserId(uuid4())))
        voter = uuid4()
        use_case = await unit_env.get(VoteAnswerUseCase)

        response = await use_case.execute(
            VoteAnswerRequest(
                answer_id=str(answer.id),
                user_id=str(voter),
                action=VoteAction.DOWNVOTE,
            )
        )

        assert (response.upvotes, response.downvotes) == (0, 1)
        assert response.has_downvoted is True
        assert response.affected_views == [f"/question/{answer.question_id}"]

    @pytest.mark.asyncio
    async def test_author_deletes_answer(self, unit_env):
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        author = UserId(uuid4())
        question = await question_repo.save(make_question(UserId(uuid4())))
        created = await (await unit_env.get(CreateAnswerUseCase)).execute(
            CreateAnswerRequest(
                question_id=str(question.id), author_id=str(author), content=ANSWER_BODY
            )
        )
        use_case = await unit_env.get(DeleteAnswerUseCase)

        response = await use_case.execute(
            DeleteAnswerRequest(answer_id=created.answer_id, user_id=str(author))
        )

        assert response.question_id == str(question.id)
        assert await answer_repo.find_by_id(UUID(created.answer_id)) is None
        stored = await question_repo.find_by_id(question.id)
        assert stored.answer_count == 0

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete_answer(self, unit_env):
        answer_repo = await unit_env.get(AnswerRepository)
        answer = await answer_repo.save(make_answer(uuid4(), UserId(uuid4())))
        use_case = await unit_env.get(DeleteAnswerUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteAnswerRequest(answer_id=str(answer.id), user_id=str(uuid4()))
            )


class TestListUserAnswers:
    """Tests for ListUserAnswersUseCase."""

    @pytest.mark.asyncio
    async def test_most_upvoted_first_with_question_titles(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        user = await user_repo.save(make_user())
        question = await question_repo.save(
            make_question(UserId(uuid4()), title="Where do answers go?")
        )
        plain = await answer_repo.save(make_answer(question.id, user.id))
        liked = await answer_repo.save(
            make_answer(question.id, user.id, upvoters={UserId(uuid4())})
        )
        await answer_repo.save(make_answer(question.id, UserId(uuid4())))
        use_case = await unit_env.get(ListUserAnswersUseCase)

        response = await use_case.execute(ListUserAnswersRequest(user_id=str(user.id)))

        assert [a.answer_id for a in response.answers] == [str(liked.id), str(plain.id)]
        assert response.answers[0].question_title == "Where do answers go?"
        assert response.page_size == 10

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        use_case = await unit_env.get(ListUserAnswersUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ListUserAnswersRequest(user_id=str(uuid4())))
