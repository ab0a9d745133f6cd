"""Unit tests for QuestionService."""

from uuid import uuid4

import pytest

from devflow.domain.error import NotAuthorizedError, NotFoundError
from devflow.domain.repository import QuestionCriteria, QuestionFilter, QuestionRepository
from devflow.domain.service import QuestionService
from devflow.domain.value import QuestionId, TagName, UserId
from tests.conftest import make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateAndEdit:
    """Tests for create_question and edit_question."""

    @pytest.mark.asyncio
    async def test_create_question(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        author = UserId(uuid4())

        question = await question_service.create_question(
            title="Why does my loop never end?",
            content="<p>It keeps running even after the condition changes.</p>",
            tag_names=[TagName("python")],
            author_id=author,
        )

        assert question.views == 0
        assert question.answer_count == 0
        assert question.upvotes == 0
        fetched = await question_service.get_by_id(question.id)
        assert fetched.title == "Why does my loop never end?"

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        author = UserId(uuid4())
        voter = UserId(uuid4())
        question = await question_repo.save(
            make_question(author, views=7, upvoters={voter})
        )

        edited = await question_service.edit_question(
            question.id, author, "A clearer title", "<p>More detail about the problem.</p>"
        )

        assert edited.title == "A clearer title"
        assert edited.tag_names == question.tag_names
        # Counters are owned by their own atomic operations
        assert edited.views == 7
        assert edited.upvoters == {voter}

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))

        with pytest.raises(NotAuthorizedError):
            await question_service.edit_question(
                question.id,
                UserId(uuid4()),
                "Hijacked title",
                "<p>Someone else's words here.</p>",
            )

    @pytest.mark.asyncio
    async def test_edit_revalidates_fields(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        author = UserId(uuid4())
        question = await question_repo.save(make_question(author))

        with pytest.raises(ValueError):
            await question_service.edit_question(question.id, author, "Hi", "short")


class TestCounters:
    """Tests for view and answer counters."""

    @pytest.mark.asyncio
    async def test_increment_views(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))

        await question_service.increment_views(question.id)
        updated = await question_service.increment_views(question.id)

        assert updated.views == 2

    @pytest.mark.asyncio
    async def test_increment_views_missing_question(self, unit_env):
        question_service = await unit_env.get(QuestionService)

        with pytest.raises(NotFoundError):
            await question_service.increment_views(QuestionId(uuid4()))

    @pytest.mark.asyncio
    async def test_answer_count_never_negative(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))

        await question_service.increment_answer_count(question.id)
        await question_service.decrement_answer_count(question.id)
        await question_service.decrement_answer_count(question.id)

        stored = await question_repo.find_by_id(question.id)
        assert stored.answer_count == 0


class TestListQuestions:
    """Tests for list_questions."""

    @pytest.mark.asyncio
    async def test_unanswered_filter_and_total(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        author = UserId(uuid4())
        await question_repo.save(make_question(author, title="Answered one", answer_count=2))
        for i in range(3):
            await question_repo.save(make_question(author, title=f"Open question {i}"))

        questions, total = await question_service.list_questions(
            QuestionCriteria(unanswered_only=QuestionFilter.UNANSWERED.unanswered_only),
            ordering=QuestionFilter.UNANSWERED.ordering,
            limit=2,
        )

        assert total == 3
        assert len(questions) == 2
        assert all(q.answer_count == 0 for q in questions)

    @pytest.mark.asyncio
    async def test_most_voted_ordering(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        author = UserId(uuid4())
        low = await question_repo.save(make_question(author, title="Low votes"))
        high = await question_repo.save(
            make_question(
                author, title="High votes", upvoters={UserId(uuid4()), UserId(uuid4())}
            )
        )

        questions, _ = await question_service.list_questions(
            QuestionCriteria(), ordering=QuestionFilter.MOST_VOTED.ordering
        )

        assert [q.id for q in questions] == [high.id, low.id]

    @pytest.mark.asyncio
    async def test_search_title_only_unless_content_requested(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        await question_repo.save(
            make_question(
                UserId(uuid4()),
                title="Decorators explained",
                content="<p>What does functools.wraps actually do here?</p>",
            )
        )

        _, title_only = await question_service.list_questions(
            QuestionCriteria(search="WRAPS")
        )
        _, with_content = await question_service.list_questions(
            QuestionCriteria(search="WRAPS", search_content=True)
        )

        assert title_only == 0
        assert with_content == 1
