"""Question domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from devflow.domain.error import NotAuthorizedError, NotFoundError
from devflow.domain.model import Question
from devflow.domain.repository import QuestionCriteria, QuestionRepository, SortKey
from devflow.domain.repository.question import NEWEST_FIRST
from devflow.domain.value import QuestionId, TagName, UserId, VoteUpdate

from .base import Service


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def create_question(
        self,
        title: str,
        content: str,
        tag_names: list[TagName],
        author_id: UserId,
    ) -> Question:
        """Create and save a new question.

        Args:
            title: Question title
            content: Question body (HTML)
            tag_names: Tag names, as resolved by the tag service
            author_id: Author's user ID

        Returns:
            Saved question
        """
        with logfire.span(
            "question_service.create_question",
            author_id=str(author_id),
            title=title,
            tags=[t.root for t in tag_names],
        ):
            now = datetime.now()
            question = Question(
                id=QuestionId(uuid4()),
                title=title,
                content=content,
                tag_names=tag_names,
                author_id=author_id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.question_repository.save(question)
            logfire.info("Question created", question_id=str(saved.id))
            return saved

    async def get_by_id(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Raises:
            NotFoundError: If question not found
        """
        with logfire.span("question_service.get_by_id", question_id=str(question_id)):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def get_for_author(self, question_id: QuestionId, user_id: UserId) -> Question:
        """Get a question the user is allowed to change.

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If the user is not the author
        """
        question = await self.get_by_id(question_id)
        self._ensure_author(question, user_id)
        return question

    async def get_by_ids(self, question_ids: list[QuestionId]) -> dict[QuestionId, Question]:
        """Batch fetch questions, keyed by id."""
        if not question_ids:
            return {}
        questions = await self.question_repository.find_by_ids(list(set(question_ids)))
        return {question.id: question for question in questions}

    async def list_questions(
        self,
        criteria: QuestionCriteria,
        ordering: tuple[SortKey, ...] = NEWEST_FIRST,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Question], int]:
        """List questions matching criteria.

        Returns:
            Tuple of (questions for this page, total matching questions)
        """
        with logfire.span(
            "question_service.list_questions",
            author_id=str(criteria.author_id) if criteria.author_id else None,
            tag=criteria.tag.root if criteria.tag else None,
            unanswered_only=criteria.unanswered_only,
            search=criteria.search,
            ordering=[
                f"{key.field.value} {'desc' if key.descending else 'asc'}"
                for key in ordering
            ],
            limit=limit,
            offset=offset,
        ):
            total = await self.question_repository.count(criteria)
            questions = await self.question_repository.find(
                criteria, ordering=ordering, limit=limit, offset=offset
            )
            logfire.info("Questions listed", count=len(questions), total=total)
            return questions, total

    async def count_by_author(self, author_id: UserId) -> int:
        return await self.question_repository.count(QuestionCriteria(author_id=author_id))

    async def edit_question(
        self, question_id: QuestionId, user_id: UserId, title: str, content: str
    ) -> Question:
        """Edit a question's title and content. Tags are not editable.

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "question_service.edit_question",
            question_id=str(question_id),
            user_id=str(user_id),
        ):
            question = await self.get_for_author(question_id, user_id)

            updated = Question.model_validate(
                {
                    **question.model_dump(),
                    "title": title,
                    "content": content,
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.question_repository.save(updated)
            logfire.info("Question edited", question_id=str(question_id))
            return saved

    async def delete_question(self, question_id: QuestionId, user_id: UserId) -> Question:
        """Delete a question row after checking ownership.

        Answers, tag links and collection entries are cleaned up by the caller.

        Returns:
            The deleted question

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "question_service.delete_question",
            question_id=str(question_id),
            user_id=str(user_id),
        ):
            question = await self.get_for_author(question_id, user_id)
            await self.question_repository.delete(question_id)
            logfire.info("Question deleted", question_id=str(question_id))
            return question

    async def apply_vote(self, question_id: QuestionId, update: VoteUpdate) -> Question:
        """Apply a vote update atomically.

        Raises:
            NotFoundError: If question not found
        """
        with logfire.span(
            "question_service.apply_vote",
            question_id=str(question_id),
            user_id=str(update.user_id),
            upvoters=update.upvoters.value,
            downvoters=update.downvoters.value,
        ):
            question = await self.question_repository.apply_vote(question_id, update)
            if not question:
                logfire.warn("Vote on non-existent question", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def increment_views(self, question_id: QuestionId) -> Question:
        """Atomically increment a question's view count.

        Raises:
            NotFoundError: If question not found
        """
        with logfire.span("question_service.increment_views", question_id=str(question_id)):
            question = await self.question_repository.increment_views(question_id)
            if not question:
                raise NotFoundError("Question", str(question_id))
            return question

    async def increment_answer_count(self, question_id: QuestionId) -> None:
        with logfire.span(
            "question_service.increment_answer_count", question_id=str(question_id)
        ):
            await self.question_repository.adjust_answer_count(question_id, 1)

    async def decrement_answer_count(self, question_id: QuestionId) -> None:
        with logfire.span(
            "question_service.decrement_answer_count", question_id=str(question_id)
        ):
            await self.question_repository.adjust_answer_count(question_id, -1)

    @staticmethod
    def _ensure_author(question: Question, user_id: UserId) -> None:
        if question.author_id != user_id:
            logfire.warn(
                "Unauthorized question change",
                question_id=str(question.id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("question", str(question.id), str(user_id))
