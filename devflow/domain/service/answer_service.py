"""Answer domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from devflow.domain.error import NotAuthorizedError, NotFoundError
from devflow.domain.model import Answer
from devflow.domain.repository import AnswerRepository, AnswerSort
from devflow.domain.value import AnswerId, QuestionId, UserId, VoteUpdate

from .base import Service


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(self, answer_repository: AnswerRepository) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
        """
        self.answer_repository = answer_repository

    async def create_answer(
        self, question_id: QuestionId, author_id: UserId, content: str
    ) -> Answer:
        """Create and save an answer.

        The caller is responsible for checking the question exists and for
        bumping its answer count.

        Args:
            question_id: Question being answered
            author_id: Author's user ID
            content: Answer body (HTML)

        Returns:
            Saved answer
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            author_id=str(author_id),
        ):
            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question_id,
                author_id=author_id,
                content=content,
                created_at=datetime.now(),
            )
            saved = await self.answer_repository.save(answer)
            logfire.info("Answer created", answer_id=str(saved.id))
            return saved

    async def get_by_id(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID.

        Raises:
            NotFoundError: If answer not found
        """
        with logfire.span("answer_service.get_by_id", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Answer not found", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))
            return answer

    async def list_for_question(
        self,
        question_id: QuestionId,
        sort: AnswerSort = AnswerSort.OLD,
        limit: int = 5,
        offset: int = 0,
    ) -> tuple[list[Answer], int]:
        """List a question's answers.

        Returns:
            Tuple of (answers for this page, total answers)
        """
        with logfire.span(
            "answer_service.list_for_question",
            question_id=str(question_id),
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            total = await self.answer_repository.count_by_question(question_id)
            answers = await self.answer_repository.find_by_question(
                question_id, sort=sort, limit=limit, offset=offset
            )
            return answers, total

    async def list_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> tuple[list[Answer], int]:
        """List a user's answers, most upvoted first.

        Returns:
            Tuple of (answers for this page, total answers by the user)
        """
        with logfire.span(
            "answer_service.list_by_author",
            author_id=str(author_id),
            limit=limit,
            offset=offset,
        ):
            total = await self.answer_repository.count_by_author(author_id)
            answers = await self.answer_repository.find_by_author(
                author_id, limit=limit, offset=offset
            )
            return answers, total

    async def count_by_author(self, author_id: UserId) -> int:
        return await self.answer_repository.count_by_author(author_id)

    async def delete_answer(self, answer_id: AnswerId, user_id: UserId) -> Answer:
        """Delete an answer after checking ownership.

        Returns:
            The deleted answer

        Raises:
            NotFoundError: If answer not found
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "answer_service.delete_answer",
            answer_id=str(answer_id),
            user_id=str(user_id),
        ):
            answer = await self.get_by_id(answer_id)
            if answer.author_id != user_id:
                logfire.warn(
                    "Unauthorized answer deletion",
                    answer_id=str(answer_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("answer", str(answer_id), str(user_id))

            await self.answer_repository.delete(answer_id)
            logfire.info("Answer deleted", answer_id=str(answer_id))
            return answer

    async def delete_for_question(self, question_id: QuestionId) -> None:
        with logfire.span(
            "answer_service.delete_for_question", question_id=str(question_id)
        ):
            await self.answer_repository.delete_by_question(question_id)

    async def apply_vote(self, answer_id: AnswerId, update: VoteUpdate) -> Answer:
        """Apply a vote update atomically.

        Raises:
            NotFoundError: If answer not found
        """
        with logfire.span(
            "answer_service.apply_vote",
            answer_id=str(answer_id),
            user_id=str(update.user_id),
            upvoters=update.upvoters.value,
            downvoters=update.downvoters.value,
        ):
            answer = await self.answer_repository.apply_vote(answer_id, update)
            if not answer:
                logfire.warn("Vote on non-existent answer", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))
            return answer
