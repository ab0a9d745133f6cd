"""In-memory answer repository for testing."""

from typing import Optional

from devflow.domain.model.answer import Answer
from devflow.domain.repository.answer import AnswerRepository, AnswerSort
from devflow.domain.value import AnswerId, QuestionId, UserId, VoteUpdate


def _sorted(answers: list[Answer], sort: AnswerSort) -> list[Answer]:
    answers = sorted(answers, key=lambda a: a.created_at)
    if sort == AnswerSort.HIGHEST_UPVOTES:
        answers.sort(key=lambda a: a.upvotes, reverse=True)
    elif sort == AnswerSort.LOWEST_UPVOTES:
        answers.sort(key=lambda a: a.upvotes)
    elif sort == AnswerSort.RECENT:
        answers.reverse()
    return answers


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSort = AnswerSort.OLD,
        limit: int = 5,
        offset: int = 0,
    ) -> list[Answer]:
        """Find answers to a question."""
        answers = [a for a in self._answers.values() if a.question_id == question_id]
        return _sorted(answers, sort)[offset : offset + limit]

    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count answers to a question."""
        return sum(1 for a in self._answers.values() if a.question_id == question_id)

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Answer]:
        """Find answers by an author, most upvoted first."""
        answers = [a for a in self._answers.values() if a.author_id == author_id]
        return _sorted(answers, AnswerSort.HIGHEST_UPVOTES)[offset : offset + limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count answers by an author."""
        return sum(1 for a in self._answers.values() if a.author_id == author_id)

    async def save(self, answer: Answer) -> Answer:
        """Save or update an answer."""
        self._answers[answer.id] = answer
        return answer

    async def delete(self, answer_id: AnswerId) -> None:
        """Delete an answer."""
        self._answers.pop(answer_id, None)

    async def delete_by_question(self, question_id: QuestionId) -> None:
        """Delete every answer to a question."""
        self._answers = {
            aid: a for aid, a in self._answers.items() if a.question_id != question_id
        }

    async def apply_vote(
        self, answer_id: AnswerId, update: VoteUpdate
    ) -> Optional[Answer]:
        """Apply a vote update."""
        answer = self._answers.get(answer_id)
        if not answer:
            return None
        upvoters, downvoters = update.apply(answer.upvoters, answer.downvoters)
        updated = Answer.model_validate(
            {**answer.model_dump(), "upvoters": upvoters, "downvoters": downvoters}
        )
        self._answers[answer_id] = updated
        return updated
