"""In-memory question repository for testing."""

from typing import Optional

from devflow.domain.model.question import Question
from devflow.domain.repository.question import (
    NEWEST_FIRST,
    QuestionCriteria,
    QuestionRepository,
    SortField,
    SortKey,
)
from devflow.domain.value import QuestionId, VoteUpdate


def _sort_value(question: Question, field: SortField):
    if field == SortField.UPVOTES:
        return question.upvotes
    return getattr(question, field.value)


def _matches(question: Question, criteria: QuestionCriteria) -> bool:
    if criteria.author_id is not None and question.author_id != criteria.author_id:
        return False
    if criteria.question_ids is not None and question.id not in criteria.question_ids:
        return False
    if criteria.tag is not None and criteria.tag.key not in {
        name.key for name in question.tag_names
    }:
        return False
    if criteria.unanswered_only and question.answer_count != 0:
        return False
    if criteria.search:
        needle = criteria.search.casefold()
        haystacks = [question.title]
        if criteria.search_content:
            haystacks.append(question.content)
        if not any(needle in text.casefold() for text in haystacks):
            return False
    return True


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_by_ids(self, question_ids: list[QuestionId]) -> list[Question]:
        """Find several questions by ID."""
        return [self._questions[qid] for qid in question_ids if qid in self._questions]

    async def find(
        self,
        criteria: QuestionCriteria,
        ordering: tuple[SortKey, ...] = NEWEST_FIRST,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions matching criteria."""
        questions = [q for q in self._questions.values() if _matches(q, criteria)]

        # Sort by the least significant key first; list.sort is stable
        questions.sort(key=lambda q: str(q.id))
        for key in reversed(ordering):
            questions.sort(
                key=lambda q, f=key.field: _sort_value(q, f),
                reverse=key.descending,
            )

        return questions[offset : offset + limit]

    async def count(self, criteria: QuestionCriteria) -> int:
        """Count questions matching criteria."""
        return sum(1 for q in self._questions.values() if _matches(q, criteria))

    async def save(self, question: Question) -> Question:
        """Save or update a question, keeping stored counters on update."""
        existing = self._questions.get(question.id)
        if existing:
            question = question.model_copy(
                update={
                    "views": existing.views,
                    "answer_count": existing.answer_count,
                    "upvoters": existing.upvoters,
                    "downvoters": existing.downvoters,
                }
            )
        self._questions[question.id] = question
        return question

    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question."""
        self._questions.pop(question_id, None)

    async def apply_vote(
        self, question_id: QuestionId, update: VoteUpdate
    ) -> Optional[Question]:
        """Apply a vote update."""
        question = self._questions.get(question_id)
        if not question:
            return None
        upvoters, downvoters = update.apply(question.upvoters, question.downvoters)
        updated = Question.model_validate(
            {**question.model_dump(), "upvoters": upvoters, "downvoters": downvoters}
        )
        self._questions[question_id] = updated
        return updated

    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Increment views by 1."""
        question = self._questions.get(question_id)
        if not question:
            return None
        updated = question.model_copy(update={"views": question.views + 1})
        self._questions[question_id] = updated
        return updated

    async def adjust_answer_count(self, question_id: QuestionId, delta: int) -> None:
        """Add delta to answer_count (minimum 0)."""
        question = self._questions.get(question_id)
        if question:
            self._questions[question_id] = question.model_copy(
                update={"answer_count": max(0, question.answer_count + delta)}
            )
