"""Unit tests for listing filters and sort options."""

import pytest

from devflow.domain.repository import QuestionFilter, SortField, SortKey
from devflow.domain.repository.answer import AnswerSort
from devflow.domain.repository.question import NEWEST_FIRST
from devflow.domain.repository.tag import TagSort


class TestQuestionFilter:
    """Every filter maps to an explicit ordering."""

    @pytest.mark.parametrize(
        "question_filter,ordering",
        [
            (QuestionFilter.NEWEST, NEWEST_FIRST),
            (QuestionFilter.RECOMMENDED, NEWEST_FIRST),
            (QuestionFilter.MOST_RECENT, NEWEST_FIRST),
            (QuestionFilter.UNANSWERED, NEWEST_FIRST),
            (QuestionFilter.FREQUENT, (SortKey(SortField.VIEWS),)),
            (QuestionFilter.MOST_VIEWED, (SortKey(SortField.VIEWS),)),
            (
                QuestionFilter.OLDEST,
                (SortKey(SortField.CREATED_AT, descending=False),),
            ),
            (QuestionFilter.MOST_VOTED, (SortKey(SortField.UPVOTES),)),
            (QuestionFilter.MOST_ANSWERED, (SortKey(SortField.ANSWER_COUNT),)),
        ],
    )
    def test_ordering(self, question_filter, ordering):
        assert question_filter.ordering == ordering

    def test_every_member_has_an_ordering(self):
        for question_filter in QuestionFilter:
            assert question_filter.ordering

    def test_only_unanswered_adds_a_predicate(self):
        assert [f for f in QuestionFilter if f.unanswered_only] == [
            QuestionFilter.UNANSWERED
        ]

    def test_unknown_value_is_rejected(self):
        with pytest.raises(ValueError):
            QuestionFilter("trending")


class TestClosedSortEnums:
    """Answer and tag sorts accept only their listed values."""

    def test_answer_sort_values(self):
        assert {s.value for s in AnswerSort} == {
            "highest_upvotes",
            "lowest_upvotes",
            "recent",
            "old",
        }

    def test_tag_sort_values(self):
        assert {s.value for s in TagSort} == {"popular", "recent", "name", "old"}

    def test_unknown_tag_sort_is_rejected(self):
        with pytest.raises(ValueError):
            TagSort("alphabetical")
