"""Unit tests for the SQL that applies votes and filters questions.

Statements are compiled against the PostgreSQL dialect; no database needed.
"""

from uuid import uuid4

from sqlalchemy.dialects import postgresql

from devflow.domain.repository import QuestionCriteria
from devflow.domain.value import SetOperation, TagName, UserId, VoteUpdate
from devflow.persistence.repository.question import (
    _where_clauses,
    like_pattern,
    vote_values,
    voter_array_expression,
)
from devflow.persistence.tables import answers_table, questions_table


def _sql(expression) -> str:
    return str(expression.compile(dialect=postgresql.dialect()))


class TestVoterArrayExpression:
    """Tests for voter_array_expression."""

    def test_add_removes_before_appending(self):
        sql = _sql(
            voter_array_expression(
                questions_table.c.upvoters, SetOperation.ADD, UserId(uuid4())
            )
        )

        assert sql.startswith("array_append(array_remove(questions.upvoters")

    def test_remove(self):
        sql = _sql(
            voter_array_expression(
                questions_table.c.downvoters, SetOperation.REMOVE, UserId(uuid4())
            )
        )

        assert sql.startswith("array_remove(questions.downvoters")

    def test_none_keeps_column(self):
        column = questions_table.c.upvoters

        assert voter_array_expression(column, SetOperation.NONE, UserId(uuid4())) is column


class TestVoteStatement:
    """A vote is one UPDATE touching both arrays."""

    def test_switch_vote_is_a_single_update(self):
        update = VoteUpdate(
            user_id=UserId(uuid4()),
            upvoters=SetOperation.REMOVE,
            downvoters=SetOperation.ADD,
        )

        statement = (
            answers_table.update()
            .where(answers_table.c.id == uuid4())
            .values(**vote_values(answers_table, update))
            .returning(answers_table)
        )
        sql = _sql(statement)

        assert sql.count("UPDATE") == 1
        assert "upvoters=array_remove(answers.upvoters" in sql
        assert "downvoters=array_append(array_remove(answers.downvoters" in sql
        assert "RETURNING" in sql

    def test_upvote_always_leaves_downvoters(self):
        # No downvote is claimed, the statement still clears it
        update = VoteUpdate(user_id=UserId(uuid4()), upvoters=SetOperation.ADD)

        values = vote_values(questions_table, update)

        assert _sql(values["upvoters"]).startswith(
            "array_append(array_remove(questions.upvoters"
        )
        assert _sql(values["downvoters"]).startswith("array_remove(questions.downvoters")


class TestWhereClauses:
    """Listing predicates."""

    def test_empty_criteria(self):
        assert _where_clauses(QuestionCriteria()) == []

    def test_search_scope(self):
        (title_only,) = _where_clauses(QuestionCriteria(search="orm"))
        (with_content,) = _where_clauses(
            QuestionCriteria(search="orm", search_content=True)
        )

        assert "content" not in _sql(title_only)
        assert "questions.content ILIKE" in _sql(with_content)

    def test_search_escapes_wildcards(self):
        (clause,) = _where_clauses(QuestionCriteria(search="100%_done"))
        compiled = clause.compile(dialect=postgresql.dialect())

        assert "ESCAPE" in str(compiled)
        assert "%100\\%\\_done%" in compiled.params.values()

    def test_tag_is_matched_case_insensitively(self):
        (clause,) = _where_clauses(QuestionCriteria(tag=TagName("FastAPI")))

        assert "lower(tags.name)" in _sql(clause)

    def test_unanswered(self):
        (clause,) = _where_clauses(QuestionCriteria(unanswered_only=True))

        sql = _sql(clause)

        assert sql.startswith("questions.answer_count = ")
        assert clause.right.value == 0


class TestLikePattern:
    """Tests for like_pattern."""

    def test_plain_text(self):
        assert like_pattern("orm") == "%orm%"

    def test_escapes_backslash_first(self):
        assert like_pattern("a\\b_c") == "%a\\\\b\\_c%"
