"""Unit tests for domain models and value objects."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from devflow.domain.value import TagName, UserId, Username
from tests.conftest import make_question


class TestVotable:
    """Tests for voter sets on questions and answers."""

    def test_counts_are_derived_from_sets(self):
        author = UserId(uuid4())
        up = {UserId(uuid4()), UserId(uuid4())}
        down = {UserId(uuid4())}

        question = make_question(author, upvoters=up, downvoters=down)

        assert question.upvotes == 2
        assert question.downvotes == 1

    def test_overlapping_sets_are_rejected(self):
        author = UserId(uuid4())
        voter = UserId(uuid4())

        with pytest.raises(ValidationError, match="both upvote and downvote"):
            make_question(author, upvoters={voter}, downvoters={voter})

    def test_membership_for_anonymous_viewer(self):
        question = make_question(UserId(uuid4()))

        assert question.has_upvoted(None) is False
        assert question.has_downvoted(None) is False


class TestQuestion:
    """Tests for question field rules."""

    def test_requires_at_least_one_tag(self):
        with pytest.raises(ValidationError):
            make_question(UserId(uuid4()), tags=())

    def test_allows_at_most_three_tags(self):
        with pytest.raises(ValidationError):
            make_question(UserId(uuid4()), tags=("a", "b", "c", "d"))

    def test_rejects_short_title(self):
        with pytest.raises(ValidationError):
            make_question(UserId(uuid4()), title="Why")


class TestTagName:
    """Tests for TagName."""

    def test_strips_surrounding_whitespace(self):
        assert TagName("  react ").root == "react"

    def test_key_is_case_insensitive(self):
        assert TagName("Next.js").key == TagName("next.JS").key

    @pytest.mark.parametrize("name", ["", "has space", "x" * 16])
    def test_invalid_names(self, name):
        with pytest.raises(ValidationError):
            TagName(name)


class TestUsername:
    """Tests for Username."""

    def test_valid_username(self):
        assert Username("jane_doe-1").root == "jane_doe-1"

    @pytest.mark.parametrize("name", ["ab", "with space", "emoji😀"])
    def test_invalid_usernames(self, name):
        with pytest.raises(ValidationError):
            Username(name)
