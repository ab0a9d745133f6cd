"""Unit tests for affected-view and pagination helpers."""

import pytest

from devflow.application import views
from devflow.application.pagination import page_info, page_offset, resolve_page_size


class TestAffectedViews:
    """Tests for affected_views."""

    def test_path_comes_first(self):
        assert views.affected_views(views.HOME, path="/tags") == ["/tags", "/"]

    def test_duplicates_are_dropped(self):
        assert views.affected_views(
            views.HOME, views.COLLECTION, path="/collection"
        ) == ["/collection", "/"]

    def test_no_path(self):
        assert views.affected_views(views.question_view("abc")) == ["/question/abc"]

    def test_canonical_views(self):
        assert views.tag_view("t1") == "/tags/t1"
        assert views.profile_view("user_1") == "/profile/user_1"


class TestPagination:
    """Tests for page-based pagination."""

    @pytest.mark.parametrize(
        "page,page_size,offset", [(1, 20, 0), (2, 20, 20), (3, 5, 10)]
    )
    def test_page_offset(self, page, page_size, offset):
        assert page_offset(page, page_size) == offset

    def test_is_next_when_items_remain(self):
        assert page_info(page=1, page_size=2, total=3, returned=2).is_next is True

    def test_last_full_page_has_no_next(self):
        assert page_info(page=2, page_size=2, total=4, returned=2).is_next is False

    def test_page_past_the_end(self):
        info = page_info(page=5, page_size=10, total=3, returned=0)

        assert info.is_next is False
        assert info.total == 3

    def test_resolve_page_size(self):
        assert resolve_page_size(None, default=20, maximum=100) == 20
        assert resolve_page_size(7, default=20, maximum=100) == 7
        assert resolve_page_size(1000, default=20, maximum=100) == 100
