"""Tests for list pagination."""

from __future__ import annotations

from pi.inquire.paginate import int_log10, paginate

CHOICES = list(range(10))


class TestShortLists:
    """Lists that fit in one page are shown whole."""

    def test_whole_list(self):
        page = paginate(7, [1, 2, 3], 1)
        assert page.content == [1, 2, 3]
        assert page.cursor == 1
        assert page.first and page.last
        assert page.total == 3

    def test_empty_list(self):
        page = paginate(7, [], None)
        assert page.content == []
        assert page.cursor is None
        assert page.first and page.last


class TestWindowing:
    """Longer lists keep the focus near the middle of the window."""

    def test_focus_near_top(self):
        page = paginate(5, CHOICES, 1)
        assert page.content == [0, 1, 2, 3, 4]
        assert page.cursor == 1
        assert page.first
        assert not page.last

    def test_focus_near_bottom(self):
        page = paginate(5, CHOICES, 9)
        assert page.content == [5, 6, 7, 8, 9]
        assert page.cursor == 4
        assert page.last
        assert not page.first

    def test_focus_in_middle(self):
        page = paginate(5, CHOICES, 5)
        assert page.content == [3, 4, 5, 6, 7]
        assert page.cursor == 2
        assert not page.first and not page.last

    def test_no_focus_shows_first_page(self):
        page = paginate(3, CHOICES, None)
        assert page.content == [0, 1, 2]
        assert page.cursor is None

    def test_window_always_holds_focus(self):
        for focus in CHOICES:
            page = paginate(4, CHOICES, focus)
            assert len(page.content) == 4
            assert page.content[page.cursor] == focus


def test_int_log10():
    assert int_log10(0) == 1
    assert int_log10(9) == 1
    assert int_log10(10) == 2
    assert int_log10(1234) == 4
