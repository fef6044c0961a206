"""
Unit Tests for Pagination

Single-pass page filling, page sealing, and vertical positions.
"""

import pytest

from converter.contracts import ContractError, Line, Page
from converter.layout.paginator import paginate


def make_lines(count):
    return [Line(text=f"line {i}", width=60.0, paragraph=i) for i in range(count)]


class TestPaginate:
    """Test paginate() against the small test geometry (5 lines per page)."""

    def test_no_lines_gives_one_empty_page(self, geometry):
        """There is always at least one page."""
        pages = paginate([], geometry)
        assert len(pages) == 1
        assert pages[0].lines == []

    def test_first_line_at_top(self, geometry):
        """The first baseline sits at height - margin."""
        pages = paginate(make_lines(1), geometry)
        placed = pages[0].lines[0]
        assert placed.y == pytest.approx(90)
        assert placed.x == 10

    def test_line_positions_step_by_line_height(self, geometry):
        """Lines are stacked line_height apart."""
        pages = paginate(make_lines(5), geometry)
        ys = [placed.y for placed in pages[0].lines]
        assert ys == pytest.approx([90, 76, 62, 48, 34])

    def test_overflow_opens_new_pages(self, geometry):
        """Twelve lines fill pages of 5, 5 and 2."""
        pages = paginate(make_lines(12), geometry)

        assert [len(page.lines) for page in pages] == [5, 5, 2]
        assert [page.number for page in pages] == [1, 2, 3]
        assert pages[1].lines[0].y == pytest.approx(90)

    def test_previous_pages_are_sealed(self, geometry):
        """Only the last page stays open."""
        pages = paginate(make_lines(12), geometry)
        assert [page.sealed for page in pages] == [True, True, False]

    def test_reading_order_preserved(self, geometry):
        """Lines appear across pages in input order."""
        lines = make_lines(17)
        pages = paginate(lines, geometry)
        placed = [p.line for page in pages for p in page.lines]
        assert placed == lines

    def test_positions_inside_margins(self, letter_geometry):
        """margin <= y <= height - margin for every line."""
        pages = paginate(make_lines(400), letter_geometry)
        for page in pages:
            for placed in page.lines:
                assert letter_geometry.margin <= placed.y <= letter_geometry.height - letter_geometry.margin

    def test_letter_page_capacity(self, letter_geometry):
        """Letter, 40pt margins, 16.8pt leading holds 42 lines."""
        pages = paginate(make_lines(43), letter_geometry)
        assert [len(page.lines) for page in pages] == [42, 1]


class TestPage:
    """Test Page cursor and sealing."""

    def test_sealed_page_rejects_lines(self):
        """Appending to a sealed page is a contract violation."""
        page = Page(number=1, cursor=90)
        page.seal()
        with pytest.raises(ContractError):
            page.place(Line(text="late", width=40.0), x=10)

    def test_advance_moves_cursor_down(self):
        page = Page(number=1, cursor=90)
        page.advance(14)
        assert page.cursor == 76

    def test_has_room(self):
        page = Page(number=1, cursor=24)
        assert page.has_room(14, 10)
        page.advance(0.5)
        assert not page.has_room(14, 10)
