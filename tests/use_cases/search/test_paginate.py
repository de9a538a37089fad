"""
Tests for paginate.
"""

import math

import pytest

from osrs_mcp.use_cases.search.paginate import paginate


class TestPaginate:
    """Test cases for page arithmetic."""

    def test_first_page(self):
        visible, p = paginate(list(range(25)), 1, 10)

        assert visible == list(range(10))
        assert (p.total_results, p.total_pages) == (25, 3)
        assert p.has_next_page is True
        assert p.has_previous_page is False

    def test_last_partial_page(self):
        visible, p = paginate(list(range(25)), 3, 10)

        assert visible == [20, 21, 22, 23, 24]
        assert p.has_next_page is False
        assert p.has_previous_page is True

    def test_page_beyond_end(self):
        """Test that a page past the end is empty rather than an error."""
        visible, p = paginate(list(range(5)), 4, 2)

        assert visible == []
        assert p.total_pages == 3
        assert p.has_next_page is False
        assert p.has_previous_page is True

    def test_page_size_larger_than_total(self):
        visible, p = paginate(["a", "b"], 1, 100)

        assert visible == ["a", "b"]
        assert p.total_pages == 1
        assert p.has_next_page is False

    def test_empty(self):
        visible, p = paginate([], 1, 10)

        assert visible == []
        assert p.total_results == 0
        assert p.total_pages == 0
        assert p.has_next_page is False
        assert p.has_previous_page is False

    def test_empty_beyond_first_page(self):
        visible, p = paginate([], 2, 10)

        assert visible == []
        assert p.has_next_page is False
        assert p.has_previous_page is True

    @pytest.mark.parametrize("total", [1, 2, 7, 10, 11, 99])
    @pytest.mark.parametrize("page_size", [1, 3, 10, 100])
    def test_pages_partition_items(self, total, page_size):
        """Test that all pages together are the full list, in order, without overlap."""
        items = list(range(total))
        total_pages = math.ceil(total / page_size)

        collected = []
        for page in range(1, total_pages + 1):
            visible, p = paginate(items, page, page_size)
            assert p.total_pages == total_pages
            assert p.has_next_page == (page < total_pages)
            assert p.has_previous_page == (page > 1)
            collected.extend(visible)

        assert collected == items
