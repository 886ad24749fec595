"""Unit tests for pagination arithmetic."""

from st_pagination.utils.pagination import (
    clamp_page_number,
    compute_total_pages,
    jump_length,
    page_slice,
)


class TestComputeTotalPages:
    def test_rounds_up(self):
        assert compute_total_pages(25, 10) == 3
        assert compute_total_pages(30, 10) == 3
        assert compute_total_pages(31, 10) == 4

    def test_empty_has_one_page(self):
        assert compute_total_pages(0, 10) == 1

    def test_non_positive_page_size(self):
        assert compute_total_pages(50, 0) == 1


class TestClampPageNumber:
    def test_within_bounds(self):
        assert clamp_page_number(3, 5) == 3

    def test_above_upper_bound(self):
        assert clamp_page_number(9, 3) == 3

    def test_below_lower_bound(self):
        assert clamp_page_number(0, 3) == 1
        assert clamp_page_number(-4, 3) == 1

    def test_zero_total_pages(self):
        assert clamp_page_number(2, 0) == 1


class TestPageSlice:
    def test_offsets(self):
        assert page_slice(1, 20) == (0, 20)
        assert page_slice(5, 20) == (80, 100)


class TestJumpLength:
    def test_quarter_of_pages(self):
        assert jump_length(5) == 1
        assert jump_length(3) == 0
        assert jump_length(40) == 10
