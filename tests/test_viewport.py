"""Tests for the viewport arithmetic."""

import pytest

from scrollback.viewport import clamp_offset, progress, scroll_bottom_position, window_indices


class TestBottomPosition:
    @pytest.mark.parametrize("length, max_lines, expected", [
        (0, 3, 0),
        (3, 3, 0),
        (2, 10, 0),
        (4, 3, -1),
        (10, 3, -7),
    ])
    def test_values(self, length, max_lines, expected):
        assert scroll_bottom_position(length, max_lines) == expected


class TestWindow:
    def test_fits_newest_first(self):
        assert window_indices(2, 3, 0) == [1, 0]

    def test_empty(self):
        assert window_indices(0, 3, 0) == []

    def test_overflow_shows_newest(self):
        assert window_indices(5, 3, 0) == [4, 3, 2]

    def test_overflow_scrolled_back(self):
        assert window_indices(5, 3, -2) == [2, 1, 0]

    def test_offset_clamped_before_indexing(self):
        assert window_indices(5, 3, -99) == [2, 1, 0]
        assert window_indices(2, 3, -1) == [1, 0]

    @pytest.mark.parametrize("length", range(0, 8))
    @pytest.mark.parametrize("max_lines", [1, 2, 3, 5])
    def test_window_size_and_bounds(self, length, max_lines):
        for offset in range(scroll_bottom_position(length, max_lines), 1):
            idx = window_indices(length, max_lines, offset)
            assert len(idx) == min(length, max_lines)
            assert all(0 <= i < length for i in idx)


class TestClampAndProgress:
    def test_clamp(self):
        assert clamp_offset(1, 10, 3) == 0
        assert clamp_offset(-100, 10, 3) == -7
        assert clamp_offset(-4, 10, 3) == -4

    def test_progress_at_newest(self):
        assert progress(0, 10, 3) == 0.0

    def test_progress_at_oldest(self):
        assert progress(-7, 10, 3) == 1.0

    def test_progress_midway(self):
        assert progress(-2, 7, 3) == pytest.approx(0.5)

    def test_progress_without_overflow_is_zero(self):
        assert progress(0, 0, 3) == 0.0
        assert progress(0, 3, 3) == 0.0
