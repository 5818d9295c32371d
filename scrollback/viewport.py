# scrollback/viewport.py
"""
Viewport arithmetic: which buffer indices are visible and how far the view is scrolled.

Offsets are relative to the newest line: 0 shows the newest lines, negative values
scroll back toward older ones, down to scroll_bottom_position().
"""

from __future__ import annotations

from typing import List


def scroll_bottom_position(length: int, max_lines: int) -> int:
    """Most negative legal offset; 0 when the buffer fits in the viewport."""
    return -(max(length, max_lines) - max_lines)


def clamp_offset(offset: int, length: int, max_lines: int) -> int:
    """Clamp offset into [scroll_bottom_position, 0]."""
    return max(scroll_bottom_position(length, max_lines), min(0, offset))


def window_indices(length: int, max_lines: int, offset: int) -> List[int]:
    """
    Absolute buffer indices to render, newest first.

    The window holds min(length, max_lines) lines starting at length - max_lines when the
    buffer overflows; offset is clamped before use so every index lands inside the buffer.
    """
    offset = clamp_offset(offset, length, max_lines)
    overflow = length > max_lines
    size = max_lines if overflow else length
    start_at = length - max_lines if overflow else 0
    return [i + start_at + offset for i in range(size - 1, -1, -1)]


def progress(offset: int, length: int, max_lines: int) -> float:
    """offset / scroll_bottom_position, reported as 0.0 when nothing can scroll."""
    bottom = scroll_bottom_position(length, max_lines)
    offset = clamp_offset(offset, length, max_lines)
    if bottom == 0 or offset == 0:
        return 0.0
    return offset / bottom
