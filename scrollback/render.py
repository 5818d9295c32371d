# scrollback/render.py
"""
Renderer: visible entries -> text blob.
"""

from __future__ import annotations

from typing import Iterable

from .entries import Entry, format_entry


def render_text(entries: Iterable[Entry], timestamps: bool = False) -> str:
    """Concatenate one formatted line per entry, each terminated by a newline."""
    return "".join(f"{format_entry(e, timestamps)}\n" for e in entries)
