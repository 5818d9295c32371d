"""
scrollback package public API.
"""

from __future__ import annotations

from typing import Any, Optional

# Public imports (re-exported symbols)
from .classify import ContentKind, classify, coerce
from .console import Console, ConsoleConfig
from .entries import EntryKind, ValueEntry, WatchEntry, format_entry
from .live import LiveHandle, LiveValue, NotALiveValueError, Subscription

# Package metadata (PEP 440 compliant)
__version__ = "0.1.0"

# Explicit public API for consumers: from scrollback import Console, LiveValue, ...
__all__ = [
    "Console",
    "ConsoleConfig",
    "ContentKind",
    "EntryKind",
    "LiveHandle",
    "LiveValue",
    "NotALiveValueError",
    "Subscription",
    "ValueEntry",
    "WatchEntry",
    "classify",
    "coerce",
    "format_entry",
    "make_console",
    "__version__",
]


def make_console(
    max_lines: int = 10,
    collapse: bool = True,
    timestamps: bool = False,
    driver: Optional[Any] = None,
) -> Console:
    """
    Convenience factory to build a ready-to-use Console.

    Parameters:
        max_lines: Number of visible lines (>= 1).
        collapse: Merge repeated identical log lines into one counted entry.
        timestamps: Prefix each rendered line with its HH:MM:SS time.
        driver: Optional live value whose ticks re-render while watch entries exist.

    Notes:
        - Construct one Console per display and pass it to the call sites that log into it.
    """
    cfg = ConsoleConfig(max_lines=max_lines, collapse=collapse, timestamps=timestamps)
    return Console(config=cfg, driver=driver)
