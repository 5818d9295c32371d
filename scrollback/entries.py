# scrollback/entries.py
"""
Console entries: the two kinds of line the buffer holds.

- ValueEntry: static logged content with a repeat counter.
- WatchEntry: a name bound to a live value, refreshed by its subscription.

format_entry() is the single place that turns either kind into one line of text.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Optional, Union

from .classify import Scalar, coerce, display_text

TIME_FORMAT = "%H:%M:%S"
PLACEHOLDER_PENDING = "[pending]"


class EntryKind(Enum):
    VALUE = "value"
    WATCH = "watch"


class _Unset:
    """Sentinel type for a watch entry that has not received a value yet."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(eq=False)
class ValueEntry:
    content: Scalar
    created_at: datetime
    count: int = 1
    collapsible: bool = True

    kind: ClassVar[EntryKind] = EntryKind.VALUE

    @property
    def text(self) -> str:
        return display_text(self.content)

    def bump(self) -> int:
        """Record one more occurrence; returns the new count."""
        self.count += 1
        return self.count


@dataclass(eq=False)
class WatchEntry:
    name: str
    current_value: Any = UNSET
    updated_at: Optional[datetime] = None

    kind: ClassVar[EntryKind] = EntryKind.WATCH

    @property
    def has_value(self) -> bool:
        return self.current_value is not UNSET

    def update(self, value: Any, at: datetime) -> None:
        self.current_value = value
        self.updated_at = at


Entry = Union[ValueEntry, WatchEntry]


def _stamp(at: Optional[datetime], timestamps: bool) -> str:
    if not timestamps or at is None:
        return ""
    return f"[{at.strftime(TIME_FORMAT)}] "


def format_entry(entry: Entry, timestamps: bool = False) -> str:
    """
    Render one entry as a single line (no trailing newline).

    Value:  "> text" or "> [count] text" once the entry has repeated.
    Watch:  "name: value", with a [pending] placeholder before the first push.
    """
    if entry.kind is EntryKind.VALUE:
        count = f"[{entry.count}] " if entry.count > 1 else ""
        return f"{_stamp(entry.created_at, timestamps)}> {count}{entry.text}"
    if entry.kind is EntryKind.WATCH:
        value = display_text(coerce(entry.current_value)) if entry.has_value else PLACEHOLDER_PENDING
        return f"{_stamp(entry.updated_at, timestamps)}{entry.name}: {value}"
    raise ValueError(f"Unknown entry kind: {entry.kind!r}")
