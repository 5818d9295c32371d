# scrollback/buffer.py
"""
Insertion-ordered entry buffer.

Render order is insertion order; de-duplication bumps an existing value entry in place
rather than moving it.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

from .entries import Entry, EntryKind, ValueEntry, WatchEntry


class EntryBuffer:
    """Append-only list of entries owned by the console; cleared only as a whole."""

    def __init__(self) -> None:
        self._entries: List[Entry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self._entries))

    def append(self, entry: Entry) -> None:
        self._entries.append(entry)

    def find_value(self, text: str) -> Optional[ValueEntry]:
        """Return the first collapsible value entry whose rendered text equals text, if any."""
        for entry in self._entries:
            if entry.kind is EntryKind.VALUE and entry.collapsible and entry.text == text:
                return entry
        return None

    def watch_entries(self) -> List[WatchEntry]:
        return [e for e in self._entries if e.kind is EntryKind.WATCH]

    def has_watches(self) -> bool:
        return any(e.kind is EntryKind.WATCH for e in self._entries)

    def pick(self, indices: Sequence[int]) -> List[Entry]:
        """Return the entries at the given absolute indices, in the given order."""
        return [self._entries[i] for i in indices]

    def snapshot(self) -> Tuple[Entry, ...]:
        return tuple(self._entries)

    def clear(self) -> List[Entry]:
        """Empty the buffer; returns the removed entries so callers can release their resources."""
        removed, self._entries = self._entries, []
        return removed
