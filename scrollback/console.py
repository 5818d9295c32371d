# scrollback/console.py
"""
Console engine.

Responsibilities:
- Own the entry buffer, the viewport state and the console configuration.
- Classify and de-duplicate logged content; bind watch entries to live values.
- Run a render pass after every state change and push (text, progress) to observers.

Design:
- Single-threaded: the host delivers notifications one at a time.
- Render passes are skipped while locked; unlocking renders once, clear() always notifies.
- Observers only ever receive strings and floats, never references into the buffer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, List, Optional, Tuple

from . import viewport
from .buffer import EntryBuffer
from .classify import PLACEHOLDER_NOT_A_SIGNAL, coerce, display_text
from .entries import Entry, ValueEntry, WatchEntry
from .live import NotALiveValueError, Subscription, ensure_live
from .render import render_text
from .subscriptions import SubscriptionManager

log = logging.getLogger(__name__)

TextObserver = Callable[[str], None]
ProgressObserver = Callable[[float], None]

MAX_LINES_BINDING = "max_lines"


# ---------- Configuration ----------
@dataclass
class ConsoleConfig:
    max_lines: int = 10
    collapse: bool = True
    timestamps: bool = False
    locked: bool = False


def _validate_max_lines(n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"max_lines must be int, got {type(n).__name__}")
    if n < 1:
        raise ValueError(f"max_lines must be >= 1, got {n}")
    return n


# ---------- Public API ----------
class Console:
    """
    Bounded scrollback console.

    Dependencies:
        - config: ConsoleConfig with the initial max_lines/collapse/timestamps/locked values.
        - driver: optional live value whose ticks re-render while any watch entry exists.
        - clock: callable returning the current datetime (entry timestamps).
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        driver: Any = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        cfg = config or ConsoleConfig()
        self._max_lines = _validate_max_lines(cfg.max_lines)
        self._collapse = bool(cfg.collapse)
        self._timestamps = bool(cfg.timestamps)
        self._locked = bool(cfg.locked)
        self._driver = driver
        self._clock = clock

        self._buffer = EntryBuffer()
        self._subs = SubscriptionManager()
        self._scroll_offset = 0
        self._text = ""
        self._text_observers: List[TextObserver] = []
        self._progress_observers: List[ProgressObserver] = []
        self._closed = False

    # ---------- Read-only state ----------
    @property
    def lines(self) -> Tuple[Entry, ...]:
        return self._buffer.snapshot()

    @property
    def text(self) -> str:
        """Text produced by the most recent render pass."""
        return self._text

    @property
    def scroll_offset(self) -> int:
        return self._scroll_offset

    @property
    def scroll_bottom_position(self) -> int:
        return viewport.scroll_bottom_position(len(self._buffer), self._max_lines)

    @property
    def progress(self) -> float:
        return viewport.progress(self._scroll_offset, len(self._buffer), self._max_lines)

    @property
    def max_lines(self) -> int:
        return self._max_lines

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def timestamps(self) -> bool:
        return self._timestamps

    @property
    def collapse(self) -> bool:
        return self._collapse

    @property
    def has_watches(self) -> bool:
        return self._buffer.has_watches()

    @property
    def driver_active(self) -> bool:
        return self._subs.driver_active

    # ---------- Observers ----------
    def on_text_changed(self, callback: TextObserver) -> Subscription:
        """Register callback for every render pass; the returned handle deregisters it."""
        return self._register(self._text_observers, callback)

    def on_progress_changed(self, callback: ProgressObserver) -> Subscription:
        return self._register(self._progress_observers, callback)

    @staticmethod
    def _register(observers: list, callback: Callable) -> Subscription:
        observers.append(callback)

        def _release() -> None:
            if callback in observers:
                observers.remove(callback)

        return Subscription(_release)

    def _notify(self, text: str, progress: float) -> None:
        for cb in list(self._text_observers):
            cb(text)
        for cb in list(self._progress_observers):
            cb(progress)

    # ---------- Writes ----------
    def log(self, content: Any) -> None:
        """
        Append content as a value entry, or bump the count of an equal one when collapsing.
        Never raises on unusual content; see classify.coerce for the placeholders.
        """
        value = coerce(content)
        if self._collapse:
            existing = self._buffer.find_value(display_text(value))
            if existing is not None:
                existing.bump()
                self.refresh()
                return
        self._buffer.append(ValueEntry(value, created_at=self._clock()))
        self.refresh()

    def watch(self, name: str, live: Any) -> None:
        """
        Add a watch entry kept fresh by live's pushes.

        A handle that cannot be read or subscribed to becomes a "<name>: [not a signal]" line.
        """
        try:
            ensure_live(live)
        except NotALiveValueError as e:
            log.debug("watch(%r) rejected: %s", name, e)
            self._buffer.append(
                ValueEntry(f"{name}: {PLACEHOLDER_NOT_A_SIGNAL}", created_at=self._clock(), collapsible=False)
            )
            self.refresh()
            return

        entry = WatchEntry(str(name))
        self._buffer.append(entry)

        def _on_push(value: Any) -> None:
            entry.update(value, self._clock())
            self.refresh()

        self._subs.bind_watch(entry, live, _on_push)
        if not entry.has_value:
            # Handle did not deliver immediately; show the placeholder once
            self.refresh()

        if self._driver is not None:
            self._subs.ensure_driver(self._driver, lambda _tick: self.refresh())
        log.debug("watching %r (%d active)", entry.name, self._subs.watch_count)

    # ---------- Scrolling ----------
    def scroll_up(self) -> None:
        self._scroll_offset = min(0, self._scroll_offset + 1)
        self.refresh()

    def scroll_down(self) -> None:
        self._scroll_offset = max(self._scroll_offset - 1, self.scroll_bottom_position)
        self.refresh()

    def scroll_to_top(self) -> None:
        """Jump to offset 0, i.e. the newest lines."""
        self._scroll_offset = 0
        self.refresh()

    def scroll_to_bottom(self) -> None:
        """Jump to the oldest reachable position."""
        self._scroll_offset = self.scroll_bottom_position
        self.refresh()

    # ---------- Configuration ----------
    def set_max_lines(self, n: int) -> None:
        self._max_lines = _validate_max_lines(n)
        self.refresh()

    def bind_max_lines(self, live: Any) -> Subscription:
        """
        Follow live for max_lines: every push (including the current value) calls set_max_lines.
        Pushed values are converted to int and floored at 1; pushes with no integer form are ignored.
        """
        def _apply(value: Any) -> None:
            try:
                n = int(value)
            except (TypeError, ValueError, OverflowError) as e:
                log.debug("max_lines push %r ignored: %s", value, e)
                return
            self.set_max_lines(max(1, n))

        return self._subs.bind(MAX_LINES_BINDING, live, _apply)

    def unbind_max_lines(self) -> bool:
        return self._subs.unbind(MAX_LINES_BINDING)

    def set_locked(self, locked: bool) -> None:
        was_locked = self._locked
        self._locked = bool(locked)
        if was_locked and not self._locked:
            self.refresh()

    def set_timestamps(self, enabled: bool) -> None:
        self._timestamps = bool(enabled)
        self.refresh()

    def set_collapse(self, enabled: bool) -> None:
        """Toggle de-duplication for future log() calls; existing entries are left as they are."""
        self._collapse = bool(enabled)

    # ---------- Lifecycle ----------
    def clear(self) -> None:
        """Drop every entry and subscription, reset scrolling, and notify even while locked."""
        removed = self._buffer.clear()
        self._subs.release_entries(removed)
        self._subs.release_driver()
        self._scroll_offset = 0
        self._text = ""
        self._notify(self._text, self.progress)

    def close(self) -> None:
        """Release every subscription (config bindings included) and all observers."""
        if self._closed:
            return
        self._closed = True
        self._subs.release_all()
        self._text_observers.clear()
        self._progress_observers.clear()

    # ---------- Render pass ----------
    def refresh(self) -> None:
        """Recompute the visible text and progress and notify observers, unless locked."""
        if self._locked:
            return
        length = len(self._buffer)
        self._scroll_offset = viewport.clamp_offset(self._scroll_offset, length, self._max_lines)
        indices = viewport.window_indices(length, self._max_lines, self._scroll_offset)
        self._text = render_text(self._buffer.pick(indices), self._timestamps)

        if not self._buffer.has_watches():
            self._subs.release_driver()

        self._notify(self._text, viewport.progress(self._scroll_offset, length, self._max_lines))
