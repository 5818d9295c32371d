# scrollback/live.py
"""
Live value handles and subscription objects.

Design:
- A live value is anything exposing read() and subscribe(callback, fire_immediately=True).
- LiveValue is the in-process implementation; hosts adapt their own sources (see gui.live).
- Subscription wraps a release callable and is safe to unsubscribe more than once.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Protocol, runtime_checkable

log = logging.getLogger(__name__)


# ---------- Errors ----------
class NotALiveValueError(TypeError):
    """Raised by the capability probes when an object cannot act as a live value."""


# ---------- Subscription ----------
class Subscription:
    """
    Handle returned by subscribe(); unsubscribe() releases it.

    Calling unsubscribe() again after the first call is a no-op.
    """

    def __init__(self, release: Optional[Callable[[], None]] = None):
        self._release = release
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def unsubscribe(self) -> None:
        if self._closed:
            return
        self._closed = True
        release, self._release = self._release, None
        if release is not None:
            release()


# ---------- Protocol ----------
@runtime_checkable
class LiveHandle(Protocol):
    def read(self) -> Any: ...

    def subscribe(self, callback: Callable[[Any], None], fire_immediately: bool = True) -> Subscription: ...


def read_live(obj: Any) -> Any:
    """
    Return obj.read(); raise NotALiveValueError if obj has no reader or the read fails.
    """
    reader = getattr(obj, "read", None)
    if not callable(reader):
        raise NotALiveValueError(f"{type(obj).__name__} has no read()")
    try:
        return reader()
    except Exception as e:
        raise NotALiveValueError(f"read() failed on {type(obj).__name__}: {e}") from e


def ensure_live(obj: Any) -> Any:
    """
    Probe both capabilities required by watch(): a working read() and a subscribe().
    Returns the current value.
    """
    if not callable(getattr(obj, "subscribe", None)):
        raise NotALiveValueError(f"{type(obj).__name__} has no subscribe()")
    return read_live(obj)


# ---------- In-process implementation ----------
class LiveValue:
    """
    Observable value holder.

    set() pushes the new value to every subscriber when it differs from the current one
    (or always, with force=True).
    """

    def __init__(self, initial: Any = None):
        self._value = initial
        self._callbacks: List[Callable[[Any], None]] = []

    def read(self) -> Any:
        return self._value

    def set(self, value: Any, force: bool = False) -> None:
        if not force and value == self._value:
            return
        self._value = value
        # Copy so callbacks may unsubscribe while being notified
        for cb in list(self._callbacks):
            cb(value)

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)

    def subscribe(self, callback: Callable[[Any], None], fire_immediately: bool = True) -> Subscription:
        self._callbacks.append(callback)

        def _release() -> None:
            try:
                self._callbacks.remove(callback)
            except ValueError:
                log.debug("callback already detached from %r", self)

        sub = Subscription(_release)
        if fire_immediately:
            callback(self._value)
        return sub

    def __repr__(self) -> str:
        return f"LiveValue({self._value!r})"
