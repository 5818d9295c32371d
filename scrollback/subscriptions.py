# scrollback/subscriptions.py
"""
Bookkeeping for every subscription the console holds.

Three groups, each with its own release rule:
- watch subscriptions: one per WatchEntry, released when that entry is cleared.
- the refresh driver: one shared tick subscription, released once no watch entry remains.
- config bindings (e.g. max lines): released only on close() or when rebound.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Optional

from .entries import Entry, WatchEntry
from .live import Subscription

log = logging.getLogger(__name__)


class SubscriptionManager:
    def __init__(self) -> None:
        self._watches: Dict[int, Subscription] = {}
        self._driver: Optional[Subscription] = None
        self._bindings: Dict[str, Subscription] = {}

    # ---------- Watch subscriptions ----------
    def bind_watch(self, entry: WatchEntry, live: Any, callback: Callable[[Any], None]) -> Subscription:
        """Subscribe callback to live on behalf of entry, with immediate first delivery."""
        self.release_watch(entry)
        sub = live.subscribe(callback, fire_immediately=True)
        self._watches[id(entry)] = sub
        return sub

    def release_watch(self, entry: Entry) -> bool:
        sub = self._watches.pop(id(entry), None)
        if sub is None:
            return False
        sub.unsubscribe()
        return True

    def release_entries(self, entries: Iterable[Entry]) -> int:
        """Release the subscriptions owned by entries; returns how many were active."""
        released = sum(1 for e in entries if self.release_watch(e))
        if released:
            log.debug("released %d watch subscription(s)", released)
        return released

    @property
    def watch_count(self) -> int:
        return len(self._watches)

    # ---------- Refresh driver ----------
    def ensure_driver(self, driver: Any, on_tick: Callable[[Any], None]) -> bool:
        """Subscribe to driver unless already subscribed; returns True when a new subscription was made."""
        if self._driver is not None:
            return False
        self._driver = driver.subscribe(on_tick, fire_immediately=False)
        log.debug("refresh driver subscribed")
        return True

    def release_driver(self) -> bool:
        if self._driver is None:
            return False
        sub, self._driver = self._driver, None
        sub.unsubscribe()
        log.debug("refresh driver released")
        return True

    @property
    def driver_active(self) -> bool:
        return self._driver is not None

    # ---------- Config bindings ----------
    def bind(self, key: str, live: Any, callback: Callable[[Any], None]) -> Subscription:
        """Bind a config key to live; an existing binding for key is released first."""
        self.unbind(key)
        sub = live.subscribe(callback, fire_immediately=True)
        self._bindings[key] = sub
        return sub

    def unbind(self, key: str) -> bool:
        sub = self._bindings.pop(key, None)
        if sub is None:
            return False
        sub.unsubscribe()
        return True

    # ---------- Teardown ----------
    def release_all(self) -> None:
        for sub in list(self._watches.values()):
            sub.unsubscribe()
        self._watches.clear()
        self.release_driver()
        for key in list(self._bindings):
            self.unbind(key)
