# gui/live.py
"""
Qt adapters for the live value protocol (read() + subscribe()).

- QtLiveValue: any getter paired with a change signal, e.g. QSpinBox.value / valueChanged.
- ElapsedTime: a QTimer-driven milliseconds-since-start clock; doubles as a refresh driver.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from PySide6.QtCore import QElapsedTimer, QObject, QTimer, Signal

from scrollback.live import Subscription

log = logging.getLogger(__name__)


def _disconnect(signal, slot) -> None:
    try:
        signal.disconnect(slot)
    except (RuntimeError, TypeError) as e:
        # Sender already destroyed or slot already gone
        log.debug("disconnect skipped: %s", e)


class QtLiveValue:
    """
    Live value backed by a Qt getter and the signal that announces its changes.

    Signal arguments are ignored; subscribers always receive getter() so that
    signals with differently shaped payloads behave the same.
    """

    def __init__(self, getter: Callable[[], Any], signal):
        self._getter = getter
        self._signal = signal

    def read(self) -> Any:
        return self._getter()

    def subscribe(self, callback: Callable[[Any], None], fire_immediately: bool = True) -> Subscription:
        def _slot(*_args) -> None:
            callback(self._getter())

        self._signal.connect(_slot)
        sub = Subscription(lambda: _disconnect(self._signal, _slot))
        if fire_immediately:
            callback(self._getter())
        return sub


class ElapsedTime(QObject):
    """
    Milliseconds elapsed since construction, pushed every interval_ms.

    Emits:
      - ticked(ms: int)
    """
    ticked = Signal(int)

    def __init__(self, interval_ms: int = 100, parent: QObject | None = None):
        super().__init__(parent)
        self._clock = QElapsedTimer()
        self._clock.start()
        self._timer = QTimer(self)
        self._timer.setInterval(max(1, int(interval_ms)))
        self._timer.timeout.connect(self._tick)
        self._timer.start()

    @property
    def running(self) -> bool:
        return self._timer.isActive()

    def stop(self) -> None:
        self._timer.stop()

    def read(self) -> int:
        return int(self._clock.elapsed())

    def _tick(self) -> None:
        self.ticked.emit(self.read())

    def subscribe(self, callback: Callable[[Any], None], fire_immediately: bool = True) -> Subscription:
        def _slot(ms: int) -> None:
            callback(ms)

        self.ticked.connect(_slot)
        sub = Subscription(lambda: _disconnect(self.ticked, _slot))
        if fire_immediately:
            callback(self.read())
        return sub
