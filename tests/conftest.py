"""Shared test fixtures for the scrollback test suite."""

import os
from datetime import datetime, timedelta

import pytest

from scrollback.console import Console, ConsoleConfig
from scrollback.live import LiveValue, Subscription


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
class Spy:
    """Records every value an observer receives."""

    def __init__(self):
        self.calls = []

    def __call__(self, value):
        self.calls.append(value)

    @property
    def count(self):
        return len(self.calls)

    @property
    def last(self):
        return self.calls[-1] if self.calls else None


class FakeClock:
    """Deterministic clock; each call advances one second."""

    def __init__(self, start=datetime(2024, 1, 2, 9, 30, 0)):
        self.now = start

    def __call__(self):
        current = self.now
        self.now = current + timedelta(seconds=1)
        return current


class BrokenLive:
    """Exposes the live capabilities, but read() raises."""

    def read(self):
        raise RuntimeError("not bound")

    def subscribe(self, callback, fire_immediately=True):
        return Subscription()


class LazyLive(LiveValue):
    """LiveValue that never delivers on subscribe."""

    def subscribe(self, callback, fire_immediately=True):
        return super().subscribe(callback, fire_immediately=False)


# ---------------------------------------------------------------------------
# Console fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_console(clock):
    """Factory for consoles with the fake clock; keyword args go to ConsoleConfig."""
    created = []

    def _make(driver=None, **kwargs):
        console = Console(config=ConsoleConfig(**kwargs), driver=driver, clock=clock)
        created.append(console)
        return console

    yield _make
    for c in created:
        c.close()


@pytest.fixture
def console(make_console):
    return make_console(max_lines=3)


@pytest.fixture
def text_spy(console):
    spy = Spy()
    console.on_text_changed(spy)
    return spy


@pytest.fixture
def progress_spy(console):
    spy = Spy()
    console.on_progress_changed(spy)
    return spy


# ---------------------------------------------------------------------------
# Qt
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def qapp():
    """One offscreen QApplication for the whole session."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    widgets = pytest.importorskip("PySide6.QtWidgets")
    app = widgets.QApplication.instance() or widgets.QApplication([])
    yield app
