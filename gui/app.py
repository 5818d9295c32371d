# gui/app.py
"""
Application bootstrap for the GUI layer.

Responsibilities:
- Initialize QSettings with stable organization/app identifiers.
- Load console defaults from console_config.json (plus the per-user override).
- Construct the single Console instance and the runtime clock it watches.
- Construct and return the MainWindow with that console injected.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QSettings

from config.settings import load_console_config, load_refresh_interval
from gui.live import ElapsedTime
from gui.main_window import MainWindow
from scrollback.console import Console


# ---------- Constants ----------
ORG_NAME = "ScrollbackConsole"
APP_NAME = "App"


# ---------- Public API ----------
def create_app(console: Optional[Console] = None, settings: Optional[QSettings] = None) -> MainWindow:
    """
    Create and return the main window.

    Steps:
      1) Initialize QSettings.
      2) Load console defaults and the clock interval.
      3) Build the console (unless one was injected) and the MainWindow around it.
    """
    # 1) App-scoped settings repository
    settings = settings if settings is not None else QSettings(ORG_NAME, APP_NAME)

    # 2) Runtime configuration
    clock = ElapsedTime(interval_ms=load_refresh_interval())

    # 3) One console per window; callers that log receive it from here.
    # Every watch the window makes pushes its own updates, so no refresh driver.
    if console is None:
        console = Console(config=load_console_config())

    window = MainWindow(console=console, clock=clock, settings=settings)
    clock.setParent(window)
    window.setWindowTitle("Scrollback Console")
    return window
