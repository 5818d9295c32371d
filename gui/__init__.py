"""
GUI package public API.

Exports high-level widgets and helpers for hosting a scrollback console in a Qt window:
- MainWindow (console window with an input row)
- ConsolePanel (console view and controls)
- QtLiveValue, ElapsedTime (Qt sources for watch() and refresh driving)
- BASE_STYLE (consistent app-wide stylesheet)
"""

from __future__ import annotations

# Re-export selected UI components for convenient imports
from .main_window import MainWindow
from .widgets.console_panel import ConsolePanel
from .live import QtLiveValue, ElapsedTime
from .style import BASE_STYLE

# Public API surface (wildcard imports and readable discovery)
__all__ = [
    "MainWindow",
    "ConsolePanel",
    "QtLiveValue",
    "ElapsedTime",
    "BASE_STYLE",
]
