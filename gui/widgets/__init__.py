"""
Public API for gui.widgets.
Re-exports the console sub-widgets.
"""

from __future__ import annotations

from .console_panel import ConsolePanel

__all__ = ["ConsolePanel"]
