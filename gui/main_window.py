# gui/main_window.py
"""
Main application window.

Responsibilities:
- Host a ConsolePanel bound to the injected Console.
- Offer an input row that logs typed text into the console.
- Watch the runtime clock so the panel always shows one live line.
- Persist the panel's max-lines and timestamps choices in QSettings.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QSettings
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QWidget,
    QMainWindow,
    QVBoxLayout,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QMessageBox,
)

from config.settings import write_console_config
from gui.live import ElapsedTime
from gui.style import BASE_STYLE
from gui.widgets.console_panel import ConsolePanel
from scrollback.console import Console, ConsoleConfig

# ---------- QSettings keys ----------
KEY_MAX_LINES = "console/max_lines"
KEY_TIMESTAMPS = "console/timestamps"


class MainWindow(QMainWindow):
    """
    Console window.

    Dependencies:
      - console: the single Console instance shared with every call site that logs.
      - clock: optional ElapsedTime; one is created when omitted.
      - settings: optional QSettings used to restore and persist panel choices.
    """

    def __init__(
        self,
        console: Console,
        clock: Optional[ElapsedTime] = None,
        settings: Optional[QSettings] = None,
    ):
        super().__init__()
        self.resize(720, 480)
        self.setStyleSheet(BASE_STYLE)

        self.console = console
        self.settings = settings
        self.clock = clock if clock is not None else ElapsedTime(parent=self)

        # -- UI --
        self._build_widgets()
        self._restore_settings()
        self._wire_events()
        self._build_menu()

        self.panel.bind(self.console)
        self.console.watch("runtime", self.clock)

    # ---------- UI construction ----------
    def _build_widgets(self) -> None:
        """Build the console panel and the input row below it."""
        self.panel = ConsolePanel("Console", max_lines=self.console.max_lines)

        self.input = QLineEdit()
        self.input.setPlaceholderText("Type a message and press Enter")
        self.log_btn = QPushButton("Log")

        central = QWidget()
        v = QVBoxLayout(central)
        v.setContentsMargins(18, 18, 18, 18)
        v.setSpacing(14)
        v.addWidget(self.panel, 1)

        row = QHBoxLayout()
        row.addWidget(self.input, 1)
        row.addWidget(self.log_btn)
        v.addLayout(row)
        self.setCentralWidget(central)

    def _build_menu(self) -> None:
        """Create a Tools menu with save-defaults and watch actions."""
        tools_menu = self.menuBar().addMenu("Tools")

        act_save = QAction("Save as Defaults", self)
        act_save.triggered.connect(self._save_defaults)
        tools_menu.addAction(act_save)

        act_watch = QAction("Watch Max Lines", self)
        act_watch.triggered.connect(lambda: self.console.watch("max lines", self.panel.max_lines_value()))
        tools_menu.addAction(act_watch)

    # ---------- Wiring ----------
    def _wire_events(self) -> None:
        """Connect UI events to handlers."""
        self.log_btn.clicked.connect(self.submit_input)
        self.input.returnPressed.connect(self.submit_input)
        self.panel.max_lines_spin.valueChanged.connect(self._persist_settings)
        self.panel.timestamps_check.toggled.connect(self._persist_settings)

    # ---------- Slots ----------
    def submit_input(self) -> None:
        """Log the input row's text (if any) and clear the field."""
        text = self.input.text().strip()
        if not text:
            return
        self.console.log(text)
        self.input.clear()

    def _save_defaults(self) -> None:
        cfg = ConsoleConfig(
            max_lines=self.console.max_lines,
            collapse=self.console.collapse,
            timestamps=self.console.timestamps,
            locked=False,
        )
        path = write_console_config(cfg)
        QMessageBox.information(self, "Defaults", f"Console defaults saved to:\n{path}")

    # ---------- Settings ----------
    def _restore_settings(self) -> None:
        if self.settings is None:
            return
        max_lines = self.settings.value(KEY_MAX_LINES, self.console.max_lines, type=int)
        timestamps = self.settings.value(KEY_TIMESTAMPS, self.console.timestamps, type=bool)
        self.panel.max_lines_spin.setValue(max(1, max_lines))
        self.console.set_timestamps(timestamps)

    def _persist_settings(self, *_args) -> None:
        if self.settings is None:
            return
        self.settings.setValue(KEY_MAX_LINES, self.panel.max_lines_spin.value())
        self.settings.setValue(KEY_TIMESTAMPS, self.panel.timestamps_check.isChecked())

    def closeEvent(self, event) -> None:
        """Persist settings and release the console's subscriptions before closing."""
        self._persist_settings()
        self.panel.unbind()
        self.clock.stop()
        self.console.close()
        super().closeEvent(event)
