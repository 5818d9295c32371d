# gui/widgets/console_panel.py
"""
ConsolePanel: a titled scrollback panel driven by a scrollback.Console.

Layout:
    - read-only text view showing the console's rendered viewport
    - vertical progress bar showing how far the view is scrolled back
    - Top / Up / Down / Bottom / Clear buttons
    - Max lines spin box, Lock and Timestamps check boxes

bind(console) wires the controls into the console and the console's observers into
the display fields. The panel never keeps its own copy of the log.
"""

from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QFontDatabase
from PySide6.QtWidgets import (
    QGroupBox,
    QVBoxLayout,
    QHBoxLayout,
    QPlainTextEdit,
    QPushButton,
    QProgressBar,
    QSpinBox,
    QCheckBox,
    QLabel,
)

from gui.live import QtLiveValue
from scrollback.console import Console
from scrollback.live import Subscription

# ---------- Constants ----------
PROGRESS_STEPS = 1000  # progress bar resolution for the [0, 1] scroll fraction
MAX_LINES_LIMIT = 500


class ConsolePanel(QGroupBox):
    """Read-only console view with scroll, clear, lock and formatting controls."""

    def __init__(self, title: str = "Console", max_lines: int = 10):
        super().__init__(title)

        # Text view: no wrapping so one entry stays one visual line
        self.view = QPlainTextEdit(self)
        self.view.setReadOnly(True)
        self.view.setLineWrapMode(QPlainTextEdit.NoWrap)
        self.view.setFont(QFontDatabase.systemFont(QFontDatabase.FixedFont))

        # 1.0 = oldest reachable line, drawn from the top down
        self.progress = QProgressBar(self)
        self.progress.setOrientation(Qt.Vertical)
        self.progress.setInvertedAppearance(True)
        self.progress.setRange(0, PROGRESS_STEPS)
        self.progress.setValue(0)
        self.progress.setTextVisible(False)

        # Scroll and clear actions
        self.top_btn = QPushButton("Top", self)
        self.up_btn = QPushButton("Up", self)
        self.down_btn = QPushButton("Down", self)
        self.bottom_btn = QPushButton("Bottom", self)
        self.clear_btn = QPushButton("Clear", self)

        # Configuration outputs
        self.max_lines_spin = QSpinBox(self)
        self.max_lines_spin.setRange(1, MAX_LINES_LIMIT)
        self.max_lines_spin.setValue(max(1, min(MAX_LINES_LIMIT, max_lines)))
        self.lock_check = QCheckBox("Lock", self)
        self.timestamps_check = QCheckBox("Timestamps", self)

        top = QHBoxLayout()
        top.addWidget(self.top_btn)
        top.addWidget(self.up_btn)
        top.addWidget(self.down_btn)
        top.addWidget(self.bottom_btn)
        top.addStretch()
        top.addWidget(self.clear_btn)

        options = QHBoxLayout()
        options.addWidget(QLabel("Max lines"))
        options.addWidget(self.max_lines_spin)
        options.addStretch()
        options.addWidget(self.timestamps_check)
        options.addWidget(self.lock_check)

        body = QHBoxLayout()
        body.addWidget(self.view, 1)
        body.addWidget(self.progress)

        layout = QVBoxLayout(self)
        layout.addLayout(top)
        layout.addLayout(body)
        layout.addLayout(options)
        self.setLayout(layout)

        self.console: Optional[Console] = None
        self._subs: List[Subscription] = []
        self._connections: list = []

    # ---------- Public API ----------
    def max_lines_value(self) -> QtLiveValue:
        """The max-lines spin box as a live value."""
        return QtLiveValue(self.max_lines_spin.value, self.max_lines_spin.valueChanged)

    def bind(self, console: Console) -> None:
        """
        Wire this panel to console; any previous console is unbound first.

        Steps:
          1) Sync the Lock and Timestamps check boxes with the console.
          2) Follow the max-lines spin box.
          3) Route console output to the text view and progress bar.
          4) Route button clicks to the scroll and clear operations.
        """
        self.unbind()
        self.console = console

        # 1) Check boxes mirror the console before their toggles are connected
        self.lock_check.setChecked(console.locked)
        self.timestamps_check.setChecked(console.timestamps)

        # 2) Max lines (fires immediately with the spin box's value)
        self._subs.append(console.bind_max_lines(self.max_lines_value()))

        # 3) Output
        self._subs.append(console.on_text_changed(self.set_text))
        self._subs.append(console.on_progress_changed(self.set_progress))

        # 4) Inputs
        self._connect(self.clear_btn.clicked, lambda: console.clear())
        self._connect(self.up_btn.clicked, lambda: console.scroll_up())
        self._connect(self.down_btn.clicked, lambda: console.scroll_down())
        self._connect(self.top_btn.clicked, lambda: console.scroll_to_top())
        self._connect(self.bottom_btn.clicked, lambda: console.scroll_to_bottom())
        self._connect(self.lock_check.toggled, lambda checked: console.set_locked(checked))
        self._connect(self.timestamps_check.toggled, lambda checked: console.set_timestamps(checked))

        console.refresh()

    def unbind(self) -> None:
        """Disconnect from the current console, if any; the console itself stays usable."""
        if self.console is None:
            return
        self.console.unbind_max_lines()
        for sub in self._subs:
            sub.unsubscribe()
        self._subs.clear()
        for signal, slot in self._connections:
            signal.disconnect(slot)
        self._connections.clear()
        self.console = None

    def set_text(self, text: str) -> None:
        """Replace the view's content with the console's rendered text."""
        self.view.setPlainText(text)

    def set_progress(self, value: float) -> None:
        """Show a [0, 1] scroll fraction on the progress bar."""
        clamped = min(1.0, max(0.0, float(value)))
        self.progress.setValue(int(round(clamped * PROGRESS_STEPS)))

    def text(self) -> str:
        return self.view.toPlainText()

    # ---------- Internals ----------
    def _connect(self, signal, slot) -> None:
        signal.connect(slot)
        self._connections.append((signal, slot))
