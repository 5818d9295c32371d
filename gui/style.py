# gui/style.py
"""
Application-wide Qt Style Sheet (QSS) and a small helper to apply it.

Notes:
- Qt Style Sheets use flat CSS2-like selectors; nesting is not supported.
- Subcontrols must be targeted explicitly (e.g., QProgressBar::chunk).
- The console view uses a fixed-width font so counted lines stay aligned.
"""

from __future__ import annotations

# Dark console theme
BASE_STYLE = """
/* -------- Base palette -------- */
QWidget {
  background-color: #111418;
  color: #E6E6E6;
  font-family: 'Segoe UI', 'Inter', Arial, sans-serif;
  font-size: 11pt;
}

/* -------- Inputs and views -------- */
QLineEdit,
QSpinBox,
QPlainTextEdit {
  background-color: #161A20;
  border: 1px solid #2A2F37;
  border-radius: 8px;
  padding: 6px;
  selection-background-color: #2E7DFF;
  selection-color: #FFFFFF;
}
QPlainTextEdit {
  font-family: 'Cascadia Mono', 'Consolas', 'DejaVu Sans Mono', monospace;
  font-size: 10pt;
}

/* -------- Buttons and toggles -------- */
QPushButton {
  background-color: #1E222A;
  border: 1px solid #2A2F37;
  border-radius: 8px;
  padding: 8px 12px;
  color: #E6E6E6;
}
QPushButton:hover { background-color: #232833; }
QPushButton:pressed { background-color: #2A2F37; }
QCheckBox { spacing: 6px; }

/* -------- Scroll progress (vertical) -------- */
QProgressBar {
  border: 1px solid #2A2F37;
  border-radius: 6px;
  background: #161A20;
  width: 10px;
}
QProgressBar::chunk {
  background-color: #2E7DFF;
  border-radius: 4px;
}

/* -------- Group boxes -------- */
QGroupBox {
  border: 1px solid #2A2F37;
  border-radius: 10px;
  margin-top: 16px;
  padding: 10px;
}
QGroupBox::title {
  subcontrol-origin: margin;
  left: 10px;
  padding: 0 4px;
  color: #9AA4B2;
}
"""

def apply_base_style(target) -> bool:
    """
    Apply BASE_STYLE to a QApplication or QWidget (or any object exposing setStyleSheet).
    Returns False when target has no setStyleSheet.

    Example:
        apply_base_style(app)
    """
    setter = getattr(target, "setStyleSheet", None)
    if setter is None:
        return False
    setter(BASE_STYLE)
    return True
