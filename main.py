"""
Application entry point.

Configures logging, creates the QApplication, builds the main window using
gui.app.create_app(), and starts the Qt event loop.
"""

import logging
import os
import sys
from PySide6.QtWidgets import QApplication

from gui.app import create_app
from gui.style import apply_base_style


def main() -> int:
    """Create the app and run the main event loop; return exit code."""
    level = logging.DEBUG if os.environ.get("SCROLLBACK_DEBUG") else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = QApplication(sys.argv)
    apply_base_style(app)
    window = create_app()
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
