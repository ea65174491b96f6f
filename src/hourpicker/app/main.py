"""
Run with: python -m hourpicker
"""
from __future__ import annotations

import logging
import sys

from PySide6.QtCore import QSettings

from hourpicker.app.application import create_app
from hourpicker.app.ui.demo_window import DemoWindow
from hourpicker.config import load_picker_config
from hourpicker.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point for the demo application."""
    # Use logging.DEBUG to see every sync transition
    setup_logging(level=logging.INFO)

    app = create_app()
    config = load_picker_config(QSettings())
    logger.info(f"Starting demo with {config}")

    win = DemoWindow(config)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
