"""
Run with: python -m fourierfun
"""
from __future__ import annotations

import logging
import sys

import pyqtgraph as pg

from fourierfun.app.application import create_app
from fourierfun.app.ui.main_window import MainWindow
from fourierfun.logging_config import setup_logging

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")
pg.setConfigOption("antialias", True)


def main() -> int:
    """Main entry point for the application."""
    setup_logging(level=logging.INFO)
    app = create_app()
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
