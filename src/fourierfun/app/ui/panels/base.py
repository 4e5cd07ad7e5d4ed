from __future__ import annotations

import logging

from PySide6.QtWidgets import QWidget, QMessageBox

from fourierfun.app.state import Store
from fourierfun.model.errors import FourierFunError

logger = logging.getLogger(__name__)


class BasePanel(QWidget):
    """Base class for left-side panels. Holds a reference to the global store."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store

    def report_error(self, error: FourierFunError) -> None:
        """Show a rejected input to the user; the store is unchanged."""
        logger.warning(f"{type(error).__name__}: {error}")
        QMessageBox.warning(self, self.tr("Invalid Input"), str(error))
