"""
Main Application Window
=======================
The primary GUI container: input panels on the left, the plot on the right.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects store signals to the plot and the status bar.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QMainWindow, QSplitter, QWidget, QVBoxLayout

from fourierfun.app.application import VISIBLE_APP_NAME
from fourierfun.app.state import Store
from fourierfun.app.ui.panels.components import ComponentsPanel
from fourierfun.app.ui.panels.evaluation import EvaluationPanel
from fourierfun.app.ui.plot import SeriesPlot
from fourierfun.model.series import SeriesStage

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: Store | None = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1200, 800)

        # Global store
        self.store = store or Store()

        splitter = QSplitter(Qt.Orientation.Horizontal, self)
        splitter.setChildrenCollapsible(False)
        self.setCentralWidget(splitter)

        # --- LEFT SIDE: Input + Evaluation panels ---
        side = QWidget(splitter)
        side_layout = QVBoxLayout(side)
        side_layout.setContentsMargins(0, 0, 0, 0)
        self.components_panel = ComponentsPanel(self.store, side)
        self.evaluation_panel = EvaluationPanel(self.store, side)
        side_layout.addWidget(self.components_panel, 1)
        side_layout.addWidget(self.evaluation_panel, 0)
        splitter.addWidget(side)

        # --- RIGHT SIDE: Plot ---
        self.plot = SeriesPlot(splitter)
        splitter.addWidget(self.plot)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        splitter.setSizes([320, 880])

        # --- SIGNAL CONNECTIONS ---
        self.store.results_changed.connect(self.plot.set_result)
        self.store.stage_changed.connect(self._on_stage_changed)
        self.evaluation_panel.display_changed.connect(self._on_display_changed)

        self._on_stage_changed(int(self.store.stage()))

    def _on_display_changed(self, show_components: bool, normalize: bool) -> None:
        self.plot.set_display(show_components, normalize)

    def _on_stage_changed(self, stage: int) -> None:
        name = SeriesStage(stage).name.replace("_", " ").title()
        self.statusBar().showMessage(self.tr("Stage: ") + name)
