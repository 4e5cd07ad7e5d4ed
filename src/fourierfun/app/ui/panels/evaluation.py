"""
Evaluation Control Panel
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QFormLayout, QDoubleSpinBox, QSpinBox,
    QPushButton, QCheckBox, QLabel
)

from fourierfun.app.state import Store
from fourierfun.app.ui.panels.base import BasePanel
from fourierfun.config import (
    DEFAULT_DOMAIN_END, DEFAULT_DOMAIN_START, DEFAULT_SAMPLE_COUNT, MAX_SAMPLE_COUNT
)
from fourierfun.model.errors import FourierFunError

logger = logging.getLogger(__name__)


class EvaluationPanel(BasePanel):
    # Display toggles for the plot: (show_components, normalize_components)
    display_changed = Signal(bool, bool)

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        layout = QVBoxLayout(self)

        # --- Domain Settings ---
        grp = QGroupBox(self.tr("Domain"), self)
        form = QFormLayout(grp)

        self.spin_start = QDoubleSpinBox(grp)
        self.spin_start.setRange(-1e6, 1e6)
        self.spin_start.setDecimals(3)
        self.spin_start.setValue(DEFAULT_DOMAIN_START)
        form.addRow(self.tr("Start:"), self.spin_start)

        self.spin_end = QDoubleSpinBox(grp)
        self.spin_end.setRange(-1e6, 1e6)
        self.spin_end.setDecimals(3)
        self.spin_end.setValue(DEFAULT_DOMAIN_END)
        form.addRow(self.tr("End:"), self.spin_end)

        self.spin_samples = QSpinBox(grp)
        self.spin_samples.setRange(2, MAX_SAMPLE_COUNT)
        self.spin_samples.setValue(DEFAULT_SAMPLE_COUNT)
        form.addRow(self.tr("Samples:"), self.spin_samples)

        layout.addWidget(grp)

        # --- Actions ---
        self.btn_evaluate = QPushButton(self.tr("Evaluate"), self)
        self.btn_evaluate.setMinimumHeight(40)
        self.btn_evaluate.clicked.connect(self.on_evaluate_clicked)
        layout.addWidget(self.btn_evaluate)

        # --- Display ---
        grp_view = QGroupBox(self.tr("Display"), self)
        view_layout = QVBoxLayout(grp_view)
        self.chk_components = QCheckBox(self.tr("Show component traces"), grp_view)
        self.chk_components.setChecked(True)
        self.chk_components.toggled.connect(self._emit_display)
        view_layout.addWidget(self.chk_components)

        self.chk_normalize = QCheckBox(self.tr("Normalize component traces"), grp_view)
        self.chk_normalize.toggled.connect(self._emit_display)
        view_layout.addWidget(self.chk_normalize)
        layout.addWidget(grp_view)

        self.lbl_peaks = QLabel("", self)
        self.lbl_peaks.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_peaks.setWordWrap(True)
        layout.addWidget(self.lbl_peaks)

        layout.addStretch()

        self.store.stage_changed.connect(self._on_stage_changed)
        self._on_stage_changed(int(self.store.stage()))

    # --- SLOTS ---

    @Slot()
    def on_evaluate_clicked(self) -> None:
        try:
            result = self.store.evaluate(
                self.spin_start.value(),
                self.spin_end.value(),
                self.spin_samples.value(),
            )
        except FourierFunError as e:
            self.report_error(e)
            return

        n_peaks = len(result.component_traces)
        if result.spectrum is not None and n_peaks:
            peaks = ", ".join(f"{f:g}" for f in result.spectrum.peak_frequencies(n_peaks))
            self.lbl_peaks.setText(self.tr("Strongest bins: ") + peaks)
        else:
            self.lbl_peaks.setText("")

    @Slot(bool)
    def _emit_display(self, _checked: bool = False) -> None:
        self.chk_normalize.setEnabled(self.chk_components.isChecked())
        self.display_changed.emit(self.chk_components.isChecked(), self.chk_normalize.isChecked())

    @Slot(int)
    def _on_stage_changed(self, stage: int) -> None:
        if not self.store.series.is_complete():
            self.lbl_peaks.setText("")
