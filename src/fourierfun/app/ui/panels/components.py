from __future__ import annotations

import math

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QFormLayout, QSpinBox, QDoubleSpinBox,
    QPushButton, QListWidget, QLabel, QHBoxLayout
)

from fourierfun.app.state import Store
from fourierfun.config import MAX_COMPONENTS, MAX_FREQUENCY
from fourierfun.app.ui.panels.base import BasePanel
from fourierfun.model.errors import FourierFunError
from fourierfun.model.series import SeriesSpec, SeriesStage

STAGE_LABELS = {
    SeriesStage.IDLE: "Declare the number of components.",
    SeriesStage.COUNT_DECLARED: "Enter the first component.",
    SeriesStage.COLLECTING: "Enter the next component.",
    SeriesStage.READY: "All components collected. Ready to evaluate.",
    SeriesStage.EVALUATED: "Series evaluated.",
}


class ComponentsPanel(BasePanel):
    """
    Input collector: declares the component count and feeds
    (amplitude, frequency, phase) triples into the store one at a time.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)

        # --- Count ---
        grp_count = QGroupBox(self.tr("Number of Components"), self)
        count_row = QHBoxLayout(grp_count)
        self.spin_count = QSpinBox(grp_count)
        self.spin_count.setRange(0, MAX_COMPONENTS)
        self.spin_count.setValue(3)
        count_row.addWidget(self.spin_count, 1)

        self.btn_declare = QPushButton(self.tr("Declare"), grp_count)
        self.btn_declare.clicked.connect(self.on_declare_clicked)
        count_row.addWidget(self.btn_declare)
        root.addWidget(grp_count)

        # --- Component entry ---
        grp_entry = QGroupBox(self.tr("Component"), self)
        form = QFormLayout(grp_entry)

        self.spin_amplitude = QDoubleSpinBox(grp_entry)
        self.spin_amplitude.setRange(-1e6, 1e6)
        self.spin_amplitude.setDecimals(3)
        self.spin_amplitude.setSingleStep(0.1)
        self.spin_amplitude.setValue(1.0)
        form.addRow(self.tr("Amplitude:"), self.spin_amplitude)

        self.spin_frequency = QDoubleSpinBox(grp_entry)
        self.spin_frequency.setRange(0.0, MAX_FREQUENCY)
        self.spin_frequency.setDecimals(3)
        self.spin_frequency.setSingleStep(0.5)
        self.spin_frequency.setValue(1.0)
        form.addRow(self.tr("Frequency:"), self.spin_frequency)

        self.spin_phase = QDoubleSpinBox(grp_entry)
        self.spin_phase.setRange(-2 * math.pi, 2 * math.pi)
        self.spin_phase.setDecimals(3)
        self.spin_phase.setSingleStep(0.1)
        self.spin_phase.setSuffix(" rad")
        form.addRow(self.tr("Phase:"), self.spin_phase)

        self.btn_add = QPushButton(self.tr("Add Component"), grp_entry)
        self.btn_add.clicked.connect(self.on_add_clicked)
        form.addRow(self.btn_add)
        root.addWidget(grp_entry)

        # --- Collected list ---
        self.list_components = QListWidget(self)
        root.addWidget(self.list_components, 1)

        self.btn_example = QPushButton(self.tr("Load Example"), self)
        self.btn_example.clicked.connect(self.on_example_clicked)
        root.addWidget(self.btn_example)

        self.lbl_status = QLabel(self)
        self.lbl_status.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_status.setWordWrap(True)
        self.lbl_status.setStyleSheet("color: gray;")
        root.addWidget(self.lbl_status)

        self.store.series_changed.connect(self.refresh)
        self.refresh(self.store.series)

    # --- SLOTS ---

    @Slot()
    def on_declare_clicked(self) -> None:
        try:
            self.store.declare_count(self.spin_count.value())
        except FourierFunError as e:
            self.report_error(e)

    @Slot()
    def on_add_clicked(self) -> None:
        try:
            self.store.add_component(
                self.spin_amplitude.value(),
                self.spin_frequency.value(),
                self.spin_phase.value(),
            )
        except FourierFunError as e:
            self.report_error(e)

    @Slot()
    def on_example_clicked(self) -> None:
        self.store.load_example()
        self.spin_count.setValue(len(self.store.series))

    def refresh(self, series: SeriesSpec) -> None:
        self.list_components.clear()
        for i, c in enumerate(series.collected()):
            self.list_components.addItem(
                f"{i + 1}.  A = {c.amplitude:g},  f = {c.frequency:g},  φ = {c.phase:.3f}"
            )

        stage = series.stage
        self.btn_add.setEnabled(series.remaining > 0)
        status = self.tr(STAGE_LABELS[stage])
        if stage in (SeriesStage.COUNT_DECLARED, SeriesStage.COLLECTING):
            status += f" ({len(series)}/{series.declared_count})"
        self.lbl_status.setText(status)
