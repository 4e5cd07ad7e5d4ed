"""Plot widget drawing the summed series, its terms and its spectrum."""
from __future__ import annotations

import logging
from typing import Optional

import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget

from fourierfun.app.state import EvaluationResult
from fourierfun.utils import normalize_values

logger = logging.getLogger(__name__)


class SeriesPlot(pg.GraphicsLayoutWidget):
    """
    Two stacked plots: time domain on top, magnitude spectrum below.
    """

    # Color cycle for the component traces
    COLORS = [
        '#1f77b4',  # Blue
        '#ff7f0e',  # Orange
        '#2ca02c',  # Green
        '#d62728',  # Red
        '#9467bd',  # Purple
        '#8c564b',  # Brown
        '#e377c2',  # Pink
        '#7f7f7f',  # Gray
        '#bcbd22',  # Olive
        '#17becf',  # Cyan
    ]

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.show_components = True
        self.normalize_components = False
        self._result: Optional[EvaluationResult] = None

        self.time_plot = self.addPlot(row=0, col=0, title="Series")
        self.time_plot.setLabel("bottom", "t")
        self.time_plot.setLabel("left", "Amplitude")
        self.time_plot.showGrid(x=True, y=True, alpha=0.3)
        self.time_plot.addLegend(offset=(10, 10))

        self.spectrum_plot = self.addPlot(row=1, col=0, title="Magnitude Spectrum")
        self.spectrum_plot.setLabel("bottom", "Frequency", units="cycles / unit")
        self.spectrum_plot.setLabel("left", "Magnitude")
        self.spectrum_plot.showGrid(x=True, y=True, alpha=0.3)

    def set_result(self, result: Optional[EvaluationResult]) -> None:
        self._result = result
        self.redraw()

    def set_display(self, show_components: bool, normalize_components: bool) -> None:
        """Toggle the component traces and their normalization, then redraw once."""
        self.show_components = show_components
        self.normalize_components = normalize_components
        self.redraw()

    def redraw(self) -> None:
        self.time_plot.clear()
        self.spectrum_plot.clear()

        result = self._result
        if result is None:
            return

        if self.show_components:
            for i, trace in enumerate(result.component_traces):
                values = trace.values
                if self.normalize_components:
                    values = normalize_values(values, -1.0, 1.0)
                pen = pg.mkPen(self.COLORS[i % len(self.COLORS)], width=1, style=Qt.PenStyle.DashLine)
                self.time_plot.plot(trace.domain, values, pen=pen, name=f"Component {i + 1}")

        self.time_plot.plot(
            result.samples.domain,
            result.samples.values,
            pen=pg.mkPen('k', width=2),
            name="Sum",
        )

        if result.spectrum is not None and len(result.spectrum) > 0:
            spectrum = result.spectrum
            width = float(spectrum.frequencies[1] - spectrum.frequencies[0]) * 0.8 if len(spectrum) > 1 else 0.8
            bars = pg.BarGraphItem(
                x=spectrum.frequencies,
                height=spectrum.magnitudes,
                width=width,
                brush='#9467bd',
            )
            self.spectrum_plot.addItem(bars)

        logger.debug(f"Redrew plot with {len(result.samples)} samples.")
