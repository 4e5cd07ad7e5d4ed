from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from PySide6.QtCore import QObject, Signal

from fourierfun.config import EXAMPLE_COMPONENTS
from fourierfun.model.fourier import SampleSet, evaluate, evaluate_components
from fourierfun.model.series import SeriesSpec, SeriesStage, SineComponent
from fourierfun.model.spectrum import Spectrum, magnitude_spectrum

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    """Everything the plot needs after one evaluation."""
    samples: SampleSet
    component_traces: list[SampleSet] = field(default_factory=list)
    spectrum: Optional[Spectrum] = None


class Store(QObject):
    """Central state store with signals for panel/plot sync."""
    series_changed = Signal(object)
    results_changed = Signal(object)
    stage_changed = Signal(int)

    def __init__(self) -> None:
        super().__init__()
        self.series = SeriesSpec()
        self.result: Optional[EvaluationResult] = None
        self._last_stage = self.series.stage

    def stage(self) -> SeriesStage:
        return self.series.stage

    def _notify(self) -> None:
        self.series_changed.emit(self.series)
        stage = self.series.stage
        if stage != self._last_stage:
            logger.debug(f"Stage {self._last_stage.name} -> {stage.name}")
            self._last_stage = stage
            self.stage_changed.emit(int(stage))

    def _clear_result(self) -> None:
        if self.result is not None:
            self.result = None
            self.results_changed.emit(None)

    def declare_count(self, n: int) -> None:
        self.series.declare_count(n)
        self._clear_result()
        self._notify()

    def add_component(self, amplitude: float, frequency: float, phase: float = 0.0) -> SineComponent:
        component = self.series.add_component(amplitude, frequency, phase)
        self._notify()
        return component

    def load_example(self) -> None:
        """Replace the current series with the example preset."""
        # The live series is replaced only once the preset is complete
        spec = SeriesSpec.from_pairs(EXAMPLE_COMPONENTS)
        self.series = spec
        self._clear_result()
        self._notify()
        logger.info(f"Loaded example series with {len(spec)} components.")

    def evaluate(self, domain_start: float, domain_end: float, sample_count: int) -> EvaluationResult:
        samples = evaluate(self.series, domain_start, domain_end, sample_count)
        traces = evaluate_components(self.series, domain_start, domain_end, sample_count)
        self.result = EvaluationResult(
            samples=samples,
            component_traces=traces,
            spectrum=magnitude_spectrum(samples),
        )
        self.results_changed.emit(self.result)
        self._notify()
        return self.result
