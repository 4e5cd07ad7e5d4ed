"""
Fourier Evaluator
=================
Sums the sine components of a SeriesSpec over a sampled domain.

The evaluation is a pure function of its inputs: the same spec and
parameters always give bit-identical samples. Terms are accumulated in
component order.
"""
from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

import numpy as np
import matplotlib.pyplot as plt

from fourierfun.model.errors import InvalidArgument, NotReady
from fourierfun.model.series import SeriesSpec, SineComponent, as_finite_float

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * np.pi


@dataclass(frozen=True, eq=False)
class SampleSet:
    """
    Ordered (domain value, summed amplitude) pairs.

    Attributes:
        domain: Sample positions in ascending order.
        values: Summed series value at each position.
    """
    domain: npt.NDArray[np.float64]
    values: npt.NDArray[np.float64]

    def __post_init__(self) -> None:
        if self.domain.shape != self.values.shape:
            raise InvalidArgument(
                f"Domain and values must have the same shape, got {self.domain.shape} and {self.values.shape}."
            )
        self.domain.setflags(write=False)
        self.values.setflags(write=False)

    def __len__(self) -> int:
        return int(self.domain.shape[0])

    def __iter__(self) -> Iterator[tuple[float, float]]:
        for t, v in zip(self.domain, self.values):
            yield float(t), float(v)

    @property
    def step(self) -> float:
        """Spacing between consecutive domain points."""
        return float(self.domain[1] - self.domain[0])

    def pairs(self) -> list[tuple[float, float]]:
        return list(self)

    def plot(self, title: str = "Fourier Series") -> None:
        """
        Quick-look plot of the samples (blocks until the window is closed).
        """
        plt.rcParams["figure.constrained_layout.use"] = True
        plt.figure(figsize=(7, 5))

        plt.plot(self.domain, self.values, 'b', lw=2)

        plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        plt.minorticks_on()
        plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        plt.title(title)
        plt.xlabel("t")
        plt.ylabel("Amplitude")
        plt.show()


def _validate_domain(domain_start: float, domain_end: float, sample_count: int) -> tuple[float, float]:
    """Check the sampling request and return the bounds as floats."""
    if isinstance(sample_count, bool) or not isinstance(sample_count, numbers.Integral):
        raise InvalidArgument(f"Sample count must be an integer, got {sample_count!r}.")
    if sample_count < 2:
        raise InvalidArgument(f"Sample count must be at least 2, got {sample_count}.")
    start = as_finite_float("Domain start", domain_start)
    end = as_finite_float("Domain end", domain_end)
    if end <= start:
        raise InvalidArgument(f"Domain end ({end}) must be greater than domain start ({start}).")
    if not math.isfinite(end - start):
        raise InvalidArgument(f"Domain width [{start}, {end}] overflows a float.")
    return start, end


def _prepare(
    spec: SeriesSpec,
    domain_start: float,
    domain_end: float,
    sample_count: int,
) -> tuple[tuple[SineComponent, ...], npt.NDArray[np.float64]]:
    """Validate the request and return the components and the sample grid."""
    start, end = _validate_domain(domain_start, domain_end, sample_count)
    if not spec.is_complete():
        raise NotReady(f"Cannot evaluate an incomplete series: {spec!r}")

    components = spec.components()
    # linspace places the last point exactly on domain_end
    t = np.linspace(start, end, int(sample_count), dtype=np.float64)
    return components, t


def _term(component: SineComponent, t: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    return component.amplitude * np.sin(TWO_PI * component.frequency * t + component.phase)


def evaluate(
    spec: SeriesSpec,
    domain_start: float,
    domain_end: float,
    sample_count: int,
) -> SampleSet:
    """
    Evaluate the summed series on `sample_count` evenly spaced points.

    Args:
        spec: A complete SeriesSpec.
        domain_start: First sample position.
        domain_end: Last sample position (inclusive).
        sample_count: Number of samples, at least 2.

    Returns:
        SampleSet with `value(t) = sum(A * sin(2*pi*f*t + phi))`.

    Raises:
        InvalidArgument: Bad domain or sample count.
        NotReady: The spec is not complete.
    """
    components, t = _prepare(spec, domain_start, domain_end, sample_count)

    values = np.zeros_like(t)
    for component in components:
        values += _term(component, t)

    spec.mark_evaluated()
    logger.info(
        f"Evaluated {len(components)} components on [{domain_start}, {domain_end}] "
        f"with {sample_count} samples."
    )
    return SampleSet(domain=t, values=values)


def evaluate_components(
    spec: SeriesSpec,
    domain_start: float,
    domain_end: float,
    sample_count: int,
) -> list[SampleSet]:
    """Evaluate each component separately (one SampleSet per term, in spec order)."""
    components, t = _prepare(spec, domain_start, domain_end, sample_count)
    traces = [SampleSet(domain=t.copy(), values=_term(c, t)) for c in components]

    spec.mark_evaluated()
    logger.debug(f"Evaluated {len(traces)} component traces.")
    return traces
