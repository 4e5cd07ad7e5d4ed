"""
Magnitude spectrum of an evaluated series (real DFT).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from fourierfun.model.errors import InvalidArgument
from fourierfun.model.fourier import SampleSet

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Spectrum:
    """One-sided spectrum. Frequencies are in cycles per unit domain."""
    frequencies: npt.NDArray[np.float64]
    magnitudes: npt.NDArray[np.float64]
    phases: npt.NDArray[np.float64]

    def __len__(self) -> int:
        return int(self.frequencies.shape[0])

    def peak_frequencies(self, count: int) -> list[float]:
        """Frequencies of the `count` strongest bins, strongest first."""
        if count < 0:
            raise InvalidArgument(f"Peak count must not be negative, got {count}.")
        # stable sort keeps the lower bin first on ties
        order = np.argsort(-self.magnitudes, kind="stable")[:count]
        return [float(self.frequencies[i]) for i in order]


def magnitude_spectrum(samples: SampleSet) -> Spectrum:
    """
    Compute the one-sided amplitude spectrum of `samples.values`.

    Magnitudes are scaled so that an on-bin sine of amplitude A reads A
    (DC and Nyquist bins are scaled by 1/N, the others by 2/N).
    """
    n = len(samples)
    if n < 2:
        raise InvalidArgument(f"Need at least 2 samples for a spectrum, got {n}.")

    coefficients = np.fft.rfft(samples.values)
    frequencies = np.fft.rfftfreq(n, d=samples.step)

    magnitudes = np.abs(coefficients) * (2.0 / n)
    magnitudes[0] /= 2.0
    if n % 2 == 0:
        magnitudes[-1] /= 2.0
    phases = np.arctan2(coefficients.imag, coefficients.real)

    logger.debug(f"Computed spectrum with {len(frequencies)} bins from {n} samples.")
    return Spectrum(frequencies=frequencies, magnitudes=magnitudes, phases=phases)
