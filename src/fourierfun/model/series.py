"""
Series Specification (Component Store)
======================================
This module holds the sine components the user declared for one session.

Why is this file needed?
------------------------
1. State Management: It collects (amplitude, frequency) pairs one at a time
   until the declared count is reached.
2. Validation: Every input is checked before anything is stored, so a failed
   call never leaves a half-updated store behind.
3. Workflow: It tracks the input workflow stage
   (Idle -> CountDeclared -> Collecting -> Ready -> Evaluated).

Classes:
    SineComponent: One immutable sine term.
    SeriesStage: Stages of the input workflow.
    SeriesSpec: The ordered, count-checked container handed to the evaluator.
"""
from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional, Sequence

from fourierfun.model.errors import CapacityExceeded, InvalidArgument, NotReady

logger = logging.getLogger(__name__)


def as_finite_float(name: str, value: object) -> float:
    """Return `value` as a float, or raise InvalidArgument if it is not a finite real."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgument(f"{name} must be a real number, got {value!r}.")
    try:
        result = float(value)
    except OverflowError:
        raise InvalidArgument(f"{name} is too large for a float: {value!r}.") from None
    if not math.isfinite(result):
        raise InvalidArgument(f"{name} must be finite, got {result}.")
    return result


def _as_count(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}.")
    return int(value)


@dataclass(frozen=True)
class SineComponent:
    """
    A single term `amplitude * sin(2*pi*frequency*t + phase)`.

    Attributes:
        amplitude: Any finite real number (negative flips the term).
        frequency: Cycles per unit domain, never negative.
        phase: Phase shift in radians.
    """
    amplitude: float
    frequency: float
    phase: float = 0.0

    @classmethod
    def create(cls, amplitude: float, frequency: float, phase: float = 0.0) -> SineComponent:
        """Validate the raw inputs and build a component."""
        amp = as_finite_float("Amplitude", amplitude)
        freq = as_finite_float("Frequency", frequency)
        ph = as_finite_float("Phase", phase)
        if freq < 0.0:
            raise InvalidArgument(f"Frequency must not be negative, got {freq}.")
        return cls(amplitude=amp, frequency=freq, phase=ph)


class SeriesStage(IntEnum):
    """Stages of the input workflow."""
    IDLE = 0
    COUNT_DECLARED = 1
    COLLECTING = 2
    READY = 3
    EVALUATED = 4


class SeriesSpec:
    """
    Ordered collection of sine components for one evaluation session.

    The store starts IDLE. `declare_count` opens a fresh session; components
    are then appended with `add_component` until the declared count is reached.
    """

    def __init__(self) -> None:
        self._declared: Optional[int] = None
        self._components: list[SineComponent] = []
        self._evaluated: bool = False

    @classmethod
    def from_pairs(cls, pairs: Iterable[Sequence[float]]) -> SeriesSpec:
        """
        Build a complete spec in one go.

        Args:
            pairs: Iterable of (amplitude, frequency) or (amplitude, frequency, phase).
        """
        items = []
        for p in pairs:
            try:
                item = tuple(p)
            except TypeError:
                raise InvalidArgument(f"Expected (amplitude, frequency[, phase]), got {p!r}.") from None
            if len(item) not in (2, 3):
                raise InvalidArgument(f"Expected (amplitude, frequency[, phase]), got {item!r}.")
            items.append(item)
        # Validate everything before touching the new instance
        components = [SineComponent.create(*item) for item in items]

        spec = cls()
        spec.declare_count(len(components))
        for c in components:
            spec.add_component(c.amplitude, c.frequency, c.phase)
        return spec

    # --- PROPERTIES ---

    @property
    def declared_count(self) -> Optional[int]:
        """Declared number of components, or None while IDLE."""
        return self._declared

    @property
    def remaining(self) -> int:
        if self._declared is None:
            return 0
        return self._declared - len(self._components)

    @property
    def stage(self) -> SeriesStage:
        if self._declared is None:
            return SeriesStage.IDLE
        if len(self._components) == self._declared:
            return SeriesStage.EVALUATED if self._evaluated else SeriesStage.READY
        if not self._components:
            return SeriesStage.COUNT_DECLARED
        return SeriesStage.COLLECTING

    def __len__(self) -> int:
        return len(self._components)

    def __repr__(self) -> str:
        return (
            f"SeriesSpec(stage={self.stage.name}, "
            f"collected={len(self._components)}, declared={self._declared})"
        )

    # --- OPERATIONS ---

    def declare_count(self, n: int) -> None:
        """
        Start a fresh session expecting `n` components.

        Any previously collected components are discarded.

        Raises:
            InvalidArgument: If `n` is negative or not an integer.
        """
        count = _as_count("Component count", n)
        if count < 0:
            raise InvalidArgument(f"Component count must not be negative, got {count}.")

        dropped = len(self._components)
        self._declared = count
        self._components = []
        self._evaluated = False
        logger.debug(f"Declared {count} components (discarded {dropped}).")

    def add_component(self, amplitude: float, frequency: float, phase: float = 0.0) -> SineComponent:
        """
        Append one component in call order.

        Raises:
            CapacityExceeded: If the declared count is already reached.
            InvalidArgument: If frequency is negative or a value is not finite.
        """
        if self.remaining <= 0:
            raise CapacityExceeded(
                f"Cannot add component: {len(self._components)} of "
                f"{self._declared or 0} already collected."
            )
        component = SineComponent.create(amplitude, frequency, phase)
        self._components.append(component)
        logger.debug(
            f"Added component {len(self._components)}/{self._declared}: "
            f"A={component.amplitude}, f={component.frequency}, phi={component.phase}"
        )
        return component

    def is_complete(self) -> bool:
        return self._declared is not None and len(self._components) == self._declared

    def components(self) -> tuple[SineComponent, ...]:
        """
        Return the collected components in insertion order.

        Raises:
            NotReady: If collection is not complete.
        """
        if not self.is_complete():
            raise NotReady(
                f"Series is not complete: {len(self._components)} of "
                f"{self._declared if self._declared is not None else '?'} components collected."
            )
        return tuple(self._components)

    def collected(self) -> tuple[SineComponent, ...]:
        """Components gathered so far, complete or not (for progress display)."""
        return tuple(self._components)

    def mark_evaluated(self) -> None:
        """Record that an evaluation consumed this spec (READY -> EVALUATED)."""
        if not self.is_complete():
            raise NotReady("Only a complete series can be marked as evaluated.")
        self._evaluated = True
