"""
Configuration & Defaults
========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (domain range, sample count...)
   scattered throughout the panels and the plot.
2. Presets: It holds the example series offered by the "Load Example" action.

Exports:
    DEFAULT_DOMAIN_START, DEFAULT_DOMAIN_END (float): Default evaluation range.
    DEFAULT_SAMPLE_COUNT (int): Default number of samples.
    MAX_COMPONENTS (int): Upper bound of the component count spin box.
    EXAMPLE_COMPONENTS (list): (amplitude, frequency, phase) example preset.
"""
import math

DEFAULT_DOMAIN_START: float = 0.0
DEFAULT_DOMAIN_END: float = 1.0
DEFAULT_SAMPLE_COUNT: int = 1024
MAX_SAMPLE_COUNT: int = 100_000

MAX_COMPONENTS: int = 32
MAX_FREQUENCY: float = 1000.0

# (amplitude, frequency, phase in radians)
EXAMPLE_COMPONENTS: list[tuple[float, float, float]] = [
    (0.5, 2.0, 0.0),
    (0.3, 5.0, math.pi / 4),
    (0.2, 8.0, math.pi / 2),
]
