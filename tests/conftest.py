import os

# Headless Qt and matplotlib for CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from fourierfun.model.series import SeriesSpec


@pytest.fixture
def unit_sine() -> SeriesSpec:
    """Complete spec holding a single sine of amplitude 1 and frequency 1."""
    spec = SeriesSpec()
    spec.declare_count(1)
    spec.add_component(1.0, 1.0)
    return spec
