from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, Union

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


def normalize_values(
    values: Union[Sequence[float], npt.NDArray[np.float64]],
    lo: float = 0.0,
    hi: float = 1.0,
) -> npt.NDArray[np.float64]:
    """Linearly rescale `values` into [lo, hi]. Constant input maps to the midpoint."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        return arr.copy()

    v_min = float(arr.min())
    v_max = float(arr.max())
    span = v_max - v_min
    if span == 0.0:
        return np.full_like(arr, (lo + hi) / 2.0)
    return lo + (arr - v_min) / span * (hi - lo)
