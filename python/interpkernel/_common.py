"""Common internal Python functions."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt


def as_float_array(a: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Return the input as an array of float64, copying only when needed."""
    if isinstance(a, np.ndarray) and a.dtype == np.float64:
        return a
    return np.array(a, dtype=np.float64)


FloatLike = float | npt.NDArray[np.float64]
"""Float, or an array of floats which broadcasts through plain arithmetic."""
