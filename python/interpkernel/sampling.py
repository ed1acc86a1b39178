"""Evaluating curves at many values of progress at once."""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np
import numpy.typing as npt

from interpkernel._common import as_float_array
from interpkernel.point3 import Point3

__all__ = [
    "linspace_progress",
    "sample_points",
    "sample_values",
]

logger = logging.getLogger(__name__)


def linspace_progress(
    n: int, start: float = 0.0, stop: float = 1.0
) -> npt.NDArray[np.float64]:
    """Return evenly spaced values of progress.

    Parameters
    ----------
    n : int
        Number of values. Both ``start`` and ``stop`` are included, so at least
        two are needed.
    start : float, default: 0.0
        First value.
    stop : float, default: 1.0
        Last value. It may be less than ``start``, or outside of ``[0, 1]``.

    Returns
    -------
    (n,) array
        Array of progress values.
    """
    n = int(n)
    if n < 2:
        raise ValueError(f"At least two samples are needed, but {n} were requested.")
    return np.linspace(start, stop, n, dtype=np.float64)


def sample_values(
    curve: Callable[[float], float], ts: npt.ArrayLike
) -> npt.NDArray[np.float64]:
    """Evaluate a scalar curve at each of the given progress values.

    Parameters
    ----------
    curve : Callable (float) -> float
        Curve to evaluate, for example
        ``lambda t: quadratic_bezier_value(0, 10, 0, t)``.
    ts : array_like
        Progress values of any shape.

    Returns
    -------
    array
        Values of the curve, with the same shape as ``ts``.
    """
    t = as_float_array(ts)
    logger.debug("Sampling scalar curve at %d points", t.size)
    out = np.empty_like(t)
    for idx, v in np.ndenumerate(t):
        out[idx] = curve(float(v))
    return out


def sample_points(
    curve: Callable[[float], Point3], ts: npt.ArrayLike
) -> npt.NDArray[np.float64]:
    """Evaluate a point valued curve at each of the given progress values.

    Parameters
    ----------
    curve : Callable (float) -> Point3
        Curve to evaluate, for example
        ``lambda t: catmull_rom_spline(p0, p1, p2, p3, t)``.
    ts : (N,) array_like
        One dimensional array of progress values.

    Returns
    -------
    (N, 3) array
        Array where row ``i`` holds the components of ``curve(ts[i])``.
    """
    t = as_float_array(ts)
    if t.ndim != 1:
        raise ValueError(
            f"Progress values must be given as a 1D array, but had {t.ndim} dimensions."
        )
    logger.debug("Sampling point curve at %d points", t.size)
    if t.size == 0:
        return np.empty((0, 3), np.float64)
    return np.stack(tuple(curve(float(v)).as_array() for v in t), axis=0)
