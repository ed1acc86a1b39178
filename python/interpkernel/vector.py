"""Interpolation of points in three dimensions.

These mirror the functions in :mod:`interpkernel.scalar`. All axes share the
same weights, so each component of the result is exactly what the scalar
function gives for that component of the inputs.
"""

from __future__ import annotations

from interpkernel.basis import cubic_smooth_weight, quadratic_bezier_weights
from interpkernel.point3 import Point3

__all__ = [
    "cubic_smooth_vector",
    "linear_vector",
    "quadratic_bezier_vector",
    "quadratic_de_casteljau_vector",
]


def linear_vector(a: Point3, b: Point3, t: float) -> Point3:
    """Linearly interpolate between two points.

    Parameters
    ----------
    a : Point3
        Point at ``t = 0``.
    b : Point3
        Point at ``t = 1``.
    t : float
        Progress, nominally between 0 and 1.

    Returns
    -------
    Point3
        Point ``a + (b - a) * t``.
    """
    return a + (b - a) * t


def quadratic_bezier_vector(p0: Point3, p1: Point3, p2: Point3, t: float) -> Point3:
    """Evaluate a quadratic Bézier curve through points using its polynomial form.

    Parameters
    ----------
    p0 : Point3
        Starting point of the curve.
    p1 : Point3
        Control point the curve bends towards.
    p2 : Point3
        End point of the curve.
    t : float
        Progress along the curve.

    Returns
    -------
    Point3
        Point on the curve.
    """
    w0, w1, w2 = quadratic_bezier_weights(t)
    return p0 * w0 + p1 * w1 + p2 * w2


def quadratic_de_casteljau_vector(
    p0: Point3, p1: Point3, p2: Point3, t: float
) -> Point3:
    """Evaluate a quadratic Bézier curve through points with De Casteljau's algorithm.

    Parameters
    ----------
    p0 : Point3
        Starting point of the curve.
    p1 : Point3
        Control point the curve bends towards.
    p2 : Point3
        End point of the curve.
    t : float
        Progress along the curve.

    Returns
    -------
    Point3
        Point on the curve, equal to :func:`quadratic_bezier_vector` up to rounding.
    """
    u = 1 - t
    d1 = p0 * u + p1 * t
    d2 = p1 * u + p2 * t
    return d1 * u + d2 * t


def cubic_smooth_vector(a: Point3, b: Point3, t: float) -> Point3:
    """Move from one point to another, easing in and out."""
    return a + (b - a) * cubic_smooth_weight(t)
