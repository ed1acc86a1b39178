r"""Blending weights of the curve families.

Every curve in this package is a weighted sum of its control values, where
the weights only depend on the progress :math:`t`. These functions return the
weights themselves, so that their properties can be examined and so that
they can be reused to blend other quantities.

All functions accept either a float or an array of floats and broadcast
in the usual numpy way. No check is made that :math:`t \in [0, 1]`.
"""

from __future__ import annotations

from numpy.polynomial import Polynomial

from interpkernel._common import FloatLike

__all__ = [
    "CATMULL_ROM_BASIS",
    "SMOOTHSTEP_BASIS",
    "catmull_rom_weights",
    "cubic_smooth_weight",
    "cubic_smooth_weight_derivative",
    "quadratic_bezier_weights",
]

SMOOTHSTEP_BASIS = Polynomial([0, 0, 3, -2])
"""
    :math:`H(t) = -2 t^3 + 3 t^2`
"""

CATMULL_ROM_BASIS = (
    Polynomial([0, -1, 2, -1]),
    Polynomial([2, 0, -5, 3]),
    Polynomial([0, 1, 4, -3]),
    Polynomial([0, 0, -1, 1]),
)
"""
    :math:`q_1(t) = -t^3 + 2 t^2 - t`

    :math:`q_2(t) = 3 t^3 - 5 t^2 + 2`

    :math:`q_3(t) = -3 t^3 + 4 t^2 + t`

    :math:`q_4(t) = t^3 - t^2`
"""

_SMOOTHSTEP_DERIVATIVE = SMOOTHSTEP_BASIS.deriv()


def quadratic_bezier_weights(t: FloatLike) -> tuple[FloatLike, FloatLike, FloatLike]:
    r"""Return weights of the three control values of a quadratic Bézier curve.

    With :math:`u = 1 - t` these are :math:`(u^2, 2 u t, t^2)`. They sum
    to one for any value of :math:`t`.

    Parameters
    ----------
    t : float or array
        Progress along the curve.

    Returns
    -------
    (float, float, float) or (array, array, array)
        Weights of the first, second and third control value.
    """
    u = 1 - t
    return (u**2, 2 * u * t, t**2)


def cubic_smooth_weight(t: FloatLike) -> FloatLike:
    r"""Return the smoothstep weight :math:`-2 t^3 + 3 t^2`.

    Parameters
    ----------
    t : float or array
        Progress between the two values.

    Returns
    -------
    float or array
        Fraction of the way from the first to the second value.
    """
    return -2 * t**3 + 3 * t**2


def cubic_smooth_weight_derivative(t: FloatLike) -> FloatLike:
    r"""Return the derivative of the smoothstep weight, :math:`-6 t^2 + 6 t`.

    It is exactly zero at both :math:`t = 0` and :math:`t = 1`.
    """
    return _SMOOTHSTEP_DERIVATIVE(t)


def catmull_rom_weights(
    t: FloatLike,
) -> tuple[FloatLike, FloatLike, FloatLike, FloatLike]:
    r"""Return weights of the four control points of a Catmull-Rom segment.

    The weights are not scaled by ``alpha``. At :math:`t = 0` they are
    :math:`(0, 2, 0, 0)` and at :math:`t = 1` they are :math:`(0, 0, 2, 0)`.

    Parameters
    ----------
    t : float or array
        Progress along the segment.

    Returns
    -------
    (q1, q2, q3, q4)
        Weights of ``p0``, ``p1``, ``p2`` and ``p3``.
    """
    t2 = t**2
    t3 = t**3
    q1 = -t3 + 2.0 * t2 - t
    q2 = 3.0 * t3 - 5.0 * t2 + 2.0
    q3 = -3.0 * t3 + 4.0 * t2 + t
    q4 = t3 - t2
    return (q1, q2, q3, q4)
