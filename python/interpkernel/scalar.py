r"""Interpolation of scalar values.

Each function takes the control values and the progress :math:`t` and
returns the interpolated value. Values of :math:`t` outside of
:math:`[0, 1]` extrapolate the curve and are not treated as an error.
Nothing is validated, so ``nan`` or ``inf`` in any input simply propagates to
the output following the usual floating point rules.

Since only plain arithmetic is used, numpy arrays can be passed in place of
any of the floats and the result is broadcast accordingly.
"""

from __future__ import annotations

from interpkernel._common import FloatLike
from interpkernel.basis import cubic_smooth_weight, quadratic_bezier_weights

__all__ = [
    "cubic_smooth_value",
    "linear_value",
    "quadratic_bezier_value",
    "quadratic_de_casteljau_value",
]


def linear_value(a: FloatLike, b: FloatLike, t: FloatLike) -> FloatLike:
    """Linearly interpolate between two values.

    Parameters
    ----------
    a : float
        Value at ``t = 0``.
    b : float
        Value at ``t = 1``.
    t : float
        Progress, nominally between 0 and 1.

    Returns
    -------
    float
        Value ``a + (b - a) * t``.
    """
    return a + (b - a) * t


def quadratic_bezier_value(
    p0: FloatLike, p1: FloatLike, p2: FloatLike, t: FloatLike
) -> FloatLike:
    r"""Evaluate a quadratic Bézier curve using its polynomial form.

    With :math:`u = 1 - t` the result is
    :math:`u^2 p_0 + 2 u t p_1 + t^2 p_2`.

    Parameters
    ----------
    p0 : float
        First control value, reached at ``t = 0``.
    p1 : float
        Middle control value, which the curve bends towards.
    p2 : float
        Last control value, reached at ``t = 1``.
    t : float
        Progress along the curve.

    Returns
    -------
    float
        Value of the curve.

    See Also
    --------
    quadratic_de_casteljau_value
        Same curve, computed by repeated linear interpolation.
    """
    w0, w1, w2 = quadratic_bezier_weights(t)
    return w0 * p0 + w1 * p1 + w2 * p2


def quadratic_de_casteljau_value(
    p0: FloatLike, p1: FloatLike, p2: FloatLike, t: FloatLike
) -> FloatLike:
    """Evaluate a quadratic Bézier curve with De Casteljau's algorithm.

    The control polygon is linearly interpolated twice. The result matches
    :func:`quadratic_bezier_value` up to rounding.

    Parameters
    ----------
    p0 : float
        First control value, reached at ``t = 0``.
    p1 : float
        Middle control value.
    p2 : float
        Last control value, reached at ``t = 1``.
    t : float
        Progress along the curve.

    Returns
    -------
    float
        Value of the curve.
    """
    u = 1 - t
    d1 = u * p0 + t * p1
    d2 = u * p1 + t * p2
    return u * d1 + t * d2


def cubic_smooth_value(a: FloatLike, b: FloatLike, t: FloatLike) -> FloatLike:
    """Interpolate between two values, easing in and out.

    Movement accelerates away from ``a`` and decelerates into ``b``, with zero
    rate of change at both ends. The weight is given by
    :func:`~interpkernel.basis.cubic_smooth_weight`.

    Parameters
    ----------
    a : float
        Value at ``t = 0``.
    b : float
        Value at ``t = 1``.
    t : float
        Progress, nominally between 0 and 1.

    Returns
    -------
    float
        Smoothly interpolated value.
    """
    return a + (b - a) * cubic_smooth_weight(t)
