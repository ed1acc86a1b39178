r"""Catmull-Rom spline segment through points in three dimensions.

A segment is defined by four consecutive control points. The curve is drawn
between ``p1`` and ``p2``, while ``p0`` and ``p3`` only determine the tangents
at its ends. The point at progress :math:`t` is

.. math::

    \alpha \left(q_1(t) p_0 + q_2(t) p_1 + q_3(t) p_2 + q_4(t) p_3\right),

with the weights given by :func:`~interpkernel.basis.catmull_rom_weights`.

The factor :math:`\alpha` scales the whole weighted sum. It is **not** the
knot parameterization exponent that distinguishes uniform, centripetal and
chordal Catmull-Rom splines. Since :math:`q_2(0) = q_3(1) = 2`, the segment
starts at :math:`2 \alpha p_1` and ends at :math:`2 \alpha p_2`, so only the
default :math:`\alpha = 0.5` makes it pass through ``p1`` and ``p2``.
"""

from __future__ import annotations

from interpkernel.basis import catmull_rom_weights
from interpkernel.point3 import Point3

__all__ = [
    "DEFAULT_CATMULL_ROM_ALPHA",
    "catmull_rom_spline",
]

DEFAULT_CATMULL_ROM_ALPHA = 0.5
"""Scale applied to the weighted sum when none is given."""


def catmull_rom_spline(
    p0: Point3,
    p1: Point3,
    p2: Point3,
    p3: Point3,
    t: float,
    alpha: float = DEFAULT_CATMULL_ROM_ALPHA,
) -> Point3:
    """Evaluate a Catmull-Rom spline segment.

    Parameters
    ----------
    p0 : Point3
        Control point before the segment, which shapes the starting tangent.
    p1 : Point3
        Starting point of the segment.
    p2 : Point3
        Ending point of the segment.
    p3 : Point3
        Control point after the segment, which shapes the ending tangent.
    t : float
        Progress along the segment, nominally between 0 and 1.
    alpha : float, default: 0.5
        Factor multiplying the weighted sum of the control points.

    Returns
    -------
    Point3
        Point on the segment.

    Examples
    --------
    .. jupyter-execute::

        >>> from interpkernel import Point3, catmull_rom_spline
        >>> pts = [Point3(i, i % 2, 0) for i in range(4)]
        >>> print(catmull_rom_spline(*pts, 0.0))
        >>> print(catmull_rom_spline(*pts, 0.5))
        >>> print(catmull_rom_spline(*pts, 1.0))
    """
    q1, q2, q3, q4 = catmull_rom_weights(t)
    return (p0 * q1 + p1 * q2 + p2 * q3 + p3 * q4) * alpha
