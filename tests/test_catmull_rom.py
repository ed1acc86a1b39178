"""Tests for the Catmull-Rom spline segment."""

import numpy as np
import pytest
from interpkernel import (
    CATMULL_ROM_BASIS,
    Point3,
    catmull_rom_spline,
    catmull_rom_weights,
)


def test_weights_at_ends():
    """Check the exact values of the weights at both ends of the segment."""
    assert catmull_rom_weights(0.0) == (0.0, 2.0, 0.0, 0.0)
    assert catmull_rom_weights(1.0) == (0.0, 0.0, 2.0, 0.0)


def test_weights_match_polynomials():
    """Check weights against their polynomial definitions."""
    t = np.linspace(-1, 2, 151)
    for q, poly in zip(catmull_rom_weights(t), CATMULL_ROM_BASIS):
        assert q == pytest.approx(poly(t))
    # Weights always sum up to two
    assert sum(catmull_rom_weights(t)) == pytest.approx(np.full_like(t, 2.0))


def test_default_alpha_passes_through_inner_points():
    """Check the default scale makes the segment run from p1 to p2."""
    p0, p1, p2, p3 = Point3(0, 0, 0), Point3(1, 2, 3), Point3(4, 5, 6), Point3(7, 7, 7)
    assert catmull_rom_spline(p0, p1, p2, p3, 0.0) == p1
    assert catmull_rom_spline(p0, p1, p2, p3, 1.0) == p2


@pytest.mark.parametrize("alpha", (0.0, 0.25, 1.0, 2.0))
def test_alpha_scales_everything(alpha: float):
    """Check that alpha multiplies the whole weighted sum."""
    np.random.seed(7)
    pts = [Point3.from_array(v) for v in np.random.random_sample((4, 3))]
    assert catmull_rom_spline(*pts, 0.0, alpha) == pts[1] * (2 * alpha)
    assert catmull_rom_spline(*pts, 1.0, alpha) == pts[2] * (2 * alpha)
    for t in np.linspace(-0.5, 1.5, 9):
        base = catmull_rom_spline(*pts, float(t), 1.0).as_array()
        scaled = catmull_rom_spline(*pts, float(t), alpha=alpha).as_array()
        assert scaled == pytest.approx(base * alpha)


def test_evenly_spaced_line():
    """Check that evenly spaced collinear points give uniform motion."""
    d = Point3(1.0, -2.0, 0.5)
    pts = [d * i for i in range(4)]
    for t in np.linspace(0, 1, 11):
        r = catmull_rom_spline(*pts, float(t))
        assert r.as_array() == pytest.approx((d * (1 + float(t))).as_array())


def test_tangent_continuity():
    """Check neighbouring segments share the tangent where they meet."""
    np.random.seed(0)
    pts = [Point3.from_array(v) for v in np.random.random_sample((5, 3))]
    dq = tuple(poly.deriv() for poly in CATMULL_ROM_BASIS)

    def tangent(p0, p1, p2, p3, t):
        return (p0 * dq[0](t) + p1 * dq[1](t) + p2 * dq[2](t) + p3 * dq[3](t)) * 0.5

    end_first = tangent(*pts[:4], 1.0)
    start_second = tangent(*pts[1:], 0.0)
    assert end_first.as_array() == pytest.approx(start_second.as_array())
    # Tangent is half the difference between the outer neighbours
    assert start_second.as_array() == pytest.approx(
        ((pts[3] - pts[1]) * 0.5).as_array()
    )


def test_axis_formula():
    """Check every axis follows the weighted sum of its components."""
    np.random.seed(42)
    arr = np.random.random_sample((4, 3)) * 10 - 5
    pts = [Point3.from_array(v) for v in arr]
    for t in np.linspace(0, 1, 17):
        q = np.array(catmull_rom_weights(float(t)))
        expected = 0.3 * (q @ arr)
        r = catmull_rom_spline(*pts, float(t), alpha=0.3)
        assert r.as_array() == pytest.approx(expected)


def test_degenerate():
    """Check all control points in one place give a single point."""
    p = Point3(3.0, -1.0, 2.0)
    for t in (-1.0, 0.0, 0.4, 1.0, 3.0):
        assert catmull_rom_spline(p, p, p, p, t).as_array() == pytest.approx(
            p.as_array()
        )
