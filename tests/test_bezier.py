"""Tests for the two forms of quadratic Bézier curves."""

import numpy as np
import pytest
from interpkernel import (
    Point3,
    quadratic_bezier_value,
    quadratic_bezier_vector,
    quadratic_bezier_weights,
    quadratic_de_casteljau_value,
    quadratic_de_casteljau_vector,
)

DENSE_T = np.linspace(-1, 2, 3001)


def test_weights_sum_to_one():
    """Check that the weights form a partition of unity."""
    w0, w1, w2 = quadratic_bezier_weights(DENSE_T)
    assert np.max(np.abs(w0 + w1 + w2 - 1)) < 1e-9
    for t in (-1.0, 0.0, 0.25, 0.5, 1.0, 2.0):
        assert sum(quadratic_bezier_weights(t)) == pytest.approx(1.0, abs=1e-9)


def test_peak_example():
    """Check a symmetric curve reaches half of its control value."""
    assert quadratic_bezier_value(0.0, 10.0, 0.0, 0.5) == 5.0
    assert quadratic_de_casteljau_value(0.0, 10.0, 0.0, 0.5) == 5.0


@pytest.mark.parametrize(
    "form", (quadratic_bezier_value, quadratic_de_casteljau_value)
)
def test_scalar_endpoints(form):
    """Check that the curve starts at the first value and ends at the last."""
    np.random.seed(0)
    for p0, p1, p2 in np.random.random_sample((20, 3)) * 10 - 5:
        assert form(p0, p1, p2, 0.0) == p0
        assert form(p0, p1, p2, 1.0) == p2


@pytest.mark.parametrize(
    "form", (quadratic_bezier_vector, quadratic_de_casteljau_vector)
)
def test_vector_endpoints(form):
    """Check that the curve starts at the first point and ends at the last."""
    p0, p1, p2 = Point3(0, 1, 2), Point3(3, -1, 5), Point3(-2, 4, 0.5)
    assert form(p0, p1, p2, 0.0) == p0
    assert form(p0, p1, p2, 1.0) == p2


@pytest.mark.parametrize("seed", (0, 1, 2, 3))
def test_forms_agree_scalar(seed: int):
    """Check the polynomial and De Casteljau forms give the same curve."""
    np.random.seed(seed)
    p0, p1, p2 = np.random.random_sample(3) * 20 - 10
    direct = quadratic_bezier_value(p0, p1, p2, DENSE_T)
    recursive = quadratic_de_casteljau_value(p0, p1, p2, DENSE_T)
    assert direct == pytest.approx(recursive, rel=0, abs=1e-9)


@pytest.mark.parametrize("seed", (0, 1))
def test_forms_agree_vector(seed: int):
    """Check the polynomial and De Casteljau forms give the same points."""
    np.random.seed(seed)
    p0, p1, p2 = (Point3.from_array(v) for v in np.random.random_sample((3, 3)))
    for t in DENSE_T[::10]:
        a = quadratic_bezier_vector(p0, p1, p2, float(t)).as_array()
        b = quadratic_de_casteljau_vector(p0, p1, p2, float(t)).as_array()
        assert a == pytest.approx(b, rel=0, abs=1e-9)


@pytest.mark.parametrize(
    "scalar_form,vector_form",
    (
        (quadratic_bezier_value, quadratic_bezier_vector),
        (quadratic_de_casteljau_value, quadratic_de_casteljau_vector),
    ),
)
def test_vector_consistent(scalar_form, vector_form):
    """Check the vector forms give the scalar forms on every axis."""
    np.random.seed(912)
    pts = np.random.random_sample((3, 3))
    p0, p1, p2 = (Point3.from_array(v) for v in pts)
    for t in np.linspace(-0.5, 1.5, 21):
        r = vector_form(p0, p1, p2, float(t))
        expected = tuple(
            scalar_form(pts[0, i], pts[1, i], pts[2, i], float(t)) for i in range(3)
        )
        assert tuple(r) == pytest.approx(expected)


def test_degenerate():
    """Check that coinciding control points collapse the curve to a point."""
    p = Point3(1.0, 2.0, 3.0)
    for t in (-1.0, 0.0, 0.5, 1.0, 2.0):
        assert quadratic_bezier_value(4.0, 4.0, 4.0, t) == pytest.approx(4.0)
        assert quadratic_de_casteljau_value(4.0, 4.0, 4.0, t) == pytest.approx(4.0)
        assert quadratic_bezier_vector(p, p, p, t).as_array() == pytest.approx(
            p.as_array()
        )


def test_straight_control_polygon():
    """Check that a middle point halfway between the ends gives a straight line."""
    t = np.linspace(0, 1, 65)
    assert quadratic_bezier_value(0.0, 5.0, 10.0, t) == pytest.approx(10 * t)
