"""Minimal three component vector used by the vector valued curves."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from numbers import Real
from typing import Self

import numpy as np
import numpy.typing as npt

from interpkernel._common import as_float_array

__all__ = [
    "Point3",
    "add",
    "scale",
    "subtract",
]


@dataclass(frozen=True, init=False)
class Point3:
    """Immutable point (or vector) in three dimensional space.

    Only the operations needed by the interpolation functions are provided:
    component wise addition and subtraction, and uniform scaling by a float.
    Non-finite components are accepted and propagate through arithmetic.

    Parameters
    ----------
    x : float
        First component.
    y : float
        Second component.
    z : float
        Third component.

    Examples
    --------
    .. jupyter-execute::

        >>> from interpkernel import Point3
        >>> a = Point3(1, 2, 3)
        >>> b = Point3(0.5, 0.5, 0.5)
        >>> print(a + b, a - b, 2 * b)
    """

    x: float
    y: float
    z: float

    def __init__(self, x: float, y: float, z: float) -> None:
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))

    @classmethod
    def from_array(cls, a: npt.ArrayLike, /) -> Self:
        """Create a point from an array-like with exactly three elements.

        Parameters
        ----------
        a : array_like
            Components in the order ``(x, y, z)``.

        Returns
        -------
        Point3
            Point with the given components.
        """
        arr = as_float_array(a)
        if arr.shape != (3,):
            raise ValueError(
                f"Point3 requires an array with the shape (3,), but got {arr.shape}."
            )
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def as_array(self) -> npt.NDArray[np.float64]:
        """Return the components as a new array with the shape ``(3,)``."""
        return np.array((self.x, self.y, self.z), np.float64)

    def __iter__(self) -> Iterator[float]:
        """Iterate over the components, allowing ``x, y, z = p``."""
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: object) -> Point3:
        """Add two points component wise."""
        if not isinstance(other, Point3):
            return NotImplemented
        return Point3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Point3:
        """Subtract two points component wise."""
        if not isinstance(other, Point3):
            return NotImplemented
        return Point3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, k: object) -> Point3:
        """Scale all components by the same factor."""
        if not isinstance(k, Real):
            return NotImplemented
        return Point3(self.x * k, self.y * k, self.z * k)

    def __rmul__(self, k: object) -> Point3:
        """Scale all components by the same factor."""
        return self.__mul__(k)

    def __neg__(self) -> Point3:
        """Return the point mirrored through the origin."""
        return Point3(-self.x, -self.y, -self.z)

    def __repr__(self) -> str:
        """Return representation of the object."""
        return f"Point3({self.x!r}, {self.y!r}, {self.z!r})"

    def __str__(self) -> str:
        """Return print-friendly representation of the object."""
        return f"({self.x}, {self.y}, {self.z})"


def add(a: Point3, b: Point3, /) -> Point3:
    """Return ``a + b`` computed component wise."""
    return a + b


def subtract(a: Point3, b: Point3, /) -> Point3:
    """Return ``a - b`` computed component wise."""
    return a - b


def scale(p: Point3, k: float, /) -> Point3:
    """Return ``p`` with every component multiplied by ``k``."""
    return p * k
