"""Plane and solid shapes, and right-triangle side lengths."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height

    def extent(self) -> float:
        """Perimeter."""
        return 2 * self.width + 2 * self.height

    def volume(self) -> float:
        return 0.0


@dataclass(frozen=True)
class Square:
    length: float

    def area(self) -> float:
        return self.length * self.length

    def extent(self) -> float:
        """Perimeter."""
        return 4 * self.length

    def volume(self) -> float:
        return 0.0


@dataclass(frozen=True)
class Circle:
    radius: float

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def extent(self) -> float:
        """Circumference."""
        return math.pi * (self.radius + self.radius)

    def volume(self) -> float:
        return 0.0


@dataclass(frozen=True)
class Cuboid:
    width: float
    height: float
    length: float

    def area(self) -> float:
        """Surface area."""
        w, h, l = self.width, self.height, self.length
        return 2 * (w * h + w * l + l * h)

    def extent(self) -> float:
        """Total length of all twelve edges."""
        return 4 * self.width + 4 * self.height + 4 * self.length

    def volume(self) -> float:
        return self.width * self.height * self.length


def _side(value: float | str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"not a number: {value!r}") from None


def _root(value: float) -> float:
    return math.sqrt(value) if value >= 0 else math.nan


def missing_side(a: float | str, b: float | str, c: float | str) -> float:
    """Unknown side of a right triangle with legs a, b and hypotenuse c.

    The unknown side is given as ``"?"``; when several are, the first wins.
    A leg longer than the hypotenuse gives NaN.
    """
    if a == "?":
        return _root(_side(c) ** 2 - _side(b) ** 2)
    if b == "?":
        return _root(_side(c) ** 2 - _side(a) ** 2)
    if c == "?":
        return _root(_side(a) ** 2 + _side(b) ** 2)
    raise ValueError('one of the arguments has to be a "?"')