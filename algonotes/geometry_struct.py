"""Plane and space primitives: points, vectors, lines, circles and planes."""

from __future__ import annotations

import math
from dataclasses import dataclass

EPS = 1e-6
"""Tolerance used by approximate geometric comparisons."""


def _fmt(*values: float) -> str:
    return " ".join(f"{value:g}" for value in values)


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __str__(self) -> str:
        return _fmt(self.x, self.y)


@dataclass(frozen=True)
class Point3D:
    """A point in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __str__(self) -> str:
        return _fmt(self.x, self.y, self.z)


@dataclass(frozen=True)
class Vector:
    """A displacement in the plane."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def between(cls, p1: Point, p2: Point) -> Vector:
        """Return the vector leading from ``p1`` to ``p2``."""
        return cls(p2.x - p1.x, p2.y - p1.y)

    def __str__(self) -> str:
        return _fmt(self.x, self.y)


@dataclass(frozen=True)
class Vector3D:
    """A displacement in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def between(cls, p1: Point3D, p2: Point3D) -> Vector3D:
        """Return the vector leading from ``p1`` to ``p2``."""
        return cls(p2.x - p1.x, p2.y - p1.y, p2.z - p1.z)

    def __str__(self) -> str:
        return _fmt(self.x, self.y, self.z)


@dataclass(frozen=True)
class Line:
    """The line ``a*x + b*y + c = 0``."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0

    @classmethod
    def through(cls, p1: Point, p2: Point) -> Line:
        """Return the line passing through ``p1`` and ``p2``."""
        return cls(
            p2.y - p1.y,
            p1.x - p2.x,
            (p2.x - p1.x) * p1.y - (p2.y - p1.y) * p1.x,
        )

    @classmethod
    def from_vectors(cls, p1: Point, p2: Point, mode: int = 0) -> Line:
        """Build a line from two points according to ``mode``.

        Mode 0 is the line through both points.  Mode 1 is the line with
        normal ``p1`` through ``p2``; mode 2 the line with normal ``p2``
        through ``p1``.
        """
        offset = -p1.x * p2.x - p1.y * p2.y
        if mode == 0:
            return cls.through(p1, p2)
        if mode == 1:
            return cls(p1.x, p1.y, offset)
        if mode == 2:
            return cls(p2.x, p2.y, offset)
        raise ValueError(f"unknown line mode {mode} for points {p1} and {p2}")

    def __str__(self) -> str:
        return _fmt(self.a, self.b, self.c)


@dataclass(frozen=True)
class Circle:
    """A circle with centre ``(x, y)`` and radius ``r``."""

    x: float = 0.0
    y: float = 0.0
    r: float = 0.0

    @classmethod
    def through(cls, p1: Point, p2: Point, p3: Point) -> Circle:
        """Return the circle through three points.

        Raises ValueError when the points are collinear.
        """
        l1 = Line.from_vectors(
            Point(p2.x - p1.x, p2.y - p1.y),
            Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2),
            1,
        )
        l2 = Line.from_vectors(
            Point(p3.x - p1.x, p3.y - p1.y),
            Point((p1.x + p3.x) / 2, (p1.y + p3.y) / 2),
            1,
        )
        determinant = l1.a * l2.b - l2.a * l1.b
        if determinant == 0:
            raise ValueError("points are collinear")
        x = (l2.c * l1.b - l1.c * l2.b) / determinant
        y = (l2.a * l1.c - l1.a * l2.c) / determinant
        return cls(x, y, math.hypot(p1.x - x, p1.y - y))

    def __str__(self) -> str:
        return _fmt(self.x, self.y, self.r)


@dataclass(frozen=True)
class Plane:
    """The plane ``a*x + b*y + c*z + d = 0``."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0

    @classmethod
    def through(cls, p1: Point3D, p2: Point3D, p3: Point3D) -> Plane:
        """Return the plane through three points."""
        v1 = Vector3D.between(p1, p2)
        v2 = Vector3D.between(p1, p3)
        a = v1.y * v2.z - v1.z * v2.y
        b = v1.z * v2.x - v1.x * v2.z
        c = v1.x * v2.y - v1.y * v2.x
        return cls(a, b, c, -(a * p1.x + b * p1.y + c * p1.z))

    def normal(self) -> Vector3D:
        """Return the plane's normal vector."""
        return Vector3D(self.a, self.b, self.c)

    def __str__(self) -> str:
        return _fmt(self.a, self.b, self.c, self.d)


def key_xy(p: Point) -> tuple[float, float]:
    """Sort key ordering points by x, then y."""
    return (p.x, p.y)


def key_yx(p: Point) -> tuple[float, float]:
    """Sort key ordering points by y, then x."""
    return (p.y, p.x)