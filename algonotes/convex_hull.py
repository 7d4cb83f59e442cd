"""Convex hulls of planar point sets."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from enum import IntEnum

from .geometry_alg import cross
from .geometry_struct import EPS, Line, Point, Vector, key_xy


class SortType(IntEnum):
    """Hull construction method."""

    DIVIDE = 0
    """Divide and conquer, merging sub-hulls along support lines."""
    XY = 1
    """Monotone chain over points ordered by x, then y."""


def position(line: Line, p: Point) -> int:
    """Return 1, -1 or 0 as ``p`` lies above, below or on ``line``.

    For a vertical line, "above" means to the right of it.
    """
    if abs(line.b) < EPS:
        boundary = -line.c / line.a
        value = p.x
    else:
        boundary = -(line.a * p.x + line.c) / line.b
        value = p.y
    return (value > boundary) - (value < boundary)


def orientation(p1: Point, p2: Point, p3: Point) -> float:
    """Cross product of the turn ``p1 -> p2 -> p3``; positive when it turns left."""
    return cross(Vector.between(p1, p2), Vector.between(p2, p3))


def _extremes(hull1: Sequence[Point], hull2: Sequence[Point]) -> tuple[int, int]:
    if not hull1 or not hull2:
        raise ValueError("support lines need two non-empty hulls")
    right = max(range(len(hull1)), key=lambda i: hull1[i].x)
    left = min(range(len(hull2)), key=lambda i: hull2[i].x)
    return right, left


def lower_support(hull1: Sequence[Point], hull2: Sequence[Point]) -> tuple[int, int]:
    """Indices of the lower common tangent of two counter-clockwise hulls.

    ``hull1`` must lie to the left of ``hull2``.
    """
    ls, rs = _extremes(hull1, hull2)
    n1, n2 = len(hull1), len(hull2)
    while True:
        if n2 > 1 and orientation(hull1[ls], hull2[rs], hull2[(rs + 1) % n2]) < 0:
            rs = (rs + 1) % n2
        elif n1 > 1 and orientation(hull2[rs], hull1[ls], hull1[(ls - 1) % n1]) > 0:
            ls = (ls - 1) % n1
        else:
            return ls, rs


def upper_support(hull1: Sequence[Point], hull2: Sequence[Point]) -> tuple[int, int]:
    """Indices of the upper common tangent of two counter-clockwise hulls.

    ``hull1`` must lie to the left of ``hull2``.
    """
    ls, rs = _extremes(hull1, hull2)
    n1, n2 = len(hull1), len(hull2)
    while True:
        if n2 > 1 and orientation(hull1[ls], hull2[rs], hull2[(rs - 1) % n2]) > 0:
            rs = (rs - 1) % n2
        elif n1 > 1 and orientation(hull2[rs], hull1[ls], hull1[(ls + 1) % n1]) < 0:
            ls = (ls + 1) % n1
        else:
            return ls, rs


def _walk(hull: Sequence[Point], start: int, stop: int) -> Iterator[Point]:
    i = start
    while i != stop:
        yield hull[i]
        i = (i + 1) % len(hull)
    yield hull[stop]


def _divide(points: Sequence[Point]) -> list[Point]:
    if len(points) <= 1:
        return list(points)
    middle = len(points) // 2
    left = _divide(points[:middle])
    right = _divide(points[middle:])
    l1, l2 = lower_support(left, right)
    u1, u2 = upper_support(left, right)
    return [*_walk(left, u1, l1), *_walk(right, l2, u2)]


def _chain(points: Iterable[Point]) -> list[Point]:
    chain: list[Point] = []
    for p in points:
        while len(chain) >= 2 and orientation(chain[-2], chain[-1], p) < 0:
            chain.pop()
        chain.append(p)
    chain.pop()
    return chain


def _monotone(points: Sequence[Point]) -> list[Point]:
    if len(points) <= 1:
        return list(points)
    return _chain(points) + _chain(reversed(points))


def convex_hull(points: Iterable[Point], sort_type: int = SortType.DIVIDE) -> list[Point]:
    """Return the convex hull of ``points`` in counter-clockwise order.

    Raises ValueError for an unknown ``sort_type``.
    """
    method = SortType(sort_type)
    ordered = sorted(points, key=key_xy)
    if method is SortType.XY:
        return _monotone(ordered)
    return _divide(ordered)