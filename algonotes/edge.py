"""Small edge records used by the graph structures and algorithms."""

from __future__ import annotations

from dataclasses import dataclass

INF = 1_000_000_000
"""Sentinel weight standing for 'unreachable' or 'not yet known'."""


@dataclass
class Edge:
    """An unweighted edge between vertices ``u`` and ``v``; ordered by ``u``."""

    u: int = -1
    v: int = -1

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.u < other.u

    def __str__(self) -> str:
        return f"{self.u} {self.v}"


@dataclass
class VertexWeight:
    """A vertex ``u`` paired with a weight ``w``; ordered by ``w``."""

    u: int = -1
    w: int = INF

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VertexWeight):
            return NotImplemented
        return self.w < other.w

    def __str__(self) -> str:
        return f"{self.u} {self.w}"


@dataclass
class WeightedEdge:
    """An edge between ``u`` and ``v`` with weight ``w``; ordered by ``w``."""

    u: int = -1
    v: int = -1
    w: int = INF

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, WeightedEdge):
            return NotImplemented
        return self.w < other.w

    def __str__(self) -> str:
        return f"{self.u} {self.v} {self.w}"