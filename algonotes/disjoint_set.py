"""Disjoint-set forest with union by accumulated width."""

from __future__ import annotations


class DisjointSet:
    """Partition of the integers ``0 .. n-1`` into disjoint sets.

    ``count`` is the current number of sets.  Each root carries a ``width``
    that grows with merges and with the depth of lookups through it; the
    root with the smaller width is hung below the other on merge.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self.parent: list[int] = list(range(n))
        self.width: list[int] = [0] * n
        self.count = n

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self.parent):
            raise IndexError(f"element {x} out of range")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        depth = 0
        while self.parent[x] != x:
            x = self.parent[x]
            depth += 1
        self.width[x] += max(depth - 1, 0)
        return x

    def merge(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v``; False if already together."""
        x = self.find(u)
        y = self.find(v)
        if x == y:
            return False
        if self.width[x] <= self.width[y]:
            self.parent[x] = y
            self.width[y] += 1
            self.width[x] = 0
        else:
            self.parent[y] = x
            self.width[x] += 1
            self.width[y] = 0
        self.count -= 1
        return True

    def components(self) -> list[list[int]]:
        """Return the sets, each sorted, ordered by their representative."""
        buckets: list[list[int]] = [[] for _ in self.parent]
        for i in range(len(self.parent)):
            buckets[self.find(i)].append(i)
        return [bucket for bucket in buckets if bucket]

    def __str__(self) -> str:
        return "\n".join(
            (
                " ".join(map(str, self.parent)),
                " ".join(map(str, self.width)),
            )
        )