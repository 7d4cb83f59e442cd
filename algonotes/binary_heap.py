"""Indexed binary min-heap over vertices, keyed by tentative distance."""

from __future__ import annotations

from .edge import INF, VertexWeight


class IndexedHeap:
    """Min-heap holding every vertex ``0 .. n-1`` with a weight.

    All vertices start at weight ``INF`` except ``start``, which starts at 0.
    The heap tracks where each vertex sits so its weight can be lowered in
    place with :meth:`decrease`.
    """

    def __init__(self, n: int, start: int = 0) -> None:
        if not 0 <= start < n:
            raise IndexError(f"start vertex {start} out of range")
        self._size = n
        self._entries = [VertexWeight(i, INF) for i in range(n)]
        self._position = list(range(n))
        self._entries[start].w = 0
        self._swap(0, start)

    def _swap(self, k: int, t: int) -> None:
        entries = self._entries
        self._position[entries[k].u] = t
        self._position[entries[t].u] = k
        entries[k], entries[t] = entries[t], entries[k]

    def _sift_up(self, k: int) -> None:
        entries = self._entries
        while k > 0 and entries[k] < entries[(k - 1) // 2]:
            parent = (k - 1) // 2
            self._swap(k, parent)
            k = parent

    def _sift_down(self, k: int) -> None:
        entries = self._entries
        while 2 * k + 1 < self._size:
            child = 2 * k + 1
            right = child + 1
            if right < self._size and entries[right] < entries[child]:
                child = right
            if not entries[child] < entries[k]:
                break
            self._swap(k, child)
            k = child

    def top(self) -> VertexWeight:
        """Return the vertex with the smallest weight without removing it."""
        if not self._size:
            raise IndexError("top of empty heap")
        entry = self._entries[0]
        return VertexWeight(entry.u, entry.w)

    def pop(self) -> VertexWeight:
        """Remove and return the vertex with the smallest weight."""
        if not self._size:
            raise IndexError("pop from empty heap")
        last = self._size - 1
        self._swap(0, last)
        entry = self._entries[last]
        self._position[entry.u] = -1
        self._size -= 1
        self._sift_down(0)
        return VertexWeight(entry.u, entry.w)

    def decrease(self, entry: VertexWeight) -> bool:
        """Lower the weight of ``entry.u`` to ``entry.w`` if not larger.

        Returns False when the vertex has already been popped or its current
        weight is smaller than the one offered.
        """
        u = entry.u
        if not 0 <= u < len(self._position):
            raise IndexError(f"vertex {u} out of range")
        index = self._position[u]
        if index < 0 or self._entries[index].w < entry.w:
            return False
        self._entries[index].w = entry.w
        self._sift_up(index)
        return True

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __str__(self) -> str:
        lines = [" ".join(map(str, self._position))]
        lines.extend(str(entry) for entry in self._entries)
        return "\n".join(lines)