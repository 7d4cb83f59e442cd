"""Shortest paths, components, spanning trees and bridges."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, MutableSequence, Sequence
from typing import Optional

from .binary_heap import IndexedHeap
from .disjoint_set import DisjointSet
from .edge import INF, Edge, VertexWeight, WeightedEdge

Graph = Sequence[Sequence[int]]
"""Adjacency lists: ``graph[u]`` holds the neighbours of ``u``."""
WeightedGraph = Sequence[Sequence[VertexWeight]]
"""Weighted adjacency lists: ``graph[u]`` holds ``VertexWeight(v, w)`` arcs."""
Matrix = list[list[int]]


def _check_start(n: int, start: int) -> None:
    if not 0 <= start < n:
        raise IndexError(f"start vertex {start} out of range")


def shortest(graph: Graph, start: int = 0) -> list[int]:
    """Edge counts of shortest paths from ``start``; -1 where unreachable."""
    _check_start(len(graph), start)
    dist = [-1] * len(graph)
    dist[start] = 0
    queue = deque([start])
    while queue:
        t = queue.popleft()
        for x in graph[t]:
            if dist[x] < 0:
                dist[x] = dist[t] + 1
                queue.append(x)
    return dist


def shortest_positive(graph: WeightedGraph, start: int = 0) -> list[int]:
    """Dijkstra distances from ``start`` for non-negative weights.

    Unreachable vertices get ``INF``.
    """
    n = len(graph)
    _check_start(n, start)
    dist = [INF] * n
    heap = IndexedHeap(n, start)
    while heap:
        top = heap.pop()
        dist[top.u] = top.w
        if top.w >= INF:
            continue
        for arc in graph[top.u]:
            heap.decrease(VertexWeight(arc.u, top.w + arc.w))
    return dist


def shortest_negative(graph: WeightedGraph, start: int = 0) -> list[int]:
    """Bellman-Ford distances from ``start``; weights may be negative.

    Unreachable vertices get ``INF``.
    """
    n = len(graph)
    _check_start(n, start)
    dist = [INF] * n
    dist[start] = 0
    for _ in range(n):
        changed = False
        for u, arcs in enumerate(graph):
            if dist[u] >= INF:
                continue
            for arc in arcs:
                if dist[u] + arc.w < dist[arc.u]:
                    dist[arc.u] = dist[u] + arc.w
                    changed = True
        if not changed:
            break
    return dist


def all_pairs(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Floyd-Warshall over a distance matrix; the input is left untouched."""
    dist = [list(row) for row in matrix]
    for k, via in enumerate(dist):
        for row in dist:
            through = row[k]
            row[:] = [min(d, through + v) for d, v in zip(row, via)]
    return dist


def bfs(
    graph: Graph, start: int, used: Optional[MutableSequence[bool]] = None
) -> list[int]:
    """Vertices reached from ``start`` in breadth-first order.

    Vertices already marked in ``used`` are skipped; visited ones are marked.
    """
    if used is None:
        used = [False] * len(graph)
    used[start] = True
    queue = deque([start])
    order: list[int] = []
    while queue:
        t = queue.popleft()
        order.append(t)
        for x in graph[t]:
            if not used[x]:
                used[x] = True
                queue.append(x)
    return order


def components(graph: Graph) -> list[list[int]]:
    """Connected components, each in breadth-first order from its lowest vertex."""
    used = [False] * len(graph)
    return [bfs(graph, v, used) for v in range(len(graph)) if not used[v]]


def region_components(n: int, edges: Iterable[WeightedEdge], limit: int) -> list[list[int]]:
    """Merge along ``edges`` in the given order until fewer than ``limit`` sets remain."""
    sets = DisjointSet(n)
    for edge in edges:
        if sets.count < limit:
            break
        sets.merge(edge.u, edge.v)
    return sets.components()


def mst(edges: Iterable[WeightedEdge], n: int) -> tuple[int, list[Edge]]:
    """Kruskal's minimum spanning forest: total weight and chosen edges."""
    sets = DisjointSet(n)
    total = 0
    chosen: list[Edge] = []
    for edge in sorted(edges, key=lambda e: e.w):
        if sets.count == 1:
            break
        if sets.merge(edge.u, edge.v):
            chosen.append(Edge(edge.u, edge.v))
            total += edge.w
    return total, chosen


def bridges(graph: Graph) -> list[Edge]:
    """Bridges of an undirected graph, as ``Edge(parent, child)`` of a DFS tree."""
    n = len(graph)
    order = [-1] * n
    low = [0] * n
    parent = [-1] * n
    skipped = [False] * n
    result: list[Edge] = []
    counter = 0
    for root in range(n):
        if order[root] >= 0:
            continue
        order[root] = low[root] = counter
        counter += 1
        stack = [(root, iter(graph[root]))]
        while stack:
            v, neighbours = stack[-1]
            for w in neighbours:
                if w == parent[v] and not skipped[v]:
                    skipped[v] = True
                    continue
                if order[w] < 0:
                    parent[w] = v
                    order[w] = low[w] = counter
                    counter += 1
                    stack.append((w, iter(graph[w])))
                    break
                low[v] = min(low[v], order[w])
            else:
                stack.pop()
                p = parent[v]
                if p >= 0:
                    low[p] = min(low[p], low[v])
                    if low[v] > order[p]:
                        result.append(Edge(p, v))
    return result