import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.disjoint_set import DisjointSet
from algonotes.edge import INF, Edge, VertexWeight, WeightedEdge
from algonotes.graph_alg import (
    all_pairs,
    bfs,
    bridges,
    components,
    mst,
    region_components,
    shortest,
    shortest_negative,
    shortest_positive,
)


def _weighted(n, arcs):
    graph = [[] for _ in range(n)]
    for u, v, w in arcs:
        graph[u].append(VertexWeight(v, w))
    return graph


def _undirected(n, pairs):
    graph = [[] for _ in range(n)]
    for u, v in pairs:
        graph[u].append(v)
        graph[v].append(u)
    return graph


@st.composite
def weighted_graphs(draw):
    n = draw(st.integers(min_value=1, max_value=7))
    vertex = st.integers(min_value=0, max_value=n - 1)
    arcs = draw(st.lists(st.tuples(vertex, vertex, st.integers(0, 20)), max_size=20))
    start = draw(vertex)
    return n, arcs, start


def test_shortest_marks_unreachable():
    dist = shortest([[1], [], []])
    assert dist[0] == 0
    assert dist[2] == -1


@given(weighted_graphs())
def test_shortest_is_consistent_along_edges(case):
    n, arcs, start = case
    graph = [[] for _ in range(n)]
    for u, v, _ in arcs:
        graph[u].append(v)
    dist = shortest(graph, start)
    assert dist[start] == 0
    for u, v, _ in arcs:
        if dist[u] >= 0:
            assert 0 <= dist[v] <= dist[u] + 1


def test_shortest_rejects_bad_start():
    with pytest.raises(IndexError):
        shortest([[]], 3)


def test_shortest_positive_example():
    graph = _weighted(3, [(0, 1, 4), (0, 2, 1), (2, 1, 2)])
    assert shortest_positive(graph) == [0, 3, 1]


def test_shortest_positive_unreachable_is_inf():
    graph = _weighted(3, [(0, 1, 5)])
    assert shortest_positive(graph)[2] == INF


def test_shortest_negative_example():
    graph = _weighted(3, [(0, 1, 5), (0, 2, 2), (2, 1, -4)])
    assert shortest_negative(graph) == [0, -2, 2]


@given(weighted_graphs())
def test_dijkstra_bellman_ford_and_floyd_agree(case):
    n, arcs, start = case
    graph = _weighted(n, arcs)
    matrix = [[0 if i == j else INF for j in range(n)] for i in range(n)]
    for u, v, w in arcs:
        matrix[u][v] = min(matrix[u][v], w)
    expected = shortest_negative(graph, start)
    assert shortest_positive(graph, start) == expected
    assert all_pairs(matrix)[start] == expected


def test_all_pairs_leaves_input_untouched():
    matrix = [[0, 1, INF], [INF, 0, 1], [INF, INF, 0]]
    copy = [list(row) for row in matrix]
    result = all_pairs(matrix)
    assert matrix == copy
    assert result[0][2] == result[0][1] + result[1][2]


def test_bfs_respects_used_marks():
    graph = _undirected(4, [(0, 1), (1, 2), (2, 3)])
    used = [False, False, True, False]
    order = bfs(graph, 0, used)
    assert order[0] == 0
    assert set(order) == {0, 1}
    assert used == [True, True, True, False]


def test_components_partition_vertices():
    graph = _undirected(5, [(0, 1), (1, 2), (3, 4)])
    parts = components(graph)
    assert {frozenset(part) for part in parts} == {frozenset({0, 1, 2}), frozenset({3, 4})}
    assert [part[0] for part in parts] == [0, 3]


def test_region_components_stop_below_limit():
    edges = [WeightedEdge(0, 1, 1), WeightedEdge(1, 2, 1), WeightedEdge(2, 3, 1)]
    parts = region_components(4, edges, 4)
    assert {frozenset(p) for p in parts} == {frozenset({0, 1}), frozenset({2}), frozenset({3})}


def test_region_components_limit_one_merges_all():
    edges = [WeightedEdge(0, 1, 1), WeightedEdge(1, 2, 1), WeightedEdge(2, 3, 1)]
    assert region_components(4, edges, 1) == [[0, 1, 2, 3]]


def test_mst_example():
    edges = [
        WeightedEdge(0, 1, 1),
        WeightedEdge(1, 2, 2),
        WeightedEdge(2, 3, 3),
        WeightedEdge(3, 0, 4),
        WeightedEdge(0, 2, 5),
    ]
    total, chosen = mst(edges, 4)
    assert total == 6
    assert {(e.u, e.v) for e in chosen} == {(0, 1), (1, 2), (2, 3)}


@given(weighted_graphs())
def test_mst_spans_components(case):
    n, arcs, _ = case
    edges = [WeightedEdge(u, v, w) for u, v, w in arcs]
    total, chosen = mst(edges, n)
    reference = DisjointSet(n)
    for e in edges:
        reference.merge(e.u, e.v)
    tree = DisjointSet(n)
    assert all(tree.merge(e.u, e.v) for e in chosen)
    assert tree.count == reference.count
    assert len(chosen) == n - reference.count
    weights = {}
    for e in edges:
        weights.setdefault((e.u, e.v), []).append(e.w)
    assert total >= sum(min(weights[(e.u, e.v)]) for e in chosen)


def test_bridges_of_path_are_all_edges():
    graph = _undirected(4, [(0, 1), (1, 2), (2, 3)])
    assert {(e.u, e.v) for e in bridges(graph)} == {(0, 1), (1, 2), (2, 3)}


def test_cycle_has_no_bridges():
    graph = _undirected(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
    assert bridges(graph) == []


def test_triangle_with_tail():
    graph = _undirected(5, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4)])
    assert sorted((e.u, e.v) for e in bridges(graph)) == [(2, 3), (3, 4)]
    assert all(isinstance(e, Edge) for e in bridges(graph))


def test_doubled_edge_is_not_a_bridge():
    graph = _undirected(3, [(0, 1), (0, 1), (1, 2)])
    assert [(e.u, e.v) for e in bridges(graph)] == [(1, 2)]