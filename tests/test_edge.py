from hypothesis import given
from hypothesis import strategies as st

from algonotes.edge import INF, Edge, VertexWeight, WeightedEdge


def test_edge_defaults():
    e = Edge()
    assert (e.u, e.v) == (-1, -1)


def test_vertex_weight_defaults():
    e = VertexWeight()
    assert (e.u, e.w) == (-1, INF)
    assert INF == 1000000000


def test_weighted_edge_defaults():
    e = WeightedEdge()
    assert (e.u, e.v, e.w) == (-1, -1, INF)


def test_edge_ordered_by_first_vertex_only():
    assert Edge(1, 9) < Edge(2, 0)
    assert not (Edge(2, 0) < Edge(1, 9))
    assert not (Edge(3, 1) < Edge(3, 5))


def test_vertex_weight_ordered_by_weight():
    assert VertexWeight(9, 1) < VertexWeight(0, 2)
    assert not (VertexWeight(0, 2) < VertexWeight(9, 1))


def test_weighted_edge_ordered_by_weight():
    assert WeightedEdge(5, 6, 1) < WeightedEdge(0, 1, 3)
    assert not (WeightedEdge(0, 1, 3) < WeightedEdge(5, 6, 1))


def test_str_forms():
    assert str(Edge(1, 2)) == "1 2"
    assert str(VertexWeight(3, 4)) == "3 4"
    assert str(WeightedEdge(1, 2, 3)) == "1 2 3"


def test_comparison_with_other_type_is_rejected():
    try:
        Edge(1, 2) < 3
    except TypeError:
        pass
    else:
        raise AssertionError("expected TypeError")


@given(st.lists(st.tuples(st.integers(), st.integers(), st.integers())))
def test_sorting_weighted_edges_orders_weights(triples):
    edges = sorted(WeightedEdge(u, v, w) for u, v, w in triples)
    weights = [e.w for e in edges]
    assert weights == sorted(w for _, _, w in triples)


@given(st.lists(st.tuples(st.integers(), st.integers())))
def test_sorting_edges_orders_first_vertex(pairs):
    edges = sorted(Edge(u, v) for u, v in pairs)
    assert [e.u for e in edges] == sorted(u for u, _ in pairs)