import io

import pytest

from nx_wgraph import WeightedEdge, WeightedGraph


def assert_symmetric(G, msg_prefix=""):
    """every undirected half-edge u->v(w) must have a mirror v->u(w)"""
    for u in G.vertices():
        for edge in G.neighbors(u):
            mirrors = [e for e in G.neighbors(edge.target) if e.target == u and e.weight == edge.weight]
            assert mirrors, f"{msg_prefix} missing mirror of {u}->{edge.target} ({edge.weight})"


@pytest.mark.unit
def test_add_vertex_is_idempotent():
    G = WeightedGraph(directed=True)
    G.add_vertex("A")
    G.add_edge("A", "B", 2.0)
    G.add_vertex("A")

    assert G.vertices() == ["A", "B"]
    assert G.neighbors("A") == (WeightedEdge("B", 2.0),)


@pytest.mark.unit
def test_add_edge_registers_endpoints():
    G = WeightedGraph(directed=True)
    G.add_edge(1, 2, 3)

    assert G.has_vertex(1)
    assert G.has_vertex(2)
    assert G.neighbors(2) == ()
    assert isinstance(G.neighbors(1)[0].weight, float)


@pytest.mark.unit
def test_undirected_edges_are_mirrored():
    G = WeightedGraph(directed=False)
    G.add_edge("A", "B", 1.5)
    G.add_edge("A", "C", 2.0)
    G.add_edge("B", "C", 2.5)

    assert G.neighbors("B") == (WeightedEdge("A", 1.5), WeightedEdge("C", 2.5))
    assert_symmetric(G, msg_prefix="triangle:")
    assert G.number_of_edges() == 3
    assert G.total_weight() == pytest.approx(6.0)


@pytest.mark.unit
def test_parallel_edges_are_kept_in_insertion_order():
    G = WeightedGraph(directed=False)
    G.add_edge("A", "B", 5)
    G.add_edge("A", "B", 1)

    assert [e.weight for e in G.neighbors("A")] == [5.0, 1.0]
    assert [e.weight for e in G.neighbors("B")] == [5.0, 1.0]
    assert G.number_of_edges() == 2
    assert_symmetric(G, msg_prefix="parallel:")


@pytest.mark.unit
def test_undirected_self_loop_counts_once():
    G = WeightedGraph(directed=False)
    G.add_edge("A", "A", 3)
    G.add_edge("A", "B", 1)

    assert G.number_of_edges() == 2
    assert G.total_weight() == pytest.approx(4.0)


@pytest.mark.unit
def test_directed_edges_are_one_way():
    G = WeightedGraph(directed=True)
    G.add_edge("A", "B", 1)

    assert G.is_directed()
    assert G.neighbors("B") == ()
    assert G.edges() == [("A", "B", 1.0)]
    assert G.number_of_edges() == 1


@pytest.mark.unit
def test_queries_do_not_create_vertices():
    G = WeightedGraph()
    G.add_vertex("A")

    assert G.neighbors("missing") == ()
    assert not G.has_vertex("missing")
    assert "missing" not in G
    assert len(G) == 1


@pytest.mark.unit
def test_neighbors_returns_a_snapshot():
    G = WeightedGraph(directed=True)
    G.add_edge("A", "B", 1)
    snapshot = G.neighbors("A")
    G.add_edge("A", "C", 2)

    assert len(snapshot) == 1
    assert len(G.neighbors("A")) == 2


@pytest.mark.unit
def test_mixed_vertex_types():
    G = WeightedGraph()
    G.add_edge(0, "A", 1.5)
    G.add_edge("A", 3.14, 2.5)
    G.add_edge(3.14, (1, 2), 0.5)

    assert list(G) == [0, "A", 3.14, (1, 2)]
    assert not G.is_multigraph()


@pytest.mark.unit
def test_print_graph_and_repr():
    G = WeightedGraph(directed=False)
    G.add_edge("A", "B", 1.5)
    out = io.StringIO()
    G.print_graph(file=out)

    assert out.getvalue().splitlines() == ["A -> [B (1.5)]", "B -> [A (1.5)]"]
    assert repr(G) == "WeightedGraph(undirected, vertices=2, edges=1)"
