import networkx as nx
import numpy as np
import pytest

from nx_wgraph import (
    WeightedGraph,
    from_networkx,
    to_networkx,
    to_scipy_sparse_array,
    with_random_weights,
)


@pytest.mark.unit
def test_from_networkx_keeps_nodes_and_weights():
    G = nx.Graph()
    G.add_node("isolated")
    G.add_edge("a", "b", weight=2.5)
    G.add_edge("b", "c")

    H = from_networkx(G)
    assert not H.is_directed()
    assert H.vertices() == ["isolated", "a", "b", "c"]
    assert H.neighbors("b") == (("a", 2.5), ("c", 1.0))
    assert H.neighbors("isolated") == ()


@pytest.mark.unit
def test_from_networkx_custom_weight_key():
    G = nx.DiGraph()
    G.add_edge(1, 2, cost=7)
    H = from_networkx(G, weight="cost")
    assert H.is_directed()
    assert H.edges() == [(1, 2, 7.0)]


@pytest.mark.unit
def test_from_networkx_multigraph_keeps_parallel_edges():
    G = nx.MultiGraph()
    G.add_edge("a", "b", weight=3)
    G.add_edge("a", "b", weight=1)
    H = from_networkx(G)
    assert [e.weight for e in H.neighbors("a")] == [3.0, 1.0]
    assert H.number_of_edges() == 2


@pytest.mark.unit
def test_to_networkx_collapses_parallel_edges():
    G = WeightedGraph(directed=True)
    G.add_edge("a", "b", 4)
    G.add_edge("a", "b", 2)
    G.add_vertex("c")

    H = to_networkx(G)
    assert isinstance(H, nx.DiGraph)
    assert list(H.nodes()) == ["a", "b", "c"]
    assert H["a"]["b"]["weight"] == 2.0


@pytest.mark.unit
def test_to_scipy_sparse_array():
    G = WeightedGraph(directed=False)
    G.add_edge("a", "b", 3)
    G.add_edge("b", "c", 1)
    G.add_edge("b", "c", 5)

    matrix, vertices = to_scipy_sparse_array(G)
    assert vertices == ["a", "b", "c"]
    dense = matrix.toarray()
    np.testing.assert_array_equal(
        dense,
        np.array([[0.0, 3.0, 0.0], [3.0, 0.0, 1.0], [0.0, 1.0, 0.0]]),
    )


@pytest.mark.unit
def test_to_scipy_sparse_array_empty_graph():
    matrix, vertices = to_scipy_sparse_array(WeightedGraph())
    assert vertices == []
    assert matrix.shape == (0, 0)


@pytest.mark.unit
def test_with_random_weights_undirected(rng_seed):
    G = nx.cycle_graph(10)
    H = with_random_weights(G, min_weight=1, max_weight=5, seed=rng_seed)

    assert H.number_of_edges() == G.number_of_edges()
    for u, v, w in H.edges():
        assert 1 <= w <= 5
        assert w == float(int(w))
        # both directions share one weight
        assert any(e.target == u and e.weight == w for e in H.neighbors(v))


@pytest.mark.unit
def test_with_random_weights_is_reproducible():
    G = nx.gnp_random_graph(20, 0.3, seed=1, directed=True)
    first = with_random_weights(G, seed=42)
    second = with_random_weights(G, seed=42)
    assert first.edges() == second.edges()
    assert first.is_directed()


@pytest.mark.unit
def test_with_random_weights_rejects_bad_range():
    with pytest.raises(ValueError):
        with_random_weights(nx.path_graph(3), min_weight=10, max_weight=1)
    with pytest.raises(ValueError):
        with_random_weights(None)
