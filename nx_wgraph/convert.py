"""
Conversions between WeightedGraph and NetworkX / SciPy graphs
"""

import networkx as nx
import numpy as np
import scipy.sparse

from .graph import WeightedGraph


def from_networkx(G, weight="weight", default=1.0) -> WeightedGraph:
    """
    NetworkX Graph/DiGraph/MultiGraph/MultiDiGraph -> WeightedGraph
    - node order is preserved
    - every edge (parallel edges included) is kept
    - edges without the weight attribute get default
    """
    graph = WeightedGraph(directed=G.is_directed())
    for node in G.nodes():
        graph.add_vertex(node)
    for u, v, data in G.edges(data=True):
        w = data.get(weight, default) if weight is not None else default
        graph.add_edge(u, v, w)
    return graph


def to_networkx(graph):
    """
    WeightedGraph -> NetworkX Graph/DiGraph with a "weight" edge attribute
    Parallel edges collapse to the lightest one
    """
    H = nx.DiGraph() if graph.is_directed() else nx.Graph()
    H.add_nodes_from(graph.vertices())
    for u, v, w in graph.edges():
        if not H.has_edge(u, v) or w < H[u][v]["weight"]:
            H.add_edge(u, v, weight=w)
    return H


def to_scipy_sparse_array(graph, dtype=np.float64):
    """
    Adjacency matrix of graph as a SciPy CSR array, rows/columns in vertex order
    Returns (matrix, vertices). Parallel edges keep the lightest weight.
    Note that scipy.sparse.csgraph treats stored zeros as missing edges.
    """
    vertices = graph.vertices()
    index = {vertex: i for i, vertex in enumerate(vertices)}

    lightest = {}
    for u, v, w in graph.edges():
        key = (index[u], index[v])
        if key not in lightest or w < lightest[key]:
            lightest[key] = w

    n = len(vertices)
    if lightest:
        rows, cols = (np.fromiter(c, dtype=np.int64, count=len(lightest)) for c in zip(*lightest))
        data = np.fromiter(lightest.values(), dtype=dtype, count=len(lightest))
    else:
        rows = cols = np.empty(0, dtype=np.int64)
        data = np.empty(0, dtype=dtype)
    matrix = scipy.sparse.csr_array((data, (rows, cols)), shape=(n, n))
    return matrix, vertices


def with_random_weights(G, min_weight=1, max_weight=100, seed=None) -> WeightedGraph:
    """
    Build a WeightedGraph from an unweighted NetworkX graph, drawing an integer
    weight in [min_weight, max_weight] for each edge
    An undirected edge gets a single weight shared by both directions.
    """
    if G is None:
        raise ValueError("Graph cannot be None")
    if min_weight > max_weight:
        raise ValueError("Minimum weight cannot be greater than maximum weight")

    rng = np.random.default_rng(seed)
    graph = WeightedGraph(directed=G.is_directed())
    for node in G.nodes():
        graph.add_vertex(node)
    for u, v in G.edges():
        graph.add_edge(u, v, int(rng.integers(min_weight, max_weight, endpoint=True)))
    return graph
