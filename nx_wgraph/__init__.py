from importlib import import_module

_EXPORTS = {
    "WeightedEdge": "nx_wgraph.graph",
    "WeightedGraph": "nx_wgraph.graph",
    "DijkstraAlgorithm": "nx_wgraph.dijkstra",
    "AllPairsShortestPaths": "nx_wgraph.floyd_warshall",
    "find_all_pairs_shortest_paths": "nx_wgraph.floyd_warshall",
    "has_negative_cycle": "nx_wgraph.floyd_warshall",
    "reconstruct_path": "nx_wgraph.floyd_warshall",
    "get_shortest_distance": "nx_wgraph.floyd_warshall",
    "DisjointSet": "nx_wgraph.mst",
    "MSTEdge": "nx_wgraph.mst",
    "MinimumSpanningTreeGraph": "nx_wgraph.mst",
    "from_networkx": "nx_wgraph.convert",
    "to_networkx": "nx_wgraph.convert",
    "to_scipy_sparse_array": "nx_wgraph.convert",
    "with_random_weights": "nx_wgraph.convert",
    "WGraphError": "nx_wgraph.exceptions",
    "VertexNotFound": "nx_wgraph.exceptions",
    "DirectedGraphError": "nx_wgraph.exceptions",
    "MSTNotComputedError": "nx_wgraph.exceptions",
    "NegativeCycleError": "nx_wgraph.exceptions",
    "backend": "nx_wgraph.backend",
    "get_info": "nx_wgraph.backend",
    "convert_from_nx": "nx_wgraph.backend",
    "convert_to_nx": "nx_wgraph.backend",
    "shortest_path": "nx_wgraph.backend",
    "shortest_path_length": "nx_wgraph.backend",
    "single_source_dijkstra_path_length": "nx_wgraph.backend",
    "negative_edge_cycle": "nx_wgraph.backend",
    "minimum_spanning_tree": "nx_wgraph.backend",
}

__all__ = list(_EXPORTS)


def __getattr__(name):
    """
    lazily expose the public API so that NetworkX can load nx_wgraph.backend
    without importing the whole package first (avoids circular import errors)
    """
    if name in _EXPORTS:
        return getattr(import_module(_EXPORTS[name]), name)
    raise AttributeError(f"module 'nx_wgraph' has no attribute {name!r}")
