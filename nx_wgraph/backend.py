import logging
import math
import sys
from collections import defaultdict

import networkx as nx

from .config import BACKEND_NAME, DEFAULT_CONFIG, get_config
from .convert import from_networkx, to_networkx
from .dijkstra import DijkstraAlgorithm
from .floyd_warshall import find_all_pairs_shortest_paths
from .graph import WeightedGraph
from .mst import MinimumSpanningTreeGraph

logger = logging.getLogger(__name__)


def _weight_key(weight, edge_attrs):
    """
    Pick the edge attribute holding weights
    NetworkX dispatch passes edge_attrs={attr: default} for the attribute the call needs
    """
    if isinstance(edge_attrs, dict) and len(edge_attrs) == 1:
        key, default = next(iter(edge_attrs.items()))
        return key, (1.0 if default is None else default)
    if isinstance(edge_attrs, str):
        return edge_attrs, 1.0
    return weight, 1.0


def convert_from_nx(G, weight="weight", edge_attrs=None, **kwargs):
    """
    Convert a NetworkX graph -> WeightedGraph
    - Node order and parallel edges are kept
    - Edges missing the weight attribute weigh 1.0
    """
    key, default = _weight_key(weight, edge_attrs)
    return from_networkx(G, weight=key, default=default)


def convert_to_nx(obj, **kwargs):
    """WeightedGraph -> NetworkX Graph/DiGraph with "weight" edge attributes"""
    if isinstance(obj, WeightedGraph):
        return to_networkx(obj)
    return obj


def _as_weighted(G, weight):
    """Graph to run on: WeightedGraph as is, NetworkX graphs converted on the fly"""
    if isinstance(G, WeightedGraph):
        return G
    return convert_from_nx(G, weight=weight)


def can_run(name, args, kwargs):
    if name not in (
        "shortest_path",
        "shortest_path_length",
        "single_source_dijkstra_path_length",
        "floyd_warshall",
        "negative_edge_cycle",
        "minimum_spanning_tree",
    ):
        return False
    # converted graphs only carry the "weight" attribute
    weight = kwargs.get("weight", "weight")
    if weight not in ("weight", None):
        return "only the 'weight' edge attribute is supported"
    return True


def should_run(name, args, kwargs):
    return True


def _fallback(name, exc, call):
    """Rerun call with pure NetworkX if configured to, else re-raise exc"""
    if not get_config()["fallback_to_networkx"]:
        raise exc
    logger.debug("%s: falling back to NetworkX after %s: %s", name, type(exc).__name__, exc)
    return call()


def _dijkstra_pair(H, source, target):
    """(path, distance) from source to target, raising NetworkX's errors"""
    if not H.has_vertex(source):
        raise nx.NodeNotFound(f"Source {source} is not in G")
    if not H.has_vertex(target):
        raise nx.NodeNotFound(f"Target {target} is not in G")
    path, distance = DijkstraAlgorithm(H).find_shortest_path_with_distance(source, target)
    if not path:
        raise nx.NetworkXNoPath(f"No path between {source} and {target}.")
    return path, distance


def shortest_path(G, source=None, target=None, weight=None, method="dijkstra"):
    """
    Backend implementation for nx.shortest_path
    Only the weighted (source, target) pair case with Dijkstra runs here; other arguments lead to Python fallback
    """
    def python():
        return nx.shortest_path(
            convert_to_nx(G), source=source, target=target, weight=weight, method=method, backend="networkx"
        )

    if source is None or target is None or weight is None or callable(weight) or method != "dijkstra":
        return python()
    try:
        path, _ = _dijkstra_pair(_as_weighted(G, weight), source, target)
        return path
    except (nx.NodeNotFound, nx.NetworkXNoPath):
        raise
    except Exception as exc:
        return _fallback("shortest_path", exc, python)


def shortest_path_length(G, source=None, target=None, weight=None, method="dijkstra"):
    """
    Backend implementation for nx.shortest_path_length
    Only the weighted (source, target) pair case with Dijkstra runs here
    """
    def python():
        return nx.shortest_path_length(
            convert_to_nx(G), source=source, target=target, weight=weight, method=method, backend="networkx"
        )

    if source is None or target is None or weight is None or callable(weight) or method != "dijkstra":
        return python()
    try:
        _, distance = _dijkstra_pair(_as_weighted(G, weight), source, target)
        return distance
    except (nx.NodeNotFound, nx.NetworkXNoPath):
        raise
    except Exception as exc:
        return _fallback("shortest_path_length", exc, python)


def single_source_dijkstra_path_length(G, source, cutoff=None, weight="weight"):
    """
    Backend implementation for nx.single_source_dijkstra_path_length
    Like NetworkX, only nodes reachable within cutoff are returned
    """
    def python():
        return nx.single_source_dijkstra_path_length(
            convert_to_nx(G), source, cutoff=cutoff, weight=weight, backend="networkx"
        )

    if weight is None or callable(weight):
        return python()
    H = _as_weighted(G, weight)
    if not H.has_vertex(source):
        raise nx.NodeNotFound(f"Node {source} not found in graph")
    try:
        distances = DijkstraAlgorithm(H).find_shortest_paths(source)
    except Exception as exc:
        return _fallback("single_source_dijkstra_path_length", exc, python)
    limit = math.inf if cutoff is None else cutoff
    return {v: d for v, d in distances.items() if d != math.inf and d <= limit}


def floyd_warshall(G, weight="weight"):
    """
    Backend implementation for nx.floyd_warshall
    Returns dict-of-dicts of distances with inf for unreachable pairs
    Distances are not meaningful if G has a negative cycle; check negative_edge_cycle first
    """
    def python():
        return nx.floyd_warshall(convert_to_nx(G), weight=weight, backend="networkx")

    if weight is None or callable(weight):
        return python()
    try:
        result = find_all_pairs_shortest_paths(_as_weighted(G, weight))
    except Exception as exc:
        return _fallback("floyd_warshall", exc, python)

    dist = defaultdict(lambda: defaultdict(lambda: math.inf))
    for i, u in enumerate(result.vertices):
        row = dist[u]
        for j, v in enumerate(result.vertices):
            row[v] = float(result.distance[i, j])
    return dist


def negative_edge_cycle(G, weight="weight", heuristic=True):
    """
    Backend implementation for nx.negative_edge_cycle
    Reads the Floyd-Warshall diagonal instead of running Bellman-Ford; heuristic is ignored
    """
    def python():
        return nx.negative_edge_cycle(convert_to_nx(G), weight=weight, heuristic=heuristic, backend="networkx")

    if weight is None or callable(weight):
        return python()
    try:
        return find_all_pairs_shortest_paths(_as_weighted(G, weight)).has_negative_cycle
    except Exception as exc:
        return _fallback("negative_edge_cycle", exc, python)


def minimum_spanning_tree(G, weight="weight", algorithm="kruskal", ignore_nan=False):
    """
    Backend implementation for nx.minimum_spanning_tree
    Uses Kruskal's or Prim's algorithm; a disconnected G yields a spanning forest, as in NetworkX
    If ignore_nan is True or algorithm is Boruvka, falls back to Python NetworkX
    Otherwise a NaN weight raises ValueError, as in NetworkX
    """
    def python():
        return nx.minimum_spanning_tree(
            convert_to_nx(G), weight=weight, algorithm=algorithm, ignore_nan=ignore_nan, backend="networkx"
        )

    algo = algorithm.lower() if isinstance(algorithm, str) else algorithm
    if ignore_nan or weight is None or algo not in ("kruskal", "prim"):
        return python()
    if G.is_directed():
        raise nx.NetworkXNotImplemented("not implemented for directed type")
    H = _as_weighted(G, weight)
    for u, v, w in H.edges():
        if math.isnan(w):
            raise ValueError(f"NaN found as an edge weight. Edge {(u, v, {weight: w})}")
    try:
        edges = _spanning_forest_edges(H, algo)
    except Exception as exc:
        return _fallback("minimum_spanning_tree", exc, python)

    T = nx.Graph()
    T.add_nodes_from(H.vertices())
    for u, v, w in edges:
        T.add_edge(u, v, weight=float(w))
    return T


def _spanning_forest_edges(G, algo):
    mst = MinimumSpanningTreeGraph(G)
    if algo == "kruskal":
        mst.compute_kruskal_mst()
        return mst.mst_edges

    edges = []
    covered = set()
    for vertex in G.vertices():
        if vertex in covered:
            continue
        mst.compute_prim_mst(vertex)
        tree = mst.mst_edges
        edges.extend(tree)
        covered.add(vertex)
        covered.update(edge.target for edge in tree)
    return edges


backend = sys.modules[__name__]


def get_info():
    return {
        "backend_name": BACKEND_NAME,
        "project": "nx-wgraph",
        "package": "nx_wgraph",
        "url": "https://pypi.org/project/nx-wgraph/",
        "short_summary": "Pure-Python weighted graph algorithms (Dijkstra, Floyd-Warshall, Prim, Kruskal) for NetworkX.",
        "default_config": dict(DEFAULT_CONFIG),
        "functions": {
            "shortest_path": {
                "additional_docs": "Single pair weighted shortest path with Dijkstra; other forms use NetworkX.",
                "additional_parameters": {
                    "source": "Starting node (required for the backend path).",
                    "target": "Ending node (required for the backend path).",
                    "weight : str": "Edge data key for weight.",
                    "method : str": "Only 'dijkstra' runs in the backend.",
                },
            },
            "shortest_path_length": {
                "additional_docs": "Single pair weighted shortest path length with Dijkstra.",
                "additional_parameters": {},
            },
            "single_source_dijkstra_path_length": {
                "additional_docs": "Lazy-deletion Dijkstra; only reachable nodes are returned.",
                "additional_parameters": {},
            },
            "floyd_warshall": {
                "additional_docs": "Vectorized Floyd-Warshall over a dense NumPy matrix.",
                "additional_parameters": {},
            },
            "negative_edge_cycle": {
                "additional_docs": "Negative cycle check from the Floyd-Warshall diagonal; heuristic is ignored.",
                "additional_parameters": {},
            },
            "minimum_spanning_tree": {
                "additional_docs": "Minimum spanning forest using Kruskal or Prim.",
                "additional_parameters": {
                    "algorithm : str": "Either 'kruskal' (default) or 'prim'.",
                    "weight : str": "Edge data key for weight extraction during conversion (default 'weight').",
                    "ignore_nan : bool": "Falls back to NetworkX when True.",
                },
            },
        },
    }
