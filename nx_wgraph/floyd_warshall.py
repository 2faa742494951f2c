"""
All-pairs shortest paths with the Floyd-Warshall algorithm

Vertices get dense indices in graph insertion order. The distance matrix starts
at 0 on the diagonal, the lightest direct edge weight where edges exist and
inf elsewhere; the next-hop matrix holds the index of the first vertex after i
on the best known route from i to j, or -1 when there is no route.

Negative weights are allowed. A negative value on the diagonal after relaxation
means a negative cycle is reachable from that vertex, in which case the
distances are meaningless; check has_negative_cycle before using them.
"""

import logging
import sys
from dataclasses import dataclass

import numpy as np

from .exceptions import NegativeCycleError, VertexNotFound

logger = logging.getLogger(__name__)

NO_PATH = -1


@dataclass(frozen=True)
class AllPairsShortestPaths:
    vertices: list
    index: dict
    distance: np.ndarray
    next: np.ndarray

    @property
    def has_negative_cycle(self) -> bool:
        return bool(np.any(np.diag(self.distance) < 0))

    def _index_of(self, vertex, role="Vertex"):
        try:
            return self.index[vertex]
        except KeyError:
            raise VertexNotFound(vertex, role) from None

    def distance_between(self, source, target) -> float:
        i = self._index_of(source, "Source vertex")
        j = self._index_of(target, "Target vertex")
        return float(self.distance[i, j])

    def path(self, source, target) -> list:
        """
        Vertices of a shortest path from source to target, [] if there is none
        Raises NegativeCycleError if a negative cycle lies on some route between them
        """
        i = self._index_of(source, "Source vertex")
        j = self._index_of(target, "Target vertex")
        on_negative_cycle = np.diag(self.distance) < 0
        if on_negative_cycle.any():
            via = on_negative_cycle & (self.distance[i, :] < np.inf) & (self.distance[:, j] < np.inf)
            if via.any():
                raise NegativeCycleError(f"Negative cycle on the route from {source!r} to {target!r}")
        return reconstruct_path(source, target, self.vertices, self.next)


def _initial_matrices(graph):
    vertices = graph.vertices()
    index = {vertex: i for i, vertex in enumerate(vertices)}
    n = len(vertices)

    dist = np.full((n, n), np.inf, dtype=np.float64)
    nxt = np.full((n, n), NO_PATH, dtype=np.int64)
    np.fill_diagonal(dist, 0.0)
    np.fill_diagonal(nxt, np.arange(n))

    for u in vertices:
        i = index[u]
        for edge in graph.neighbors(u):
            j = index[edge.target]
            # parallel edges: keep the lightest; self-loops only matter when negative
            if edge.weight < dist[i, j]:
                dist[i, j] = edge.weight
                nxt[i, j] = j
    return vertices, index, dist, nxt


def _relax(dist, nxt):
    """Relax every pair through each intermediate vertex k in turn, in place"""
    n = dist.shape[0]
    for k in range(n):
        through_k = dist[:, k, np.newaxis] + dist[np.newaxis, k, :]
        improved = through_k < dist
        if not improved.any():
            continue
        dist[improved] = through_k[improved]
        nxt[improved] = np.broadcast_to(nxt[:, k, np.newaxis], (n, n))[improved]


def find_all_pairs_shortest_paths(graph) -> AllPairsShortestPaths:
    """
    Run Floyd-Warshall over graph
    The graph is only read. Runs in O(n^3) time and O(n^2) memory.
    """
    vertices, index, dist, nxt = _initial_matrices(graph)
    _relax(dist, nxt)
    result = AllPairsShortestPaths(vertices=vertices, index=index, distance=dist, next=nxt)
    logger.debug("floyd-warshall over %d vertices done", len(vertices))
    return result


def has_negative_cycle(graph) -> bool:
    """True if graph contains a cycle whose total weight is negative"""
    return find_all_pairs_shortest_paths(graph).has_negative_cycle


def reconstruct_path(start, end, vertices, next_matrix) -> list:
    """
    Walk the next-hop matrix from start to end
    Returns [] when there is no path. Raises NegativeCycleError if the walk
    does not reach end within len(vertices) - 1 hops.
    """
    index = {vertex: i for i, vertex in enumerate(vertices)}
    if start not in index:
        raise VertexNotFound(start, "Start vertex")
    if end not in index:
        raise VertexNotFound(end, "End vertex")

    i, j = index[start], index[end]
    if next_matrix[i, j] == NO_PATH:
        return []

    path = [start]
    while i != j:
        # a simple path has at most n vertices
        if len(path) >= len(vertices):
            raise NegativeCycleError(f"Negative cycle on the route from {start!r} to {end!r}")
        i = int(next_matrix[i, j])
        path.append(vertices[i])
    return path


def get_shortest_distance(graph, source, target) -> float:
    """Shortest distance from source to target, inf if unreachable"""
    return find_all_pairs_shortest_paths(graph).distance_between(source, target)


def print_all_shortest_paths(result: AllPairsShortestPaths, file=None):
    out = file if file is not None else sys.stdout
    print("All-Pairs Shortest Paths:", file=out)
    for i, start in enumerate(result.vertices):
        for j, end in enumerate(result.vertices):
            if i == j:
                continue
            if result.distance[i, j] == np.inf:
                print(f"No path from {start} to {end}", file=out)
            else:
                path = result.path(start, end)
                print(f"Path from {start} to {end}: {path}, Distance: {result.distance[i, j]}", file=out)
