import sys
from typing import Hashable, NamedTuple


class WeightedEdge(NamedTuple):
    """Outgoing edge stored in an adjacency list: the far endpoint and the weight"""

    target: Hashable
    weight: float

    def __str__(self):
        return f"{self.target} ({self.weight})"


class WeightedGraph:
    """
    Weighted adjacency-list graph, directed or undirected
    - vertices are any hashable keys, kept in insertion order
    - each vertex maps to the ordered list of its outgoing edges
    - undirected edges are stored as two mirrored half-edges with the same weight
    - parallel edges are kept; nothing is de-duplicated

    The graph has no locking. Algorithms only read it, so several of them may
    share one graph as long as nobody mutates it during a run.
    """

    __networkx_backend__ = "wgraph"

    def __init__(self, directed: bool = False):
        self._directed = bool(directed)
        self._adj = {}

    def add_vertex(self, vertex) -> None:
        """Add vertex with no edges; no-op if it already exists"""
        if vertex not in self._adj:
            self._adj[vertex] = []

    def add_edge(self, source, target, weight: float) -> None:
        """
        Add an edge source -> target, registering missing endpoints
        For undirected graphs the mirrored edge target -> source is added too
        """
        weight = float(weight)
        self.add_vertex(source)
        self.add_vertex(target)
        self._adj[source].append(WeightedEdge(target, weight))
        if not self._directed:
            self._adj[target].append(WeightedEdge(source, weight))

    def neighbors(self, vertex) -> tuple:
        """Outgoing edges of vertex in insertion order; empty for unknown vertices"""
        return tuple(self._adj.get(vertex, ()))

    def vertices(self) -> list:
        return list(self._adj)

    def has_vertex(self, vertex) -> bool:
        return vertex in self._adj

    def is_directed(self) -> bool:
        return self._directed

    def is_multigraph(self) -> bool:
        # parallel edges are allowed but carry no keys, so NetworkX should treat this as a simple graph
        return False

    def edges(self):
        """
        All stored half-edges as (source, target, weight)
        Undirected edges therefore show up once per direction
        """
        return [
            (source, edge.target, edge.weight)
            for source, adjacent in self._adj.items()
            for edge in adjacent
        ]

    def number_of_vertices(self) -> int:
        return len(self._adj)

    def number_of_edges(self) -> int:
        """Number of logical edges; an undirected edge counts once"""
        if self._directed:
            return sum(len(adjacent) for adjacent in self._adj.values())
        half_edges = 0
        self_loops = 0
        for source, adjacent in self._adj.items():
            for edge in adjacent:
                if edge.target == source:
                    self_loops += 1
                else:
                    half_edges += 1
        # an undirected self-loop is appended twice to the same list
        return half_edges // 2 + self_loops // 2

    def total_weight(self) -> float:
        """Sum of weights over logical edges"""
        total = sum(edge.weight for adjacent in self._adj.values() for edge in adjacent)
        return total if self._directed else total / 2.0

    def print_graph(self, file=None) -> None:
        out = file if file is not None else sys.stdout
        for vertex, adjacent in self._adj.items():
            print(f"{vertex} -> [{', '.join(str(edge) for edge in adjacent)}]", file=out)

    def __len__(self):
        return len(self._adj)

    def __contains__(self, vertex):
        return vertex in self._adj

    def __iter__(self):
        return iter(list(self._adj))

    def __repr__(self):
        kind = "directed" if self._directed else "undirected"
        return (
            f"WeightedGraph({kind}, vertices={self.number_of_vertices()}, "
            f"edges={self.number_of_edges()})"
        )
