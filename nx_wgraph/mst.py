"""
Minimum spanning trees of undirected weighted graphs with Prim's and Kruskal's algorithms

Tie-breaking between equal weights:
- Prim pops heap entries ordered by (weight, push sequence)
- Kruskal stable-sorts edges by weight, where edges are discovered in vertex
  insertion order and then adjacency insertion order

Both rules depend on insertion order, so two equal graphs built in different
orders may select different (equally light) edge sets.
"""

import heapq
import itertools
import logging
import sys
from typing import Hashable, NamedTuple

from .exceptions import DirectedGraphError, MSTNotComputedError, VertexNotFound
from .graph import WeightedGraph

logger = logging.getLogger(__name__)


class DisjointSet:
    """
    Union-find over a fixed set of vertices
    Vertices are mapped to dense ids backing flat parent and rank lists.
    find is iterative: one pass to locate the root, a second to compress the path.
    """

    def __init__(self, vertices):
        self._ids = {}
        for vertex in vertices:
            if vertex not in self._ids:
                self._ids[vertex] = len(self._ids)
        self._vertices = list(self._ids)
        self._parent = list(range(len(self._vertices)))
        self._rank = [0] * len(self._vertices)
        self._components = len(self._vertices)

    def _id(self, vertex):
        try:
            return self._ids[vertex]
        except KeyError:
            raise VertexNotFound(vertex) from None

    def _find_root(self, i):
        parent = self._parent
        root = i
        while parent[root] != root:
            root = parent[root]
        while parent[i] != root:
            next_i = parent[i]
            parent[i] = root
            i = next_i
        return root

    def find(self, vertex):
        """Representative vertex of the set containing vertex"""
        return self._vertices[self._find_root(self._id(vertex))]

    def union(self, x, y) -> bool:
        """Merge the sets of x and y; False if they were already one set"""
        root_x = self._find_root(self._id(x))
        root_y = self._find_root(self._id(y))
        if root_x == root_y:
            return False

        rank = self._rank
        if rank[root_x] < rank[root_y]:
            self._parent[root_x] = root_y
        elif rank[root_x] > rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            rank[root_x] += 1
        self._components -= 1
        return True

    def connected(self, x, y) -> bool:
        return self._find_root(self._id(x)) == self._find_root(self._id(y))

    @property
    def component_count(self) -> int:
        return self._components

    def __len__(self):
        return len(self._vertices)

    def __contains__(self, vertex):
        return vertex in self._ids


class MSTEdge(NamedTuple):
    source: Hashable
    target: Hashable
    weight: float


class MinimumSpanningTreeGraph:
    """
    Computes a minimum spanning tree (or forest) of an undirected WeightedGraph

    The wrapped graph is never modified; every computation replaces the stored
    result, which later changes to the graph do not affect. On a disconnected
    graph the result is a spanning forest: a warning is logged and
    is_spanning_tree is False.
    """

    def __init__(self, graph):
        if graph.is_directed():
            raise DirectedGraphError("Minimum spanning trees require an undirected graph")
        self.graph = graph
        self._mst_edges = []
        self._total_cost = 0.0
        self._components = 0
        self._algorithm = None
        # vertices of the graph as it was when the result was computed
        self._vertices = []

    def _canonical_edges(self):
        """Each undirected edge once, oriented from the earlier-inserted endpoint"""
        order = {vertex: i for i, vertex in enumerate(self.graph.vertices())}
        edges = []
        for source in self.graph.vertices():
            for edge in self.graph.neighbors(source):
                # the mirrored half lives in the later vertex's list; self-loops never join a tree
                if order[source] < order[edge.target]:
                    edges.append(MSTEdge(source, edge.target, edge.weight))
        return edges

    def _store(self, algorithm, edges, total, components):
        self._algorithm = algorithm
        self._mst_edges = edges
        self._total_cost = total
        self._components = components
        self._vertices = self.graph.vertices()

        n = len(self._vertices)
        logger.debug("%s selected %d edges over %d vertices, total %s", algorithm, len(edges), n, total)
        if not self.is_spanning_tree:
            logger.warning(
                "Graph is not connected: %s MST has %d of %d edges and spans %d components",
                algorithm,
                len(edges),
                max(n - 1, 0),
                components,
            )

    def compute_prim_mst(self, start_vertex) -> float:
        """
        Grow a tree from start_vertex and return its total weight
        Only the component containing start_vertex is covered.
        """
        if not self.graph.has_vertex(start_vertex):
            raise VertexNotFound(start_vertex, "Start vertex")

        edges = []
        total = 0.0
        visited = {start_vertex}
        counter = itertools.count()
        heap = [
            (edge.weight, next(counter), start_vertex, edge.target)
            for edge in self.graph.neighbors(start_vertex)
            if edge.target not in visited
        ]
        heapq.heapify(heap)

        while heap:
            weight, _, parent, vertex = heapq.heappop(heap)
            if vertex in visited:
                continue
            visited.add(vertex)
            edges.append(MSTEdge(parent, vertex, weight))
            total += weight
            for edge in self.graph.neighbors(vertex):
                if edge.target not in visited:
                    heapq.heappush(heap, (edge.weight, next(counter), vertex, edge.target))

        unreached = self.graph.number_of_vertices() - len(visited)
        self._store("prim", edges, total, 1 + unreached)
        return total

    def compute_kruskal_mst(self) -> float:
        """Minimum spanning forest over all vertices; returns its total weight"""
        candidates = sorted(self._canonical_edges(), key=lambda edge: edge.weight)
        sets = DisjointSet(self.graph.vertices())
        target_size = max(len(sets) - 1, 0)

        edges = []
        total = 0.0
        for edge in candidates:
            if len(edges) == target_size:
                break
            if sets.union(edge.source, edge.target):
                edges.append(edge)
                total += edge.weight

        self._store("kruskal", edges, total, sets.component_count)
        return total

    def is_mst_computed(self) -> bool:
        return self._algorithm is not None

    def _require_mst(self):
        if self._algorithm is None:
            raise MSTNotComputedError()

    @property
    def algorithm(self) -> str:
        self._require_mst()
        return self._algorithm

    @property
    def mst_edges(self) -> list:
        self._require_mst()
        return list(self._mst_edges)

    @property
    def total_cost(self) -> float:
        self._require_mst()
        return self._total_cost

    @property
    def edge_count(self) -> int:
        self._require_mst()
        return len(self._mst_edges)

    @property
    def component_count(self) -> int:
        """Number of trees in the result, counting unreached vertices as single-vertex trees"""
        self._require_mst()
        return self._components

    @property
    def is_spanning_tree(self) -> bool:
        """True when the selected edges connect every vertex of the graph"""
        self._require_mst()
        return len(self._mst_edges) == max(len(self._vertices) - 1, 0)

    def get_mst_as_graph(self) -> WeightedGraph:
        """New undirected graph with every vertex and each selected edge exactly once"""
        self._require_mst()
        tree = WeightedGraph(directed=False)
        for vertex in self._vertices:
            tree.add_vertex(vertex)
        for edge in self._mst_edges:
            tree.add_edge(edge.source, edge.target, edge.weight)
        return tree

    def print_mst(self, file=None):
        self._require_mst()
        out = file if file is not None else sys.stdout
        print("Minimum Spanning Tree:", file=out)
        self.get_mst_as_graph().print_graph(file=out)
        print(f"Total MST Cost: {self._total_cost}", file=out)
