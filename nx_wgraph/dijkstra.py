"""
Single-source shortest paths with Dijkstra's algorithm

Uses a binary heap with lazy deletion: a vertex is pushed again every time its
tentative distance improves and stale entries are skipped when popped. Heap
entries are (distance, push sequence, vertex), so equal distances pop in push
order and vertices never need to be comparable.

Edge weights must be non-negative. Negative weights are not detected and give
wrong distances; use nx_wgraph.floyd_warshall for graphs that have them.
"""

import heapq
import itertools
import logging
import math
import sys

from .exceptions import VertexNotFound

logger = logging.getLogger(__name__)


class DijkstraAlgorithm:
    def __init__(self, graph):
        self.graph = graph

    def _check_vertex(self, vertex, role):
        if not self.graph.has_vertex(vertex):
            raise VertexNotFound(vertex, role)

    def _run(self, source, destination=None):
        """
        Run label-setting search from source
        Stops early once destination is settled, if one is given
        Returns (distances, predecessors)
        """
        distances = {vertex: math.inf for vertex in self.graph.vertices()}
        distances[source] = 0.0
        predecessors = {}
        settled = set()
        counter = itertools.count()
        queue = [(0.0, next(counter), source)]

        while queue:
            dist, _, current = heapq.heappop(queue)
            if current in settled:
                continue
            settled.add(current)
            if current == destination:
                break

            for edge in self.graph.neighbors(current):
                neighbor = edge.target
                if neighbor in settled:
                    continue
                candidate = dist + edge.weight
                if candidate < distances[neighbor]:
                    distances[neighbor] = candidate
                    predecessors[neighbor] = current
                    heapq.heappush(queue, (candidate, next(counter), neighbor))

        logger.debug(
            "dijkstra from %r settled %d of %d vertices",
            source,
            len(settled),
            len(distances),
        )
        return distances, predecessors

    def find_shortest_paths(self, source) -> dict:
        """
        Shortest distance from source to every vertex of the graph
        Unreachable vertices get math.inf
        """
        self._check_vertex(source, "Source vertex")
        distances, _ = self._run(source)
        return distances

    def predecessors(self, source) -> dict:
        """Predecessor of each reachable vertex (except source) on its shortest path"""
        self._check_vertex(source, "Source vertex")
        _, predecessors = self._run(source)
        return predecessors

    def find_shortest_path_with_distance(self, source, destination):
        """Return (path, distance); ([], inf) when destination is unreachable"""
        self._check_vertex(source, "Source vertex")
        self._check_vertex(destination, "Destination vertex")

        distances, predecessors = self._run(source, destination)
        distance = distances[destination]
        if distance == math.inf:
            return [], distance

        path = [destination]
        while path[-1] != source:
            path.append(predecessors[path[-1]])
        path.reverse()
        return path, distance

    def find_shortest_path(self, source, destination) -> list:
        """
        Vertices of a shortest path from source to destination, both included
        Empty list if destination cannot be reached
        """
        path, _ = self.find_shortest_path_with_distance(source, destination)
        return path

    def print_shortest_paths(self, source, file=None):
        out = file if file is not None else sys.stdout
        distances = self.find_shortest_paths(source)
        print(f"Shortest paths from {source}:", file=out)
        for vertex, distance in distances.items():
            if distance == math.inf:
                print(f"  to {vertex}: No path exists", file=out)
            else:
                print(f"  to {vertex}: {distance}", file=out)

    def print_shortest_path(self, source, destination, file=None):
        out = file if file is not None else sys.stdout
        path, distance = self.find_shortest_path_with_distance(source, destination)
        if not path:
            print(f"No path exists from {source} to {destination}", file=out)
            return
        print(f"Shortest path from {source} to {destination}:", file=out)
        print(f"  Path: {path}", file=out)
        print(f"  Distance: {distance}", file=out)
