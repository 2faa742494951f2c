"""
Exceptions raised by nx_wgraph
All of them derive from NetworkX exceptions so existing NetworkX error handling keeps working
"""

import networkx as nx


class WGraphError(nx.NetworkXException):
    """Base class for nx_wgraph errors"""


class VertexNotFound(WGraphError, nx.NodeNotFound, ValueError):
    """A source, destination or start vertex is not in the graph"""

    def __init__(self, vertex, role="Vertex"):
        self.vertex = vertex
        super().__init__(f"{role} {vertex!r} not found in graph")


class DirectedGraphError(WGraphError, nx.NetworkXNotImplemented, ValueError):
    """An operation that needs an undirected graph was given a directed one"""


class MSTNotComputedError(WGraphError, RuntimeError):
    """A minimum spanning tree was queried before one was computed"""

    def __init__(self, message="MST has not been computed yet"):
        super().__init__(message)


class NegativeCycleError(WGraphError, nx.NetworkXUnbounded):
    """A path walk ran into a cycle of negative total weight"""
