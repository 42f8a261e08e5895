"""
Undirected adjacency store for edge-list graphs.

The store is a thin wrapper around ``networkx.MultiGraph``: parallel edges and
self-loops are kept exactly as they appear in the input, so a repeated pair
raises the degree of both endpoints every time it occurs and a self-loop adds
two to the degree of its vertex. Vertex and edge counts are always read from
the backing graph rather than tracked separately.

A store is filled once (normally by the parser), then frozen and shared
read-only between the analyzers.
"""

from typing import Iterator, List, Set, Tuple

import networkx as nx

from graph_metrics.errors import InvalidMetricRequest

Vertex = int


class GraphStore:
    """
    Undirected multigraph keyed by integer vertex ids.

    Args:
        name: Optional label used in logs and DOT output
    """

    def __init__(self, name: str = ""):
        self.name = name
        self._graph = nx.MultiGraph(name=name)

    def __repr__(self) -> str:
        return (f"GraphStore(name={self.name!r}, vertices={self.vertex_count}, "
                f"edges={self.edge_count})")

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._graph

    # -- mutation ----------------------------------------------------------

    def add_vertex(self, vertex: Vertex) -> None:
        """Add a vertex. Adding a vertex that already exists does nothing."""
        self._graph.add_node(vertex)

    def add_edge(self, source: Vertex, target: Vertex) -> None:
        """
        Add one undirected edge between source and target.

        Missing endpoints are added by networkx along with the edge. The pair
        is never deduplicated: inserting the same pair twice stores two
        parallel edges.
        """
        self._graph.add_edge(source, target)

    def freeze(self) -> "GraphStore":
        """
        Make the store read-only.

        Any later add_vertex/add_edge raises networkx.NetworkXError.

        Returns:
            The store itself, for chaining
        """
        nx.freeze(self._graph)
        return self

    @property
    def is_frozen(self) -> bool:
        return nx.is_frozen(self._graph)

    # -- queries -----------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def vertices(self) -> Iterator[Vertex]:
        """Iterate over vertices in insertion order."""
        return iter(self._graph.nodes)

    def sorted_vertices(self) -> List[Vertex]:
        return sorted(self._graph.nodes)

    def edges(self) -> Iterator[Tuple[Vertex, Vertex]]:
        """Iterate over every stored edge, parallel edges included."""
        return iter(self._graph.edges(keys=False))

    def _require(self, vertex: Vertex) -> None:
        if vertex not in self._graph:
            raise InvalidMetricRequest(f"Vertex {vertex!r} is not in the graph.")

    def neighbors(self, vertex: Vertex) -> List[Vertex]:
        """
        List the far endpoint of every edge incident to vertex.

        A neighbor joined by k parallel edges appears k times and a self-loop
        contributes the vertex itself twice, so ``len(neighbors(v)) ==
        degree(v)``.

        Raises:
            InvalidMetricRequest: If vertex is not in the graph
        """
        self._require(vertex)
        result = []
        for neighbor, keyed_edges in self._graph.adj[vertex].items():
            count = len(keyed_edges)
            if neighbor == vertex:
                count *= 2
            result.extend([neighbor] * count)
        return result

    def distinct_neighbors(self, vertex: Vertex) -> Set[Vertex]:
        """Set of vertices adjacent to vertex, not counting vertex itself."""
        self._require(vertex)
        return {n for n in self._graph.adj[vertex] if n != vertex}

    def adjacent(self, vertex: Vertex) -> Iterator[Vertex]:
        """Iterate over distinct adjacent vertices without validation (hot path for BFS)."""
        return iter(self._graph.adj[vertex])

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        return self._graph.has_edge(u, v)

    def degree(self, vertex: Vertex) -> int:
        """
        Number of incident edge-endpoints of vertex.

        Raises:
            InvalidMetricRequest: If vertex is not in the graph
        """
        self._require(vertex)
        return self._graph.degree(vertex)

    def degrees(self) -> Iterator[Tuple[Vertex, int]]:
        """Iterate over (vertex, degree) pairs in insertion order."""
        return iter(self._graph.degree())

    def to_networkx(self) -> nx.MultiGraph:
        """Return the backing networkx graph (frozen if the store is)."""
        return self._graph
