"""
Graph diameter by repeated breadth-first search.

Every vertex is used as a BFS source once; its eccentricity is the largest
hop count to any vertex it can reach. The diameter is the largest
eccentricity. Pairs in different components are never compared, so a
disconnected graph reports the diameter of its widest component.

Cost is one BFS per vertex, O(V * (V + E)). The sources are independent and
only read the graph, so they are spread over a thread pool in chunks.
"""

import logging
from collections import deque
from typing import Dict, Optional, Sequence

from graph_metrics.errors import InvalidMetricRequest
from graph_metrics.graph_store import GraphStore, Vertex
from graph_metrics.parallel import DEFAULT_CHUNK_SIZE, chunked, fan_out

logger = logging.getLogger(__name__)


def _bfs_eccentricity(graph: GraphStore, source: Vertex) -> int:
    distances: Dict[Vertex, int] = {source: 0}
    queue = deque([source])
    farthest = 0

    while queue:
        vertex = queue.popleft()
        next_distance = distances[vertex] + 1
        for neighbor in graph.adjacent(vertex):
            if neighbor not in distances:
                distances[neighbor] = next_distance
                farthest = next_distance
                queue.append(neighbor)

    return farthest


def eccentricity(graph: GraphStore, source: Vertex) -> int:
    """
    Greatest shortest-path distance from source to any vertex it can reach.

    Args:
        graph: The graph to traverse
        source: Starting vertex

    Returns:
        Eccentricity in edges; 0 for a vertex with no edges

    Raises:
        InvalidMetricRequest: If source is not in the graph
    """
    if source not in graph:
        raise InvalidMetricRequest(f"Vertex {source!r} is not in the graph.")
    return _bfs_eccentricity(graph, source)


def _max_eccentricity(graph: GraphStore, sources: Sequence[Vertex]) -> int:
    return max((_bfs_eccentricity(graph, source) for source in sources), default=0)


def diameter(graph: GraphStore, workers: Optional[int] = None,
             chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """
    Largest shortest-path distance between two mutually reachable vertices.

    Args:
        graph: The graph to analyze (read only)
        workers: Thread count for the per-source searches; 1 runs inline
        chunk_size: Number of BFS sources per unit of work

    Returns:
        The diameter; 0 for an empty graph
    """
    sources = list(graph.vertices())
    chunks = chunked(sources, chunk_size)

    result = 0
    for local_max in fan_out(lambda chunk: _max_eccentricity(graph, chunk), chunks, workers):
        if local_max > result:
            result = local_max

    logger.debug("Diameter of %r: %d (%d sources)", graph.name, result, len(sources))
    return result
