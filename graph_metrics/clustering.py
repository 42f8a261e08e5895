"""
Average local clustering coefficient by triangle counting.

For a vertex v of degree d >= 2 the local coefficient is
2 * T(v) / (d * (d - 1)), where T(v) is the number of connected pairs among
v's distinct neighbors. Vertices of degree 0 or 1 have no defined
coefficient and are left out of the average rather than counted as 0.

Neighbor pairs are enumerated over the *distinct* neighbor set (v itself
excluded) while d is the full degree, so parallel edges and self-loops lower
the coefficient but can never push it above 1.
"""

import logging
from typing import Optional, Sequence, Tuple

from graph_metrics.errors import InvalidMetricRequest
from graph_metrics.graph_store import GraphStore, Vertex
from graph_metrics.parallel import DEFAULT_CHUNK_SIZE, chunked, fan_out

logger = logging.getLogger(__name__)


def triangles(graph: GraphStore, vertex: Vertex) -> int:
    """Number of edges among the distinct neighbors of vertex."""
    neighbors = sorted(graph.distinct_neighbors(vertex))
    closed = 0
    for i, a in enumerate(neighbors):
        for b in neighbors[i + 1:]:
            if graph.has_edge(a, b):
                closed += 1
    return closed


def local_clustering(graph: GraphStore, vertex: Vertex) -> Optional[float]:
    """
    Local clustering coefficient of a single vertex.

    Args:
        graph: The graph to analyze
        vertex: Vertex to score

    Returns:
        Coefficient in [0, 1], or None when the vertex has degree below 2

    Raises:
        InvalidMetricRequest: If vertex is not in the graph
    """
    if vertex not in graph:
        raise InvalidMetricRequest(f"Vertex {vertex!r} is not in the graph.")
    d = graph.degree(vertex)
    if d < 2:
        return None
    return 2 * triangles(graph, vertex) / (d * (d - 1))


def _partial_sum(graph: GraphStore, vertices: Sequence[Vertex]) -> Tuple[float, int]:
    total = 0.0
    samples = 0
    for vertex in vertices:
        coefficient = local_clustering(graph, vertex)
        if coefficient is None:
            continue
        total += coefficient
        samples += 1
    return total, samples


def clustering_coefficient(graph: GraphStore, workers: Optional[int] = None,
                           chunk_size: int = DEFAULT_CHUNK_SIZE) -> float:
    """
    Mean local clustering coefficient over vertices of degree >= 2.

    Args:
        graph: The graph to analyze (read only)
        workers: Thread count for the per-vertex work; 1 runs inline
        chunk_size: Number of vertices per unit of work

    Returns:
        The average coefficient, or 0.0 if no vertex has degree >= 2
    """
    chunks = chunked(list(graph.vertices()), chunk_size)

    total = 0.0
    samples = 0
    for chunk_total, chunk_samples in fan_out(lambda chunk: _partial_sum(graph, chunk),
                                              chunks, workers):
        total += chunk_total
        samples += chunk_samples

    if samples == 0:
        logger.debug("No vertex of degree >= 2 in %r", graph.name)
        return 0.0
    return total / samples
