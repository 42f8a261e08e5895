"""Degree-based metrics: per-vertex degree, distribution, average degree, density."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

import numpy as np
from scipy import stats

from graph_metrics.graph_store import GraphStore, Vertex

logger = logging.getLogger(__name__)


class DegreeDistribution(Mapping):
    """
    Histogram mapping degree -> number of vertices with that degree.

    Starts empty; buckets are created on first use by record(). Iteration is
    in ascending degree order so printed output is reproducible. Compares
    equal to any mapping with the same items, e.g. ``{2: 3}``.
    """

    def __init__(self):
        self._counts: Dict[int, int] = {}

    def record(self, degree: int) -> None:
        """Insert the bucket for degree if missing, then increment it."""
        if degree < 0:
            raise ValueError(f"degree must be non-negative, got {degree}.")
        if degree not in self._counts:
            self._counts[degree] = 0
        self._counts[degree] += 1

    def __getitem__(self, degree: int) -> int:
        return self._counts[degree]

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._counts))

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"DegreeDistribution({self.as_dict()!r})"

    @property
    def total(self) -> int:
        """Number of vertices counted."""
        return sum(self._counts.values())

    def as_dict(self) -> Dict[int, int]:
        return {degree: self._counts[degree] for degree in self}


@dataclass(frozen=True)
class DegreeSummary:
    count: int
    minimum: int
    maximum: int
    mean: float
    variance: float


def degree(graph: GraphStore, vertex: Vertex) -> int:
    """
    Degree of a vertex: parallel edges count individually, self-loops twice.

    Raises:
        InvalidMetricRequest: If vertex is not in the graph
    """
    return graph.degree(vertex)


def degree_distribution(graph: GraphStore) -> DegreeDistribution:
    """
    Count how many vertices have each degree.

    Args:
        graph: The graph to analyze

    Returns:
        DegreeDistribution whose counts sum to the vertex count
    """
    distribution = DegreeDistribution()
    for _, d in graph.degrees():
        distribution.record(d)
    return distribution


def average_degree(graph: GraphStore) -> float:
    """
    Sum of all vertex degrees divided by twice the vertex count.

    Returns:
        The ratio as a float, or NaN when the graph has no vertices
    """
    n = graph.vertex_count
    if n == 0:
        return float("nan")
    total = sum(d for _, d in graph.degrees())
    return total / (2 * n)


def mean_degree(graph: GraphStore) -> float:
    """Arithmetic mean of the vertex degrees (NaN for an empty graph)."""
    n = graph.vertex_count
    if n == 0:
        return float("nan")
    return sum(d for _, d in graph.degrees()) / n


def density(graph: GraphStore) -> float:
    """
    Calculate the density of the graph.

    Ratio of stored edges to the edge count of a complete simple graph on the
    same vertices: density = 2*E / (N*(N-1)). Defined as 0.0 when the graph
    has at most one vertex.

    Args:
        graph: The graph to analyze

    Returns:
        Float between 0 and 1 for simple graphs; parallel edges and
        self-loops can push it above 1
    """
    n = graph.vertex_count
    if n <= 1:
        return 0.0
    return 2 * graph.edge_count / (n * (n - 1))


def degree_summary(graph: GraphStore) -> Optional[DegreeSummary]:
    """
    Min, max, mean and population variance of the vertex degrees.

    Returns:
        DegreeSummary, or None when the graph has no vertices
    """
    degrees = np.fromiter((d for _, d in graph.degrees()), dtype=np.int64,
                          count=graph.vertex_count)
    if degrees.size == 0:
        return None

    lo, hi = int(degrees.min()), int(degrees.max())
    if lo == hi:
        # all degrees equal; skip higher moments that are undefined here
        return DegreeSummary(count=int(degrees.size), minimum=lo, maximum=hi,
                             mean=float(lo), variance=0.0)

    described = stats.describe(degrees, ddof=0)
    return DegreeSummary(
        count=int(described.nobs),
        minimum=int(described.minmax[0]),
        maximum=int(described.minmax[1]),
        mean=float(described.mean),
        variance=float(described.variance),
    )
