"""One-call computation of every metric reported for a graph."""

import dataclasses
import logging
import math
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from graph_metrics.clustering import clustering_coefficient
from graph_metrics.degree import (DegreeDistribution, DegreeSummary, average_degree,
                                  degree_distribution, degree_summary, density, mean_degree)
from graph_metrics.diameter import diameter
from graph_metrics.graph_store import GraphStore
from graph_metrics.parser import read_edge_list

logger = logging.getLogger(__name__)


def _finite_or_none(value: float) -> Optional[float]:
    return None if math.isnan(value) else value


@dataclass(frozen=True)
class GraphMetrics:
    """Read-only results for one graph, ready to be printed by the caller."""
    name: str
    vertex_count: int
    edge_count: int
    average_degree: float
    mean_degree: float
    density: float
    diameter: int
    clustering_coefficient: float
    degree_distribution: DegreeDistribution
    degree_summary: Optional[DegreeSummary]

    def as_dict(self) -> Dict[str, Any]:
        """Plain-data view; undefined (NaN) averages become None so the result is valid JSON."""
        summary = self.degree_summary
        return {
            "name": self.name,
            "vertex_count": self.vertex_count,
            "edge_count": self.edge_count,
            "average_degree": _finite_or_none(self.average_degree),
            "mean_degree": _finite_or_none(self.mean_degree),
            "density": self.density,
            "diameter": self.diameter,
            "clustering_coefficient": self.clustering_coefficient,
            "degree_distribution": self.degree_distribution.as_dict(),
            "degree_summary": dataclasses.asdict(summary) if summary is not None else None,
        }


def analyze_graph(graph: GraphStore, workers: Optional[int] = None) -> GraphMetrics:
    """
    Compute all structural metrics of a graph.

    Args:
        graph: Parsed graph; it is only read
        workers: Thread count passed to the diameter and clustering analyzers

    Returns:
        GraphMetrics for the graph
    """
    logger.info("Analyzing %r (%d vertices, %d edges)",
                graph.name, graph.vertex_count, graph.edge_count)
    return GraphMetrics(
        name=graph.name,
        vertex_count=graph.vertex_count,
        edge_count=graph.edge_count,
        average_degree=average_degree(graph),
        mean_degree=mean_degree(graph),
        density=density(graph),
        diameter=diameter(graph, workers=workers),
        clustering_coefficient=clustering_coefficient(graph, workers=workers),
        degree_distribution=degree_distribution(graph),
        degree_summary=degree_summary(graph),
    )


def analyze_file(path: Union[str, os.PathLike], workers: Optional[int] = None) -> GraphMetrics:
    """Parse an edge-list file and analyze it."""
    return analyze_graph(read_edge_list(path), workers=workers)
