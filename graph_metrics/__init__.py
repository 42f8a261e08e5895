"""Structural statistics for undirected graphs read from edge-list files."""

from graph_metrics.analysis import GraphMetrics, analyze_file, analyze_graph
from graph_metrics.clustering import clustering_coefficient, local_clustering
from graph_metrics.degree import (DegreeDistribution, DegreeSummary, average_degree, degree,
                                  degree_distribution, degree_summary, density, mean_degree)
from graph_metrics.diameter import diameter, eccentricity
from graph_metrics.dot import to_dot, write_dot
from graph_metrics.errors import GraphMetricsError, InvalidMetricRequest, ParseError
from graph_metrics.graph_store import GraphStore
from graph_metrics.parser import parse_edge_list, read_edge_list

__all__ = [
    "GraphMetrics",
    "GraphMetricsError",
    "GraphStore",
    "DegreeDistribution",
    "DegreeSummary",
    "InvalidMetricRequest",
    "ParseError",
    "analyze_file",
    "analyze_graph",
    "average_degree",
    "clustering_coefficient",
    "degree",
    "degree_distribution",
    "degree_summary",
    "density",
    "diameter",
    "eccentricity",
    "local_clustering",
    "mean_degree",
    "parse_edge_list",
    "read_edge_list",
    "to_dot",
    "write_dot",
]
