"""Exception types raised by the graph_metrics package."""

from typing import Optional


class GraphMetricsError(Exception):
    """Base class for every error raised by graph_metrics."""


class ParseError(GraphMetricsError, ValueError):
    """
    Raised when edge-list input cannot be turned into a graph.

    Args:
        message: Human readable description of the failure
        line_number: 1-based line number of the offending line, if known
        line: Raw text of the offending line, if known
        path: File the text was read from, if known
    """

    def __init__(self, message: str, line_number: Optional[int] = None,
                 line: Optional[str] = None, path: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.path is not None:
            message = f"{self.path}: {message}"
        return message


class InvalidMetricRequest(GraphMetricsError, ValueError):
    """Raised when a metric is requested for something the graph cannot answer."""
