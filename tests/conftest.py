"""Shared graph fixtures for the graph_metrics tests."""

import itertools

import matplotlib
import pytest

matplotlib.use("Agg")

from graph_metrics.graph_store import GraphStore  # noqa: E402
from graph_metrics.parser import parse_edge_list  # noqa: E402

TRIANGLE_TEXT = "% comment line\n1 2\n2 3\n3 1\n"
PATH4_TEXT = "1 2\n2 3\n3 4\n"


def build_graph(edges, vertices=()):
    graph = GraphStore(name="fixture")
    for v in vertices:
        graph.add_vertex(v)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph.freeze()


@pytest.fixture
def triangle():
    return parse_edge_list(TRIANGLE_TEXT)


@pytest.fixture
def path4():
    return parse_edge_list(PATH4_TEXT)


@pytest.fixture
def empty_graph():
    return GraphStore().freeze()


@pytest.fixture
def single_vertex():
    return build_graph([], vertices=[7])


def path_graph(n):
    return build_graph([(i, i + 1) for i in range(n - 1)], vertices=range(n))


def complete_graph(n):
    return build_graph(itertools.combinations(range(n), 2))


def star_graph(k):
    return build_graph([(0, leaf) for leaf in range(1, k + 1)])
