import pytest

from graph_metrics.clustering import clustering_coefficient, local_clustering, triangles
from graph_metrics.errors import InvalidMetricRequest

from conftest import build_graph, complete_graph, path_graph, star_graph


def test_triangle(triangle):
    assert clustering_coefficient(triangle) == 1.0


def test_path4_has_no_triangles(path4):
    assert clustering_coefficient(path4) == 0.0


@pytest.mark.parametrize("n", [3, 4, 7, 12])
def test_complete_graph_is_exactly_one(n):
    assert clustering_coefficient(complete_graph(n)) == 1.0


@pytest.mark.parametrize("k", [2, 3, 10])
def test_star_graph_is_exactly_zero(k):
    assert clustering_coefficient(star_graph(k)) == 0.0


def test_low_degree_vertices_are_excluded():
    # triangle 1-2-3 with pendant 4 on vertex 3
    graph = build_graph([(1, 2), (2, 3), (3, 1), (3, 4)])
    assert local_clustering(graph, 4) is None
    assert local_clustering(graph, 1) == 1.0
    assert local_clustering(graph, 3) == pytest.approx(1 / 3)
    # mean over vertices 1, 2, 3 only
    assert clustering_coefficient(graph) == pytest.approx((1 + 1 + 1 / 3) / 3)


def test_no_qualifying_vertices(empty_graph, single_vertex):
    assert clustering_coefficient(empty_graph) == 0.0
    assert clustering_coefficient(single_vertex) == 0.0
    assert clustering_coefficient(build_graph([(1, 2)])) == 0.0


def test_multi_edges_keep_coefficient_at_most_one():
    graph = build_graph([(1, 2), (1, 2), (2, 3), (3, 1)])
    # vertex 1: degree 3, one closed pair among distinct neighbors {2, 3}
    assert triangles(graph, 1) == 1
    assert local_clustering(graph, 1) == pytest.approx(1 / 3)
    assert 0.0 <= clustering_coefficient(graph) <= 1.0


def test_self_loop_is_not_a_neighbor_pair():
    graph = build_graph([(1, 1), (1, 2)])
    # degree 3, distinct neighbors {2}: no pairs
    assert local_clustering(graph, 1) == 0.0


def test_local_clustering_unknown_vertex(path4):
    with pytest.raises(InvalidMetricRequest):
        local_clustering(path4, 100)


@pytest.mark.parametrize("workers", [1, 3, 16])
def test_worker_count_does_not_change_result(workers):
    graph = complete_graph(20)
    assert clustering_coefficient(graph, workers=workers, chunk_size=3) == 1.0
    assert clustering_coefficient(path_graph(50), workers=workers, chunk_size=4) == 0.0
