import pytest

from trustnet.analysis import degree_distribution, trust_correlation_data
from trustnet.graph import build_graph


def test_small_distribution(small_graph):
    assert degree_distribution(small_graph) == {3: 2, 2: 2}


def test_star_distribution(star_graph):
    assert degree_distribution(star_graph) == {5: 1, 1: 5}


def test_empty_distribution():
    assert degree_distribution(build_graph([])) == {}


def test_self_loop_and_parallel_edges():
    graph = build_graph([(1, 1, 0), (1, 2, 0), (1, 2, 0)])
    # 1: [1, 1, 2, 2], 2: [1, 1]
    assert degree_distribution(graph) == {4: 1, 2: 1}


def test_distribution_sums_to_vertex_count(two_components):
    distribution = degree_distribution(two_components)
    assert sum(distribution.values()) == two_components.num_vertices == 5


def test_trust_correlation_small(small_edges):
    points = {p.vertex: p for p in trust_correlation_data(small_edges)}
    assert set(points) == {1, 2}
    assert points[1].degree == 3
    assert points[1].average_trust == pytest.approx(20.0)
    assert points[2].degree == 2
    assert points[2].average_trust == pytest.approx(45.0)


def test_trust_correlation_star(star_edges):
    points = {p.vertex: p for p in trust_correlation_data(star_edges)}
    assert points[10].degree == 5
    assert points[10].average_trust == pytest.approx(5.0)
    assert 11 not in points


def test_trust_correlation_negative_ratings():
    points = trust_correlation_data([(1, 2, -10), (1, 3, 4)])
    assert len(points) == 1
    assert points[0].average_trust == pytest.approx(-3.0)


def test_trust_correlation_empty():
    assert trust_correlation_data([]) == []
