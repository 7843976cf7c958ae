import pytest

from trustnet.core import Edge
from trustnet.graph import Graph, build_graph


def test_empty_edge_list():
    graph = build_graph([])
    assert len(graph) == 0
    assert graph.num_edges == 0
    assert graph.avg_degree() == 0.0


def test_neighbors_are_symmetric(small_graph):
    assert small_graph.is_symmetric()
    assert small_graph.neighbors(1) == (2, 3, 4)
    assert small_graph.neighbors(2) == (1, 3, 4)
    assert small_graph.neighbors(3) == (1, 2)
    assert small_graph.neighbors(4) == (1, 2)


def test_degrees_count_incident_edges(small_graph):
    assert small_graph.degree(1) == 3
    assert small_graph.degree(2) == 3
    assert small_graph.degree(3) == 2
    assert small_graph.degree(4) == 2
    assert small_graph.num_edges == 5


def test_vertex_set_is_sources_and_targets(small_graph):
    assert set(small_graph.vertices()) == {1, 2, 3, 4}
    assert 5 not in small_graph
    assert small_graph.neighbors(5) == ()
    assert small_graph.degree(5) == 0


def test_self_loop_counted_twice():
    graph = build_graph([(1, 1, 3)])
    assert graph.neighbors(1) == (1, 1)
    assert graph.degree(1) == 2
    assert graph.num_vertices == 1
    assert graph.is_symmetric()


def test_parallel_edges_kept():
    graph = build_graph([(1, 2, 1), (1, 2, -1), (2, 1, 4)])
    assert graph.neighbors(1) == (2, 2, 2)
    assert graph.neighbors(2) == (1, 1, 1)
    assert graph.degree(1) == 3
    assert graph.is_symmetric()


def test_accepts_edge_tuples():
    graph = build_graph([Edge(5, 6, -10), Edge(6, 7, 2)])
    assert graph.neighbors(6) == (5, 7)


def test_graph_is_read_only(small_graph):
    with pytest.raises(TypeError):
        small_graph.adjacency[99] = (1,)
    with pytest.raises(AttributeError):
        small_graph.adjacency = {}


def test_asymmetric_graph_detected():
    graph = Graph(adjacency={1: (2,), 2: ()})
    assert not graph.is_symmetric()
