import itertools

from trustnet.graph import build_graph, shortest_path_length


def test_star_distances(star_graph):
    assert shortest_path_length(star_graph, 10, 15) == 1
    assert shortest_path_length(star_graph, 11, 12) == 2


def test_distance_to_self_is_zero(small_graph):
    assert shortest_path_length(small_graph, 3, 3) == 0


def test_self_distance_for_unknown_vertex():
    graph = build_graph([(1, 2, 1)])
    assert shortest_path_length(graph, 42, 42) == 0


def test_disconnected_vertices(two_components):
    assert shortest_path_length(two_components, 1, 8) is None
    assert shortest_path_length(two_components, 7, 3) is None


def test_missing_vertices(small_graph):
    assert shortest_path_length(small_graph, 1, 99) is None
    assert shortest_path_length(small_graph, 99, 1) is None


def test_path_length(two_components):
    assert shortest_path_length(two_components, 1, 3) == 2
    assert shortest_path_length(two_components, 7, 8) == 1


def test_symmetric_on_undirected_graph():
    graph = build_graph([(1, 2, 1), (2, 3, 1), (3, 4, 1), (4, 1, 1), (4, 5, 1), (5, 5, 1), (6, 7, 1)])
    for a, b in itertools.permutations(graph.vertices(), 2):
        assert shortest_path_length(graph, a, b) == shortest_path_length(graph, b, a)


def test_shortcut_is_preferred():
    # Long way 1-2-3-4-5, shortcut 1-5
    graph = build_graph([(1, 2, 1), (2, 3, 1), (3, 4, 1), (4, 5, 1), (1, 5, 1)])
    assert shortest_path_length(graph, 1, 5) == 1
    assert shortest_path_length(graph, 2, 4) == 2
    assert shortest_path_length(graph, 2, 5) == 2
