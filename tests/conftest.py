import pytest

from trustnet.graph import build_graph


@pytest.fixture
def small_edges():
    """Vertex 1 rates 2, 3, 4; vertex 2 rates 3, 4."""
    return [(1, 2, 10), (1, 3, 20), (1, 4, 30), (2, 3, 40), (2, 4, 50)]


@pytest.fixture
def star_edges():
    """Vertex 10 rates 11..15, all with trust 5."""
    return [(10, 11, 5), (10, 12, 5), (10, 13, 5), (10, 14, 5), (10, 15, 5)]


@pytest.fixture
def small_graph(small_edges):
    return build_graph(small_edges)


@pytest.fixture
def star_graph(star_edges):
    return build_graph(star_edges)


@pytest.fixture
def two_components():
    """Path 1-2-3 and a separate edge 7-8."""
    return build_graph([(1, 2, 1), (2, 3, 1), (7, 8, 1)])
