"""Degree distribution of a graph."""

from collections import Counter
from typing import Dict

from trustnet.graph.base import Graph


def degree_distribution(graph: Graph) -> Dict[int, int]:
    """Count how many vertices have each degree.

    Degree is the raw neighbor-list length, so parallel edges count
    separately and a self-loop counts twice.

    Args:
        graph: Graph to analyze

    Returns:
        Dictionary mapping each observed degree to its vertex count
    """
    return dict(Counter(len(neighbors) for neighbors in graph.adjacency.values()))
