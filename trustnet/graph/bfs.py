"""Unweighted shortest-path search."""

from collections import deque
from typing import Deque, Optional, Set, Tuple

from trustnet.core.types import VertexId
from trustnet.graph.base import Graph


def shortest_path_length(graph: Graph, start: VertexId, end: VertexId) -> Optional[int]:
    """Find the hop distance between two vertices using BFS.

    Neighbors are explored in neighbor-list order and marked visited when
    enqueued. Neither vertex has to exist in the graph.

    Args:
        graph: Graph to search
        start: Source vertex
        end: Destination vertex

    Returns:
        Number of edges on a shortest path, 0 if start == end, or None when
        end is not reachable from start
    """
    queue: Deque[Tuple[VertexId, int]] = deque([(start, 0)])
    visited: Set[VertexId] = {start}

    while queue:
        vertex, distance = queue.popleft()
        if vertex == end:
            return distance

        for neighbor in graph.neighbors(vertex):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append((neighbor, distance + 1))

    return None
