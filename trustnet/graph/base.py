"""Undirected adjacency-list graph built from a trust edge list."""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Tuple

from trustnet.core.types import EdgeList, VertexId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Graph:
    """Read-only undirected graph over integer vertex ids.

    Every edge (s, t) contributes t to s's neighbor list and s to t's.
    Parallel edges and self-loops are kept as-is, so a self-loop appears
    twice in its vertex's own list and degree counts raw multiplicity.

    Attributes:
        adjacency: Mapping from vertex id to its ordered neighbor tuple
    """

    adjacency: Mapping[VertexId, Tuple[VertexId, ...]]

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.adjacency

    def __len__(self) -> int:
        return len(self.adjacency)

    def __iter__(self) -> Iterator[VertexId]:
        return iter(self.adjacency)

    @property
    def num_vertices(self) -> int:
        """Number of vertices with at least one incident edge."""
        return len(self.adjacency)

    @property
    def num_edges(self) -> int:
        """Number of edges the graph was built from."""
        return sum(len(neighbors) for neighbors in self.adjacency.values()) // 2

    def vertices(self) -> List[VertexId]:
        """Vertex ids in insertion order."""
        return list(self.adjacency)

    def neighbors(self, vertex: VertexId) -> Tuple[VertexId, ...]:
        """Get the neighbors of a vertex.

        Args:
            vertex: Vertex id, which need not be in the graph

        Returns:
            Neighbor tuple in edge order, empty for unknown vertices
        """
        return self.adjacency.get(vertex, ())

    def degree(self, vertex: VertexId) -> int:
        """Get the degree of a vertex (0 for unknown vertices)."""
        return len(self.neighbors(vertex))

    def avg_degree(self) -> float:
        """Calculate average vertex degree."""
        if not self.adjacency:
            return 0.0
        return sum(len(neighbors) for neighbors in self.adjacency.values()) / len(self.adjacency)

    def is_symmetric(self) -> bool:
        """Check that every a -> b entry has a matching b -> a entry.

        Multiplicity is compared too, so a parallel edge must appear the
        same number of times on both sides.
        """
        for vertex, neighbors in self.adjacency.items():
            for neighbor in set(neighbors):
                if neighbors.count(neighbor) != self.neighbors(neighbor).count(vertex):
                    return False
        return True


def build_graph(edges: EdgeList) -> Graph:
    """Build an undirected graph from an edge list.

    Args:
        edges: Sequence of (source, target, weight) triples. May be empty and
            may contain duplicates and self-loops; weights are ignored.

    Returns:
        Graph whose vertex set is every id seen as a source or target
    """
    adjacency: Dict[VertexId, List[VertexId]] = {}

    for source, target, _weight in edges:
        adjacency.setdefault(source, []).append(target)
        adjacency.setdefault(target, []).append(source)

    logger.debug("Built graph with %d vertices from %d edges", len(adjacency), len(edges))

    return Graph(
        adjacency=MappingProxyType(
            {vertex: tuple(neighbors) for vertex, neighbors in adjacency.items()}
        )
    )
