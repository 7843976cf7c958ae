"""Core type definitions for trustnet."""

from typing import NamedTuple, Sequence, Tuple, Union


# Type aliases
VertexId = int
"""Integer vertex identifier as found in the edge list"""


class Edge(NamedTuple):
    """A single signed-trust rating between two vertices.

    Attributes:
        source: Vertex issuing the rating
        target: Vertex being rated
        weight: Signed trust rating (opaque to traversal)
    """

    source: VertexId
    target: VertexId
    weight: int


EdgeLike = Union[Edge, Tuple[VertexId, VertexId, int]]
"""Anything unpacking to (source, target, weight)"""

EdgeList = Sequence[EdgeLike]
