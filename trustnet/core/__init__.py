"""Core types shared across trustnet."""

from trustnet.core.types import Edge, EdgeLike, EdgeList, VertexId

__all__ = ["Edge", "EdgeLike", "EdgeList", "VertexId"]
