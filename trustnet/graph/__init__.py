"""Graph construction and traversal."""

from trustnet.graph.base import Graph, build_graph
from trustnet.graph.bfs import shortest_path_length

__all__ = ["Graph", "build_graph", "shortest_path_length"]
