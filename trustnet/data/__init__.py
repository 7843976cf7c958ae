"""Edge-list input."""

from trustnet.data.loader import EdgeParseError, load_edges, parse_edge_line

__all__ = ["EdgeParseError", "load_edges", "parse_edge_line"]
