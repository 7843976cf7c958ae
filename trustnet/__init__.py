"""
trustnet: structural statistics for signed-trust networks.

trustnet loads a weighted trust edge list, builds an undirected adjacency
graph, and reports its degree distribution, a sampled average shortest-path
length, and how issued trust relates to connectivity.
"""

__version__ = "0.1.0"

from trustnet.core import Edge, VertexId
from trustnet.graph import Graph, build_graph, shortest_path_length
from trustnet.analysis import (
    SampleResult,
    TrustPoint,
    average_distance,
    degree_distribution,
    sample_distances,
    trust_correlation_data,
)
from trustnet.data import EdgeParseError, load_edges
from trustnet.config import Config, load_config

__all__ = [
    "__version__",
    "Edge",
    "VertexId",
    "Graph",
    "build_graph",
    "shortest_path_length",
    "SampleResult",
    "TrustPoint",
    "average_distance",
    "degree_distribution",
    "sample_distances",
    "trust_correlation_data",
    "EdgeParseError",
    "load_edges",
    "Config",
    "load_config",
]
