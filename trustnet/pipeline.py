"""Analysis pipeline from edge list to statistics and plots."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from trustnet.analysis.degree import degree_distribution
from trustnet.analysis.sampler import SampleResult, sample_distances
from trustnet.analysis.trust import TrustPoint, trust_correlation_data
from trustnet.config.schema import DEFAULT_SAMPLES, Config
from trustnet.core.types import Edge
from trustnet.data.loader import load_edges
from trustnet.graph.base import Graph, build_graph
from trustnet.utils.seed import make_rng

logger = logging.getLogger(__name__)


@dataclass
class AnalysisReport:
    """Everything computed for one edge list.

    Attributes:
        edges: Loaded edges in file order
        graph: Undirected graph built from the edges
        sample: Average-distance sampling outcome
        distribution: Degree -> vertex count
        trust: Per-source trust summaries
        plots: Paths of images written, if any
    """

    edges: List[Edge]
    graph: Graph
    sample: SampleResult
    distribution: Dict[int, int]
    trust: List[TrustPoint]
    plots: List[Path] = field(default_factory=list)

    @property
    def average_distance(self) -> float:
        return self.sample.average


def analyze(
    edges: List[Edge],
    samples: int = DEFAULT_SAMPLES,
    seed: Optional[int] = None
) -> AnalysisReport:
    """Compute all statistics for an in-memory edge list.

    Args:
        edges: Edge list
        samples: Number of vertex pairs to draw for the distance estimate
        seed: Seed for pair sampling

    Returns:
        AnalysisReport without plots
    """
    graph = build_graph(edges)
    logger.info("Graph has %d vertices and %d edges", graph.num_vertices, graph.num_edges)

    sample = sample_distances(graph, samples, make_rng(seed))

    return AnalysisReport(
        edges=edges,
        graph=graph,
        sample=sample,
        distribution=degree_distribution(graph),
        trust=trust_correlation_data(edges),
    )


def run_from_config(config: Config) -> AnalysisReport:
    """Load the configured edge list, analyze it, and write plots.

    Args:
        config: Run configuration

    Returns:
        AnalysisReport including written plot paths

    Raises:
        FileNotFoundError: If the edge list doesn't exist
        EdgeParseError: On a malformed line unless input.skip_invalid
    """
    edges = load_edges(config.input.path, skip_invalid=config.input.skip_invalid)
    report = analyze(edges, samples=config.sampling.samples, seed=config.experiment.seed)

    if config.output.plots:
        from trustnet.reporting.plots import plot_degree_distribution, plot_trust_correlation

        out_dir = Path(config.output.directory)
        out_dir.mkdir(parents=True, exist_ok=True)
        report.plots.append(plot_degree_distribution(
            report.distribution,
            out_dir / config.output.degree_histogram,
            max_degree=config.output.max_degree,
        ))
        report.plots.append(plot_trust_correlation(
            report.trust,
            out_dir / config.output.trust_scatter,
        ))

    return report
