"""Approximate average shortest-path length by random pair sampling."""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from trustnet.graph.base import Graph
from trustnet.graph.bfs import shortest_path_length

logger = logging.getLogger(__name__)


@dataclass
class SampleResult:
    """Accumulated outcome of a sampling run.

    Attributes:
        total_distance: Sum of BFS distances over connected pairs
        valid_pairs: Number of sampled pairs that were connected
        draws: Number of pairs drawn
        self_pairs: Draws skipped because both ends were the same vertex
        unreachable_pairs: Draws whose ends lie in different components
    """

    total_distance: int = 0
    valid_pairs: int = 0
    draws: int = 0
    self_pairs: int = 0
    unreachable_pairs: int = 0

    @property
    def average(self) -> float:
        """Mean distance over valid pairs, 0.0 when there are none."""
        if self.valid_pairs == 0:
            return 0.0
        return self.total_distance / self.valid_pairs


def sample_distances(
    graph: Graph,
    sample_count: int,
    rng: Optional[random.Random] = None
) -> SampleResult:
    """Draw random vertex pairs and accumulate their BFS distances.

    Both ends are drawn independently and uniformly with replacement. A draw
    that picks the same vertex twice is skipped, not retried, so fewer than
    sample_count pairs may contribute.

    Args:
        graph: Graph to sample from
        sample_count: Number of pairs to draw
        rng: Random source; a fresh unseeded one is used when omitted

    Returns:
        SampleResult with totals and per-outcome counters

    Raises:
        ValueError: If sample_count is negative
    """
    if sample_count < 0:
        raise ValueError(f"sample_count must be >= 0, got {sample_count}")

    result = SampleResult()
    vertices = graph.vertices()
    if len(vertices) < 2:
        return result

    if rng is None:
        rng = random.Random()

    for _ in range(sample_count):
        start = rng.choice(vertices)
        end = rng.choice(vertices)
        result.draws += 1

        if start == end:
            result.self_pairs += 1
            continue

        distance = shortest_path_length(graph, start, end)
        if distance is None:
            result.unreachable_pairs += 1
            continue

        result.total_distance += distance
        result.valid_pairs += 1

    logger.debug(
        "Sampled %d pairs: %d valid, %d self, %d unreachable",
        result.draws, result.valid_pairs, result.self_pairs, result.unreachable_pairs
    )
    return result


def average_distance(
    graph: Graph,
    sample_count: int,
    rng: Optional[random.Random] = None
) -> float:
    """Estimate the average distance between two random vertices.

    This is a sampled approximation, not an all-pairs average path length.

    Args:
        graph: Graph to sample from
        sample_count: Number of pairs to draw
        rng: Random source; a fresh unseeded one is used when omitted

    Returns:
        Mean BFS distance over connected sampled pairs, or 0.0 if the graph
        has fewer than two vertices or no sampled pair was connected
    """
    return sample_distances(graph, sample_count, rng).average
