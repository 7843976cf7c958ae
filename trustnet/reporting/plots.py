"""Plot rendering for degree and trust statistics."""

import logging
from pathlib import Path
from typing import Iterable, Mapping, Sequence, Union

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from trustnet.analysis.trust import TrustPoint

logger = logging.getLogger(__name__)

FIGSIZE = (6.4, 4.8)  # 640x480 at 100 dpi


def axis_upper_bound(values: Iterable[float]) -> float:
    """Upper axis limit: the largest finite value plus one.

    NaNs are ignored; with no usable values the bound is 1.0.
    """
    data = np.asarray(list(values), dtype=float)
    data = data[~np.isnan(data)]
    if data.size == 0:
        return 1.0
    return float(data.max()) + 1.0


def plot_degree_distribution(
    distribution: Mapping[int, int],
    output_path: Union[str, Path],
    max_degree: int = 120
) -> Path:
    """Save a histogram of vertex counts per degree.

    Args:
        distribution: Mapping from degree to vertex count
        output_path: Image file to write
        max_degree: Upper limit of the degree axis

    Returns:
        Path of the written image
    """
    output_path = Path(output_path)
    degrees = sorted(distribution)
    counts = [distribution[d] for d in degrees]

    fig, ax = plt.subplots(figsize=FIGSIZE)
    ax.bar(degrees, counts, width=1.0, align="edge", color="#0000FF")
    ax.set_xlim(0, max_degree)
    ax.set_ylim(0, max(counts, default=0) + 1)
    ax.set_title("Degree Distribution Histogram")
    ax.set_xlabel("Degree")
    ax.set_ylabel("Count")

    fig.savefig(output_path, bbox_inches="tight")
    plt.close(fig)
    logger.info("Saved degree histogram to %s", output_path)
    return output_path


def plot_trust_correlation(
    points: Sequence[TrustPoint],
    output_path: Union[str, Path]
) -> Path:
    """Save a scatter of average issued trust against degree.

    Args:
        points: Per-vertex trust summaries
        output_path: Image file to write

    Returns:
        Path of the written image
    """
    output_path = Path(output_path)
    xs = [p.average_trust for p in points]
    ys = [p.degree for p in points]

    fig, ax = plt.subplots(figsize=FIGSIZE)
    ax.scatter(xs, ys, s=9, color="#00FF00")
    # Trust ratings can be negative, so only the upper bound is data driven
    ax.set_xlim(min(0.0, min(xs, default=0.0) - 1.0), axis_upper_bound(xs))
    ax.set_ylim(0, axis_upper_bound(ys))
    ax.set_title("Average Trust vs Degree")
    ax.set_xlabel("Average Trust")
    ax.set_ylabel("Degree")

    fig.savefig(output_path, bbox_inches="tight")
    plt.close(fig)
    logger.info("Saved trust scatter to %s", output_path)
    return output_path
