"""Trust rating vs connectivity per rating vertex."""

from typing import Dict, List, NamedTuple

import numpy as np

from trustnet.core.types import EdgeList, VertexId


class TrustPoint(NamedTuple):
    """Outgoing-rating summary for one vertex."""

    vertex: VertexId
    degree: int
    average_trust: float


def trust_correlation_data(edges: EdgeList) -> List[TrustPoint]:
    """Summarize the ratings each vertex has issued.

    Only outgoing ratings are considered: a vertex that never appears as a
    source has no point.

    Args:
        edges: Sequence of (source, target, weight) triples

    Returns:
        One TrustPoint per source vertex, in order of first appearance
    """
    ratings: Dict[VertexId, List[int]] = {}
    for source, _target, weight in edges:
        ratings.setdefault(source, []).append(weight)

    return [
        TrustPoint(vertex=vertex, degree=len(weights), average_trust=float(np.mean(weights)))
        for vertex, weights in ratings.items()
    ]
