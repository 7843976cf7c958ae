"""Structural statistics over trust graphs."""

from trustnet.analysis.degree import degree_distribution
from trustnet.analysis.sampler import SampleResult, average_distance, sample_distances
from trustnet.analysis.trust import TrustPoint, trust_correlation_data

__all__ = [
    "degree_distribution",
    "SampleResult",
    "average_distance",
    "sample_distances",
    "TrustPoint",
    "trust_correlation_data",
]
