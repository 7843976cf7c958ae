"""Plot output for trust-network statistics."""

from trustnet.reporting.plots import axis_upper_bound, plot_degree_distribution, plot_trust_correlation

__all__ = ["axis_upper_bound", "plot_degree_distribution", "plot_trust_correlation"]
