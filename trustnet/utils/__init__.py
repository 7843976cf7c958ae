"""Utility functions for trustnet."""

from trustnet.utils.log import setup_logging
from trustnet.utils.seed import make_rng

__all__ = ["setup_logging", "make_rng"]
