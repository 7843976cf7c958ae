"""Random source construction."""

import random
from typing import Optional


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create an independent random generator.

    Args:
        seed: Seed for reproducible sampling, or None for OS entropy

    Returns:
        A random.Random instance that shares no state with the random module
    """
    return random.Random(seed)
