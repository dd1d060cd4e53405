"""Reproducibility utilities for seeded scenarios."""

import random
import numpy as np
from typing import Optional


def set_all_seeds(seed: Optional[int] = None) -> np.random.Generator:
    """Seed the global generators and return a generator for scenarios.

    Args:
        seed: Random seed; None leaves the global state alone and returns
            an entropy-seeded generator

    Returns:
        numpy Generator to pass to scenario construction
    """
    if seed is not None:
        random.seed(seed)
        np.random.seed(seed)
    return np.random.default_rng(seed)
