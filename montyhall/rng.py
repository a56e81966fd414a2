"""
montyhall/rng.py - Random Source Handles

Every random draw in the package goes through an explicit
numpy.random.Generator. No module touches global random state.
"""

from typing import List, Optional

import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Build a generator; seed=None draws fresh OS entropy."""
    return np.random.default_rng(seed)


def ensure_rng(rng: Optional[np.random.Generator] = None) -> np.random.Generator:
    """Return rng unchanged, or a freshly seeded generator when None."""
    if rng is None:
        return make_rng()
    return rng


def spawn_rngs(seed: Optional[int], count: int) -> List[np.random.Generator]:
    """
    Derive independent, non-overlapping generators from one seed.

    Args:
        seed: Root seed (None for OS entropy)
        count: Number of streams

    Returns:
        List of count generators built from SeedSequence.spawn
    """
    children = np.random.SeedSequence(seed).spawn(count)
    return [np.random.default_rng(child) for child in children]
