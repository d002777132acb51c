"""
Random source helpers.

Every clusterer owns its own ``numpy.random.Generator`` so that parallel
searches never share one generator.
"""
from typing import Optional, Sequence, TypeVar

import numpy as np

from routeclusters.config import settings

T = TypeVar("T")


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a generator seeded with ``seed`` or, if None, ``settings.RANDOM_SEED``."""
    if seed is None:
        seed = settings.RANDOM_SEED
    return np.random.default_rng(seed)


def next_item(items: Sequence[T], rng: np.random.Generator) -> Optional[T]:
    """Pick one element uniformly at random, or None for an empty sequence."""
    if not items:
        return None
    return items[int(rng.integers(len(items)))]
