"""
Random number source for the search.

Expansion and simulation draw every choice from a single
``random.Random`` stream. The stream is process-wide by default; tests and
reproducible runs either re-seed it or ask for an independent seeded
stream.
"""
import random
from typing import Optional

import numpy as np


_shared_rng = random.Random()


def get_rng() -> random.Random:
    """Return the process-wide random stream."""
    return _shared_rng


def make_rng(seed: Optional[int] = None) -> random.Random:
    """
    Create an independent random stream.

    Args:
        seed: Seed for the stream (None draws one from the OS)

    Returns:
        New random.Random instance
    """
    return random.Random(seed)


def seed_everything(seed: int) -> None:
    """
    Seed the shared stream along with ``random`` and ``numpy.random``.

    Args:
        seed: Random seed
    """
    _shared_rng.seed(seed)
    random.seed(seed)
    np.random.seed(seed)
