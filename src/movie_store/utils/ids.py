"""
Movie id generation.

Ids are pseudo-random integers rendered in decimal. There is no collision check
against ids already in the collection.
"""

import logging
import random
from typing import Optional

from movie_store.movie_constants import DEFAULT_ID_UPPER_BOUND

logger = logging.getLogger(__name__)


class MovieIdGenerator:
    """
    Draws ids from [0, upper_bound) with a private random.Random instance.

    Args:
        upper_bound: Exclusive upper bound of the drawn integer
        seed: Seed for reproducible ids. If None, the generator is seeded from OS entropy.
    """

    def __init__(self, upper_bound: int = DEFAULT_ID_UPPER_BOUND, seed: Optional[int] = None):
        if upper_bound <= 0:
            raise ValueError(f"upper_bound must be positive, got {upper_bound}")
        self.upper_bound = upper_bound
        self._rng = random.Random(seed)
        if seed is not None:
            logger.info(f"Movie id generator seeded with {seed}")

    def __call__(self) -> str:
        return str(self._rng.randrange(self.upper_bound))
