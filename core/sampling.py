"""
Bounded Random Sampling

Every synthetic metric in the service is a uniform draw from a closed
interval, rounded to a fixed number of decimals. RangeSampler wraps a
random.Random instance so callers (and tests) control the source.

Example:
    sampler = RangeSampler(seed=42)
    sampler.sample(0.40, 0.60, 2)   # e.g. 0.53
    sampler.sample(200, 600, 0)     # e.g. 417 (int)
"""

import random
from typing import Optional, Sequence, TypeVar, Union

T = TypeVar("T")

Number = Union[int, float]


class RangeSampler:
    """
    Source of bounded random values.

    Attributes:
        rng: The underlying random.Random instance
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the sampler.

        Args:
            seed: Seed for a fresh generator (ignored when rng is given)
            rng: Existing generator to draw from
        """
        self.rng = rng or random.Random(seed)

    def sample(self, lo: Number, hi: Number, decimals: int = 2) -> Number:
        """
        Draw a value uniformly from [lo, hi] and round it.

        Args:
            lo: Lower bound (inclusive)
            hi: Upper bound (inclusive)
            decimals: Decimal places to keep; 0 returns an int

        Returns:
            The rounded value, always inside [lo, hi]

        Raises:
            ValueError: If lo > hi or decimals is negative
        """
        if lo > hi:
            raise ValueError(f"Invalid range: lo={lo} > hi={hi}")
        if decimals < 0:
            raise ValueError(f"decimals must be >= 0, got {decimals}")

        value = self.rng.uniform(lo, hi)
        # Rounding can step just outside the bounds
        value = min(max(round(value, decimals), lo), hi)

        if decimals == 0:
            return int(round(value))
        return value

    def choice(self, options: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence."""
        return self.rng.choice(options)

    def randint(self, lo: int, hi: int) -> int:
        """Integer in [lo, hi]."""
        return self.rng.randint(lo, hi)
