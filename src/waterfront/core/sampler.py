"""Weighted heading sampling.

Draws a single heading from a weight map with probability proportional to
its weight, using a cumulative-weight binary search.
"""

import random
from bisect import bisect_right
from collections.abc import Mapping
from itertools import accumulate

from waterfront.exceptions import InvalidWeightMapError


def sample_heading(weights: Mapping[int, int], rng: random.Random) -> int:
    """Draw one heading with probability proportional to its weight.

    Headings with weight 0 are never returned.

    Args:
        weights: Mapping from heading to non-negative weight
        rng: Random source

    Returns:
        The sampled heading

    Raises:
        InvalidWeightMapError: If the map is empty, has a negative weight,
            or has no positive weight

    Examples:
        >>> sample_heading({0: 0, 90: 1, 180: 3}, random.Random(1)) in (90, 180)
        True
    """
    if not weights:
        raise InvalidWeightMapError("weight map is empty")

    headings = list(weights.keys())
    values = [weights[h] for h in headings]
    if any(w < 0 for w in values):
        raise InvalidWeightMapError("weights must be non-negative")

    cumulative = list(accumulate(values))
    total = cumulative[-1]
    if total <= 0:
        raise InvalidWeightMapError("no heading has a positive weight")

    # bisect_right skips zero-weight headings, whose cumulative value repeats
    target = rng.random() * total
    index = bisect_right(cumulative, target)
    if index == len(headings):
        # Rounding pushed the target onto the total
        index = max(i for i, w in enumerate(values) if w > 0)
    return headings[index]


class WeightedDirectionSampler:
    """Samples headings from weight maps with an owned random source."""

    def __init__(self, rng: random.Random | None = None) -> None:
        """Initialize the sampler.

        Args:
            rng: Random source (a fresh unseeded one if None)
        """
        self.rng = rng if rng is not None else random.Random()

    def sample(self, weights: Mapping[int, int]) -> int:
        """Draw one heading from the given weight map."""
        return sample_heading(weights, self.rng)
