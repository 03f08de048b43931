"""Shared fixtures for waterfront tests."""

import random
from collections.abc import Mapping

import pytest

from waterfront.core.sampler import WeightedDirectionSampler


class MinimumRandom(random.Random):
    """Random source that always draws the lowest value.

    The sampler then picks the first heading with a positive weight, and
    every step distance is the configured minimum.
    """

    def random(self) -> float:
        return 0.0


class LightestHeadingSampler(WeightedDirectionSampler):
    """Sampler that offers headings from the lightest positive weight upward.

    Each call for the same weight map offers the next heading in
    ``(weight, heading)`` order, so the heading a step accepts is the
    lightest one that was valid. A new weight map starts over.
    """

    def __init__(self) -> None:
        super().__init__(random.Random(0))
        self._weights: Mapping[int, int] | None = None
        self._order: list[int] = []
        self._offered = 0

    def sample(self, weights: Mapping[int, int]) -> int:
        if weights is not self._weights:
            self._weights = weights
            self._order = sorted(
                (h for h, w in weights.items() if w > 0), key=lambda h: (weights[h], h)
            )
            self._offered = 0
        heading = self._order[self._offered % len(self._order)]
        self._offered += 1
        return heading


@pytest.fixture
def minimum_rng() -> MinimumRandom:
    """Random source that always draws the lowest value."""
    return MinimumRandom(0)


@pytest.fixture
def lightest_sampler() -> LightestHeadingSampler:
    """Sampler choosing the lightest valid heading."""
    return LightestHeadingSampler()


@pytest.fixture
def radius() -> float:
    """Default map radius."""
    return 25.0
