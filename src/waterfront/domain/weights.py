"""Weight map over discrete headings.

A heading is an integer number of degrees in [0, 360) that is a multiple of
the bucket resolution. 0 points along +y and angles grow clockwise.
"""

from collections.abc import Iterator, Mapping, Sequence


class WeightMap(Mapping[int, int]):
    """Read-only mapping from heading bucket to integer weight.

    Backed by a fixed-size tuple indexed by bucket, so the domain of the
    mapping is always every bucket of a full turn.

    Example:
        >>> weights = WeightMap([1] * 90, resolution=4)
        >>> weights[8]
        1
        >>> weights.total
        90
    """

    __slots__ = ("_resolution", "_total", "_weights")

    def __init__(self, weights: Sequence[int], resolution: int = 4) -> None:
        """Initialize the weight map.

        Args:
            weights: One weight per bucket, starting at heading 0
            resolution: Bucket size in degrees

        Raises:
            ValueError: If the number of weights does not cover a full turn
        """
        if resolution <= 0 or 360 % resolution != 0:
            raise ValueError(f"Heading resolution must divide 360, got {resolution}")
        if len(weights) != 360 // resolution:
            raise ValueError(
                f"Expected {360 // resolution} weights for resolution {resolution}, "
                f"got {len(weights)}"
            )
        self._weights = tuple(int(w) for w in weights)
        self._resolution = resolution
        self._total = sum(self._weights)

    @property
    def resolution(self) -> int:
        """Bucket size in degrees."""
        return self._resolution

    @property
    def total(self) -> int:
        """Sum of all weights."""
        return self._total

    def is_degenerate(self) -> bool:
        """Check whether no heading can be drawn."""
        return self._total <= 0

    def __getitem__(self, heading: int) -> int:
        if heading % self._resolution != 0 or not 0 <= heading < 360:
            raise KeyError(heading)
        return self._weights[heading // self._resolution]

    def __iter__(self) -> Iterator[int]:
        return iter(range(0, 360, self._resolution))

    def __len__(self) -> int:
        return len(self._weights)

    def __repr__(self) -> str:
        nonzero = {h: w for h, w in self.items() if w}
        return f"WeightMap(resolution={self._resolution}, nonzero={nonzero})"
