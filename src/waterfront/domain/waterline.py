"""Waterline and polygon types.

This module defines the two products of generation:
- Waterline: The open chain of segments drawn by the random walk
- Polygon: The closed ring formed by a waterline and the border that closes it
- WindingDirection: Enum for polygon winding direction
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from waterfront.domain.geometry import Point, Segment


class WindingDirection(Enum):
    """Polygon winding direction, with the y axis pointing up."""

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True)
class Waterline:
    """An open chain of segments.

    Each segment starts where the previous one ends.

    Attributes:
        segments: Segments in path order
    """

    segments: tuple[Segment, ...]

    def __post_init__(self) -> None:
        if not self.segments:
            raise ValueError("A waterline requires at least one segment")
        for previous, current in zip(self.segments, self.segments[1:]):
            if previous.end != current.start:
                raise ValueError(
                    f"Segments are not chained: {previous.end} != {current.start}"
                )

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> "Waterline":
        """Build a waterline through consecutive points.

        Args:
            points: At least two points in path order

        Returns:
            Waterline instance
        """
        if len(points) < 2:
            raise ValueError("A waterline requires at least two points")
        return cls(tuple(Segment(a, b) for a, b in zip(points, points[1:])))

    @property
    def start(self) -> Point:
        """First point of the waterline."""
        return self.segments[0].start

    @property
    def end(self) -> Point:
        """Last point of the waterline."""
        return self.segments[-1].end

    @property
    def points(self) -> list[Point]:
        """All points of the waterline in path order."""
        return [self.start] + [segment.end for segment in self.segments]

    @property
    def length(self) -> float:
        """Total length of the waterline."""
        return sum(segment.length for segment in self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the waterline points
        """
        return {"points": [p.to_dict() for p in self.points]}


@dataclass(frozen=True)
class Polygon:
    """A closed ring of points.

    The last point repeats the first, so consecutive points describe every
    edge of the ring including the closing one.

    Attributes:
        points: Ring points, first and last equal
    """

    points: tuple[Point, ...]

    def signed_area(self) -> float:
        """Calculate signed area using shoelace formula.

        The sign of the area indicates winding direction:
        - Positive area: counter-clockwise winding
        - Negative area: clockwise winding

        Returns:
            Signed area of the polygon
        """
        n = len(self.points)
        if n < 3:
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += self.points[i].x * self.points[j].y
            area -= self.points[j].x * self.points[i].y

        return area / 2.0

    @property
    def area(self) -> float:
        """Unsigned area of the polygon."""
        return abs(self.signed_area())

    @property
    def winding(self) -> WindingDirection:
        """Winding direction of the ring."""
        if self.signed_area() < 0:
            return WindingDirection.CLOCKWISE
        return WindingDirection.COUNTER_CLOCKWISE

    @property
    def edges(self) -> list[Segment]:
        """Edges between consecutive points."""
        return [Segment(a, b) for a, b in zip(self.points, self.points[1:])]

    def is_closed(self) -> bool:
        """Check that the ring ends where it starts."""
        return len(self.points) > 2 and self.points[0] == self.points[-1]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with ring points, area and winding
        """
        return {
            "points": [p.to_dict() for p in self.points],
            "area": self.area,
            "winding": self.winding.name.lower(),
        }
