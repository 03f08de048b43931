"""Core geometric types for waterline representation.

This module defines the fundamental geometric types used throughout waterfront:
- Point: An immutable 2D point
- Segment: A directed line segment between two points
- Orientation: Turn direction of three points
- BorderSide: A side of the square map, in clockwise order
"""

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class Orientation(Enum):
    """Turn direction of an ordered triple of points.

    Measured with the y axis pointing up, so a left turn is
    counter-clockwise.
    """

    COLLINEAR = auto()
    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


class BorderSide(Enum):
    """A side of the square map.

    Members are declared in clockwise order starting from the top, so walking
    the perimeter clockwise visits them in declaration order.
    """

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    def next_clockwise(self) -> "BorderSide":
        """Return the side reached by walking clockwise past this side's end."""
        sides = list(BorderSide)
        return sides[(sides.index(self) + 1) % len(sides)]

    def clockwise_distance(self, other: "BorderSide") -> int:
        """Count the corners passed walking clockwise from this side to other."""
        sides = list(BorderSide)
        return (sides.index(other) - sides.index(self)) % len(sides)


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable; equality is coordinate equality.

    Attributes:
        x: X coordinate in map units
        y: Y coordinate in map units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True, slots=True)
class Segment:
    """A directed line segment.

    Direction matters: headings are measured from start to end, and the
    waterline and closing chain rely on consistent ordering.

    Attributes:
        start: First endpoint
        end: Second endpoint
    """

    start: Point
    end: Point

    @property
    def length(self) -> float:
        """Length of the segment."""
        return self.start.distance_to(self.end)

    def with_end(self, end: Point) -> "Segment":
        """Return a copy of this segment ending at another point."""
        return Segment(self.start, end)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with start and end points
        """
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Segment":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with start and end points

        Returns:
            Segment instance
        """
        return cls(start=Point.from_dict(data["start"]), end=Point.from_dict(data["end"]))
