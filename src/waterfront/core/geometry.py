"""Geometric operations for the square map and its headings.

This module provides core mathematical utilities for:
- Heading calculation and projection
- Circular distance between headings
- Containment, border and clamping tests against the square

Headings are degrees measured from +y, growing clockwise. The heading from
``a`` to ``b`` is ``atan2(dx, dy)``, and a step of length ``d`` at heading
``h`` moves by ``(d * sin(h), d * cos(h))``.

All functions are pure and stateless.
"""

import math

from waterfront.domain import Point


def heading_between(start: Point, end: Point) -> float:
    """Calculate the heading from one point toward another.

    Args:
        start: Origin of the heading
        end: Target of the heading

    Returns:
        Heading in degrees in [0, 360)

    Raises:
        ValueError: If the points coincide

    Examples:
        >>> heading_between(Point(0.0, 0.0), Point(0.0, 1.0))
        0.0
        >>> heading_between(Point(0.0, 0.0), Point(1.0, 0.0))
        90.0
    """
    dx = end.x - start.x
    dy = end.y - start.y
    if dx == 0 and dy == 0:
        raise ValueError("Cannot calculate heading between identical points")
    return math.degrees(math.atan2(dx, dy)) % 360.0


def project(point: Point, heading: float, distance: float) -> Point:
    """Move a point along a heading.

    Args:
        point: Starting point
        heading: Heading in degrees
        distance: Distance to travel

    Returns:
        The projected point
    """
    radians = math.radians(heading)
    return Point(point.x + distance * math.sin(radians), point.y + distance * math.cos(radians))


def angular_difference(a: float, b: float) -> float:
    """Smallest angle between two headings, in [0, 180]."""
    diff = abs(a - b) % 360.0
    return min(diff, 360.0 - diff)


def reverse_heading(heading: int) -> int:
    """Heading pointing back the way a step at ``heading`` came from."""
    return (heading + 180) % 360


def is_inside_square(point: Point, radius: float) -> bool:
    """Check that a point lies strictly inside the square."""
    return abs(point.x) < radius and abs(point.y) < radius


def is_on_border(point: Point, radius: float) -> bool:
    """Check that a point lies exactly on the border of the square."""
    return (abs(point.x) == radius and abs(point.y) <= radius) or (
        abs(point.y) == radius and abs(point.x) <= radius
    )


def is_corner(point: Point, radius: float) -> bool:
    """Check that a point is a corner of the square."""
    return abs(point.x) == radius and abs(point.y) == radius


def clamp_to_square(point: Point, radius: float) -> Point:
    """Clamp each coordinate of a point to [-radius, radius].

    A point outside the square is moved onto its border. Coordinates that
    are already in range are returned untouched.
    """
    return Point(max(-radius, min(radius, point.x)), max(-radius, min(radius, point.y)))
