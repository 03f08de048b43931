"""Quadratic Bezier smoothing of waterlines.

Each interior vertex of a waterline becomes the control point of a quadratic
curve running between the midpoints of its two segments. The ends of the
waterline are kept, so a smoothed waterline closes along the border exactly
like the raw one.

Every curve stays inside the triangle formed by its control points, which
keeps interior points strictly inside the square. Curves of nearby vertices
can still meet, so the smoothed line is checked for crossings and the raw
waterline is kept when it fails.
"""

import math

import structlog

from waterfront.core.orientation import segment_crosses_any
from waterfront.domain import Point, Segment, Waterline

logger = structlog.get_logger(__name__)

MAX_SUBDIVISION_DEPTH = 8


def midpoint(a: Point, b: Point) -> Point:
    """Point halfway between two points."""
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def flatten_quadratic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    Args:
        points: List of 3 control points [p0, p1, p2]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, both ends included
    """
    p0, p1, p2 = points

    # Curve point at t=0.5
    curve_mid = Point(0.25 * p0.x + 0.5 * p1.x + 0.25 * p2.x, 0.25 * p0.y + 0.5 * p1.y + 0.25 * p2.y)
    chord_mid = midpoint(p0, p2)

    if depth >= MAX_SUBDIVISION_DEPTH or math.hypot(
        curve_mid.x - chord_mid.x, curve_mid.y - chord_mid.y
    ) <= tolerance:
        return [p0, p2]

    left = flatten_quadratic([p0, midpoint(p0, p1), curve_mid], tolerance, depth + 1)
    right = flatten_quadratic([curve_mid, midpoint(p1, p2), p2], tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def smoothed_points(waterline: Waterline, tolerance: float) -> list[Point]:
    """Points of the smoothed waterline, ends unchanged.

    Args:
        waterline: Waterline to smooth
        tolerance: Maximum distance of the flattened curves from the true curves

    Returns:
        Points of the smoothed path in order
    """
    points = waterline.points
    if len(points) < 3:
        return points

    mids = [midpoint(a, b) for a, b in zip(points, points[1:])]
    result = [points[0], mids[0]]
    for i in range(1, len(points) - 1):
        curve = flatten_quadratic([mids[i - 1], points[i], mids[i]], tolerance)
        result.extend(curve[1:])
    result.append(points[-1])

    deduplicated = [result[0]]
    for point in result[1:]:
        if point != deduplicated[-1]:
            deduplicated.append(point)
    return deduplicated


def smooth_waterline(waterline: Waterline, tolerance: float) -> Waterline:
    """Smooth a waterline, keeping it when smoothing would make it cross itself.

    Args:
        waterline: Waterline to smooth
        tolerance: Maximum distance of the flattened curves from the true curves

    Returns:
        The smoothed waterline, or the given one if the smoothed path crosses itself
    """
    points = smoothed_points(waterline, tolerance)
    segments = [Segment(a, b) for a, b in zip(points, points[1:])]

    for i, segment in enumerate(segments[2:], start=2):
        if segment_crosses_any(segment, segments[: i - 1]):
            logger.debug("Smoothed waterline crosses itself, keeping raw waterline", segment=i)
            return waterline

    return Waterline(tuple(segments))
