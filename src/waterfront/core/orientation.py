"""Orientation and segment intersection tests.

Classifies the turn made by three points and decides whether two segments
intersect. Touching and collinear overlap count as intersecting, which is
what the walk builder needs to reject candidates that merely graze an
earlier part of the path.
"""

from collections.abc import Iterable

from waterfront.domain import Orientation, Point, Segment


def orientation(p1: Point, p2: Point, p3: Point) -> Orientation:
    """Classify the turn p1 -> p2 -> p3.

    Uses the sign of the cross product (p2 - p1) x (p3 - p2).

    Args:
        p1: First point
        p2: Second point
        p3: Third point

    Returns:
        COLLINEAR, CLOCKWISE or COUNTER_CLOCKWISE

    Examples:
        >>> orientation(Point(0, 0), Point(1, 0), Point(1, 1))
        <Orientation.COUNTER_CLOCKWISE: 3>
        >>> orientation(Point(0, 0), Point(1, 1), Point(2, 2))
        <Orientation.COLLINEAR: 1>
    """
    cross = (p2.x - p1.x) * (p3.y - p2.y) - (p2.y - p1.y) * (p3.x - p2.x)
    if cross == 0:
        return Orientation.COLLINEAR
    return Orientation.COUNTER_CLOCKWISE if cross > 0 else Orientation.CLOCKWISE


def on_segment(p: Point, q: Point, r: Point) -> bool:
    """Check whether q lies within the bounding box of segment p-r.

    Only meaningful when p, q and r are collinear.
    """
    return min(p.x, r.x) <= q.x <= max(p.x, r.x) and min(p.y, r.y) <= q.y <= max(p.y, r.y)


def segments_intersect(p1: Point, q1: Point, p2: Point, q2: Point) -> bool:
    """Test whether segment p1-q1 intersects segment p2-q2.

    Args:
        p1: Start of the first segment
        q1: End of the first segment
        p2: Start of the second segment
        q2: End of the second segment

    Returns:
        True on a proper crossing, a touch, or a collinear overlap
    """
    o1 = orientation(p1, q1, p2)
    o2 = orientation(p1, q1, q2)
    o3 = orientation(p2, q2, p1)
    o4 = orientation(p2, q2, q1)

    if o1 != o2 and o3 != o4:
        return True

    # Collinear cases: an endpoint lying on the other segment
    if o1 == Orientation.COLLINEAR and on_segment(p1, p2, q1):
        return True
    if o2 == Orientation.COLLINEAR and on_segment(p1, q2, q1):
        return True
    if o3 == Orientation.COLLINEAR and on_segment(p2, p1, q2):
        return True
    if o4 == Orientation.COLLINEAR and on_segment(p2, q1, q2):
        return True

    return False


def segment_intersects(a: Segment, b: Segment) -> bool:
    """Segment-object form of :func:`segments_intersect`."""
    return segments_intersect(a.start, a.end, b.start, b.end)


def segment_crosses_any(candidate: Segment, segments: Iterable[Segment]) -> bool:
    """Check a candidate segment against a collection of segments."""
    return any(segment_intersects(candidate, other) for other in segments)
