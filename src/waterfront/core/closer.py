"""Border closing for finished waterlines.

A waterline starts at ``p1`` and ends at ``p2``, both on the border of the
square. The closer walks the perimeter clockwise from ``p2`` back to ``p1``,
turning at every corner on the way, so the closing chain plus the waterline
form one simple, clockwise-wound ring.

Walking clockwise visits the sides in the order TOP, RIGHT, BOTTOM, LEFT,
and the corner reached at the end of each side is:

    TOP    -> ( r,  r)
    RIGHT  -> ( r, -r)
    BOTTOM -> (-r, -r)
    LEFT   -> (-r,  r)

Key classes:
- BorderCloser: Produces the closing segment chain
"""

from waterfront.core.geometry import is_on_border
from waterfront.domain import BorderSide, Point, Segment, Waterline
from waterfront.exceptions import GeometryError, UnsupportedEndpointConfigurationError

# Unit corner reached when walking clockwise off the end of each side
CLOCKWISE_CORNERS: dict[BorderSide, tuple[int, int]] = {
    BorderSide.TOP: (1, 1),
    BorderSide.RIGHT: (1, -1),
    BorderSide.BOTTOM: (-1, -1),
    BorderSide.LEFT: (-1, 1),
}


def border_sides(point: Point, radius: float) -> frozenset[BorderSide]:
    """Every side of the square a point lies on.

    Corners lie on two sides, points inside the square on none.
    """
    sides = set()
    if abs(point.y) <= radius and abs(point.x) <= radius:
        if point.y == radius:
            sides.add(BorderSide.TOP)
        if point.x == radius:
            sides.add(BorderSide.RIGHT)
        if point.y == -radius:
            sides.add(BorderSide.BOTTOM)
        if point.x == -radius:
            sides.add(BorderSide.LEFT)
    return frozenset(sides)


def border_side(point: Point, radius: float) -> BorderSide:
    """The single side of the square a point lies on.

    Raises:
        GeometryError: If the point is a corner or not on the border
    """
    sides = border_sides(point, radius)
    if len(sides) != 1:
        raise GeometryError(f"Point ({point.x}, {point.y}) does not lie on exactly one side")
    return next(iter(sides))


def on_same_side(p1: Point, p2: Point, radius: float) -> bool:
    """Check whether two border points share a side of the square."""
    return (p1.x == p2.x and abs(p1.x) == radius) or (p1.y == p2.y and abs(p1.y) == radius)


def corner_after(side: BorderSide, radius: float) -> Point:
    """The corner reached by walking clockwise off the end of a side."""
    sx, sy = CLOCKWISE_CORNERS[side]
    return Point(sx * radius, sy * radius)


class BorderCloser:
    """Closes a waterline by walking the square's border clockwise."""

    def close(self, waterline: Waterline, radius: float) -> list[Segment]:
        """Build the segments leading from the waterline's end back to its start.

        Args:
            waterline: Finished waterline with both ends on the border
            radius: Half the side length of the square

        Returns:
            Chained segments from the waterline's end to its start. Empty when
            both ends lie on the same side, which is unsupported. An end that
            is itself a corner yields a zero-length segment, so that corner
            appears twice in the ring.

        Raises:
            GeometryError: If an end of the waterline is not on the border
        """
        p1, p2 = waterline.start, waterline.end
        for point in (p1, p2):
            if not is_on_border(point, radius):
                raise GeometryError(
                    f"Waterline end ({point.x}, {point.y}) is not on the border"
                )

        if on_same_side(p1, p2, radius):
            return []

        diameter = 2 * radius
        if abs(p1.y - p2.y) == diameter:
            from_side = BorderSide.BOTTOM if p2.y == -radius else BorderSide.TOP
            corner_count = 2
        elif abs(p1.x - p2.x) == diameter:
            from_side = BorderSide.LEFT if p2.x == -radius else BorderSide.RIGHT
            corner_count = 2
        else:
            from_side = border_side(p2, radius)
            corner_count = from_side.clockwise_distance(border_side(p1, radius))

        chain = [p2]
        side = from_side
        for _ in range(corner_count):
            chain.append(corner_after(side, radius))
            side = side.next_clockwise()
        chain.append(p1)

        return [Segment(a, b) for a, b in zip(chain, chain[1:])]

    def require_closable(self, waterline: Waterline, radius: float) -> None:
        """Check that a waterline's ends can be joined along the border.

        Raises:
            UnsupportedEndpointConfigurationError: If both ends share a side
        """
        if on_same_side(waterline.start, waterline.end, radius):
            raise UnsupportedEndpointConfigurationError(
                waterline.start.to_tuple(), waterline.end.to_tuple()
            )
