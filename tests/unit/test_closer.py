"""Unit tests for border closing."""

import pytest

from waterfront.core.closer import (
    BorderCloser,
    border_side,
    border_sides,
    corner_after,
    on_same_side,
)
from waterfront.domain import BorderSide, Point, Segment, Waterline
from waterfront.exceptions import GeometryError, UnsupportedEndpointConfigurationError


def chain_points(segments: list[Segment]) -> list[Point]:
    """Flatten a chained segment list into its points."""
    return [segments[0].start] + [s.end for s in segments]


class TestBorderSides:
    """Tests for border side helpers."""

    def test_single_sides(self) -> None:
        """Points along a side report that side."""
        assert border_sides(Point(0.0, 25.0), 25.0) == {BorderSide.TOP}
        assert border_sides(Point(25.0, 0.0), 25.0) == {BorderSide.RIGHT}
        assert border_sides(Point(0.0, -25.0), 25.0) == {BorderSide.BOTTOM}
        assert border_sides(Point(-25.0, 0.0), 25.0) == {BorderSide.LEFT}

    def test_corner_has_two_sides(self) -> None:
        """Corners belong to both adjoining sides."""
        assert border_sides(Point(25.0, -25.0), 25.0) == {BorderSide.RIGHT, BorderSide.BOTTOM}

    def test_interior_and_outside_have_none(self) -> None:
        """Points off the border lie on no side."""
        assert border_sides(Point(1.0, 1.0), 25.0) == frozenset()
        assert border_sides(Point(30.0, 25.0), 25.0) == frozenset()

    def test_border_side_rejects_corners(self) -> None:
        """A corner has no single side."""
        with pytest.raises(GeometryError):
            border_side(Point(-25.0, 25.0), 25.0)

    def test_on_same_side(self) -> None:
        """Sharing a border coordinate means sharing a side."""
        assert on_same_side(Point(25.0, 10.0), Point(25.0, -10.0), 25.0)
        assert on_same_side(Point(-3.0, 25.0), Point(7.0, 25.0), 25.0)
        assert not on_same_side(Point(25.0, 10.0), Point(10.0, 25.0), 25.0)
        assert not on_same_side(Point(1.0, 1.0), Point(1.0, 5.0), 25.0)

    def test_corners_follow_clockwise_walk(self) -> None:
        """Walking clockwise off each side reaches the next corner."""
        assert corner_after(BorderSide.TOP, 25.0) == Point(25.0, 25.0)
        assert corner_after(BorderSide.RIGHT, 25.0) == Point(25.0, -25.0)
        assert corner_after(BorderSide.BOTTOM, 25.0) == Point(-25.0, -25.0)
        assert corner_after(BorderSide.LEFT, 25.0) == Point(-25.0, 25.0)


class TestBorderCloser:
    """Tests for BorderCloser."""

    @pytest.fixture
    def closer(self) -> BorderCloser:
        """Create a border closer."""
        return BorderCloser()

    def test_bottom_to_top(self, closer: BorderCloser, radius: float) -> None:
        """Opposite sides are joined through two corners."""
        waterline = Waterline.from_points([Point(0.0, -25.0), Point(0.5, 25.0)])
        segments = closer.close(waterline, radius)

        assert chain_points(segments) == [
            Point(0.5, 25.0),
            Point(25.0, 25.0),
            Point(25.0, -25.0),
            Point(0.0, -25.0),
        ]

    def test_left_to_right(self, closer: BorderCloser, radius: float) -> None:
        """Left and right are opposite sides too."""
        waterline = Waterline.from_points([Point(-25.0, 3.0), Point(0.0, 0.0), Point(25.0, -4.0)])
        segments = closer.close(waterline, radius)

        assert chain_points(segments) == [
            Point(25.0, -4.0),
            Point(25.0, -25.0),
            Point(-25.0, -25.0),
            Point(-25.0, 3.0),
        ]

    def test_quarter_turn(self, closer: BorderCloser, radius: float) -> None:
        """Adjacent sides one corner apart clockwise need one corner."""
        waterline = Waterline.from_points([Point(0.0, -25.0), Point(25.0, 5.0)])
        segments = closer.close(waterline, radius)

        assert len(segments) == 2
        assert chain_points(segments) == [Point(25.0, 5.0), Point(25.0, -25.0), Point(0.0, -25.0)]

    def test_three_quarter_turn(self, closer: BorderCloser, radius: float) -> None:
        """Adjacent sides the long way round need three corners."""
        waterline = Waterline.from_points([Point(0.0, -25.0), Point(-25.0, 5.0)])
        segments = closer.close(waterline, radius)

        assert len(segments) == 4
        assert chain_points(segments) == [
            Point(-25.0, 5.0),
            Point(-25.0, 25.0),
            Point(25.0, 25.0),
            Point(25.0, -25.0),
            Point(0.0, -25.0),
        ]

    def test_corner_to_opposite_corner(self, closer: BorderCloser, radius: float) -> None:
        """Corner endpoints still chain, repeating the corner with a zero-length segment."""
        waterline = Waterline.from_points([Point(25.0, 25.0), Point(-25.0, -25.0)])
        segments = closer.close(waterline, radius)

        assert len(segments) == 3
        assert segments[0] == Segment(Point(-25.0, -25.0), Point(-25.0, -25.0))
        assert segments[0].length == 0.0
        assert segments[1] == Segment(Point(-25.0, -25.0), Point(-25.0, 25.0))
        assert segments[2] == Segment(Point(-25.0, 25.0), Point(25.0, 25.0))

    def test_chain_is_connected(self, closer: BorderCloser, radius: float) -> None:
        """Closing segments lead from the waterline's end back to its start."""
        waterline = Waterline.from_points([Point(3.0, 25.0), Point(0.0, 0.0), Point(-25.0, -7.0)])
        segments = closer.close(waterline, radius)

        assert segments[0].start == waterline.end
        assert segments[-1].end == waterline.start
        for previous, current in zip(segments, segments[1:]):
            assert previous.end == current.start

    def test_same_side_returns_nothing(self, closer: BorderCloser, radius: float) -> None:
        """Endpoints on one side are not closed."""
        waterline = Waterline.from_points([Point(25.0, 10.0), Point(0.0, 0.0), Point(25.0, -10.0)])
        assert closer.close(waterline, radius) == []

    def test_require_closable_rejects_same_side(
        self, closer: BorderCloser, radius: float
    ) -> None:
        """Same side endpoints are reported as unsupported."""
        waterline = Waterline.from_points([Point(25.0, 10.0), Point(0.0, 0.0), Point(25.0, -10.0)])
        with pytest.raises(UnsupportedEndpointConfigurationError) as exc_info:
            closer.require_closable(waterline, radius)
        assert exc_info.value.start == (25.0, 10.0)
        assert exc_info.value.end == (25.0, -10.0)

    def test_require_closable_accepts_other_sides(
        self, closer: BorderCloser, radius: float
    ) -> None:
        """Endpoints on different sides pass."""
        waterline = Waterline.from_points([Point(0.0, -25.0), Point(25.0, 5.0)])
        closer.require_closable(waterline, radius)

    def test_end_off_border(self, closer: BorderCloser, radius: float) -> None:
        """A waterline that stops inside the square cannot be closed."""
        waterline = Waterline.from_points([Point(0.0, -25.0), Point(0.0, 0.0)])
        with pytest.raises(GeometryError, match="not on the border"):
            closer.close(waterline, radius)
