"""Tests for domain models to verify they work correctly."""

import pytest

from waterfront.domain import (
    BorderSide,
    Point,
    Polygon,
    Segment,
    Waterline,
    WeightMap,
    WindingDirection,
)


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(3.0, -4.0)
        assert p.x == 3.0
        assert p.y == -4.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(1.5, 2.5).to_tuple() == (1.5, 2.5)

    def test_point_distance(self) -> None:
        """Test Euclidean distance."""
        assert Point(0.0, 0.0).distance_to(Point(3.0, 4.0)) == 5.0

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(10.0, -2.0)
        assert Point.from_dict(p1.to_dict()) == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 3.0  # type: ignore

    def test_points_hashable(self) -> None:
        """Equal points collapse in a set."""
        assert len({Point(1.0, 1.0), Point(1.0, 1.0), Point(2.0, 1.0)}) == 2


class TestSegment:
    """Tests for Segment class."""

    def test_length(self) -> None:
        """Test segment length."""
        assert Segment(Point(0, 0), Point(0, 2)).length == 2.0

    def test_with_end(self) -> None:
        """Test replacing the end point."""
        seg = Segment(Point(0, 0), Point(1, 2)).with_end(Point(5, 5))
        assert seg.start == Point(0, 0)
        assert seg.end == Point(5, 5)

    def test_segment_serialization(self) -> None:
        """Test segment serialization and deserialization."""
        seg = Segment(Point(0, 1), Point(2, 3))
        assert Segment.from_dict(seg.to_dict()) == seg


class TestBorderSide:
    """Tests for BorderSide enum."""

    def test_clockwise_order(self) -> None:
        """Sides follow each other clockwise."""
        assert BorderSide.TOP.next_clockwise() == BorderSide.RIGHT
        assert BorderSide.RIGHT.next_clockwise() == BorderSide.BOTTOM
        assert BorderSide.BOTTOM.next_clockwise() == BorderSide.LEFT
        assert BorderSide.LEFT.next_clockwise() == BorderSide.TOP

    def test_clockwise_distance(self) -> None:
        """Count corners passed walking clockwise."""
        assert BorderSide.BOTTOM.clockwise_distance(BorderSide.LEFT) == 1
        assert BorderSide.BOTTOM.clockwise_distance(BorderSide.TOP) == 2
        assert BorderSide.BOTTOM.clockwise_distance(BorderSide.RIGHT) == 3
        assert BorderSide.TOP.clockwise_distance(BorderSide.TOP) == 0


class TestWeightMap:
    """Tests for WeightMap class."""

    def test_full_turn_of_buckets(self) -> None:
        """A 4 degree map has 90 buckets keyed 0, 4, ..., 356."""
        weights = WeightMap([1] * 90, resolution=4)
        assert len(weights) == 90
        assert list(weights)[:3] == [0, 4, 8]
        assert list(weights)[-1] == 356
        assert weights.total == 90

    def test_lookup(self) -> None:
        """Weights are looked up by heading."""
        values = [0] * 90
        values[45] = 7
        weights = WeightMap(values, resolution=4)
        assert weights[180] == 7
        assert weights[0] == 0

    def test_unknown_heading_raises_key_error(self) -> None:
        """Headings off the bucket grid are not keys."""
        weights = WeightMap([1] * 90, resolution=4)
        with pytest.raises(KeyError):
            weights[3]
        with pytest.raises(KeyError):
            weights[360]

    def test_wrong_bucket_count_rejected(self) -> None:
        """The weights must cover a full turn."""
        with pytest.raises(ValueError):
            WeightMap([1] * 10, resolution=4)

    def test_degenerate(self) -> None:
        """An all-zero map is degenerate."""
        assert WeightMap([0] * 90, resolution=4).is_degenerate()
        assert not WeightMap([0] * 89 + [1], resolution=4).is_degenerate()


class TestWaterline:
    """Tests for Waterline class."""

    def test_from_points(self) -> None:
        """Test building a waterline through points."""
        line = Waterline.from_points([Point(0, -5), Point(0, 0), Point(5, 0)])
        assert len(line) == 2
        assert line.start == Point(0, -5)
        assert line.end == Point(5, 0)
        assert line.points == [Point(0, -5), Point(0, 0), Point(5, 0)]
        assert line.length == 10.0

    def test_unchained_segments_rejected(self) -> None:
        """Segments must share endpoints."""
        with pytest.raises(ValueError):
            Waterline((Segment(Point(0, 0), Point(1, 0)), Segment(Point(2, 0), Point(3, 0))))

    def test_empty_rejected(self) -> None:
        """A waterline needs a segment."""
        with pytest.raises(ValueError):
            Waterline(())
        with pytest.raises(ValueError):
            Waterline.from_points([Point(0, 0)])


class TestPolygon:
    """Tests for Polygon class."""

    def test_signed_area_clockwise(self) -> None:
        """Clockwise rings have negative area."""
        ring = Polygon((Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0), Point(0, 0)))
        assert ring.signed_area() == -100.0
        assert ring.area == 100.0
        assert ring.winding == WindingDirection.CLOCKWISE

    def test_signed_area_counterclockwise(self) -> None:
        """Counter-clockwise rings have positive area."""
        ring = Polygon((Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10), Point(0, 0)))
        assert ring.signed_area() == 100.0
        assert ring.winding == WindingDirection.COUNTER_CLOCKWISE

    def test_edges_and_closure(self) -> None:
        """Edges join consecutive points and the ring is closed."""
        ring = Polygon((Point(0, 0), Point(0, 1), Point(1, 0), Point(0, 0)))
        assert ring.is_closed()
        assert len(ring.edges) == 3
        assert ring.edges[-1] == Segment(Point(1, 0), Point(0, 0))

    def test_to_dict(self) -> None:
        """Serialized polygons carry area and winding."""
        ring = Polygon((Point(0, 0), Point(0, 1), Point(1, 0), Point(0, 0)))
        data = ring.to_dict()
        assert len(data["points"]) == 4
        assert data["area"] == 0.5
        assert data["winding"] == "clockwise"
