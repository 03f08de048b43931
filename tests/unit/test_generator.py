"""Unit tests for the waterfront generator."""

import random

import pytest

from waterfront.config import (
    GenerationConfig,
    WalkConfig,
    WaterfrontSettings,
    get_default_settings,
)
from waterfront.core.closer import border_sides
from waterfront.core.generator import (
    WaterfrontGenerator,
    generate_waterfront_shape,
    random_start_point,
)
from waterfront.domain import Point, WindingDirection
from waterfront.exceptions import (
    GenerationFailedError,
    InvalidWaterPathError,
    PathGenerationStalledError,
    UnsupportedEndpointConfigurationError,
)


@pytest.fixture
def water_path() -> list[Point]:
    """Hand-drawn waterline from the bottom to the top."""
    return [Point(0.0, -25.0), Point(1.0, -10.0), Point(-1.0, 10.0), Point(0.0, 25.0)]


class TestRandomStartPoint:
    """Tests for random_start_point."""

    @pytest.mark.parametrize("seed", range(20))
    def test_lies_on_exactly_one_side(self, seed: int, radius: float) -> None:
        """Start points are on the border and never a corner."""
        point = random_start_point(radius, random.Random(seed))
        assert len(border_sides(point, radius)) == 1

    def test_covers_every_side(self, radius: float) -> None:
        """All four sides are used."""
        rng = random.Random(99)
        sides = set()
        for _ in range(200):
            sides |= border_sides(random_start_point(radius, rng), radius)
        assert len(sides) == 4

    def test_deterministic(self, radius: float) -> None:
        """Equal seeds give equal start points."""
        assert random_start_point(radius, random.Random(5)) == random_start_point(
            radius, random.Random(5)
        )


class TestWaterfrontGenerator:
    """Tests for WaterfrontGenerator."""

    def test_minimum_draws(self, minimum_rng: random.Random, radius: float) -> None:
        """The fully determined walk closes through the two right corners."""
        generator = WaterfrontGenerator(rng=minimum_rng)
        result = generator.generate(radius, start_point=Point(0.0, -25.0))

        assert len(result.waterline) == 26
        assert [s.end for s in result.border_segments] == [
            Point(25.0, 25.0),
            Point(25.0, -25.0),
            Point(0.0, -25.0),
        ]
        assert len(result.points) == 30
        assert result.polygon.is_closed()
        assert result.polygon.winding == WindingDirection.CLOCKWISE
        assert result.polygon.area == pytest.approx(1216.98, abs=0.1)
        assert result.stats.path_attempts == 1
        assert result.stats.failed_attempts == 0

    def test_supplied_water_path(self, water_path: list[Point], radius: float) -> None:
        """A supplied path skips the walk and is closed as given."""
        result = WaterfrontGenerator().generate(radius, water_path=water_path)

        assert result.waterline.points == water_path
        assert result.points[:4] == water_path
        assert result.points[-1] == water_path[0]
        assert result.polygon.area == pytest.approx(1250.0)
        assert result.stats.path_attempts == 0

    def test_smoothed_water_path(self, water_path: list[Point], radius: float) -> None:
        """Smoothing rounds the bends and leaves the border ends alone."""
        settings = WaterfrontSettings(generation=GenerationConfig(smoothing_tolerance=0.05))
        result = WaterfrontGenerator(settings).generate(radius, water_path=water_path)

        assert result.waterline.start == water_path[0]
        assert result.waterline.end == water_path[-1]
        assert len(result.waterline) > 3
        assert Point(1.0, -10.0) not in result.waterline.points
        assert result.polygon.is_closed()
        assert result.polygon.winding == WindingDirection.CLOCKWISE
        assert result.polygon.area == pytest.approx(1250.0, abs=10.0)
        assert result.stats.waterline_length == pytest.approx(result.waterline.length)

    def test_smoothing_off_by_default(self, water_path: list[Point], radius: float) -> None:
        """Without a tolerance the path is used unchanged."""
        assert get_default_settings().generation.smoothing_tolerance is None
        result = WaterfrontGenerator().generate(radius, water_path=water_path)
        assert result.waterline.points == water_path

    def test_water_path_too_short(self, radius: float) -> None:
        """One point is not a path."""
        with pytest.raises(InvalidWaterPathError, match="at least 2"):
            WaterfrontGenerator().generate(radius, water_path=[Point(0.0, -25.0)])

    def test_water_path_must_touch_border(self, radius: float) -> None:
        """Both ends of a supplied path lie on the border."""
        with pytest.raises(InvalidWaterPathError, match="last point"):
            WaterfrontGenerator().generate(
                radius, water_path=[Point(0.0, -25.0), Point(0.0, 0.0)]
            )

    def test_water_path_on_one_side(self, radius: float) -> None:
        """A path returning to its start side is unsupported."""
        path = [Point(25.0, 10.0), Point(0.0, 0.0), Point(25.0, -10.0)]
        with pytest.raises(UnsupportedEndpointConfigurationError):
            WaterfrontGenerator().generate(radius, water_path=path)

    def test_radius_must_be_positive(self) -> None:
        """A zero radius map does not exist."""
        with pytest.raises(ValueError, match="positive"):
            WaterfrontGenerator().generate(0.0)

    def test_radius_defaults_from_settings(self, water_path: list[Point]) -> None:
        """Without an explicit radius the configured one is used."""
        scaled = [Point(p.x * 2, p.y * 2) for p in water_path]
        settings = WaterfrontSettings(generation=GenerationConfig(radius=50.0))
        result = WaterfrontGenerator(settings).generate(water_path=scaled)
        assert result.polygon.area == pytest.approx(5000.0)

    def test_retries_then_fails(self, minimum_rng: random.Random, radius: float) -> None:
        """Every stalled walk is retried until the retry budget runs out."""
        settings = WaterfrontSettings(
            walk=WalkConfig(max_attempts=5),
            generation=GenerationConfig(max_retries=3),
        )
        generator = WaterfrontGenerator(settings, rng=minimum_rng)

        with pytest.raises(GenerationFailedError) as exc_info:
            generator.generate(radius, start_point=Point(-25.0, 0.0))

        assert exc_info.value.attempts == 3
        assert isinstance(exc_info.value.__cause__, PathGenerationStalledError)

    def test_seeded_generation_is_deterministic(self, radius: float) -> None:
        """Equal seeds give equal polygons."""
        settings = WaterfrontSettings(generation=GenerationConfig(seed=11))
        first = WaterfrontGenerator(settings).generate(radius)
        second = WaterfrontGenerator(settings).generate(radius)
        assert first.points == second.points


class TestGenerateWaterfrontShape:
    """Tests for the convenience function."""

    def test_returns_closed_ring(self, radius: float) -> None:
        """The ring ends where it starts."""
        points = generate_waterfront_shape(radius, seed=3)
        assert points[0] == points[-1]
        assert len(points) >= 5

    def test_with_water_path(self, water_path: list[Point], radius: float) -> None:
        """A supplied path is closed directly."""
        points = generate_waterfront_shape(radius, water_path=water_path)
        assert points == water_path + [Point(25.0, 25.0), Point(25.0, -25.0), Point(0.0, -25.0)]
