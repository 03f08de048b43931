"""Waterfront generation pipeline.

This module coordinates the full workflow: pick a start point on the border,
walk the waterline (or take a supplied one), close it along the border and
assemble the polygon. Failed walks are retried from a new start point.

Key components:
- random_start_point: Uniform random point on the border, corners excluded
- WaterfrontGenerator: Main orchestrator class
- generate_waterfront_shape: Convenience function returning ring points
"""

import math
import random
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

import structlog

from waterfront.config import WaterfrontSettings, get_default_settings
from waterfront.core.assembler import PolygonAssembler
from waterfront.core.closer import BorderCloser
from waterfront.core.geometry import is_on_border
from waterfront.core.sampler import WeightedDirectionSampler
from waterfront.core.smoothing import smooth_waterline
from waterfront.core.walker import RandomWalkPathBuilder
from waterfront.domain import Point, Polygon, Segment, Waterline
from waterfront.exceptions import (
    GenerationFailedError,
    InvalidWaterPathError,
    InvalidWeightMapError,
    PathGenerationStalledError,
)
from waterfront.utils import GenerationLogger, GenerationStats


def random_start_point(radius: float, rng: random.Random) -> Point:
    """Pick a random point on the border of the square.

    A side is chosen uniformly (right, bottom, left, top), then a position
    along it. Corners are excluded because they belong to two sides.

    Args:
        radius: Half the side length of the square
        rng: Random source

    Returns:
        Point on exactly one side of the square
    """
    side = rng.randrange(4)
    offset = rng.uniform(-radius, radius)
    if abs(offset) >= radius:
        offset = math.copysign(math.nextafter(radius, 0.0), offset)

    if side == 0:
        return Point(radius, offset)
    elif side == 1:
        return Point(offset, -radius)
    elif side == 2:
        return Point(-radius, offset)
    else:
        return Point(offset, radius)


@dataclass
class WaterfrontResult:
    """Everything produced by one generation.

    Attributes:
        polygon: Closed ring of the water body
        waterline: The open path the ring was built from
        border_segments: Segments closing the waterline along the border
        stats: Generation statistics
    """

    polygon: Polygon
    waterline: Waterline
    border_segments: list[Segment]
    stats: GenerationStats = field(default_factory=GenerationStats)

    @property
    def points(self) -> list[Point]:
        """Ring points of the polygon."""
        return list(self.polygon.points)


class WaterfrontGenerator:
    """Orchestrates waterfront polygon generation.

    Manages the complete workflow:
    1. Choose a random start point on the border
    2. Walk the waterline, retrying stalled walks from a new start point
    3. Optionally smooth the waterline
    4. Close the waterline along the border
    5. Assemble the polygon

    Example:
        settings = WaterfrontSettings()
        generator = WaterfrontGenerator(settings)
        result = generator.generate(radius=25.0)
    """

    def __init__(
        self,
        settings: WaterfrontSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
        rng: random.Random | None = None,
        sampler: WeightedDirectionSampler | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            settings: Waterfront settings (defaults if None)
            logger: Structured logger (the "waterfront" logger if None)
            rng: Random source (seeded from settings if None)
            sampler: Heading sampler for the walk (draws from rng if None)
        """
        self.settings = settings if settings is not None else get_default_settings()
        self.rng = rng if rng is not None else random.Random(self.settings.generation.seed)
        self.logger = logger if logger is not None else structlog.get_logger("waterfront")
        self.sampler = sampler
        self.closer = BorderCloser()
        self.assembler = PolygonAssembler()

    def generate(
        self,
        radius: float | None = None,
        water_path: Sequence[Point] | None = None,
        start_point: Point | None = None,
    ) -> WaterfrontResult:
        """Generate a waterfront polygon.

        Args:
            radius: Half the side length of the square (settings value if None)
            water_path: Supplied waterline points; skips the random walk
            start_point: Fixed start point for the walk (random if None)

        Returns:
            The polygon with the waterline and closing segments it came from

        Raises:
            ValueError: If the radius is not positive
            InvalidWaterPathError: If the supplied path does not start and end on the border
            UnsupportedEndpointConfigurationError: If the waterline ends on its start side
            GenerationFailedError: If every walk attempt failed
        """
        radius = radius if radius is not None else self.settings.generation.radius
        if radius <= 0:
            raise ValueError(f"Radius must be positive, got {radius}")

        events = GenerationLogger(self.logger)
        events.stats.start_time = time.time()

        if water_path is not None:
            waterline = self._waterline_from_path(water_path, radius)
            events.stats.waterline_length = waterline.length
        else:
            waterline = self._walk(radius, events, start_point)

        tolerance = self.settings.generation.smoothing_tolerance
        if tolerance is not None:
            waterline = smooth_waterline(waterline, tolerance)
            events.stats.waterline_length = waterline.length

        self.closer.require_closable(waterline, radius)
        border_segments = self.closer.close(waterline, radius)
        polygon = self.assembler.assemble(waterline, border_segments)

        events.stats.end_time = time.time()
        self.logger.info(
            "Waterfront generated",
            radius=radius,
            points=len(polygon.points),
            border_segments=len(border_segments),
            area=round(polygon.area, 3),
            attempts=events.stats.path_attempts,
        )

        return WaterfrontResult(
            polygon=polygon,
            waterline=waterline,
            border_segments=border_segments,
            stats=events.stats,
        )

    def _walk(
        self, radius: float, events: GenerationLogger, start_point: Point | None
    ) -> Waterline:
        """Run the random walk, retrying failed attempts."""
        builder = RandomWalkPathBuilder(
            self.settings.walk, rng=self.rng, events=events, sampler=self.sampler
        )
        max_retries = self.settings.generation.max_retries
        last_error: Exception | None = None

        for attempt in range(1, max_retries + 1):
            start = start_point if start_point is not None else random_start_point(radius, self.rng)
            events.log_attempt_start(attempt, start.x, start.y)
            try:
                return builder.build_waterline(start, radius)
            except (PathGenerationStalledError, InvalidWeightMapError) as e:
                events.log_attempt_failed(attempt, e)
                last_error = e

        raise GenerationFailedError(max_retries, str(last_error)) from last_error

    def _waterline_from_path(self, water_path: Sequence[Point], radius: float) -> Waterline:
        """Validate a supplied path and turn it into a waterline."""
        if len(water_path) < 2:
            raise InvalidWaterPathError(f"need at least 2 points, got {len(water_path)}")
        for label, point in (("first", water_path[0]), ("last", water_path[-1])):
            if not is_on_border(point, radius):
                raise InvalidWaterPathError(
                    f"{label} point ({point.x}, {point.y}) is not on the border of radius {radius}"
                )
        return Waterline.from_points(list(water_path))


def generate_waterfront_shape(
    radius: float,
    water_path: Sequence[Point] | None = None,
    seed: int | None = None,
) -> list[Point]:
    """Generate the ring points of a waterfront polygon.

    Args:
        radius: Half the side length of the square
        water_path: Supplied waterline points; skips the random walk
        seed: Random seed (None = nondeterministic)

    Returns:
        Closed ring of points, last equal to first
    """
    settings = get_default_settings()
    settings.generation.seed = seed
    return WaterfrontGenerator(settings).generate(radius, water_path=water_path).points
