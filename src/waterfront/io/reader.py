"""Water path reader for loading supplied waterlines.

This module provides the WaterPathReader class for loading a waterline from
a JSON file instead of generating one. The file holds a list of points,
each either an ``[x, y]`` pair or an ``{"x": ..., "y": ...}`` object. A
top-level object with a ``"points"`` key is accepted as well, and so is
a file written by PolygonWriter with its waterline included.
"""

import json
from pathlib import Path
from typing import Any

from waterfront.domain import Point
from waterfront.exceptions import WaterPathLoadError


def parse_point(data: Any) -> Point:
    """Convert one JSON value into a point.

    Raises:
        ValueError: If the value is not a point
    """
    if isinstance(data, dict):
        return Point.from_dict(data)
    if isinstance(data, (list, tuple)) and len(data) == 2:
        return Point(float(data[0]), float(data[1]))
    raise ValueError(f"Expected [x, y] or {{'x', 'y'}}, got {data!r}")


class WaterPathReader:
    """Loads a water path from a JSON file.

    Example:
        reader = WaterPathReader(Path("path.json"))
        points = reader.load()
    """

    def __init__(self, path: Path) -> None:
        """Initialize the reader.

        Args:
            path: Path to the JSON file
        """
        self._path = path

    def load(self) -> list[Point]:
        """Load the water path.

        Returns:
            Points of the path in order

        Raises:
            WaterPathLoadError: If the file is missing or malformed
        """
        if not self._path.exists():
            raise WaterPathLoadError(str(self._path), "file not found")

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise WaterPathLoadError(str(self._path), str(e)) from e

        if isinstance(data, dict) and "waterline" in data:
            data = data["waterline"]
        if isinstance(data, dict):
            data = data.get("points")
        if not isinstance(data, list):
            raise WaterPathLoadError(str(self._path), "expected a list of points")

        try:
            return [parse_point(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise WaterPathLoadError(str(self._path), str(e)) from e


def read_water_path(path: Path) -> list[Point]:
    """Load a water path from a JSON file."""
    return WaterPathReader(path).load()
