"""Polygon writer for saving generated waterfronts.

This module provides the PolygonWriter class for writing a generated
waterfront as JSON for the mesh-building layer.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from waterfront import __version__
from waterfront.core.generator import WaterfrontResult
from waterfront.exceptions import PolygonSaveError


def result_to_dict(result: WaterfrontResult, radius: float, include_waterline: bool) -> dict[str, Any]:
    """Serialize a generation result.

    Args:
        result: Generation result to serialize
        radius: Half the side length of the square
        include_waterline: Whether to include the open waterline

    Returns:
        JSON-ready dictionary
    """
    data: dict[str, Any] = {
        "generator": f"waterfront {__version__}",
        "created": datetime.now().strftime("%Y-%m-%dT%H:%M:%S"),
        "radius": radius,
        "polygon": result.polygon.to_dict(),
    }
    if include_waterline:
        data["waterline"] = result.waterline.to_dict()
        data["border_segments"] = [s.to_dict() for s in result.border_segments]
    return data


class PolygonWriter:
    """Writes generated waterfronts as JSON.

    Example:
        writer = PolygonWriter(Path("waterfront.json"))
        writer.save(result, radius=25.0)
    """

    def __init__(self, output_path: Path, indent: int | None = 2) -> None:
        """Initialize the polygon writer.

        Args:
            output_path: Path where the JSON file will be saved
            indent: JSON indentation (None for compact output)
        """
        self._output_path = output_path
        self._indent = indent

    def save(self, result: WaterfrontResult, radius: float, include_waterline: bool = False) -> None:
        """Save the result to the output path.

        Raises:
            PolygonSaveError: If the file cannot be written
        """
        data = result_to_dict(result, radius, include_waterline)
        try:
            self._output_path.write_text(
                json.dumps(data, indent=self._indent) + "\n", encoding="utf-8"
            )
        except OSError as e:
            raise PolygonSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_output_path(seed: int | None, directory: Path | None = None) -> Path:
        """Generate the default output path.

        Converts: seed 7 -> waterfront-7.json
                  no seed -> waterfront-20261017_101500.json

        Args:
            seed: Random seed of the run, if any
            directory: Directory to place the file in (current directory if None)

        Returns:
            Path of the JSON file
        """
        tag = str(seed) if seed is not None else datetime.now().strftime("%Y%m%d_%H%M%S")
        return (directory or Path()) / f"waterfront-{tag}.json"
