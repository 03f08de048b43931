"""File I/O layer for waterfront.

This module handles reading supplied water paths and writing generated
polygons, both as JSON.

Key classes:
- WaterPathReader: Load a waterline from JSON
- PolygonWriter: Save a generated polygon as JSON
"""

from waterfront.io.reader import WaterPathReader, read_water_path
from waterfront.io.writer import PolygonWriter

__all__ = [
    "PolygonWriter",
    "WaterPathReader",
    "read_water_path",
]
