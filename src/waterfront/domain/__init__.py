"""Domain models for waterfront.

This module contains the core domain models representing points, segments,
heading weights, waterlines and polygons. All models are designed to be:

- Immutable (frozen dataclasses and read-only mappings)
- Serializable to plain dictionaries for JSON output
- Independent of how they are rendered

Key classes:
- Point: An immutable 2D point
- Segment: A directed line segment
- WeightMap: Integer weights over discrete headings
- Waterline: An open, chained path of segments
- Polygon: A closed ring of points
"""

from waterfront.domain.geometry import BorderSide, Orientation, Point, Segment
from waterfront.domain.waterline import Polygon, Waterline, WindingDirection
from waterfront.domain.weights import WeightMap

__all__: list[str] = [
    # Enums
    "BorderSide",
    "Orientation",
    "WindingDirection",
    # Core types
    "Point",
    "Segment",
    "WeightMap",
    "Waterline",
    "Polygon",
]
