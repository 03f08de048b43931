"""Waterfront - Generate waterfront polygons for procedural city maps.

Waterfront builds the outline of a body of water that adjoins the edge of a
square map region. A weighted random walk draws a non-self-intersecting
waterline from one border of the square to another, and the remaining border
is walked clockwise to close it into a simple polygon.

Example:
    $ waterfront generate --radius 25 --seed 7 -o waterfront.json

This will write the closed polygon as a JSON list of points.
"""

__version__ = "0.1.0"
__author__ = "Waterfront contributors"

__all__ = ["__author__", "__version__"]
