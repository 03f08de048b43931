"""Core generation algorithms for waterfront.

This module contains the core algorithms for:

- Geometry operations (headings, projection, square containment)
- Orientation and segment intersection tests
- Weighted heading sampling and the heading weight model
- The waterline random walk
- Optional Bezier smoothing of the waterline
- Border closing and polygon assembly

All services are designed to be:
- Stateless apart from an injected random source
- Pure (no side effects beyond logging)
- Deterministic for a seeded random source

Key functions:
- orientation: Classify the turn of three points
- segments_intersect: Test two segments for crossing, touching or overlap
- sample_heading: Draw a heading from a weight map
- random_start_point: Pick a random point on the border

Key classes:
- HeadingWeightModel: Builds weight maps for each step
- RandomWalkPathBuilder: Draws the waterline
- BorderCloser: Closes the waterline along the border
- PolygonAssembler: Joins waterline and closing chain into a ring
- WaterfrontGenerator: Runs the whole pipeline
"""

from waterfront.core.assembler import PolygonAssembler
from waterfront.core.closer import BorderCloser, border_side, border_sides, on_same_side
from waterfront.core.generator import (
    WaterfrontGenerator,
    WaterfrontResult,
    generate_waterfront_shape,
    random_start_point,
)
from waterfront.core.geometry import heading_between, project
from waterfront.core.orientation import orientation, segments_intersect
from waterfront.core.sampler import WeightedDirectionSampler, sample_heading
from waterfront.core.smoothing import smooth_waterline
from waterfront.core.walker import RandomWalkPathBuilder, WalkPhase, WalkState
from waterfront.core.weights import HeadingWeightModel

__all__ = [
    # Closing and assembly
    "BorderCloser",
    # Weight model
    "HeadingWeightModel",
    "PolygonAssembler",
    # Walk
    "RandomWalkPathBuilder",
    "WalkPhase",
    "WalkState",
    # Pipeline
    "WaterfrontGenerator",
    "WaterfrontResult",
    "WeightedDirectionSampler",
    "border_side",
    "border_sides",
    "generate_waterfront_shape",
    # Geometry functions
    "heading_between",
    "on_same_side",
    "orientation",
    "project",
    "random_start_point",
    "sample_heading",
    "segments_intersect",
    "smooth_waterline",
]
