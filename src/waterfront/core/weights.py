"""Heading weight model for the waterline random walk.

For each step of the walk this module builds a weight map over every heading
bucket. Each bucket falls into exactly one class, tested in priority order
against a reference heading with an angular tolerance window:

1. Back toward the previous point: the exact reversal is forbidden, its
   neighbours get a small weight so the path rarely doubles back.
2. Toward the map center: banned while the point is far from the center,
   otherwise a moderate pull inward.
3. Toward the closest border: a low weight while the path is short, a high
   one once it is long enough to finish.
4. Anything else: a flat default weight.

Key classes:
- HeadingWeightModel: Builds weight maps from the walk state
"""

import math

from waterfront.config import WalkConfig
from waterfront.core.geometry import angular_difference, heading_between, reverse_heading
from waterfront.domain import BorderSide, Point, WeightMap

ORIGIN = Point(0.0, 0.0)

# Heading pointing straight at each side of the square
SIDE_HEADINGS: dict[BorderSide, int] = {
    BorderSide.TOP: 0,
    BorderSide.RIGHT: 90,
    BorderSide.BOTTOM: 180,
    BorderSide.LEFT: 270,
}


def closest_border(point: Point, avoid_side: BorderSide | None = None) -> BorderSide:
    """Find the side of the square closest to a point.

    The axis along which the point's coordinate is larger in magnitude
    decides the side. When that side is ``avoid_side`` the closest side on
    the other axis is returned instead.

    Args:
        point: Point inside or on the square
        avoid_side: Side that must not be returned

    Returns:
        The closest allowed side
    """
    x_side = BorderSide.RIGHT if point.x >= 0 else BorderSide.LEFT
    y_side = BorderSide.TOP if point.y >= 0 else BorderSide.BOTTOM

    if abs(point.x) >= abs(point.y):
        primary, secondary = x_side, y_side
    else:
        primary, secondary = y_side, x_side

    return secondary if primary == avoid_side else primary


class HeadingWeightModel:
    """Builds the weight map for the next step of the walk.

    Example:
        model = HeadingWeightModel(WalkConfig())
        weights = model.build(Point(0.0, -25.0), None, 0.0, 25.0)
    """

    def __init__(self, config: WalkConfig) -> None:
        """Initialize the weight model.

        Args:
            config: Walk configuration with resolution, ratios and weights
        """
        self.config = config

    def build(
        self,
        current_point: Point,
        previous_heading: int | None,
        accumulated_length: float,
        radius: float,
        avoid_side: BorderSide | None = None,
    ) -> WeightMap:
        """Build the weight map for the next step.

        Args:
            current_point: Where the walk currently is
            previous_heading: Heading of the last accepted step (None on the first step)
            accumulated_length: Length of the path so far
            radius: Half the side length of the square
            avoid_side: Side the closest-border pull must not target

        Returns:
            Weight map over every heading bucket
        """
        config = self.config
        weights = config.weights
        tolerance = config.tolerance_degrees

        heading_to_previous = (
            reverse_heading(previous_heading) if previous_heading is not None else None
        )

        distance_to_center = math.hypot(current_point.x, current_point.y)
        heading_to_center = (
            heading_between(current_point, ORIGIN) if distance_to_center > 0 else None
        )
        if distance_to_center / radius > config.center_ban_ratio:
            center_weight = 0
        else:
            center_weight = weights.center_weight

        heading_to_border = SIDE_HEADINGS[closest_border(current_point, avoid_side)]
        if accumulated_length / radius > config.border_seek_ratio:
            border_weight = weights.border_seek_weight
        else:
            border_weight = weights.border_weight

        bucket_weights: list[int] = []
        for index in range(config.bucket_count):
            heading = index * config.heading_resolution
            if (
                heading_to_previous is not None
                and angular_difference(heading, heading_to_previous) <= tolerance
            ):
                weight = 0 if heading == heading_to_previous else weights.previous_weight
            elif (
                heading_to_center is not None
                and angular_difference(heading, heading_to_center) <= tolerance
            ):
                weight = center_weight
            elif angular_difference(heading, heading_to_border) <= tolerance:
                weight = border_weight
            else:
                weight = weights.default_weight
            bucket_weights.append(weight)

        return WeightMap(bucket_weights, resolution=config.heading_resolution)
