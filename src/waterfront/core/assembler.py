"""Polygon assembly from a waterline and its closing chain."""

from collections.abc import Sequence

from waterfront.domain import Point, Polygon, Segment, Waterline


class PolygonAssembler:
    """Joins a waterline and its border-closing segments into one ring."""

    def assemble_points(
        self, waterline: Waterline, border_segments: Sequence[Segment]
    ) -> list[Point]:
        """Flatten the waterline and closing chain into ring points.

        Args:
            waterline: The open waterline
            border_segments: Segments leading from the waterline's end back to its start

        Returns:
            The waterline's start, every waterline segment end, then every
            closing segment end
        """
        points = [waterline.start]
        points.extend(segment.end for segment in waterline.segments)
        points.extend(segment.end for segment in border_segments)
        return points

    def assemble(self, waterline: Waterline, border_segments: Sequence[Segment]) -> Polygon:
        """Build the closed polygon for a waterline.

        Args:
            waterline: The open waterline
            border_segments: Segments leading from the waterline's end back to its start

        Returns:
            Polygon whose ring ends where it starts
        """
        return Polygon(tuple(self.assemble_points(waterline, border_segments)))
