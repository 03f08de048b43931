"""Random walk that draws the waterline.

The walk starts on the border of the square and takes weighted random steps
until it has grown long enough and steps back out of the square. Candidate
steps are rejected when they leave the square too early, collide with an
earlier part of the path, or would end on the side the walk started from.

The walk is a small state machine over an immutable WalkState:

    WALKING --(step ends outside the square)--> CLOSING --(clamp)--> DONE

Key classes:
- WalkPhase: States of the walk
- WalkState: Immutable snapshot of the walk
- RandomWalkPathBuilder: Drives the walk and returns the waterline
"""

import random
import time
from dataclasses import dataclass, replace
from enum import Enum, auto

import structlog

from waterfront.config import WalkConfig
from waterfront.core.closer import border_sides, on_same_side
from waterfront.core.geometry import (
    clamp_to_square,
    is_corner,
    is_inside_square,
    is_on_border,
    project,
)
from waterfront.core.orientation import segment_crosses_any
from waterfront.core.sampler import WeightedDirectionSampler
from waterfront.core.weights import HeadingWeightModel
from waterfront.domain import BorderSide, Point, Segment, Waterline
from waterfront.exceptions import DegenerateWeightMapError, PathGenerationStalledError
from waterfront.utils import GenerationLogger

logger = structlog.get_logger(__name__)


class WalkPhase(Enum):
    """States of the random walk."""

    WALKING = auto()
    CLOSING = auto()
    DONE = auto()


class RejectionReason(str, Enum):
    """Why a candidate step was discarded."""

    EARLY_EXIT = "early_exit"
    INTERSECTION = "intersection"
    SAME_SIDE = "same_side"
    CORNER = "corner"


@dataclass(frozen=True)
class WalkState:
    """Immutable snapshot of the walk.

    Attributes:
        start: Border point the walk started from
        point: Current end of the path
        previous_heading: Heading of the last accepted step (None before the first)
        length: Total length of accepted segments
        segments: Accepted segments in path order
        phase: Current state of the walk
    """

    start: Point
    point: Point
    previous_heading: int | None = None
    length: float = 0.0
    segments: tuple[Segment, ...] = ()
    phase: WalkPhase = WalkPhase.WALKING

    def advance(self, segment: Segment, heading: int, finishing: bool) -> "WalkState":
        """Return the state after accepting a segment."""
        return replace(
            self,
            point=segment.end,
            previous_heading=heading,
            length=self.length + segment.length,
            segments=self.segments + (segment,),
            phase=WalkPhase.CLOSING if finishing else WalkPhase.WALKING,
        )


class RandomWalkPathBuilder:
    """Builds a waterline with a weighted, self-avoiding random walk.

    Example:
        builder = RandomWalkPathBuilder(WalkConfig(), rng=random.Random(7))
        waterline = builder.build_waterline(Point(0.0, -25.0), radius=25.0)
    """

    def __init__(
        self,
        config: WalkConfig,
        rng: random.Random | None = None,
        model: HeadingWeightModel | None = None,
        events: GenerationLogger | None = None,
        sampler: WeightedDirectionSampler | None = None,
    ) -> None:
        """Initialize the path builder.

        Args:
            config: Walk configuration
            rng: Random source shared by heading and distance sampling
            model: Heading weight model (built from config if None)
            events: Optional logger collecting walk statistics
            sampler: Heading sampler (draws from rng if None)
        """
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.sampler = sampler if sampler is not None else WeightedDirectionSampler(self.rng)
        self.model = model if model is not None else HeadingWeightModel(config)
        self.events = events

    def build_waterline(self, start_point: Point, radius: float) -> Waterline:
        """Walk from a border point until the path returns to the border.

        Args:
            start_point: Starting point, on the border of the square
            radius: Half the side length of the square

        Returns:
            The finished waterline, its last point clamped onto the border

        Raises:
            ValueError: If the start point is not on the border
            DegenerateWeightMapError: If no heading can be drawn at some step
            PathGenerationStalledError: If the walk exceeds its attempt or step cap
        """
        if not is_on_border(start_point, radius):
            raise ValueError(f"Start point {start_point.to_tuple()} is not on the border")

        started = time.perf_counter()
        state = self.initial_state(start_point)

        while state.phase == WalkPhase.WALKING:
            if len(state.segments) >= self.config.max_steps:
                raise PathGenerationStalledError(
                    attempts=len(state.segments),
                    steps=len(state.segments),
                    reason="step cap exceeded",
                )
            state = self.step(state, radius)

        state = self.close(state, radius)
        waterline = Waterline(state.segments)

        if self.events is not None:
            self.events.log_waterline_complete(
                segments=len(waterline),
                length=waterline.length,
                duration_ms=(time.perf_counter() - started) * 1000,
            )
        return waterline

    def initial_state(self, start_point: Point) -> WalkState:
        """State of a walk that has not taken any step yet."""
        return WalkState(start=start_point, point=start_point)

    def step(self, state: WalkState, radius: float) -> WalkState:
        """Take one accepted step.

        The weight map is built once, then candidates are drawn from it until
        one is accepted or the attempt cap is reached.

        Args:
            state: Current walk state, in the WALKING phase
            radius: Half the side length of the square

        Returns:
            The next state, WALKING or CLOSING

        Raises:
            DegenerateWeightMapError: If the weight map has no positive weight
            PathGenerationStalledError: If every attempt is rejected
        """
        if state.phase != WalkPhase.WALKING:
            raise ValueError(f"Cannot step a walk in phase {state.phase.name}")

        weights = self.model.build(
            state.point,
            state.previous_heading,
            state.length,
            radius,
            avoid_side=start_side(state.start, radius),
        )
        if weights.is_degenerate():
            raise DegenerateWeightMapError(state.point.x, state.point.y)

        for _ in range(self.config.max_attempts):
            heading = self.sampler.sample(weights)
            distance = self.rng.uniform(self.config.min_step, self.config.max_step)
            candidate = Segment(state.point, project(state.point, heading, distance))

            finishing = not is_inside_square(candidate.end, radius)
            reason = self._check_candidate(state, candidate, finishing, radius)
            if reason is not None:
                if self.events is not None:
                    self.events.log_candidate_rejected(reason.value)
                continue

            next_state = state.advance(candidate, heading, finishing)
            if self.events is not None:
                self.events.log_step_accepted(
                    step=len(next_state.segments),
                    heading=heading,
                    distance=candidate.length,
                    length=next_state.length,
                )
            return next_state

        logger.debug(
            "Walk stalled",
            steps=len(state.segments),
            point=state.point.to_tuple(),
            attempts=self.config.max_attempts,
        )
        raise PathGenerationStalledError(
            attempts=self.config.max_attempts, steps=len(state.segments)
        )

    def close(self, state: WalkState, radius: float) -> WalkState:
        """Clamp the last segment's end onto the border.

        Args:
            state: Walk state in the CLOSING phase
            radius: Half the side length of the square

        Returns:
            The DONE state
        """
        if state.phase != WalkPhase.CLOSING:
            raise ValueError(f"Cannot close a walk in phase {state.phase.name}")

        last = state.segments[-1]
        clamped = last.with_end(clamp_to_square(last.end, radius))
        return replace(
            state,
            point=clamped.end,
            length=state.length - last.length + clamped.length,
            segments=state.segments[:-1] + (clamped,),
            phase=WalkPhase.DONE,
        )

    def _check_candidate(
        self, state: WalkState, candidate: Segment, finishing: bool, radius: float
    ) -> RejectionReason | None:
        """Decide whether a candidate step may be accepted.

        Returns:
            The reason for rejecting the candidate, or None to accept it
        """
        # The preceding segment shares the candidate's start point
        earlier = state.segments[:-1]

        if not finishing:
            if segment_crosses_any(candidate, earlier):
                return RejectionReason.INTERSECTION
            return None

        clamped = candidate.with_end(clamp_to_square(candidate.end, radius))
        if state.length + clamped.length < self.config.min_length(radius):
            return RejectionReason.EARLY_EXIT
        if is_corner(clamped.end, radius):
            return RejectionReason.CORNER
        if on_same_side(state.start, clamped.end, radius):
            return RejectionReason.SAME_SIDE
        if segment_crosses_any(clamped, earlier):
            return RejectionReason.INTERSECTION
        return None


def start_side(start_point: Point, radius: float) -> BorderSide | None:
    """Side a walk starting at ``start_point`` avoids finishing on."""
    sides = border_sides(start_point, radius)
    return next(iter(sides)) if len(sides) == 1 else None
