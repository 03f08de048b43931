"""Exception hierarchy for Waterfront."""


class WaterfrontError(Exception):
    """Base exception for all Waterfront errors."""

    pass


class GenerationError(WaterfrontError):
    """Errors raised while generating a waterline."""

    pass


class InvalidWeightMapError(GenerationError):
    """A weight map with no positive entries reached the sampler."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid weight map: {reason}")


class DegenerateWeightMapError(InvalidWeightMapError):
    """The heading weight model produced an all-zero weight map."""

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        super().__init__(f"every heading has zero weight at ({x:.3f}, {y:.3f})")


class PathGenerationStalledError(GenerationError):
    """The candidate rejection loop exceeded its cap."""

    def __init__(self, attempts: int, steps: int, reason: str = "attempt cap exceeded") -> None:
        self.attempts = attempts
        self.steps = steps
        self.reason = reason
        super().__init__(
            f"Path generation stalled after {attempts} attempts at step {steps}: {reason}"
        )


class GenerationFailedError(GenerationError):
    """Every whole-path attempt failed."""

    def __init__(self, attempts: int, reason: str) -> None:
        self.attempts = attempts
        self.reason = reason
        super().__init__(f"Waterfront generation failed after {attempts} attempts: {reason}")


class GeometryError(WaterfrontError):
    """Errors in geometric preconditions."""

    pass


class UnsupportedEndpointConfigurationError(GeometryError):
    """Waterline endpoints lie on the same side of the square."""

    def __init__(self, start: tuple[float, float], end: tuple[float, float]) -> None:
        self.start = start
        self.end = end
        super().__init__(
            f"Waterline endpoints {start} and {end} lie on the same border side"
        )


class InvalidWaterPathError(GeometryError):
    """A supplied water path cannot be closed into a polygon."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid water path: {reason}")


class WaterfrontIOError(WaterfrontError):
    """Errors related to reading or writing files."""

    pass


class WaterPathLoadError(WaterfrontIOError):
    """Error loading a water path file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load water path '{path}': {reason}")


class PolygonSaveError(WaterfrontIOError):
    """Error saving a polygon file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save polygon '{path}': {reason}")
