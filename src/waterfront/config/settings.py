"""Configuration settings for Waterfront."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator


class HeadingWeights(BaseModel):
    """Relative weights assigned to heading buckets.

    Weights are integer frequencies: a heading with weight 20 is drawn twice
    as often as one with weight 10.
    """

    default_weight: int = Field(
        default=10,
        ge=1,
        le=1000,
        description="Weight of headings with no special meaning",
    )
    previous_weight: int = Field(
        default=2,
        ge=0,
        le=1000,
        description="Weight of headings close to doubling back",
    )
    center_weight: int = Field(
        default=20,
        ge=0,
        le=1000,
        description="Weight of headings toward the map center",
    )
    border_weight: int = Field(
        default=5,
        ge=0,
        le=1000,
        description="Weight of headings toward the closest border while the path is short",
    )
    border_seek_weight: int = Field(
        default=400,
        ge=0,
        le=100000,
        description="Weight of headings toward the closest border once the path is long",
    )


class WalkConfig(BaseModel):
    """Configuration for the random walk that draws the waterline.

    Ratios are relative to the map radius (half the side of the square).
    """

    heading_resolution: int = Field(
        default=4,
        ge=1,
        le=90,
        description="Size of a heading bucket in degrees (must divide 180)",
    )
    tolerance_degrees: float = Field(
        default=5.0,
        ge=0.0,
        le=45.0,
        description="Angular window around reference headings",
    )
    min_step: float = Field(
        default=2.0,
        gt=0.0,
        description="Shortest step of the walk",
    )
    max_step: float = Field(
        default=5.0,
        gt=0.0,
        description="Longest step of the walk",
    )
    min_length_ratio: float = Field(
        default=1.5,
        ge=0.0,
        le=20.0,
        description="Minimum waterline length before it may reach the border",
    )
    center_ban_ratio: float = Field(
        default=0.8,
        ge=0.0,
        description="Distance-to-center ratio above which center headings are banned",
    )
    border_seek_ratio: float = Field(
        default=1.25,
        ge=0.0,
        description="Path length ratio above which the walk seeks the border",
    )
    max_attempts: int = Field(
        default=10_000,
        ge=1,
        description="Consecutive rejected candidates before the walk stalls",
    )
    max_steps: int = Field(
        default=5_000,
        ge=1,
        description="Accepted steps before the walk stalls",
    )
    weights: HeadingWeights = Field(default_factory=HeadingWeights)

    @field_validator("heading_resolution")
    @classmethod
    def resolution_divides_half_turn(cls, value: int) -> int:
        """Every bucket needs a bucket exactly opposite it."""
        if 180 % value != 0:
            raise ValueError(f"heading_resolution must divide 180, got {value}")
        return value

    @model_validator(mode="after")
    def step_bounds_ordered(self) -> "WalkConfig":
        """The longest step may not be shorter than the shortest."""
        if self.max_step < self.min_step:
            raise ValueError(
                f"max_step ({self.max_step}) must not be below min_step ({self.min_step})"
            )
        return self

    @property
    def bucket_count(self) -> int:
        """Number of heading buckets in a full turn."""
        return 360 // self.heading_resolution

    def min_length(self, radius: float) -> float:
        """Get the minimum waterline length for the given radius."""
        return self.min_length_ratio * radius


class GenerationConfig(BaseModel):
    """Configuration for whole-polygon generation."""

    radius: float = Field(
        default=25.0,
        gt=0.0,
        description="Half the side length of the square map",
    )
    seed: int | None = Field(
        default=None,
        description="Random seed (None = nondeterministic)",
    )
    max_retries: int = Field(
        default=10,
        ge=1,
        le=1000,
        description="Whole-path attempts before giving up",
    )
    smoothing_tolerance: float | None = Field(
        default=None,
        gt=0.0,
        description="Bezier smoothing tolerance for the waterline (None = off)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class WaterfrontSettings(BaseModel):
    """Main application settings."""

    walk: WalkConfig = Field(default_factory=WalkConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> WaterfrontSettings:
    """Get default application settings."""
    return WaterfrontSettings()
