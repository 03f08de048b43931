"""Configuration management for waterfront.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- HeadingWeights: Relative weights of heading buckets
- WalkConfig: Random walk settings
- GenerationConfig: Whole-polygon generation settings
- LoggingConfig: Logging settings
- WaterfrontSettings: Main application settings
"""

from waterfront.config.settings import (
    GenerationConfig,
    HeadingWeights,
    LoggingConfig,
    WalkConfig,
    WaterfrontSettings,
    get_default_settings,
)

__all__ = [
    "GenerationConfig",
    "HeadingWeights",
    "LoggingConfig",
    "WalkConfig",
    "WaterfrontSettings",
    "get_default_settings",
]
