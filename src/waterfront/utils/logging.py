"""Logging utilities for Waterfront."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog


@dataclass
class GenerationStats:
    """Statistics from a generation run."""

    path_attempts: int = 0
    failed_attempts: int = 0
    steps_accepted: int = 0
    candidates_rejected: int = 0
    rejections: Counter[str] = field(default_factory=Counter)
    errors: list[tuple[int, str]] = field(default_factory=list)
    waterline_length: float = 0.0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate generation duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def acceptance_rate(self) -> float:
        """Share of sampled candidates that were accepted."""
        total = self.steps_accepted + self.candidates_rejected
        if total == 0:
            return 0.0
        return self.steps_accepted / total


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"waterfront_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("waterfront")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class GenerationLogger:
    """Logger for tracking walk progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("waterfront")
        self._stats = GenerationStats()

    def log_attempt_start(self, attempt: int, start_x: float, start_y: float) -> None:
        """Log start of a whole-path attempt."""
        self._logger.debug(
            "Waterline attempt started",
            attempt=attempt,
            start=(round(start_x, 3), round(start_y, 3)),
        )
        self._stats.path_attempts += 1

    def log_step_accepted(self, step: int, heading: int, distance: float, length: float) -> None:
        """Log an accepted step of the walk."""
        self._logger.debug(
            "Step accepted",
            step=step,
            heading=heading,
            distance=round(distance, 3),
            length=round(length, 3),
        )
        self._stats.steps_accepted += 1

    def log_candidate_rejected(self, reason: str) -> None:
        """Count a rejected candidate segment.

        Rejections are frequent, so they are tallied rather than logged.
        """
        self._stats.candidates_rejected += 1
        self._stats.rejections[reason] += 1

    def log_attempt_failed(self, attempt: int, error: Exception) -> None:
        """Log a failed whole-path attempt."""
        self._logger.warning(
            "Waterline attempt failed",
            attempt=attempt,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.failed_attempts += 1
        self._stats.errors.append((attempt, str(error)))

    def log_waterline_complete(self, segments: int, length: float, duration_ms: float) -> None:
        """Log a finished waterline."""
        self._logger.info(
            "Waterline complete",
            segments=segments,
            length=round(length, 3),
            duration_ms=round(duration_ms, 2),
        )
        self._stats.waterline_length = length

    @property
    def stats(self) -> GenerationStats:
        """Get current generation statistics."""
        return self._stats
