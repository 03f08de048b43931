"""CLI application entry point for waterfront.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer

from waterfront import __version__
from waterfront.cli.output import (
    console,
    print_error,
    print_header,
    print_map_info,
    print_rejections,
    print_step,
    print_success,
    print_waterline_info,
)
from waterfront.config import GenerationConfig, LoggingConfig, WalkConfig, WaterfrontSettings
from waterfront.core import WaterfrontGenerator, border_sides
from waterfront.domain import Point
from waterfront.exceptions import PolygonSaveError, WaterfrontError, WaterPathLoadError
from waterfront.io import PolygonWriter, read_water_path
from waterfront.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="waterfront",
    help="Generate the waterfront polygon of a square city map.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Waterfront[/bold blue] v{__version__}")
        raise typer.Exit()


def side_label(point: Point, radius: float) -> str:
    """Name the border side (or corner sides) a point lies on."""
    return "/".join(sorted(side.value for side in border_sides(point, radius)))


@app.command()
def generate(
    radius: Annotated[
        float,
        typer.Option(
            "--radius",
            "-r",
            help="Half the side length of the square map",
            min=0.001,
        ),
    ] = 25.0,
    seed: Annotated[
        int | None,
        typer.Option(
            "--seed",
            "-s",
            help="Random seed for reproducible output (default: random)",
        ),
    ] = None,
    water_path: Annotated[
        Path | None,
        typer.Option(
            "--water-path",
            help="JSON file with a waterline to close instead of generating one",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: waterfront-{seed}.json)",
        ),
    ] = None,
    include_waterline: Annotated[
        bool,
        typer.Option(
            "--include-waterline",
            help="Also write the open waterline and closing segments",
        ),
    ] = False,
    smooth: Annotated[
        float | None,
        typer.Option(
            "--smooth",
            help="Smooth the waterline with Bezier curves to this tolerance",
            min=0.001,
        ),
    ] = None,
    min_length_ratio: Annotated[
        float,
        typer.Option(
            "--min-length-ratio",
            help="Minimum waterline length as a multiple of the radius",
            min=0.0,
            max=20.0,
        ),
    ] = 1.5,
    max_attempts: Annotated[
        int,
        typer.Option(
            "--max-attempts",
            help="Rejected candidates per step before a walk stalls",
            min=1,
        ),
    ] = 10_000,
    max_retries: Annotated[
        int,
        typer.Option(
            "--max-retries",
            help="Walks to try before giving up",
            min=1,
            max=1000,
        ),
    ] = 10,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate a waterfront polygon for a square map.

    A random walk draws a waterline from one border of the map to another,
    and the border is walked clockwise to close it into a polygon. The
    polygon is written as JSON.

    Example:
        waterfront --radius 25 --seed 7

    This will create waterfront-7.json in the current directory.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    # Create settings from CLI arguments
    settings = WaterfrontSettings(
        walk=WalkConfig(
            min_length_ratio=min_length_ratio,
            max_attempts=max_attempts,
        ),
        generation=GenerationConfig(
            radius=radius,
            seed=seed,
            max_retries=max_retries,
            smoothing_tolerance=smooth,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    try:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )

        points = None
        if water_path is not None:
            if not quiet:
                print_step("Loading water path")
            points = read_water_path(water_path)

        if not quiet:
            source = str(water_path) if water_path is not None else "random walk"
            print_map_info(radius, seed, source)
            print_step("Generating")

        started = time.perf_counter()
        generator = WaterfrontGenerator(settings, logger=logger)
        result = generator.generate(radius=radius, water_path=points)
        elapsed = time.perf_counter() - started

        if not quiet:
            print_waterline_info(
                segments=len(result.waterline),
                length=result.waterline.length,
                start=result.waterline.start.to_tuple(),
                end=result.waterline.end.to_tuple(),
                sides=(
                    side_label(result.waterline.start, radius),
                    side_label(result.waterline.end, radius),
                ),
            )
            if verbose and water_path is None:
                print_rejections(
                    result.stats.rejections,
                    attempts=result.stats.path_attempts,
                    failed=result.stats.failed_attempts,
                    acceptance_rate=result.stats.acceptance_rate,
                )

        actual_output_path = output if output is not None else PolygonWriter.get_output_path(seed)
        PolygonWriter(actual_output_path).save(
            result, radius=radius, include_waterline=include_waterline
        )

        if not quiet:
            map_area = (2 * radius) ** 2
            print_success(
                output_path=str(actual_output_path),
                total_time_s=elapsed,
                points=len(result.polygon.points),
                area=result.polygon.area,
                water_share=result.polygon.area / map_area,
                winding=result.polygon.winding.name.lower().replace("_", "-"),
            )

    except WaterPathLoadError as e:
        print_error(f"Could not load water path: {e.reason}")
        raise typer.Exit(code=1)
    except PolygonSaveError as e:
        print_error(f"Could not save polygon: {e.reason}")
        raise typer.Exit(code=1)
    except WaterfrontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
