"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from collections.abc import Mapping

from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Waterfront[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_map_info(radius: float, seed: int | None, source: str) -> None:
    """Print map information.

    Args:
        radius: Half the side length of the square
        seed: Random seed, if any
        source: Where the waterline comes from
    """
    side = 2 * radius
    seed_str = str(seed) if seed is not None else "random"
    console.print(f"  {side:g} × {side:g} map {SYM_DOT} seed {seed_str}")
    line = Text("  waterline: ")
    line.append(source)
    console.print(line)


def print_waterline_info(
    segments: int,
    length: float,
    start: tuple[float, float],
    end: tuple[float, float],
    sides: tuple[str, str],
) -> None:
    """Print waterline summary.

    Args:
        segments: Number of waterline segments
        length: Total waterline length
        start: Start point of the waterline
        end: End point of the waterline
        sides: Border sides the waterline starts and ends on
    """
    console.print(f"  [green]{segments}[/green] segments {SYM_DOT} length {length:.2f}")
    console.print(
        f"  ({start[0]:.2f}, {start[1]:.2f}) → ({end[0]:.2f}, {end[1]:.2f}) "
        f"{SYM_DOT} {sides[0]} to {sides[1]}"
    )


def print_rejections(
    rejections: Mapping[str, int], attempts: int, failed: int, acceptance_rate: float
) -> None:
    """Print candidate rejection counts.

    Args:
        rejections: Rejected candidates per reason
        attempts: Whole-path attempts made
        failed: Whole-path attempts that failed
        acceptance_rate: Share of sampled candidates that were accepted
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Rejected because")
    table.add_column("Candidates", justify="right")
    for reason, count in sorted(rejections.items()):
        table.add_row(reason.replace("_", " "), str(count))
    console.print(table)
    console.print(
        f"  {attempts} attempts {SYM_DOT} {failed} failed "
        f"{SYM_DOT} {acceptance_rate:.1%} of candidates accepted"
    )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    total_time_s: float,
    points: int,
    area: float,
    water_share: float,
    winding: str,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        total_time_s: Total generation time in seconds
        points: Number of ring points
        area: Polygon area
        water_share: Polygon area as a share of the map
        winding: Winding direction of the ring
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    console.print(
        f"  {points} points {SYM_DOT} area {area:.1f} ({water_share:.0%} of map) "
        f"{SYM_DOT} {winding}"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
