"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from shapeclip.domain import Polygon

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
    console.print(f"\n[bold]Shapeclip[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_shapes_info(path: str, polygon_count: int, ring_count: int) -> None:
    """Print shape file summary.

    Args:
        path: Path to the shape file
        polygon_count: Number of polygons loaded
        ring_count: Total number of rings over all polygons
    """
    line = Text("  ")
    line.append(path)
    console.print(line)
    console.print(f"  {polygon_count} polygons {SYM_DOT} {ring_count} rings")


def print_polygon_table(names: list[str], polygons: list[Polygon], precision: int) -> None:
    """Print a table with ring count, length, area and extent per polygon."""
    table = Table(show_edge=False, header_style="bold")
    table.add_column("Name")
    table.add_column("Rings", justify="right")
    table.add_column("Points", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Area", justify="right")
    table.add_column("Bounds")

    for name, polygon in zip(names, polygons):
        bbox = polygon.bounding_box()
        bounds = (
            "-"
            if bbox is None
            else f"{bbox.min_x:.{precision}f},{bbox.min_y:.{precision}f} "
            f"{SYM_DOT} {bbox.width:.{precision}f}x{bbox.height:.{precision}f}"
        )
        table.add_row(
            name,
            str(len(polygon.rings)),
            str(sum(len(ring) for ring in polygon.rings)),
            f"{polygon.length():.{precision}f}",
            f"{polygon.area():.{precision}f}",
            bounds,
        )

    console.print(table)


def _format_time(ms: float) -> str:
    """Format milliseconds into human-readable time string."""
    if ms < 1000:
        return f"{ms:.1f}ms"
    return f"{ms / 1000:.2f}s"


def print_success(operation: str, output_path: str, rings: int, duration_ms: float) -> None:
    """Print success message with summary.

    Args:
        operation: Operation name
        output_path: Path to output file
        rings: Number of rings written
        duration_ms: Kernel time in milliseconds
    """
    console.print(
        f"\n[bold green]{SYM_OK} {operation.capitalize()} complete[/bold green] "
        f"in {_format_time(duration_ms)}"
    )
    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)
    console.print(f"  {rings} rings")


def print_overlap(overlapping: bool, first: str, second: str) -> None:
    """Print the verdict of an overlap test."""
    if overlapping:
        console.print(f"\n[bold yellow]{SYM_OK} Overlapping[/bold yellow] {first} {SYM_DOT} {second}")
    else:
        console.print(f"\n[bold green]{SYM_OK} Not overlapping[/bold green] {first} {SYM_DOT} {second}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
