"""CLI application entry point for shapeclip.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from shapeclip import __version__
from shapeclip.cli.output import (
    console,
    print_error,
    print_header,
    print_overlap,
    print_polygon_table,
    print_shapes_info,
    print_step,
    print_success,
)
from shapeclip.config import (
    GeometryConfig,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
    ShapeclipSettings,
)
from shapeclip.core import Operation, ShapeProcessor
from shapeclip.exceptions import ShapeclipError, ShapeFileError, ShapeSaveError
from shapeclip.io import ShapeReader

# Create the Typer app
app = typer.Typer(
    name="shapeclip",
    help="Clip, combine and compare planar polygons stored in JSON shape files.",
    add_completion=False,
    no_args_is_help=True,
)

InputArg = Annotated[
    Path,
    typer.Argument(help="Path to a JSON shape file", show_default=False),
]
OutputOpt = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Output path (default: {name}-{operation}.{ext})"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format (svg|json)"),
]
PrecisionOpt = Annotated[
    int,
    typer.Option("--precision", "-p", help="Decimal places in output", min=0, max=10),
]
EpsilonOpt = Annotated[
    float,
    typer.Option("--epsilon", help="Point equality tolerance", min=1e-12, max=1.0),
]
LogFileOpt = Annotated[
    Path | None,
    typer.Option("--log-file", help="Write detailed logs to file"),
]
LogLevelOpt = Annotated[
    str,
    typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
]
QuietOpt = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Minimal console output"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Shapeclip[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Clip, combine and compare planar polygons."""


def _build_settings(
    output_format: str,
    precision: int,
    epsilon: float,
    log_file: Path | None,
    log_level: str,
) -> ShapeclipSettings:
    try:
        fmt = OutputFormat(output_format.lower())
    except ValueError:
        print_error(f"Invalid format: {output_format}", details="Valid values: svg, json")
        raise typer.Exit(code=1) from None

    return ShapeclipSettings(
        geometry=GeometryConfig(point_epsilon=epsilon),
        output=OutputConfig(format=fmt, precision=precision),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )


def _check_input(input_path: Path) -> None:
    if not input_path.exists():
        print_error(
            f"Input file not found: {input_path}",
            details=f"The file '{input_path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)


def _run_file_operation(
    operation: Operation,
    input_path: Path,
    output: Path | None,
    settings: ShapeclipSettings,
    quiet: bool,
    keep_inside: bool = True,
) -> None:
    _check_input(input_path)

    if not quiet:
        print_header(__version__)

    try:
        processor = ShapeProcessor(settings, quiet=quiet)

        if not quiet:
            print_step("Loading shapes")
        names, polygons = processor.load(input_path)
        if not quiet:
            print_shapes_info(str(input_path), len(polygons), sum(len(p.rings) for p in polygons))
            print_step(f"Running {operation.value}")

        result = processor.run(operation, polygons, keep_inside)

        if operation is Operation.OVERLAP:
            if quiet:
                console.print("true" if result.overlapping else "false")
            else:
                print_overlap(bool(result.overlapping), names[0], names[1])
            return

        path = processor.write(result, input_path, output)
        if not quiet:
            print_success(operation.value, str(path), result.ring_count, result.duration_ms)

    except ShapeFileError as e:
        print_error(f"Could not load shapes: {e.reason}")
        raise typer.Exit(code=1)
    except ShapeSaveError as e:
        print_error(f"Could not save result: {e.reason}")
        raise typer.Exit(code=1)
    except ShapeclipError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def clip(
    input_path: InputArg,
    outside: Annotated[
        bool,
        typer.Option("--outside", help="Keep the parts outside the boundary instead"),
    ] = False,
    output: OutputOpt = None,
    output_format: FormatOpt = "svg",
    precision: PrecisionOpt = 2,
    epsilon: EpsilonOpt = 1e-6,
    log_file: LogFileOpt = None,
    log_level: LogLevelOpt = "WARNING",
    quiet: QuietOpt = False,
) -> None:
    """Clip the first polygon of a shape file against the second.

    Example:
        shapeclip clip shapes.json --outside
    """
    settings = _build_settings(output_format, precision, epsilon, log_file, log_level)
    _run_file_operation(Operation.CLIP, input_path, output, settings, quiet, keep_inside=not outside)


@app.command()
def hull(
    input_path: InputArg,
    output: OutputOpt = None,
    output_format: FormatOpt = "svg",
    precision: PrecisionOpt = 2,
    epsilon: EpsilonOpt = 1e-6,
    log_file: LogFileOpt = None,
    log_level: LogLevelOpt = "WARNING",
    quiet: QuietOpt = False,
) -> None:
    """Write the outer hull (union boundary) of all polygons in a shape file."""
    settings = _build_settings(output_format, precision, epsilon, log_file, log_level)
    _run_file_operation(Operation.HULL, input_path, output, settings, quiet)


@app.command()
def overlap(
    input_path: InputArg,
    epsilon: EpsilonOpt = 1e-6,
    log_file: LogFileOpt = None,
    log_level: LogLevelOpt = "WARNING",
    quiet: QuietOpt = False,
) -> None:
    """Report whether the first two polygons of a shape file overlap."""
    settings = _build_settings("svg", 2, epsilon, log_file, log_level)
    _run_file_operation(Operation.OVERLAP, input_path, None, settings, quiet)


@app.command()
def info(
    input_path: InputArg,
    precision: PrecisionOpt = 2,
) -> None:
    """List the polygons of a shape file with their measurements."""
    _check_input(input_path)

    reader = ShapeReader(input_path)
    try:
        reader.load()
    except ShapeFileError as e:
        print_error(f"Could not load shapes: {e.reason}")
        raise typer.Exit(code=1)

    print_polygon_table(reader.names, reader.polygons, precision)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
