"""Operation orchestration for shape files.

This module ties the kernel to files and settings for the CLI:
- ShapeProcessor: Loads shape files, runs clip / hull / overlap with the
  configured tolerances, writes results and records statistics
- OperationResult: Outcome of one operation
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from shapeclip.config import OutputFormat, ShapeclipSettings
from shapeclip.core.boolean import is_overlapping, outer_hull
from shapeclip.core.clipping import clip_to
from shapeclip.domain import Polygon
from shapeclip.exceptions import OperationError, ShapeFileError
from shapeclip.io import ShapeReader, ShapeWriter
from shapeclip.utils import OperationLogger, OperationStats, configure_logging


class Operation(str, Enum):
    """Operations available on shape files."""

    CLIP = "clip"
    HULL = "hull"
    OVERLAP = "overlap"


@dataclass
class OperationResult:
    """Outcome of a single operation.

    Attributes:
        operation: Operation that ran
        polygons: Resulting polygons (empty for overlap tests)
        overlapping: Overlap verdict (only set for overlap tests)
        duration_ms: Time spent in the kernel
        output_path: File written, if any
    """

    operation: Operation
    polygons: list[Polygon] = field(default_factory=list)
    overlapping: bool | None = None
    duration_ms: float = 0.0
    output_path: Path | None = None

    @property
    def ring_count(self) -> int:
        return sum(len(p.rings) for p in self.polygons)


class ShapeProcessor:
    """Runs kernel operations on polygons loaded from shape files.

    Example:
        processor = ShapeProcessor(ShapeclipSettings())
        result = processor.process(Path("shapes.json"), Operation.HULL)
        print(result.output_path)
    """

    def __init__(self, config: ShapeclipSettings, quiet: bool = False) -> None:
        """Initialize the processor.

        Args:
            config: Shapeclip settings (tolerances, output, logging)
            quiet: Suppress console log output
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.operation_logger = OperationLogger(self.logger)
        self.writer = ShapeWriter(config.output)

    @property
    def stats(self) -> OperationStats:
        return self.operation_logger.stats

    def load(self, path: Path) -> tuple[list[str], list[Polygon]]:
        """Load named polygons from a shape file.

        Raises:
            ShapeFileError: If the file is missing or malformed
        """
        reader = ShapeReader(path)
        try:
            reader.load()
        except FileNotFoundError as e:
            raise ShapeFileError(str(path), "file not found") from e
        self.logger.info("Shapes loaded", path=str(path), polygons=len(reader.polygons))
        return reader.names, reader.polygons

    def clip(self, subject: Polygon, boundary: Polygon, keep_inside: bool = True) -> Polygon:
        """Clip ``subject`` against ``boundary`` with configured tolerances."""
        geo = self.config.geometry
        return clip_to(subject, boundary, keep_inside, geo.point_epsilon, geo.parallel_epsilon)

    def hull(self, polygons: list[Polygon]) -> Polygon:
        """Outer hull of ``polygons`` with configured tolerances."""
        geo = self.config.geometry
        return outer_hull(
            *polygons,
            point_epsilon=geo.point_epsilon,
            parallel_epsilon=geo.parallel_epsilon,
        )

    def overlap(self, a: Polygon, b: Polygon) -> bool:
        """Overlap test with configured tolerances."""
        geo = self.config.geometry
        return is_overlapping(a, b, geo.overlap_epsilon, geo.point_epsilon, geo.parallel_epsilon)

    def run(
        self,
        operation: Operation,
        polygons: list[Polygon],
        keep_inside: bool = True,
    ) -> OperationResult:
        """Run one operation on already loaded polygons.

        Clip and overlap use the first two polygons; hull uses all of them.

        Raises:
            OperationError: If there are not enough polygons for the operation
        """
        needed = 1 if operation is Operation.HULL else 2
        if len(polygons) < needed:
            error = OperationError(
                operation.value, f"needs at least {needed} polygons, got {len(polygons)}"
            )
            self.operation_logger.log_operation_error(operation.value, error)
            raise error

        self.operation_logger.log_operation_start(operation.value, len(polygons))
        start = time.perf_counter()

        result = OperationResult(operation=operation)
        if operation is Operation.CLIP:
            result.polygons = [self.clip(polygons[0], polygons[1], keep_inside)]
        elif operation is Operation.HULL:
            result.polygons = [self.hull(polygons)]
        else:
            result.overlapping = self.overlap(polygons[0], polygons[1])

        result.duration_ms = (time.perf_counter() - start) * 1000
        self.operation_logger.log_operation_complete(
            operation.value,
            input_rings=sum(len(p.rings) for p in polygons),
            output_rings=result.ring_count,
            duration_ms=result.duration_ms,
        )
        return result

    def process(
        self,
        input_path: Path,
        operation: Operation,
        output_path: Path | None = None,
        keep_inside: bool = True,
    ) -> OperationResult:
        """Load a shape file, run an operation and write the result.

        Overlap tests write nothing. Other operations write SVG or JSON
        according to the output settings, next to the input file unless
        ``output_path`` is given.

        Returns:
            The operation result, with ``output_path`` set when a file was written
        """
        _, polygons = self.load(input_path)
        result = self.run(operation, polygons, keep_inside)

        if operation is not Operation.OVERLAP:
            self.write(result, input_path, output_path)
        return result

    def write(
        self,
        result: OperationResult,
        input_path: Path,
        output_path: Path | None = None,
    ) -> Path:
        """Write the polygons of ``result`` in the configured format.

        Returns:
            The path written, also stored on ``result.output_path``
        """
        operation = result.operation
        fmt = self.config.output.format
        suffix = ".json" if fmt is OutputFormat.JSON else ".svg"
        path = output_path or ShapeWriter.get_output_path(input_path, operation.value, suffix)

        if fmt is OutputFormat.JSON:
            self.writer.write_json(result.polygons, path, names=[operation.value])
        else:
            self.writer.write_svg(result.polygons, path)

        self.logger.info("Result written", path=str(path), format=fmt.value)
        result.output_path = path
        return path
