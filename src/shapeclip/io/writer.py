"""Shape writer for saving operation results.

This module provides the ShapeWriter class for writing polygons as SVG
drawings or JSON shape files.
"""

import json
from pathlib import Path

from shapeclip.config import OutputConfig
from shapeclip.domain import BoundingBox, Polygon
from shapeclip.exceptions import ShapeSaveError
from shapeclip.io.converter import polygon_to_svg, svg_document


def _combined_bbox(polygons: list[Polygon]) -> BoundingBox | None:
    boxes = [b for b in (p.bounding_box() for p in polygons) if b is not None]
    if not boxes:
        return None
    return BoundingBox(
        min(b.min_x for b in boxes),
        min(b.min_y for b in boxes),
        max(b.max_x for b in boxes),
        max(b.max_y for b in boxes),
    )


class ShapeWriter:
    """Writes polygons to SVG or JSON files.

    Example:
        writer = ShapeWriter(OutputConfig(precision=3))
        writer.write_svg([hull], Path("hull.svg"))
    """

    def __init__(self, config: OutputConfig | None = None) -> None:
        self.config = config or OutputConfig()

    @staticmethod
    def get_output_path(input_path: Path, operation: str, suffix: str = ".svg") -> Path:
        """Derive an output path next to the input file.

        Args:
            input_path: Path of the input shape file
            operation: Operation name appended to the stem
            suffix: File suffix including the dot

        Returns:
            Path like ``shapes-hull.svg``
        """
        return input_path.with_name(f"{input_path.stem}-{operation}{suffix}")

    def render_svg(self, polygons: list[Polygon]) -> str:
        """Render polygons as a standalone SVG document."""
        body = "".join(polygon_to_svg(p, self.config.precision) for p in polygons)
        return svg_document(
            body,
            _combined_bbox(polygons),
            margin=self.config.margin,
            stroke=self.config.stroke,
            stroke_width=self.config.stroke_width,
            precision=self.config.precision,
        )

    def write_svg(self, polygons: list[Polygon], path: Path) -> None:
        """Write polygons as an SVG drawing.

        Raises:
            ShapeSaveError: If the file cannot be written
        """
        self._write(path, self.render_svg(polygons))

    def write_json(self, polygons: list[Polygon], path: Path, names: list[str] | None = None) -> None:
        """Write polygons as a JSON shape file readable by ShapeReader.

        Coordinates are rounded to the configured precision.

        Raises:
            ShapeSaveError: If the file cannot be written
        """
        precision = self.config.precision
        entries = []
        for index, polygon in enumerate(polygons):
            name = names[index] if names and index < len(names) else f"polygon{index}"
            rings = [
                [[round(pt.x, precision), round(pt.y, precision)] for pt in ring]
                for ring in polygon.rings
            ]
            entries.append({"name": name, "rings": rings})

        self._write(path, json.dumps({"polygons": entries}, indent=2) + "\n")

    def _write(self, path: Path, content: str) -> None:
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ShapeSaveError(str(path), str(e)) from e
