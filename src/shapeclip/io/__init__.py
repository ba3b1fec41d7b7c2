"""Shape I/O layer for shapeclip.

This module handles everything outside the geometry kernel: reading shape
files, writing results, text and SVG formatting, and drawing onto
caller-supplied surfaces.

Key classes:
- ShapeReader: Load polygons from JSON shape files
- ShapeWriter: Save polygons as SVG or JSON
- DrawableSurface: Protocol for host drawing surfaces
- SvgPathSurface: Surface producing SVG path data
"""

from shapeclip.io.reader import ShapeReader
from shapeclip.io.surface import DrawableSurface, SvgPathSurface, draw_polygon
from shapeclip.io.writer import ShapeWriter

__all__ = [
    "DrawableSurface",
    "ShapeReader",
    "ShapeWriter",
    "SvgPathSurface",
    "draw_polygon",
]
