"""Core algorithms for shapeclip.

This module contains the clipping kernel:

- Containment (point on segment, point in ring, point in polygon)
- Segment clipping against a polygon boundary
- Whole-polygon clipping
- Ring stitching
- Heuristic union and overlap testing

All functions are:
- Stateless and deterministic
- Total for well-formed input (degenerate geometry yields empty results)

Key functions:
- is_point_in_polygon: Even-odd containment across rings
- clip_line: Clip a segment against a boundary polygon
- clip_to: Clip a polygon against a boundary polygon
- optimize_rings: Stitch fragments sharing endpoints
- outer_hull: Union boundary of several polygons
- is_overlapping: Positive-area overlap test

Key classes:
- ShapeProcessor: Runs the operations on shape files for the CLI
"""

from shapeclip.core.boolean import is_overlapping, merge, outer_hull
from shapeclip.core.clipping import clip_line, clip_to
from shapeclip.core.geometry import (
    insert_unique_point,
    is_point_in_polygon,
    is_point_in_ring,
    is_point_on_segment,
    ring_area,
)
from shapeclip.core.optimizer import optimize_rings
from shapeclip.core.processor import Operation, OperationResult, ShapeProcessor

__all__ = [
    # Processor classes
    "Operation",
    "OperationResult",
    "ShapeProcessor",
    # Clipping functions
    "clip_line",
    "clip_to",
    # Geometry functions
    "insert_unique_point",
    "is_overlapping",
    "is_point_in_polygon",
    "is_point_in_ring",
    "is_point_on_segment",
    "merge",
    "optimize_rings",
    "outer_hull",
    "ring_area",
]
