"""Domain models for shapeclip.

This module contains the geometric value types the clipping kernel works on:

- Point: A 2D point or vector
- Segment: A transient pair of points used for measurement and intersection
- Polygon: An ordered collection of rings (polygons, holes, polylines)
- BoundingBox: Derived axis-aligned extent of a polygon

Key functions:
- coerce_point: Normalize (x, y) pairs, {"x", "y"} mappings and Points
"""

from shapeclip.domain.point import Point, PointLike, coerce_point
from shapeclip.domain.polygon import BoundingBox, Polygon
from shapeclip.domain.segment import Segment

__all__: list[str] = [
    # Core types
    "Point",
    "Segment",
    "Polygon",
    "BoundingBox",
    # Ingestion
    "PointLike",
    "coerce_point",
]
