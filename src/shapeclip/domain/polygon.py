"""Multi-ring polygon container.

A Polygon owns an ordered list of rings, each ring an ordered list of
Points. The same container models simple polygons, polygons with holes
(even-odd rule), unrelated disjoint shapes, open polylines and loose line
collections. A ring is closed when its last point equals its first.

Boolean operators (clipping, stitching, union) live in ``shapeclip.core``;
the methods here delegate to them.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from shapeclip.domain.point import DEFAULT_EPSILON, Point, PointLike, coerce_point
from shapeclip.domain.segment import Segment
from shapeclip.exceptions import PointFormatError, PolygonConstructionError, RingFormatError


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box.

    Attributes:
        min_x: Smallest x coordinate
        min_y: Smallest y coordinate
        max_x: Largest x coordinate
        max_y: Largest y coordinate
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y)."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)


class Polygon:
    """One or more rings of points, open or closed.

    Example:
        square = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)], close=True)
        square.is_point_in(Point(5, 5))  # True

    Attributes:
        rings: List of rings; each ring is a list of Points
    """

    def __init__(self, points: Sequence[PointLike] | None = None, close: bool = False) -> None:
        """Create a polygon, optionally with a first ring.

        Args:
            points: Points of the first ring (any point-like values)
            close: Close the first ring after adding it

        Raises:
            RingFormatError: If ``points`` is not an ordered sequence
        """
        self.rings: list[list[Point]] = []
        if points is not None:
            if not isinstance(points, Sequence) or isinstance(points, (str, bytes)):
                raise RingFormatError(points)
            if len(points) > 0:
                self.add_ring(points, close)

    def copy(self) -> Polygon:
        """Return a deep copy; every ring and every Point is cloned."""
        clone = Polygon()
        clone.rings = [[pt.copy() for pt in ring] for ring in self.rings]
        return clone

    def add_ring(self, points: Sequence[PointLike], close: bool = False) -> Polygon:
        """Add a new ring built from point-like values.

        Args:
            points: Ordered sequence of Points, (x, y) pairs or {"x", "y"} mappings
            close: Close the ring after adding it

        Returns:
            This polygon, for chaining

        Raises:
            RingFormatError: If ``points`` is not an ordered sequence
            PointFormatError: If an entry is not point-like
        """
        if not isinstance(points, Sequence) or isinstance(points, (str, bytes)):
            raise RingFormatError(points)

        self.rings.append([coerce_point(pt) for pt in points])
        if close and self.rings[-1]:
            self.close_last_ring()
        return self

    def add_point(self, pt: Point) -> Polygon:
        """Append a point to the last ring, starting a ring if there is none.

        Raises:
            PointFormatError: If ``pt`` is not a Point
        """
        if not isinstance(pt, Point):
            raise PointFormatError(pt, "Point instance")
        if not self.rings:
            self.rings.append([])
        self.rings[-1].append(pt)
        return self

    def close_last_ring(self, epsilon: float = DEFAULT_EPSILON) -> Polygon:
        """Close the last ring by repeating its first point, if not closed yet."""
        if self.rings:
            ring = self.rings[-1]
            if len(ring) > 1 and not ring[-1].equals(ring[0], epsilon):
                ring.append(ring[0].copy())
        return self

    @classmethod
    def create_n_edge(
        cls,
        n_edges: int,
        radius: float = 100.0,
        center: PointLike = (0.0, 0.0),
        rotation: float = 0.0,
    ) -> Polygon:
        """Create a closed regular polygon.

        Args:
            n_edges: Number of edges (at least 3)
            radius: Circumradius
            center: Center point
            rotation: Angle of the first vertex in radians

        Raises:
            PolygonConstructionError: If ``n_edges`` is below 3
        """
        if n_edges < 3:
            raise PolygonConstructionError(f"at least 3 edges required, got {n_edges}")

        c = coerce_point(center)
        step = 2 * math.pi / n_edges
        pts = []
        for i in range(n_edges):
            angle = i * step + rotation
            pts.append(Point(c.x + radius * math.cos(angle), c.y + radius * math.sin(angle)))
        return cls(pts, close=True)

    @classmethod
    def create_star(
        cls,
        n_edges: int,
        radius_outer: float = 100.0,
        radius_inner: float = 50.0,
        center: PointLike = (0.0, 0.0),
        rotation: float = 0.0,
    ) -> Polygon:
        """Create a closed star with ``n_edges`` spikes.

        Vertices alternate between the outer and inner radius, starting with
        the outer one at ``rotation``.

        Raises:
            PolygonConstructionError: If ``n_edges`` is below 3
        """
        if n_edges < 3:
            raise PolygonConstructionError(f"at least 3 edges required, got {n_edges}")

        c = coerce_point(center)
        step = math.pi / n_edges
        radii = (radius_outer, radius_inner)
        pts = []
        for i in range(n_edges * 2):
            angle = i * step + rotation
            r = radii[i % 2]
            pts.append(Point(c.x + r * math.cos(angle), c.y + r * math.sin(angle)))
        return cls(pts, close=True)

    @classmethod
    def create_arc(
        cls,
        center: PointLike,
        dim: PointLike,
        start_angle: float,
        stop_angle: float,
        rotation: float | None = None,
    ) -> Polygon:
        """Create a closed polygon along an elliptic arc.

        The point count follows the arc length at roughly 4 units per step,
        with a minimum of 3 steps.

        Args:
            center: Center of the ellipse
            dim: Ellipse width (x) and height (y)
            start_angle: Start angle in radians
            stop_angle: Stop angle in radians
            rotation: Optional rotation about the origin, in radians
        """
        c = coerce_point(center)
        d = coerce_point(dim)
        circumference = 2 * math.pi * (d.x + d.y) / 2
        sweep = stop_angle - start_angle
        num = max(3, int(circumference / 4 * sweep / (2 * math.pi)))
        delta = sweep / num

        pts = []
        for i in range(num + 1):
            angle = stop_angle if i == num else start_angle + i * delta
            pt = Point(c.x + (d.x / 2) * math.cos(angle), c.y + (d.y / 2) * math.sin(angle))
            if rotation:
                pt = pt.rotate(rotation)
            pts.append(pt)
        return cls(pts, close=True)

    def translate(self, vector: PointLike) -> Polygon:
        """Move every point by ``vector`` in place."""
        vec = coerce_point(vector)
        self.rings = [[pt.translate(vec) for pt in ring] for ring in self.rings]
        return self

    def rotate(self, angle: float, origin: PointLike | None = None) -> Polygon:
        """Rotate every point by ``angle`` radians about ``origin`` in place."""
        self.rings = [[pt.rotate(angle, origin) for pt in ring] for ring in self.rings]
        return self

    def is_empty(self) -> bool:
        """Check if the polygon has no points at all."""
        return not any(self.rings)

    def length(self) -> float:
        """Total length of all rings (consecutive points only, no wrap edge)."""
        total = 0.0
        for ring in self.rings:
            if len(ring) < 2:
                continue
            for i in range(len(ring) - 1):
                total += Segment(ring[i], ring[i + 1]).length()
        return total

    def area(self) -> float:
        """Sum of the unsigned areas of all rings with at least 3 points."""
        from shapeclip.core.geometry import ring_area

        return sum(ring_area(ring) for ring in self.rings)

    def bounding_box(self) -> BoundingBox | None:
        """Compute the bounding box over all rings.

        Always recomputed, so it reflects any direct mutation of the rings.

        Returns:
            The bounding box, or None when the polygon has no points
        """
        xs = [pt.x for ring in self.rings for pt in ring]
        ys = [pt.y for ring in self.rings for pt in ring]
        if not xs:
            return None
        return BoundingBox(min(xs), min(ys), max(xs), max(ys))

    def is_point_in(self, pt: PointLike) -> bool:
        """Test containment under the even-odd rule across rings."""
        from shapeclip.core.geometry import is_point_in_polygon

        return is_point_in_polygon(coerce_point(pt), self.rings)

    def clip_line(
        self,
        segment: Segment,
        keep_inside: bool = True,
        point_epsilon: float = DEFAULT_EPSILON,
        parallel_epsilon: float = DEFAULT_EPSILON,
    ) -> Polygon:
        """Clip ``segment`` against this polygon's boundary."""
        from shapeclip.core.clipping import clip_line

        return clip_line(segment, self, keep_inside, point_epsilon, parallel_epsilon)

    def clip_to(
        self,
        boundary: Polygon,
        keep_inside: bool = True,
        point_epsilon: float = DEFAULT_EPSILON,
        parallel_epsilon: float = DEFAULT_EPSILON,
    ) -> Polygon:
        """Clip this polygon's edges against ``boundary``."""
        from shapeclip.core.clipping import clip_to

        return clip_to(self, boundary, keep_inside, point_epsilon, parallel_epsilon)

    def optimize(self, epsilon: float = DEFAULT_EPSILON) -> Polygon:
        """Stitch rings sharing endpoints, in place."""
        from shapeclip.core.optimizer import optimize_rings

        self.rings = optimize_rings(self.rings, epsilon)
        return self

    def merge(self, other: Polygon, epsilon: float = DEFAULT_EPSILON) -> Polygon:
        """Append the rings of ``other`` and stitch, in place."""
        from shapeclip.core.boolean import merge

        return merge(self, other, epsilon)

    def is_overlapping(
        self,
        other: Polygon,
        epsilon: float = 1e-9,
        point_epsilon: float = DEFAULT_EPSILON,
        parallel_epsilon: float = DEFAULT_EPSILON,
    ) -> bool:
        """Check whether this polygon shares a region of positive area with ``other``."""
        from shapeclip.core.boolean import is_overlapping

        return is_overlapping(self, other, epsilon, point_epsilon, parallel_epsilon)

    @classmethod
    def outer_hull(
        cls,
        *polygons: Polygon,
        point_epsilon: float = DEFAULT_EPSILON,
        parallel_epsilon: float = DEFAULT_EPSILON,
    ) -> Polygon:
        """Heuristic union boundary of ``polygons``."""
        from shapeclip.core.boolean import outer_hull

        return outer_hull(
            *polygons, point_epsilon=point_epsilon, parallel_epsilon=parallel_epsilon
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"rings": [[pt.to_dict() for pt in ring] for ring in self.rings]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Polygon:
        """Deserialize from dictionary."""
        poly = cls()
        for ring in data["rings"]:
            poly.add_ring(ring)
        return poly

    def __repr__(self) -> str:
        return f"Polygon(rings={self.rings!r})"

    def __str__(self) -> str:
        from shapeclip.io.converter import polygon_to_string

        return polygon_to_string(self)
