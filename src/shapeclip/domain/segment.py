"""Line segment between two points.

Segments are transient: they are built on the fly from consecutive ring
points for length and intersection computations and never stored inside a
Polygon.
"""

from __future__ import annotations

from dataclasses import dataclass

from shapeclip.domain.point import DEFAULT_EPSILON, Point
from shapeclip.exceptions import PointFormatError


@dataclass(slots=True)
class Segment:
    """A line segment from ``p1`` to ``p2``.

    Attributes:
        p1: Start point
        p2: End point
    """

    p1: Point
    p2: Point

    def __post_init__(self) -> None:
        for pt in (self.p1, self.p2):
            if not isinstance(pt, Point):
                raise PointFormatError(pt, "Point instance")

    def length(self) -> float:
        """Return the Euclidean length of the segment."""
        return self.p1.distance_to(self.p2)

    def midpoint(self) -> Point:
        """Return the point halfway between both ends."""
        return self.lerp(0.5)

    def lerp(self, f: float) -> Point:
        """Return the point at factor ``f`` along the segment (unclamped)."""
        return self.p1.lerp(self.p2, f)

    def lerp_segment(self, other: Segment, f: float) -> Segment:
        """Interpolate both endpoints towards another segment's endpoints."""
        return Segment(self.p1.lerp(other.p1, f), self.p2.lerp(other.p2, f))

    def intersection(self, other: Segment, epsilon: float = DEFAULT_EPSILON) -> Point | None:
        """Find the intersection point of two segments.

        Each segment is written as a line ``a*x + b*y = c`` and the 2x2
        system is solved with Cramer's rule. A determinant below ``epsilon``
        is treated as parallel, so collinear overlaps also return None.

        The solution is accepted when it lies inside both segments' bounding
        boxes. This is a tolerant stand-in for an exact on-segment check and
        can accept points slightly off a slanted segment.

        Args:
            other: Segment to intersect with
            epsilon: Determinant threshold for parallel lines

        Returns:
            Intersection point, or None if the segments do not intersect

        Examples:
            >>> s1 = Segment(Point(0.0, 0.0), Point(10.0, 10.0))
            >>> s2 = Segment(Point(0.0, 10.0), Point(10.0, 0.0))
            >>> s1.intersection(s2)
            Point(x=5.0, y=5.0)
        """
        p1, p2 = self.p1, self.p2
        p3, p4 = other.p1, other.p2

        a1 = p2.y - p1.y
        b1 = p1.x - p2.x
        c1 = a1 * p1.x + b1 * p1.y

        a2 = p4.y - p3.y
        b2 = p3.x - p4.x
        c2 = a2 * p3.x + b2 * p3.y

        det = a1 * b2 - a2 * b1
        if abs(det) < epsilon:
            return None

        # + 0.0 turns -0.0 into 0.0
        pt = Point((b2 * c1 - b1 * c2) / det + 0.0, (a1 * c2 - a2 * c1) / det + 0.0)

        if pt.is_in_segment_area(self) and pt.is_in_segment_area(other):
            return pt

        return None

    def __str__(self) -> str:
        from shapeclip.io.converter import segment_to_string

        return segment_to_string(self)
