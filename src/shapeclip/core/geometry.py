"""Containment and measurement primitives on rings.

This module provides the point-level tests the clipping engine is built on:
- Point-on-segment testing (collinearity plus bounding box)
- Point-in-ring testing (ray casting with an inclusive boundary)
- Point-in-polygon testing (even-odd composition across rings)
- Epsilon-deduplicated point insertion
- Unsigned ring area (shoelace formula)

All functions are pure and operate on plain lists of Points.
"""

from collections.abc import Sequence

from shapeclip.domain import Point

Ring = Sequence[Point]


def is_point_on_segment(pt: Point, a: Point, b: Point, epsilon: float = 1e-9) -> bool:
    """Check whether ``pt`` lies on the segment from ``a`` to ``b``.

    The point must be collinear with the segment (zero cross product within
    ``epsilon``) and inside its bounding box.

    Examples:
        >>> is_point_on_segment(Point(5.0, 0.0), Point(0.0, 0.0), Point(10.0, 0.0))
        True
        >>> is_point_on_segment(Point(15.0, 0.0), Point(0.0, 0.0), Point(10.0, 0.0))
        False
    """
    cross = (pt.x - a.x) * (b.y - a.y) - (pt.y - a.y) * (b.x - a.x)
    if abs(cross) > epsilon:
        return False

    return (
        min(a.x, b.x) - epsilon <= pt.x <= max(a.x, b.x) + epsilon
        and min(a.y, b.y) - epsilon <= pt.y <= max(a.y, b.y) + epsilon
    )


def is_point_in_ring(pt: Point, ring: Ring, epsilon: float = 1e-9) -> bool:
    """Determine if a point is inside a single ring.

    Casts a ray from the point towards +x and counts edge crossings; an odd
    count means inside. The ring is treated as closed (the edge from the last
    point back to the first is included).

    A point lying on any edge counts as inside. Clipping relies on this so
    that fragment endpoints sitting exactly on the boundary are kept.

    Args:
        pt: The point to test
        ring: Ring points
        epsilon: Tolerance for the on-edge check

    Returns:
        True if the point is inside or on the boundary of the ring
    """
    inside = False
    n = len(ring)
    j = n - 1

    for i in range(n):
        pa = ring[i]
        pb = ring[j]

        if is_point_on_segment(pt, pa, pb, epsilon):
            return True

        dy = (pb.y - pa.y) or 1e-12
        if ((pa.y > pt.y) != (pb.y > pt.y)) and (pt.x < (pb.x - pa.x) * (pt.y - pa.y) / dy + pa.x):
            inside = not inside

        j = i

    return inside


def is_point_in_polygon(pt: Point, rings: Sequence[Ring]) -> bool:
    """Determine if a point is inside a multi-ring polygon.

    Each ring containing the point flips the result (even-odd rule), so a
    second ring nested in the first acts as a hole while disjoint rings act
    as separate shapes.
    """
    inside = False
    for ring in rings:
        if is_point_in_ring(pt, ring):
            inside = not inside
    return inside


def insert_unique_point(points: list[Point], new_pt: Point, epsilon: float = 1e-6) -> bool:
    """Append ``new_pt`` unless a point within ``epsilon`` is already present.

    Returns:
        True if the point was appended
    """
    for p in points:
        if p.distance_to(new_pt) < epsilon:
            return False
    points.append(new_pt)
    return True


def ring_area(ring: Ring) -> float:
    """Calculate the unsigned area of a ring using the shoelace formula.

    Returns:
        Area in square units, 0.0 for rings with fewer than 3 points
    """
    n = len(ring)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += ring[i].x * ring[j].y
        area -= ring[j].x * ring[i].y

    return abs(area) / 2.0
