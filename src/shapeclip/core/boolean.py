"""Combination of several polygons.

Key functions:
- merge: Concatenate the rings of two polygons and stitch them
- outer_hull: Heuristic union boundary of any number of polygons
- is_overlapping: Test whether two polygons share a region of positive area

The union is built by pairwise subtraction: every polygon's boundary is
clipped against all the others, keeping only what lies outside them. This
is exact for two polygons and for inputs without triple overlaps.
"""

import logging

from shapeclip.core.clipping import clip_to
from shapeclip.core.geometry import ring_area
from shapeclip.core.optimizer import optimize_rings
from shapeclip.domain import Polygon

logger = logging.getLogger(__name__)


def merge(target: Polygon, other: Polygon, epsilon: float = 1e-6) -> Polygon:
    """Append the rings of ``other`` to ``target`` in place and stitch them.

    Returns:
        ``target``, for chaining
    """
    target.rings = optimize_rings([*target.rings, *other.rings], epsilon)
    return target


def _is_valid(candidate: object) -> bool:
    return isinstance(candidate, Polygon) and any(len(ring) > 0 for ring in candidate.rings)


def outer_hull(
    *polygons: Polygon,
    point_epsilon: float = 1e-6,
    parallel_epsilon: float = 1e-6,
) -> Polygon:
    """Build the outer boundary of the union of several polygons.

    Arguments that are not Polygons, or have no points, are skipped.

    Args:
        *polygons: Polygons to combine
        point_epsilon: Distance under which points are considered equal
        parallel_epsilon: Determinant threshold for parallel edges

    Returns:
        Polygon holding the stitched outer boundary (empty if no valid input)

    Examples:
        >>> a = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)], close=True)
        >>> b = a.copy().translate((5, 5))
        >>> hull = outer_hull(a, b)
    """
    valid = [p for p in polygons if _is_valid(p)]
    if not valid:
        return Polygon()

    union = Polygon()
    for i, poly in enumerate(valid):
        outer = poly.copy()
        for j, other in enumerate(valid):
            if i != j:
                outer = clip_to(outer, other, False, point_epsilon, parallel_epsilon)
        merge(union, outer, point_epsilon)

    union.rings = optimize_rings(union.rings, point_epsilon)
    logger.debug("Outer hull of %d polygons has %d rings", len(valid), len(union.rings))
    return union


def is_overlapping(
    a: Polygon,
    b: Polygon,
    epsilon: float = 1e-9,
    point_epsilon: float = 1e-6,
    parallel_epsilon: float = 1e-6,
) -> bool:
    """Check whether two polygons overlap with positive area.

    Clips each polygon against the other keeping the inside parts and sums
    the area of every resulting ring with at least 3 points. Polygons that
    only touch along an edge or at a vertex yield 2-point fragments and
    therefore no area.

    A polygon without points overlaps nothing.

    Args:
        a: First polygon
        b: Second polygon
        epsilon: Area above which the polygons count as overlapping
        point_epsilon: Distance under which points are considered equal
        parallel_epsilon: Determinant threshold for parallel edges

    Returns:
        True if the shared area exceeds ``epsilon``
    """
    if a.is_empty() or b.is_empty():
        return False

    total = 0.0
    for subject, boundary in ((a, b), (b, a)):
        clipped = clip_to(subject, boundary, True, point_epsilon, parallel_epsilon)
        for ring in clipped.rings:
            if len(ring) < 3:
                continue
            total += ring_area(ring)
            if total > epsilon:
                return True
    return False
