"""Segment and polygon clipping against polygon boundaries.

Key functions:
- clip_line: Clip one segment against every ring of a boundary polygon
- clip_to: Clip every edge of a subject polygon against a boundary polygon

Clipping keeps either the parts inside the boundary (``keep_inside=True``)
or the parts outside it. Results are Polygons whose rings are stitched
fragments of the input edges.
"""

import logging

from shapeclip.core.geometry import insert_unique_point, is_point_in_ring
from shapeclip.core.optimizer import optimize_rings
from shapeclip.domain import Point, Polygon, Segment

logger = logging.getLogger(__name__)


def _clip_against_ring(
    start: Point,
    end: Point,
    ring: list[Point],
    keep_inside: bool,
    point_epsilon: float,
    parallel_epsilon: float,
) -> list[tuple[Point, Point]]:
    """Clip a single segment against one ring.

    Returns:
        Surviving fragments as (start, end) pairs ordered from ``start``
    """
    points: list[Point] = []
    segment = Segment(start, end)
    n = len(ring)

    for i in range(n):
        edge = Segment(ring[i], ring[(i + 1) % n])
        hit = segment.intersection(edge, parallel_epsilon)
        if hit is not None:
            insert_unique_point(points, hit, point_epsilon)

    start_inside = is_point_in_ring(start, ring)
    end_inside = is_point_in_ring(end, ring)
    if start_inside == keep_inside:
        insert_unique_point(points, start, point_epsilon)
    if end_inside == keep_inside:
        insert_unique_point(points, end, point_epsilon)

    points.sort(key=start.distance_sq_to)

    # Unpaired trailing point (tangential contact) is dropped
    if len(points) % 2 == 1:
        logger.debug(
            "Dropping unpaired point %s while clipping %s",
            points[-1].to_tuple(),
            (start.to_tuple(), end.to_tuple()),
        )

    return [(points[k], points[k + 1]) for k in range(0, len(points) - 1, 2)]


def clip_line(
    segment: Segment,
    boundary: Polygon,
    keep_inside: bool = True,
    point_epsilon: float = 1e-6,
    parallel_epsilon: float = 1e-6,
) -> Polygon:
    """Clip a segment against a boundary polygon.

    The rings of the boundary are applied one after another: fragments that
    survive ring k are the input for ring k+1. This differs from the
    even-odd composition used by ``is_point_in_polygon``; for a boundary with
    a hole, ``keep_inside=True`` keeps parts inside both rings.

    For each ring, the candidate segment is split at every edge crossing,
    the endpoints on the kept side are added, and the sorted points are paired
    up consecutively. An odd number of points drops the last one.

    Args:
        segment: Segment to clip
        boundary: Boundary polygon (any number of rings)
        keep_inside: Keep the parts inside the boundary if True, else outside
        point_epsilon: Distance under which collected points are merged
        parallel_epsilon: Determinant threshold for parallel edges

    Returns:
        Polygon whose rings are the stitched surviving fragments

    Examples:
        >>> square = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)], close=True)
        >>> clipped = clip_line(Segment(Point(-5, 5), Point(15, 5)), square)
        >>> [p.to_tuple() for p in clipped.rings[0]]
        [(0.0, 5.0), (10.0, 5.0)]
    """
    fragments: list[tuple[Point, Point]] = [(segment.p1, segment.p2)]

    for ring in boundary.rings:
        if len(ring) < 2:
            continue

        survivors: list[tuple[Point, Point]] = []
        for start, end in fragments:
            survivors.extend(
                _clip_against_ring(start, end, ring, keep_inside, point_epsilon, parallel_epsilon)
            )

        fragments = survivors
        if not fragments:
            break

    result = Polygon()
    result.rings = optimize_rings(
        [[start.copy(), end.copy()] for start, end in fragments], point_epsilon
    )
    return result


def clip_to(
    subject: Polygon,
    boundary: Polygon,
    keep_inside: bool = True,
    point_epsilon: float = 1e-6,
    parallel_epsilon: float = 1e-6,
) -> Polygon:
    """Clip every edge of ``subject`` against ``boundary``.

    Edges are consecutive point pairs of each subject ring (no implicit
    closing edge, so open polylines clip as polylines). All surviving
    fragments are collected into one polygon and stitched once at the end.

    Args:
        subject: Polygon whose edges are clipped
        boundary: Boundary polygon
        keep_inside: Keep the parts inside the boundary if True, else outside
        point_epsilon: Distance under which points are considered equal
        parallel_epsilon: Determinant threshold for parallel edges

    Returns:
        New polygon; a deep copy of ``subject`` if ``boundary`` has no rings
    """
    if not boundary.rings:
        return subject.copy()

    collected: list[list[Point]] = []
    for ring in subject.rings:
        if len(ring) < 2:
            continue
        for i in range(len(ring) - 1):
            clipped = clip_line(
                Segment(ring[i], ring[i + 1]),
                boundary,
                keep_inside,
                point_epsilon,
                parallel_epsilon,
            )
            collected.extend(r for r in clipped.rings if r)

    result = Polygon()
    result.rings = optimize_rings(collected, point_epsilon)
    logger.debug(
        "Clipped %d subject rings to %d rings (keep_inside=%s)",
        len(subject.rings),
        len(result.rings),
        keep_inside,
    )
    return result
