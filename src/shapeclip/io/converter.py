"""Text and SVG forms of the domain types.

The kernel never formats anything itself; these functions turn Points,
Segments and Polygons into readable strings and SVG elements at a caller
chosen number of decimal places.
"""

from shapeclip.domain import BoundingBox, Point, Polygon, Segment


def _fmt(value: float, precision: int) -> str:
    return f"{value:.{precision}f}"


def point_to_string(pt: Point, precision: int = 1) -> str:
    """Format a point, e.g. ``Point(1.0, 2.0)``."""
    return f"Point({_fmt(pt.x, precision)}, {_fmt(pt.y, precision)})"


def segment_to_string(segment: Segment, precision: int = 1) -> str:
    """Format a segment, e.g. ``Segment(Point(0.0, 0.0) -> Point(1.0, 1.0))``."""
    return (
        f"Segment({point_to_string(segment.p1, precision)} -> "
        f"{point_to_string(segment.p2, precision)})"
    )


def polygon_to_string(polygon: Polygon, precision: int = 1) -> str:
    """Format a polygon; points are joined by ", " and rings by " | "."""
    rings = (", ".join(point_to_string(pt, precision) for pt in ring) for ring in polygon.rings)
    return f"Polygon({' | '.join(rings)})"


def point_to_svg(pt: Point, precision: int = 2) -> str:
    """Render a point as an SVG circle of radius 2."""
    return f'<circle cx="{_fmt(pt.x, precision)}" cy="{_fmt(pt.y, precision)}" r="2" />'


def segment_to_svg(segment: Segment, precision: int = 2) -> str:
    """Render a segment as an SVG line."""
    p1, p2 = segment.p1, segment.p2
    return (
        f'<line x1="{_fmt(p1.x, precision)}" y1="{_fmt(p1.y, precision)}" '
        f'x2="{_fmt(p2.x, precision)}" y2="{_fmt(p2.y, precision)}" />'
    )


def polygon_to_svg(polygon: Polygon, precision: int = 2) -> str:
    """Render each non-empty ring as an SVG polyline, one per line."""
    lines = []
    for ring in polygon.rings:
        if not ring:
            continue
        points = " ".join(f"{_fmt(pt.x, precision)},{_fmt(pt.y, precision)}" for pt in ring)
        lines.append(f'<polyline points="{points}" />\n')
    return "".join(lines)


def svg_document(
    body: str,
    bbox: BoundingBox | None,
    margin: float = 10.0,
    stroke: str = "black",
    stroke_width: float = 1.0,
    precision: int = 2,
) -> str:
    """Wrap SVG elements in a standalone document.

    Args:
        body: SVG elements (e.g. from ``polygon_to_svg``)
        bbox: Extent of the drawing; None gives an empty 0x0 view box
        margin: Space added around the bounding box
        stroke: Stroke color for all elements
        stroke_width: Stroke width for all elements
        precision: Decimal places for the view box

    Returns:
        Complete SVG document text
    """
    if bbox is None:
        bbox = BoundingBox(0.0, 0.0, 0.0, 0.0)

    x = _fmt(bbox.min_x - margin, precision)
    y = _fmt(bbox.min_y - margin, precision)
    w = _fmt(bbox.width + 2 * margin, precision)
    h = _fmt(bbox.height + 2 * margin, precision)

    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{x} {y} {w} {h}" '
        f'width="{w}" height="{h}">\n'
        f'<g fill="none" stroke="{stroke}" stroke-width="{stroke_width}">\n'
        f"{body}"
        "</g>\n"
        "</svg>\n"
    )
