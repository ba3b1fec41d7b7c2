"""Drawing polygons onto caller-supplied surfaces.

The geometry core never talks to a renderer. Anything offering
``move_to``, ``line_to`` and ``close_path`` (a canvas wrapper, a path
builder, a test recorder) can receive a polygon through ``draw_polygon``.
"""

from typing import Protocol, runtime_checkable

from shapeclip.domain import Polygon


@runtime_checkable
class DrawableSurface(Protocol):
    """Path-building capability of a host drawing surface."""

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def close_path(self) -> None: ...


def draw_polygon(polygon: Polygon, surface: DrawableSurface, epsilon: float = 1e-6) -> int:
    """Draw every non-empty ring of ``polygon`` onto ``surface``.

    Each ring starts with ``move_to`` on its first point followed by
    ``line_to`` for the rest. Closed rings (last point equals first) end with
    ``close_path`` instead of a final ``line_to`` back to the start.

    Returns:
        Number of rings drawn
    """
    drawn = 0
    for ring in polygon.rings:
        if not ring:
            continue

        closed = len(ring) > 2 and ring[-1].equals(ring[0], epsilon)
        points = ring[:-1] if closed else ring

        surface.move_to(points[0].x, points[0].y)
        for pt in points[1:]:
            surface.line_to(pt.x, pt.y)
        if closed:
            surface.close_path()
        drawn += 1

    return drawn


class SvgPathSurface:
    """Surface that records drawing commands as SVG path data.

    Example:
        surface = SvgPathSurface(precision=1)
        draw_polygon(square, surface)
        surface.path_data  # "M 0.0 0.0 L 10.0 0.0 ... Z"
    """

    def __init__(self, precision: int = 2) -> None:
        self._precision = precision
        self._commands: list[str] = []

    def _coords(self, x: float, y: float) -> str:
        return f"{x:.{self._precision}f} {y:.{self._precision}f}"

    def move_to(self, x: float, y: float) -> None:
        self._commands.append(f"M {self._coords(x, y)}")

    def line_to(self, x: float, y: float) -> None:
        self._commands.append(f"L {self._coords(x, y)}")

    def close_path(self) -> None:
        self._commands.append("Z")

    @property
    def path_data(self) -> str:
        """Recorded commands as a path ``d`` attribute value."""
        return " ".join(self._commands)

    def to_svg(self) -> str:
        """Return the recorded path as an SVG path element."""
        return f'<path d="{self.path_data}" />\n'
