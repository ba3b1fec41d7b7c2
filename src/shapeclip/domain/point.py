"""Point value type and point ingestion.

This module defines the 2D point used throughout shapeclip and the single
ingestion function that turns any supported point-like input into a Point:
- Point instances (returned unchanged)
- (x, y) sequences
- mappings or objects exposing x and y
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from shapeclip.exceptions import PointFormatError

if TYPE_CHECKING:
    from shapeclip.domain.segment import Segment

PointLike = Union["Point", Sequence[float], Mapping[str, float]]

DEFAULT_EPSILON = 1e-6


@dataclass(slots=True)
class Point:
    """A point (or vector) in 2D space.

    Immutable by convention: every transform returns a new Point. The only
    in-place operation is ``set``, used while building values.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float = 0.0
    y: float = 0.0

    def copy(self) -> Point:
        """Return an independent copy of this point."""
        return Point(self.x, self.y)

    def set(self, x: float, y: float) -> Point:
        """Set both coordinates in place.

        Returns:
            This point, for chaining
        """
        self.x = x
        self.y = y
        return self

    def equals(self, other: Point, epsilon: float = DEFAULT_EPSILON) -> bool:
        """Check equality within ``epsilon`` on each axis."""
        return abs(self.x - other.x) < epsilon and abs(self.y - other.y) < epsilon

    def distance_sq_to(self, other: Point) -> float:
        """Return the squared Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance_to(self, other: Point) -> float:
        """Return the Euclidean distance to another point."""
        return math.sqrt(self.distance_sq_to(other))

    def lerp(self, other: Point, f: float) -> Point:
        """Linearly interpolate towards ``other``.

        ``f`` is not clamped, so values outside [0, 1] extrapolate along
        the line through both points.

        Args:
            other: Target point (reached at f=1)
            f: Interpolation factor

        Returns:
            New interpolated point
        """
        return Point(self.x + (other.x - self.x) * f, self.y + (other.y - self.y) * f)

    def translate(self, vector: PointLike) -> Point:
        """Return this point moved by ``vector``."""
        vec = coerce_point(vector)
        return Point(self.x + vec.x, self.y + vec.y)

    def scale(self, factor: float | PointLike, origin: PointLike | None = None) -> Point:
        """Return this point scaled about ``origin``.

        Args:
            factor: Uniform factor, or a point-like (sx, sy) for non-uniform scaling
            origin: Fixed point of the scaling (default (0, 0))

        Returns:
            New scaled point

        Raises:
            PointFormatError: If ``factor`` is neither a number nor point-like
        """
        if isinstance(factor, (int, float)) and not isinstance(factor, bool):
            sx = sy = float(factor)
        else:
            try:
                vec = coerce_point(factor)  # type: ignore[arg-type]
            except PointFormatError as e:
                raise PointFormatError(factor, "number, Point, (sx, sy) or {'x', 'y'}") from e
            sx, sy = vec.x, vec.y

        o = Point() if origin is None else coerce_point(origin)
        return Point(o.x + (self.x - o.x) * sx, o.y + (self.y - o.y) * sy)

    def rotate(self, angle: float, origin: PointLike | None = None) -> Point:
        """Return this point rotated counter-clockwise by ``angle`` radians.

        Args:
            angle: Rotation angle in radians
            origin: Center of rotation (default (0, 0))

        Returns:
            New rotated point
        """
        o = Point() if origin is None else coerce_point(origin)
        dx = self.x - o.x
        dy = self.y - o.y
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Point(o.x + dx * cos_a - dy * sin_a, o.y + dx * sin_a + dy * cos_a)

    def is_in_segment_area(self, segment: Segment, epsilon: float = DEFAULT_EPSILON) -> bool:
        """Check whether this point lies in the bounding box of a segment.

        The box is widened by ``epsilon`` on every side.
        """
        p1, p2 = segment.p1, segment.p2
        return (
            min(p1.x, p2.x) - epsilon <= self.x <= max(p1.x, p2.x) + epsilon
            and min(p1.y, p2.y) - epsilon <= self.y <= max(p1.y, p2.y) + epsilon
        )

    def to_tuple(self) -> tuple[float, float]:
        """Convert to a plain (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Point:
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"])

    def __str__(self) -> str:
        from shapeclip.io.converter import point_to_string

        return point_to_string(self)


def coerce_point(value: PointLike) -> Point:
    """Normalize any supported point-like value to a Point.

    Point instances are returned as they are; other inputs build a new Point.

    Args:
        value: A Point, an (x, y) sequence, a mapping with "x" and "y" keys,
            or an object with x and y attributes

    Returns:
        The canonical Point

    Raises:
        PointFormatError: If the value has no recognizable x/y pair
    """
    if isinstance(value, Point):
        return value

    try:
        if isinstance(value, Mapping):
            return Point(float(value["x"]), float(value["y"]))
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            if len(value) < 2:
                raise PointFormatError(value)
            return Point(float(value[0]), float(value[1]))
        if hasattr(value, "x") and hasattr(value, "y"):
            return Point(float(value.x), float(value.y))  # type: ignore[union-attr]
    except (KeyError, TypeError, ValueError) as e:
        raise PointFormatError(value) from e

    raise PointFormatError(value)
