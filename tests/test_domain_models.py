"""Tests for domain models to verify they work correctly."""

import math
from types import SimpleNamespace

import pytest

from shapeclip.domain import BoundingBox, Point, Polygon, Segment, coerce_point
from shapeclip.exceptions import PointFormatError, PolygonConstructionError, RingFormatError


def square(x: float = 0.0, y: float = 0.0, size: float = 10.0) -> Polygon:
    return Polygon([(x, y), (x + size, y), (x + size, y + size), (x, y + size)], close=True)


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_default_point_is_origin(self) -> None:
        """Test default point is (0, 0)."""
        assert Point().to_tuple() == (0.0, 0.0)

    def test_copy_is_independent(self) -> None:
        """Test that a copy does not share state."""
        p = Point(1.0, 2.0)
        q = p.copy()
        q.set(5.0, 6.0)
        assert p.to_tuple() == (1.0, 2.0)
        assert q.to_tuple() == (5.0, 6.0)

    def test_set_returns_self(self) -> None:
        """Test that set mutates in place and chains."""
        p = Point()
        assert p.set(3.0, 4.0) is p
        assert p.to_tuple() == (3.0, 4.0)

    def test_equals_within_epsilon(self) -> None:
        """Test epsilon-tolerant equality."""
        assert Point(1.0, 1.0).equals(Point(1.0 + 1e-7, 1.0 - 1e-7))
        assert not Point(1.0, 1.0).equals(Point(1.0 + 1e-5, 1.0))
        assert Point(1.0, 1.0).equals(Point(1.05, 1.0), epsilon=0.1)

    def test_distance(self) -> None:
        """Test Euclidean distance and squared distance."""
        a = Point(0.0, 0.0)
        b = Point(3.0, 4.0)
        assert a.distance_to(b) == 5.0
        assert a.distance_sq_to(b) == 25.0

    def test_lerp(self) -> None:
        """Test interpolation and unclamped extrapolation."""
        a = Point(0.0, 0.0)
        b = Point(10.0, 20.0)
        assert a.lerp(b, 0.5).to_tuple() == (5.0, 10.0)
        assert a.lerp(b, 2.0).to_tuple() == (20.0, 40.0)
        assert a.lerp(b, -1.0).to_tuple() == (-10.0, -20.0)

    def test_translate_accepts_point_like(self) -> None:
        """Test translation by Point, tuple and mapping."""
        p = Point(1.0, 1.0)
        assert p.translate(Point(2.0, 3.0)).to_tuple() == (3.0, 4.0)
        assert p.translate((2, 3)).to_tuple() == (3.0, 4.0)
        assert p.translate({"x": 2, "y": 3}).to_tuple() == (3.0, 4.0)
        assert p.to_tuple() == (1.0, 1.0)

    def test_scale_uniform_about_origin(self) -> None:
        """Test uniform scaling about a custom origin."""
        assert Point(3.0, 3.0).scale(2.0, (1.0, 1.0)).to_tuple() == (5.0, 5.0)
        assert Point(3.0, 3.0).scale(2).to_tuple() == (6.0, 6.0)

    def test_scale_non_uniform(self) -> None:
        """Test non-uniform scaling."""
        assert Point(1.0, 1.0).scale((2.0, 3.0)).to_tuple() == (2.0, 3.0)
        assert Point(1.0, 1.0).scale(Point(-1.0, 1.0)).to_tuple() == (-1.0, 1.0)

    def test_scale_invalid_factor(self) -> None:
        """Test invalid scale factor is rejected."""
        with pytest.raises(PointFormatError):
            Point(1.0, 1.0).scale("abc")  # type: ignore[arg-type]

    def test_rotate_quarter_turn(self) -> None:
        """Test rotation about the origin."""
        p = Point(1.0, 0.0).rotate(math.pi / 2)
        assert p.equals(Point(0.0, 1.0), 1e-12)

    def test_rotate_about_point(self) -> None:
        """Test rotation about a custom origin."""
        p = Point(2.0, 1.0).rotate(math.pi, Point(1.0, 1.0))
        assert p.equals(Point(0.0, 1.0), 1e-12)

    def test_is_in_segment_area(self) -> None:
        """Test bounding box membership."""
        seg = Segment(Point(0.0, 0.0), Point(10.0, 5.0))
        assert Point(5.0, 5.0).is_in_segment_area(seg)
        assert Point(10.0 + 1e-7, 0.0).is_in_segment_area(seg)
        assert not Point(11.0, 0.0).is_in_segment_area(seg)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.0, 200.0)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_str(self) -> None:
        """Test string form."""
        assert str(Point(1.0, 2.0)) == "Point(1.0, 2.0)"


class TestCoercePoint:
    """Tests for point ingestion."""

    def test_point_returned_unchanged(self) -> None:
        p = Point(1.0, 2.0)
        assert coerce_point(p) is p

    @pytest.mark.parametrize(
        "value",
        [(1, 2), [1.0, 2.0], {"x": 1, "y": 2}, SimpleNamespace(x=1, y=2)],
    )
    def test_supported_shapes(self, value: object) -> None:
        """Test every supported input shape becomes the same Point."""
        assert coerce_point(value).to_tuple() == (1.0, 2.0)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [(1,), {"x": 1}, "12", None, ("a", "b"), 42])
    def test_malformed_input(self, value: object) -> None:
        """Test malformed input raises PointFormatError."""
        with pytest.raises(PointFormatError):
            coerce_point(value)  # type: ignore[arg-type]


class TestSegment:
    """Tests for Segment class."""

    def test_requires_points(self) -> None:
        """Test that raw tuples are rejected."""
        with pytest.raises(PointFormatError):
            Segment((0, 0), Point(1.0, 1.0))  # type: ignore[arg-type]

    def test_length_and_midpoint(self) -> None:
        seg = Segment(Point(0.0, 0.0), Point(6.0, 8.0))
        assert seg.length() == 10.0
        assert seg.midpoint().to_tuple() == (3.0, 4.0)
        assert seg.lerp(0.25).to_tuple() == (1.5, 2.0)

    def test_lerp_segment(self) -> None:
        """Test both endpoints are interpolated independently."""
        a = Segment(Point(0.0, 0.0), Point(10.0, 0.0))
        b = Segment(Point(0.0, 10.0), Point(20.0, 10.0))
        mid = a.lerp_segment(b, 0.5)
        assert mid.p1.to_tuple() == (0.0, 5.0)
        assert mid.p2.to_tuple() == (15.0, 5.0)

    def test_crossing_diagonals(self) -> None:
        """Test diagonals of a square cross at its center."""
        s1 = Segment(Point(0.0, 0.0), Point(10.0, 10.0))
        s2 = Segment(Point(0.0, 10.0), Point(10.0, 0.0))
        hit = s1.intersection(s2)
        assert hit is not None
        assert hit.equals(Point(5.0, 5.0))

    def test_parallel_segments(self) -> None:
        s1 = Segment(Point(0.0, 0.0), Point(10.0, 0.0))
        s2 = Segment(Point(0.0, 1.0), Point(10.0, 1.0))
        assert s1.intersection(s2) is None

    def test_intersection_has_no_negative_zero(self) -> None:
        """Test a crossing on the y axis reports x as 0.0, not -0.0."""
        seg = Segment(Point(-5.0, 5.0), Point(15.0, 5.0))
        edge = Segment(Point(0.0, 10.0), Point(0.0, 0.0))
        hit = seg.intersection(edge)
        assert hit is not None
        assert math.copysign(1.0, hit.x) == 1.0
        assert str(hit) == "Point(0.0, 5.0)"

    def test_collinear_overlap_is_swallowed(self) -> None:
        """Test collinear overlapping segments report no intersection."""
        s1 = Segment(Point(0.0, 0.0), Point(10.0, 0.0))
        s2 = Segment(Point(5.0, 0.0), Point(15.0, 0.0))
        assert s1.intersection(s2) is None

    def test_lines_cross_outside_segments(self) -> None:
        s1 = Segment(Point(0.0, 0.0), Point(1.0, 1.0))
        s2 = Segment(Point(0.0, 10.0), Point(10.0, 0.0))
        assert s1.intersection(s2) is None

    def test_touching_at_endpoint(self) -> None:
        s1 = Segment(Point(0.0, 0.0), Point(10.0, 0.0))
        s2 = Segment(Point(10.0, 0.0), Point(10.0, 10.0))
        hit = s1.intersection(s2)
        assert hit is not None
        assert hit.equals(Point(10.0, 0.0))

    def test_segment_str(self) -> None:
        seg = Segment(Point(0.0, 0.0), Point(1.0, 1.0))
        assert str(seg) == "Segment(Point(0.0, 0.0) -> Point(1.0, 1.0))"


class TestPolygonConstruction:
    """Tests for building polygons."""

    def test_empty_polygon(self) -> None:
        poly = Polygon()
        assert poly.rings == []
        assert poly.is_empty()
        assert poly.bounding_box() is None

    def test_first_ring_closed(self) -> None:
        """Test closing repeats the first point once."""
        poly = square()
        assert len(poly.rings) == 1
        assert len(poly.rings[0]) == 5
        assert poly.rings[0][-1].equals(poly.rings[0][0])

    def test_close_is_idempotent(self) -> None:
        poly = square()
        poly.close_last_ring()
        assert len(poly.rings[0]) == 5

    def test_add_ring_mixed_inputs(self) -> None:
        """Test point-like entries of different shapes in one ring."""
        poly = Polygon().add_ring([Point(0.0, 0.0), (1, 0), {"x": 1, "y": 1}])
        assert [p.to_tuple() for p in poly.rings[0]] == [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]

    @pytest.mark.parametrize("value", [42, {(0, 0), (1, 1)}, "0,0 1,1"])
    def test_add_ring_rejects_non_sequence(self, value: object) -> None:
        with pytest.raises(RingFormatError):
            Polygon().add_ring(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [{(0, 0), (10, 0), (5, 10)}, {"x": 1, "y": 2}, "0,0 1,1"])
    def test_constructor_rejects_non_sequence(self, value: object) -> None:
        """Test the constructor rejects unordered point collections."""
        with pytest.raises(RingFormatError):
            Polygon(value)  # type: ignore[arg-type]

    def test_add_point(self) -> None:
        """Test add_point appends to the last ring and starts one if needed."""
        poly = Polygon().add_point(Point(0.0, 0.0))
        poly.add_ring([(5, 5)]).add_point(Point(6.0, 6.0))
        assert len(poly.rings) == 2
        assert len(poly.rings[0]) == 1
        assert [p.to_tuple() for p in poly.rings[1]] == [(5.0, 5.0), (6.0, 6.0)]

    def test_add_point_requires_point(self) -> None:
        with pytest.raises(PointFormatError):
            Polygon().add_point((1, 2))  # type: ignore[arg-type]

    def test_create_n_edge(self) -> None:
        """Test regular polygon vertices lie on the circumcircle."""
        poly = Polygon.create_n_edge(4, radius=10.0, center=(5, 5))
        ring = poly.rings[0]
        assert len(ring) == 5
        assert ring[0].equals(Point(15.0, 5.0))
        for pt in ring:
            assert abs(pt.distance_to(Point(5.0, 5.0)) - 10.0) < 1e-9

    @pytest.mark.parametrize("factory", [Polygon.create_n_edge, Polygon.create_star])
    def test_factories_reject_fewer_than_three_edges(self, factory) -> None:
        with pytest.raises(PolygonConstructionError):
            factory(2)

    def test_create_star(self) -> None:
        """Test star vertices alternate between both radii."""
        poly = Polygon.create_star(5, radius_outer=100.0, radius_inner=40.0)
        ring = poly.rings[0]
        assert len(ring) == 11
        origin = Point()
        for i, pt in enumerate(ring[:-1]):
            expected = 100.0 if i % 2 == 0 else 40.0
            assert abs(pt.distance_to(origin) - expected) < 1e-9

    def test_create_arc_full_ellipse(self) -> None:
        """Test a full turn ends on its start point without a duplicate."""
        poly = Polygon.create_arc((0, 0), (100, 100), 0.0, 2 * math.pi)
        ring = poly.rings[0]
        assert ring[-1].equals(ring[0])
        assert not ring[-2].equals(ring[0])
        for pt in ring:
            assert abs(pt.distance_to(Point()) - 50.0) < 1e-9

    def test_create_arc_half_ellipse(self) -> None:
        """Test an upper half ellipse is closed along its chord."""
        poly = Polygon.create_arc((0, 0), (100, 50), 0.0, math.pi)
        ring = poly.rings[0]
        assert ring[-1].equals(ring[0])
        assert len(ring) >= 5
        bbox = poly.bounding_box()
        assert bbox is not None
        assert abs(bbox.min_x + 50.0) < 1e-9
        assert abs(bbox.max_x - 50.0) < 1e-9
        assert abs(bbox.max_y - 25.0) < 1e-2
        assert bbox.min_y > -1e-9

    def test_create_arc_rotation(self) -> None:
        poly = Polygon.create_arc((0, 0), (20, 20), 0.0, math.pi / 2, rotation=math.pi / 2)
        assert poly.rings[0][0].equals(Point(0.0, 10.0), 1e-9)


class TestPolygonQueries:
    """Tests for polygon measurements and transforms."""

    def test_length_open_polyline(self) -> None:
        """Test open rings have no wrap edge."""
        poly = Polygon([(0, 0), (3, 4), (3, 10)])
        assert poly.length() == 11.0

    def test_length_skips_degenerate_rings(self) -> None:
        poly = square().add_ring([(50, 50)]).add_ring([])
        assert poly.length() == 40.0

    def test_area(self) -> None:
        poly = square(size=10.0).add_ring([(0, 0), (1, 1)])
        assert poly.area() == 100.0

    def test_bounding_box(self) -> None:
        poly = square(2.0, 3.0, 4.0).add_ring([(-1, 10)])
        assert poly.bounding_box() == BoundingBox(-1.0, 3.0, 6.0, 10.0)
        bbox = poly.bounding_box()
        assert bbox is not None
        assert bbox.width == 7.0
        assert bbox.height == 7.0

    def test_bounding_box_tracks_mutation(self) -> None:
        poly = square()
        poly.rings[0].append(Point(100.0, 100.0))
        bbox = poly.bounding_box()
        assert bbox is not None
        assert bbox.max_x == 100.0

    def test_translate_in_place(self) -> None:
        poly = square()
        assert poly.translate((5, -5)) is poly
        assert poly.rings[0][0].to_tuple() == (5.0, -5.0)

    def test_rotate_in_place(self) -> None:
        poly = square().rotate(math.pi, (5, 5))
        bbox = poly.bounding_box()
        assert bbox is not None
        assert abs(bbox.min_x) < 1e-9
        assert abs(bbox.max_y - 10.0) < 1e-9

    def test_copy_is_deep(self) -> None:
        """Test mutating a copy leaves the original untouched."""
        original = square()
        clone = original.copy()
        clone.rings[0][0].set(99.0, 99.0)
        clone.rings[0].append(Point(1.0, 1.0))
        assert original.rings[0][0].to_tuple() == (0.0, 0.0)
        assert len(original.rings[0]) == 5

    def test_triangle_containment(self) -> None:
        triangle = Polygon([(0, 0), (10, 0), (5, 10)], close=True)
        assert triangle.is_point_in(Point(5.0, 3.0))
        assert not triangle.is_point_in(Point(15.0, 3.0))

    def test_polygon_serialization(self) -> None:
        p1 = square().add_ring([(1, 1), (2, 2)])
        p2 = Polygon.from_dict(p1.to_dict())
        assert p2.rings == p1.rings

    def test_polygon_str(self) -> None:
        poly = Polygon([(0, 0), (1, 0)]).add_ring([(2, 2)])
        assert str(poly) == "Polygon(Point(0.0, 0.0), Point(1.0, 0.0) | Point(2.0, 2.0))"
