"""Unit tests for the I/O layer.

Tests for converter functions, drawing surfaces, ShapeReader and ShapeWriter.
"""

import json
from pathlib import Path

import pytest

from shapeclip.config import OutputConfig
from shapeclip.domain import BoundingBox, Point, Polygon, Segment
from shapeclip.exceptions import ShapeFileError, ShapeSaveError
from shapeclip.io import DrawableSurface, ShapeReader, ShapeWriter, SvgPathSurface, draw_polygon
from shapeclip.io.converter import (
    point_to_string,
    point_to_svg,
    polygon_to_string,
    polygon_to_svg,
    segment_to_string,
    segment_to_svg,
    svg_document,
)


def square(x: float = 0.0, y: float = 0.0, size: float = 10.0) -> Polygon:
    return Polygon([(x, y), (x + size, y), (x + size, y + size), (x, y + size)], close=True)


class RecordingSurface:
    """Surface that records calls for inspection."""

    def __init__(self):
        self.calls = []

    def move_to(self, x, y):
        self.calls.append(("move_to", x, y))

    def line_to(self, x, y):
        self.calls.append(("line_to", x, y))

    def close_path(self):
        self.calls.append(("close_path",))


class TestConverter:
    """Tests for text and SVG conversion."""

    def test_point_to_string(self):
        assert point_to_string(Point(1.0, 2.0)) == "Point(1.0, 2.0)"
        assert point_to_string(Point(1.0, 2.0), precision=3) == "Point(1.000, 2.000)"

    def test_segment_to_string(self):
        seg = Segment(Point(0.0, 0.0), Point(1.0, 1.0))
        assert segment_to_string(seg) == "Segment(Point(0.0, 0.0) -> Point(1.0, 1.0))"
        assert str(seg) == segment_to_string(seg)

    def test_polygon_to_string(self):
        poly = Polygon([(0, 0), (1, 0)]).add_ring([(2, 2)])
        assert polygon_to_string(poly) == (
            "Polygon(Point(0.0, 0.0), Point(1.0, 0.0) | Point(2.0, 2.0))"
        )

    def test_empty_polygon_to_string(self):
        assert str(Polygon()) == "Polygon()"

    def test_point_to_svg(self):
        assert point_to_svg(Point(1.0, 2.0)) == '<circle cx="1.00" cy="2.00" r="2" />'

    def test_segment_to_svg(self):
        seg = Segment(Point(0.0, 0.0), Point(1.5, 2.0))
        assert segment_to_svg(seg, precision=1) == '<line x1="0.0" y1="0.0" x2="1.5" y2="2.0" />'

    def test_polygon_to_svg_skips_empty_rings(self):
        poly = Polygon([(0, 0), (1, 0)]).add_ring([])
        assert polygon_to_svg(poly) == '<polyline points="0.00,0.00 1.00,0.00" />\n'

    def test_svg_document(self):
        doc = svg_document("<g />\n", BoundingBox(0.0, 0.0, 10.0, 20.0), margin=5.0, precision=0)
        assert doc.startswith('<svg xmlns="http://www.w3.org/2000/svg" viewBox="-5 -5 20 30"')
        assert 'stroke="black"' in doc
        assert "<g />\n" in doc
        assert doc.endswith("</svg>\n")

    def test_svg_document_without_bbox(self):
        doc = svg_document("", None)
        assert 'viewBox="-10.00 -10.00 20.00 20.00"' in doc


class TestDrawPolygon:
    """Tests for drawing onto caller-supplied surfaces."""

    def test_recording_surface_matches_protocol(self):
        assert isinstance(RecordingSurface(), DrawableSurface)
        assert isinstance(SvgPathSurface(), DrawableSurface)

    def test_closed_ring_uses_close_path(self):
        surface = RecordingSurface()
        assert draw_polygon(square(), surface) == 1
        assert surface.calls == [
            ("move_to", 0.0, 0.0),
            ("line_to", 10.0, 0.0),
            ("line_to", 10.0, 10.0),
            ("line_to", 0.0, 10.0),
            ("close_path",),
        ]

    def test_open_ring(self):
        surface = RecordingSurface()
        draw_polygon(Polygon([(0, 0), (5, 5), (10, 0)]), surface)
        assert surface.calls == [
            ("move_to", 0.0, 0.0),
            ("line_to", 5.0, 5.0),
            ("line_to", 10.0, 0.0),
        ]

    def test_empty_rings_are_skipped(self):
        surface = RecordingSurface()
        poly = Polygon().add_ring([]).add_ring([(1, 1), (2, 2)])
        assert draw_polygon(poly, surface) == 1
        assert surface.calls[0] == ("move_to", 1.0, 1.0)

    def test_svg_path_surface(self):
        surface = SvgPathSurface(precision=1)
        draw_polygon(square(), surface)
        assert surface.path_data == "M 0.0 0.0 L 10.0 0.0 L 10.0 10.0 L 0.0 10.0 Z"
        assert surface.to_svg() == f'<path d="{surface.path_data}" />\n'


class TestShapeReader:
    """Tests for ShapeReader class."""

    def _write(self, tmp_path: Path, data) -> Path:
        path = tmp_path / "shapes.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    def test_load(self, tmp_path):
        path = self._write(
            tmp_path,
            {
                "polygons": [
                    {"name": "square", "closed": True, "rings": [[[0, 0], [10, 0], [10, 10], [0, 10]]]},
                    {"rings": [[{"x": 1, "y": 2}, {"x": 3, "y": 4}]]},
                ]
            },
        )
        reader = ShapeReader(path)
        reader.load()

        assert reader.names == ["square", "polygon1"]
        first, second = reader.polygons
        assert len(first.rings[0]) == 5
        assert first.rings[0][-1] == first.rings[0][0]
        assert [p.to_tuple() for p in second.rings[0]] == [(1.0, 2.0), (3.0, 4.0)]

    def test_null_or_empty_name_falls_back_to_index(self, tmp_path):
        path = self._write(
            tmp_path,
            {"polygons": [{"name": None, "rings": [[[0, 0], [1, 1]]]}, {"name": "", "rings": []}]},
        )
        reader = ShapeReader(path)
        reader.load()
        assert reader.names == ["polygon0", "polygon1"]

    def test_load_nonexistent_file(self, tmp_path):
        reader = ShapeReader(tmp_path / "missing.json")
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_polygons_before_load(self, tmp_path):
        reader = ShapeReader(tmp_path / "shapes.json")
        with pytest.raises(RuntimeError, match="Shapes not loaded"):
            _ = reader.polygons
        with pytest.raises(RuntimeError, match="Shapes not loaded"):
            _ = reader.names

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "shapes.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ShapeFileError):
            ShapeReader(path).load()

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"shapes": []},
            {"polygons": [{"name": "no rings"}]},
            {"polygons": ["square"]},
            {"polygons": [{"rings": ["abc"]}]},
            {"polygons": [{"rings": [[[1]]]}]},
            {"polygons": [{"rings": [[["a", "b"]]]}]},
        ],
    )
    def test_malformed_documents(self, tmp_path, data):
        path = self._write(tmp_path, data)
        with pytest.raises(ShapeFileError) as exc_info:
            ShapeReader(path).load()
        assert exc_info.value.path == str(path)


class TestShapeWriter:
    """Tests for ShapeWriter class."""

    def test_get_output_path(self):
        path = ShapeWriter.get_output_path(Path("/data/shapes.json"), "hull")
        assert path == Path("/data/shapes-hull.svg")

    def test_get_output_path_with_suffix(self):
        path = ShapeWriter.get_output_path(Path("shapes.json"), "clip", ".json")
        assert path == Path("shapes-clip.json")

    def test_write_svg(self, tmp_path):
        path = tmp_path / "out.svg"
        ShapeWriter().write_svg([square()], path)
        content = path.read_text(encoding="utf-8")
        assert content.startswith("<svg")
        assert '<polyline points="0.00,0.00 10.00,0.00' in content
        assert 'viewBox="-10.00 -10.00 30.00 30.00"' in content

    def test_render_svg_uses_config(self):
        writer = ShapeWriter(OutputConfig(precision=0, margin=0, stroke="red", stroke_width=2.0))
        doc = writer.render_svg([square(), square(20, 20)])
        assert 'viewBox="0 0 30 30"' in doc
        assert 'stroke="red"' in doc
        assert doc.count("<polyline") == 2

    def test_render_svg_without_polygons(self):
        doc = ShapeWriter().render_svg([])
        assert "<polyline" not in doc

    def test_write_json_round_trip(self, tmp_path):
        path = tmp_path / "out.json"
        poly = Polygon([(1.23456, 2.0), (3.0, 4.98765)])
        ShapeWriter(OutputConfig(precision=2)).write_json([poly, square()], path, names=["line"])

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["polygons"][0] == {"name": "line", "rings": [[[1.23, 2.0], [3.0, 4.99]]]}

        reader = ShapeReader(path)
        reader.load()
        assert reader.names == ["line", "polygon1"]
        assert reader.polygons[1].rings == square().rings

    def test_write_to_missing_directory(self, tmp_path):
        path = tmp_path / "missing" / "out.svg"
        with pytest.raises(ShapeSaveError) as exc_info:
            ShapeWriter().write_svg([square()], path)
        assert exc_info.value.path == str(path)
