"""Shape file reader.

A shape file is a JSON document listing named polygons:

    {
      "polygons": [
        {"name": "square", "closed": true,
         "rings": [[[0, 0], [10, 0], [10, 10], [0, 10]]]}
      ]
    }

Points may be written as [x, y] pairs or {"x": .., "y": ..} objects.
"""

import json
from pathlib import Path
from typing import Any

from shapeclip.domain import Polygon
from shapeclip.exceptions import GeometryError, ShapeFileError


class ShapeReader:
    """Loads polygons from a JSON shape file.

    Example:
        reader = ShapeReader(Path("shapes.json"))
        reader.load()
        for name, polygon in zip(reader.names, reader.polygons):
            print(name, polygon.length())
    """

    def __init__(self, path: Path) -> None:
        """Initialize the shape reader.

        Args:
            path: Path to the JSON shape file
        """
        self._path = path
        self._polygons: list[Polygon] | None = None
        self._names: list[str] = []

    def load(self) -> None:
        """Load and parse the shape file.

        Raises:
            FileNotFoundError: If the file does not exist
            ShapeFileError: If the file is not a valid shape document
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Shape file not found: {self._path}")

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ShapeFileError(str(self._path), str(e)) from e

        entries = data.get("polygons") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise ShapeFileError(str(self._path), "expected an object with a 'polygons' list")

        polygons: list[Polygon] = []
        names: list[str] = []
        for index, entry in enumerate(entries):
            polygons.append(self._parse_polygon(entry, index))
            names.append(str(entry.get("name") or f"polygon{index}"))

        self._polygons = polygons
        self._names = names

    def _parse_polygon(self, entry: Any, index: int) -> Polygon:
        if not isinstance(entry, dict) or not isinstance(entry.get("rings"), list):
            raise ShapeFileError(str(self._path), f"polygon {index} has no 'rings' list")

        closed = bool(entry.get("closed", False))
        polygon = Polygon()
        try:
            for ring in entry["rings"]:
                polygon.add_ring(ring, close=closed)
        except GeometryError as e:
            raise ShapeFileError(str(self._path), f"polygon {index}: {e}") from e
        return polygon

    @property
    def polygons(self) -> list[Polygon]:
        """Loaded polygons, in file order.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._polygons is None:
            raise RuntimeError("Shapes not loaded. Call load() first.")
        return self._polygons

    @property
    def names(self) -> list[str]:
        """Polygon names, defaulting to ``polygon{index}``.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._polygons is None:
            raise RuntimeError("Shapes not loaded. Call load() first.")
        return self._names
