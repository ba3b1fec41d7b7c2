"""Exception hierarchy for shapeclip."""


class ShapeclipError(Exception):
    """Base exception for all shapeclip errors."""

    pass


class GeometryError(ShapeclipError):
    """Errors raised while building geometric values."""

    pass


class PointFormatError(GeometryError):
    """A value could not be interpreted as a point or vector."""

    def __init__(self, value: object, expected: str = "Point, (x, y) or {'x', 'y'}") -> None:
        self.value = value
        self.expected = expected
        super().__init__(f"Cannot interpret {value!r} as a point: expected {expected}")


class RingFormatError(GeometryError):
    """A ring argument is not an ordered sequence of points."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Ring must be an ordered sequence of points, got {type(value).__name__}"
        )


class PolygonConstructionError(GeometryError):
    """A polygon factory was called with invalid parameters."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Cannot construct polygon: {reason}")


class ShapeFileError(ShapeclipError):
    """Error loading a shape file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load shapes '{path}': {reason}")


class ShapeSaveError(ShapeclipError):
    """Error writing an output file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save shapes '{path}': {reason}")


class OperationError(ShapeclipError):
    """A requested operation cannot run on the given input."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Cannot run '{operation}': {reason}")
