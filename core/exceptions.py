"""
Custom exception classes for MapMeasure.

These exceptions provide better error categorization and enable
more specific error handling throughout the application.
"""


class MapMeasureError(Exception):
    """Base exception for all MapMeasure errors."""

    def __init__(self, message: str, details: str = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message}\nDetails: {self.details}"
        return self.message


class InvalidGeometryState(MapMeasureError):
    """Raised when a vertex is added to a completed or incompatible builder."""
    pass


class IncompleteGeometry(MapMeasureError):
    """Raised when finalize is attempted below the minimum vertex count."""

    def __init__(self, draw_type: str, required: int, found: int):
        self.draw_type = draw_type
        self.required = required
        self.found = found
        super().__init__(
            f"'{draw_type}' geometry needs at least {required} vertices",
            details=f"found {found}"
        )


class ProjectionFailure(MapMeasureError):
    """Raised when a planar coordinate cannot be mapped to geographic."""

    def __init__(self, coordinate, reason: str = None):
        self.coordinate = coordinate
        message = f"Cannot project coordinate {tuple(coordinate)}"
        if reason:
            message += f": {reason}"
        super().__init__(message, details=reason)


class SessionDisposedError(MapMeasureError):
    """Raised when a disposed drawing controller is used again."""
    pass
