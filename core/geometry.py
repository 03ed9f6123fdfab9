# core/geometry.py
"""
Geometry primitives and the builder that turns pointer gestures into them.
"""

from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple

from constants import MIN_VERTICES
from core.exceptions import IncompleteGeometry, InvalidGeometryState


class DrawType:
    POINT = "Point"
    LINE = "Line"
    POLYGON = "Polygon"
    VALID_TYPES = [POINT, LINE, POLYGON]

    # Names used by web map libraries for the same shapes
    _ALIASES = {
        "LineString": LINE,
        "Polyline": LINE,
    }

    @classmethod
    def normalize(cls, value: str) -> str:
        """
        Return the canonical draw type for ``value``.

        Raises:
            ValueError: If the value is not a supported draw type.
        """
        value = cls._ALIASES.get(value, value)
        if value not in cls.VALID_TYPES:
            raise ValueError(
                f"Draw type '{value}' is not valid. Valid types are: {cls.VALID_TYPES}"
            )
        return value


class Coordinate(NamedTuple):
    """Planar display coordinate (Web Mercator metres)."""
    x: float
    y: float


class GeographicCoordinate(NamedTuple):
    """Longitude/latitude in decimal degrees."""
    lon: float
    lat: float


def as_coordinate(value) -> Coordinate:
    """
    Coerce an (x, y) pair into a Coordinate.

    Raises:
        TypeError: If the value is not a pair.
        ValueError: If the values are not numeric.
    """
    if isinstance(value, Coordinate):
        return value
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"Coordinate must be a tuple or list, got {type(value)}")
    if len(value) != 2:
        raise ValueError(
            f"Coordinate must have exactly two elements (X, Y), got {len(value)}"
        )
    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value):
        raise ValueError(f"Coordinate values must be numeric, got {value}")
    return Coordinate(float(value[0]), float(value[1]))


@dataclass(frozen=True)
class Geometry:
    """Finalized, immutable geometry. Polygon rings are implicitly closed."""

    draw_type: str
    coordinates: Tuple[Coordinate, ...]

    @property
    def ring(self) -> Tuple[Coordinate, ...]:
        """Coordinates with the closing vertex appended (Polygon only)."""
        if self.draw_type != DrawType.POLYGON:
            return self.coordinates
        return self.coordinates + (self.coordinates[0],)

    def __len__(self):
        return len(self.coordinates)


class GeometryBuilder:
    """
    Accumulates committed vertices for one gesture of a single draw type.

    The builder is reused across gestures: ``finalize`` hands out a snapshot
    and ``reset`` prepares it for the next ``begin``.
    """

    def __init__(self):
        self._draw_type: Optional[str] = None
        self._vertices: List[Coordinate] = []

    @property
    def draw_type(self) -> Optional[str]:
        return self._draw_type

    @property
    def building(self) -> bool:
        return self._draw_type is not None

    @property
    def vertices(self) -> Tuple[Coordinate, ...]:
        return tuple(self._vertices)

    def begin(self, draw_type: str, first_coordinate) -> None:
        """
        Start a new vertex sequence with its first coordinate.

        Raises:
            InvalidGeometryState: If a build is already in progress.
        """
        if self.building:
            raise InvalidGeometryState(
                "A geometry is already being built",
                details=f"call reset() before starting a new {draw_type}"
            )
        self._draw_type = DrawType.normalize(draw_type)
        self._vertices = [as_coordinate(first_coordinate)]

    def add_vertex(self, coordinate) -> None:
        """
        Commit a vertex to the sequence.

        Raises:
            InvalidGeometryState: If nothing is being built, or a Point
                already has its vertex.
        """
        if not self.building:
            raise InvalidGeometryState("No geometry in progress", details="call begin() first")
        if self._draw_type == DrawType.POINT and self._vertices:
            raise InvalidGeometryState(
                "A Point accepts a single vertex",
                details=f"{len(self._vertices)} vertex already committed"
            )
        self._vertices.append(as_coordinate(coordinate))

    def preview(self, coordinate) -> List[Coordinate]:
        """Committed vertices plus an uncommitted trailing coordinate."""
        return list(self._vertices) + [as_coordinate(coordinate)]

    def finalize(self) -> Geometry:
        """
        Snapshot the committed vertices as an immutable Geometry.

        Raises:
            IncompleteGeometry: If the minimum vertex count is not met.
        """
        if not self.building:
            raise IncompleteGeometry("None", 1, 0)

        required = MIN_VERTICES[self._draw_type]
        if self._draw_type == DrawType.POLYGON:
            found = len(set(self._vertices))
        else:
            found = len(self._vertices)
        if found < required:
            raise IncompleteGeometry(self._draw_type, required, found)

        return Geometry(self._draw_type, tuple(self._vertices))

    def reset(self) -> None:
        self._draw_type = None
        self._vertices = []
