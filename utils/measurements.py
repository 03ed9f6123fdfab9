"""
Measurement utilities for drawn geometries.
Lengths and areas are computed on a sphere of the earth's mean radius,
after projecting the planar vertices to geographic coordinates.
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from pyproj import Geod

from constants import (
    AREA_TEMPLATE,
    DEFAULT_PRECISION,
    EARTH_RADIUS,
    LENGTH_TEMPLATE,
    UNAVAILABLE_AREA,
    UNAVAILABLE_LENGTH,
)
from core.geometry import DrawType, Geometry, GeographicCoordinate

# Spherical earth for great-circle calculations
geod = Geod(a=EARTH_RADIUS, b=EARTH_RADIUS)


@dataclass(frozen=True)
class MeasurementResult:
    """
    Scalar reported for a finalized geometry.

    ``kind`` is one of NONE, LENGTH or AREA. ``value`` is metres for
    LENGTH, square metres for AREA, ``None`` for NONE, and NaN when the
    geometry could not be measured.
    """

    NONE = "none"
    LENGTH = "length"
    AREA = "area"

    kind: str
    value: Optional[float] = None

    @classmethod
    def none(cls) -> "MeasurementResult":
        return cls(cls.NONE)

    @classmethod
    def length(cls, meters: float) -> "MeasurementResult":
        return cls(cls.LENGTH, float(meters))

    @classmethod
    def area(cls, square_meters: float) -> "MeasurementResult":
        return cls(cls.AREA, float(square_meters))

    @classmethod
    def unmeasured(cls, draw_type: str) -> "MeasurementResult":
        """Result for a geometry whose measurement was aborted."""
        if draw_type == DrawType.POINT:
            return cls.none()
        kind = cls.LENGTH if draw_type == DrawType.LINE else cls.AREA
        return cls(kind, math.nan)

    @property
    def measured(self) -> bool:
        return self.value is None or not math.isnan(self.value)


def calculate_distance_geographic(coords: Sequence[GeographicCoordinate]) -> float:
    """
    Calculate great-circle length of a path.

    Args:
        coords: List of (lon, lat) tuples in decimal degrees

    Returns:
        float: Total distance in meters
    """
    if len(coords) < 2:
        return 0.0

    lons = [coord[0] for coord in coords]
    lats = [coord[1] for coord in coords]
    # geod.inv returns (forward_azimuths, back_azimuths, distances)
    _, _, distances = geod.inv(lons[:-1], lats[:-1], lons[1:], lats[1:])

    return float(sum(distances))


def calculate_area_geographic(coords: Sequence[GeographicCoordinate]) -> float:
    """
    Calculate spherical area of a ring.

    Args:
        coords: List of (lon, lat) tuples in decimal degrees, open or closed

    Returns:
        float: Area in square meters, independent of winding
    """
    if len(coords) < 3:
        return 0.0

    # polygon_area_perimeter closes the ring itself
    working_coords = list(coords)
    if working_coords[0] == working_coords[-1]:
        working_coords = working_coords[:-1]
    if len(working_coords) < 3:
        return 0.0

    lons = [coord[0] for coord in working_coords]
    lats = [coord[1] for coord in working_coords]

    # Signed by winding: counter-clockwise rings are positive
    area, _ = geod.polygon_area_perimeter(lons, lats)

    return abs(area)


def measure(geometry: Geometry, projection) -> MeasurementResult:
    """
    Measure a finalized geometry.

    Args:
        geometry: Finalized Point, Line or Polygon
        projection: Adapter exposing ``to_geographic(coordinate)``

    Returns:
        MeasurementResult: NONE for points, LENGTH for lines, AREA for polygons

    Raises:
        ProjectionFailure: If any vertex cannot be projected.
    """
    if geometry.draw_type == DrawType.POINT:
        return MeasurementResult.none()

    geographic = [projection.to_geographic(c) for c in geometry.coordinates]

    if geometry.draw_type == DrawType.LINE:
        return MeasurementResult.length(calculate_distance_geographic(geographic))
    return MeasurementResult.area(calculate_area_geographic(geographic))


def format_measurement(result: MeasurementResult, precision: int = DEFAULT_PRECISION) -> str:
    """
    Render a result for the dimension display.

    Returns:
        str: "" for points, otherwise the length/area sentence
    """
    if result.kind == MeasurementResult.NONE:
        return ""
    if result.kind == MeasurementResult.LENGTH:
        if not result.measured:
            return UNAVAILABLE_LENGTH
        return LENGTH_TEMPLATE.format(value=f"{result.value:.{precision}f}")
    if not result.measured:
        return UNAVAILABLE_AREA
    return AREA_TEMPLATE.format(value=f"{result.value:.{precision}f}")
