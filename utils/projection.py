# utils/projection.py
"""
Projection adapter between the map's planar display coordinates
(Web Mercator, EPSG:3857) and geographic longitude/latitude (EPSG:4326).
"""

import math
from typing import Dict, Tuple

from pyproj import Transformer

from constants import MAX_LATITUDE, WEB_MERCATOR_EPSG, WEB_MERCATOR_EXTENT, WGS84_EPSG
from core.exceptions import ProjectionFailure
from core.geometry import Coordinate, GeographicCoordinate
from utils.logger import get_logger

logger = get_logger(__name__)


class WebMercatorProjection:
    """
    Converts between Web Mercator metres and WGS84 degrees.

    Conversions are pure and deterministic; transformers are cached per
    direction.
    """

    def __init__(self, planar_epsg: int = WEB_MERCATOR_EPSG, geographic_epsg: int = WGS84_EPSG):
        self.planar_crs = f"EPSG:{planar_epsg}"
        self.geographic_crs = f"EPSG:{geographic_epsg}"
        self._transformer_cache: Dict[Tuple[str, str], Transformer] = {}

    def _get_transformer(self, from_crs: str, to_crs: str) -> Transformer:
        """Get or create cached transformer."""
        key = (from_crs, to_crs)
        if key not in self._transformer_cache:
            self._transformer_cache[key] = Transformer.from_crs(
                from_crs, to_crs, always_xy=True
            )
        return self._transformer_cache[key]

    def to_geographic(self, coordinate) -> GeographicCoordinate:
        """
        Convert a planar coordinate to (lon, lat).

        Raises:
            ProjectionFailure: If the coordinate is not finite or lies outside
                the projection's valid extent.
        """
        try:
            x, y = float(coordinate[0]), float(coordinate[1])
        except (TypeError, ValueError, IndexError) as e:
            raise ProjectionFailure(_safe_tuple(coordinate), reason=str(e)) from e

        if not (math.isfinite(x) and math.isfinite(y)):
            raise ProjectionFailure((x, y), reason="coordinate is not finite")
        # Small tolerance for points clicked exactly on the world edge
        limit = WEB_MERCATOR_EXTENT * (1 + 1e-9)
        if abs(x) > limit or abs(y) > limit:
            raise ProjectionFailure((x, y), reason="outside the Web Mercator extent")

        transformer = self._get_transformer(self.planar_crs, self.geographic_crs)
        lon, lat = transformer.transform(x, y)
        if not (math.isfinite(lon) and math.isfinite(lat)):
            raise ProjectionFailure((x, y), reason="transformation returned no result")

        return GeographicCoordinate(max(-180.0, min(180.0, lon)), lat)

    def from_geographic(self, lon: float, lat: float) -> Coordinate:
        """
        Convert (lon, lat) to a planar coordinate.

        Latitudes beyond the Web Mercator limit are clamped.

        Raises:
            ProjectionFailure: If the input is not a finite longitude/latitude.
        """
        if not (math.isfinite(lon) and math.isfinite(lat)) or abs(lon) > 180 or abs(lat) > 90:
            raise ProjectionFailure((lon, lat), reason="not a valid longitude/latitude")
        lat = max(-MAX_LATITUDE, min(MAX_LATITUDE, lat))

        transformer = self._get_transformer(self.geographic_crs, self.planar_crs)
        x, y = transformer.transform(lon, lat)
        return Coordinate(x, y)


def _safe_tuple(value):
    try:
        return tuple(value)
    except TypeError:
        return (value,)
