# core/feature_collection.py

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from constants import MIN_VERTICES
from core.geometry import DrawType, Geometry


@dataclass(frozen=True)
class Feature:
    """A finalized geometry and the measurement reported for it."""

    id: int
    geometry: Geometry
    measurement: object

    @property
    def draw_type(self) -> str:
        return self.geometry.draw_type


class FeatureCollection:
    """Append-only, in-memory store of finalized features."""

    def __init__(self):
        self._features: List[Feature] = []
        self._next_id = 1

    def add(self, geometry: Geometry, measurement) -> Feature:
        """
        Append a feature, validating the geometry first.

        Args:
            geometry: Finalized geometry.
            measurement: MeasurementResult computed for it.

        Returns:
            The stored Feature.

        Raises:
            ValueError: If the draw type is unknown or the vertex count does
                        not match it.
            TypeError: If ``geometry`` is not a Geometry.
        """
        if not isinstance(geometry, Geometry):
            raise TypeError(f"Expected a Geometry, got {type(geometry)}")

        if geometry.draw_type not in DrawType.VALID_TYPES:
            raise ValueError(
                f"Draw type '{geometry.draw_type}' is not valid. Valid types are: {DrawType.VALID_TYPES}"
            )

        count = len(geometry.coordinates)
        if geometry.draw_type == DrawType.POINT and count != 1:
            raise ValueError(f"'{DrawType.POINT}' geometry must have exactly 1 coordinate. Found: {count}")
        if count < MIN_VERTICES[geometry.draw_type]:
            raise ValueError(
                f"'{geometry.draw_type}' geometry must have at least "
                f"{MIN_VERTICES[geometry.draw_type]} coordinates. Found: {count}"
            )

        feature = Feature(self._next_id, geometry, measurement)
        self._next_id += 1
        self._features.append(feature)
        return feature

    def clear(self):
        self._features.clear()

    def get_features(self) -> List[Feature]:
        return list(self._features)

    def last(self) -> Optional[Feature]:
        return self._features[-1] if self._features else None

    def __len__(self):
        return len(self._features)

    def __iter__(self) -> Iterator[Feature]:
        return iter(list(self._features))

    def to_geojson(self, projection) -> Dict:
        """
        Build a GeoJSON FeatureCollection in geographic coordinates.

        Args:
            projection: Adapter exposing ``to_geographic(coordinate)``

        Returns:
            GeoJSON FeatureCollection dict

        Raises:
            ProjectionFailure: If a stored vertex cannot be projected.
        """
        features = []

        for feat in self._features:
            wgs84_coords = [list(projection.to_geographic(c)) for c in feat.geometry.ring]

            if feat.draw_type == DrawType.POINT:
                geom = {"type": "Point", "coordinates": wgs84_coords[0]}
            elif feat.draw_type == DrawType.LINE:
                geom = {"type": "LineString", "coordinates": wgs84_coords}
            else:
                geom = {"type": "Polygon", "coordinates": [wgs84_coords]}

            properties = {"id": feat.id}
            measurement = feat.measurement
            if measurement is not None and measurement.kind != measurement.NONE:
                properties[measurement.kind] = measurement.value

            features.append({
                "type": "Feature",
                "properties": properties,
                "geometry": geom
            })

        return {
            "type": "FeatureCollection",
            "features": features
        }
