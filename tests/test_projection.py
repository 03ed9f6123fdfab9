"""
Unit tests for WebMercatorProjection.
"""

import math
import unittest
import sys
import os

# Add root directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from constants import WEB_MERCATOR_EXTENT
from core.exceptions import ProjectionFailure
from core.geometry import Coordinate, GeographicCoordinate
from utils.projection import WebMercatorProjection


class TestToGeographic(unittest.TestCase):

    def setUp(self):
        self.projection = WebMercatorProjection()

    def test_origin(self):
        lon, lat = self.projection.to_geographic(Coordinate(0, 0))
        self.assertAlmostEqual(lon, 0.0, places=9)
        self.assertAlmostEqual(lat, 0.0, places=9)

    def test_returns_geographic_coordinate(self):
        result = self.projection.to_geographic((0, 0))
        self.assertIsInstance(result, GeographicCoordinate)

    def test_world_edge(self):
        lon, _ = self.projection.to_geographic((WEB_MERCATOR_EXTENT, 0))
        self.assertAlmostEqual(lon, 180.0, places=6)

    def test_known_value(self):
        """One degree north of the origin is ~111325 m in Web Mercator."""
        lon, lat = self.projection.to_geographic((0, 111325.14286638486))
        self.assertAlmostEqual(lon, 0.0, places=9)
        self.assertAlmostEqual(lat, 1.0, places=6)

    def test_round_trip(self):
        planar = self.projection.from_geographic(-99.13, 19.43)
        lon, lat = self.projection.to_geographic(planar)
        self.assertAlmostEqual(lon, -99.13, places=6)
        self.assertAlmostEqual(lat, 19.43, places=6)

    def test_outside_extent(self):
        with self.assertRaises(ProjectionFailure):
            self.projection.to_geographic((3 * WEB_MERCATOR_EXTENT, 0))

    def test_not_finite(self):
        with self.assertRaises(ProjectionFailure):
            self.projection.to_geographic((math.nan, 0))
        with self.assertRaises(ProjectionFailure):
            self.projection.to_geographic((0, math.inf))

    def test_not_numeric(self):
        with self.assertRaises(ProjectionFailure):
            self.projection.to_geographic(("east", 0))

    def test_deterministic(self):
        a = self.projection.to_geographic((123456.0, -654321.0))
        b = self.projection.to_geographic((123456.0, -654321.0))
        self.assertEqual(a, b)


class TestFromGeographic(unittest.TestCase):

    def setUp(self):
        self.projection = WebMercatorProjection()

    def test_origin(self):
        x, y = self.projection.from_geographic(0, 0)
        self.assertAlmostEqual(x, 0.0, places=6)
        self.assertAlmostEqual(y, 0.0, places=6)

    def test_latitude_is_clamped(self):
        _, y = self.projection.from_geographic(0, 89.9)
        self.assertAlmostEqual(y, WEB_MERCATOR_EXTENT, delta=1.0)

    def test_invalid_input(self):
        with self.assertRaises(ProjectionFailure):
            self.projection.from_geographic(200, 0)
        with self.assertRaises(ProjectionFailure):
            self.projection.from_geographic(0, math.nan)


if __name__ == '__main__':
    unittest.main()
