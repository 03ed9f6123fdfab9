"""
Shared fakes for the drawing tests.
"""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from core.exceptions import ProjectionFailure
from core.geometry import GeographicCoordinate
from core.gestures import DrawingSurface


class RecordingSurface(DrawingSurface):
    """Drawing surface that records everything rendered on it."""

    def __init__(self):
        super().__init__()
        self.previews = []
        self.preview_cleared = 0
        self.features = []
        self.features_cleared = 0

    def render_preview(self, coordinates):
        self.previews.append(list(coordinates))

    def clear_preview(self):
        self.preview_cleared += 1

    def add_feature(self, feature, style=None):
        self.features.append((feature, style))

    def clear_features(self):
        self.features_cleared += 1
        self.features = []


class DegreeProjection:
    """Treats planar coordinates as (lon, lat) degrees."""

    def __init__(self, fail_beyond=None):
        self.fail_beyond = fail_beyond
        self.calls = 0

    def to_geographic(self, coordinate):
        self.calls += 1
        x, y = coordinate
        if self.fail_beyond is not None and (abs(x) > self.fail_beyond or abs(y) > self.fail_beyond):
            raise ProjectionFailure((x, y), reason="outside test extent")
        return GeographicCoordinate(x, y)
