"""
Tests for MapCanvas as a drawing surface.
Requires PySide6; runs on the offscreen platform and skips when Qt is unavailable.
"""

import unittest
import sys
import os

# Add root directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class TestMapCanvas(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        """Check if Qt is available."""
        try:
            from PySide6.QtWidgets import QApplication
            if not QApplication.instance():
                cls.app = QApplication([])
            else:
                cls.app = QApplication.instance()
            cls.qt_available = True
        except ImportError:
            cls.qt_available = False

    def setUp(self):
        if not self.qt_available:
            self.skipTest("Qt not available")

        from ui.map_canvas import MapCanvas
        from utils.projection import WebMercatorProjection

        self.projection = WebMercatorProjection()
        self.canvas = MapCanvas(self.projection)
        self.canvas.resize(800, 600)
        self.events = []
        self.canvas.subscribe(self.events.append)

    def tearDown(self):
        if self.qt_available:
            self.canvas.deleteLater()

    def click(self, x, y):
        from PySide6.QtCore import QPoint, Qt
        from PySide6.QtTest import QTest
        QTest.mouseClick(self.canvas.viewport(), Qt.LeftButton, Qt.NoModifier, QPoint(x, y))

    def test_initial_zoom(self):
        self.assertAlmostEqual(self.canvas.zoom, 2.0, places=6)

    def test_click_emits_pointer_down_in_mercator_metres(self):
        from core.gestures import PointerDown
        self.click(400, 300)
        downs = [e for e in self.events if isinstance(e, PointerDown)]
        self.assertEqual(len(downs), 1)
        x, y = downs[0].coordinate
        lon, lat = self.projection.to_geographic((x, y))
        self.assertTrue(-180 <= lon <= 180)
        self.assertTrue(-90 <= lat <= 90)

    def test_click_on_last_vertex_ends_line(self):
        from core.geometry import DrawType
        from core.gestures import DrawEnd
        self.canvas.draw_type = DrawType.LINE
        self.click(100, 100)
        self.click(200, 150)
        self.click(201, 151)
        self.assertIsInstance(self.events[-1], DrawEnd)

    def test_click_on_first_vertex_ends_polygon(self):
        from core.geometry import DrawType
        from core.gestures import DrawEnd, PointerDown
        self.canvas.draw_type = DrawType.POLYGON
        self.click(100, 100)
        self.click(200, 100)
        self.click(200, 200)
        self.click(100, 100)
        self.assertIsInstance(self.events[-1], DrawEnd)
        downs = [e for e in self.events if isinstance(e, PointerDown)]
        self.assertEqual(len(downs), 3)

    def test_double_click_ends_drawing(self):
        from PySide6.QtCore import QPoint, Qt
        from PySide6.QtTest import QTest
        from core.geometry import DrawType
        from core.gestures import DrawEnd, PointerDown
        self.canvas.draw_type = DrawType.LINE
        self.click(100, 100)
        self.click(200, 150)
        downs_before = len([e for e in self.events if isinstance(e, PointerDown)])

        QTest.mouseDClick(self.canvas.viewport(), Qt.LeftButton, Qt.NoModifier, QPoint(300, 200))

        self.assertIsInstance(self.events[-1], DrawEnd)
        self.assertEqual(len([e for e in self.events if isinstance(e, DrawEnd)]), 1)
        downs = [e for e in self.events if isinstance(e, PointerDown)]
        self.assertEqual(len(downs) - downs_before, 1)

    def test_canvas_is_a_drawing_surface(self):
        from core.gestures import DrawingSurface
        self.assertIsInstance(self.canvas, DrawingSurface)

    def test_feature_rendering_and_clearing(self):
        from core.feature_collection import Feature
        from core.geometry import Coordinate, DrawType, Geometry
        from controllers.session_controller import feature_style
        from utils.measurements import MeasurementResult

        items_before = len(self.canvas.scene().items())
        polygon = Geometry(DrawType.POLYGON, (Coordinate(0, 0), Coordinate(1e5, 0), Coordinate(1e5, 1e5)))
        point = Geometry(DrawType.POINT, (Coordinate(0, 0),))
        self.canvas.add_feature(Feature(1, polygon, MeasurementResult.area(1.0)), feature_style(DrawType.POLYGON))
        self.canvas.add_feature(Feature(2, point, MeasurementResult.none()), feature_style(DrawType.POINT))
        self.assertEqual(len(self.canvas.scene().items()), items_before + 2)

        self.canvas.clear_features()
        self.assertEqual(len(self.canvas.scene().items()), items_before)

    def test_preview_rendering(self):
        from core.geometry import Coordinate
        items_before = len(self.canvas.scene().items())
        self.canvas.render_preview([Coordinate(0, 0), Coordinate(1e5, 1e5)])
        self.canvas.render_preview([Coordinate(0, 0), Coordinate(2e5, 1e5)])
        self.assertEqual(len(self.canvas.scene().items()), items_before + 1)
        self.canvas.clear_preview()
        self.assertEqual(len(self.canvas.scene().items()), items_before)


if __name__ == '__main__':
    unittest.main()
