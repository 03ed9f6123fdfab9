# ui/map_canvas.py
"""
Map canvas: a graphics view in Web Mercator metres that acts as the drawing
surface for the session controller.
"""

import math

from PySide6.QtWidgets import QGraphicsView, QGraphicsScene, QGraphicsEllipseItem, QGraphicsItem
from PySide6.QtCore import Qt, QPointF, QRectF
from PySide6.QtGui import QBrush, QColor, QPainter, QPainterPath, QPen

from constants import (
    CANVAS_MAX_ZOOM,
    CANVAS_MIN_ZOOM,
    CANVAS_ZOOM_FACTOR,
    DEFAULT_VIEW_CENTER,
    DEFAULT_VIEW_ZOOM,
    DrawStyle,
    GRATICULE_STEP,
    MAX_LATITUDE,
    SNAP_TOLERANCE_PX,
    TILE_SIZE,
    WEB_MERCATOR_EXTENT,
)
from core.geometry import Coordinate, DrawType
from core.gestures import DrawingSurface, GestureSource
from utils.logger import get_logger

logger = get_logger(__name__)


def _color(rgba):
    return QColor(*rgba)


def _cosmetic_pen(rgba, width, style=Qt.SolidLine):
    pen = QPen(_color(rgba), width)
    pen.setCosmetic(True)  # width in pixels regardless of zoom
    pen.setStyle(style)
    return pen


class MapCanvas(QGraphicsView, GestureSource):
    """
    Graphics view emitting drawing gestures.

    Gesture convention:
    - left click: pointer down
    - mouse move: pointer move
    - double click: draw end
    - click on the last vertex (Line) or the first vertex (Polygon): draw end
    """

    def __init__(self, projection, parent=None):
        QGraphicsView.__init__(self, parent)
        GestureSource.__init__(self)

        self.projection = projection
        self.draw_type = None
        self._zoom_factor = CANVAS_ZOOM_FACTOR
        self._gesture_vertices = []
        self._preview_item = None
        self._feature_items = []

        self.setScene(QGraphicsScene(self))
        extent = WEB_MERCATOR_EXTENT
        self.scene().setSceneRect(QRectF(-extent, -extent, 2 * extent, 2 * extent))
        self.setBackgroundBrush(QBrush(QColor(DrawStyle.BACKGROUND)))
        self.setRenderHint(QPainter.Antialiasing)
        self.setMouseTracking(True)
        self.setTransformationAnchor(QGraphicsView.AnchorUnderMouse)
        self.setDragMode(QGraphicsView.NoDrag)

        self._draw_graticule()
        self.reset_view()

    # ------------------------------------------------------------------
    # View
    # ------------------------------------------------------------------

    def reset_view(self, zoom: int = DEFAULT_VIEW_ZOOM):
        """Show the world at ``zoom`` centred on the default view centre."""
        scale = TILE_SIZE * 2 ** zoom / (2 * WEB_MERCATOR_EXTENT)
        self.resetTransform()
        # Scene y grows north, screen y grows down
        self.scale(scale, -scale)
        lon, lat = DEFAULT_VIEW_CENTER
        center = self.projection.from_geographic(lon, lat)
        self.centerOn(QPointF(center.x, center.y))

    @property
    def zoom(self) -> float:
        pixels_per_metre = abs(self.transform().m11())
        return math.log2(pixels_per_metre * 2 * WEB_MERCATOR_EXTENT / TILE_SIZE)

    def wheelEvent(self, event):
        """
        Handle mouse wheel events for zooming.
        Scroll up: zoom in
        Scroll down: zoom out
        """
        if event.angleDelta().y() > 0:
            self.zoom_in()
        else:
            self.zoom_out()

        event.accept()

    def zoom_in(self):
        if self.zoom < CANVAS_MAX_ZOOM:
            self.scale(self._zoom_factor, self._zoom_factor)

    def zoom_out(self):
        if self.zoom > CANVAS_MIN_ZOOM:
            self.scale(1 / self._zoom_factor, 1 / self._zoom_factor)

    def _draw_graticule(self):
        pen = _cosmetic_pen(DrawStyle.GRATICULE, 1)
        for lon in range(-180, 181, GRATICULE_STEP):
            south = self.projection.from_geographic(lon, -MAX_LATITUDE)
            north = self.projection.from_geographic(lon, MAX_LATITUDE)
            self.scene().addLine(south.x, south.y, north.x, north.y, pen)
        for lat in range(-90 + GRATICULE_STEP, 90, GRATICULE_STEP):
            west = self.projection.from_geographic(-180, lat)
            east = self.projection.from_geographic(180, lat)
            self.scene().addLine(west.x, west.y, east.x, east.y, pen)

    # ------------------------------------------------------------------
    # Gestures
    # ------------------------------------------------------------------

    def _scene_coordinate(self, event) -> Coordinate:
        point = self.mapToScene(event.position().toPoint())
        return Coordinate(point.x(), point.y())

    def _near(self, event, vertex: Coordinate) -> bool:
        target = self.mapFromScene(QPointF(vertex.x, vertex.y))
        pos = event.position()
        return math.hypot(pos.x() - target.x(), pos.y() - target.y()) <= SNAP_TOLERANCE_PX

    def _closes_gesture(self, event) -> bool:
        vertices = self._gesture_vertices
        if self.draw_type in (None, DrawType.LINE) and len(vertices) >= 2:
            if self._near(event, vertices[-1]):
                return True
        if self.draw_type in (None, DrawType.POLYGON) and len(vertices) >= 3:
            if self._near(event, vertices[0]):
                return True
        return False

    def mousePressEvent(self, event):
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return

        if self._closes_gesture(event):
            self.draw_end()
        else:
            coordinate = self._scene_coordinate(event)
            self._gesture_vertices.append(coordinate)
            self.pointer_down(coordinate)
        event.accept()

    def mouseMoveEvent(self, event):
        self.pointer_move(self._scene_coordinate(event))
        super().mouseMoveEvent(event)

    def mouseDoubleClickEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.draw_end()
            event.accept()
            return
        super().mouseDoubleClickEvent(event)

    # ------------------------------------------------------------------
    # DrawingSurface rendering
    # ------------------------------------------------------------------

    def render_preview(self, coordinates):
        coordinates = list(coordinates)
        if len(coordinates) < 2:
            return

        path = QPainterPath(QPointF(*coordinates[0]))
        for x, y in coordinates[1:]:
            path.lineTo(x, y)
        if self.draw_type == DrawType.POLYGON and len(coordinates) >= 3:
            path.closeSubpath()

        if self._preview_item is None:
            pen = _cosmetic_pen(DrawStyle.PREVIEW_STROKE, DrawStyle.PREVIEW_STROKE_WIDTH, Qt.DashLine)
            self._preview_item = self.scene().addPath(path, pen)
            self._preview_item.setZValue(10)
        else:
            self._preview_item.setPath(path)

    def clear_preview(self):
        self._gesture_vertices = []
        if self._preview_item is not None:
            self.scene().removeItem(self._preview_item)
            self._preview_item = None

    def add_feature(self, feature, style=None):
        style = style or {}
        geometry = feature.geometry

        if geometry.draw_type == DrawType.POINT:
            radius = style.get("radius", DrawStyle.POINT_RADIUS)
            item = QGraphicsEllipseItem(-radius, -radius, 2 * radius, 2 * radius)
            # Radius in pixels regardless of zoom
            item.setFlag(QGraphicsItem.ItemIgnoresTransformations, True)
            item.setPos(QPointF(*geometry.coordinates[0]))
            item.setBrush(QBrush(_color(style.get("fill", DrawStyle.POINT_FILL))))
            item.setPen(_cosmetic_pen(
                style.get("stroke", DrawStyle.POINT_STROKE),
                style.get("width", DrawStyle.POINT_STROKE_WIDTH)
            ))
            self.scene().addItem(item)
        else:
            path = QPainterPath(QPointF(*geometry.coordinates[0]))
            for x, y in geometry.coordinates[1:]:
                path.lineTo(x, y)
            if geometry.draw_type == DrawType.POLYGON:
                path.closeSubpath()
            pen = _cosmetic_pen(style.get("stroke", DrawStyle.LINE_STROKE), style.get("width", 2))
            fill = style.get("fill")
            brush = QBrush(_color(fill)) if fill else QBrush(Qt.NoBrush)
            item = self.scene().addPath(path, pen, brush)

        item.setZValue(5)
        self._feature_items.append(item)
        logger.debug(f"Rendered feature {feature.id} ({geometry.draw_type})")

    def clear_features(self):
        for item in self._feature_items:
            self.scene().removeItem(item)
        self._feature_items = []


# Shiboken's metaclass cannot be combined with ABCMeta
DrawingSurface.register(MapCanvas)
