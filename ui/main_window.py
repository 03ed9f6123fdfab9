# ui/main_window.py
"""
Main window: draw type selector, reload button, dimension display and the
map canvas, wired to a DrawingSessionController.
"""

from PySide6.QtCore import Signal
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QComboBox, QPushButton
)

from constants import (
    APP_NAME,
    DEFAULT_DRAW_TYPE,
    DIMENSION_LABEL,
    INSTRUCTIONS,
    SHORTCUT_QUIT,
    SHORTCUT_RELOAD,
    SHORTCUT_ZOOM_IN,
    SHORTCUT_ZOOM_OUT,
)
from controllers.session_controller import DrawingSessionController
from core.exceptions import MapMeasureError
from core.geometry import DrawType
from ui.map_canvas import MapCanvas
from utils.error_handler import handle_errors
from utils.logger import get_logger
from utils.projection import WebMercatorProjection

logger = get_logger(__name__)

DRAW_TYPE_LABELS = [
    ("Point", DrawType.POINT),
    ("Line", DrawType.LINE),
    ("Polygon", DrawType.POLYGON),
]


class MainWindow(QMainWindow):
    measurement_changed = Signal(str)
    diagnostic_reported = Signal(dict)

    def __init__(self, projection=None, parent=None):
        super().__init__(parent)
        self.setWindowTitle(APP_NAME)
        self.resize(1200, 800)

        self.projection = projection or WebMercatorProjection()
        self.controller = None

        self._build_ui()
        self._build_actions()

        self.measurement_changed.connect(self.dimension_value.setText)
        self.diagnostic_reported.connect(self._show_diagnostic)

        self._start_controller(DEFAULT_DRAW_TYPE)

    def _build_ui(self):
        central = QWidget(self)
        layout = QVBoxLayout(central)

        instructions = QLabel(INSTRUCTIONS)
        instructions.setWordWrap(True)
        layout.addWidget(instructions)

        controls = QHBoxLayout()
        self.reload_button = QPushButton("Reload")
        self.reload_button.clicked.connect(self._on_reload)
        controls.addWidget(self.reload_button)

        controls.addWidget(QLabel("Draw Type:"))
        self.draw_type_combo = QComboBox()
        for label, draw_type in DRAW_TYPE_LABELS:
            self.draw_type_combo.addItem(label, draw_type)
        self.draw_type_combo.setCurrentIndex(
            self.draw_type_combo.findData(DEFAULT_DRAW_TYPE)
        )
        self.draw_type_combo.currentIndexChanged.connect(self._on_draw_type_changed)
        controls.addWidget(self.draw_type_combo)

        controls.addSpacing(24)
        controls.addWidget(QLabel(DIMENSION_LABEL))
        self.dimension_value = QLabel("")
        self.dimension_value.setStyleSheet("font-weight: bold;")
        controls.addWidget(self.dimension_value)
        controls.addStretch(1)
        layout.addLayout(controls)

        self.canvas = MapCanvas(self.projection, central)
        layout.addWidget(self.canvas, 1)

        self.setCentralWidget(central)
        self.statusBar()

    def _build_actions(self):
        for text, shortcut, slot in (
            ("Reload", SHORTCUT_RELOAD, self._on_reload),
            ("Zoom In", SHORTCUT_ZOOM_IN, self.canvas.zoom_in),
            ("Zoom Out", SHORTCUT_ZOOM_OUT, self.canvas.zoom_out),
            ("Quit", SHORTCUT_QUIT, self.close),
        ):
            action = QAction(text, self)
            action.setShortcut(QKeySequence(shortcut))
            action.triggered.connect(slot)
            self.addAction(action)

    def _start_controller(self, draw_type):
        self.canvas.draw_type = draw_type
        self.controller = DrawingSessionController(
            self.canvas,
            self.projection,
            draw_type=draw_type,
            on_measurement=self.measurement_changed.emit,
            on_error=self.diagnostic_reported.emit,
        )

    @handle_errors(error_type=MapMeasureError, log_level="WARNING")
    def _on_draw_type_changed(self, index):
        draw_type = self.draw_type_combo.itemData(index)
        self.canvas.draw_type = draw_type
        self.controller.set_draw_type(draw_type)

    def _on_reload(self):
        """Start over with an empty map and the selected draw type."""
        logger.info("Reloading map")
        self.controller.dispose()
        self.dimension_value.setText("")
        self.statusBar().clearMessage()
        self.canvas.reset_view()
        self._start_controller(self.draw_type_combo.currentData())

    def _show_diagnostic(self, diagnostic):
        self.statusBar().showMessage(f"{diagnostic['title']}: {diagnostic['message']}", 10000)

    def closeEvent(self, event):
        if self.controller is not None:
            self.controller.dispose()
        super().closeEvent(event)
