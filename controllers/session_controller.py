# controllers/session_controller.py
"""
Controller for interactive drawing sessions.
Owns the active draw session, the feature collection and the surface handle,
and publishes the latest measurement to the presentation layer.
"""

from typing import Callable, List, Optional

from constants import DEFAULT_DRAW_TYPE, DrawStyle
from core.exceptions import ProjectionFailure, SessionDisposedError
from core.feature_collection import Feature, FeatureCollection
from core.geometry import DrawType, Geometry
from core.gestures import DrawingSurface
from core.session import DrawSession
from utils.error_handler import log_and_report, safe_execute
from utils.logger import get_logger
from utils.measurements import MeasurementResult, format_measurement, measure

logger = get_logger(__name__)


def feature_style(draw_type: str) -> dict:
    """Rendering style for a finalized feature of ``draw_type``."""
    if draw_type == DrawType.POINT:
        return {
            "radius": DrawStyle.POINT_RADIUS,
            "fill": DrawStyle.POINT_FILL,
            "stroke": DrawStyle.POINT_STROKE,
            "width": DrawStyle.POINT_STROKE_WIDTH,
        }
    if draw_type == DrawType.LINE:
        return {
            "stroke": DrawStyle.LINE_STROKE,
            "width": DrawStyle.LINE_STROKE_WIDTH,
        }
    return {
        "stroke": DrawStyle.POLYGON_STROKE,
        "width": DrawStyle.POLYGON_STROKE_WIDTH,
        "fill": DrawStyle.POLYGON_FILL,
    }


class DrawingSessionController:
    """
    Orchestrates drawing on a map surface.

    Responsibilities:
    - Keep exactly one DrawSession subscribed to the surface
    - Measure finalized geometries and store them as features
    - Publish the formatted measurement and report measurement failures
    """

    def __init__(
        self,
        surface: DrawingSurface,
        projection,
        draw_type: Optional[str] = DEFAULT_DRAW_TYPE,
        on_measurement: Optional[Callable[[str], None]] = None,
        on_error: Optional[Callable[[dict], None]] = None,
    ):
        """
        Initialize the controller and open a session for ``draw_type``.

        Args:
            surface: Map rendering surface delivering gestures
            projection: Adapter exposing ``to_geographic(coordinate)``
            draw_type: Initial draw type, or None to start without a session
            on_measurement: Receives the measurement text after each drawing
            on_error: Receives a diagnostic dict when a measurement fails
        """
        self._surface = surface
        self._projection = projection
        self.on_measurement = on_measurement
        self.on_error = on_error
        self.features = FeatureCollection()
        self.last_result: Optional[MeasurementResult] = None
        self.dimension_text = ""
        self._session: Optional[DrawSession] = None
        self._disposed = False

        if draw_type is not None:
            self.set_draw_type(draw_type)

    @property
    def session(self) -> Optional[DrawSession]:
        return self._session

    @property
    def draw_type(self) -> Optional[str]:
        return self._session.draw_type if self._session else None

    @property
    def disposed(self) -> bool:
        return self._disposed

    def _ensure_active(self):
        if self._disposed:
            raise SessionDisposedError("The drawing controller has been disposed")

    def _close_session(self):
        if self._session is not None:
            self._session.close()
            self._session = None

    def set_draw_type(self, draw_type: str) -> DrawSession:
        """
        Replace the active session with a fresh one for ``draw_type``.

        Any unfinished gesture of the previous session is discarded.

        Raises:
            SessionDisposedError: If the controller was disposed.
            ValueError: If the draw type is not supported.
        """
        self._ensure_active()
        draw_type = DrawType.normalize(draw_type)

        self._close_session()
        self._session = DrawSession(draw_type, self._surface, self.on_finalized)
        logger.info(f"Draw type set to {draw_type}")
        return self._session

    def on_finalized(self, geometry: Geometry) -> Feature:
        """
        Measure a finalized geometry, store it and publish the result.

        A projection failure stores the feature as unmeasured and reports a
        diagnostic instead of raising.
        """
        self._ensure_active()

        try:
            result = measure(geometry, self._projection)
        except ProjectionFailure as e:
            diagnostic = log_and_report(e, context=f"measuring {geometry.draw_type}")
            result = MeasurementResult.unmeasured(geometry.draw_type)
            if self.on_error is not None:
                self.on_error(diagnostic)

        feature = self.features.add(geometry, result)
        self._surface.add_feature(feature, feature_style(geometry.draw_type))

        self.last_result = result
        self.dimension_text = format_measurement(result)
        logger.info(f"Feature {feature.id} ({geometry.draw_type}) added: {result.kind}={result.value}")

        if self.on_measurement is not None:
            self.on_measurement(self.dimension_text)
        return feature

    def get_features(self) -> List[Feature]:
        self._ensure_active()
        return self.features.get_features()

    def to_geojson(self) -> dict:
        self._ensure_active()
        return self.features.to_geojson(self._projection)

    def dispose(self):
        """Release the session, the surface and the projection. Idempotent."""
        if self._disposed:
            return
        self._close_session()
        # The surface may already be gone when the window closes
        cleared, error = safe_execute(self._surface.clear_features)
        if not cleared:
            logger.warning(f"Surface features not cleared on dispose: {error}")
        self.features.clear()
        self._surface = None
        self._projection = None
        self._disposed = True
        logger.info("Drawing controller disposed")
