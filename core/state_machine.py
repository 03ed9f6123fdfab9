# core/state_machine.py
"""
Gesture lifecycle for one draw type: Idle -> Drawing -> (Finalized) -> Idle.
"""

from enum import Enum
from typing import Callable, List, Optional

from core.exceptions import IncompleteGeometry, InvalidGeometryState
from core.geometry import Coordinate, DrawType, Geometry, GeometryBuilder
from core.gestures import DrawEnd, PointerDown, PointerMove
from utils.logger import get_logger

logger = get_logger(__name__)


class DrawState(Enum):
    IDLE = "idle"
    DRAWING = "drawing"
    FINALIZED = "finalized"


class DrawStateMachine:
    """
    Interprets gesture events for a fixed draw type.

    Completion is only ever signalled by a ``DrawEnd`` event from the gesture
    layer, except for Point where the first pointer-down completes the
    geometry. Each completed gesture is passed to ``on_finalized`` exactly
    once.
    """

    def __init__(
        self,
        draw_type: str,
        builder: GeometryBuilder,
        on_finalized: Callable[[Geometry], None],
        on_preview: Optional[Callable[[List[Coordinate]], None]] = None,
    ):
        self.draw_type = DrawType.normalize(draw_type)
        self.builder = builder
        self.on_finalized = on_finalized
        self.on_preview = on_preview
        self.state = DrawState.IDLE

    def handle(self, event) -> None:
        """Dispatch a gesture event."""
        if isinstance(event, PointerDown):
            self.pointer_down(event.coordinate)
        elif isinstance(event, PointerMove):
            self.pointer_move(event.coordinate)
        elif isinstance(event, DrawEnd):
            self.draw_end()
        else:
            logger.debug(f"Ignoring unknown gesture event {event!r}")

    def pointer_down(self, coordinate: Coordinate) -> None:
        if self.state == DrawState.IDLE:
            self.builder.begin(self.draw_type, coordinate)
            self.state = DrawState.DRAWING
            logger.debug(f"{self.draw_type} gesture started at {coordinate}")
            if self.draw_type == DrawType.POINT:
                self.draw_end()
            return

        try:
            self.builder.add_vertex(coordinate)
        except InvalidGeometryState as e:
            logger.debug(f"Vertex rejected: {e}")
            return
        self._publish_preview(list(self.builder.vertices))

    def pointer_move(self, coordinate: Coordinate) -> None:
        if self.state != DrawState.DRAWING:
            return
        self._publish_preview(self.builder.preview(coordinate))

    def draw_end(self) -> None:
        if self.state != DrawState.DRAWING:
            logger.debug("Draw end received while idle; ignored")
            return

        try:
            geometry = self.builder.finalize()
        except IncompleteGeometry as e:
            logger.debug(f"Finalize rejected: {e}")
            return

        self.state = DrawState.FINALIZED
        logger.debug(f"{self.draw_type} finalized with {len(geometry)} vertices")
        try:
            self.on_finalized(geometry)
        finally:
            self.builder.reset()
            self.state = DrawState.IDLE

    def cancel(self) -> None:
        """Drop the in-progress gesture without emitting anything."""
        if self.state == DrawState.DRAWING:
            logger.debug(
                f"{self.draw_type} gesture discarded with {len(self.builder.vertices)} vertices"
            )
        self.builder.reset()
        self.state = DrawState.IDLE

    def _publish_preview(self, coordinates: List[Coordinate]) -> None:
        if self.on_preview is not None:
            self.on_preview(coordinates)
