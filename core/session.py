# core/session.py
"""
One drawing session: a builder and a state machine bound to a draw type and
subscribed to a surface's gesture channel.
"""

from typing import Callable

from core.geometry import DrawType, Geometry, GeometryBuilder
from core.gestures import DrawingSurface
from core.state_machine import DrawState, DrawStateMachine
from utils.logger import get_logger

logger = get_logger(__name__)


class DrawSession:
    """
    Scoped gesture subscription for a single draw type.

    ``close`` revokes the subscription before dropping the in-progress
    gesture, and may be called any number of times.
    """

    def __init__(
        self,
        draw_type: str,
        surface: DrawingSurface,
        on_finalized: Callable[[Geometry], None],
    ):
        self.draw_type = DrawType.normalize(draw_type)
        self.surface = surface
        self.builder = GeometryBuilder()
        self.machine = DrawStateMachine(
            self.draw_type,
            self.builder,
            on_finalized=self._finalized,
            on_preview=surface.render_preview,
        )
        self._on_finalized = on_finalized
        self._token = surface.subscribe(self.machine.handle)
        self.closed = False
        logger.info(f"Draw session opened for {self.draw_type}")

    @property
    def state(self) -> DrawState:
        return self.machine.state

    @property
    def token(self):
        return self._token

    def _finalized(self, geometry: Geometry) -> None:
        self.surface.clear_preview()
        self._on_finalized(geometry)

    def close(self) -> None:
        if self.closed:
            return
        self.surface.unsubscribe(self._token)
        self.machine.cancel()
        self.surface.clear_preview()
        self.closed = True
        logger.info(f"Draw session closed for {self.draw_type}")
