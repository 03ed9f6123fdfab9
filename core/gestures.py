# core/gestures.py
"""
Gesture events and the channel a map surface uses to deliver them.

A surface emits typed events on its ``GestureChannel``. Each drawing session
subscribes once and receives a ``SubscriptionToken``; revoking the token
guarantees no further event reaches that session's handler.
"""

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from core.geometry import Coordinate
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PointerDown:
    coordinate: Coordinate


@dataclass(frozen=True)
class PointerMove:
    coordinate: Coordinate


@dataclass(frozen=True)
class DrawEnd:
    pass


GestureHandler = Callable[[object], None]

_token_ids = itertools.count(1)


class SubscriptionToken:
    """Handle for one subscription; inactive once revoked."""

    def __init__(self):
        self.id = next(_token_ids)
        self.active = True

    def revoke(self):
        self.active = False

    def __repr__(self):
        state = "active" if self.active else "revoked"
        return f"<SubscriptionToken {self.id} {state}>"


class GestureChannel:
    """Fan-out of gesture events to subscribed handlers, in subscription order."""

    def __init__(self):
        self._handlers: Dict[int, tuple] = {}

    def subscribe(self, handler: GestureHandler) -> SubscriptionToken:
        token = SubscriptionToken()
        self._handlers[token.id] = (token, handler)
        logger.debug(f"Gesture subscription {token.id} opened")
        return token

    def unsubscribe(self, token: SubscriptionToken) -> None:
        """Revoke ``token``. Unknown or already revoked tokens are ignored."""
        token.revoke()
        if self._handlers.pop(token.id, None) is not None:
            logger.debug(f"Gesture subscription {token.id} closed")

    def emit(self, event) -> None:
        # Copy: a handler may unsubscribe while we iterate
        for token, handler in list(self._handlers.values()):
            if token.active:
                handler(event)

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)


class GestureSource:
    """
    Owns a ``GestureChannel`` and emits ``PointerDown``/``PointerMove``/
    ``DrawEnd`` through the ``pointer_down``, ``pointer_move`` and
    ``draw_end`` helpers.
    """

    def __init__(self):
        self.gestures = GestureChannel()

    def subscribe(self, handler: GestureHandler) -> SubscriptionToken:
        return self.gestures.subscribe(handler)

    def unsubscribe(self, token: SubscriptionToken) -> None:
        self.gestures.unsubscribe(token)

    def pointer_down(self, coordinate) -> None:
        self.gestures.emit(PointerDown(Coordinate(*coordinate)))

    def pointer_move(self, coordinate) -> None:
        self.gestures.emit(PointerMove(Coordinate(*coordinate)))

    def draw_end(self) -> None:
        self.gestures.emit(DrawEnd())


class DrawingSurface(GestureSource, ABC):
    """
    Contract the drawing core expects from a map rendering surface.

    Surfaces whose own base class carries a metaclass (Qt widgets) inherit
    ``GestureSource`` instead and are registered as virtual subclasses.
    """

    @abstractmethod
    def render_preview(self, coordinates: Iterable[Coordinate]) -> None:
        """Show the in-progress geometry, replacing any previous preview."""
        pass

    @abstractmethod
    def clear_preview(self) -> None:
        pass

    @abstractmethod
    def add_feature(self, feature, style: Optional[dict] = None) -> None:
        """Render a finalized feature persistently with ``style``."""
        pass

    @abstractmethod
    def clear_features(self) -> None:
        pass
