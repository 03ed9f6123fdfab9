"""
Unit tests for the gesture channel and subscription tokens.
"""

import unittest
import sys
import os

# Add root directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from core.geometry import Coordinate
from core.gestures import DrawEnd, DrawingSurface, GestureChannel, PointerDown, PointerMove
from tests.support import RecordingSurface


class TestGestureChannel(unittest.TestCase):

    def setUp(self):
        self.channel = GestureChannel()
        self.received = []

    def test_delivers_in_order(self):
        self.channel.subscribe(self.received.append)
        self.channel.emit(PointerDown(Coordinate(0, 0)))
        self.channel.emit(DrawEnd())
        self.assertEqual(self.received, [PointerDown(Coordinate(0, 0)), DrawEnd()])

    def test_unsubscribe_stops_delivery(self):
        token = self.channel.subscribe(self.received.append)
        self.channel.unsubscribe(token)
        self.channel.emit(DrawEnd())
        self.assertEqual(self.received, [])
        self.assertFalse(token.active)
        self.assertEqual(self.channel.subscriber_count, 0)

    def test_unsubscribe_twice(self):
        token = self.channel.subscribe(self.received.append)
        self.channel.unsubscribe(token)
        self.channel.unsubscribe(token)
        self.assertEqual(self.channel.subscriber_count, 0)

    def test_tokens_are_independent(self):
        other = []
        first = self.channel.subscribe(self.received.append)
        second = self.channel.subscribe(other.append)
        self.assertNotEqual(first.id, second.id)
        self.channel.unsubscribe(first)
        self.channel.emit(DrawEnd())
        self.assertEqual(self.received, [])
        self.assertEqual(other, [DrawEnd()])

    def test_handler_revoking_later_subscriber(self):
        """A subscriber revoked during dispatch receives nothing more."""
        late = []
        tokens = {}

        def first(event):
            self.channel.unsubscribe(tokens["late"])

        self.channel.subscribe(first)
        tokens["late"] = self.channel.subscribe(late.append)
        self.channel.emit(DrawEnd())
        self.assertEqual(late, [])


class TestDrawingSurface(unittest.TestCase):

    def test_helpers_emit_typed_events(self):
        surface = RecordingSurface()
        received = []
        surface.subscribe(received.append)
        surface.pointer_down((1, 2))
        surface.pointer_move((3, 4))
        surface.draw_end()
        self.assertEqual(received, [
            PointerDown(Coordinate(1, 2)),
            PointerMove(Coordinate(3, 4)),
            DrawEnd(),
        ])

    def test_surface_missing_rendering_fails_on_construction(self):
        class HalfSurface(DrawingSurface):
            def render_preview(self, coordinates):
                pass

            def clear_preview(self):
                pass

        with self.assertRaises(TypeError):
            HalfSurface()

    def test_recording_surface_is_complete(self):
        self.assertIsInstance(RecordingSurface(), DrawingSurface)


if __name__ == '__main__':
    unittest.main()
