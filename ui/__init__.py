# ui/__init__.py
"""
UI components for MapMeasure.
"""

from .map_canvas import MapCanvas
from .main_window import MainWindow

__all__ = [
    'MapCanvas',
    'MainWindow'
]
