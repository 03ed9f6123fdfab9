"""
Controllers package for MapMeasure.
Provides controller classes for the drawing workflow.
"""

from controllers.session_controller import DrawingSessionController, feature_style

__all__ = [
    'DrawingSessionController',
    'feature_style'
]
