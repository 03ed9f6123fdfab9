# utils/__init__.py
"""
Utility modules for MapMeasure.
"""

from .logger import get_logger, setup_logging, log_exception

# Export measurement utilities
from .measurements import (
    MeasurementResult,
    measure,
    format_measurement,
    calculate_distance_geographic,
    calculate_area_geographic
)
from .projection import WebMercatorProjection

__all__ = [
    # Logger
    'get_logger',
    'setup_logging',
    'log_exception',
    # Measurements
    'MeasurementResult',
    'measure',
    'format_measurement',
    'calculate_distance_geographic',
    'calculate_area_geographic',
    # Projection
    'WebMercatorProjection'
]
