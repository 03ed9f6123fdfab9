"""
Core drawing model for MapMeasure: geometries, gestures, sessions.
"""
