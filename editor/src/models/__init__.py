"""
Geometry Canvas Editor - Data Models

Immutable shape values and the collection that owns them.
This is the MODEL in MVC architecture.
"""

from .point import Point
from .shapes import (
    ShapeType, MeasurementUnit, OriginalDimensions,
    Shape, Circle, Rectangle, Triangle, Line,
    generate_shape_id,
)
from .shape_collection import ShapeCollection

__all__ = [
    'Point', 'ShapeType', 'MeasurementUnit', 'OriginalDimensions',
    'Shape', 'Circle', 'Rectangle', 'Triangle', 'Line',
    'generate_shape_id', 'ShapeCollection',
]
