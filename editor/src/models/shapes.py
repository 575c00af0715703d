"""Shape data model.

Shapes are immutable values: every service operation returns a new
instance built with ``dataclasses.replace``. Derived attributes (triangle
centroid, line midpoint and length) are recomputed in ``__post_init__`` so
they can never drift from the defining geometry.
"""
import math
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Tuple

from constants import (
    DEFAULT_FILL_COLOR, DEFAULT_STROKE_COLOR, DEFAULT_STROKE_WIDTH,
    DEFAULT_LINE_STROKE_WIDTH, DEFAULT_OPACITY,
    DEFAULT_CIRCLE_RADIUS, DEFAULT_RECTANGLE_WIDTH, DEFAULT_RECTANGLE_HEIGHT,
)
from models.point import Point


class ShapeType(str, Enum):
    """Discriminant tag of the closed shape variant set."""
    CIRCLE = 'circle'
    RECTANGLE = 'rectangle'
    TRIANGLE = 'triangle'
    LINE = 'line'


class MeasurementUnit(str, Enum):
    """Physical unit measurements are reported in."""
    CM = 'cm'
    IN = 'in'


def generate_shape_id(shape_type) -> str:
    """Generate a unique shape id, e.g. 'circle-3f2a...'."""
    return f"{ShapeType(shape_type).value}-{uuid.uuid4().hex}"


@dataclass(frozen=True)
class OriginalDimensions:
    """Baseline snapshot that uniform resizes compose from.

    values: pre-scale geometry, meaning depends on the shape type
    scale:  cumulative factor applied to ``values`` to get the current geometry
    """
    values: Tuple[float, ...]
    scale: float = 1.0


@dataclass(frozen=True)
class Shape:
    """Attributes shared by every shape type."""
    SHAPE_TYPE: ClassVar[ShapeType] = None

    id: str = ''
    position: Point = Point(0.0, 0.0)
    rotation: float = 0.0  # Degrees
    fill_color: str = DEFAULT_FILL_COLOR
    stroke_color: str = DEFAULT_STROKE_COLOR
    stroke_width: float = DEFAULT_STROKE_WIDTH
    opacity: float = DEFAULT_OPACITY
    original_dimensions: Optional[OriginalDimensions] = None

    def __post_init__(self):
        if not self.id:
            object.__setattr__(self, 'id', generate_shape_id(self.SHAPE_TYPE))
        if not isinstance(self.position, Point):
            object.__setattr__(self, 'position', Point.from_iterable(self.position))

    @property
    def type(self) -> ShapeType:
        return self.SHAPE_TYPE


@dataclass(frozen=True)
class Circle(Shape):
    SHAPE_TYPE: ClassVar[ShapeType] = ShapeType.CIRCLE

    radius: float = DEFAULT_CIRCLE_RADIUS


@dataclass(frozen=True)
class Rectangle(Shape):
    """Rectangle anchored at its top-left corner, rotated about its center."""
    SHAPE_TYPE: ClassVar[ShapeType] = ShapeType.RECTANGLE

    width: float = DEFAULT_RECTANGLE_WIDTH
    height: float = DEFAULT_RECTANGLE_HEIGHT

    @property
    def center(self) -> Point:
        return Point(self.position.x + self.width / 2, self.position.y + self.height / 2)


@dataclass(frozen=True)
class Triangle(Shape):
    """Triangle defined by three points; position is always the centroid."""
    SHAPE_TYPE: ClassVar[ShapeType] = ShapeType.TRIANGLE

    points: Tuple[Point, Point, Point] = ()

    def __post_init__(self):
        points = tuple(p if isinstance(p, Point) else Point.from_iterable(p) for p in self.points)
        if len(points) != 3:
            raise ValueError(f"Triangle needs exactly 3 points, got {len(points)}")
        object.__setattr__(self, 'points', points)
        object.__setattr__(self, 'position', Point(
            sum(p.x for p in points) / 3.0,
            sum(p.y for p in points) / 3.0,
        ))
        super().__post_init__()


@dataclass(frozen=True)
class Line(Shape):
    """Line segment; position is the midpoint and length is derived."""
    SHAPE_TYPE: ClassVar[ShapeType] = ShapeType.LINE

    stroke_width: float = DEFAULT_LINE_STROKE_WIDTH
    start_point: Point = Point(0.0, 0.0)
    end_point: Point = Point(0.0, 0.0)
    length: float = field(init=False, default=0.0)

    def __post_init__(self):
        start = self.start_point if isinstance(self.start_point, Point) else Point.from_iterable(self.start_point)
        end = self.end_point if isinstance(self.end_point, Point) else Point.from_iterable(self.end_point)
        object.__setattr__(self, 'start_point', start)
        object.__setattr__(self, 'end_point', end)
        object.__setattr__(self, 'position', Point((start.x + end.x) / 2, (start.y + end.y) / 2))
        object.__setattr__(self, 'length', math.hypot(end.x - start.x, end.y - start.y))
        super().__post_init__()


SHAPE_CLASSES = {
    ShapeType.CIRCLE: Circle,
    ShapeType.RECTANGLE: Rectangle,
    ShapeType.TRIANGLE: Triangle,
    ShapeType.LINE: Line,
}
