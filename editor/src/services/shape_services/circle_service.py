"""Circle service - position is the center."""

import dataclasses
import math

from constants import DEFAULT_CIRCLE_RADIUS
from models.point import Point
from models.shapes import Circle, ShapeType
from utils.geometry import distance, scale_point, wrap_degrees
from utils.units import parse_unit, pixels_to_units, square_pixels_to_units
from .base_service import ShapeService


class CircleService(ShapeService):
    """Circle operations. Rotation is tracked but never changes geometry."""

    MEASUREMENT_KEYS = ('radius', 'diameter', 'circumference', 'area')

    def get_shape_type(self):
        return ShapeType.CIRCLE

    def create_shape(self, position=None, radius=DEFAULT_CIRCLE_RADIUS, **style):
        position = Point.from_iterable(position) if position is not None else Point(0.0, 0.0)
        return Circle(position=position, radius=self._clamp_dimension(radius, 'radius'), **style)

    def create_from_drag(self, start, end, **style):
        return self.create_shape(position=start, radius=distance(start, end), **style)

    def move_shape(self, shape, dx, dy):
        return dataclasses.replace(shape, position=shape.position.translated(dx, dy))

    def resize_shape(self, shape, factor, center=None):
        if not self._check_factor(shape, factor):
            return shape
        (radius,), baseline = self._compose_baseline(shape, (shape.radius,), factor)
        clamped = self._clamp_dimension(radius, 'radius')
        if clamped != radius:
            # Clamped result becomes the new reference
            baseline = None
        position = shape.position
        if center is not None:
            position = scale_point(position, center, clamped / shape.radius)
        return dataclasses.replace(shape, radius=clamped, position=position,
                                   original_dimensions=baseline)

    def rotate_shape(self, shape, angle, center=None):
        # Rotation invariant: only the field changes
        return dataclasses.replace(shape, rotation=wrap_degrees(shape.rotation + angle))

    def get_measurements(self, shape, unit, pixels_per_unit):
        parse_unit(unit)
        radius = shape.radius
        return {
            'radius': pixels_to_units(radius, pixels_per_unit),
            'diameter': pixels_to_units(2 * radius, pixels_per_unit),
            'circumference': pixels_to_units(2 * math.pi * radius, pixels_per_unit),
            'area': square_pixels_to_units(math.pi * radius * radius, pixels_per_unit),
        }

    def update_from_measurement(self, shape, key, new_value, original_value, unit, pixels_per_unit):
        if key not in self.MEASUREMENT_KEYS:
            return self._unknown_key(shape, key)

        radius = None
        if self._is_usable(new_value):
            value = self._value_to_pixels(key, new_value, unit, pixels_per_unit)
            if key == 'radius':
                radius = value
            elif key == 'diameter':
                radius = value / 2
            elif key == 'circumference':
                radius = value / (2 * math.pi)
            elif key == 'area':
                radius = math.sqrt(value / math.pi)

        radius = self._clamp_dimension(radius, key)
        return self.resize_shape(shape, radius / shape.radius)

    def contains_point(self, shape, point):
        return distance(shape.position, point) <= shape.radius

    def get_center(self, shape):
        return shape.position

    def get_characteristic_size(self, shape):
        return shape.radius

    def get_snap_anchor(self, shape):
        """Left/top tangent edges so snapped circles sit edge-to-edge on the grid."""
        return Point(shape.position.x - shape.radius, shape.position.y - shape.radius)
