"""Line service - position is the midpoint, rotation follows the direction."""

import dataclasses
import logging
import math

from constants import DEFAULT_LINE_LENGTH, LINE_HIT_MIN_RADIUS, LINE_HIT_STROKE_FACTOR, GEOMETRY_EPSILON
from models.point import Point
from models.shapes import Line, ShapeType
from utils.geometry import (
    angle_of, normalize_angle_degrees, point_segment_distance, rotate_point, scale_point, wrap_degrees,
)
from utils.units import parse_unit, pixels_to_units
from .base_service import ShapeService

logger = logging.getLogger(__name__)


class LineService(ShapeService):

    MEASUREMENT_KEYS = ('length', 'angle')
    AREA_KEYS = ()
    ANGLE_KEYS = ('angle',)

    def get_shape_type(self):
        return ShapeType.LINE

    def create_shape(self, start_point=None, end_point=None, position=None,
                     length=DEFAULT_LINE_LENGTH, angle=0.0, **style):
        """Create from two endpoints, or from a midpoint, length and angle (degrees)."""
        style.pop('rotation', None)
        if start_point is None or end_point is None:
            center = Point.from_iterable(position) if position is not None else Point(0.0, 0.0)
            start_point, end_point = self._endpoints_about(center, self._clamp_dimension(length, 'length'), angle)
        else:
            start_point = Point.from_iterable(start_point)
            end_point = Point.from_iterable(end_point)
            if math.hypot(end_point.x - start_point.x, end_point.y - start_point.y) < GEOMETRY_EPSILON:
                logger.warning("Zero-length line at %s, extended to minimum length", start_point)
                end_point = start_point.translated(self._clamp_dimension(0.0, 'length'), 0.0)

        return Line(
            start_point=start_point,
            end_point=end_point,
            rotation=normalize_angle_degrees(angle_of(start_point, end_point)),
            **style,
        )

    def create_from_drag(self, start, end, **style):
        return self.create_shape(start_point=start, end_point=end, **style)

    def _endpoints_about(self, center, length, angle):
        half_x = math.cos(math.radians(angle)) * length / 2
        half_y = math.sin(math.radians(angle)) * length / 2
        return (Point(center.x - half_x, center.y - half_y),
                Point(center.x + half_x, center.y + half_y))

    def update_endpoints(self, shape, start_point, end_point):
        return dataclasses.replace(
            shape,
            start_point=start_point,
            end_point=end_point,
            rotation=normalize_angle_degrees(angle_of(start_point, end_point)),
            original_dimensions=None,
        )

    def move_shape(self, shape, dx, dy):
        return dataclasses.replace(shape, start_point=shape.start_point.translated(dx, dy),
                                   end_point=shape.end_point.translated(dx, dy))

    def resize_shape(self, shape, factor, center=None):
        if not self._check_factor(shape, factor):
            return shape
        if shape.length < GEOMETRY_EPSILON:
            logger.warning("Cannot resize zero-length line %s", shape.id)
            return shape

        mid = shape.position
        half = shape.end_point - mid
        (half_x, half_y), baseline = self._compose_baseline(shape, (half.x, half.y), factor)

        length = 2 * math.hypot(half_x, half_y)
        clamped = self._clamp_dimension(length, 'length')
        if clamped != length:
            half_x *= clamped / length
            half_y *= clamped / length
            baseline = None

        new_mid = mid if center is None else scale_point(mid, center, factor)
        return dataclasses.replace(
            shape,
            start_point=Point(new_mid.x - half_x, new_mid.y - half_y),
            end_point=Point(new_mid.x + half_x, new_mid.y + half_y),
            original_dimensions=baseline,
        )

    def rotate_shape(self, shape, angle, center=None):
        center = shape.position if center is None else center
        return dataclasses.replace(
            shape,
            start_point=rotate_point(shape.start_point, center, angle),
            end_point=rotate_point(shape.end_point, center, angle),
            rotation=normalize_angle_degrees(shape.rotation + angle),
            original_dimensions=None,
        )

    def get_measurements(self, shape, unit, pixels_per_unit):
        parse_unit(unit)
        angle = 0.0
        if shape.length >= GEOMETRY_EPSILON:
            angle = wrap_degrees(angle_of(shape.start_point, shape.end_point))
        return {
            'length': pixels_to_units(shape.length, pixels_per_unit),
            'angle': angle,
        }

    def update_from_measurement(self, shape, key, new_value, original_value, unit, pixels_per_unit):
        if key not in self.MEASUREMENT_KEYS:
            return self._unknown_key(shape, key)

        if key == 'angle':
            if new_value is None or not math.isfinite(new_value):
                logger.warning("Invalid line angle %r, line %s unchanged", new_value, shape.id)
                return shape
            angle = wrap_degrees(new_value)
            start, end = self._endpoints_about(shape.position, shape.length, angle)
            return dataclasses.replace(shape, start_point=start, end_point=end,
                                       rotation=normalize_angle_degrees(angle),
                                       original_dimensions=None)

        if shape.length < GEOMETRY_EPSILON:
            logger.warning("Line %s has no length to scale", shape.id)
            return shape
        length = None
        if self._is_usable(new_value):
            length = self._value_to_pixels(key, new_value, unit, pixels_per_unit)
        length = self._clamp_dimension(length, 'length')
        return self.resize_shape(shape, length / shape.length)

    def contains_point(self, shape, point):
        hit_radius = max(shape.stroke_width * LINE_HIT_STROKE_FACTOR, LINE_HIT_MIN_RADIUS)
        return point_segment_distance(point, shape.start_point, shape.end_point) <= hit_radius

    def get_center(self, shape):
        return shape.position

    def get_characteristic_size(self, shape):
        return shape.length / 2
