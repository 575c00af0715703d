"""Rectangle service.

Position is the top-left corner of the unrotated rectangle. Rotation is a
field only and is applied about the rectangle's center when drawing and hit
testing.
"""

import dataclasses
import math

from constants import DEFAULT_RECTANGLE_WIDTH, DEFAULT_RECTANGLE_HEIGHT
from models.point import Point
from models.shapes import Rectangle, ShapeType
from utils.geometry import rotate_point, scale_point, wrap_degrees
from utils.units import parse_unit, pixels_to_units, square_pixels_to_units
from .base_service import ShapeService


class RectangleService(ShapeService):

    MEASUREMENT_KEYS = ('width', 'height', 'perimeter', 'area', 'diagonal')

    def get_shape_type(self):
        return ShapeType.RECTANGLE

    def create_shape(self, position=None, width=DEFAULT_RECTANGLE_WIDTH,
                     height=DEFAULT_RECTANGLE_HEIGHT, **style):
        position = Point.from_iterable(position) if position is not None else Point(0.0, 0.0)
        return Rectangle(
            position=position,
            width=self._clamp_dimension(width, 'width'),
            height=self._clamp_dimension(height, 'height'),
            **style,
        )

    def create_from_drag(self, start, end, **style):
        top_left = Point(min(start.x, end.x), min(start.y, end.y))
        return self.create_shape(position=top_left, width=abs(end.x - start.x),
                                 height=abs(end.y - start.y), **style)

    def move_shape(self, shape, dx, dy):
        return dataclasses.replace(shape, position=shape.position.translated(dx, dy))

    def _with_size(self, shape, width, height, center=None, factor=1.0, **changes):
        """Resize keeping the center fixed (or scaling it away from ``center``)."""
        new_center = shape.center
        if center is not None:
            new_center = scale_point(new_center, center, factor)
        position = Point(new_center.x - width / 2, new_center.y - height / 2)
        return dataclasses.replace(shape, position=position, width=width, height=height, **changes)

    def resize_shape(self, shape, factor, center=None):
        if not self._check_factor(shape, factor):
            return shape
        (width, height), baseline = self._compose_baseline(shape, (shape.width, shape.height), factor)
        clamped_w = self._clamp_dimension(width, 'width')
        clamped_h = self._clamp_dimension(height, 'height')
        if (clamped_w, clamped_h) != (width, height):
            baseline = None
        return self._with_size(shape, clamped_w, clamped_h, center, factor,
                               original_dimensions=baseline)

    def scale_rectangle(self, shape, sx, sy):
        """Per-axis scale about the rectangle's center. Resets the baseline."""
        width = self._clamp_dimension(shape.width * sx, 'width')
        height = self._clamp_dimension(shape.height * sy, 'height')
        return self._with_size(shape, width, height, original_dimensions=None)

    def rotate_shape(self, shape, angle, center=None):
        # Geometry is stored unrotated; only the angle changes
        return dataclasses.replace(shape, rotation=wrap_degrees(shape.rotation + angle))

    def get_corners(self, shape):
        """Corners (tl, tr, br, bl) with rotation applied about the center."""
        x, y = shape.position
        corners = (
            Point(x, y),
            Point(x + shape.width, y),
            Point(x + shape.width, y + shape.height),
            Point(x, y + shape.height),
        )
        center = shape.center
        return tuple(rotate_point(corner, center, shape.rotation) for corner in corners)

    def get_measurements(self, shape, unit, pixels_per_unit):
        parse_unit(unit)
        w, h = shape.width, shape.height
        return {
            'width': pixels_to_units(w, pixels_per_unit),
            'height': pixels_to_units(h, pixels_per_unit),
            'perimeter': pixels_to_units(2 * (w + h), pixels_per_unit),
            'area': square_pixels_to_units(w * h, pixels_per_unit),
            'diagonal': pixels_to_units(math.hypot(w, h), pixels_per_unit),
        }

    def update_from_measurement(self, shape, key, new_value, original_value, unit, pixels_per_unit):
        if key not in self.MEASUREMENT_KEYS:
            return self._unknown_key(shape, key)

        value = None
        if self._is_usable(new_value):
            value = self._value_to_pixels(key, new_value, unit, pixels_per_unit)

        if key == 'width':
            return self._with_size(shape, self._clamp_dimension(value, 'width'), shape.height,
                                   original_dimensions=None)
        if key == 'height':
            return self._with_size(shape, shape.width, self._clamp_dimension(value, 'height'),
                                   original_dimensions=None)

        # Aspect-preserving edits solve for the height
        aspect = shape.width / shape.height
        height = None
        if value is not None:
            if key == 'area':
                height = math.sqrt(value / aspect)
            elif key == 'perimeter':
                height = value / (2 * (aspect + 1))
            elif key == 'diagonal':
                height = value / math.sqrt(aspect * aspect + 1)
        height = self._clamp_dimension(height, 'height')
        width = self._clamp_dimension(aspect * height, 'width')
        return self._with_size(shape, width, height, original_dimensions=None)

    def contains_point(self, shape, point):
        # Undo the rotation about the center, then test the axis-aligned box
        local = rotate_point(point, shape.center, -shape.rotation)
        x, y = shape.position
        return x <= local.x <= x + shape.width and y <= local.y <= y + shape.height

    def get_center(self, shape):
        return shape.center

    def get_characteristic_size(self, shape):
        return math.hypot(shape.width, shape.height) / 2

    def get_snap_anchor(self, shape):
        return shape.position
