"""Triangle service.

A triangle is three points in canvas space; rotation is applied to the
points themselves and also accumulated in the ``rotation`` field. Position
is always the centroid (recomputed by the model).
"""

import dataclasses
import logging
import math

from constants import (
    DEFAULT_TRIANGLE_SIZE, TRIANGLE_DRAG_WIDTH_FACTOR, MIN_SHAPE_DIMENSION,
    GEOMETRY_EPSILON, BARYCENTRIC_EPSILON, TRIANGLE_CLASSIFY_TOLERANCE,
    RIGHT_ANGLE_TOLERANCE,
)
from models.point import Point
from models.shapes import Triangle, ShapeType
from utils.geometry import (
    distance, dot, scale_point, rotate_points, scale_points, translate_points, wrap_degrees,
)
from utils.triangle_math import (
    triangle_sides, triangle_area, triangle_perimeter, triangle_height,
    slot_angles, vertex_angles, is_degenerate, clamp_target_angle,
    reconstruct_for_angle, recenter,
)
from utils.units import parse_unit, pixels_to_units, square_pixels_to_units
from .base_service import ShapeService

logger = logging.getLogger(__name__)

SIDE_KEYS = ('side1', 'side2', 'side3')
ANGLE_KEYS = ('angle1', 'angle2', 'angle3')


class TriangleService(ShapeService):

    MEASUREMENT_KEYS = SIDE_KEYS + ('perimeter', 'area') + ANGLE_KEYS + ('height',)
    ANGLE_KEYS = ANGLE_KEYS

    def get_shape_type(self):
        return ShapeType.TRIANGLE

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def create_shape(self, points=None, position=None, **style):
        """Create from explicit points, or a default triangle centred on position."""
        if points is not None:
            points = tuple(Point.from_iterable(p) for p in points)
            if is_degenerate(points):
                logger.warning("Creating degenerate triangle %s", points)
            return Triangle(points=points, **style)

        half = DEFAULT_TRIANGLE_SIZE / 2
        center = Point.from_iterable(position) if position is not None else Point(0.0, 0.0)
        points = (Point(0.0, -half), Point(-half, half), Point(half, half))
        return Triangle(points=recenter(points, center), **style)

    def create_from_drag(self, start, end, **style):
        """Right triangle sized from the drag extent, right angle at the apex."""
        size = max(abs(end.x - start.x), abs(end.y - start.y)) * TRIANGLE_DRAG_WIDTH_FACTOR
        direction = 1.0 if end.x >= start.x else -1.0
        mid_x = (start.x + end.x) / 2
        top_y = min(start.y, end.y) - size / 4
        points = (
            Point(mid_x, top_y),
            Point(mid_x, top_y + size),
            Point(mid_x + direction * size, top_y),
        )
        return self.create_shape(points=points, **style)

    def create_equilateral(self, center, side, **style):
        h = side * math.sqrt(3) / 2
        points = (Point(0.0, -2 * h / 3), Point(-side / 2, h / 3), Point(side / 2, h / 3))
        return Triangle(points=translate_points(points, center.x, center.y), **style)

    def create_isosceles(self, center, base, height, **style):
        points = (Point(0.0, -2 * height / 3), Point(-base / 2, height / 3), Point(base / 2, height / 3))
        return Triangle(points=translate_points(points, center.x, center.y), **style)

    def create_right_triangle(self, corner, width, height, **style):
        """Right angle at ``corner``; legs run right and up on screen."""
        points = (corner, Point(corner.x + width, corner.y), Point(corner.x, corner.y - height))
        return Triangle(points=points, **style)

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def move_shape(self, shape, dx, dy):
        return dataclasses.replace(shape, points=translate_points(shape.points, dx, dy))

    def resize_shape(self, shape, factor, center=None):
        if not self._check_factor(shape, factor):
            return shape
        current_longest = max(triangle_sides(shape.points))
        if current_longest < GEOMETRY_EPSILON:
            logger.warning("Cannot resize collapsed triangle %s", shape.id)
            return shape

        origin = shape.position
        offsets = []
        for point in shape.points:
            offsets.extend((point.x - origin.x, point.y - origin.y))
        scaled, baseline = self._compose_baseline(shape, offsets, factor)

        new_origin = origin if center is None else scale_point(origin, center, factor)
        points = tuple(Point(new_origin.x + scaled[i], new_origin.y + scaled[i + 1]) for i in (0, 2, 4))

        longest = max(triangle_sides(points))
        if longest < MIN_SHAPE_DIMENSION:
            logger.warning("Triangle %s longest side %.3g px below minimum, clamped", shape.id, longest)
            points = scale_points(points, new_origin, MIN_SHAPE_DIMENSION / longest)
            baseline = None
        return dataclasses.replace(shape, points=points, original_dimensions=baseline)

    def scale_triangle(self, shape, sx, sy, center=None):
        """Per-axis scale about center (default centroid). Resets the baseline."""
        center = shape.position if center is None else center
        return dataclasses.replace(shape, points=scale_points(shape.points, center, sx, sy),
                                   original_dimensions=None)

    def rotate_shape(self, shape, angle, center=None):
        center = shape.position if center is None else center
        return dataclasses.replace(
            shape,
            points=rotate_points(shape.points, center, angle),
            rotation=wrap_degrees(shape.rotation + angle),
            original_dimensions=None,
        )

    def update_point(self, shape, index, point):
        """Move a single vertex; the centroid follows."""
        points = list(shape.points)
        points[index] = Point.from_iterable(point)
        return dataclasses.replace(shape, points=tuple(points), original_dimensions=None)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def is_equilateral(self, shape):
        if is_degenerate(shape.points):
            return False
        a, b, c = triangle_sides(shape.points)
        return (math.isclose(a, b, rel_tol=TRIANGLE_CLASSIFY_TOLERANCE)
                and math.isclose(b, c, rel_tol=TRIANGLE_CLASSIFY_TOLERANCE))

    def is_isosceles(self, shape):
        if is_degenerate(shape.points):
            return False
        a, b, c = triangle_sides(shape.points)
        tol = TRIANGLE_CLASSIFY_TOLERANCE
        return (math.isclose(a, b, rel_tol=tol) or math.isclose(b, c, rel_tol=tol)
                or math.isclose(a, c, rel_tol=tol))

    def is_right_angled(self, shape):
        if is_degenerate(shape.points):
            return False
        return any(abs(angle - 90.0) <= RIGHT_ANGLE_TOLERANCE for angle in vertex_angles(shape.points))

    # ------------------------------------------------------------------
    # Measurements
    # ------------------------------------------------------------------

    def get_measurements(self, shape, unit, pixels_per_unit):
        parse_unit(unit)
        points = shape.points
        sides = triangle_sides(points)
        angles = slot_angles(points)

        measurements = {}
        for key, side in zip(SIDE_KEYS, sides):
            measurements[key] = pixels_to_units(side, pixels_per_unit)
        measurements['perimeter'] = pixels_to_units(sum(sides), pixels_per_unit)
        measurements['area'] = square_pixels_to_units(triangle_area(points), pixels_per_unit)
        for key, angle in zip(ANGLE_KEYS, angles):
            measurements[key] = angle
        measurements['height'] = pixels_to_units(triangle_height(points), pixels_per_unit)
        return measurements

    def update_from_measurement(self, shape, key, new_value, original_value, unit, pixels_per_unit):
        if key not in self.MEASUREMENT_KEYS:
            return self._unknown_key(shape, key)

        if key in ANGLE_KEYS:
            target = clamp_target_angle(new_value if new_value is not None else math.nan)
            points = reconstruct_for_angle(shape.points, ANGLE_KEYS.index(key), target)
            return dataclasses.replace(shape, points=points, original_dimensions=None)

        if key in SIDE_KEYS:
            current = triangle_sides(shape.points)[SIDE_KEYS.index(key)]
        elif key == 'perimeter':
            current = triangle_perimeter(shape.points)
        elif key == 'area':
            current = triangle_area(shape.points)
        else:
            current = triangle_height(shape.points)

        if current < GEOMETRY_EPSILON or (key in ('area', 'height') and is_degenerate(shape.points)):
            logger.warning("Triangle %s is degenerate, cannot set %s", shape.id, key)
            return shape

        if not self._is_usable(new_value):
            logger.warning("Invalid triangle %s %r, shrinking to minimum size", key, new_value)
            return self.resize_shape(shape, MIN_SHAPE_DIMENSION / max(triangle_sides(shape.points)))

        target = self._value_to_pixels(key, new_value, unit, pixels_per_unit)
        if key == 'area':
            return self.resize_shape(shape, math.sqrt(target / current))
        if key == 'height':
            # Approximation: stretch along the y-axis only
            return self.scale_triangle(shape, 1.0, target / current)
        return self.resize_shape(shape, target / current)

    # ------------------------------------------------------------------
    # Hit testing
    # ------------------------------------------------------------------

    def contains_point(self, shape, point):
        """Barycentric test; degenerate triangles never hit."""
        p0, p1, p2 = shape.points
        v0 = p2 - p0
        v1 = p1 - p0
        v2 = point - p0

        dot00 = dot(v0, v0)
        dot01 = dot(v0, v1)
        dot02 = dot(v0, v2)
        dot11 = dot(v1, v1)
        dot12 = dot(v1, v2)

        denominator = dot00 * dot11 - dot01 * dot01
        if abs(denominator) < BARYCENTRIC_EPSILON:
            return False

        u = (dot11 * dot02 - dot01 * dot12) / denominator
        v = (dot00 * dot12 - dot01 * dot02) / denominator
        w = 1.0 - u - v
        return all(0.0 <= coord <= 1.0 for coord in (u, v, w))

    def get_center(self, shape):
        return shape.position

    def get_characteristic_size(self, shape):
        return distance(shape.position, shape.points[0])
