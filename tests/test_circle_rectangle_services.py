"""
Tests for the circle and rectangle services.

Covers creation, forward measurements, inverse measurement updates,
baseline-composed resizing, rotation and hit testing.
"""
import logging
import math

import pytest

from models.point import Point
from models.shapes import Circle, Rectangle, ShapeType


PPU = 60.0  # pixels per cm


# ══════════════════════════════════════════════════════════════════════════
# Circle
# ══════════════════════════════════════════════════════════════════════════

class TestCircleService:

    @pytest.fixture
    def circle(self, circle_service):
        return circle_service.create_shape(position=Point(100, 100), radius=60, id='c1')

    def test_create(self, circle):
        assert isinstance(circle, Circle)
        assert circle.type is ShapeType.CIRCLE
        assert circle.position == Point(100, 100)
        assert circle.radius == 60

    def test_generated_ids_are_unique(self, circle_service):
        a = circle_service.create_shape()
        b = circle_service.create_shape()
        assert a.id != b.id
        assert a.id.startswith('circle-')

    def test_create_clamps_invalid_radius(self, circle_service, caplog):
        with caplog.at_level(logging.WARNING):
            circle = circle_service.create_shape(radius=-5)
        assert circle.radius == 1.0
        assert 'clamped' in caplog.text

    def test_create_from_drag(self, circle_service):
        circle = circle_service.create_from_drag(Point(10, 10), Point(40, 50))
        assert circle.position == Point(10, 10)
        assert circle.radius == pytest.approx(50.0)

    def test_measurements(self, circle_service, circle):
        m = circle_service.get_measurements(circle, 'cm', PPU)
        assert m['radius'] == pytest.approx(1.0)
        assert m['diameter'] == pytest.approx(2.0)
        assert m['circumference'] == pytest.approx(2 * math.pi)
        assert m['area'] == pytest.approx(math.pi)

    @pytest.mark.parametrize("key", ['radius', 'diameter', 'circumference', 'area'])
    def test_round_trip(self, circle_service, circle, key):
        """Setting a measurement to its current value keeps the radius."""
        value = circle_service.get_measurements(circle, 'cm', PPU)[key]
        updated = circle_service.update_from_measurement(circle, key, value, value, 'cm', PPU)
        assert updated.radius == pytest.approx(circle.radius)

    def test_update_area(self, circle_service, circle):
        updated = circle_service.update_from_measurement(circle, 'area', 4 * math.pi, math.pi, 'cm', PPU)
        assert updated.radius == pytest.approx(120.0)
        assert updated.position == circle.position

    def test_update_diameter_in_inches(self, circle_service, circle):
        updated = circle_service.update_from_measurement(circle, 'diameter', 2.0, None, 'in', 152.4)
        assert updated.radius == pytest.approx(152.4)

    def test_unknown_key_returns_same_shape(self, circle_service, circle, caplog):
        with caplog.at_level(logging.WARNING):
            updated = circle_service.update_from_measurement(circle, 'volume', 3, 1, 'cm', PPU)
        assert updated is circle
        assert 'volume' in caplog.text

    @pytest.mark.parametrize("bad_value", [0, -2, float('nan')])
    def test_invalid_value_clamps_to_minimum(self, circle_service, circle, bad_value):
        updated = circle_service.update_from_measurement(circle, 'radius', bad_value, 1, 'cm', PPU)
        assert updated.radius == pytest.approx(1.0)

    def test_resize_round_trip_is_exact(self, circle_service, circle):
        resized = circle_service.resize_shape(circle_service.resize_shape(circle, 2), 0.5)
        assert resized.radius == circle.radius
        assert resized.position == circle.position

    def test_resize_composes_factors(self, circle_service, circle):
        twice = circle_service.resize_shape(circle_service.resize_shape(circle, 1.5), 3)
        once = circle_service.resize_shape(circle, 4.5)
        assert twice.radius == pytest.approx(once.radius)
        assert twice.original_dimensions.scale == pytest.approx(4.5)

    def test_resize_about_external_center(self, circle_service, circle):
        resized = circle_service.resize_shape(circle, 2, center=Point(0, 0))
        assert resized.position == Point(200, 200)

    def test_resize_ignores_invalid_factor(self, circle_service, circle):
        assert circle_service.resize_shape(circle, 0) is circle
        assert circle_service.resize_shape(circle, float('inf')) is circle

    def test_rotate_only_updates_field(self, circle_service, circle):
        rotated = circle_service.rotate_shape(circle, 450)
        assert rotated.rotation == 90
        assert rotated.position == circle.position
        assert rotated.radius == circle.radius

    def test_contains_point(self, circle_service, circle):
        assert circle_service.contains_point(circle, Point(100, 100))
        assert circle_service.contains_point(circle, Point(160, 100))
        assert not circle_service.contains_point(circle, Point(160, 160))

    def test_snap_anchor_is_tangent_corner(self, circle_service, circle):
        assert circle_service.get_snap_anchor(circle) == Point(40, 40)
        moved = circle_service.move_anchor_to(circle, Point(0, 0))
        assert moved.position == Point(60, 60)


# ══════════════════════════════════════════════════════════════════════════
# Rectangle
# ══════════════════════════════════════════════════════════════════════════

class TestRectangleService:

    @pytest.fixture
    def rect(self, rectangle_service):
        return rectangle_service.create_shape(position=Point(0, 0), width=120, height=60, id='r1')

    def test_create_from_drag_normalizes_corners(self, rectangle_service):
        rect = rectangle_service.create_from_drag(Point(110, 70), Point(10, 10))
        assert isinstance(rect, Rectangle)
        assert rect.position == Point(10, 10)
        assert (rect.width, rect.height) == (100, 60)

    def test_center(self, rect):
        assert rect.center == Point(60, 30)

    def test_measurements(self, rectangle_service, rect):
        m = rectangle_service.get_measurements(rect, 'cm', PPU)
        assert m['width'] == pytest.approx(2.0)
        assert m['height'] == pytest.approx(1.0)
        assert m['perimeter'] == pytest.approx(6.0)
        assert m['area'] == pytest.approx(2.0)
        assert m['diagonal'] == pytest.approx(math.sqrt(5))

    def test_update_width_keeps_center(self, rectangle_service, rect):
        updated = rectangle_service.update_from_measurement(rect, 'width', 3, 2, 'cm', PPU)
        assert updated.width == pytest.approx(180)
        assert updated.height == 60
        assert updated.center == rect.center

    @pytest.mark.parametrize("key, value", [
        ('area', 8.0),
        ('perimeter', 12.0),
        ('diagonal', 2 * math.sqrt(5)),
    ])
    def test_aspect_preserving_updates(self, rectangle_service, rect, key, value):
        updated = rectangle_service.update_from_measurement(rect, key, value, None, 'cm', PPU)
        assert updated.height == pytest.approx(120)
        assert updated.width == pytest.approx(240)
        assert updated.center.x == pytest.approx(60)
        assert updated.center.y == pytest.approx(30)

    def test_invalid_width_clamps(self, rectangle_service, rect, caplog):
        with caplog.at_level(logging.WARNING):
            updated = rectangle_service.update_from_measurement(rect, 'width', -1, 2, 'cm', PPU)
        assert updated.width == 1.0
        assert 'clamped' in caplog.text

    def test_unknown_key(self, rectangle_service, rect):
        assert rectangle_service.update_from_measurement(rect, 'radius', 1, 1, 'cm', PPU) is rect

    def test_resize_round_trip_is_exact(self, rectangle_service, rect):
        resized = rectangle_service.resize_shape(rectangle_service.resize_shape(rect, 2), 0.5)
        assert (resized.width, resized.height) == (rect.width, rect.height)
        assert resized.position == rect.position

    def test_scale_rectangle_per_axis(self, rectangle_service, rect):
        scaled = rectangle_service.scale_rectangle(rect, 2, 1)
        assert (scaled.width, scaled.height) == (240, 60)
        assert scaled.center == rect.center
        assert scaled.original_dimensions is None

    def test_rotate_updates_rotation_only(self, rectangle_service, rect):
        rotated = rectangle_service.rotate_shape(rect, -30)
        assert rotated.rotation == 330
        assert rotated.position == rect.position

    def test_contains_point_unrotated(self, rectangle_service, rect):
        assert rectangle_service.contains_point(rect, Point(5, 30))
        assert not rectangle_service.contains_point(rect, Point(60, 80))

    def test_contains_point_rotated(self, rectangle_service, rect):
        rotated = rectangle_service.rotate_shape(rect, 90)
        assert rectangle_service.contains_point(rotated, Point(60, 80))
        assert not rectangle_service.contains_point(rotated, Point(5, 30))

    def test_corners_follow_rotation(self, rectangle_service, rect):
        corners = rectangle_service.get_corners(rectangle_service.rotate_shape(rect, 180))
        assert corners[0].x == pytest.approx(120)
        assert corners[0].y == pytest.approx(60)

    def test_snap_anchor_is_top_left(self, rectangle_service, rect):
        assert rectangle_service.get_snap_anchor(rect) == rect.position
