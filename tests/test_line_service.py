"""
Tests for the line service.
"""
import logging

import pytest

from models.point import Point
from models.shapes import Line


PPU = 60.0


@pytest.fixture
def line(line_service):
    return line_service.create_shape(start_point=Point(0, 0), end_point=Point(120, 0), id='l1')


# ══════════════════════════════════════════════════════════════════════════
# Creation
# ══════════════════════════════════════════════════════════════════════════

class TestLineCreation:

    def test_derived_fields(self, line):
        assert isinstance(line, Line)
        assert line.position == Point(60, 0)
        assert line.length == 120
        assert line.rotation == 0
        assert line.stroke_width == 3.0

    def test_create_from_drag(self, line_service):
        line = line_service.create_from_drag(Point(10, 10), Point(10, 60))
        assert line.start_point == Point(10, 10)
        assert line.end_point == Point(10, 60)
        assert line.rotation == pytest.approx(90.0)

    def test_create_from_length_and_angle(self, line_service):
        line = line_service.create_shape(position=Point(0, 0), length=100, angle=90)
        assert line.start_point.x == pytest.approx(0.0, abs=1e-9)
        assert line.start_point.y == pytest.approx(-50.0)
        assert line.end_point.y == pytest.approx(50.0)
        assert line.length == pytest.approx(100.0)

    def test_zero_length_is_extended(self, line_service, caplog):
        with caplog.at_level(logging.WARNING):
            line = line_service.create_shape(start_point=Point(5, 5), end_point=Point(5, 5))
        assert line.length == pytest.approx(1.0)
        assert 'Zero-length' in caplog.text

    def test_update_endpoints(self, line_service, line):
        updated = line_service.update_endpoints(line, Point(0, 0), Point(0, -50))
        assert updated.length == 50
        assert updated.position == Point(0, -25)
        assert updated.rotation == pytest.approx(-90.0)


# ══════════════════════════════════════════════════════════════════════════
# Measurements
# ══════════════════════════════════════════════════════════════════════════

class TestLineMeasurements:

    def test_measurements(self, line_service, line):
        assert line_service.get_measurements(line, 'cm', PPU) == pytest.approx({'length': 2.0, 'angle': 0.0})

    def test_angle_is_wrapped_positive(self, line_service):
        line = line_service.create_shape(start_point=Point(0, 0), end_point=Point(0, -50))
        assert line_service.get_measurements(line, 'cm', PPU)['angle'] == pytest.approx(270.0)

    def test_set_angle_rotates_about_midpoint(self, line_service, line):
        updated = line_service.update_from_measurement(line, 'angle', 90, 0, 'cm', PPU)
        assert updated.start_point.x == pytest.approx(60.0)
        assert updated.start_point.y == pytest.approx(-60.0)
        assert updated.end_point.x == pytest.approx(60.0)
        assert updated.end_point.y == pytest.approx(60.0)
        assert updated.length == pytest.approx(120.0)
        assert line_service.get_measurements(updated, 'cm', PPU)['angle'] == pytest.approx(90.0)

    def test_set_angle_above_180_round_trips(self, line_service, line):
        updated = line_service.update_from_measurement(line, 'angle', 300, 0, 'cm', PPU)
        assert line_service.get_measurements(updated, 'cm', PPU)['angle'] == pytest.approx(300.0)
        assert updated.rotation == pytest.approx(-60.0)

    @pytest.mark.parametrize("value, expected", [(400, 40), (-90, 270), (360, 0)])
    def test_set_angle_wraps_into_full_turn(self, line_service, line, value, expected):
        updated = line_service.update_from_measurement(line, 'angle', value, 0, 'cm', PPU)
        measured = line_service.get_measurements(updated, 'cm', PPU)['angle']
        assert measured == pytest.approx(expected, abs=1e-9)

    def test_set_length(self, line_service, line):
        updated = line_service.update_from_measurement(line, 'length', 4, 2, 'cm', PPU)
        assert updated.start_point.x == pytest.approx(-60.0)
        assert updated.end_point.x == pytest.approx(180.0)
        assert updated.position.x == pytest.approx(60.0)

    def test_invalid_length_clamps(self, line_service, line):
        updated = line_service.update_from_measurement(line, 'length', 0, 2, 'cm', PPU)
        assert updated.length == pytest.approx(1.0)

    def test_invalid_angle_is_noop(self, line_service, line):
        assert line_service.update_from_measurement(line, 'angle', float('nan'), 0, 'cm', PPU) is line

    def test_unknown_key(self, line_service, line):
        assert line_service.update_from_measurement(line, 'area', 1, 0, 'cm', PPU) is line


# ══════════════════════════════════════════════════════════════════════════
# Transforms and Hit Testing
# ══════════════════════════════════════════════════════════════════════════

class TestLineTransforms:

    def test_move(self, line_service, line):
        moved = line_service.move_shape(line, 5, 5)
        assert (moved.start_point, moved.end_point) == (Point(5, 5), Point(125, 5))

    def test_resize_round_trip(self, line_service, line):
        resized = line_service.resize_shape(line_service.resize_shape(line, 3), 1 / 3)
        assert resized.start_point.x == pytest.approx(0.0)
        assert resized.end_point.x == pytest.approx(120.0)

    def test_rotate(self, line_service, line):
        rotated = line_service.rotate_shape(line, 90)
        assert rotated.rotation == pytest.approx(90.0)
        assert rotated.start_point.x == pytest.approx(60.0)
        assert rotated.start_point.y == pytest.approx(-60.0)
        assert rotated.original_dimensions is None

    @pytest.mark.parametrize("point, hit", [
        (Point(60, 9), True),
        (Point(60, 11), False),
        (Point(130, 0), True),
        (Point(131, 0), False),
    ])
    def test_hit_radius_has_a_floor(self, line_service, line, point, hit):
        assert line_service.contains_point(line, point) is hit

    def test_thick_lines_widen_hit_radius(self, line_service):
        thick = line_service.create_shape(start_point=Point(0, 0), end_point=Point(100, 0), stroke_width=8)
        assert line_service.contains_point(thick, Point(50, 15))
