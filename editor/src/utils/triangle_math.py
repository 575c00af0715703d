"""
Triangle measurement math and angle-constrained reconstruction.

Side and angle naming follows the measurement panel:
- side1 = p0-p1, side2 = p1-p2, side3 = p2-p0
- angleN is opposite sideN, so angle1 sits at vertex 2, angle2 at vertex 0
  and angle3 at vertex 1 (see ANGLE_SLOT_VERTEX_MAP)

All functions are pure and take/return tuples of Point.
"""

import logging
import math

import numpy as np

from constants import (
	GEOMETRY_EPSILON, ANGLE_SLOT_VERTEX_MAP, ANGLE_VERIFY_TOLERANCE,
	MIN_TRIANGLE_ANGLE, MAX_TRIANGLE_ANGLE, DEFAULT_TRIANGLE_SIZE,
)
from models.point import Point
from utils.geometry import (
	distance, centroid, cross, vector_length, angle_of,
	rotate_points, translate_points,
)

logger = logging.getLogger(__name__)


# ========================================
# Forward Measurements
# ========================================

def triangle_sides(points):
	"""Return (side1, side2, side3) = (|p0p1|, |p1p2|, |p2p0|)."""
	p0, p1, p2 = points
	return (distance(p0, p1), distance(p1, p2), distance(p2, p0))


def signed_area(points):
	"""Shoelace area; positive when p0->p1->p2 turns clockwise on screen."""
	p0, p1, p2 = points
	return cross(p1 - p0, p2 - p0) / 2.0


def triangle_area(points):
	return abs(signed_area(points))


def triangle_perimeter(points):
	return sum(triangle_sides(points))


def triangle_angles(a, b, c):
	"""Interior angles opposite sides a, b, c (degrees) via the Law of Cosines.

	Cosines are clamped to [-1, 1] before acos so floating point overshoot on
	flat triangles cannot produce NaN. The result is rescaled to sum to exactly
	180. Zero-length sides give (0, 0, 0).
	"""
	if min(a, b, c) < GEOMETRY_EPSILON:
		return (0.0, 0.0, 0.0)

	cosines = np.clip([
		(b * b + c * c - a * a) / (2 * b * c),
		(a * a + c * c - b * b) / (2 * a * c),
		(a * a + b * b - c * c) / (2 * a * b),
	], -1.0, 1.0)
	angles = np.degrees(np.arccos(cosines))

	total = float(angles.sum())
	if total < GEOMETRY_EPSILON:
		return (0.0, 0.0, 0.0)
	angles = angles * (180.0 / total)
	return tuple(float(angle) for angle in angles)


def slot_angles(points):
	"""Angles in measurement-slot order (angle1, angle2, angle3)."""
	return triangle_angles(*triangle_sides(points))


def vertex_angles(points):
	"""Angles at vertex 0, 1, 2."""
	slots = slot_angles(points)
	result = [0.0, 0.0, 0.0]
	for slot, vertex in enumerate(ANGLE_SLOT_VERTEX_MAP):
		result[vertex] = slots[slot]
	return tuple(result)


def triangle_height(points):
	"""Height relative to the longest side (2 * area / longest)."""
	longest = max(triangle_sides(points))
	if longest < GEOMETRY_EPSILON:
		return 0.0
	return 2.0 * triangle_area(points) / longest


def is_degenerate(points):
	"""True for coincident or collinear points."""
	longest = max(triangle_sides(points))
	if longest < GEOMETRY_EPSILON:
		return True
	# Area relative to the longest side keeps the test scale independent
	return triangle_area(points) / (longest * longest) < GEOMETRY_EPSILON


# ========================================
# Angle Reconstruction
# ========================================

def clamp_target_angle(target):
	"""Round to an integer degree inside [MIN_TRIANGLE_ANGLE, MAX_TRIANGLE_ANGLE]."""
	if not math.isfinite(target):
		logger.warning("Non-finite triangle angle %r, using %s", target, MIN_TRIANGLE_ANGLE)
		return MIN_TRIANGLE_ANGLE
	rounded = int(round(target))
	clamped = max(MIN_TRIANGLE_ANGLE, min(MAX_TRIANGLE_ANGLE, rounded))
	if clamped != rounded:
		logger.warning("Triangle angle %s out of range, clamped to %s", target, clamped)
	return clamped


def solve_angle_set(current_slot_angles, slot, target):
	"""Distribute 180 - target over the other two slots.

	The first remaining slot keeps its proportional share of the budget, the
	second takes the exact remainder so the three always sum to 180.

	Returns:
		(angle1, angle2, angle3)
	"""
	first, second = [index for index in range(3) if index != slot]
	remaining = 180.0 - target
	share_total = current_slot_angles[first] + current_slot_angles[second]

	if share_total > GEOMETRY_EPSILON:
		first_angle = remaining * current_slot_angles[first] / share_total
	else:
		first_angle = remaining / 2.0

	floor = min(1.0, remaining / 2.0)
	first_angle = max(floor, min(remaining - floor, first_angle))

	result = [0.0, 0.0, 0.0]
	result[slot] = float(target)
	result[first] = first_angle
	result[second] = remaining - first_angle
	return tuple(result)


def rotate_to_angle(points, slot, target):
	"""Open the edited vertex to exactly ``target`` degrees.

	The vector to the next vertex stays fixed. The vector to the vertex after
	that keeps its length and is swung to the target angle on the same side
	it started on.

	Returns:
		New points (not re-centred), or None when either vector has no length
	"""
	vertex_index = ANGLE_SLOT_VERTEX_MAP[slot]
	moved_index = (vertex_index + 2) % 3
	vertex = points[vertex_index]
	fixed_vec = points[(vertex_index + 1) % 3] - vertex
	moved_vec = points[moved_index] - vertex

	moved_length = vector_length(moved_vec)
	if vector_length(fixed_vec) < GEOMETRY_EPSILON or moved_length < GEOMETRY_EPSILON:
		return None

	side = 1.0 if cross(fixed_vec, moved_vec) >= 0 else -1.0
	direction = math.atan2(fixed_vec.y, fixed_vec.x) + side * math.radians(target)

	new_points = list(points)
	new_points[moved_index] = Point(
		vertex.x + math.cos(direction) * moved_length,
		vertex.y + math.sin(direction) * moved_length,
	)
	return tuple(new_points)


def build_from_angles(points, target_slot_angles, slot):
	"""Rebuild a triangle from three angles with the Law of Sines.

	The side opposite the edited vertex keeps its current length (falling back
	to the longest side, then DEFAULT_TRIANGLE_SIZE, when degenerate). Vertex 0
	goes at the origin, vertex 1 on the x-axis and vertex 2 by the angle at
	vertex 0; the result is mirrored to keep the original winding and rotated
	so the p0->p1 edge keeps its direction.

	Returns:
		New points (not re-centred)
	"""
	angles = [0.0, 0.0, 0.0]
	for index, vertex in enumerate(ANGLE_SLOT_VERTEX_MAP):
		angles[vertex] = math.radians(target_slot_angles[index])

	vertex_index = ANGLE_SLOT_VERTEX_MAP[slot]
	reference = distance(points[(vertex_index + 1) % 3], points[(vertex_index + 2) % 3])
	if reference < GEOMETRY_EPSILON:
		reference = max(triangle_sides(points))
	if reference < GEOMETRY_EPSILON:
		reference = DEFAULT_TRIANGLE_SIZE

	ratio = reference / math.sin(angles[vertex_index])
	# opposite[v] is the side across from vertex v
	opposite = [ratio * math.sin(angle) for angle in angles]

	p0 = Point(0.0, 0.0)
	p1 = Point(opposite[2], 0.0)
	p2 = Point(opposite[1] * math.cos(angles[0]), opposite[1] * math.sin(angles[0]))
	if signed_area(points) < 0:
		p2 = Point(p2.x, -p2.y)

	rebuilt = (p0, p1, p2)
	if distance(points[0], points[1]) > GEOMETRY_EPSILON:
		rebuilt = rotate_points(rebuilt, p0, angle_of(points[0], points[1]))
	return rebuilt


def recenter(points, target_centroid):
	"""Translate points so their centroid lands on target_centroid."""
	current = centroid(points)
	return translate_points(points, target_centroid.x - current.x, target_centroid.y - current.y)


def _angle_error(points, slot, target):
	if points is None or is_degenerate(points):
		return math.inf
	return abs(slot_angles(points)[slot] - target)


def reconstruct_for_angle(points, slot, target):
	"""Reshape a triangle so the angle in ``slot`` (0-2) equals ``target``.

	Tries the direct vertex rotation first; if that misses the target by more
	than ANGLE_VERIFY_TOLERANCE, also builds a Law of Sines candidate and keeps
	whichever lands closer. The centroid never moves.

	Args:
		points: Current triangle points
		slot: 0 for angle1, 1 for angle2, 2 for angle3
		target: Target angle in degrees (already clamped)

	Returns:
		Tuple of three new points
	"""
	original_centroid = centroid(points)

	primary = rotate_to_angle(points, slot, target)
	if primary is not None:
		primary = recenter(primary, original_centroid)
	primary_error = _angle_error(primary, slot, target)
	if primary_error <= ANGLE_VERIFY_TOLERANCE:
		return primary

	target_set = solve_angle_set(slot_angles(points), slot, target)
	fallback = recenter(build_from_angles(points, target_set, slot), original_centroid)
	fallback_error = _angle_error(fallback, slot, target)
	logger.debug("Angle rebuild fallback: primary error %.3f, fallback error %.3f",
	             primary_error, fallback_error)

	if primary is not None and primary_error <= fallback_error:
		return primary
	return fallback
