"""
Geometry Canvas Editor - Point and Angle Math

Pure functions over ``Point`` values in canvas-pixel space. Angles are in
degrees unless the function name says otherwise. Canvas Y points down, so a
positive angle turns clockwise on screen.
"""

import math

import numpy as np

from constants import GEOMETRY_EPSILON
from models.point import Point


# ========================================
# Distances and Points
# ========================================

def distance(a, b):
	"""Euclidean distance between two points."""
	return math.hypot(b.x - a.x, b.y - a.y)


def midpoint(a, b):
	return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def centroid(points):
	"""Mean of a sequence of points."""
	arr = _as_array(points)
	cx, cy = arr.mean(axis=0)
	return Point(float(cx), float(cy))


def cross(v1, v2):
	"""Z component of the cross product of two difference vectors."""
	return v1.x * v2.y - v1.y * v2.x


def dot(v1, v2):
	return v1.x * v2.x + v1.y * v2.y


def vector_length(v):
	return math.hypot(v.x, v.y)


# ========================================
# Angles
# ========================================

def degrees_to_radians(degrees):
	return degrees * math.pi / 180.0


def radians_to_degrees(radians):
	return radians * 180.0 / math.pi


def normalize_angle_degrees(degrees):
	"""Normalize an angle to the range (-180, 180]."""
	result = math.fmod(degrees, 360.0)
	if result <= -180.0:
		result += 360.0
	elif result > 180.0:
		result -= 360.0
	return result + 0.0  # Avoid -0.0


def normalize_angle_radians(radians):
	"""Normalize an angle to the range (-pi, pi]."""
	result = math.fmod(radians, 2 * math.pi)
	if result <= -math.pi:
		result += 2 * math.pi
	elif result > math.pi:
		result -= 2 * math.pi
	return result + 0.0


def wrap_degrees(degrees):
	"""Wrap an angle into [0, 360)."""
	result = degrees % 360.0
	# Tiny negatives round up to exactly 360.0
	return 0.0 if result >= 360.0 else result


def to_clockwise_angle(degrees):
	"""Flip rotation direction; full turns collapse to 0."""
	if degrees % 360 == 0:
		return 0.0
	return -degrees


def to_counterclockwise_angle(degrees):
	if degrees % 360 == 0:
		return 0.0
	return -degrees


def angle_of(start, end):
	"""Direction from start to end in degrees (atan2, screen coordinates)."""
	return radians_to_degrees(math.atan2(end.y - start.y, end.x - start.x))


def angle_between(v1, v2):
	"""Unsigned angle in degrees between two difference vectors.

	Returns 0.0 when either vector has (near) zero length.
	"""
	len1 = vector_length(v1)
	len2 = vector_length(v2)
	if len1 < GEOMETRY_EPSILON or len2 < GEOMETRY_EPSILON:
		return 0.0
	cosine = float(np.clip(dot(v1, v2) / (len1 * len2), -1.0, 1.0))
	return radians_to_degrees(math.acos(cosine))


# ========================================
# Transforms
# ========================================

def rotate_point_radians(point, center, radians):
	"""Rotate a point about center by an angle in radians."""
	cos_a = math.cos(radians)
	sin_a = math.sin(radians)
	dx = point.x - center.x
	dy = point.y - center.y
	return Point(
		center.x + dx * cos_a - dy * sin_a,
		center.y + dx * sin_a + dy * cos_a,
	)


def rotate_point(point, center, degrees):
	"""Rotate a point about center by an angle in degrees."""
	return rotate_point_radians(point, center, degrees_to_radians(degrees))


def scale_point(point, center, sx, sy=None):
	"""Scale a point away from center. sy defaults to sx (uniform)."""
	if sy is None:
		sy = sx
	return Point(
		center.x + (point.x - center.x) * sx,
		center.y + (point.y - center.y) * sy,
	)


def rotate_points(points, center, degrees):
	"""Rotate a sequence of points about center (degrees)."""
	radians = degrees_to_radians(degrees)
	matrix = np.array([
		[math.cos(radians), -math.sin(radians)],
		[math.sin(radians), math.cos(radians)],
	])
	origin = np.array([center.x, center.y])
	rotated = (_as_array(points) - origin) @ matrix.T + origin
	return _to_points(rotated)


def scale_points(points, center, sx, sy=None):
	"""Scale a sequence of points away from center."""
	if sy is None:
		sy = sx
	origin = np.array([center.x, center.y])
	scaled = (_as_array(points) - origin) * np.array([sx, sy]) + origin
	return _to_points(scaled)


def translate_points(points, dx, dy):
	return _to_points(_as_array(points) + np.array([dx, dy]))


def point_segment_distance(point, a, b):
	"""Shortest distance from point to segment a-b.

	The projection parameter is clamped to [0, 1]; a zero-length segment
	degrades to the distance to its single point.
	"""
	seg = b - a
	length_sq = dot(seg, seg)
	if length_sq < GEOMETRY_EPSILON:
		return distance(point, a)
	t = dot(point - a, seg) / length_sq
	t = max(0.0, min(1.0, t))
	closest = Point(a.x + seg.x * t, a.y + seg.y * t)
	return distance(point, closest)


def _as_array(points):
	return np.array([[p.x, p.y] for p in points], dtype=float)


def _to_points(array):
	return tuple(Point(float(x), float(y)) for x, y in array)
