"""Grid snapping."""

import math

from models.point import Point


def snap_to_grid(point, origin, cell_size):
	"""Round a point to the nearest grid intersection.

	Args:
		point: Point to snap
		origin: Grid origin (Point) or None when no grid is shown
		cell_size: Grid spacing in pixels

	Returns:
		Snapped Point, or the input unchanged if there is no usable grid
	"""
	if origin is None or not cell_size or cell_size <= 0:
		return point
	rel_x = point.x - origin.x
	rel_y = point.y - origin.y
	return Point(
		origin.x + round(rel_x / cell_size) * cell_size,
		origin.y + round(rel_y / cell_size) * cell_size,
	)


def snap_value(value, increment):
	"""Round a scalar to the nearest multiple of increment (>0)."""
	if not increment or increment <= 0 or not math.isfinite(value):
		return value
	return round(value / increment) * increment
