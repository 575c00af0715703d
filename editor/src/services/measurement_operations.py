"""
Geometry Canvas Editor - Measurement Operations

Glue between the measurement panel and the shape services: read the
measurements of a shape, apply a single edited value and store the result
back in the collection.
"""

import logging

from services.shape_services import get_service_for_shape

logger = logging.getLogger(__name__)


# ============= Reading =============

def measure_shape(shape, unit, calibration, factory=None):
	"""Get unit-converted measurements for a shape.

	Args:
		shape: Shape value
		unit: 'cm' or 'in'
		calibration: Provider with pixels_per_unit(unit)
		factory: Optional ShapeServiceFactory (module default otherwise)

	Returns:
		Dict of measurement key -> value
	"""
	service = factory.get_service_for_shape(shape) if factory else get_service_for_shape(shape)
	return service.get_measurements(shape, unit, calibration.pixels_per_unit(unit))


def round_measurements(measurements, angle_keys=('angle', 'angle1', 'angle2', 'angle3'), digits=2):
	"""Round for display: angles to whole degrees, everything else to ``digits`` places."""
	rounded = {}
	for key, value in measurements.items():
		if key in angle_keys:
			rounded[key] = int(round(value))
		else:
			rounded[key] = round(value, digits)
	return rounded


# ============= Editing =============

def apply_measurement_edit(collection, shape_id, key, new_value, unit, calibration, factory=None):
	"""Reshape a stored shape so one measurement takes a new value.

	Args:
		collection: ShapeCollection holding the shape
		shape_id: Id of the shape to edit
		key: Measurement key (e.g. 'area', 'angle2')
		new_value: Value in ``unit`` (degrees for angles)
		unit: 'cm' or 'in'
		calibration: Provider with pixels_per_unit(unit)
		factory: Optional ShapeServiceFactory

	Returns:
		The updated shape, or None if no shape has that id
	"""
	shape = collection.get(shape_id)
	if shape is None:
		logger.warning("Measurement edit for missing shape %s", shape_id)
		return None

	service = factory.get_service_for_shape(shape) if factory else get_service_for_shape(shape)
	pixels_per_unit = calibration.pixels_per_unit(unit)
	original_value = service.get_measurements(shape, unit, pixels_per_unit).get(key)

	updated = service.update_from_measurement(shape, key, new_value, original_value, unit, pixels_per_unit)
	if updated is not shape:
		collection.replace(updated)
	return updated
