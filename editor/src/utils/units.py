"""Pixel <-> physical unit conversion.

The pixels-per-unit factor always comes from the caller (calibration
provider); nothing here assumes a screen density.
"""

from models.shapes import MeasurementUnit


def _check_factor(pixels_per_unit):
	if not pixels_per_unit or pixels_per_unit <= 0:
		raise ValueError(f"pixels_per_unit must be positive, got {pixels_per_unit!r}")


def pixels_to_units(pixels, pixels_per_unit):
	"""Convert a linear pixel length to physical units."""
	_check_factor(pixels_per_unit)
	return pixels / pixels_per_unit


def units_to_pixels(value, pixels_per_unit):
	"""Convert a linear physical length to pixels."""
	_check_factor(pixels_per_unit)
	return value * pixels_per_unit


def square_pixels_to_units(square_pixels, pixels_per_unit):
	"""Convert an area in px² to unit²."""
	_check_factor(pixels_per_unit)
	return square_pixels / (pixels_per_unit * pixels_per_unit)


def square_units_to_pixels(value, pixels_per_unit):
	"""Convert an area in unit² to px²."""
	_check_factor(pixels_per_unit)
	return value * pixels_per_unit * pixels_per_unit


def parse_unit(unit):
	"""Coerce 'cm' / 'in' (or a MeasurementUnit) to MeasurementUnit.

	Raises:
		ValueError: for anything else
	"""
	return MeasurementUnit(unit)
