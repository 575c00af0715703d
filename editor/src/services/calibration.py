"""Screen calibration and grid settings.

Supplies the pixels-per-unit factor every measurement needs, and the grid
origin/spacing used for snapping. Both persist in the user's JSON config.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Optional

from constants import (
	DEFAULT_PIXELS_PER_CM, DEFAULT_PIXELS_PER_INCH, SMALL_UNITS_PER_UNIT,
	DEFAULT_MEASUREMENT_UNIT, CONFIG_DIR, CONFIG_FILE_NAME,
)
from models.point import Point
from models.shapes import MeasurementUnit
from utils.logger import loggerRaise

logger = logging.getLogger(__name__)


@dataclass
class GridSettings:
	"""Grid provider.

	origin: grid origin in canvas pixels, None disables snapping
	cell_size: spacing in pixels, None means one small calibrated unit
	"""
	origin: Optional[Point] = Point(0.0, 0.0)
	cell_size: Optional[float] = None


class CalibrationSettings:
	"""Calibration provider backed by a JSON config file"""

	def __init__(self, config_dir=CONFIG_DIR, config_file_name=CONFIG_FILE_NAME):
		self.config_dir = config_dir
		self.config_file = os.path.join(config_dir, config_file_name)
		self._pixels_per_unit = {
			MeasurementUnit.CM: DEFAULT_PIXELS_PER_CM,
			MeasurementUnit.IN: DEFAULT_PIXELS_PER_INCH,
		}
		self.unit = MeasurementUnit(DEFAULT_MEASUREMENT_UNIT)
		self.grid = GridSettings()

	def pixels_per_unit(self, unit=None):
		"""Pixels per cm or inch (defaults to the current unit)."""
		unit = self.unit if unit is None else MeasurementUnit(unit)
		return self._pixels_per_unit[unit]

	def pixels_per_small_unit(self, unit=None):
		"""Pixels per mm or tenth-inch."""
		return self.pixels_per_unit(unit) / SMALL_UNITS_PER_UNIT

	def set_pixels_per_unit(self, unit, value):
		"""Store a new calibration factor.

		Raises:
			ValueError: if value is not positive
		"""
		if not value or value <= 0:
			loggerRaise(ValueError(f"pixels per unit must be positive, got {value!r}"),
			            "Calibration value must be greater than zero")
		self._pixels_per_unit[MeasurementUnit(unit)] = float(value)

	def grid_cell_size(self, unit=None):
		"""Grid spacing in pixels."""
		if self.grid.cell_size:
			return self.grid.cell_size
		return self.pixels_per_small_unit(unit)

	def load(self):
		"""Load calibration and grid settings from the config file if it exists"""
		try:
			if os.path.exists(self.config_file):
				with open(self.config_file, 'r', encoding='utf-8') as f:
					config = json.load(f)
				calibration = config.get('calibration', {})
				for unit in MeasurementUnit:
					value = calibration.get(unit.value)
					if value is not None and value > 0:
						self._pixels_per_unit[unit] = float(value)
					elif value is not None:
						logger.warning("Ignoring invalid calibration %r for %s", value, unit.value)
				self.unit = MeasurementUnit(config.get('unit', self.unit.value))

				grid = config.get('grid', {})
				origin = grid.get('origin', [self.grid.origin.x, self.grid.origin.y])
				self.grid = GridSettings(
					origin=Point(*origin) if origin is not None else None,
					cell_size=grid.get('cell_size'),
				)
		except Exception as e:
			loggerRaise(e, "Error loading config")
		return self

	def save(self):
		"""Save calibration and grid settings to the config file"""
		try:
			# Create config directory if it doesn't exist
			os.makedirs(self.config_dir, exist_ok=True)

			origin = self.grid.origin
			config = {
				'unit': self.unit.value,
				'calibration': {unit.value: value for unit, value in self._pixels_per_unit.items()},
				'grid': {
					'origin': [origin.x, origin.y] if origin is not None else None,
					'cell_size': self.grid.cell_size,
				},
			}

			with open(self.config_file, 'w', encoding='utf-8') as f:
				json.dump(config, f, indent=2)
		except Exception as e:
			loggerRaise(e, "Error saving config")
