"""Keyboard handling for the canvas controller"""

import logging

from PyQt5.QtCore import Qt

from constants import KEY_SCALE_STEP

logger = logging.getLogger(__name__)

ARROW_DIRECTIONS = {
	Qt.Key_Left: (-1, 0),
	Qt.Key_Right: (1, 0),
	Qt.Key_Up: (0, -1),
	Qt.Key_Down: (0, 1),
}

GROW_KEYS = (Qt.Key_Plus, Qt.Key_Equal)
SHRINK_KEYS = (Qt.Key_Minus, Qt.Key_Underscore)
DELETE_KEYS = (Qt.Key_Delete, Qt.Key_Backspace)


class KeyboardMixin:
	"""Arrow-key nudge, +/- scaling and delete for the selected shape"""

	def key_press(self, key, modifiers=None):
		"""Handle a key press.

		Args:
			key: Qt key code (event.key())
			modifiers: Qt keyboard modifiers; Shift makes arrow nudges a full unit

		Returns:
			True if the key was consumed
		"""
		shape = self.selected_shape
		if shape is None:
			return False

		service = self.service_for(shape)

		# Scaling short-circuits the positional nudge
		if key in GROW_KEYS or key in SHRINK_KEYS:
			factor = 1.0 + KEY_SCALE_STEP
			if key in SHRINK_KEYS:
				factor = 1.0 / factor
			self.replace_shape(service.resize_shape(shape, factor))
			self.end_gesture_on(shape.id)
			self._notify()
			return True

		if key in DELETE_KEYS:
			self.delete_selected()
			return True

		if key in ARROW_DIRECTIONS:
			if self.is_precision(modifiers):
				step = self.calibration.pixels_per_unit(self.unit)
			else:
				step = self.calibration.pixels_per_small_unit(self.unit)
			x_dir, y_dir = ARROW_DIRECTIONS[key]
			self.replace_shape(service.move_shape(shape, x_dir * step, y_dir * step))
			self.end_gesture_on(shape.id)
			self._notify()
			return True

		return False
