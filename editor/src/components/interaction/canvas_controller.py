"""
Canvas Controller - pointer/keyboard state machine for the geometry canvas

Turns raw pointer and key events into shape operations:
- exactly one active mode (select, create, move, resize, rotate)
- hit testing in reverse z-order
- grid snapping while the precision modifier (Shift) is held
- commits every change to the shape collection

The controller has no Qt widget dependency so it can be driven directly
from tests; CanvasWidget forwards real Qt events to it.
"""

import logging

from PyQt5.QtCore import Qt

from models.point import Point
from models.shape_collection import ShapeCollection
from services.calibration import CalibrationSettings
from services.measurement_operations import apply_measurement_edit, measure_shape
from services.shape_services import ShapeServiceFactory
from utils.color_utils import ShapeColorCycle
from utils.grid import snap_to_grid
from .gesture_state import GestureState
from .keyboard_mixin import KeyboardMixin
from .modes import create_mode

logger = logging.getLogger(__name__)

PRECISION_MODIFIER = Qt.ShiftModifier


class CanvasController(KeyboardMixin):
	"""Interaction state machine over a ShapeCollection"""

	def __init__(self, collection=None, factory=None, calibration=None,
	             snap_function=snap_to_grid, color_cycle=None):
		"""
		Args:
			collection: ShapeCollection to edit (new empty one by default)
			factory: ShapeServiceFactory used for all shape operations
			calibration: Calibration/grid provider (CalibrationSettings)
			snap_function: snap(point, origin, cell_size) -> Point
			color_cycle: Source of fill colors for new shapes
		"""
		self.collection = collection if collection is not None else ShapeCollection()
		self.factory = factory or ShapeServiceFactory()
		self.calibration = calibration or CalibrationSettings()
		self.snap_function = snap_function
		self.color_cycle = color_cycle or ShapeColorCycle()

		self.mode = create_mode('select')
		self.gesture = GestureState()
		self.selected_id = None
		self._on_change_callback = None

	# ========================================
	# State
	# ========================================

	@property
	def unit(self):
		return self.calibration.unit

	@property
	def active_mode(self):
		return self.mode.name

	@property
	def active_shape_type(self):
		return getattr(self.mode, 'shape_type', None)

	@property
	def selected_shape(self):
		if self.selected_id is None:
			return None
		return self.collection.get(self.selected_id)

	def set_change_callback(self, callback):
		"""Register a callable run after every handled event (e.g. widget.update)."""
		self._on_change_callback = callback

	def _notify(self):
		if self._on_change_callback:
			self._on_change_callback()

	def set_mode(self, mode_name, shape_type=None):
		"""Switch the active mode, discarding any in-flight gesture."""
		self.mode = create_mode(mode_name, shape_type)
		self.reset_gesture()
		logger.debug("Mode -> %s%s", mode_name, f" ({self.active_shape_type.value})" if shape_type else "")
		self._notify()

	def reset_gesture(self):
		self.gesture = GestureState()

	def select_shape(self, shape_id):
		self.selected_id = shape_id

	# ========================================
	# Shape Access
	# ========================================

	def service_for(self, shape):
		return self.factory.get_service_for_shape(shape)

	def get_shape_at_position(self, point):
		"""Topmost shape under point (last created wins)."""
		return self.collection.get_shape_at_position(point, self.factory)

	def add_shape(self, shape):
		self.collection.add(shape)
		logger.debug("Created %s %s", shape.type.value, shape.id)
		return shape

	def replace_shape(self, shape):
		return self.collection.replace(shape)

	def delete_shape(self, shape_id):
		"""Remove a shape; clears the selection and any gesture targeting it."""
		removed = self.collection.remove(shape_id)
		if shape_id == self.selected_id:
			self.selected_id = None
		self.end_gesture_on(shape_id)
		self._notify()
		return removed

	def end_gesture_on(self, shape_id):
		"""Drop the in-flight gesture if it was started on shape_id."""
		target = self.gesture.original_shape
		if target is not None and target.id == shape_id:
			logger.debug("Gesture on %s ended by external change", shape_id)
			self.reset_gesture()

	def gesture_target_alive(self):
		"""True while the gesture's target shape is still in the collection."""
		target = self.gesture.original_shape
		return target is not None and target.id in self.collection

	def delete_selected(self):
		if self.selected_id is None:
			return None
		return self.delete_shape(self.selected_id)

	def next_fill_color(self):
		return self.color_cycle.next_color()

	# ========================================
	# Snapping
	# ========================================

	def is_precision(self, modifiers):
		return bool(modifiers and (modifiers & PRECISION_MODIFIER))

	def grid_cell_size(self):
		return self.calibration.grid_cell_size(self.unit)

	def snap(self, point):
		return self.snap_function(point, self.calibration.grid.origin, self.grid_cell_size())

	# ========================================
	# Pointer Events
	# ========================================

	def pointer_down(self, point, modifiers=None):
		self.mode.pointer_down(self, Point.from_iterable(point), modifiers)
		self._notify()

	def pointer_move(self, point, modifiers=None):
		self.mode.pointer_move(self, Point.from_iterable(point), modifiers)
		self._notify()

	def pointer_up(self, point=None, modifiers=None):
		if point is not None:
			point = Point.from_iterable(point)
		self.mode.pointer_up(self, point, modifiers)
		self._notify()

	def pointer_leave(self, point=None, modifiers=None):
		"""Leaving the canvas finalizes the gesture exactly like a release."""
		self.pointer_up(point, modifiers)

	# ========================================
	# Measurements
	# ========================================

	def measurements_for_selected(self):
		shape = self.selected_shape
		if shape is None:
			return None
		return measure_shape(shape, self.unit, self.calibration, self.factory)

	def update_selected_measurement(self, key, new_value):
		"""Apply a measurement panel edit to the selected shape."""
		if self.selected_id is None:
			return None
		updated = apply_measurement_edit(self.collection, self.selected_id, key, new_value,
		                                 self.unit, self.calibration, self.factory)
		self.end_gesture_on(self.selected_id)
		self._notify()
		return updated
