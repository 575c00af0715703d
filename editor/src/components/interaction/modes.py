"""Canvas interaction modes - what pointer gestures do in each mode."""

import logging
import math

from PyQt5.QtCore import Qt

from constants import DRAG_THRESHOLD, MIN_CREATE_DISTANCE, GEOMETRY_EPSILON, ROTATION_DEGREES_PER_PIXEL, ROTATION_SNAP_DEGREES
from models.shapes import ShapeType
from utils.geometry import distance
from utils.grid import snap_value
from utils.logger import loggerRaise

logger = logging.getLogger(__name__)


class InteractionMode:
	"""Base class for interaction modes.

	Handlers receive the controller so modes stay stateless; all gesture data
	lives in controller.gesture.
	"""

	name = None
	cursor = Qt.ArrowCursor

	def pointer_down(self, controller, point, modifiers=None):
		pass

	def pointer_move(self, controller, point, modifiers=None):
		pass

	def pointer_up(self, controller, point, modifiers=None):
		"""Finalize: the shape already reflects the last move, just clear state."""
		controller.reset_gesture()

	def _pick_target(self, controller, point):
		"""Shape under the pointer, falling back to the current selection."""
		shape = controller.get_shape_at_position(point)
		if shape is not None:
			controller.select_shape(shape.id)
			return shape
		return controller.selected_shape


class SelectMode(InteractionMode):
	"""Click to select, drag to move. Empty clicks deselect."""

	name = 'select'

	def pointer_down(self, controller, point, modifiers=None):
		shape = controller.get_shape_at_position(point)
		if shape is None:
			self._on_empty_click(controller)
			return
		controller.select_shape(shape.id)
		gesture = controller.gesture
		gesture.drag_start = point
		gesture.original_shape = shape
		gesture.dragging = False

	def _on_empty_click(self, controller):
		controller.select_shape(None)

	def pointer_move(self, controller, point, modifiers=None):
		gesture = controller.gesture
		if gesture.drag_start is None or not controller.gesture_target_alive():
			return

		dx = point.x - gesture.drag_start.x
		dy = point.y - gesture.drag_start.y
		if not gesture.dragging:
			if math.hypot(dx, dy) <= DRAG_THRESHOLD:
				return
			gesture.dragging = True

		service = controller.service_for(gesture.original_shape)
		moved = service.move_shape(gesture.original_shape, dx, dy)
		if controller.is_precision(modifiers):
			moved = service.move_anchor_to(moved, controller.snap(service.get_snap_anchor(moved)))
		controller.replace_shape(moved)


class MoveMode(SelectMode):
	"""Like select, but empty clicks keep the current selection."""

	name = 'move'
	cursor = Qt.SizeAllCursor

	def _on_empty_click(self, controller):
		pass


class CreateMode(InteractionMode):
	"""Drag out a new shape of a fixed type."""

	name = 'create'
	cursor = Qt.CrossCursor

	def __init__(self, shape_type=ShapeType.RECTANGLE):
		self.shape_type = ShapeType(shape_type)

	def _effective_point(self, controller, point, modifiers):
		return controller.snap(point) if controller.is_precision(modifiers) else point

	def pointer_down(self, controller, point, modifiers=None):
		start = self._effective_point(controller, point, modifiers)
		controller.gesture.draw_start = start
		controller.gesture.draw_current = start

	def pointer_move(self, controller, point, modifiers=None):
		if controller.gesture.is_drawing:
			controller.gesture.draw_current = self._effective_point(controller, point, modifiers)

	def pointer_up(self, controller, point, modifiers=None):
		gesture = controller.gesture
		start, end = gesture.draw_start, gesture.draw_current
		if start is not None and point is not None:
			end = self._effective_point(controller, point, modifiers)
		controller.reset_gesture()
		if start is None or end is None:
			return

		if distance(start, end) <= MIN_CREATE_DISTANCE:
			logger.debug("Draw gesture too short (%.1f px), nothing created", distance(start, end))
			return

		service = controller.factory.get_service(self.shape_type)
		shape = service.create_from_drag(start, end, fill_color=controller.next_fill_color())
		controller.add_shape(shape)
		controller.select_shape(shape.id)
		controller.set_mode('select')


class ResizeMode(InteractionMode):
	"""Scale by pointer distance from the shape center."""

	name = 'resize'
	cursor = Qt.SizeFDiagCursor

	def pointer_down(self, controller, point, modifiers=None):
		shape = self._pick_target(controller, point)
		if shape is None:
			return
		gesture = controller.gesture
		gesture.resize_start = point
		gesture.original_shape = shape
		gesture.original_size = controller.service_for(shape).get_characteristic_size(shape)

	def pointer_move(self, controller, point, modifiers=None):
		gesture = controller.gesture
		if gesture.resize_start is None or not controller.gesture_target_alive():
			return

		service = controller.service_for(gesture.original_shape)
		center = service.get_center(gesture.original_shape)
		start_distance = distance(center, gesture.resize_start)
		if start_distance < GEOMETRY_EPSILON:
			return
		factor = distance(center, point) / start_distance

		if controller.is_precision(modifiers) and gesture.original_size > GEOMETRY_EPSILON:
			step = controller.grid_cell_size()
			new_size = max(snap_value(gesture.original_size * factor, step), step)
			factor = new_size / gesture.original_size

		if factor < GEOMETRY_EPSILON:
			return
		controller.replace_shape(service.resize_shape(gesture.original_shape, factor))


class RotateMode(InteractionMode):
	"""Rotate by horizontal pointer travel since the press."""

	name = 'rotate'
	cursor = Qt.SizeHorCursor

	def pointer_down(self, controller, point, modifiers=None):
		shape = self._pick_target(controller, point)
		if shape is None:
			return
		gesture = controller.gesture
		gesture.rotate_start = point
		gesture.original_shape = shape
		gesture.original_rotation = shape.rotation

	def pointer_move(self, controller, point, modifiers=None):
		gesture = controller.gesture
		if gesture.rotate_start is None or not controller.gesture_target_alive():
			return

		delta = (point.x - gesture.rotate_start.x) * ROTATION_DEGREES_PER_PIXEL
		if controller.is_precision(modifiers):
			target = snap_value(gesture.original_rotation + delta, ROTATION_SNAP_DEGREES)
			delta = target - gesture.original_rotation

		service = controller.service_for(gesture.original_shape)
		controller.replace_shape(service.rotate_shape(gesture.original_shape, delta))


# Mode registry
MODES = {
	'select': SelectMode,
	'move': MoveMode,
	'create': CreateMode,
	'resize': ResizeMode,
	'rotate': RotateMode,
}


def create_mode(mode_name, shape_type=None):
	"""Factory function to create mode instances.

	Args:
		mode_name: 'select', 'move', 'create', 'resize' or 'rotate'
		shape_type: Shape type to draw, required for 'create'

	Returns:
		InteractionMode instance

	Raises:
		ValueError: unknown mode name, or 'create' without a shape type
	"""
	mode_class = MODES.get(mode_name)
	if mode_class is None:
		loggerRaise(ValueError(f"Unknown interaction mode: {mode_name!r}"), "Unknown canvas mode")
	if mode_class is CreateMode:
		if shape_type is None:
			loggerRaise(ValueError("Create mode needs a shape type"), "Pick a shape to draw first")
		return CreateMode(shape_type)
	return mode_class()
