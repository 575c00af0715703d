# PyQt5 imports
from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtCore import Qt, QPointF, QRectF, QSize
from PyQt5.QtGui import QPainter, QPen, QBrush, QColor, QPolygonF

# Local imports
from components.interaction import CanvasController
from constants import MIN_CREATE_DISTANCE
from models.shapes import ShapeType
from utils.color_utils import parse_rgba_string
from utils.geometry import distance


# ========================================
# Constants
# ========================================

BACKGROUND_COLOR = QColor(250, 250, 250)
GRID_COLOR = QColor(225, 225, 225)
GRID_MAJOR_COLOR = QColor(200, 200, 200)
SELECTION_COLOR = QColor(33, 150, 243)
PREVIEW_COLOR = QColor(120, 120, 120)

# Skip drawing grid lines closer together than this (pixels)
MIN_GRID_SPACING = 4


def to_qcolor(color):
	"""Convert '#RRGGBB' / 'rgba(...)' strings to QColor (black if unparseable)."""
	parsed = parse_rgba_string(color) if isinstance(color, str) else None
	if parsed is None:
		return QColor(0, 0, 0)
	r, g, b, a = parsed
	return QColor(r, g, b, int(round(a * 255)))


class CanvasWidget(QWidget):
	"""Geometry canvas: draws shapes and forwards input to a CanvasController"""

	def __init__(self, controller=None, parent=None):
		super().__init__(parent)
		self.controller = controller or CanvasController()
		self.controller.set_change_callback(self.refresh)

		self.setFocusPolicy(Qt.StrongFocus)
		self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
		self.setCursor(self.controller.mode.cursor)

		self._draw_methods = {
			ShapeType.CIRCLE: self._draw_circle,
			ShapeType.RECTANGLE: self._draw_rectangle,
			ShapeType.TRIANGLE: self._draw_triangle,
			ShapeType.LINE: self._draw_line,
		}

	def sizeHint(self):
		return QSize(800, 600)

	def refresh(self):
		self.setCursor(self.controller.mode.cursor)
		self.update()

	# ========================================
	# Input
	# ========================================

	def mousePressEvent(self, event):
		"""Handle mouse press"""
		if event.button() == Qt.LeftButton:
			self.setFocus()
			self.controller.pointer_down(event.pos(), event.modifiers())
			event.accept()
			return
		super().mousePressEvent(event)

	def mouseMoveEvent(self, event):
		"""Handle mouse move (controller ignores moves without a gesture)"""
		self.controller.pointer_move(event.pos(), event.modifiers())
		event.accept()

	def mouseReleaseEvent(self, event):
		"""Handle mouse release"""
		if event.button() == Qt.LeftButton:
			self.controller.pointer_up(event.pos(), event.modifiers())
			event.accept()
			return
		super().mouseReleaseEvent(event)

	def leaveEvent(self, event):
		"""Pointer leaving the canvas finalizes any gesture"""
		self.controller.pointer_leave()
		super().leaveEvent(event)

	def keyPressEvent(self, event):
		if self.controller.key_press(event.key(), event.modifiers()):
			event.accept()
			return
		super().keyPressEvent(event)

	# ========================================
	# Painting
	# ========================================

	def paintEvent(self, event):
		painter = QPainter(self)
		painter.setRenderHint(QPainter.Antialiasing)
		painter.fillRect(self.rect(), BACKGROUND_COLOR)
		self._draw_grid(painter)

		selected_id = self.controller.selected_id
		for shape in self.controller.collection:
			self._draw_shape(painter, shape)
			if shape.id == selected_id:
				self._draw_selection(painter, shape)

		self._draw_preview(painter)
		painter.end()

	def _draw_grid(self, painter):
		grid = self.controller.calibration.grid
		spacing = self.controller.grid_cell_size()
		if grid.origin is None or spacing < MIN_GRID_SPACING:
			return

		# Full-unit lines are drawn darker than small-unit lines
		major_every = round(self.controller.calibration.pixels_per_unit(self.controller.unit) / spacing) or 1
		width, height = self.width(), self.height()

		x = grid.origin.x % spacing
		while x <= width:
			is_major = round((x - grid.origin.x) / spacing) % major_every == 0
			painter.setPen(QPen(GRID_MAJOR_COLOR if is_major else GRID_COLOR, 1))
			painter.drawLine(QPointF(x, 0), QPointF(x, height))
			x += spacing

		y = grid.origin.y % spacing
		while y <= height:
			is_major = round((y - grid.origin.y) / spacing) % major_every == 0
			painter.setPen(QPen(GRID_MAJOR_COLOR if is_major else GRID_COLOR, 1))
			painter.drawLine(QPointF(0, y), QPointF(width, y))
			y += spacing

	def _draw_shape(self, painter, shape):
		painter.save()
		painter.setOpacity(shape.opacity)
		painter.setPen(QPen(to_qcolor(shape.stroke_color), shape.stroke_width))
		painter.setBrush(QBrush(to_qcolor(shape.fill_color)))
		self._draw_methods[shape.type](painter, shape)
		painter.restore()

	def _draw_circle(self, painter, shape):
		painter.drawEllipse(QPointF(shape.position.x, shape.position.y), shape.radius, shape.radius)

	def _draw_rectangle(self, painter, shape):
		center = shape.center
		painter.translate(center.x, center.y)
		painter.rotate(shape.rotation)
		painter.drawRect(QRectF(-shape.width / 2, -shape.height / 2, shape.width, shape.height))

	def _draw_triangle(self, painter, shape):
		painter.drawPolygon(QPolygonF([QPointF(p.x, p.y) for p in shape.points]))

	def _draw_line(self, painter, shape):
		painter.drawLine(QPointF(shape.start_point.x, shape.start_point.y),
		                 QPointF(shape.end_point.x, shape.end_point.y))

	def _draw_selection(self, painter, shape):
		painter.save()
		pen = QPen(SELECTION_COLOR, 1.5, Qt.DashLine)
		painter.setPen(pen)
		painter.setBrush(Qt.NoBrush)
		self._draw_methods[shape.type](painter, shape)
		painter.restore()

	def _draw_preview(self, painter):
		"""Dashed outline of the shape being drawn in create mode."""
		gesture = self.controller.gesture
		if not gesture.is_drawing or gesture.draw_current is None:
			return
		shape_type = self.controller.active_shape_type
		if shape_type is None or distance(gesture.draw_start, gesture.draw_current) <= MIN_CREATE_DISTANCE:
			return
		preview = self.controller.factory.get_service(shape_type).create_from_drag(
			gesture.draw_start, gesture.draw_current, id='preview')
		painter.save()
		painter.setPen(QPen(PREVIEW_COLOR, 1, Qt.DashLine))
		painter.setBrush(Qt.NoBrush)
		self._draw_methods[preview.type](painter, preview)
		painter.restore()
