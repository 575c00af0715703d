"""Gesture state dataclass for the canvas controller.

Single object holding every in-flight gesture value, so switching modes can
discard all of it by replacing the instance.
"""

from dataclasses import dataclass
from typing import Optional

from models.point import Point
from models.shapes import Shape


@dataclass
class GestureState:
    """Transient state of the current pointer gesture."""
    # Create
    draw_start: Optional[Point] = None
    draw_current: Optional[Point] = None
    # Select / Move
    drag_start: Optional[Point] = None
    dragging: bool = False                     # Drag threshold passed
    # Resize
    resize_start: Optional[Point] = None
    original_size: float = 0.0
    # Rotate
    rotate_start: Optional[Point] = None
    original_rotation: float = 0.0
    # Shape value at gesture start; moves/resizes/rotations re-apply to it
    original_shape: Optional[Shape] = None

    @property
    def is_drawing(self):
        return self.draw_start is not None
