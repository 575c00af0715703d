"""Base class for shape services.

One service per shape type implements the full operation set:
- create (from parameters or from a draw gesture)
- move / resize / rotate
- forward measurements and inverse measurement updates
- hit testing

Every operation is pure: it takes a shape value and returns a new one.
"""

from abc import ABC, abstractmethod
import logging
import math
from typing import Dict

from constants import MIN_SHAPE_DIMENSION
from models.point import Point
from models.shapes import OriginalDimensions
from utils.units import parse_unit, units_to_pixels, square_units_to_pixels

logger = logging.getLogger(__name__)


class ShapeService(ABC):
    """Abstract base class for per-shape-type services.

    Subclasses must implement:
    - get_shape_type(): The ShapeType this service handles
    - create_shape() / create_from_drag(): Build new shapes
    - move_shape() / resize_shape() / rotate_shape(): Transforms
    - get_measurements() / update_from_measurement(): Measurement mapping
    - contains_point(): Hit test
    - get_center() / get_characteristic_size(): Gesture reference values
    """

    # Keys reported by get_measurements(), in panel order
    MEASUREMENT_KEYS = ()
    # Keys measured as areas (converted with the squared factor)
    AREA_KEYS = ('area',)
    # Unitless keys (degrees)
    ANGLE_KEYS = ()

    @abstractmethod
    def get_shape_type(self):
        """Return the ShapeType handled by this service."""
        pass

    @abstractmethod
    def create_shape(self, **params):
        """Build a shape from explicit geometry or a position plus defaults.

        An id is generated when none is given.
        """
        pass

    @abstractmethod
    def create_from_drag(self, start, end, **style):
        """Build the shape a completed draw gesture from start to end describes."""
        pass

    @abstractmethod
    def move_shape(self, shape, dx, dy):
        pass

    @abstractmethod
    def resize_shape(self, shape, factor, center=None):
        """Uniformly scale about center (default: the shape's own center).

        The factor composes with the shape's original_dimensions baseline, so
        resize(resize(s, 2), 0.5) restores the original geometry exactly.
        """
        pass

    @abstractmethod
    def rotate_shape(self, shape, angle, center=None):
        """Rotate by angle degrees about center (default: own center)."""
        pass

    @abstractmethod
    def get_measurements(self, shape, unit, pixels_per_unit) -> Dict[str, float]:
        pass

    @abstractmethod
    def update_from_measurement(self, shape, key, new_value, original_value, unit, pixels_per_unit):
        """Reshape so the measurement ``key`` equals new_value (in ``unit``).

        Unknown keys and unusable values return the shape unchanged.
        """
        pass

    @abstractmethod
    def contains_point(self, shape, point) -> bool:
        pass

    @abstractmethod
    def get_center(self, shape) -> Point:
        pass

    @abstractmethod
    def get_characteristic_size(self, shape) -> float:
        """Size that resize gestures snap (radius, half-diagonal, ...)."""
        pass

    # ------------------------------------------------------------------
    # Grid snapping
    # ------------------------------------------------------------------

    def get_snap_anchor(self, shape) -> Point:
        """Point of the shape that aligns to the grid while moving."""
        return self.get_center(shape)

    def move_anchor_to(self, shape, target):
        """Translate the shape so its snap anchor lands on target."""
        anchor = self.get_snap_anchor(shape)
        return self.move_shape(shape, target.x - anchor.x, target.y - anchor.y)

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def get_measurement_keys(self):
        return self.MEASUREMENT_KEYS

    def _value_to_pixels(self, key, value, unit, pixels_per_unit):
        """Convert an edited measurement value from ``unit`` to pixels."""
        parse_unit(unit)
        if key in self.ANGLE_KEYS:
            return value
        if key in self.AREA_KEYS:
            return square_units_to_pixels(value, pixels_per_unit)
        return units_to_pixels(value, pixels_per_unit)

    def _is_usable(self, value):
        return value is not None and math.isfinite(value) and value > 0

    def _clamp_dimension(self, value, label):
        """Clamp a pixel dimension to MIN_SHAPE_DIMENSION, warning when it was invalid."""
        if value is None or not math.isfinite(value) or value < MIN_SHAPE_DIMENSION:
            logger.warning("Invalid %s %s %r, clamped to %s px",
                           self.get_shape_type().value, label, value, MIN_SHAPE_DIMENSION)
            return MIN_SHAPE_DIMENSION
        return value

    def _unknown_key(self, shape, key):
        logger.warning("Unknown %s measurement key %r, shape %s unchanged",
                       self.get_shape_type().value, key, shape.id)
        return shape

    def _check_factor(self, shape, factor):
        """True if factor can be applied; logs and returns False otherwise."""
        if factor is None or not math.isfinite(factor) or factor <= 0:
            logger.warning("Ignoring invalid scale factor %r for %s", factor, shape.id)
            return False
        return True

    def _compose_baseline(self, shape, current_values, factor):
        """Scale a shape's baseline by factor.

        Args:
            shape: Shape whose original_dimensions (if any) is the reference
            current_values: Geometry tuple to snapshot when no baseline exists
            factor: Scale to compose with the baseline's cumulative scale

        Returns:
            (scaled_values, new OriginalDimensions)
        """
        baseline = shape.original_dimensions
        if baseline is None or len(baseline.values) != len(current_values):
            baseline = OriginalDimensions(tuple(current_values), 1.0)
        scale = baseline.scale * factor
        scaled = tuple(value * scale for value in baseline.values)
        return scaled, OriginalDimensions(baseline.values, scale)
