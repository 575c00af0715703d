"""Point value type for canvas-pixel coordinates."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Immutable 2D coordinate in canvas-pixel space (Y-down).

    Used both for positions and for the difference vectors between them.
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = point"""
        return iter((self.x, self.y))

    def __add__(self, other):
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor):
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def translated(self, dx, dy):
        """Return a copy offset by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    @classmethod
    def from_iterable(cls, values):
        """Build from any (x, y) pair - tuple, list, numpy row or QPointF-like."""
        if hasattr(values, 'x') and callable(values.x):
            return cls(float(values.x()), float(values.y()))
        x, y = values
        return cls(float(x), float(y))
