"""Ordered shape collection.

Insertion order is z-order: later shapes are drawn on top and win hit tests.
"""
import logging

logger = logging.getLogger(__name__)


class ShapeCollection:
    """Owns the authoritative list of shapes on the canvas."""

    def __init__(self, shapes=None):
        self._shapes = list(shapes or [])

    def __iter__(self):
        return iter(list(self._shapes))

    def __len__(self):
        return len(self._shapes)

    def __contains__(self, shape_id):
        return self.index_of(shape_id) is not None

    @property
    def shapes(self):
        """Snapshot of the shapes in z-order (bottom first)."""
        return tuple(self._shapes)

    def index_of(self, shape_id):
        for index, shape in enumerate(self._shapes):
            if shape.id == shape_id:
                return index
        return None

    def get(self, shape_id):
        index = self.index_of(shape_id)
        return self._shapes[index] if index is not None else None

    def add(self, shape):
        """Append a shape on top of the stack.

        Raises:
            ValueError: if a shape with the same id already exists
        """
        if shape.id in self:
            raise ValueError(f"Shape id already in collection: {shape.id}")
        self._shapes.append(shape)
        return shape

    def replace(self, shape):
        """Swap in a new value for an existing shape id, keeping its z-position.

        Raises:
            KeyError: if no shape has that id
        """
        index = self.index_of(shape.id)
        if index is None:
            raise KeyError(shape.id)
        self._shapes[index] = shape
        return shape

    def remove(self, shape_id):
        """Delete a shape by id. Returns the removed shape or None."""
        index = self.index_of(shape_id)
        if index is None:
            logger.debug("Remove ignored, no shape %s", shape_id)
            return None
        return self._shapes.pop(index)

    def clear(self):
        self._shapes.clear()

    def get_shape_at_position(self, point, factory):
        """Topmost shape containing point, or None.

        Args:
            point: Canvas point
            factory: ShapeServiceFactory used to hit-test each shape
        """
        for shape in reversed(self._shapes):
            if factory.get_service_for_shape(shape).contains_point(shape, point):
                return shape
        return None
