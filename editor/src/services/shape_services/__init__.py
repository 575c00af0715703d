"""Shape service registry.

Each shape type has exactly one service implementing the ShapeService
contract. Callers resolve it once by type tag or from a shape instance.
"""

from models.shapes import ShapeType
from utils.logger import loggerRaise

from .base_service import ShapeService
from .circle_service import CircleService
from .rectangle_service import RectangleService
from .triangle_service import TriangleService
from .line_service import LineService

# Registry of available services
AVAILABLE_SERVICES = {
    ShapeType.CIRCLE: CircleService,
    ShapeType.RECTANGLE: RectangleService,
    ShapeType.TRIANGLE: TriangleService,
    ShapeType.LINE: LineService,
}


class UnsupportedShapeError(ValueError):
    """Raised when no service exists for a shape type."""


class ShapeServiceFactory:
    """Resolves and caches one service instance per shape type."""

    def __init__(self, services=None):
        self._service_classes = dict(services or AVAILABLE_SERVICES)
        self._instances = {}

    def get_service(self, shape_type) -> ShapeService:
        """Get the service for a type tag ('circle' or ShapeType.CIRCLE).

        Raises:
            UnsupportedShapeError: if the type has no registered service
        """
        try:
            key = ShapeType(shape_type)
            service_class = self._service_classes[key]
        except (ValueError, KeyError):
            loggerRaise(UnsupportedShapeError(f"Unsupported shape type: {shape_type!r}"),
                        "This shape type is not supported")

        if key not in self._instances:
            self._instances[key] = service_class()
        return self._instances[key]

    def get_service_for_shape(self, shape) -> ShapeService:
        """Get the service matching a shape instance's type tag."""
        return self.get_service(getattr(shape, 'type', None))

    def get_supported_types(self):
        return list(self._service_classes)


_default_factory = ShapeServiceFactory()


def get_service(shape_type) -> ShapeService:
    return _default_factory.get_service(shape_type)


def get_service_for_shape(shape) -> ShapeService:
    return _default_factory.get_service_for_shape(shape)


__all__ = [
    'AVAILABLE_SERVICES', 'ShapeService', 'ShapeServiceFactory', 'UnsupportedShapeError',
    'CircleService', 'RectangleService', 'TriangleService', 'LineService',
    'get_service', 'get_service_for_shape',
]
