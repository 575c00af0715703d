"""
Tests for service dispatch and the shape collection.
"""
import pytest

from models.point import Point
from models.shapes import ShapeType
from models.shape_collection import ShapeCollection
from services.shape_services import (
    ShapeServiceFactory, UnsupportedShapeError, CircleService, RectangleService,
    TriangleService, LineService, get_service,
)


# ══════════════════════════════════════════════════════════════════════════
# Service Factory
# ══════════════════════════════════════════════════════════════════════════

class TestShapeServiceFactory:

    @pytest.mark.parametrize("tag, service_class", [
        ('circle', CircleService),
        ('rectangle', RectangleService),
        (ShapeType.TRIANGLE, TriangleService),
        (ShapeType.LINE, LineService),
    ])
    def test_dispatch_by_tag(self, factory, tag, service_class):
        assert isinstance(factory.get_service(tag), service_class)

    def test_service_instances_are_cached(self, factory):
        assert factory.get_service('circle') is factory.get_service(ShapeType.CIRCLE)

    def test_dispatch_by_shape(self, factory, right_triangle):
        assert isinstance(factory.get_service_for_shape(right_triangle), TriangleService)

    @pytest.mark.parametrize("tag", ['hexagon', None, 42])
    def test_unsupported_type_raises(self, factory, tag):
        with pytest.raises(UnsupportedShapeError):
            factory.get_service(tag)

    def test_unsupported_shape_raises(self, factory):
        with pytest.raises(UnsupportedShapeError):
            factory.get_service_for_shape(object())

    def test_restricted_registry(self):
        factory = ShapeServiceFactory({ShapeType.CIRCLE: CircleService})
        assert factory.get_supported_types() == [ShapeType.CIRCLE]
        with pytest.raises(UnsupportedShapeError):
            factory.get_service('line')

    def test_unsupported_error_is_value_error(self):
        assert issubclass(UnsupportedShapeError, ValueError)

    def test_module_level_lookup(self):
        assert isinstance(get_service('rectangle'), RectangleService)

    def test_every_service_reports_its_type(self, factory):
        for shape_type in factory.get_supported_types():
            assert factory.get_service(shape_type).get_shape_type() is shape_type


# ══════════════════════════════════════════════════════════════════════════
# Shape Collection
# ══════════════════════════════════════════════════════════════════════════

class TestShapeCollection:

    @pytest.fixture
    def stacked(self, circle_service, rectangle_service):
        """A rectangle under a circle, overlapping at (50, 50)"""
        rect = rectangle_service.create_shape(position=Point(0, 0), width=100, height=100, id='bottom')
        circle = circle_service.create_shape(position=Point(50, 50), radius=20, id='top')
        return ShapeCollection([rect, circle])

    def test_topmost_shape_wins(self, stacked, factory):
        assert stacked.get_shape_at_position(Point(50, 50), factory).id == 'top'
        assert stacked.get_shape_at_position(Point(5, 5), factory).id == 'bottom'
        assert stacked.get_shape_at_position(Point(500, 500), factory) is None

    def test_add_rejects_duplicate_ids(self, stacked, circle_service):
        with pytest.raises(ValueError):
            stacked.add(circle_service.create_shape(id='top'))

    def test_replace_keeps_z_order(self, stacked, rectangle_service):
        moved = rectangle_service.move_shape(stacked.get('bottom'), 10, 10)
        stacked.replace(moved)
        assert stacked.index_of('bottom') == 0
        assert stacked.get('bottom').position == Point(10, 10)

    def test_replace_missing_raises(self, stacked, circle_service):
        with pytest.raises(KeyError):
            stacked.replace(circle_service.create_shape(id='ghost'))

    def test_remove(self, stacked):
        removed = stacked.remove('top')
        assert removed.id == 'top'
        assert 'top' not in stacked
        assert len(stacked) == 1
        assert stacked.remove('top') is None

    def test_iteration_is_a_snapshot(self, stacked):
        for shape in stacked:
            stacked.remove(shape.id)
        assert len(stacked) == 0

    def test_clear(self, stacked):
        stacked.clear()
        assert stacked.shapes == ()
