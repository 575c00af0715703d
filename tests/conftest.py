"""
Shared fixtures for Geometry Canvas Editor tests.

Provides services, sample shapes and a controller with default calibration.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

# Headless Qt for widget tests
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


# ── Sample geometry ─────────────────────────────────────────────────────

# 3-4-5 right triangle scaled by 30, right angle at vertex 0
RIGHT_TRIANGLE_POINTS = ((0.0, 0.0), (120.0, 0.0), (0.0, 90.0))

PIXELS_PER_CM = 60.0


@pytest.fixture
def factory():
    """Fresh service factory"""
    from services.shape_services import ShapeServiceFactory
    return ShapeServiceFactory()


@pytest.fixture
def circle_service(factory):
    return factory.get_service('circle')


@pytest.fixture
def rectangle_service(factory):
    return factory.get_service('rectangle')


@pytest.fixture
def triangle_service(factory):
    return factory.get_service('triangle')


@pytest.fixture
def line_service(factory):
    return factory.get_service('line')


@pytest.fixture
def right_triangle(triangle_service):
    """Triangle (0,0), (120,0), (0,90) - sides 120/150/90"""
    return triangle_service.create_shape(points=RIGHT_TRIANGLE_POINTS, id='tri-1')


@pytest.fixture
def calibration(tmp_path):
    """Default calibration (60 px/cm) writing to a temporary config dir"""
    from services.calibration import CalibrationSettings
    return CalibrationSettings(config_dir=str(tmp_path / 'config'))


@pytest.fixture
def controller(calibration, factory):
    """Canvas controller over an empty collection"""
    from components.interaction import CanvasController
    return CanvasController(factory=factory, calibration=calibration)
