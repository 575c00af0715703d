import sys
import os
import logging

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Only show warnings and errors
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)  # Output to console
    ]
)

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5.QtWidgets import QMainWindow, QApplication, QToolBar, QAction, QActionGroup, QLabel

# Component imports
from components.canvas_widget import CanvasWidget
from components.interaction import CanvasController

from models.shapes import ShapeType
from services.calibration import CalibrationSettings
from services.measurement_operations import round_measurements
from utils.logger import set_main_window

logger = logging.getLogger(__name__)

MODE_ACTIONS = [
    ("Select", 'select', None),
    ("Move", 'move', None),
    ("Resize", 'resize', None),
    ("Rotate", 'rotate', None),
    ("Circle", 'create', ShapeType.CIRCLE),
    ("Rectangle", 'create', ShapeType.RECTANGLE),
    ("Triangle", 'create', ShapeType.TRIANGLE),
    ("Line", 'create', ShapeType.LINE),
]


class GeometryCanvasEditor(QMainWindow):
    """Main window: mode toolbar, canvas and a measurement readout"""

    def __init__(self, calibration=None):
        super().__init__()
        self.setWindowTitle("Geometry Canvas Editor")

        self.calibration = calibration or CalibrationSettings().load()
        self.controller = CanvasController(calibration=self.calibration)
        self.canvas = CanvasWidget(self.controller, self)
        self.setCentralWidget(self.canvas)

        # Repaint canvas and refresh the readout on every controller change
        self.controller.set_change_callback(self._on_canvas_changed)

        self._setup_toolbar()
        self.measurement_label = QLabel()
        self.statusBar().addPermanentWidget(self.measurement_label)

    def _setup_toolbar(self):
        toolbar = QToolBar("Modes", self)
        self.addToolBar(toolbar)
        group = QActionGroup(self)
        self.mode_actions = {}
        for label, mode_name, shape_type in MODE_ACTIONS:
            action = QAction(label, self, checkable=True)
            action.triggered.connect(
                lambda checked, m=mode_name, t=shape_type: self.controller.set_mode(m, t))
            group.addAction(action)
            toolbar.addAction(action)
            self.mode_actions[(mode_name, shape_type)] = action
        self.mode_actions[('select', None)].setChecked(True)

    def _on_canvas_changed(self):
        self.canvas.refresh()
        self._sync_mode_actions()
        measurements = self.controller.measurements_for_selected()
        if not measurements:
            self.measurement_label.setText("")
            return
        unit = self.controller.unit.value
        text = "  ".join(f"{key}: {value}" for key, value in round_measurements(measurements).items())
        self.measurement_label.setText(f"[{unit}]  {text}")

    def _sync_mode_actions(self):
        key = (self.controller.active_mode, self.controller.active_shape_type)
        action = self.mode_actions.get(key)
        if action and not action.isChecked():
            action.setChecked(True)


def main():
    app = QApplication(sys.argv)
    window = GeometryCanvasEditor()
    set_main_window(window)
    window.resize(1000, 700)
    window.show()
    exit_code = app.exec_()
    window.calibration.save()
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
