"""Canvas interaction state machine.

Modes, gesture state and the controller that routes pointer/keyboard events
into shape service operations.
"""

from .canvas_controller import CanvasController, PRECISION_MODIFIER
from .gesture_state import GestureState
from .modes import MODES, create_mode

__all__ = ['CanvasController', 'PRECISION_MODIFIER', 'GestureState', 'MODES', 'create_mode']
