"""Input capture modules."""

from canvasui.api.input_events import KeyEvent, PointerEvent, TouchPoint
from canvasui.input.input_controller import InputController

__all__ = ["InputController", "KeyEvent", "PointerEvent", "TouchPoint"]
