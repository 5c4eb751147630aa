"""Scene-graph core: nodes, coordinates, hit testing, drag and dispatch."""

from canvasui.scene.coordinates import absolute_bounds, absolute_position
from canvasui.scene.drag import DRAG_IDLE, DragController, DragIdle, DragState, Dragging
from canvasui.scene.hit_test import hit_test
from canvasui.scene.node import ClickHandler, Node
from canvasui.scene.routing import KeyboardFocus, MouseEvent
from canvasui.scene.surface import Surface

__all__ = [
    "ClickHandler",
    "DRAG_IDLE",
    "DragController",
    "DragIdle",
    "DragState",
    "Dragging",
    "KeyboardFocus",
    "MouseEvent",
    "Node",
    "Surface",
    "absolute_bounds",
    "absolute_position",
    "hit_test",
]
