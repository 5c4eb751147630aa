"""Public input event types."""

from __future__ import annotations

from dataclasses import dataclass

POINTER_DOWN_TYPES: frozenset[str] = frozenset({"pointer_down", "touch_start"})
POINTER_MOVE_TYPES: frozenset[str] = frozenset({"pointer_move", "touch_move"})
POINTER_UP_TYPES: frozenset[str] = frozenset({"pointer_up", "touch_end"})
POINTER_CANCEL_TYPES: frozenset[str] = frozenset({"pointer_cancel", "touch_cancel", "blur"})
CLICK = "click"
RIGHT_CLICK = "right_click"

POINTER_EVENT_TYPES: frozenset[str] = (
    POINTER_DOWN_TYPES
    | POINTER_MOVE_TYPES
    | POINTER_UP_TYPES
    | POINTER_CANCEL_TYPES
    | frozenset({CLICK, RIGHT_CLICK})
)


@dataclass(frozen=True, slots=True)
class TouchPoint:
    """One touch contact in client coordinates."""

    client_x: float
    client_y: float


@dataclass(slots=True)
class PointerEvent:
    """Raw pointer or touch event.

    Coordinates are client-space; ``origin_x``/``origin_y`` are the top-left of
    the drawing element's bounding box in the same space. Only the first
    touch contact is ever read.
    """

    event_type: str
    client_x: float
    client_y: float
    button: int = 0
    origin_x: float = 0.0
    origin_y: float = 0.0
    touches: tuple[TouchPoint, ...] = ()
    default_prevented: bool = False

    def surface_position(self) -> tuple[float, float]:
        """Return the event position relative to the drawing surface."""
        if self.touches:
            first = self.touches[0]
            client_x, client_y = first.client_x, first.client_y
        else:
            client_x, client_y = self.client_x, self.client_y
        return float(client_x) - float(self.origin_x), float(client_y) - float(self.origin_y)

    def prevent_default(self) -> None:
        """Ask the host not to apply its own scrolling/selection behaviour."""
        self.default_prevented = True


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Raw key/char event."""

    event_type: str
    value: str


__all__ = [
    "CLICK",
    "KeyEvent",
    "POINTER_CANCEL_TYPES",
    "POINTER_DOWN_TYPES",
    "POINTER_EVENT_TYPES",
    "POINTER_MOVE_TYPES",
    "POINTER_UP_TYPES",
    "PointerEvent",
    "RIGHT_CLICK",
    "TouchPoint",
]
