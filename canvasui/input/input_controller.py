"""Canvas event mapping to scene dispatch."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from canvasui.api.input_events import CLICK, RIGHT_CLICK, KeyEvent, PointerEvent, TouchPoint
from canvasui.scene.surface import Surface

logger = logging.getLogger(__name__)

_TOUCH_TYPES = {
    "pointer_down": "touch_start",
    "pointer_move": "touch_move",
    "pointer_up": "touch_end",
}
# Touch contacts report button 0.
_CLICK_BUTTONS = {0: CLICK, 1: CLICK, 2: RIGHT_CLICK}


class InputController:
    """Translate rendercanvas event dicts into surface dispatch calls.

    rendercanvas events are already canvas-local, so they are forwarded with a
    zero origin. Browser-style callers that only know client coordinates and
    the canvas bounding box use ``consume_client_event`` instead.
    """

    def __init__(
        self,
        surface: Surface,
        *,
        trace_enabled: bool = False,
        on_input: Callable[[], None] | None = None,
    ) -> None:
        self._surface = surface
        self._trace_enabled = trace_enabled
        self.on_input = on_input
        self._pressed_buttons: set[int] = set()

    @property
    def surface(self) -> Surface:
        return self._surface

    def bind(self, canvas: Any) -> None:
        """Attach pointer and keyboard listeners to a rendercanvas canvas."""
        if not hasattr(canvas, "add_event_handler"):
            raise RuntimeError("Canvas does not support event handlers.")
        canvas.add_event_handler(self._on_pointer_down, "pointer_down")
        canvas.add_event_handler(self._on_pointer_move, "pointer_move")
        canvas.add_event_handler(self._on_pointer_up, "pointer_up")
        canvas.add_event_handler(self._on_key_down, "key_down")
        canvas.add_event_handler(self._on_key_up, "key_up")
        canvas.add_event_handler(self._on_char, "char")
        if self._trace_enabled:
            canvas.add_event_handler(self._on_any_event, "*")

    def consume_client_event(
        self,
        event_type: str,
        client_x: float,
        client_y: float,
        *,
        origin: tuple[float, float] = (0.0, 0.0),
        button: int = 0,
        touches: tuple[TouchPoint, ...] = (),
    ) -> PointerEvent:
        """Dispatch one event given in client space plus the canvas origin."""
        event = PointerEvent(
            event_type,
            float(client_x),
            float(client_y),
            button=int(button),
            origin_x=float(origin[0]),
            origin_y=float(origin[1]),
            touches=touches,
        )
        self._surface.dispatch(event_type, event)
        self._notify()
        return event

    def cancel(self) -> None:
        """Abandon any drag in progress, e.g. when the window loses focus."""
        self._pressed_buttons.clear()
        self._surface.dispatch("blur", PointerEvent("blur", 0.0, 0.0))
        self._notify()

    def _on_pointer_down(self, event: dict[str, Any]) -> None:
        if event.get("event_type") != "pointer_down":
            return
        parsed = _parse_pointer(event)
        if parsed is None:
            return
        self._pressed_buttons.add(parsed.button)
        self._surface.dispatch(parsed.event_type, parsed)
        self._notify()

    def _on_pointer_move(self, event: dict[str, Any]) -> None:
        if event.get("event_type") != "pointer_move":
            return
        parsed = _parse_pointer(event)
        if parsed is None:
            return
        self._surface.dispatch(parsed.event_type, parsed)
        self._notify()

    def _on_pointer_up(self, event: dict[str, Any]) -> None:
        if event.get("event_type") != "pointer_up":
            return
        parsed = _parse_pointer(event)
        if parsed is None:
            return
        self._surface.dispatch(parsed.event_type, parsed)
        was_pressed = parsed.button in self._pressed_buttons
        self._pressed_buttons.discard(parsed.button)
        click_type = _CLICK_BUTTONS.get(parsed.button)
        if was_pressed and click_type is not None:
            x, y = parsed.surface_position()
            click = PointerEvent(click_type, x, y, button=parsed.button, touches=parsed.touches)
            target = self._surface.dispatch(click_type, click)
            logger.debug(
                "input_click_dispatched type=%s x=%.1f y=%.1f target=%r", click_type, x, y, target
            )
        self._notify()

    def _on_key_down(self, event: dict[str, Any]) -> None:
        if event.get("event_type") != "key_down":
            return
        key = event.get("key")
        if isinstance(key, str):
            self._surface.dispatch_key(KeyEvent("key_down", key))
            self._notify()

    def _on_key_up(self, event: dict[str, Any]) -> None:
        if event.get("event_type") != "key_up":
            return
        key = event.get("key")
        if isinstance(key, str):
            self._surface.dispatch_key(KeyEvent("key_up", key))
            self._notify()

    def _on_char(self, event: dict[str, Any]) -> None:
        if event.get("event_type") != "char":
            return
        char = event.get("data")
        if isinstance(char, str) and char:
            self._surface.dispatch_key(KeyEvent("char", char))
            self._notify()

    def _notify(self) -> None:
        if self.on_input is not None:
            self.on_input()

    @staticmethod
    def _on_any_event(event: dict[str, Any]) -> None:
        event_type = event.get("event_type")
        if event_type not in {"pointer_down", "pointer_up", "pointer_move", "key_down", "char"}:
            return
        logger.debug(
            "input_event type=%s button=%s ntouches=%s x=%s y=%s key=%s",
            event_type,
            event.get("button"),
            event.get("ntouches"),
            event.get("x"),
            event.get("y"),
            event.get("key", event.get("data")),
        )


def _parse_pointer(event: Mapping[str, Any]) -> PointerEvent | None:
    x = event.get("x")
    y = event.get("y")
    if not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
        return None
    button = event.get("button")
    if not isinstance(button, int):
        button = 0
    touches = _parse_touches(event)
    event_type = str(event.get("event_type"))
    if touches:
        event_type = _TOUCH_TYPES.get(event_type, event_type)
    return PointerEvent(event_type, float(x), float(y), button=button, touches=touches)


def _parse_touches(event: Mapping[str, Any]) -> tuple[TouchPoint, ...]:
    ntouches = event.get("ntouches")
    raw = event.get("touches")
    if not isinstance(ntouches, int) or ntouches <= 0 or not isinstance(raw, Mapping):
        return ()
    points: list[TouchPoint] = []
    for touch in raw.values():
        if not isinstance(touch, Mapping):
            continue
        tx = touch.get("x")
        ty = touch.get("y")
        if isinstance(tx, (int, float)) and isinstance(ty, (int, float)):
            points.append(TouchPoint(float(tx), float(ty)))
    return tuple(points)


__all__ = ["InputController"]
