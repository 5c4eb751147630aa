"""Push button node."""

from __future__ import annotations

from collections.abc import Callable

from canvasui.api.drawing import DrawingSurface
from canvasui.api.input_events import CLICK
from canvasui.rendering.colors import darken_color
from canvasui.scene.node import Node
from canvasui.scene.routing import MouseEvent


class Button(Node):
    """Labelled button firing ``on_click`` for a press followed by a click inside it.

    Pointer-down arrives through the drag-start hook (buttons are never
    draggable) and only drives the pressed look. The click fires when the
    surface reports this button as the node the preceding pointer-up released.
    """

    default_color = "lightgray"

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        label: str = "",
        color: str | None = None,
        *,
        on_click: Callable[[], None] | None = None,
    ) -> None:
        super().__init__(x, y, width, height, color)
        self.label = label
        self.on_click = on_click
        self.is_pressed = False

    def start_dragging(self, x: float, y: float) -> None:
        super().start_dragging(x, y)
        self.is_pressed = True

    def stop_dragging(self) -> None:
        super().stop_dragging()
        self.is_pressed = False

    def handle_mouse_event(self, event_type: str, event: MouseEvent) -> None:
        super().handle_mouse_event(event_type, event)
        if event_type != CLICK:
            return
        if event.released is not self or not self.inside_test(event.x, event.y):
            return
        if self.on_click is not None:
            self.on_click()

    def paint(self, ctx: DrawingSurface) -> None:
        half_w = self.width / 2.0
        half_h = self.height / 2.0
        fill = darken_color(self.color) if self.is_pressed else self.color
        ctx.fill_rect(-half_w, -half_h, self.width, self.height, fill)
        ctx.stroke_rect(-half_w, -half_h, self.width, self.height, "black")
        ctx.fill_text(self.label, 0.0, 0.0, "black", font_size=16.0, align="center", baseline="middle")


__all__ = ["Button"]
