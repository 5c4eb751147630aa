"""Horizontal value slider whose hit region is just its handle."""

from __future__ import annotations

import math
from collections.abc import Callable

from canvasui.api.drawing import DrawingSurface
from canvasui.api.errors import InvalidGeometryError
from canvasui.scene.node import Node
from canvasui.shapes.basic import FULL_TURN


class Slider(Node):
    """Value slider.

    The slider is not ``draggable`` as a node: a drag on its handle changes
    ``value`` instead of moving the slider.
    """

    default_color = "lightgray"

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        min_value: float = 0.0,
        max_value: float = 100.0,
        value: float = 50.0,
        handle_size: float = 20.0,
        *,
        on_value_change: Callable[[float], None] | None = None,
    ) -> None:
        super().__init__(x, y, width, height)
        if not (math.isfinite(min_value) and math.isfinite(max_value)) or max_value <= min_value:
            raise InvalidGeometryError(f"slider range must be increasing: {min_value}..{max_value}")
        if not math.isfinite(handle_size) or not 0.0 <= handle_size <= self.width:
            raise InvalidGeometryError(
                f"slider handle must fit its track: handle_size={handle_size} width={self.width}"
            )
        self.min_value = float(min_value)
        self.max_value = float(max_value)
        self.handle_size = float(handle_size)
        self.on_value_change = on_value_change
        self.value = self._clamp(value)

    def _clamp(self, value: float) -> float:
        return min(max(float(value), self.min_value), self.max_value)

    def handle_offset(self) -> float:
        """Return the handle's left edge relative to the slider's left edge."""
        fraction = (self.value - self.min_value) / (self.max_value - self.min_value)
        return fraction * (self.width - self.handle_size)

    def set_value(self, value: float) -> None:
        self.value = self._clamp(value)
        if self.on_value_change is not None:
            self.on_value_change(self.value)
        self.updated()

    def inside_test(self, x: float, y: float) -> bool:
        abs_x, abs_y = self.absolute_position()
        handle_x = abs_x + self.handle_offset()
        return handle_x <= x <= handle_x + self.handle_size and abs_y <= y <= abs_y + self.height

    def start_dragging(self, x: float, y: float) -> None:
        super().start_dragging(x, y)
        self.is_dragging = True

    def handle_dragging(self, x: float, y: float) -> None:
        if not self.is_dragging or self.width <= 0.0:
            return
        abs_x, _ = self.absolute_position()
        pointer_x = float(x) - abs_x
        span = self.max_value - self.min_value
        self.set_value(self.min_value + (pointer_x / self.width) * span)

    def paint(self, ctx: DrawingSurface) -> None:
        half_w = self.width / 2.0
        radius = self.handle_size / 2.0
        ctx.fill_rect(-half_w, -2.0, self.width, 4.0, "#ddd")
        handle_center = self.handle_offset() - half_w + radius
        ctx.fill_arc(handle_center, 0.0, radius, 0.0, FULL_TURN, "#4CAF50")
        ctx.stroke_arc(handle_center, 0.0, radius, 0.0, FULL_TURN, "#45a049", line_width=2.0)
        ctx.fill_text(
            str(math.floor(self.value + 0.5)),
            handle_center,
            self.height / 2.0 + 15.0,
            "#333",
            font_size=12.0,
            align="center",
            baseline="bottom",
        )


__all__ = ["Slider"]
