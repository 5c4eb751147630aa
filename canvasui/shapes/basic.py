"""Plain geometric node variants."""

from __future__ import annotations

import math

from canvasui.api.drawing import DrawingSurface
from canvasui.scene.node import Node

FULL_TURN = 2.0 * math.pi


class Box(Node):
    """Filled, outlined rectangle."""


class CircleBox(Node):
    """Circle inscribed in the node box, radius ``width / 2``."""

    def paint(self, ctx: DrawingSurface) -> None:
        radius = self.width / 2.0
        ctx.fill_arc(0.0, 0.0, radius, 0.0, FULL_TURN, self.color)
        ctx.stroke_arc(0.0, 0.0, radius, 0.0, FULL_TURN, "black")


class Circle(Node):
    """Circle given by its bounding-box corner and radius."""

    def __init__(
        self,
        x: float,
        y: float,
        radius: float,
        color: str | None = None,
        **kwargs: bool,
    ) -> None:
        super().__init__(x, y, radius * 2.0, radius * 2.0, color, **kwargs)
        self.radius = self.width / 2.0

    def resize(self, width: float, height: float) -> None:
        super().resize(width, height)
        self.radius = min(self.width, self.height) / 2.0

    def paint(self, ctx: DrawingSurface) -> None:
        ctx.fill_arc(0.0, 0.0, self.radius, 0.0, FULL_TURN, self.color)
        ctx.stroke_arc(0.0, 0.0, self.radius, 0.0, FULL_TURN, "black")


class Triangle(Node):
    """Isosceles triangle with its apex at the top edge center."""

    def vertices(self) -> tuple[tuple[float, float], ...]:
        half_w = self.width / 2.0
        half_h = self.height / 2.0
        return ((0.0, -half_h), (half_w, half_h), (-half_w, half_h))

    def paint(self, ctx: DrawingSurface) -> None:
        points = self.vertices()
        ctx.fill_path(points, self.color)
        ctx.stroke_path(points, "black", closed=True)


class Pen(Node):
    """Outlined box with a 10px vertical bar through the middle."""

    def paint(self, ctx: DrawingSurface) -> None:
        half_w = self.width / 2.0
        half_h = self.height / 2.0
        ctx.fill_rect(-5.0, -half_h, 10.0, self.height, self.color)
        ctx.stroke_rect(-half_w, -half_h, self.width, self.height, "black")


class Line(Node):
    """Horizontal stroke across the box; ``height`` is the line width."""

    def paint(self, ctx: DrawingSurface) -> None:
        half_w = self.width / 2.0
        ctx.stroke_path(((-half_w, 0.0), (half_w, 0.0)), self.color, line_width=self.height)


class Frame(Node):
    """Grouping container; paints only its fill."""

    default_color = "transparent"

    def paint(self, ctx: DrawingSurface) -> None:
        ctx.fill_rect(-self.width / 2.0, -self.height / 2.0, self.width, self.height, self.color)


__all__ = ["Box", "Circle", "CircleBox", "FULL_TURN", "Frame", "Line", "Pen", "Triangle"]
