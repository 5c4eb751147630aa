"""Drawing surface that records immutable render commands per frame."""

from __future__ import annotations

from collections.abc import Sequence

from canvasui.api.render_snapshot import RenderCommand, RenderSnapshot, create_render_snapshot
from canvasui.rendering.transform_stack import TransformStack


class RecordingSurface(TransformStack):
    """Records every draw call with the transform active at the time.

    ``clear`` starts a new frame; ``snapshot`` returns the frame so far.
    """

    def __init__(self, width: int = 1200, height: int = 720) -> None:
        super().__init__(width, height)
        self._frame_index = -1
        self._commands: list[RenderCommand] = []

    @property
    def commands(self) -> tuple[RenderCommand, ...]:
        return tuple(self._commands)

    def snapshot(self) -> RenderSnapshot:
        return create_render_snapshot(
            frame_index=max(0, self._frame_index), commands=tuple(self._commands)
        )

    def clear(self) -> None:
        self._frame_index += 1
        self._commands = []
        self.reset_transform()
        self._record("clear", width=self.width, height=self.height)

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        self._record("fill_rect", x=x, y=y, w=w, h=h, color=color)

    def stroke_rect(
        self, x: float, y: float, w: float, h: float, color: str, line_width: float = 1.0
    ) -> None:
        self._record("stroke_rect", x=x, y=y, w=w, h=h, color=color, line_width=line_width)

    def fill_arc(
        self, cx: float, cy: float, radius: float, start: float, end: float, color: str
    ) -> None:
        self._record("fill_arc", cx=cx, cy=cy, radius=radius, start=start, end=end, color=color)

    def stroke_arc(
        self,
        cx: float,
        cy: float,
        radius: float,
        start: float,
        end: float,
        color: str,
        line_width: float = 1.0,
    ) -> None:
        self._record(
            "stroke_arc",
            cx=cx,
            cy=cy,
            radius=radius,
            start=start,
            end=end,
            color=color,
            line_width=line_width,
        )

    def fill_path(self, points: Sequence[tuple[float, float]], color: str) -> None:
        self._record("fill_path", points=_freeze_points(points), color=color)

    def stroke_path(
        self,
        points: Sequence[tuple[float, float]],
        color: str,
        line_width: float = 1.0,
        closed: bool = False,
    ) -> None:
        self._record(
            "stroke_path",
            points=_freeze_points(points),
            color=color,
            line_width=line_width,
            closed=closed,
        )

    def fill_text(
        self,
        text: str,
        x: float,
        y: float,
        color: str,
        font_size: float = 16.0,
        align: str = "left",
        baseline: str = "top",
        max_width: float | None = None,
    ) -> None:
        self._record(
            "fill_text",
            text=text,
            x=x,
            y=y,
            color=color,
            font_size=font_size,
            align=align,
            baseline=baseline,
            max_width=max_width,
        )

    def _record(self, kind: str, **data: object) -> None:
        self._commands.append(
            RenderCommand(kind=kind, transform=self.transform, data=tuple(data.items()))
        )


def _freeze_points(points: Sequence[tuple[float, float]]) -> tuple[tuple[float, float], ...]:
    return tuple((float(px), float(py)) for px, py in points)


__all__ = ["RecordingSurface"]
