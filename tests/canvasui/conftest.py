from __future__ import annotations

from collections.abc import Mapping

from canvasui.api.input_events import PointerEvent
from canvasui.scene.node import Node


class RecordingNode(Node):
    """Node that records lifecycle hook calls."""

    def __init__(self, *args, **kwargs) -> None:
        self.hooks: list[str] = []
        self.updates: list[tuple[object, object]] = []
        super().__init__(*args, **kwargs)

    def mounted(self) -> None:
        self.hooks.append("mounted")

    def updated(
        self,
        previous: Mapping[str, object] | None = None,
        current: Mapping[str, object] | None = None,
    ) -> None:
        self.hooks.append("updated")
        self.updates.append((previous, current))

    def unmounting(self) -> None:
        self.hooks.append("unmounting")


class FakeCanvas:
    def __init__(self, size: tuple[float, float] = (200.0, 100.0)) -> None:
        self.handlers: dict[str, list] = {}
        self.size = size
        self.draw_function = None
        self.draw_requests = 0
        self.bitmaps: list[object] = []
        self.closed = False
        self.title = ""

    def add_event_handler(self, handler, event_type: str) -> None:
        self.handlers.setdefault(event_type, []).append(handler)

    def emit(self, event_type: str, **payload) -> None:
        event = {"event_type": event_type, **payload}
        for handler in self.handlers.get(event_type, []):
            handler(event)

    def request_draw(self, draw_function=None) -> None:
        if draw_function is not None:
            self.draw_function = draw_function
        self.draw_requests += 1

    def get_logical_size(self) -> tuple[float, float]:
        return self.size

    def get_context(self, kind: str) -> "FakeBitmapContext":
        assert kind == "bitmap"
        return FakeBitmapContext(self)

    def set_title(self, title: str) -> None:
        self.title = title

    def close(self) -> None:
        self.closed = True


class FakeBitmapContext:
    def __init__(self, canvas: FakeCanvas) -> None:
        self._canvas = canvas

    def set_bitmap(self, bitmap) -> None:
        self._canvas.bitmaps.append(bitmap)


def pointer(event_type: str, x: float, y: float, button: int = 1) -> PointerEvent:
    return PointerEvent(event_type, float(x), float(y), button=button)
