"""Single-line text box with optional in-place editing."""

from __future__ import annotations

from canvasui.api.drawing import DrawingSurface
from canvasui.api.input_events import CLICK, KeyEvent
from canvasui.scene.node import Node
from canvasui.scene.routing import MouseEvent

EDIT_MARKER = "✎"


class TextBox(Node):
    """Text label that toggles editing on click when ``editable``.

    While editing it owns the surface's keyboard focus: ``key_down`` events
    move the cursor or delete, ``char`` events insert text.
    """

    default_color = "white"

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        text: str = "",
        text_color: str = "black",
        color: str | None = None,
        editable: bool = False,
    ) -> None:
        super().__init__(x, y, width, height, color)
        self.text = text
        self.text_color = text_color
        self.editable = editable
        self.is_editing = False
        self.cursor_position = len(text)

    @property
    def value(self) -> str:
        return self.text

    def handle_mouse_event(self, event_type: str, event: MouseEvent) -> None:
        super().handle_mouse_event(event_type, event)
        if event_type != CLICK or not self.editable:
            return
        self.is_editing = not self.is_editing
        if event.focus is None:
            return
        if self.is_editing:
            event.focus.request(self)
        else:
            event.focus.release(self)

    def on_focus_lost(self) -> None:
        self.is_editing = False

    def handle_key(self, event: KeyEvent) -> bool:
        if not self.is_editing:
            return False
        if event.event_type == "char":
            if len(event.value) != 1 or not event.value.isprintable():
                return False
            self._insert(event.value)
            return True
        if event.event_type != "key_down":
            return False
        key = event.value
        if key == "Backspace":
            if self.cursor_position > 0:
                cut = self.cursor_position
                self.text = self.text[: cut - 1] + self.text[cut:]
                self.cursor_position -= 1
                self.updated()
            return True
        if key == "ArrowLeft":
            self.cursor_position = max(0, self.cursor_position - 1)
            return True
        if key == "ArrowRight":
            self.cursor_position = min(len(self.text), self.cursor_position + 1)
            return True
        return False

    def _insert(self, value: str) -> None:
        cut = self.cursor_position
        self.text = self.text[:cut] + value + self.text[cut:]
        self.cursor_position += len(value)
        self.updated()

    def display_text(self) -> str:
        cursor = "|" if self.is_editing else ""
        cut = self.cursor_position
        return self.text[:cut] + cursor + self.text[cut:]

    def paint(self, ctx: DrawingSurface) -> None:
        super().paint(ctx)
        half_w = self.width / 2.0
        half_h = self.height / 2.0
        ctx.fill_text(
            self.display_text(),
            -half_w + 5.0,
            -half_h + 5.0,
            self.text_color,
            font_size=16.0,
            align="left",
            baseline="top",
            max_width=self.width - 10.0,
        )
        if self.editable:
            ctx.fill_rect(half_w - 20.0, -half_h, 20.0, self.height, "rgba(0, 0, 0, 0.1)")
            ctx.fill_text(EDIT_MARKER, half_w - 15.0, -half_h + 5.0, self.text_color)


__all__ = ["EDIT_MARKER", "TextBox"]
