"""Demo scene exercising every shape variant."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from canvasui.rendering.recording_surface import RecordingSurface
from canvasui.runtime.config import initialize_runtime_config
from canvasui.runtime.logging import setup_logging
from canvasui.scene.surface import Surface
from canvasui.shapes import Box, Button, Circle, CircleBox, Frame, Line, Pen, Slider, TextBox, Triangle

logger = logging.getLogger(__name__)


def build_demo_surface() -> Surface:
    """Return a surface populated with one of each shape."""
    surface = Surface()

    surface.add_node(Box(40, 40, 120, 80, "tomato", draggable=True))
    surface.add_node(CircleBox(200, 40, 80, 80, "gold", draggable=True))
    surface.add_node(Circle(320, 40, 40, "skyblue", draggable=True))
    surface.add_node(Triangle(440, 40, 100, 80, "mediumseagreen", draggable=True))
    surface.add_node(Pen(580, 40, 40, 80, "orange", draggable=True))
    surface.add_node(Line(660, 80, 160, 4, "navy", draggable=True))

    group = Frame(40, 200, 360, 160, "#eeeeee", draggable=True)
    group.add(Box(20, 20, 80, 50, "plum"))
    pinned = Box(140, 20, 80, 50, "khaki")
    pinned.disable_parent_offset_following()
    group.add(pinned)
    group.add(TextBox(20, 90, 200, 30, "drag the grey frame"))
    surface.add_node(group)

    status = TextBox(440, 200, 260, 30, "clicks: 0")
    surface.add_node(status)
    counter = {"clicks": 0}

    def _on_click() -> None:
        counter["clicks"] += 1
        status.text = f"clicks: {counter['clicks']}"
        status.cursor_position = len(status.text)
        logger.info("demo_button_clicked count=%d", counter["clicks"])

    surface.add_node(Button(440, 250, 140, 40, "Click me", on_click=_on_click))
    surface.add_node(TextBox(440, 310, 260, 30, "edit me", editable=True))

    readout = TextBox(440, 420, 260, 30, "value: 50")
    surface.add_node(readout)

    def _on_value(value: float) -> None:
        readout.text = f"value: {value:.0f}"

    surface.add_node(Slider(440, 380, 260, 20, on_value_change=_on_value))
    return surface


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="canvasui demo scene")
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Render one frame into a recording surface and print its command kinds.",
    )
    args = parser.parse_args(argv)

    surface = build_demo_surface()
    if args.headless:
        config = initialize_runtime_config()
        setup_logging(config.logging)
        recorder = RecordingSurface(config.window.width, config.window.height)
        surface.render_frame(recorder)
        snapshot = recorder.snapshot()
        print(f"frame={snapshot.frame_index} commands={len(snapshot.commands)}")
        print(" ".join(snapshot.kinds()))
        return 0

    from canvasui.runtime.entrypoint import run

    run(surface)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
