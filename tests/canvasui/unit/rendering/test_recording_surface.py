from __future__ import annotations

from canvasui.api.render_snapshot import IDENTITY_AFFINE
from canvasui.rendering.recording_surface import RecordingSurface


def test_clear_starts_a_new_frame() -> None:
    ctx = RecordingSurface(320, 200)
    ctx.clear()
    ctx.fill_rect(0, 0, 1, 1, "red")
    ctx.clear()

    snapshot = ctx.snapshot()
    assert snapshot.frame_index == 1
    assert snapshot.kinds() == ("clear",)
    assert snapshot.commands[0].payload() == {"width": 320, "height": 200}


def test_commands_capture_active_transform() -> None:
    ctx = RecordingSurface()
    ctx.clear()
    with ctx.saved():
        ctx.translate(5, 6)
        ctx.fill_text("hi", 0, 0, "black", align="center")
    ctx.stroke_path([(0, 0), (1, 1)], "blue", line_width=3)

    text, path = ctx.commands[1], ctx.commands[2]
    assert text.transform.apply(0, 0) == (5.0, 6.0)
    assert text.payload()["align"] == "center"
    assert path.transform == IDENTITY_AFFINE
    assert path.payload()["points"] == ((0.0, 0.0), (1.0, 1.0))
    assert path.payload()["closed"] is False
