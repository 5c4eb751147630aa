"""Window hosting over rendercanvas."""

from canvasui.window.rendercanvas_host import (
    RenderCanvasHost,
    apply_window_mode,
    create_render_canvas,
    create_render_canvas_host,
)

__all__ = [
    "RenderCanvasHost",
    "apply_window_mode",
    "create_render_canvas",
    "create_render_canvas_host",
]
