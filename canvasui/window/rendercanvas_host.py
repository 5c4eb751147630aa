"""Rendercanvas/GLFW window host presenting a raster surface as a bitmap."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from canvasui.input.input_controller import InputController
from canvasui.rendering.raster_surface import RasterSurface
from canvasui.runtime.config import RuntimeConfig, get_runtime_config
from canvasui.scene.surface import Surface

logger = logging.getLogger(__name__)

# Failures tolerated on optional backend paths: window-mode tweaks, redraw
# requests and the wgpu size guard. Anything else propagates.
BACKEND_ERRORS: tuple[type[Exception], ...] = (
    RuntimeError,
    OSError,
    ValueError,
    TypeError,
    AttributeError,
    ImportError,
)


def _log_backend_error(event: str, *, level: int = logging.DEBUG) -> None:
    logger.log(level, event, exc_info=True)


def apply_window_mode(canvas: Any, window_mode: str) -> None:
    """Apply a window mode via GLFW when the backend exposes its window handle."""
    try:
        import rendercanvas.glfw as rc_glfw
    except BACKEND_ERRORS:
        _log_backend_error("window_mode_glfw_unavailable")
        return
    window = getattr(canvas, "_window", None)
    if window is None:
        return
    glfw = rc_glfw.glfw
    mode = window_mode.strip().lower()

    try:
        if mode == "maximized":
            glfw.set_window_attrib(window, glfw.RESIZABLE, glfw.TRUE)
            glfw.maximize_window(window)
            return
        if mode == "windowed":
            glfw.set_window_attrib(window, glfw.RESIZABLE, glfw.TRUE)
            return
        monitor = glfw.get_primary_monitor()
        if not monitor:
            glfw.maximize_window(window)
            return
        glfw.set_window_attrib(window, glfw.RESIZABLE, glfw.FALSE)
        if mode == "fullscreen":
            video_mode = glfw.get_video_mode(monitor)
            if video_mode is not None:
                glfw.set_window_monitor(
                    window,
                    monitor,
                    0,
                    0,
                    int(video_mode.size.width),
                    int(video_mode.size.height),
                    int(video_mode.refresh_rate),
                )
            return
        if mode == "borderless":
            x, y, w, h = glfw.get_monitor_workarea(monitor)
            glfw.set_window_monitor(window, None, int(x), int(y), int(w), int(h), 0)
    except BACKEND_ERRORS:
        _log_backend_error(f"window_mode_apply_failed mode={mode}", level=logging.WARNING)


def run_backend_loop(rc_auto: Any) -> None:
    """Run rendercanvas backend loop."""
    loop = getattr(rc_auto, "loop", None)
    if loop is not None and hasattr(loop, "run"):
        loop.run()
        return
    run_func = getattr(rc_auto, "run", None)
    if callable(run_func):
        run_func()
        return
    raise RuntimeError("rendercanvas.auto did not expose a runnable loop.")


def stop_backend_loop(rc_auto: Any) -> None:
    """Stop rendercanvas backend loop when supported."""
    loop = getattr(rc_auto, "loop", None)
    if loop is not None and hasattr(loop, "stop"):
        loop.stop()


@dataclass(slots=True)
class RenderCanvasHost:
    """Drives one ``Surface`` on a rendercanvas canvas.

    Each draw renders the scene into a ``RasterSurface`` sized to the canvas'
    logical size and hands the framebuffer to the canvas' bitmap context.
    Pointer coordinates from rendercanvas are logical too, so hit-testing and
    painting share one coordinate space.
    """

    canvas: Any
    surface: Surface
    raster: RasterSurface
    input: InputController
    _rc_auto: Any | None = field(default=None, repr=False)
    _context: Any | None = field(default=None, repr=False)
    _closed: bool = field(default=False, repr=False)

    def __post_init__(self) -> None:
        add_handler = getattr(self.canvas, "add_event_handler", None)
        if callable(add_handler):
            add_handler(self._on_resize, "resize")
            add_handler(self._on_close, "close")
        if self.input.on_input is None:
            self.input.on_input = self.request_redraw
        self.input.bind(self.canvas)
        request_draw = getattr(self.canvas, "request_draw", None)
        if callable(request_draw):
            request_draw(self.draw_frame)

    @property
    def frame_index(self) -> int:
        return self.surface.frame_index

    def draw_frame(self) -> None:
        """Render the scene and present it; registered as the canvas draw callback."""
        self._sync_size()
        self.surface.render_frame(self.raster)
        context = self._bitmap_context()
        if context is None:
            return
        context.set_bitmap(self.raster.pixels)

    def request_redraw(self) -> None:
        request_draw = getattr(self.canvas, "request_draw", None)
        if not callable(request_draw):
            return
        try:
            request_draw()
        except BACKEND_ERRORS:
            _log_backend_error("request_draw_failed")

    def set_title(self, title: str) -> None:
        setter = getattr(self.canvas, "set_title", None)
        if callable(setter):
            setter(title)

    def run_loop(self) -> None:
        if self._rc_auto is None:
            return
        run_backend_loop(self._rc_auto)

    def stop_loop(self) -> None:
        if self._rc_auto is None:
            return
        stop_backend_loop(self._rc_auto)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.surface.cancel_drag()
        closer = getattr(self.canvas, "close", None)
        if callable(closer):
            closer()

    def _bitmap_context(self) -> Any | None:
        if self._context is not None:
            return self._context
        get_context = getattr(self.canvas, "get_context", None)
        if not callable(get_context):
            raise RuntimeError("Canvas does not provide rendering contexts.")
        self._context = get_context("bitmap")
        return self._context

    def _sync_size(self) -> None:
        getter = getattr(self.canvas, "get_logical_size", None)
        if not callable(getter):
            return
        width, height = getter()
        self._resize(width, height)

    def _resize(self, width: object, height: object) -> None:
        if not isinstance(width, (int, float)) or not isinstance(height, (int, float)):
            return
        w = max(1, int(width))
        h = max(1, int(height))
        if (w, h) != (self.raster.width, self.raster.height):
            self.raster.resize_target(w, h)
            logger.debug("host_resized width=%d height=%d", w, h)

    def _on_resize(self, event: dict[str, Any]) -> None:
        self._resize(event.get("width"), event.get("height"))
        self.request_redraw()

    def _on_close(self, event: dict[str, Any]) -> None:
        _ = event
        self._closed = True
        self.surface.cancel_drag()
        logger.info("host_closed frames=%d", self.surface.frame_index)


def create_render_canvas(config: RuntimeConfig) -> tuple[Any, Any]:
    """Create a rendercanvas canvas from window config; return ``(canvas, rc_auto)``."""
    _install_wgpu_physical_size_guard()
    try:
        import rendercanvas.auto as rc_auto
    except ImportError as exc:
        raise RuntimeError(
            "Render canvas backend unavailable. Install a desktop backend such as glfw."
        ) from exc
    window = config.window
    canvas = rc_auto.RenderCanvas(
        size=(int(window.width), int(window.height)),
        title=window.title,
        update_mode=window.update_mode,
        max_fps=float(window.max_fps),
        vsync=bool(window.vsync),
    )
    apply_window_mode(canvas, window.window_mode)
    return canvas, rc_auto


def create_render_canvas_host(
    surface: Surface,
    *,
    config: RuntimeConfig | None = None,
    canvas: Any | None = None,
) -> RenderCanvasHost:
    """Wire a surface, raster target and input controller onto a canvas.

    Pass ``canvas`` to host on an existing (or fake) canvas; otherwise one is
    created from ``config``.
    """
    resolved = config if config is not None else get_runtime_config()
    rc_auto: Any | None = None
    if canvas is None:
        canvas, rc_auto = create_render_canvas(resolved)
    raster = RasterSurface(
        resolved.window.width, resolved.window.height, background=resolved.render.background
    )
    controller = InputController(surface, trace_enabled=resolved.input.trace_enabled)
    return RenderCanvasHost(
        canvas=canvas, surface=surface, raster=raster, input=controller, _rc_auto=rc_auto
    )


def _install_wgpu_physical_size_guard() -> None:
    """Clamp non-positive physical sizes so minimizing does not crash wgpu presentation."""
    try:
        from wgpu import _classes as wgpu_classes
    except ImportError:
        _log_backend_error("wgpu_unavailable")
        return
    target_cls = getattr(wgpu_classes, "GPUCanvasContext", None)
    if target_cls is None:
        return
    original = getattr(target_cls, "set_physical_size", None)
    if not callable(original):
        return
    if getattr(target_cls, "_canvasui_physical_size_guard_installed", False):
        return

    def _guarded_set_physical_size(self: object, width: int, height: int) -> None:
        original(self, max(1, int(width)), max(1, int(height)))

    setattr(target_cls, "set_physical_size", _guarded_set_physical_size)
    setattr(target_cls, "_canvasui_physical_size_guard_installed", True)


__all__ = [
    "BACKEND_ERRORS",
    "RenderCanvasHost",
    "apply_window_mode",
    "create_render_canvas",
    "create_render_canvas_host",
    "run_backend_loop",
    "stop_backend_loop",
]
