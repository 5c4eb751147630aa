from __future__ import annotations

import logging
import sys
from types import ModuleType, SimpleNamespace

import pytest

from canvasui.runtime.config import load_runtime_config
from canvasui.scene.drag import DRAG_IDLE
from canvasui.scene.node import Node
from canvasui.scene.surface import Surface
from canvasui.window.rendercanvas_host import (
    BACKEND_ERRORS,
    apply_window_mode,
    create_render_canvas,
    create_render_canvas_host,
    run_backend_loop,
    stop_backend_loop,
)
from tests.canvasui.conftest import FakeCanvas


class _FakeGlfw:
    FALSE = 0
    TRUE = 1
    RESIZABLE = 1

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.monitor = object()
        self.video_mode = SimpleNamespace(
            size=SimpleNamespace(width=1920, height=1080), refresh_rate=60
        )

    def set_window_attrib(self, window, attr, value) -> None:
        _ = (window, attr, value)
        self.calls.append("set_window_attrib")

    def maximize_window(self, window) -> None:
        _ = window
        self.calls.append("maximize_window")

    def get_primary_monitor(self):
        return self.monitor

    def get_video_mode(self, monitor):
        _ = monitor
        return self.video_mode

    def set_window_monitor(self, *args) -> None:
        self.calls.append(f"set_window_monitor:{args[2:6]}")

    def get_monitor_workarea(self, monitor):
        _ = monitor
        return (1, 2, 3, 4)


def _install_fake_rendercanvas_glfw(monkeypatch: pytest.MonkeyPatch, glfw_obj: _FakeGlfw) -> None:
    rendercanvas_mod = ModuleType("rendercanvas")
    glfw_mod = ModuleType("rendercanvas.glfw")
    glfw_mod.glfw = glfw_obj
    rendercanvas_mod.glfw = glfw_mod
    monkeypatch.setitem(sys.modules, "rendercanvas", rendercanvas_mod)
    monkeypatch.setitem(sys.modules, "rendercanvas.glfw", glfw_mod)


class _Loop:
    def __init__(self) -> None:
        self.ran = 0
        self.stopped = 0

    def run(self) -> None:
        self.ran += 1

    def stop(self) -> None:
        self.stopped += 1


def _host(surface: Surface | None = None, canvas: FakeCanvas | None = None):
    config = load_runtime_config(env={"CANVASUI_RENDER_BACKGROUND": "black"})
    return create_render_canvas_host(
        surface if surface is not None else Surface(),
        config=config,
        canvas=canvas if canvas is not None else FakeCanvas(),
    )


@pytest.mark.parametrize(
    ("mode", "expected"),
    [
        ("maximized", ["set_window_attrib", "maximize_window"]),
        ("windowed", ["set_window_attrib"]),
        ("fullscreen", ["set_window_attrib", "set_window_monitor:(0, 0, 1920, 1080)"]),
        ("borderless", ["set_window_attrib", "set_window_monitor:(1, 2, 3, 4)"]),
    ],
)
def test_apply_window_mode_uses_glfw(monkeypatch, mode: str, expected: list[str]) -> None:
    glfw = _FakeGlfw()
    _install_fake_rendercanvas_glfw(monkeypatch, glfw)

    apply_window_mode(SimpleNamespace(_window=object()), mode)

    assert glfw.calls == expected


def test_apply_window_mode_without_native_window_is_noop(monkeypatch) -> None:
    glfw = _FakeGlfw()
    _install_fake_rendercanvas_glfw(monkeypatch, glfw)

    apply_window_mode(SimpleNamespace(), "fullscreen")

    assert glfw.calls == []


def test_apply_window_mode_tolerates_backend_errors(
    monkeypatch, caplog: pytest.LogCaptureFixture
) -> None:
    glfw = _FakeGlfw()

    def _boom(*args) -> None:
        raise RuntimeError("no monitor")

    glfw.set_window_monitor = _boom
    _install_fake_rendercanvas_glfw(monkeypatch, glfw)

    with caplog.at_level(logging.WARNING, logger="canvasui.window.rendercanvas_host"):
        apply_window_mode(SimpleNamespace(_window=object()), "borderless")

    assert glfw.calls == ["set_window_attrib"]
    record = caplog.records[-1]
    assert record.getMessage() == "window_mode_apply_failed mode=borderless"
    assert record.exc_info is not None
    assert record.exc_info[0] is RuntimeError


def test_backend_loop_helpers() -> None:
    loop = _Loop()
    rc_auto = SimpleNamespace(loop=loop)

    run_backend_loop(rc_auto)
    stop_backend_loop(rc_auto)

    assert (loop.ran, loop.stopped) == (1, 1)
    with pytest.raises(RuntimeError):
        run_backend_loop(SimpleNamespace())


def test_host_registers_draw_callback_and_presents_bitmap() -> None:
    surface = Surface()
    surface.add_node(Node(10, 10, 20, 20, "red"))
    canvas = FakeCanvas(size=(200.0, 100.0))
    host = _host(surface, canvas)

    assert canvas.draw_function == host.draw_frame
    canvas.draw_function()

    bitmap = canvas.bitmaps[-1]
    assert bitmap.shape == (100, 200, 4)
    assert tuple(bitmap[15, 15]) == (255, 0, 0, 255)
    assert tuple(bitmap[80, 150]) == (0, 0, 0, 255)
    assert host.frame_index == 1


def test_input_requests_redraw() -> None:
    canvas = FakeCanvas()
    _host(canvas=canvas)
    before = canvas.draw_requests

    canvas.emit("pointer_move", x=1, y=1)

    assert canvas.draw_requests == before + 1


def test_resize_event_resizes_raster() -> None:
    canvas = FakeCanvas()
    host = _host(canvas=canvas)

    canvas.emit("resize", width=320.7, height=0, pixel_ratio=2.0)

    assert (host.raster.width, host.raster.height) == (320, 1)
    assert host.raster.pixels.shape == (1, 320, 4)


def test_close_event_cancels_drag_and_close_is_idempotent() -> None:
    surface = Surface()
    surface.add_node(Node(0, 0, 20, 20, draggable=True))
    canvas = FakeCanvas()
    host = _host(surface, canvas)
    canvas.emit("pointer_down", x=5, y=5, button=1)

    canvas.emit("close")
    host.close()

    assert surface.drag_state is DRAG_IDLE
    assert canvas.closed is False


def test_close_closes_canvas() -> None:
    canvas = FakeCanvas()
    host = _host(canvas=canvas)
    host.set_title("demo")

    host.close()

    assert canvas.closed is True
    assert canvas.title == "demo"


def test_create_render_canvas_passes_window_config(monkeypatch) -> None:
    created: dict[str, object] = {}

    class _RenderCanvas:
        def __init__(self, **kwargs) -> None:
            created.update(kwargs)

    class _GPUCanvasContext:
        def set_physical_size(self, width: int, height: int) -> None:
            created["physical"] = (width, height)

    rendercanvas_mod = ModuleType("rendercanvas")
    auto_mod = ModuleType("rendercanvas.auto")
    auto_mod.RenderCanvas = _RenderCanvas
    auto_mod.loop = _Loop()
    rendercanvas_mod.auto = auto_mod
    wgpu_mod = ModuleType("wgpu")
    wgpu_mod._classes = SimpleNamespace(GPUCanvasContext=_GPUCanvasContext)
    monkeypatch.setitem(sys.modules, "rendercanvas", rendercanvas_mod)
    monkeypatch.setitem(sys.modules, "rendercanvas.auto", auto_mod)
    monkeypatch.setitem(sys.modules, "wgpu", wgpu_mod)
    config = load_runtime_config(
        env={
            "CANVASUI_WINDOW_WIDTH": "640",
            "CANVASUI_WINDOW_HEIGHT": "480",
            "CANVASUI_WINDOW_TITLE": "Demo",
            "CANVASUI_RENDER_UPDATE_MODE": "continuous",
        }
    )

    canvas, rc_auto = create_render_canvas(config)
    _GPUCanvasContext().set_physical_size(0, -3)

    assert isinstance(canvas, _RenderCanvas)
    assert rc_auto is auto_mod
    assert created["size"] == (640, 480)
    assert created["title"] == "Demo"
    assert created["update_mode"] == "continuous"
    assert created["physical"] == (1, 1)


def test_backend_error_set_is_bounded() -> None:
    assert ImportError in BACKEND_ERRORS
    assert KeyboardInterrupt not in BACKEND_ERRORS
    assert Exception not in BACKEND_ERRORS


def test_failed_redraw_request_is_logged_not_raised(caplog: pytest.LogCaptureFixture) -> None:
    canvas = FakeCanvas()
    host = _host(canvas=canvas)

    def _broken_request_draw(draw_function=None) -> None:
        raise RuntimeError("canvas closed")

    canvas.request_draw = _broken_request_draw
    with caplog.at_level(logging.DEBUG, logger="canvasui.window.rendercanvas_host"):
        host.request_redraw()

    record = caplog.records[-1]
    assert record.getMessage() == "request_draw_failed"
    assert record.exc_info[0] is RuntimeError
