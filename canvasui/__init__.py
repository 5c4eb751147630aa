"""Retained-mode 2D scene graph with pointer routing and drag handling."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from canvasui.runtime.config import RuntimeConfig
    from canvasui.scene.surface import Surface
    from canvasui.window.rendercanvas_host import RenderCanvasHost


def run(surface: "Surface", *, config: "RuntimeConfig | None" = None) -> "RenderCanvasHost":
    """Host ``surface`` in a desktop window until it closes."""
    from canvasui.runtime.entrypoint import run as runtime_run

    return runtime_run(surface, config=config)


__all__ = ["run"]
